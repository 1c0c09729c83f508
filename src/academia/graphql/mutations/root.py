"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.course import Course
from ..types.enrollment import Enrollment
from ..types.enums import CourseLevel, EnrollmentStatus, Gender
from ..types.professor import Professor
from ..types.student import Student


# Input types for mutations
@strawberry.input
class StudentInput:
    """Input for creating a student."""

    name: str
    email: str
    gender: Gender
    roll_number: str


@strawberry.input
class ProfessorInput:
    """Input for creating a professor."""

    name: str
    email: str
    gender: Gender
    specialization: str


@strawberry.input
class CourseInput:
    """Input for creating a course."""

    title: str
    description: str
    level: CourseLevel
    credits: int
    professor_id: strawberry.ID


@strawberry.input
class EnrollmentInput:
    """Input for enrolling a student in a course."""

    student_id: strawberry.ID
    course_id: strawberry.ID


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Student mutations
    @strawberry.mutation(name="createStudent")
    async def create_student(self, info: strawberry.Info, input: StudentInput) -> Student:
        """Create a new student."""
        from ..resolvers.student import create_student

        return await create_student(info, input)

    @strawberry.mutation(name="updateStudentCGPA")
    async def update_student_cgpa(
        self, info: strawberry.Info, id: strawberry.ID, cgpa: float
    ) -> Student:
        """Update a student's CGPA."""
        from ..resolvers.student import update_student_cgpa

        return await update_student_cgpa(info, str(id), cgpa)

    @strawberry.mutation(name="deleteStudent")
    async def delete_student(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a student."""
        from ..resolvers.student import delete_student

        return await delete_student(info, str(id))

    # Professor mutations
    @strawberry.mutation(name="createProfessor")
    async def create_professor(self, info: strawberry.Info, input: ProfessorInput) -> Professor:
        """Create a new professor."""
        from ..resolvers.professor import create_professor

        return await create_professor(info, input)

    # Course mutations
    @strawberry.mutation(name="createCourse")
    async def create_course(self, info: strawberry.Info, input: CourseInput) -> Course:
        """Create a new course owned by an existing professor."""
        from ..resolvers.course import create_course

        return await create_course(info, input)

    # Enrollment mutations
    @strawberry.mutation(name="enrollStudent")
    async def enroll_student(self, info: strawberry.Info, input: EnrollmentInput) -> Enrollment:
        """Enroll a student in a course."""
        from ..resolvers.enrollment import enroll_student

        return await enroll_student(info, input)

    @strawberry.mutation(name="updateEnrollmentStatus")
    async def update_enrollment_status(
        self, info: strawberry.Info, id: strawberry.ID, status: EnrollmentStatus
    ) -> Enrollment:
        """Change the status of an enrollment."""
        from ..resolvers.enrollment import update_enrollment_status

        return await update_enrollment_status(info, str(id), status)
