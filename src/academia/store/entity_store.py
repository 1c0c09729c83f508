"""
Entity store holding every collection of the running application.
"""

from .collection import Collection
from .models import (
    CourseRecord,
    DashboardCounts,
    DepartmentRecord,
    EnrollmentRecord,
    ProfessorRecord,
    StudentRecord,
)


class EntityStore:
    """
    Owner of the student, professor, course, enrollment and department
    collections.

    One instance lives for the lifetime of the application and is handed to
    resolvers through the GraphQL context. Cross-references between records
    are plain ids, resolved by the accessor methods below when a parent is
    serialized.
    """

    def __init__(self):
        self.students: Collection[StudentRecord] = Collection("students")
        self.professors: Collection[ProfessorRecord] = Collection("professors")
        self.courses: Collection[CourseRecord] = Collection("courses")
        self.enrollments: Collection[EnrollmentRecord] = Collection("enrollments")
        self.departments: Collection[DepartmentRecord] = Collection("departments")

    # Back-reference accessors
    def enrollments_for_student(self, student_id: str) -> list[EnrollmentRecord]:
        return self.enrollments.find_all_where(lambda e: e.student_id == student_id)

    def enrollments_for_course(self, course_id: str) -> list[EnrollmentRecord]:
        return self.enrollments.find_all_where(lambda e: e.course_id == course_id)

    def courses_for_professor(self, professor_id: str) -> list[CourseRecord]:
        return self.courses.find_all_where(lambda c: c.professor_id == professor_id)

    def courses_for_department(self, department_id: str) -> list[CourseRecord]:
        department = self.departments.find_by_id(department_id)
        if department is None:
            return []
        wanted = set(department.course_ids)
        return self.courses.find_all_where(lambda c: c.id in wanted)

    def stats(self) -> DashboardCounts:
        """Live counts of the four primary collections."""
        return DashboardCounts(
            total_students=len(self.students),
            total_professors=len(self.professors),
            total_courses=len(self.courses),
            total_enrollments=len(self.enrollments),
        )
