"""
Root GraphQL query definitions
"""

import strawberry

from ..types.course import Course
from ..types.dashboard import DashboardStats
from ..types.department import Department
from ..types.enums import CourseLevel
from ..types.professor import Professor
from ..types.student import Student


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def students(self, info: strawberry.Info) -> list[Student]:
        """Get all students in creation order."""
        from ..resolvers.student import resolve_students

        return await resolve_students(info)

    @strawberry.field
    async def student(self, info: strawberry.Info, id: strawberry.ID) -> Student | None:
        """Get a student by ID."""
        from ..resolvers.student import resolve_student_by_id

        return await resolve_student_by_id(info, str(id))

    @strawberry.field
    async def professors(self, info: strawberry.Info) -> list[Professor]:
        """Get all professors."""
        from ..resolvers.professor import resolve_professors

        return await resolve_professors(info)

    @strawberry.field
    async def professor(self, info: strawberry.Info, id: strawberry.ID) -> Professor | None:
        """Get a professor by ID."""
        from ..resolvers.professor import resolve_professor_by_id

        return await resolve_professor_by_id(info, str(id))

    @strawberry.field
    async def courses(
        self, info: strawberry.Info, level: CourseLevel | None = None
    ) -> list[Course]:
        """Get all courses, optionally filtered by level."""
        from ..resolvers.course import resolve_courses

        return await resolve_courses(info, level)

    @strawberry.field
    async def course(self, info: strawberry.Info, id: strawberry.ID) -> Course | None:
        """Get a course by ID."""
        from ..resolvers.course import resolve_course_by_id

        return await resolve_course_by_id(info, str(id))

    @strawberry.field
    async def departments(self, info: strawberry.Info) -> list[Department]:
        """Get all departments."""
        from ..resolvers.department import resolve_departments

        return await resolve_departments(info)

    @strawberry.field
    async def dashboard_stats(self, info: strawberry.Info) -> DashboardStats:
        """Get live record counts."""
        from ..resolvers.dashboard import resolve_dashboard_stats

        return await resolve_dashboard_stats(info)
