"""
Enrollment GraphQL type definitions
"""

from datetime import datetime
from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import EnrollmentRecord
from .enums import EnrollmentStatus

if TYPE_CHECKING:
    from .course import Course
    from .student import Student


@strawberry.type
class Enrollment:
    """Enrollment type for GraphQL API."""

    id: strawberry.ID
    status: EnrollmentStatus
    enrolled_at: datetime
    grade: str | None
    student_id: strawberry.Private[str]
    course_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: EnrollmentRecord) -> "Enrollment":
        return cls(
            id=strawberry.ID(record.id),
            status=record.status,
            enrolled_at=record.enrolled_at,
            grade=record.grade,
            student_id=record.student_id,
            course_id=record.course_id,
        )

    @strawberry.field
    async def student(
        self, info: strawberry.Info
    ) -> Annotated["Student", strawberry.lazy(".student")]:
        """Get the enrolled student."""
        from ..resolvers.enrollment import resolve_enrollment_student

        return await resolve_enrollment_student(self, info)

    @strawberry.field
    async def course(self, info: strawberry.Info) -> Annotated["Course", strawberry.lazy(".course")]:
        """Get the course enrolled in."""
        from ..resolvers.enrollment import resolve_enrollment_course

        return await resolve_enrollment_course(self, info)
