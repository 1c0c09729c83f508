"""
Course GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import CourseRecord
from .enums import CourseLevel

if TYPE_CHECKING:
    from .enrollment import Enrollment
    from .professor import Professor


@strawberry.type
class Course:
    """Course type for GraphQL API."""

    id: strawberry.ID
    title: str
    description: str
    level: CourseLevel
    credits: int
    professor_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: CourseRecord) -> "Course":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            description=record.description,
            level=record.level,
            credits=record.credits,
            professor_id=record.professor_id,
        )

    @strawberry.field
    async def professor(
        self, info: strawberry.Info
    ) -> Annotated["Professor", strawberry.lazy(".professor")]:
        """Get the professor who owns this course."""
        from ..resolvers.course import resolve_course_professor

        return await resolve_course_professor(self, info)

    @strawberry.field
    async def enrollments(
        self, info: strawberry.Info
    ) -> list[Annotated["Enrollment", strawberry.lazy(".enrollment")]]:
        """Get enrollments in this course."""
        from ..resolvers.course import resolve_course_enrollments

        return await resolve_course_enrollments(self, info)
