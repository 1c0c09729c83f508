"""
Student GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import StudentRecord
from .person import Person

if TYPE_CHECKING:
    from .enrollment import Enrollment


@strawberry.type
class Student(Person):
    """Student type for GraphQL API."""

    roll_number: str
    cgpa: float | None

    @classmethod
    def from_record(cls, record: StudentRecord) -> "Student":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            gender=record.gender,
            created_at=record.created_at,
            roll_number=record.roll_number,
            cgpa=record.cgpa,
        )

    @strawberry.field
    async def enrollments(
        self, info: strawberry.Info
    ) -> list[Annotated["Enrollment", strawberry.lazy(".enrollment")]]:
        """Get enrollments of this student."""
        from ..resolvers.student import resolve_student_enrollments

        return await resolve_student_enrollments(self, info)
