"""
Professor GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import ProfessorRecord
from .person import Person

if TYPE_CHECKING:
    from .course import Course


@strawberry.type
class Professor(Person):
    """Professor type for GraphQL API."""

    specialization: str

    @classmethod
    def from_record(cls, record: ProfessorRecord) -> "Professor":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            email=record.email,
            gender=record.gender,
            created_at=record.created_at,
            specialization=record.specialization,
        )

    @strawberry.field
    async def courses(
        self, info: strawberry.Info
    ) -> list[Annotated["Course", strawberry.lazy(".course")]]:
        """Get courses taught by this professor."""
        from ..resolvers.professor import resolve_professor_courses

        return await resolve_professor_courses(self, info)
