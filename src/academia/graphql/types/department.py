"""
Department GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...store.models import DepartmentRecord

if TYPE_CHECKING:
    from .course import Course
    from .professor import Professor


@strawberry.type
class Department:
    """Department type for GraphQL API. Read-only; no mutation creates one."""

    id: strawberry.ID
    name: str
    head_id: strawberry.Private[str | None]

    @classmethod
    def from_record(cls, record: DepartmentRecord) -> "Department":
        return cls(id=strawberry.ID(record.id), name=record.name, head_id=record.head_id)

    @strawberry.field
    async def head(
        self, info: strawberry.Info
    ) -> Annotated["Professor", strawberry.lazy(".professor")] | None:
        """Get the professor heading this department."""
        from ..resolvers.department import resolve_department_head

        return await resolve_department_head(self, info)

    @strawberry.field
    async def courses(
        self, info: strawberry.Info
    ) -> list[Annotated["Course", strawberry.lazy(".course")]]:
        """Get courses offered by this department."""
        from ..resolvers.department import resolve_department_courses

        return await resolve_department_courses(self, info)
