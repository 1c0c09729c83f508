from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import ProfessorRecord
from ..context import get_store

if TYPE_CHECKING:
    from ..mutations.root import ProfessorInput
    from ..types.course import Course
    from ..types.professor import Professor

logger = get_logger(__name__)


async def resolve_professors(info: strawberry.Info) -> list[Professor]:
    from ..types.professor import Professor as ProfessorType

    return [ProfessorType.from_record(record) for record in get_store(info).professors.all()]


async def resolve_professor_by_id(info: strawberry.Info, id: str) -> Professor | None:
    record = get_store(info).professors.find_by_id(id)
    if record is None:
        logger.info("Professor not found", professor_id=id)
        return None

    from ..types.professor import Professor as ProfessorType

    return ProfessorType.from_record(record)


async def resolve_professor_courses(professor: Professor, info: strawberry.Info) -> list[Course]:
    """Courses are derived by scanning for a matching professor ID."""
    from ..types.course import Course as CourseType

    store = get_store(info)
    return [CourseType.from_record(c) for c in store.courses_for_professor(str(professor.id))]


async def create_professor(info: strawberry.Info, input: ProfessorInput) -> Professor:
    record = get_store(info).professors.insert(
        ProfessorRecord(
            name=input.name,
            email=input.email,
            gender=input.gender,
            specialization=input.specialization,
        )
    )
    logger.info("Professor created", professor_id=record.id)

    from ..types.professor import Professor as ProfessorType

    return ProfessorType.from_record(record)
