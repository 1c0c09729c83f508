from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import CourseLevel, CourseRecord
from ..context import get_store

if TYPE_CHECKING:
    from ..mutations.root import CourseInput
    from ..types.course import Course
    from ..types.enrollment import Enrollment
    from ..types.professor import Professor

logger = get_logger(__name__)


# Query resolvers
async def resolve_courses(info: strawberry.Info, level: CourseLevel | None = None) -> list[Course]:
    """Resolve all courses, or only those at ``level``, in creation order."""
    from ..types.course import Course as CourseType

    courses = get_store(info).courses
    if level is None:
        records = courses.all()
    else:
        records = courses.find_all_where(lambda c: c.level == level)
    return [CourseType.from_record(record) for record in records]


async def resolve_course_by_id(info: strawberry.Info, id: str) -> Course | None:
    record = get_store(info).courses.find_by_id(id)
    if record is None:
        logger.info("Course not found", course_id=id)
        return None

    from ..types.course import Course as CourseType

    return CourseType.from_record(record)


# Field resolvers
async def resolve_course_professor(course: Course, info: strawberry.Info) -> Professor:
    record = get_store(info).professors.find_by_id(course.professor_id)
    if record is None:
        raise NotFoundError("Professor", course.professor_id)

    from ..types.professor import Professor as ProfessorType

    return ProfessorType.from_record(record)


async def resolve_course_enrollments(course: Course, info: strawberry.Info) -> list[Enrollment]:
    from ..types.enrollment import Enrollment as EnrollmentType

    store = get_store(info)
    return [EnrollmentType.from_record(e) for e in store.enrollments_for_course(str(course.id))]


# Mutation resolvers
async def create_course(info: strawberry.Info, input: CourseInput) -> Course:
    """Create a course owned by an existing professor.

    Raises:
        NotFoundError: If ``input.professor_id`` does not reference a professor
    """
    store = get_store(info)
    professor_id = str(input.professor_id)
    if store.professors.find_by_id(professor_id) is None:
        logger.info("Cannot create course for unknown professor", professor_id=professor_id)
        raise NotFoundError("Professor", professor_id)

    record = store.courses.insert(
        CourseRecord(
            title=input.title,
            description=input.description,
            level=input.level,
            credits=input.credits,
            professor_id=professor_id,
        )
    )
    logger.info("Course created", course_id=record.id, professor_id=professor_id)

    from ..types.course import Course as CourseType

    return CourseType.from_record(record)
