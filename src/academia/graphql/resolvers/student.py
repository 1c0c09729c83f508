from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...logging import get_logger
from ...store import StudentRecord
from ..context import get_store

if TYPE_CHECKING:
    from ..mutations.root import StudentInput
    from ..types.enrollment import Enrollment
    from ..types.student import Student

logger = get_logger(__name__)


# Query resolvers
async def resolve_students(info: strawberry.Info) -> list[Student]:
    from ..types.student import Student as StudentType

    return [StudentType.from_record(record) for record in get_store(info).students.all()]


async def resolve_student_by_id(info: strawberry.Info, id: str) -> Student | None:
    """Resolve a student by ID; an unknown ID yields null."""
    record = get_store(info).students.find_by_id(id)
    if record is None:
        logger.info("Student not found", student_id=id)
        return None

    from ..types.student import Student as StudentType

    return StudentType.from_record(record)


# Field resolvers
async def resolve_student_enrollments(student: Student, info: strawberry.Info) -> list[Enrollment]:
    from ..types.enrollment import Enrollment as EnrollmentType

    store = get_store(info)
    return [EnrollmentType.from_record(e) for e in store.enrollments_for_student(str(student.id))]


# Mutation resolvers
async def create_student(info: strawberry.Info, input: StudentInput) -> Student:
    """Create a student. CGPA starts at 0; email and roll number are not checked for duplicates."""
    record = get_store(info).students.insert(
        StudentRecord(
            name=input.name,
            email=input.email,
            gender=input.gender,
            roll_number=input.roll_number,
        )
    )
    logger.info("Student created", student_id=record.id, roll_number=record.roll_number)

    from ..types.student import Student as StudentType

    return StudentType.from_record(record)


async def update_student_cgpa(info: strawberry.Info, id: str, cgpa: float) -> Student:
    """Set a student's CGPA.

    Raises:
        NotFoundError: If no student has this ID
    """
    students = get_store(info).students
    record = students.find_by_id(id)
    if record is None:
        logger.info("Cannot update CGPA of unknown student", student_id=id)
        raise NotFoundError("Student", id)

    updated = students.replace(record.model_copy(update={"cgpa": cgpa}))
    logger.info("Student CGPA updated", student_id=id, cgpa=cgpa)

    from ..types.student import Student as StudentType

    return StudentType.from_record(updated)


async def delete_student(info: strawberry.Info, id: str) -> bool:
    """Delete a student. Returns False when the ID is unknown.

    Enrollments that reference the student are left in place.
    """
    removed = get_store(info).students.remove_by_id(id)
    logger.info("Student delete requested", student_id=id, removed=removed)
    return removed
