from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import TYPE_CHECKING

import strawberry

from ...errors import NotFoundError
from ...events import STUDENT_ENROLLED
from ...logging import get_logger
from ...store import EnrollmentRecord, EnrollmentStatus
from ..context import get_channel, get_store

if TYPE_CHECKING:
    from ..mutations.root import EnrollmentInput
    from ..types.course import Course
    from ..types.enrollment import Enrollment
    from ..types.student import Student

logger = get_logger(__name__)


# Field resolvers
async def resolve_enrollment_student(enrollment: Enrollment, info: strawberry.Info) -> Student:
    record = get_store(info).students.find_by_id(enrollment.student_id)
    if record is None:
        raise NotFoundError("Student", enrollment.student_id)

    from ..types.student import Student as StudentType

    return StudentType.from_record(record)


async def resolve_enrollment_course(enrollment: Enrollment, info: strawberry.Info) -> Course:
    record = get_store(info).courses.find_by_id(enrollment.course_id)
    if record is None:
        raise NotFoundError("Course", enrollment.course_id)

    from ..types.course import Course as CourseType

    return CourseType.from_record(record)


# Mutation resolvers
async def enroll_student(info: strawberry.Info, input: EnrollmentInput) -> Enrollment:
    """Enroll a student in a course and notify ``studentEnrolled`` subscribers.

    The student and course IDs are stored as given; neither is checked
    against the store.
    """
    record = get_store(info).enrollments.insert(
        EnrollmentRecord(student_id=str(input.student_id), course_id=str(input.course_id))
    )

    from ..types.enrollment import Enrollment as EnrollmentType

    enrollment = EnrollmentType.from_record(record)
    receivers = get_channel(info).publish(STUDENT_ENROLLED, enrollment)
    logger.info(
        "Student enrolled",
        enrollment_id=record.id,
        student_id=record.student_id,
        course_id=record.course_id,
        subscribers_notified=receivers,
    )
    return enrollment


async def update_enrollment_status(
    info: strawberry.Info, id: str, status: EnrollmentStatus
) -> Enrollment:
    """Change an enrollment's status.

    Raises:
        NotFoundError: If no enrollment has this ID
    """
    enrollments = get_store(info).enrollments
    record = enrollments.find_by_id(id)
    if record is None:
        logger.info("Cannot update status of unknown enrollment", enrollment_id=id)
        raise NotFoundError("Enrollment", id)

    updated = enrollments.replace(record.model_copy(update={"status": status}))
    logger.info("Enrollment status updated", enrollment_id=id, status=status.value)

    from ..types.enrollment import Enrollment as EnrollmentType

    return EnrollmentType.from_record(updated)


# Subscription resolvers
def subscribe_student_enrolled(info: strawberry.Info) -> AsyncGenerator[Enrollment, None]:
    """Stream of every enrollment created after the subscriber registers."""
    return get_channel(info).subscribe(STUDENT_ENROLLED)
