"""
Sample dataset for local development.

Records are written straight into the store, so no enrollment events are
published while seeding.
"""

from __future__ import annotations

from .logging import get_logger
from .store import (
    CourseLevel,
    CourseRecord,
    DepartmentRecord,
    EnrollmentRecord,
    EnrollmentStatus,
    EntityStore,
    Gender,
    ProfessorRecord,
    StudentRecord,
)

logger = get_logger(__name__)


def seed_demo_data(store: EntityStore) -> None:
    """Populate an empty store with professors, a department, courses and students.

    Does nothing if the store already holds students or professors.
    """
    if len(store.students) or len(store.professors):
        logger.info("Store already populated, skipping demo seed")
        return

    turing = store.professors.insert(
        ProfessorRecord(
            name="Dr. Alan Turing",
            email="alan.turing@example.edu",
            gender=Gender.MALE,
            specialization="Theory of Computation",
        )
    )
    hopper = store.professors.insert(
        ProfessorRecord(
            name="Dr. Grace Hopper",
            email="grace.hopper@example.edu",
            gender=Gender.FEMALE,
            specialization="Compilers",
        )
    )

    cs101 = store.courses.insert(
        CourseRecord(
            title="CS101",
            description="Introduction to Computer Science",
            level=CourseLevel.BEGINNER,
            credits=4,
            professor_id=turing.id,
        )
    )
    cs240 = store.courses.insert(
        CourseRecord(
            title="CS240",
            description="Programming Language Implementation",
            level=CourseLevel.INTERMEDIATE,
            credits=3,
            professor_id=hopper.id,
        )
    )
    cs410 = store.courses.insert(
        CourseRecord(
            title="CS410",
            description="Computability and Complexity",
            level=CourseLevel.ADVANCED,
            credits=3,
            professor_id=turing.id,
        )
    )

    store.departments.insert(
        DepartmentRecord(
            name="Computer Science",
            head_id=turing.id,
            course_ids=(cs101.id, cs240.id, cs410.id),
        )
    )

    ada = store.students.insert(
        StudentRecord(
            name="Ada Lovelace",
            email="ada@example.edu",
            gender=Gender.FEMALE,
            roll_number="CS-2024-001",
            cgpa=3.9,
        )
    )
    sam = store.students.insert(
        StudentRecord(
            name="Sam Rivera",
            email="sam@example.edu",
            gender=Gender.OTHER,
            roll_number="CS-2024-002",
        )
    )

    store.enrollments.insert(EnrollmentRecord(student_id=ada.id, course_id=cs101.id))
    store.enrollments.insert(
        EnrollmentRecord(
            student_id=ada.id,
            course_id=cs240.id,
            status=EnrollmentStatus.COMPLETED,
            grade="A",
        )
    )
    store.enrollments.insert(EnrollmentRecord(student_id=sam.id, course_id=cs101.id))

    logger.info("Demo data seeded", **store.stats().model_dump())
