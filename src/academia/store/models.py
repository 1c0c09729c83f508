"""Pydantic records held by the entity store."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


class Gender(Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class CourseLevel(Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class EnrollmentStatus(Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    DROPPED = "DROPPED"


class Record(BaseModel):
    """Base for stored records. ``id`` is assigned by the owning collection."""

    model_config = ConfigDict(frozen=True)

    id: str = ""


class StudentRecord(Record):
    name: str
    email: str
    gender: Gender
    roll_number: str
    cgpa: float = 0.0
    created_at: datetime = Field(default_factory=utcnow)


class ProfessorRecord(Record):
    name: str
    email: str
    gender: Gender
    specialization: str
    created_at: datetime = Field(default_factory=utcnow)


class CourseRecord(Record):
    title: str
    description: str
    level: CourseLevel
    credits: int
    professor_id: str


class EnrollmentRecord(Record):
    student_id: str
    course_id: str
    status: EnrollmentStatus = EnrollmentStatus.ACTIVE
    enrolled_at: datetime = Field(default_factory=utcnow)
    grade: str | None = None


class DepartmentRecord(Record):
    name: str
    head_id: str | None = None
    course_ids: tuple[str, ...] = ()


class DashboardCounts(BaseModel):
    total_students: int
    total_professors: int
    total_courses: int
    total_enrollments: int
