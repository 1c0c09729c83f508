"""In-memory entity store."""

from .collection import Collection
from .entity_store import EntityStore
from .models import (
    CourseLevel,
    CourseRecord,
    DashboardCounts,
    DepartmentRecord,
    EnrollmentRecord,
    EnrollmentStatus,
    Gender,
    ProfessorRecord,
    StudentRecord,
)

__all__ = [
    "Collection",
    "CourseLevel",
    "CourseRecord",
    "DashboardCounts",
    "DepartmentRecord",
    "EnrollmentRecord",
    "EnrollmentStatus",
    "EntityStore",
    "Gender",
    "ProfessorRecord",
    "StudentRecord",
]
