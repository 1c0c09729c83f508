from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ..context import get_store

if TYPE_CHECKING:
    from ..types.course import Course
    from ..types.department import Department
    from ..types.professor import Professor


async def resolve_departments(info: strawberry.Info) -> list[Department]:
    from ..types.department import Department as DepartmentType

    return [DepartmentType.from_record(record) for record in get_store(info).departments.all()]


async def resolve_department_head(department: Department, info: strawberry.Info) -> Professor | None:
    if department.head_id is None:
        return None
    record = get_store(info).professors.find_by_id(department.head_id)
    if record is None:
        return None

    from ..types.professor import Professor as ProfessorType

    return ProfessorType.from_record(record)


async def resolve_department_courses(department: Department, info: strawberry.Info) -> list[Course]:
    from ..types.course import Course as CourseType

    store = get_store(info)
    return [CourseType.from_record(c) for c in store.courses_for_department(str(department.id))]
