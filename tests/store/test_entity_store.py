"""
Tests for EntityStore back-reference accessors and stats.
"""

from academia.store import (
    CourseLevel,
    CourseRecord,
    DepartmentRecord,
    EnrollmentRecord,
    EntityStore,
    Gender,
    StudentRecord,
)


def add_course(store: EntityStore, title: str, professor_id: str) -> CourseRecord:
    return store.courses.insert(
        CourseRecord(
            title=title,
            description=f"{title} description",
            level=CourseLevel.BEGINNER,
            credits=3,
            professor_id=professor_id,
        )
    )


def add_student(store: EntityStore, name: str) -> StudentRecord:
    return store.students.insert(
        StudentRecord(name=name, email=f"{name}@example.edu", gender=Gender.MALE, roll_number=name)
    )


class TestEntityStore:
    """Tests for EntityStore."""

    def test_new_store_is_empty(self, store):
        stats = store.stats()

        assert stats.total_students == 0
        assert stats.total_professors == 0
        assert stats.total_courses == 0
        assert stats.total_enrollments == 0
        assert store.departments.all() == []

    def test_courses_for_professor(self, store, professor):
        a = add_course(store, "A", professor.id)
        add_course(store, "B", "someone-else")
        c = add_course(store, "C", professor.id)

        assert [x.id for x in store.courses_for_professor(professor.id)] == [a.id, c.id]

    def test_enrollments_for_student_and_course(self, store, professor):
        ada = add_student(store, "ada")
        bo = add_student(store, "bo")
        course = add_course(store, "A", professor.id)
        e1 = store.enrollments.insert(EnrollmentRecord(student_id=ada.id, course_id=course.id))
        e2 = store.enrollments.insert(EnrollmentRecord(student_id=bo.id, course_id=course.id))

        assert [e.id for e in store.enrollments_for_student(ada.id)] == [e1.id]
        assert [e.id for e in store.enrollments_for_course(course.id)] == [e1.id, e2.id]

    def test_courses_for_department(self, store, professor):
        a = add_course(store, "A", professor.id)
        add_course(store, "B", professor.id)
        dept = store.departments.insert(DepartmentRecord(name="CS", course_ids=(a.id,)))

        assert [c.id for c in store.courses_for_department(dept.id)] == [a.id]
        assert store.courses_for_department("missing") == []

    def test_stats_counts_live(self, store, professor):
        ada = add_student(store, "ada")
        add_student(store, "bo")
        course = add_course(store, "A", professor.id)
        store.enrollments.insert(EnrollmentRecord(student_id=ada.id, course_id=course.id))

        stats = store.stats()
        assert (stats.total_students, stats.total_professors) == (2, 1)
        assert (stats.total_courses, stats.total_enrollments) == (1, 1)

        store.students.remove_by_id(ada.id)
        assert store.stats().total_students == 1
