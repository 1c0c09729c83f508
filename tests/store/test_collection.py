"""
Tests for the in-memory record collection.
"""

import pytest
from pydantic import ValidationError

from academia.store import Collection, Gender, StudentRecord


def make_student(name: str, roll: str = "R-1") -> StudentRecord:
    return StudentRecord(
        name=name, email=f"{name.lower()}@example.edu", gender=Gender.OTHER, roll_number=roll
    )


@pytest.fixture
def students() -> Collection[StudentRecord]:
    return Collection("students")


class TestCollection:
    """Tests for Collection."""

    def test_insert_assigns_id(self, students):
        stored = students.insert(make_student("Ada"))

        assert stored.id
        assert stored.name == "Ada"
        assert len(students) == 1

    def test_insert_ignores_supplied_id(self, students):
        stored = students.insert(make_student("Ada").model_copy(update={"id": "fixed"}))

        assert stored.id != "fixed"

    def test_ids_are_unique(self, students):
        ids = {students.insert(make_student(f"S{i}")).id for i in range(50)}

        assert len(ids) == 50

    def test_find_by_id(self, students):
        stored = students.insert(make_student("Ada"))

        assert students.find_by_id(stored.id) == stored
        assert students.find_by_id("missing") is None

    def test_all_preserves_insertion_order(self, students):
        names = ["Cleo", "Ada", "Bo"]
        for name in names:
            students.insert(make_student(name))

        assert [s.name for s in students.all()] == names

    def test_find_all_where_preserves_order(self, students):
        for name in ["Ann", "Bob", "Amy", "Ben"]:
            students.insert(make_student(name))

        matches = students.find_all_where(lambda s: s.name.startswith("A"))

        assert [s.name for s in matches] == ["Ann", "Amy"]

    def test_remove_by_id(self, students):
        stored = students.insert(make_student("Ada"))

        assert students.remove_by_id(stored.id) is True
        assert students.find_by_id(stored.id) is None
        assert len(students) == 0

    def test_remove_unknown_id(self, students):
        students.insert(make_student("Ada"))

        assert students.remove_by_id("missing") is False
        assert len(students) == 1

    def test_replace_keeps_position(self, students):
        first = students.insert(make_student("Ada"))
        students.insert(make_student("Bo"))

        students.replace(first.model_copy(update={"cgpa": 3.5}))

        assert [s.name for s in students.all()] == ["Ada", "Bo"]
        assert students.find_by_id(first.id).cgpa == 3.5

    def test_replace_unknown_raises(self, students):
        with pytest.raises(KeyError, match="students: missing"):
            students.replace(make_student("Ada").model_copy(update={"id": "missing"}))

    def test_records_are_frozen(self, students):
        stored = students.insert(make_student("Ada"))

        with pytest.raises(ValidationError):
            stored.name = "Changed"
