"""
Tests for GraphQL operation name extraction used in request logs.
"""

import pytest

from academia.middleware import operation_name_from_payload


@pytest.mark.parametrize(
    "payload,expected",
    [
        ({"operationName": "GetStudents", "query": "query X { students { id } }"}, "GetStudents"),
        ({"query": "query ListCourses { courses { id } }"}, "ListCourses"),
        ({"query": "mutation AddStudent($i: StudentInput!) { createStudent(input: $i) { id } }"},
         "mutation:AddStudent"),
        ({"query": "subscription OnEnrolled { studentEnrolled { id } }"},
         "subscription:OnEnrolled"),
        ({"query": "{ students { id } }"}, "unnamed_operation"),
        ({"query": "query IntrospectionQuery { __schema { types { name } } }"}, "__introspection"),
        ({}, None),
    ],
)
def test_operation_name_from_payload(payload, expected):
    assert operation_name_from_payload(payload) == expected
