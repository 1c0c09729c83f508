"""
Dashboard GraphQL type definitions
"""

import strawberry


@strawberry.type
class DashboardStats:
    """Live record counts, recomputed for every query."""

    total_students: int
    total_professors: int
    total_courses: int
    total_enrollments: int
