"""
Dashboard resolvers for GraphQL API
"""

import strawberry

from ..context import get_store
from ..types.dashboard import DashboardStats


async def resolve_dashboard_stats(info: strawberry.Info) -> DashboardStats:
    """Count every collection at query time; nothing is cached."""
    counts = get_store(info).stats()
    return DashboardStats(
        total_students=counts.total_students,
        total_professors=counts.total_professors,
        total_courses=counts.total_courses,
        total_enrollments=counts.total_enrollments,
    )
