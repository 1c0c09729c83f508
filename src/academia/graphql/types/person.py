"""
Person GraphQL interface, realized by Student and Professor
"""

from datetime import datetime

import strawberry

from .enums import Gender


@strawberry.interface
class Person:
    """Fields shared by every person on record."""

    id: strawberry.ID
    name: str
    email: str
    gender: Gender
    created_at: datetime
