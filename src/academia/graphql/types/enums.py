"""
GraphQL enum registrations for the store enums
"""

import strawberry

from ...store import models

Gender = strawberry.enum(models.Gender, description="Gender of a student or professor.")
CourseLevel = strawberry.enum(models.CourseLevel, description="Difficulty level of a course.")
EnrollmentStatus = strawberry.enum(
    models.EnrollmentStatus, description="Lifecycle state of an enrollment."
)
