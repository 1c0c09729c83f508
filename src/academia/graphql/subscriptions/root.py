"""
Root GraphQL subscription definitions
"""

from collections.abc import AsyncGenerator
from contextlib import aclosing

import strawberry

from ..types.enrollment import Enrollment


@strawberry.type
class Subscription:
    """Root GraphQL subscription type."""

    @strawberry.subscription(name="studentEnrolled")
    async def student_enrolled(self, info: strawberry.Info) -> AsyncGenerator[Enrollment, None]:
        """Receive every enrollment created while subscribed."""
        from ..resolvers.enrollment import subscribe_student_enrolled

        # Closing this generator on disconnect must also deregister the subscriber
        async with aclosing(subscribe_student_enrolled(info)) as events:
            async for enrollment in events:
                yield enrollment
