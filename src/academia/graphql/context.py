"""
Accessors for the dependencies carried in the GraphQL context
"""

from typing import Any

import strawberry

from ..events import BroadcastChannel
from ..store import EntityStore


def build_context(store: EntityStore, channel: BroadcastChannel, **extra: Any) -> dict[str, Any]:
    """Build the context dict resolvers expect."""
    return {"store": store, "channel": channel, **extra}


def get_store(info: strawberry.Info) -> EntityStore:
    return info.context["store"]


def get_channel(info: strawberry.Info) -> BroadcastChannel:
    return info.context["channel"]
