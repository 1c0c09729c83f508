"""In-process broadcast channel feeding GraphQL subscriptions."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from typing import Any

from .logging import get_logger

logger = get_logger(__name__)

STUDENT_ENROLLED = "STUDENT_ENROLLED"


class BroadcastChannel:
    """
    Fan-out of published events to every subscriber registered on a topic.

    Each subscriber owns an unbounded queue. ``publish`` puts the event on
    every queue registered for the topic, in registration order, and returns
    without waiting for delivery. Events published while nobody is
    subscribed are dropped; there is no replay.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[asyncio.Queue[Any]]] = {}

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    def publish(self, topic: str, event: Any) -> int:
        """Deliver ``event`` to all current subscribers of ``topic``.

        Returns:
            Number of subscribers the event was handed to
        """
        queues = list(self._subscribers.get(topic, []))
        for queue in queues:
            queue.put_nowait(event)
        logger.debug("Event published", topic=topic, receivers=len(queues))
        return len(queues)

    def _register(self, topic: str) -> asyncio.Queue[Any]:
        queue: asyncio.Queue[Any] = asyncio.Queue()
        self._subscribers.setdefault(topic, []).append(queue)
        logger.info("Subscriber registered", topic=topic, subscribers=self.subscriber_count(topic))
        return queue

    def _unregister(self, topic: str, queue: asyncio.Queue[Any]) -> None:
        queues = self._subscribers.get(topic, [])
        if queue in queues:
            queues.remove(queue)
        if not queues:
            self._subscribers.pop(topic, None)
        logger.info("Subscriber removed", topic=topic, subscribers=self.subscriber_count(topic))

    async def subscribe(self, topic: str) -> AsyncIterator[Any]:
        """Yield events published on ``topic`` until the consumer stops iterating.

        Registration happens on first iteration. Closing the generator (for
        example when a websocket client disconnects) removes the subscriber.
        """
        queue = self._register(topic)
        try:
            while True:
                yield await queue.get()
        finally:
            self._unregister(topic, queue)
