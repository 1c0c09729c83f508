"""
Tests for the in-process broadcast channel.
"""

import asyncio
from contextlib import aclosing

import pytest

from academia.events import STUDENT_ENROLLED, BroadcastChannel


async def wait_for_subscribers(channel: BroadcastChannel, topic: str, count: int) -> None:
    for _ in range(100):
        if channel.subscriber_count(topic) == count:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"expected {count} subscribers on {topic}")


class TestBroadcastChannel:
    """Tests for BroadcastChannel."""

    def test_publish_without_subscribers(self):
        channel = BroadcastChannel()

        assert channel.publish(STUDENT_ENROLLED, "event") == 0
        assert channel.subscriber_count(STUDENT_ENROLLED) == 0

    @pytest.mark.asyncio
    async def test_fan_out_to_all_subscribers(self):
        channel = BroadcastChannel()
        first = channel.subscribe(STUDENT_ENROLLED)
        second = channel.subscribe(STUDENT_ENROLLED)
        first_next = asyncio.ensure_future(first.__anext__())
        second_next = asyncio.ensure_future(second.__anext__())
        await wait_for_subscribers(channel, STUDENT_ENROLLED, 2)

        assert channel.publish(STUDENT_ENROLLED, {"id": "1"}) == 2

        assert await asyncio.wait_for(first_next, 1) == {"id": "1"}
        assert await asyncio.wait_for(second_next, 1) == {"id": "1"}
        await first.aclose()
        await second.aclose()

    @pytest.mark.asyncio
    async def test_events_delivered_in_publish_order(self):
        channel = BroadcastChannel()
        events = channel.subscribe(STUDENT_ENROLLED)
        first = asyncio.ensure_future(events.__anext__())
        await wait_for_subscribers(channel, STUDENT_ENROLLED, 1)

        channel.publish(STUDENT_ENROLLED, 1)
        channel.publish(STUDENT_ENROLLED, 2)

        assert await asyncio.wait_for(first, 1) == 1
        assert await asyncio.wait_for(events.__anext__(), 1) == 2
        await events.aclose()

    @pytest.mark.asyncio
    async def test_no_replay_for_late_subscribers(self):
        channel = BroadcastChannel()
        channel.publish(STUDENT_ENROLLED, "missed")

        events = channel.subscribe(STUDENT_ENROLLED)
        pending = asyncio.ensure_future(events.__anext__())
        await wait_for_subscribers(channel, STUDENT_ENROLLED, 1)
        channel.publish(STUDENT_ENROLLED, "seen")

        assert await asyncio.wait_for(pending, 1) == "seen"
        await events.aclose()

    @pytest.mark.asyncio
    async def test_closing_deregisters(self):
        channel = BroadcastChannel()

        async with aclosing(channel.subscribe(STUDENT_ENROLLED)) as events:
            pending = asyncio.ensure_future(events.__anext__())
            await wait_for_subscribers(channel, STUDENT_ENROLLED, 1)
            channel.publish(STUDENT_ENROLLED, "x")
            await asyncio.wait_for(pending, 1)

        assert channel.subscriber_count(STUDENT_ENROLLED) == 0
        assert channel.publish(STUDENT_ENROLLED, "y") == 0

    @pytest.mark.asyncio
    async def test_topics_are_isolated(self):
        channel = BroadcastChannel()
        events = channel.subscribe("OTHER")
        pending = asyncio.ensure_future(events.__anext__())
        await wait_for_subscribers(channel, "OTHER", 1)

        assert channel.publish(STUDENT_ENROLLED, "x") == 0
        assert not pending.done()

        pending.cancel()
        with pytest.raises(asyncio.CancelledError):
            await pending
        await events.aclose()
        assert channel.subscriber_count("OTHER") == 0
