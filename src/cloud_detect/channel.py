"""Race primitives shared by the orchestrator and the probes.

A detection run owns one ``DeliveryChannel`` (where the winning probe reports)
and one ``Countdown`` (which fires once every probe has returned). Both are
only touched from the event loop thread, so plain attributes are enough.
"""

from __future__ import annotations

import asyncio

from loguru import logger

from .models import ProviderId


class DeliveryChannel:
    """Single-slot channel carrying the first positive report of a race.

    Sends never block: once the slot is taken, or once the channel has been
    closed by the orchestrator, further reports are dropped.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[ProviderId] = asyncio.Queue(maxsize=1)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def reporter(self) -> Reporter:
        """Return a sending end to hand to a probe."""
        return Reporter(self)

    def offer(self, provider_id: ProviderId) -> bool:
        """Try to deliver *provider_id*. Returns False if it was dropped."""
        if self._closed:
            return False
        try:
            self._queue.put_nowait(provider_id)
        except asyncio.QueueFull:
            return False
        return True

    async def receive(self) -> ProviderId:
        """Wait for the first delivered provider."""
        return await self._queue.get()

    def receive_nowait(self) -> ProviderId | None:
        """Return a delivered provider if one is waiting, else None."""
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            return None

    def close(self) -> None:
        """Stop accepting reports. Anything still queued is discarded."""
        self._closed = True
        while not self._queue.empty():
            self._queue.get_nowait()


class Reporter:
    """Sending end of a ``DeliveryChannel``, one per probe."""

    __slots__ = ("_channel",)

    def __init__(self, channel: DeliveryChannel) -> None:
        self._channel = channel

    def send(self, provider_id: ProviderId) -> bool:
        """Report a confirmed provider.

        Never raises. Returns False when the report was dropped because the
        race is already decided.
        """
        delivered = self._channel.offer(provider_id)
        if not delivered:
            logger.trace(f"Dropped report for {provider_id}: race already decided")
        return delivered


class Countdown:
    """Counter of outstanding probes that fires a one-shot event at zero.

    Whichever caller takes the count from one to zero sets the event; a
    countdown created at zero starts out fired.
    """

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self._remaining = count
        self._fired = asyncio.Event()
        if count == 0:
            self._fired.set()

    @property
    def remaining(self) -> int:
        return self._remaining

    def is_fired(self) -> bool:
        return self._fired.is_set()

    def decrement(self) -> bool:
        """Count one probe as finished. True for the caller that reached zero."""
        if self._remaining == 0:
            return False
        self._remaining -= 1
        if self._remaining == 0:
            self._fired.set()
            return True
        return False

    async def wait(self) -> None:
        """Wait until every probe has finished."""
        await self._fired.wait()
