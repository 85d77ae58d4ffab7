"""Detector that races every provider probe and returns the first match.

All probes in a roster start at once. The first probe to confirm its
provider wins; if every probe returns without confirming, the result is
``ProviderId.UNKNOWN``. ``detect_with_timeout`` adds an overall deadline
whose expiry is reported as ``None``, distinct from ``UNKNOWN``.

Usage::

    provider = await detect()
    provider = await detect_with_timeout(2.0)   # None if undetermined

    detector = Detector(build_roster(["aws", "gcp"]))
    provider = await detector.detect()
"""

from __future__ import annotations

import asyncio
from time import monotonic

from loguru import logger

from .channel import Countdown, DeliveryChannel, Reporter
from .core.exceptions import ConfigurationError
from .models import DetectionOutcome, ProviderId
from .providers import Provider
from .roster import ProviderRoster, default_roster


class Detector:
    """Run a roster of probes concurrently and resolve to one provider.

    The roster is only read, so one detector can serve concurrent
    ``detect()`` calls; every call gets its own channel and countdown.
    """

    def __init__(self, roster: ProviderRoster) -> None:
        self._roster = roster

    @property
    def roster(self) -> ProviderRoster:
        return self._roster

    def supported_providers(self) -> list[str]:
        """Display names of every provider in the roster."""
        return self._roster.names()

    async def detect(self) -> ProviderId:
        """Detect the host's cloud provider, ``UNKNOWN`` if none matched."""
        start = monotonic()
        channel = DeliveryChannel()
        countdown = Countdown(len(self._roster))

        tasks = [
            asyncio.create_task(
                self._run_probe(provider, channel.reporter(), countdown),
                name=f"cloud-detect:{provider.identity()}",
            )
            for provider in self._roster
        ]

        try:
            provider_id = await self._race(channel, countdown)
        finally:
            # Late reports are dropped; pending probes are cancelled, not awaited
            channel.close()
            for task in tasks:
                if not task.done():
                    task.cancel()

        logger.debug(f"Detected provider '{provider_id}' in {monotonic() - start:.3f}s")
        return provider_id

    async def detect_with_timeout(self, duration: float) -> DetectionOutcome:
        """Detect with a deadline of *duration* seconds.

        Returns None if the deadline elapsed before the race resolved.

        Raises:
            ConfigurationError: if *duration* is not positive.
        """
        if duration <= 0:
            raise ConfigurationError(f"Detection timeout must be positive, got {duration}")
        try:
            return await asyncio.wait_for(self.detect(), timeout=duration)
        except TimeoutError:
            logger.debug(f"Provider detection timed out after {duration}s")
            return None

    @staticmethod
    async def _run_probe(provider: Provider, reporter: Reporter, countdown: Countdown) -> None:
        try:
            await provider.identify(reporter)
        except Exception as e:
            # A probe that raises counts as "not detected"
            logger.debug(f"Provider '{provider.identity()}' failed: {e!r}")
        finally:
            if countdown.decrement():
                logger.trace("All providers have finished identifying")

    @staticmethod
    async def _race(channel: DeliveryChannel, countdown: Countdown) -> ProviderId:
        received = asyncio.ensure_future(channel.receive())
        finished = asyncio.ensure_future(countdown.wait())
        try:
            await asyncio.wait({received, finished}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for waiter in (received, finished):
                if not waiter.done():
                    waiter.cancel()

        # A report always beats the completion signal, even when both are ready
        if received.done() and not received.cancelled():
            provider_id = received.result()
        else:
            provider_id = channel.receive_nowait()

        if provider_id is None:
            return ProviderId.UNKNOWN

        logger.trace(f"Received result from channel: {provider_id}")
        return provider_id


async def detect(timeout: float | None = None) -> ProviderId:
    """Detect the host's cloud provider using the default roster.

    With a *timeout*, an undetermined result is collapsed to ``UNKNOWN``;
    use ``detect_with_timeout`` to tell the two apart.
    """
    detector = Detector(default_roster())
    if timeout is None:
        return await detector.detect()
    provider_id = await detector.detect_with_timeout(timeout)
    return ProviderId.UNKNOWN if provider_id is None else provider_id


async def detect_with_timeout(duration: float) -> DetectionOutcome:
    """Detect using the default roster; None if *duration* seconds elapse first."""
    return await Detector(default_roster()).detect_with_timeout(duration)


def supported_providers() -> list[str]:
    """Display names of every provider in the default roster."""
    return default_roster().names()
