"""Tests for the delivery channel and countdown."""

import asyncio

import pytest

from cloud_detect.channel import Countdown, DeliveryChannel
from cloud_detect.models import ProviderId


class TestDeliveryChannel:
    def test_first_send_is_kept(self):
        channel = DeliveryChannel()
        reporter = channel.reporter()
        assert reporter.send(ProviderId.AWS) is True
        assert reporter.send(ProviderId.GCP) is False
        assert channel.receive_nowait() is ProviderId.AWS
        assert channel.receive_nowait() is None

    def test_send_after_close_is_dropped(self):
        channel = DeliveryChannel()
        channel.close()
        assert channel.closed
        assert channel.reporter().send(ProviderId.AZURE) is False
        assert channel.receive_nowait() is None

    def test_close_discards_pending_value(self):
        channel = DeliveryChannel()
        channel.reporter().send(ProviderId.OCI)
        channel.close()
        assert channel.receive_nowait() is None

    @pytest.mark.asyncio
    async def test_receive_waits_for_send(self):
        channel = DeliveryChannel()
        reporter = channel.reporter()

        async def later():
            await asyncio.sleep(0.01)
            reporter.send(ProviderId.VULTR)

        task = asyncio.create_task(later())
        assert await asyncio.wait_for(channel.receive(), timeout=1) is ProviderId.VULTR
        await task


class TestCountdown:
    def test_zero_starts_fired(self):
        countdown = Countdown(0)
        assert countdown.is_fired()
        assert countdown.decrement() is False

    def test_only_last_decrement_fires(self):
        countdown = Countdown(3)
        assert [countdown.decrement() for _ in range(3)] == [False, False, True]
        assert countdown.is_fired()
        assert countdown.remaining == 0

    def test_extra_decrement_is_ignored(self):
        countdown = Countdown(1)
        assert countdown.decrement() is True
        assert countdown.decrement() is False
        assert countdown.remaining == 0

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            Countdown(-1)

    @pytest.mark.asyncio
    async def test_wait_returns_once_fired(self):
        countdown = Countdown(2)
        waiter = asyncio.create_task(countdown.wait())
        countdown.decrement()
        await asyncio.sleep(0)
        assert not waiter.done()
        countdown.decrement()
        await asyncio.wait_for(waiter, timeout=1)
