"""Tests for the blocking wrappers."""

import asyncio

import pytest

import cloud_detect.detector as detector_module
from cloud_detect import blocking
from cloud_detect.models import ProviderId
from cloud_detect.roster import ProviderRoster


class SleepyProvider:
    def __init__(self, identifier: ProviderId, *, matches: bool, delay: float = 0.0):
        self.identifier = identifier
        self.matches = matches
        self.delay = delay

    def identity(self) -> ProviderId:
        return self.identifier

    async def identify(self, reporter) -> None:  # type: ignore[no-untyped-def]
        await asyncio.sleep(self.delay)
        if self.matches:
            reporter.send(self.identifier)


@pytest.fixture
def roster(monkeypatch):
    def install(*providers):
        fixed = ProviderRoster(providers)
        monkeypatch.setattr(detector_module, "default_roster", lambda: fixed)

    return install


def test_detect(roster):
    roster(SleepyProvider(ProviderId.AZURE, matches=True))
    assert blocking.detect() is ProviderId.AZURE


def test_detect_timeout(roster):
    roster(SleepyProvider(ProviderId.AZURE, matches=True, delay=10))
    assert blocking.detect(timeout=0.05) is ProviderId.UNKNOWN


def test_detect_with_timeout(roster):
    roster(SleepyProvider(ProviderId.AZURE, matches=True, delay=10))
    assert blocking.detect_with_timeout(0.05) is None


def test_supported_providers(roster):
    roster(SleepyProvider(ProviderId.GCP, matches=False))
    assert blocking.supported_providers() == ["gcp"]


@pytest.mark.asyncio
async def test_detect_inside_running_loop(roster):
    roster(SleepyProvider(ProviderId.VULTR, matches=True))
    assert blocking.detect() is ProviderId.VULTR
