"""Synchronous wrappers around the async detection API.

For callers without an event loop (scripts, WSGI apps). Safe to call from
inside a running loop too: the detection then runs on a helper thread.
"""

from .core.utils.async_helpers import run_async_safely
from .detector import detect as _detect
from .detector import detect_with_timeout as _detect_with_timeout
from .detector import supported_providers as _supported_providers
from .models import DetectionOutcome, ProviderId


def detect(timeout: float | None = None) -> ProviderId:
    """Blocking version of ``cloud_detect.detect``."""
    return run_async_safely(_detect(timeout))


def detect_with_timeout(duration: float) -> DetectionOutcome:
    """Blocking version of ``cloud_detect.detect_with_timeout``."""
    return run_async_safely(_detect_with_timeout(duration))


def supported_providers() -> list[str]:
    return _supported_providers()
