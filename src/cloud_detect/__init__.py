"""
cloud-detect: find out which cloud provider hosts the current machine.

Every provider probe runs concurrently; the first one to confirm its
provider wins.

    import asyncio
    from cloud_detect import detect

    provider = asyncio.run(detect())
    print(f"Detected provider: {provider}")

Blocking callers can use ``cloud_detect.blocking`` instead.
"""

__version__ = "0.1.0"

from .core.config import DEFAULT_DETECTION_TIMEOUT
from .detector import Detector, detect, detect_with_timeout, supported_providers
from .models import DetectionOutcome, ProviderId
from .roster import ProviderRegistry, ProviderRoster, build_roster, default_roster

__all__ = [
    "DEFAULT_DETECTION_TIMEOUT",
    "DetectionOutcome",
    "Detector",
    "ProviderId",
    "ProviderRegistry",
    "ProviderRoster",
    "__version__",
    "build_roster",
    "default_roster",
    "detect",
    "detect_with_timeout",
    "supported_providers",
]
