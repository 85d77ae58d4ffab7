"""Shared setup logic for CLI commands."""

from __future__ import annotations

from collections.abc import Iterable

from cloud_detect.core.config import Config
from cloud_detect.core.config_schema import CloudDetectConfig
from cloud_detect.detector import Detector


def load_settings(config_file: str | None = None) -> CloudDetectConfig:
    """Load and validate config from defaults, *config_file* and env vars."""
    return Config(config_file=config_file).validated()


def configure_logging(settings: CloudDetectConfig, level: str | None = None) -> None:
    from cloud_detect.core.utils.logging import setup_logging

    setup_logging(level=level or settings.logging.level, log_file=settings.logging.file)


def create_detector(settings: CloudDetectConfig, providers: Iterable[str] = ()) -> Detector:
    """Create a Detector over the selected (or configured) providers."""
    from cloud_detect.roster import ProviderRegistry, build_roster

    registry = ProviderRegistry()
    registry.discover()
    names = list(providers) or settings.detection.providers
    roster = build_roster(names, registry=registry, timeout=settings.http.timeout)
    return Detector(roster)
