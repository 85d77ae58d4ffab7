"""Shared test fixtures for cloud-detect."""

import os
import tempfile

import httpx
import pytest

from cloud_detect.core.config import reset_config
from cloud_detect.roster import default_roster


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "detection": {"timeout": 2.5, "providers": ["aws", "gcp"]},
        "http": {"timeout": 1.0},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture(autouse=True)
def _isolate_globals(monkeypatch):
    """Fresh config singleton and default roster for every test."""
    for key in list(os.environ):
        if key.startswith("CLOUD_DETECT_"):
            monkeypatch.delenv(key)
    reset_config()
    default_roster.cache_clear()
    yield
    reset_config()
    default_roster.cache_clear()


@pytest.fixture
def missing_file(tmp_path):
    """Path to a vendor file that does not exist."""
    return tmp_path / "missing"


@pytest.fixture
def vendor_file(tmp_path):
    """Factory writing a vendor file with the given content."""

    def _write(content: str, name: str = "vendor"):
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def refused_transport():
    """Transport whose every request fails to connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)
