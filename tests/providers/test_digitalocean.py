"""Tests for the DigitalOcean probe."""

import httpx
import pytest

from cloud_detect.providers.digitalocean import METADATA_PATH, DigitalOcean


def metadata(payload) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path != METADATA_PATH:
            return httpx.Response(404)
        return httpx.Response(200, json=payload)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_check_metadata_server_success():
    provider = DigitalOcean(transport=metadata({"droplet_id": 123}))
    assert await provider.check_metadata_server("http://do.test")


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"droplet_id": 0}, {"droplet_id": "123"}, {}, [1, 2, 3]])
async def test_check_metadata_server_failure(payload):
    provider = DigitalOcean(transport=metadata(payload))
    assert not await provider.check_metadata_server("http://do.test")


@pytest.mark.asyncio
async def test_check_vendor_file_success(vendor_file):
    assert await DigitalOcean().check_vendor_file(vendor_file("DigitalOcean"))


@pytest.mark.asyncio
async def test_check_vendor_file_failure(vendor_file):
    assert not await DigitalOcean().check_vendor_file(vendor_file(""))
