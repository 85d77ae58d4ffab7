"""Tests for the Amazon Web Services probe."""

import httpx
import pytest

from cloud_detect.providers.aws import METADATA_PATH, METADATA_TOKEN_PATH, TOKEN_HEADER, TOKEN_TTL_HEADER, Aws

DOCUMENT = {"imageId": "ami-0abcdef1234567890", "instanceId": "i-1234567890abcdef0", "region": "us-east-1"}


class FakeImds:
    """In-memory instance metadata service, IMDSv2 optional."""

    def __init__(self, document, *, require_token: bool = False, token_status: int = 200):
        self.document = document
        self.require_token = require_token
        self.token_status = token_status
        self.seen_tokens: list[str | None] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.method == "PUT" and request.url.path == METADATA_TOKEN_PATH:
            if request.headers.get(TOKEN_TTL_HEADER) is None:
                return httpx.Response(400)
            return httpx.Response(self.token_status, text="session-token")
        if request.method == "GET" and request.url.path == METADATA_PATH:
            token = request.headers.get(TOKEN_HEADER)
            self.seen_tokens.append(token)
            if self.require_token and token != "session-token":
                return httpx.Response(401)
            return httpx.Response(200, json=self.document)
        return httpx.Response(404)


@pytest.mark.asyncio
async def test_check_metadata_server_imdsv2():
    imds = FakeImds(DOCUMENT, require_token=True)
    assert await Aws(transport=httpx.MockTransport(imds)).check_metadata_server("http://aws.test")
    assert imds.seen_tokens == ["session-token"]


@pytest.mark.asyncio
async def test_check_metadata_server_falls_back_to_imdsv1():
    imds = FakeImds(DOCUMENT, token_status=403)
    assert await Aws(transport=httpx.MockTransport(imds)).check_metadata_server("http://aws.test")
    assert imds.seen_tokens == [None]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "document",
    [
        {"imageId": "abc", "instanceId": "i-123"},
        {"imageId": "ami-123", "instanceId": "abc"},
        {"imageId": "ami-123"},
    ],
)
async def test_check_metadata_server_failure(document):
    imds = FakeImds(document)
    assert not await Aws(transport=httpx.MockTransport(imds)).check_metadata_server("http://aws.test")


@pytest.mark.asyncio
async def test_check_metadata_server_unreachable(refused_transport):
    assert not await Aws(transport=refused_transport).check_metadata_server("http://aws.test")


@pytest.mark.asyncio
@pytest.mark.parametrize("content", ["Amazon EC2", "4.11.amazon"])
async def test_check_vendor_file_success(vendor_file, content):
    assert await Aws().check_vendor_file(vendor_file(content))


@pytest.mark.asyncio
async def test_check_vendor_file_failure(vendor_file):
    assert not await Aws().check_vendor_file(vendor_file("Google"))
