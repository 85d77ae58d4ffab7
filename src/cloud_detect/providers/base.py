"""
Provider protocol and base class.

Every cloud provider probe implements this interface so the detector can
race them uniformly. A probe reports its own identity on the reporter when
it confirms the provider and reports nothing otherwise; it never raises.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

import aiofiles
import aiofiles.os
import httpx
from loguru import logger

from ..channel import Reporter
from ..core.config import DEFAULT_DETECTION_TIMEOUT
from ..core.types import PathLike, VendorFiles
from ..models import ProviderId

LINK_LOCAL_METADATA_URI = "http://169.254.169.254"


@runtime_checkable
class Provider(Protocol):
    """Protocol that every provider probe must satisfy."""

    def identity(self) -> ProviderId:
        """Return the provider this probe checks for."""
        ...

    async def identify(self, reporter: Reporter) -> None:
        """Send ``identity()`` on *reporter* if the host runs on this provider."""
        ...


def json_object(response: httpx.Response) -> dict[str, Any]:
    """Decode a JSON object body. Any other JSON value yields an empty dict."""
    data = response.json()
    return data if isinstance(data, dict) else {}


class BaseProvider(ABC):
    """Shared plumbing for the built-in probes.

    Subclasses declare their identity, vendor files and vendor strings as
    class attributes and implement ``query_metadata``. Vendor files are
    checked first, in order; the metadata service only when none matched.

    Constructor overrides exist so tests (and unusual hosts) can point a
    probe at other files, another metadata address, or a fake transport.
    """

    identifier: ProviderId = ProviderId.UNKNOWN
    display_name: str = ""
    metadata_uri: str = LINK_LOCAL_METADATA_URI
    vendor_files: tuple[str, ...] = ()
    vendor_strings: tuple[str, ...] = ()

    def __init__(
        self,
        *,
        metadata_uri: str | None = None,
        vendor_files: VendorFiles | None = None,
        timeout: float = DEFAULT_DETECTION_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if metadata_uri is not None:
            self.metadata_uri = metadata_uri
        if vendor_files is not None:
            self.vendor_files = tuple(str(p) for p in vendor_files)
        self.timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return f"{type(self).__name__}(metadata_uri={self.metadata_uri!r}, timeout={self.timeout})"

    def identity(self) -> ProviderId:
        return self.identifier

    async def identify(self, reporter: Reporter) -> None:
        """Try every detection method and report on success."""
        logger.trace(f"Checking {self.display_name}")
        if await self.confirm():
            logger.trace(f"Identified {self.display_name}")
            reporter.send(self.identifier)

    async def confirm(self) -> bool:
        for vendor_file in self.vendor_files:
            if await self.check_vendor_file(vendor_file):
                return True
        return await self.check_metadata_server(self.metadata_uri)

    async def check_vendor_file(self, vendor_file: PathLike) -> bool:
        """Check a local vendor file for this provider's vendor strings."""
        logger.trace(f"Checking {self.identifier} vendor file: {vendor_file}")

        path = str(vendor_file)
        if not await aiofiles.os.path.isfile(path):
            return False

        try:
            async with aiofiles.open(path, encoding="utf-8", errors="replace") as f:
                content = await f.read()
        except OSError as e:
            logger.trace(f"Error reading file {path}: {e!r}")
            return False

        return self.matches_vendor(content)

    def matches_vendor(self, content: str) -> bool:
        return any(marker in content for marker in self.vendor_strings)

    async def check_metadata_server(self, metadata_uri: str) -> bool:
        """Ask the provider's metadata service to confirm the host."""
        logger.trace(f"Checking {self.identifier} metadata using uri: {metadata_uri}")
        try:
            async with self._client() as client:
                return await self.query_metadata(client, metadata_uri.rstrip("/"))
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.trace(f"Error querying {self.identifier} metadata: {e!r}")
            return False

    @abstractmethod
    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        """Return True if the metadata service confirms this provider.

        May raise ``httpx.HTTPError`` or ``ValueError`` (bad JSON); both are
        treated as "not confirmed" by ``check_metadata_server``.
        """

    def _client(self) -> httpx.AsyncClient:
        # Proxies from the environment must not intercept link-local requests
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport, trust_env=False)
