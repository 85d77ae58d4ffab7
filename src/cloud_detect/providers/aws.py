"""Amazon Web Services (AWS)."""

import httpx
from loguru import logger

from ..models import ProviderId
from .base import LINK_LOCAL_METADATA_URI, BaseProvider, json_object

METADATA_PATH = "/latest/dynamic/instance-identity/document"
METADATA_TOKEN_PATH = "/latest/api/token"
TOKEN_TTL_HEADER = "X-aws-ec2-metadata-token-ttl-seconds"
TOKEN_HEADER = "X-aws-ec2-metadata-token"
PRODUCT_VERSION_FILE = "/sys/class/dmi/id/product_version"
BIOS_VENDOR_FILE = "/sys/class/dmi/id/bios_vendor"


class Aws(BaseProvider):
    identifier = ProviderId.AWS
    display_name = "Amazon Web Services"
    metadata_uri = LINK_LOCAL_METADATA_URI
    vendor_files = (PRODUCT_VERSION_FILE, BIOS_VENDOR_FILE)

    def matches_vendor(self, content: str) -> bool:
        # Nitro reports "Amazon EC2", Xen instances "4.11.amazon"
        return "amazon" in content.lower()

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        headers = {}
        token = await self._fetch_token(client, metadata_uri)
        if token:
            headers[TOKEN_HEADER] = token

        resp = await client.get(f"{metadata_uri}{METADATA_PATH}", headers=headers)
        document = json_object(resp)
        image_id = document.get("imageId")
        instance_id = document.get("instanceId")
        return (
            isinstance(image_id, str)
            and isinstance(instance_id, str)
            and image_id.startswith("ami-")
            and instance_id.startswith("i-")
        )

    async def _fetch_token(self, client: httpx.AsyncClient, metadata_uri: str) -> str | None:
        """Get an IMDSv2 session token. None means fall back to IMDSv1."""
        try:
            resp = await client.put(f"{metadata_uri}{METADATA_TOKEN_PATH}", headers={TOKEN_TTL_HEADER: "60"})
        except httpx.HTTPError as e:
            logger.trace(f"Error requesting {self.identifier} metadata token: {e!r}")
            return None
        if not resp.is_success:
            return None
        return resp.text.strip() or None
