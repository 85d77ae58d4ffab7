"""Akamai Cloud (formerly Linode)."""

import httpx

from ..models import ProviderId
from .base import LINK_LOCAL_METADATA_URI, BaseProvider, json_object

METADATA_PATH = "/v1/instance"
METADATA_TOKEN_PATH = "/v1/token"
TOKEN_EXPIRY_HEADER = "Metadata-Token-Expiry-Seconds"
TOKEN_HEADER = "Metadata-Token"
VENDOR_FILE = "/sys/class/dmi/id/sys_vendor"


class Akamai(BaseProvider):
    identifier = ProviderId.AKAMAI
    display_name = "Akamai Cloud"
    metadata_uri = LINK_LOCAL_METADATA_URI
    vendor_files = (VENDOR_FILE,)
    vendor_strings = ("Linode", "Akamai")

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        token_resp = await client.put(f"{metadata_uri}{METADATA_TOKEN_PATH}", headers={TOKEN_EXPIRY_HEADER: "60"})
        token = token_resp.text.strip()
        if not token_resp.is_success or not token:
            return False

        resp = await client.get(
            f"{metadata_uri}{METADATA_PATH}",
            headers={TOKEN_HEADER: token, "Accept": "application/json"},
        )
        instance_id = json_object(resp).get("id")
        return isinstance(instance_id, int) and not isinstance(instance_id, bool) and instance_id > 0
