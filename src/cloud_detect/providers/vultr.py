"""Vultr."""

import httpx

from ..models import ProviderId
from .base import LINK_LOCAL_METADATA_URI, BaseProvider, json_object

METADATA_PATH = "/v1.json"
VENDOR_FILE = "/sys/class/dmi/id/sys_vendor"


class Vultr(BaseProvider):
    identifier = ProviderId.VULTR
    display_name = "Vultr"
    metadata_uri = LINK_LOCAL_METADATA_URI
    vendor_files = (VENDOR_FILE,)
    vendor_strings = ("Vultr",)

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        resp = await client.get(f"{metadata_uri}{METADATA_PATH}")
        instance_id = json_object(resp).get("instanceid")
        return isinstance(instance_id, str) and bool(instance_id)
