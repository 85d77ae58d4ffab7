"""DigitalOcean."""

import httpx

from ..models import ProviderId
from .base import LINK_LOCAL_METADATA_URI, BaseProvider, json_object

METADATA_PATH = "/metadata/v1.json"
VENDOR_FILE = "/sys/class/dmi/id/sys_vendor"


class DigitalOcean(BaseProvider):
    identifier = ProviderId.DIGITALOCEAN
    display_name = "DigitalOcean"
    metadata_uri = LINK_LOCAL_METADATA_URI
    vendor_files = (VENDOR_FILE,)
    vendor_strings = ("DigitalOcean",)

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        resp = await client.get(f"{metadata_uri}{METADATA_PATH}")
        droplet_id = json_object(resp).get("droplet_id")
        return isinstance(droplet_id, int) and not isinstance(droplet_id, bool) and droplet_id > 0
