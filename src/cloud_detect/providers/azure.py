"""Microsoft Azure."""

import httpx

from ..models import ProviderId
from .base import LINK_LOCAL_METADATA_URI, BaseProvider, json_object

METADATA_PATH = "/metadata/instance"
API_VERSION = "2017-12-01"
VENDOR_FILE = "/sys/class/dmi/id/sys_vendor"


class Azure(BaseProvider):
    identifier = ProviderId.AZURE
    display_name = "Microsoft Azure"
    metadata_uri = LINK_LOCAL_METADATA_URI
    vendor_files = (VENDOR_FILE,)
    vendor_strings = ("Microsoft Corporation",)

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        resp = await client.get(
            f"{metadata_uri}{METADATA_PATH}",
            params={"api-version": API_VERSION},
            headers={"Metadata": "true"},
        )
        compute = json_object(resp).get("compute")
        if not isinstance(compute, dict):
            return False
        vm_id = compute.get("vmId")
        return isinstance(vm_id, str) and bool(vm_id)
