"""OpenStack, including the public clouds built on it."""

import httpx

from ..models import ProviderId
from .base import LINK_LOCAL_METADATA_URI, BaseProvider

METADATA_PATH = "/openstack/"
PRODUCT_NAME_FILE = "/sys/class/dmi/id/product_name"
CHASSIS_ASSET_TAG_FILE = "/sys/class/dmi/id/chassis_asset_tag"


class OpenStack(BaseProvider):
    identifier = ProviderId.OPENSTACK
    display_name = "OpenStack"
    metadata_uri = LINK_LOCAL_METADATA_URI
    vendor_files = (PRODUCT_NAME_FILE, CHASSIS_ASSET_TAG_FILE)
    vendor_strings = (
        "OpenStack Nova",
        "OpenStack Compute",
        "HUAWEICLOUD",
        "OpenTelekomCloud",
        "SAP CCloud VM",
    )

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        resp = await client.get(f"{metadata_uri}{METADATA_PATH}")
        return resp.is_success
