"""Alibaba Cloud."""

import httpx

from ..models import ProviderId
from .base import BaseProvider

METADATA_URI = "http://100.100.100.200"
METADATA_PATH = "/latest/meta-data/latest/meta-data/instance/virtualization-solution"
VENDOR_FILE = "/sys/class/dmi/id/product_name"


class Alibaba(BaseProvider):
    identifier = ProviderId.ALIBABA
    display_name = "Alibaba Cloud"
    metadata_uri = METADATA_URI
    vendor_files = (VENDOR_FILE,)
    vendor_strings = ("Alibaba Cloud ECS",)

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        resp = await client.get(f"{metadata_uri}{METADATA_PATH}")
        return "ECS Virt" in resp.text
