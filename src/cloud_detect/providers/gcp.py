"""Google Cloud Platform (GCP)."""

import httpx

from ..models import ProviderId
from .base import BaseProvider

METADATA_URI = "http://metadata.google.internal"
METADATA_PATH = "/computeMetadata/v1/instance/tags"
VENDOR_FILE = "/sys/class/dmi/id/product_name"


class Gcp(BaseProvider):
    identifier = ProviderId.GCP
    display_name = "Google Cloud Platform"
    metadata_uri = METADATA_URI
    vendor_files = (VENDOR_FILE,)
    vendor_strings = ("Google",)

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        resp = await client.get(f"{metadata_uri}{METADATA_PATH}", headers={"Metadata-Flavor": "Google"})
        return resp.is_success
