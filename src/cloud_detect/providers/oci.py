"""Oracle Cloud Infrastructure (OCI)."""

import httpx

from ..models import ProviderId
from .base import LINK_LOCAL_METADATA_URI, BaseProvider, json_object

METADATA_PATH = "/opc/v1/instance/metadata/"
VENDOR_FILE = "/sys/class/dmi/id/chassis_asset_tag"


class Oci(BaseProvider):
    identifier = ProviderId.OCI
    display_name = "Oracle Cloud Infrastructure"
    metadata_uri = LINK_LOCAL_METADATA_URI
    vendor_files = (VENDOR_FILE,)
    vendor_strings = ("OracleCloud",)

    async def query_metadata(self, client: httpx.AsyncClient, metadata_uri: str) -> bool:
        resp = await client.get(f"{metadata_uri}{METADATA_PATH}")
        oke_tm = json_object(resp).get("oke-tm")
        return isinstance(oke_tm, str) and "oke" in oke_tm
