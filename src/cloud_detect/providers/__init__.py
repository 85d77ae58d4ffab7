"""
Built-in cloud provider probes.

Each module checks one provider: local DMI vendor files first, then the
provider's link-local metadata service.
"""

from ..models import ProviderId
from .akamai import Akamai
from .alibaba import Alibaba
from .aws import Aws
from .azure import Azure
from .base import BaseProvider, Provider
from .digitalocean import DigitalOcean
from .gcp import Gcp
from .oci import Oci
from .openstack import OpenStack
from .vultr import Vultr

BUILTIN_PROVIDERS: dict[ProviderId, type[BaseProvider]] = {
    ProviderId.AKAMAI: Akamai,
    ProviderId.ALIBABA: Alibaba,
    ProviderId.AWS: Aws,
    ProviderId.AZURE: Azure,
    ProviderId.DIGITALOCEAN: DigitalOcean,
    ProviderId.GCP: Gcp,
    ProviderId.OCI: Oci,
    ProviderId.OPENSTACK: OpenStack,
    ProviderId.VULTR: Vultr,
}

__all__ = [
    "BUILTIN_PROVIDERS",
    "Akamai",
    "Alibaba",
    "Aws",
    "Azure",
    "BaseProvider",
    "DigitalOcean",
    "Gcp",
    "Oci",
    "OpenStack",
    "Provider",
    "Vultr",
]
