"""Provider identities and detection outcomes."""

from __future__ import annotations

from enum import StrEnum


class ProviderId(StrEnum):
    """Identifier of a cloud service provider.

    The value is the canonical lowercase display name, so ``str(ProviderId.AWS)``
    is ``"aws"``. ``UNKNOWN`` doubles as the default and as the
    "no provider matched" result.
    """

    UNKNOWN = "unknown"
    AKAMAI = "akamai"
    ALIBABA = "alibaba"
    AWS = "aws"
    AZURE = "azure"
    DIGITALOCEAN = "digitalocean"
    GCP = "gcp"
    OCI = "oci"
    OPENSTACK = "openstack"
    VULTR = "vultr"

    @classmethod
    def default(cls) -> ProviderId:
        return cls.UNKNOWN


DetectionOutcome = ProviderId | None
"""A provider (possibly ``UNKNOWN``), or None when the deadline elapsed first."""
