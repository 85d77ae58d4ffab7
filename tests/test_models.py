"""Tests for cloud_detect.models."""

import pytest

from cloud_detect.models import ProviderId


def test_default_is_unknown():
    assert ProviderId.default() is ProviderId.UNKNOWN


@pytest.mark.parametrize(
    "provider, name",
    [
        (ProviderId.AKAMAI, "akamai"),
        (ProviderId.ALIBABA, "alibaba"),
        (ProviderId.AWS, "aws"),
        (ProviderId.AZURE, "azure"),
        (ProviderId.DIGITALOCEAN, "digitalocean"),
        (ProviderId.GCP, "gcp"),
        (ProviderId.OCI, "oci"),
        (ProviderId.OPENSTACK, "openstack"),
        (ProviderId.VULTR, "vultr"),
        (ProviderId.UNKNOWN, "unknown"),
    ],
)
def test_display_names(provider, name):
    assert str(provider) == name
    assert f"{provider}" == name
    assert ProviderId(name) is provider
