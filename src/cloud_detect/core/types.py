"""Shared type aliases used across cloud-detect."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

# Merged configuration tree (defaults, file, env)
ConfigDict = dict[str, Any]

# Vendor files a probe reads before asking the metadata service
PathLike = str | Path
VendorFiles = Sequence[PathLike]
