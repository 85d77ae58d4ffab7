"""
Provider roster and plugin registry.

The registry knows every available probe class: the built-ins plus any
discovered via ``importlib.metadata`` entry points (group:
``cloud_detect.providers``). Third-party packages can contribute probes in
their own ``pyproject.toml``:

    [project.entry-points."cloud_detect.providers"]
    aws_imds_only = "my_package.probes:ImdsOnlyAws"

Plugin probes report one of the ``ProviderId`` identities. A roster holds
one probe per identity, so a plugin sharing its identity with a built-in
only runs when it is selected by name in place of that built-in.

A roster is the immutable selection of probe instances a detector races.
It is built once and only read afterwards.
"""

from collections.abc import Iterable, Iterator, Sequence
from functools import cache
from importlib.metadata import EntryPoint, entry_points
from typing import Any

import httpx
from loguru import logger

from .core.config import DEFAULT_DETECTION_TIMEOUT, get_config
from .core.exceptions import ConfigurationError, ProviderLoadError
from .models import ProviderId
from .providers import BUILTIN_PROVIDERS, BaseProvider, Provider

ENTRY_POINT_GROUP = "cloud_detect.providers"


class ProviderRoster(Sequence[Provider]):
    """Ordered, read-only collection of probes with unique identities."""

    def __init__(self, providers: Iterable[Provider] = ()):
        entries = tuple(providers)
        seen: set[ProviderId] = set()
        for provider in entries:
            identity = provider.identity()
            if identity == ProviderId.UNKNOWN:
                raise ConfigurationError(f"{provider!r} cannot use the '{identity}' identity")
            if identity in seen:
                raise ConfigurationError(f"Duplicate provider in roster: '{identity}'")
            seen.add(identity)
        self._providers = entries

    def __getitem__(self, index):  # type: ignore[no-untyped-def]
        return self._providers[index]

    def __len__(self) -> int:
        return len(self._providers)

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._providers)

    def __repr__(self) -> str:
        return f"ProviderRoster({self.names()})"

    def identities(self) -> list[ProviderId]:
        return [p.identity() for p in self._providers]

    def names(self) -> list[str]:
        """Canonical display name of every probe, in roster order."""
        return [str(p.identity()) for p in self._providers]


def _is_provider_class(obj: Any) -> bool:
    if not isinstance(obj, type):
        return False
    if issubclass(obj, BaseProvider):
        return True
    # Protocol check for classes that don't inherit from BaseProvider
    return all(callable(getattr(obj, attr, None)) for attr in ("identity", "identify"))


class ProviderRegistry:
    """Discover and manage provider probe classes."""

    def __init__(self, include_builtins: bool = True):
        self._providers: dict[str, type] = {}
        if include_builtins:
            for provider_id, cls in BUILTIN_PROVIDERS.items():
                self._providers[str(provider_id)] = cls

    def discover(self) -> dict[str, type]:
        """Scan entry points and return {name: provider_class}.

        Plugins that fail to load are logged and skipped; a plugin never
        replaces a built-in provider of the same name.
        """
        for ep in entry_points(group=ENTRY_POINT_GROUP):
            name = ep.name.lower()
            if name in self._providers:
                logger.warning(f"Ignoring provider plugin '{ep.name}': name already registered")
                continue
            try:
                self._providers[name] = self._load(ep)
                logger.debug(f"Discovered provider plugin: {ep.name}")
            except ProviderLoadError as e:
                logger.warning(str(e))

        return dict(self._providers)

    @staticmethod
    def _load(ep: EntryPoint) -> type:
        try:
            cls = ep.load()
        except Exception as e:
            raise ProviderLoadError(f"Failed to load provider plugin '{ep.name}': {e}") from e
        if not _is_provider_class(cls):
            raise ProviderLoadError(f"Provider plugin '{ep.name}' is not a provider class: {cls!r}")
        return cls

    def register(self, name: str, provider_class: type) -> None:
        """Manually register a provider class (useful for testing)."""
        self._providers[name.lower()] = provider_class

    def get(self, name: str) -> type | None:
        """Get a registered provider class by name."""
        return self._providers.get(name.lower())

    def list_names(self) -> list[str]:
        return list(self._providers.keys())

    def create(self, name: str, **config: Any) -> Provider:
        """Instantiate a provider by name with the given config.

        Raises:
            ConfigurationError: if the name is unknown or the class rejects the config.
        """
        cls = self.get(name)
        if cls is None:
            raise ConfigurationError(f"No provider registered as '{name}'. Available: {self.list_names()}")
        try:
            return cls(**config)
        except Exception as e:
            raise ConfigurationError(f"Could not create provider '{name}': {e}") from e


def _usable_providers(registry: ProviderRegistry, config: dict[str, Any]) -> Iterator[Provider]:
    """Yield one probe per identity from every registered class.

    Classes are tried in registration order, so built-ins come first. A
    plugin that cannot be created or whose identity is taken is skipped.
    """
    seen: set[ProviderId] = set()
    for name in registry.list_names():
        try:
            provider = registry.create(name, **config)
            identity = provider.identity()
        except Exception as e:
            logger.warning(f"Skipping provider '{name}': {e}")
            continue
        if identity == ProviderId.UNKNOWN or identity in seen:
            logger.warning(f"Skipping provider '{name}': identity '{identity}' is unusable or already taken")
            continue
        seen.add(identity)
        yield provider


def build_roster(
    names: Iterable[str] | None = None,
    *,
    registry: ProviderRegistry | None = None,
    timeout: float = DEFAULT_DETECTION_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProviderRoster:
    """Instantiate the selected providers into a roster.

    Args:
        names: Provider names to include, in order. None or empty selects
            every registered provider that can join the roster.
        registry: Where to look names up. Defaults to the built-ins only.
        timeout: Metadata request timeout handed to every probe.
        transport: Optional httpx transport shared by every probe.

    Raises:
        ConfigurationError: on unknown, unusable or duplicate names in an
            explicit selection.
    """
    registry = registry or ProviderRegistry()
    selected = [n.strip().lower() for n in names or () if n.strip()]

    config: dict[str, Any] = {"timeout": timeout}
    if transport is not None:
        config["transport"] = transport

    if not selected:
        return ProviderRoster(_usable_providers(registry, config))
    return ProviderRoster(registry.create(name, **config) for name in selected)


@cache
def default_roster() -> ProviderRoster:
    """Roster used by the module-level API, built on first use.

    Selection and request timeout come from the global ``Config``
    (``detection.providers`` and ``http.timeout``); plugins are discovered.
    """
    settings = get_config().validated()
    registry = ProviderRegistry()
    registry.discover()
    roster = build_roster(settings.detection.providers, registry=registry, timeout=settings.http.timeout)
    logger.debug(f"Built provider roster: {roster.names()}")
    return roster
