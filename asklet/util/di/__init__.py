"""Dependency injection wiring.

Every provider is listed once in PROVIDERS. A provider without subclasses
is concrete and used as-is. A provider with subclasses is a mockable
component; its production and mock implementations are told apart by
``__is_mock__``.
"""

from collections.abc import Collection
from typing import Type

from asklet.util.di.application import ProdApplicationProvider
from asklet.util.di.base import Component, ProviderBase
from asklet.util.di.core import ProdConfigProvider
from asklet.util.di.domain import ProdDomainProvider
from asklet.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    RealtimeProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Shared by production and tests; holds no external resources
    RealtimeProvider,
    # Mockable
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for ``base``.

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    subclasses = base.__subclasses__()
    if not subclasses:
        return base

    for impl in subclasses:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


def mockable_components() -> set[Component]:
    """Names of the components that have swappable implementations."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ is not None and base.__subclasses__()
    }


def select_providers(mocked: Collection[Component] = ()) -> list[ProviderBase]:
    """Instantiate all providers, using mocks for the ``mocked`` components.

    Raises:
        ValueError: If an unknown component is named
    """
    unknown = set(mocked) - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "RealtimeProvider",
    "get_provider",
    "mockable_components",
    "select_providers",
]
