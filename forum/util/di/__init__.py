"""Dependency injection wiring.

``PROVIDERS`` lists every provider the API needs. Swappable components
(currently only persistence) resolve to their production subclass here;
the test suite registers in-memory subclasses and selects those instead.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase, get_provider, instantiate
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def swappable_components() -> set[Component]:
    """Components in ``PROVIDERS`` that have an in-memory side to swap in."""
    return {
        provider.__mock_component__
        for provider in PROVIDERS
        if provider.__mock_component__ is not None
    }


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "instantiate",
    "swappable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
