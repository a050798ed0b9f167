"""Provider metadata and real-or-in-memory provider selection."""

from collections.abc import Iterable
from typing import ClassVar, Literal, Type

from dishka import Provider

from forum.util.error import DependencyInjectionError

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider that knows which swappable component, if any, it implements.

    A provider declaring ``__mock_component__`` stands for a component with
    two sides; its direct subclasses set ``__is_mock__`` to say which side
    they are. Providers without a component are used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the side of ``base`` to install.

    Raises:
        DependencyInjectionError: If no subclass implements the requested side
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    side = "in-memory" if use_mock else "production"
    raise DependencyInjectionError(
        f"{base.__mock_component__ or base.__name__} has no {side} provider"
    )


def instantiate(
    providers: Iterable[Type[ProviderBase]], mocked: Iterable[Component] = ()
) -> list[ProviderBase]:
    """Build one provider per entry, taking the in-memory side for ``mocked``."""
    mocked = set(mocked)
    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in providers
    ]
