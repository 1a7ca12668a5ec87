"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable production and in-memory implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider with the metadata used to pick implementations.

    Attributes:
        __mock_component__: Component a mockable base stands for; None on
            concrete providers
        __is_mock__: True on test implementations of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
