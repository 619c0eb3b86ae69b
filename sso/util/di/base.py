"""Provider base class and mock/production selection."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for a mock
Component = Literal["govbr"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick implementations.

    A concrete provider (config, domain, application) is used as-is. A
    mockable component is a base class naming the component in
    ``__mock_component__`` with one production and one mock subclass,
    told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Return the provider class to instantiate for this entry.

        Args:
            mock: Pick the mock subclass of a mockable component

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == mock:
                return subclass

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
