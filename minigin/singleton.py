"""A per-class shared instance, created on first use."""

from __future__ import annotations

from typing import ClassVar, TypeVar

_T = TypeVar("_T", bound="Singleton")


class Singleton:
    """Base class that gives every subclass its own lazily created instance."""

    _instances: ClassVar[dict[type, Singleton]] = {}

    @classmethod
    def get_instance(cls: type[_T]) -> _T:
        """Return the shared instance of this class, creating it if needed."""
        instance = Singleton._instances.get(cls)
        if instance is None:
            instance = cls()
            Singleton._instances[cls] = instance
        return instance  # type: ignore[return-value]