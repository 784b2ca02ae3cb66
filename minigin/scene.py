"""A named collection of game objects."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minigin.game_object import GameObject


class Scene:
    """Owns game objects and forwards the game loop calls to them in order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._objects: list[GameObject] = []

    def __iter__(self) -> Iterator[GameObject]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    @property
    def objects(self) -> tuple[GameObject, ...]:
        """The objects in the order they were added."""
        return tuple(self._objects)

    def add(self, obj: GameObject) -> None:
        """Append an object to the scene."""
        self._objects.append(obj)

    def remove(self, obj: GameObject) -> None:
        """Remove every occurrence of the given object."""
        self._objects = [existing for existing in self._objects if existing is not obj]

    def remove_all(self) -> None:
        """Remove all objects."""
        self._objects.clear()

    def update(self, delta_time: float) -> None:
        for obj in self._objects:
            obj.update(delta_time)

    def fixed_update(self, fixed_time_step: float) -> None:
        for obj in self._objects:
            obj.fixed_update(fixed_time_step)

    def render(self) -> None:
        for obj in self._objects:
            obj.render()