"""Keeps the scenes of the game and drives them."""

from __future__ import annotations

from minigin.scene import Scene
from minigin.singleton import Singleton


class SceneManager(Singleton):
    """Creates scenes and forwards the game loop calls to all of them."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []

    @property
    def scenes(self) -> tuple[Scene, ...]:
        """The scenes in creation order."""
        return tuple(self._scenes)

    def create_scene(self, name: str) -> Scene:
        """Create a new scene, keep it, and return it."""
        scene = Scene(name)
        self._scenes.append(scene)
        return scene

    def update(self, delta_time: float) -> None:
        for scene in self._scenes:
            scene.update(delta_time)

    def fixed_update(self, fixed_time_step: float) -> None:
        for scene in self._scenes:
            scene.fixed_update(fixed_time_step)

    def render(self) -> None:
        for scene in self._scenes:
            scene.render()