"""An image that can be drawn by the renderer."""

from __future__ import annotations

import os

import pygame


class Texture2D:
    """Wraps a pygame surface used as a drawable texture."""

    def __init__(self, surface: pygame.Surface) -> None:
        if surface is None:
            raise ValueError("texture surface must not be None")
        self._surface = surface

    @classmethod
    def from_file(cls, full_path: str | os.PathLike[str]) -> Texture2D:
        """Load a texture from an image file."""
        try:
            surface = pygame.image.load(os.fspath(full_path))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Failed to load texture: {exc}") from exc
        return cls(surface)

    @property
    def surface(self) -> pygame.Surface:
        """The underlying pygame surface."""
        return self._surface

    @property
    def size(self) -> tuple[int, int]:
        """Width and height in pixels."""
        width, height = self._surface.get_size()
        return width, height