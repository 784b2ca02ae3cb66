"""A loaded font face at a fixed size."""

from __future__ import annotations

import os

import pygame


class Font:
    """Holds a pygame font loaded from a file at a given point size."""

    def __init__(self, full_path: str | os.PathLike[str], size: int) -> None:
        self.path = os.fspath(full_path)
        self.size = size
        try:
            self.font = pygame.font.Font(self.path, size)
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Failed to load font: {exc}") from exc