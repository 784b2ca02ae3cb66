"""Loads and caches textures and fonts from the data directory."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from minigin.font import Font
from minigin.singleton import Singleton
from minigin.texture import Texture2D


class ResourceManager(Singleton):
    """Loads resources relative to a data directory, each file only once."""

    def __init__(self) -> None:
        self._data_path = Path()
        self._textures: dict[str, Texture2D] = {}
        self._fonts: dict[tuple[str, int], Font] = {}

    @property
    def data_path(self) -> Path:
        return self._data_path

    def init(self, data_path: str | os.PathLike[str]) -> None:
        """Set the data directory and enable font support."""
        self._data_path = Path(data_path)
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError(f"Failed to load support for fonts: {exc}") from exc

    def load_texture(self, file: str) -> Texture2D:
        """Return the texture for a file, loading it on first request.

        Textures are cached by file name alone.
        """
        full_path = self._data_path / file
        key = full_path.name
        if key not in self._textures:
            self._textures[key] = Texture2D.from_file(full_path)
        return self._textures[key]

    def load_font(self, file: str, size: int) -> Font:
        """Return the font for a file and size, loading it on first request."""
        if not 0 <= size <= 255:
            raise ValueError(f"font size must be between 0 and 255, got {size}")
        full_path = self._data_path / file
        key = (full_path.name, size)
        if key not in self._fonts:
            self._fonts[key] = Font(full_path, size)
        return self._fonts[key]