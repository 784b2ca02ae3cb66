"""A game object that draws a line of text."""

from __future__ import annotations

import pygame

from minigin.font import Font
from minigin.game_object import GameObject
from minigin.renderer import Renderer
from minigin.texture import Texture2D

TEXT_COLOR = (255, 255, 255, 255)


class TextObject(GameObject):
    """Draws white text; the texture is rebuilt only after the text changes."""

    def __init__(self, text: str, font: Font) -> None:
        super().__init__()
        self._text = text
        self.font = font
        self._needs_update = True

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self.set_text(value)

    @property
    def needs_update(self) -> bool:
        """Whether the texture is out of date with the text."""
        return self._needs_update

    def update(self, delta_time: float) -> None:
        """Rebuild the text texture if the text changed since the last build."""
        if not self._needs_update:
            return
        try:
            surface = self.font.font.render(self._text, True, TEXT_COLOR)
        except (pygame.error, ValueError) as exc:
            raise RuntimeError(f"render text failed: {exc}") from exc
        self.texture = Texture2D(surface)
        self._needs_update = False

    def render(self) -> None:
        """Draw the text texture, if one has been built, at the object's position."""
        if self.texture is None:
            return
        position = self.transform.position
        Renderer.get_instance().render_texture(self.texture, position.x, position.y)

    def set_text(self, text: str) -> None:
        self._text = text
        self._needs_update = True

    def set_position(self, x: float, y: float) -> None:
        self.transform.set_position(x, y, 0.0)