"""Draws textures onto the game window."""

from __future__ import annotations

import pygame

from minigin.scene_manager import SceneManager
from minigin.singleton import Singleton
from minigin.texture import Texture2D


class Renderer(Singleton):
    """Clears the target surface, draws every scene and presents the frame."""

    def __init__(self) -> None:
        self._window: pygame.Surface | None = None
        self.background_color = pygame.Color(0, 0, 0, 0)

    @property
    def surface(self) -> pygame.Surface | None:
        """The surface being drawn on, or None before init."""
        return self._window

    def init(self, window: pygame.Surface) -> None:
        """Start drawing onto the given window surface."""
        if window is None:
            raise RuntimeError("SDL_CreateRenderer Error: no window to render to")
        self._window = window

    def render(self) -> None:
        """Clear to the background colour, draw all scenes and present."""
        target = self._target()
        target.fill(self.background_color)
        SceneManager.get_instance().render()
        if pygame.display.get_init() and pygame.display.get_surface() is target:
            pygame.display.flip()

    def destroy(self) -> None:
        """Stop drawing; the renderer must be initialised again before use."""
        self._window = None

    def render_texture(
        self,
        texture: Texture2D,
        x: float,
        y: float,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        """Draw a texture at (x, y), stretched to width x height if given."""
        target = self._target()
        image = texture.surface
        if width is not None or height is not None:
            if width is None or height is None:
                raise ValueError("width and height must be given together")
            image = pygame.transform.scale(image, (int(width), int(height)))
        target.blit(image, (int(x), int(y)))

    def _target(self) -> pygame.Surface:
        if self._window is None:
            raise RuntimeError("renderer is not initialised")
        return self._window