"""A positioned object in a scene that draws a texture."""

from __future__ import annotations

from minigin.renderer import Renderer
from minigin.resource_manager import ResourceManager
from minigin.texture import Texture2D
from minigin.transform import Transform


class GameObject:
    """An object with a position and an optional texture."""

    def __init__(self) -> None:
        self.transform = Transform()
        self.texture: Texture2D | None = None

    def update(self, delta_time: float) -> None:
        """Advance the object by one frame; does nothing by default."""

    def fixed_update(self, fixed_time_step: float) -> None:
        """Advance the object by one fixed step, reporting the step length."""
        print(fixed_time_step)

    def render(self) -> None:
        """Draw the texture at the object's position."""
        if self.texture is None:
            return
        position = self.transform.position
        Renderer.get_instance().render_texture(self.texture, position.x, position.y)

    def set_texture(self, filename: str) -> None:
        """Use the texture loaded from the given data file."""
        self.texture = ResourceManager.get_instance().load_texture(filename)

    def set_position(self, x: float, y: float) -> None:
        self.transform.set_position(x, y, 0.0)