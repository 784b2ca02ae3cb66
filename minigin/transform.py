"""Position of an object in the world."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


class Vec3(NamedTuple):
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Transform:
    """Holds the position of a game object."""

    position: Vec3 = field(default_factory=Vec3)

    def set_position(self, x: float, y: float, z: float) -> None:
        """Move to the given coordinates."""
        self.position = Vec3(float(x), float(y), float(z))