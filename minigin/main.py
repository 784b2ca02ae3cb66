"""Starts the demo game."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from pathlib import Path

from minigin.engine import Minigin
from minigin.game_object import GameObject
from minigin.resource_manager import ResourceManager
from minigin.scene_manager import SceneManager
from minigin.text_object import TextObject


def find_data_path(base: str | os.PathLike[str]) -> Path:
    """Return the Data directory under base, or the one beside it if that is missing."""
    base = Path(base)
    candidate = base / "Data"
    if candidate.exists():
        return candidate
    return base / ".." / "Data"


def load() -> None:
    """Build the demo scene."""
    scene = SceneManager.get_instance().create_scene("Demo")

    background = GameObject()
    background.set_texture("background.tga")
    scene.add(background)

    logo = GameObject()
    logo.set_texture("logo.tga")
    logo.set_position(216, 180)
    scene.add(logo)

    font = ResourceManager.get_instance().load_font("Lingua.otf", 36)
    title = TextObject("Programming 4 Assignment", font)
    title.set_position(80, 20)
    scene.add(title)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the demo until it is closed."""
    parser = argparse.ArgumentParser(prog="minigin", description="Run the demo game.")
    parser.parse_args(argv)
    data_path = find_data_path(Path.cwd())
    with Minigin(data_path) as engine:
        engine.run(load)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())