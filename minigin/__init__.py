"""A minimal 2D game engine on pygame: scenes, game objects, cached resources and a fixed-timestep loop."""

__version__ = "0.1.0"

__all__ = [
    "engine",
    "font",
    "game_object",
    "input_manager",
    "main",
    "renderer",
    "resource_manager",
    "scene",
    "scene_manager",
    "singleton",
    "text_object",
    "texture",
    "transform",
]