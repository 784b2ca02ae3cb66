"""The engine: window setup and the game loop."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from types import TracebackType

import pygame

from minigin.input_manager import InputManager
from minigin.renderer import Renderer
from minigin.resource_manager import ResourceManager
from minigin.scene_manager import SceneManager

WINDOW_TITLE = "Programming 4 assignment"
WINDOW_SIZE = (640, 480)
DESIRED_FPS = 60
FRAME_TIME_MS = 1000 // DESIRED_FPS
FIXED_TIME_STEP = 0.02


def _format_version(version: object) -> str:
    if version is None:
        return "unknown"
    return ".".join(str(part) for part in tuple(version))  # type: ignore[arg-type]


def _print_versions() -> None:
    print(f"We compiled against SDL version {_format_version(pygame.version.SDL)} ...")
    print(f"We are linking against SDL version {_format_version(pygame.get_sdl_version())}.")
    print(
        "We are linking against SDL_image version "
        f"{_format_version(pygame.image.get_sdl_image_version())}."
    )
    ttf_version = getattr(pygame.font, "get_sdl_ttf_version", None)
    if ttf_version is not None:
        print(f"We are linking against SDL_ttf version {_format_version(ttf_version())}.")


class Minigin:
    """Opens the game window, sets up the services and runs the game loop."""

    def __init__(self, data_path: str | os.PathLike[str]) -> None:
        _print_versions()
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"SDL_Init Error: {exc}") from exc
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError(f"SDL_CreateWindow Error: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self._open = True

        Renderer.get_instance().init(window)
        ResourceManager.get_instance().init(data_path)

    def __enter__(self) -> Minigin:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the renderer and the window and shut pygame down."""
        if not self._open:
            return
        Renderer.get_instance().destroy()
        pygame.display.quit()
        pygame.quit()
        self._open = False

    def run(self, load: Callable[[], None]) -> None:
        """Call load, then run frames until a quit request arrives."""
        load()

        renderer = Renderer.get_instance()
        scene_manager = SceneManager.get_instance()
        input_manager = InputManager.get_instance()
        frame_time = FRAME_TIME_MS / 1000.0

        keep_running = True
        last_time = time.perf_counter()
        lag = 0.0
        while keep_running:
            current_time = time.perf_counter()
            delta_time = current_time - last_time
            last_time = current_time
            lag += delta_time

            keep_running = input_manager.process_input()

            while lag >= FIXED_TIME_STEP:
                scene_manager.fixed_update(FIXED_TIME_STEP)
                lag -= FIXED_TIME_STEP
            scene_manager.update(delta_time)

            renderer.render()
            print(f"lag: {lag}dt: {delta_time}")

            sleep_time = current_time + frame_time - time.perf_counter()
            if sleep_time > 0:
                time.sleep(sleep_time)