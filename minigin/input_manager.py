"""Reads pending window and input events."""

from __future__ import annotations

import pygame

from minigin.singleton import Singleton


class InputManager(Singleton):
    """Polls the event queue once per frame."""

    def process_input(self) -> bool:
        """Handle pending events; return False once a quit request is seen.

        Events after the quit request stay in the queue.
        """
        while (event := pygame.event.poll()).type != pygame.NOEVENT:
            if event.type == pygame.QUIT:
                return False
        return True