import pygame
import pytest

from minigin.renderer import Renderer
from minigin.texture import Texture2D

RED = (255, 0, 0)


def _texture(size, color=RED):
    surface = pygame.Surface(size)
    surface.fill(color)
    return Texture2D(surface)


@pytest.fixture
def target():
    surface = pygame.Surface((32, 32))
    surface.fill((0, 0, 0))
    return surface


@pytest.fixture
def renderer(target):
    result = Renderer()
    result.init(target)
    return result


def test_init_without_window_raises():
    with pytest.raises(RuntimeError, match="^SDL_CreateRenderer Error: "):
        Renderer().init(None)


def test_init_sets_surface(renderer, target):
    assert renderer.surface is target


def test_render_clears_to_background(renderer):
    renderer.background_color = pygame.Color(10, 20, 30)
    renderer.render()
    assert renderer.surface.get_at((0, 0)) == (10, 20, 30, 255)
    assert renderer.surface.get_at((31, 31)) == (10, 20, 30, 255)


def test_default_background_is_black(renderer, target):
    target.fill((200, 200, 200))
    renderer.render()
    assert renderer.surface.get_at((5, 5)) == (0, 0, 0, 255)


def test_render_texture_uses_texture_size(renderer):
    renderer.render_texture(_texture((4, 4)), 5, 6)
    drawn = renderer.surface
    assert drawn.get_at((5, 6)) == (*RED, 255)
    assert drawn.get_at((8, 9)) == (*RED, 255)
    assert drawn.get_at((9, 10)) == (0, 0, 0, 255)
    assert drawn.get_at((4, 6)) == (0, 0, 0, 255)


def test_render_texture_truncates_coordinates(renderer):
    renderer.render_texture(_texture((1, 1)), 2.9, 3.9)
    drawn = renderer.surface
    assert drawn.get_at((2, 3)) == (*RED, 255)
    assert drawn.get_at((3, 4)) == (0, 0, 0, 255)


def test_render_texture_stretches(renderer):
    renderer.render_texture(_texture((2, 2)), 0, 0, 8, 8)
    drawn = renderer.surface
    assert drawn.get_at((7, 7)) == (*RED, 255)
    assert drawn.get_at((8, 8)) == (0, 0, 0, 255)


def test_render_texture_needs_both_dimensions(renderer):
    with pytest.raises(ValueError):
        renderer.render_texture(_texture((2, 2)), 0, 0, 8)


def test_render_texture_before_init_raises():
    with pytest.raises(RuntimeError):
        Renderer().render_texture(_texture((2, 2)), 0, 0)


def test_destroy_releases_target(renderer):
    renderer.destroy()
    assert renderer.surface is None
    with pytest.raises(RuntimeError):
        renderer.render()