import pygame
import pytest

from spritewalk.sprite import Sprite

COLORS = {
    # (frame, animation) -> colour; animation 0 is the bottom row
    (0, 0): (255, 0, 0),
    (1, 0): (0, 255, 0),
    (0, 1): (0, 0, 255),
    (1, 1): (255, 255, 0),
}
CELL = 10


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def sheet(tmp_path):
    image = pygame.Surface((2 * CELL, 2 * CELL))
    for (frame, anim), color in COLORS.items():
        top = (1 - anim) * CELL
        image.fill(color, pygame.Rect(frame * CELL, top, CELL, CELL))
    path = tmp_path / "sheet.bmp"
    pygame.image.save(image, str(path))
    return path


@pytest.fixture
def clock():
    return FakeClock()


def test_setup_sets_frame_size(sheet, clock):
    sprite = Sprite(str(sheet), 4, 2, clock)
    assert sprite.frame_width == 1 / 2
    assert sprite.frame_height == 1 / 4
    assert sprite.image.get_size() == (2 * CELL, 2 * CELL)


def test_invalid_grid_raises(sheet, clock):
    with pytest.raises(ValueError):
        Sprite(str(sheet), 0, 2, clock)


def test_missing_texture_reports(tmp_path, clock, capsys):
    sprite = Sprite(str(tmp_path / "nope.png"), 2, 2, clock)
    assert sprite.image is None
    assert "Failed to load texture" in capsys.readouterr().out
    with pytest.raises(ValueError):
        sprite.frame_rect()


def test_set_animation_ignores_out_of_range(sheet, clock):
    sprite = Sprite(str(sheet), 2, 2, clock)
    sprite.set_animation(1)
    assert sprite.current_animation == 1
    sprite.set_animation(2)
    assert sprite.current_animation == 1


def test_update_advances_and_wraps_when_moving(sheet, clock):
    sprite = Sprite(str(sheet), 2, 2, clock)
    sprite.is_moving = True
    clock.now = sprite.animation_speed * 2
    sprite.update(0.016)
    assert sprite.current_frame == 1
    sprite.update(0.016)  # no time has passed
    assert sprite.current_frame == 1
    clock.now += sprite.animation_speed * 2
    sprite.update(0.016)
    assert sprite.current_frame == 0


def test_update_rests_on_first_frame_when_still(sheet, clock):
    sprite = Sprite(str(sheet), 2, 2, clock)
    sprite.current_frame = 1
    sprite.is_moving = False
    sprite.update(0.016)
    assert sprite.current_frame == 0


def test_frame_offset_follows_state(sheet, clock):
    sprite = Sprite(str(sheet), 2, 2, clock)
    assert sprite.frame_offset() == (0.0, 0.0)
    sprite.current_frame = 1
    sprite.set_animation(1)
    assert sprite.frame_offset() == (sprite.frame_width, sprite.frame_height)


def test_frame_rect_row_zero_is_bottom(sheet, clock):
    sprite = Sprite(str(sheet), 2, 2, clock)
    for (frame, anim), color in COLORS.items():
        sprite.current_frame = frame
        sprite.set_animation(anim)
        rect = sprite.frame_rect()
        assert rect.size == (CELL, CELL)
        assert tuple(sprite.image.get_at(rect.center))[:3] == color


def test_draw_blits_current_frame_at_position(sheet, clock):
    sprite = Sprite(str(sheet), 2, 2, clock)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    sprite.current_frame = 1
    sprite.set_animation(1)
    sprite.draw(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == COLORS[(1, 1)]
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_draw_respects_normalised_position(sheet, clock):
    sprite = Sprite(str(sheet), 2, 2, clock)
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    sprite.position.update(0.5, 0.5)
    sprite.draw(surface)
    assert tuple(surface.get_at((75, 25)))[:3] == COLORS[(0, 0)]
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 0)