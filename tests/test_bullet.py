import pytest

from skyraid.bullet import Bullet


def test_update_moves_up_for_negative_direction():
    bullet = Bullet(50, 300, -1)
    bullet.update()
    assert bullet.y == 300 - Bullet.SPEED
    assert bullet.x == 50


def test_update_moves_down_for_positive_direction():
    bullet = Bullet(50, 300, 1)
    bullet.update()
    bullet.update()
    assert bullet.y == 300 + 2 * Bullet.SPEED


def test_speed_is_ten_pixels():
    bullet = Bullet(0, 0, 1)
    bullet.update()
    assert bullet.y == 10


@pytest.mark.parametrize(
    "y, height, expected",
    [
        (100, 20, False),
        (-20, 20, False),
        (-21, 20, True),
        (800, 20, False),
        (801, 20, True),
    ],
)
def test_is_off_screen(y, height, expected):
    assert Bullet(0, y, 1, height=height).is_off_screen() is expected


def test_upward_bullet_eventually_leaves_screen():
    bullet = Bullet(0, 700, -1, height=20)
    frames = 0
    while not bullet.is_off_screen():
        bullet.update()
        frames += 1
    assert bullet.y + bullet.height < 0
    assert frames > 0


def test_destroy_marks_bullet():
    bullet = Bullet(0, 0, -1)
    assert bullet.destroyed is False
    bullet.destroy()
    assert bullet.destroyed is True