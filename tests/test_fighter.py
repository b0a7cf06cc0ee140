import pytest

from skyraid.fighter import Fighter


@pytest.fixture
def fighter():
    f = Fighter(225, 700, width=50, height=50)
    f.set_boundary(0, 0, 700, 800)
    return f


def test_move_inside_boundary(fighter):
    fighter.move(-10, 0)
    fighter.move(0, -10)
    assert (fighter.x, fighter.y) == (225 - 10, 700 - 10)


def test_move_clamps_left_and_top(fighter):
    fighter.move(-1000, -1000)
    assert (fighter.x, fighter.y) == (0, 0)


def test_move_clamps_right_and_bottom(fighter):
    fighter.move(1000, 1000)
    assert fighter.x == 700 - fighter.width
    assert fighter.y == 800 - fighter.height


def test_set_boundary_changes_limits(fighter):
    fighter.set_boundary(10, 20, 500, 800)
    fighter.move(1000, -1000)
    assert fighter.x == 500 - fighter.width
    assert fighter.y == 20
    assert (fighter.left_boundary, fighter.top_boundary) == (10, 20)


def test_default_boundary_pins_fighter_against_zero():
    f = Fighter(100, 100, width=30, height=40)
    f.move(0, 0)
    assert (f.x, f.y) == (-30, -40)


def test_take_damage_decrements_lives(fighter):
    assert fighter.lives == 3
    fighter.take_damage()
    fighter.take_damage()
    assert fighter.lives == 1


def test_repeated_moves_stay_within_boundary(fighter):
    for step in [(10, 0), (0, 10), (-10, 0), (0, -10)] * 100:
        fighter.move(*step)
        assert 0 <= fighter.x <= 700 - fighter.width
        assert 0 <= fighter.y <= 800 - fighter.height