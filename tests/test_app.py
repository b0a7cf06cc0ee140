import random

import pygame
import pytest

from skyraid.app import (
    BUTTON_HEIGHT,
    BUTTONS,
    FRAME_EVENT,
    SPAWN_EVENT,
    App,
    main,
)
from skyraid.fighter import FIGHTER_IMAGE
from skyraid.game import BUTTON_MUSIC, BUTTON_QUIT, BUTTON_RESUME, BUTTON_START


@pytest.fixture
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


@pytest.fixture
def app(headless, tmp_path):
    return App(root=tmp_path, music=False, rng=random.Random(0))


def _click(app, name):
    rect = app.button_rects[name]
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=rect.center, button=1)
    app._handle_event(event)


def test_quit_event_ends_run(app):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert app.run() == 0
    assert pygame.display.get_init() is False


def test_button_layout_follows_window_centre(app):
    quit_rect = app.button_rects[BUTTON_QUIT]
    assert quit_rect.top == BUTTONS[BUTTON_QUIT][1]
    assert quit_rect.height == BUTTON_HEIGHT
    assert app.button_rects[BUTTON_RESUME].top < app.button_rects[BUTTON_START].top


def test_start_button_starts_game(app):
    assert app.game.started is False
    _click(app, BUTTON_START)
    assert app.game.started is True
    assert BUTTON_START not in app.game.visible_buttons


def test_hidden_button_ignores_clicks(app):
    app.game.start()
    app.game.paused = True
    _click(app, BUTTON_RESUME)
    assert app.game.paused is True


def test_quit_button_stops_loop(app):
    app.active = True
    _click(app, BUTTON_QUIT)
    assert app.active is False


def test_music_button_toggles_flag(app):
    assert app.game.music_playing is True
    _click(app, BUTTON_MUSIC)
    assert app.game.music_playing is False
    _click(app, BUTTON_MUSIC)
    assert app.game.music_playing is True


def test_frame_event_ticks_only_when_running(app):
    app._handle_event(pygame.event.Event(FRAME_EVENT))
    assert app.game.score == 0
    app.game.start()
    app._handle_event(pygame.event.Event(FRAME_EVENT))
    assert app.game.score == 1


def test_spawn_event_adds_enemy_when_running(app):
    before = len(app.game.enemies)
    app._handle_event(pygame.event.Event(SPAWN_EVENT))
    assert len(app.game.enemies) == before
    app.game.start()
    app._handle_event(pygame.event.Event(SPAWN_EVENT))
    assert len(app.game.enemies) == before + 1


def test_escape_pauses_and_shows_menu(app):
    app.game.start()
    app._handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0))
    assert app.game.paused is True
    assert BUTTON_RESUME in app.game.visible_buttons
    app._handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0))
    assert app.game.paused is False
    assert BUTTON_RESUME not in app.game.visible_buttons


def test_space_fires_player_bullet(app):
    app.game.start()
    app._handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=0))
    assert len(app.game.bullets) == 1
    assert app.game.bullets[0].direction == -1


def test_space_ignored_before_start(app):
    app._handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=0))
    assert app.game.bullets == []


def test_shift_space_uses_special_attack(app):
    app.game.start()
    app.game.special_attack_uses = 1
    app._handle_event(
        pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE, mod=pygame.KMOD_SHIFT)
    )
    assert app.game.special_attack_uses == 0
    assert app.game.used_special_attack_count == 1
    assert len(app.game.bullets) > 1


def test_image_files_set_sprite_sizes(headless, tmp_path):
    image_path = tmp_path / FIGHTER_IMAGE
    image_path.parent.mkdir(parents=True)
    pygame.init()
    pygame.image.save(pygame.Surface((30, 40)), str(image_path))
    app = App(root=tmp_path, music=False)
    assert (app.game.fighter.width, app.game.fighter.height) == (30, 40)


def test_draw_places_fighter_sprite(app):
    app._draw()
    fighter = app.game.fighter
    expected = app._images[FIGHTER_IMAGE].get_at((1, 1))
    assert app.screen.get_at((fighter.x + 1, fighter.y + 1)) == expected


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0