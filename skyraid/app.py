"""Window, input, timers and drawing around a :class:`Game`."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

import pygame

from skyraid.bullet import (
    ADVANCED_ENEMY_BULLET_IMAGE,
    ENEMY_BULLET_IMAGE,
    PLAYER_BULLET_IMAGE,
    SPECIAL_BULLET_IMAGE,
)
from skyraid.enemy import ADVANCED_ENEMY_IMAGE, ENEMY_IMAGE
from skyraid.fighter import FIGHTER_IMAGE
from skyraid.game import (
    BUTTON_MUSIC,
    BUTTON_QUIT,
    BUTTON_RESTART,
    BUTTON_RESUME,
    BUTTON_START,
    FRAME_MS,
    SPAWN_MS,
    WIN_HEIGHT,
    WIN_WIDTH,
    Direction,
    Game,
    SpriteSizes,
)

BACKGROUND_IMAGE = "resource/image/bg.png"
LIFE_IMAGE = "resource/image/life.png"
MUSIC_FILE = "resource/sound/terran.mp3"
CAPTION = "RAIDEN"

FRAME_EVENT = pygame.USEREVENT + 1
SPAWN_EVENT = pygame.USEREVENT + 2

TEXT_COLOR = (255, 255, 255)
BUTTON_COLOR = (200, 200, 200)
BUTTON_TEXT_COLOR = (0, 0, 0)
HUD_X = 520
LIFE_SPACING = 40

BUTTON_WIDTH = 100
BUTTON_HEIGHT = 40
_BUTTON_LEFT = WIN_WIDTH // 2 - 50

# Creation order matters: when buttons overlap, the first one listed wins.
BUTTONS = {
    BUTTON_RESUME: ("Resume", WIN_HEIGHT // 2 - 70),
    BUTTON_START: ("Start", WIN_HEIGHT // 2 - 20),
    BUTTON_RESTART: ("Restart", WIN_HEIGHT // 2 - 20),
    BUTTON_MUSIC: ("Toggle Music", WIN_HEIGHT // 2 + 30),
    BUTTON_QUIT: ("Quit", WIN_HEIGHT // 2 + 80),
}

_DEFAULT_SIZES = SpriteSizes()
_PLACEHOLDERS = {
    FIGHTER_IMAGE: (_DEFAULT_SIZES.fighter, (80, 160, 255)),
    ENEMY_IMAGE: (_DEFAULT_SIZES.enemy, (220, 60, 60)),
    ADVANCED_ENEMY_IMAGE: (_DEFAULT_SIZES.advanced_enemy, (230, 140, 30)),
    PLAYER_BULLET_IMAGE: (_DEFAULT_SIZES.bullet, (255, 255, 120)),
    SPECIAL_BULLET_IMAGE: (_DEFAULT_SIZES.special_bullet, (120, 255, 255)),
    ENEMY_BULLET_IMAGE: (_DEFAULT_SIZES.enemy_bullet, (255, 120, 200)),
    ADVANCED_ENEMY_BULLET_IMAGE: (_DEFAULT_SIZES.advanced_enemy_bullet, (255, 60, 255)),
    LIFE_IMAGE: ((30, 30), (255, 90, 90)),
}

_KEY_DIRECTIONS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
}


class App:
    """Opens the game window and drives a :class:`Game` from timers and input."""

    def __init__(
        self,
        root: str | Path = ".",
        music: bool = True,
        rng: random.Random | None = None,
    ) -> None:
        self.root = Path(root)
        pygame.init()
        self.screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(CAPTION)
        self.font = pygame.font.Font(None, 24)
        self.font.set_bold(True)
        self.music_enabled = music and self._init_mixer()
        self.active = False
        self._clock = pygame.time.Clock()

        self._images = {path: self._load(path) for path in _PLACEHOLDERS}
        self._background = self._load_file(BACKGROUND_IMAGE)
        self.button_rects = {
            name: pygame.Rect(_BUTTON_LEFT, top, BUTTON_WIDTH, BUTTON_HEIGHT)
            for name, (_, top) in BUTTONS.items()
        }

        sizes = SpriteSizes(
            fighter=self._size(FIGHTER_IMAGE),
            enemy=self._size(ENEMY_IMAGE),
            advanced_enemy=self._size(ADVANCED_ENEMY_IMAGE),
            bullet=self._size(PLAYER_BULLET_IMAGE),
            special_bullet=self._size(SPECIAL_BULLET_IMAGE),
            enemy_bullet=self._size(ENEMY_BULLET_IMAGE),
            advanced_enemy_bullet=self._size(ADVANCED_ENEMY_BULLET_IMAGE),
        )
        self.game = Game(sizes, rng)

    @staticmethod
    def _init_mixer() -> bool:
        try:
            pygame.mixer.init()
        except pygame.error:
            return False
        return True

    def _load_file(self, relative: str) -> pygame.Surface | None:
        path = self.root / relative
        if not path.is_file():
            return None
        try:
            return pygame.image.load(str(path))
        except pygame.error:
            return None

    def _load(self, relative: str) -> pygame.Surface:
        image = self._load_file(relative)
        if image is not None:
            return image
        size, color = _PLACEHOLDERS[relative]
        surface = pygame.Surface(size)
        surface.fill(color)
        return surface

    def _size(self, relative: str) -> tuple[int, int]:
        width, height = self._images[relative].get_size()
        return (width, height)

    def _play_music(self) -> None:
        if not self.music_enabled:
            return
        path = self.root / MUSIC_FILE
        if not path.is_file():
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(-1)
        except pygame.error:
            self.music_enabled = False

    def _stop_music(self) -> None:
        if self.music_enabled and pygame.mixer.get_init():
            pygame.mixer.music.stop()

    def _button_at(self, pos: tuple[int, int]) -> str | None:
        for name, rect in self.button_rects.items():
            if name in self.game.visible_buttons and rect.collidepoint(pos):
                return name
        return None

    def _press(self, name: str) -> None:
        game = self.game
        if name == BUTTON_RESUME:
            game.resume()
        elif name == BUTTON_START:
            game.start()
        elif name == BUTTON_RESTART:
            game.restart()
        elif name == BUTTON_MUSIC:
            if game.music_playing:
                self._stop_music()
            else:
                self._play_music()
            game.toggle_music()
        elif name == BUTTON_QUIT:
            self.active = False

    def _held_directions(self) -> set[Direction]:
        pressed = pygame.key.get_pressed()
        return {direction for key, direction in _KEY_DIRECTIONS.items() if pressed[key]}

    def _handle_event(self, event: pygame.event.Event) -> None:
        game = self.game
        if event.type == pygame.QUIT:
            self.active = False
        elif event.type == FRAME_EVENT:
            if game.running:
                game.tick(self._held_directions())
        elif event.type == SPAWN_EVENT:
            if game.running:
                game.spawn_enemy()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                shift = bool(getattr(event, "mod", 0) & pygame.KMOD_SHIFT)
                game.fire(special=shift)
            elif event.key == pygame.K_ESCAPE:
                game.toggle_pause()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            name = self._button_at(event.pos)
            if name is not None:
                self._press(name)

    def _draw(self) -> None:
        screen = self.screen
        game = self.game
        screen.fill((0, 0, 0))

        if self._background is not None:
            height = self._background.get_height()
            screen.blit(self._background, (0, game.bg_y - height))
            screen.blit(self._background, (0, game.bg_y))

        screen.blit(self._images[game.fighter.image], (game.fighter.x, game.fighter.y))
        for enemy in game.enemies:
            screen.blit(self._images[enemy.image], (enemy.x, enemy.y))
        for bullet in game.bullets:
            screen.blit(self._images[bullet.image], (bullet.x, bullet.y))

        score = self.font.render(f"Score: {game.score}", True, TEXT_COLOR)
        screen.blit(score, (HUD_X, 20))
        special = self.font.render(
            f"Special Bullet: {game.special_attack_uses}", True, TEXT_COLOR
        )
        screen.blit(special, (HUD_X, 80))

        life = self._images[LIFE_IMAGE]
        for i in range(max(game.fighter.lives, 0)):
            screen.blit(life, (HUD_X + i * LIFE_SPACING, 100))

        for name, rect in self.button_rects.items():
            if name not in game.visible_buttons:
                continue
            pygame.draw.rect(screen, BUTTON_COLOR, rect)
            label = self.font.render(BUTTONS[name][0], True, BUTTON_TEXT_COLOR)
            screen.blit(label, label.get_rect(center=rect.center))

    def run(self) -> int:
        """Run the event loop until the window is closed; return the exit code."""
        pygame.time.set_timer(FRAME_EVENT, FRAME_MS)
        pygame.time.set_timer(SPAWN_EVENT, SPAWN_MS)
        self._play_music()
        self.active = True
        try:
            while self.active:
                for event in pygame.event.get():
                    self._handle_event(event)
                self._draw()
                pygame.display.flip()
                self._clock.tick(60)
        finally:
            pygame.time.set_timer(FRAME_EVENT, 0)
            pygame.time.set_timer(SPAWN_EVENT, 0)
            self._stop_music()
            pygame.quit()
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the game window."""
    parser = argparse.ArgumentParser(prog="skyraid", description="Vertical shooter.")
    parser.add_argument(
        "--resources",
        default=".",
        help="directory holding the resource/ folder (default: current directory)",
    )
    parser.add_argument("--mute", action="store_true", help="do not play music")
    args = parser.parse_args(argv)
    return App(root=args.resources, music=not args.mute).run()


if __name__ == "__main__":
    raise SystemExit(main())