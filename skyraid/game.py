"""Game state and rules: scoring, spawning, firing, collisions and menus."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from skyraid.bullet import (
    ADVANCED_ENEMY_BULLET_IMAGE,
    ENEMY_BULLET_IMAGE,
    PLAYER_BULLET_IMAGE,
    SPECIAL_BULLET_IMAGE,
    Bullet,
)
from skyraid.enemy import ADVANCED_ENEMY_IMAGE, ENEMY_IMAGE, AdvancedEnemy, Enemy
from skyraid.fighter import FIGHTER_IMAGE, Fighter

WIN_WIDTH = 700
WIN_HEIGHT = 800
PLAY_WIDTH = WIN_WIDTH - 200
FRAME_MS = 50
SPAWN_MS = 1000

FIGHTER_START = (225, 700)
FIGHTER_STEP = 10
BG_SPEED = 4
BG_WRAP = 3000
KILL_SCORE = 10
ADVANCED_SCORE = 1000
SPECIAL_SPACING = 50
SPECIAL_ROW_OFFSETS = (20, -20, -60)

BUTTON_RESUME = "resume"
BUTTON_START = "start"
BUTTON_RESTART = "restart"
BUTTON_MUSIC = "music"
BUTTON_QUIT = "quit"
MENU_BUTTONS = (BUTTON_RESUME, BUTTON_RESTART, BUTTON_MUSIC, BUTTON_QUIT)


class Direction(Enum):
    """A steering key and the step it moves the fighter by."""

    LEFT = (-FIGHTER_STEP, 0)
    RIGHT = (FIGHTER_STEP, 0)
    UP = (0, -FIGHTER_STEP)
    DOWN = (0, FIGHTER_STEP)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass(frozen=True)
class SpriteSizes:
    """Width and height of every sprite, as (width, height) pairs."""

    fighter: tuple[int, int] = (50, 50)
    enemy: tuple[int, int] = (50, 50)
    advanced_enemy: tuple[int, int] = (50, 50)
    bullet: tuple[int, int] = (20, 20)
    special_bullet: tuple[int, int] = (20, 20)
    enemy_bullet: tuple[int, int] = (20, 20)
    advanced_enemy_bullet: tuple[int, int] = (20, 20)


def check_collision(x1, y1, w1, h1, x2, y2, w2, h2) -> bool:
    """True when two axis-aligned rectangles overlap or touch."""
    return not (x1 > x2 + w2 or x1 + w1 < x2 or y1 > y2 + h2 or y1 + h1 < y2)


def _overlaps(a, b) -> bool:
    return check_collision(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)


class Game:
    """The whole play state, advanced one frame at a time by ``tick``."""

    def __init__(
        self, sizes: SpriteSizes | None = None, rng: random.Random | None = None
    ) -> None:
        self.sizes = sizes or SpriteSizes()
        self.rng = rng or random.Random()
        self.bullets: list[Bullet] = []
        self.enemies: list[Enemy] = []
        self.score = 0
        self.special_attack_uses = 0
        self.used_special_attack_count = 0
        self.started = False
        self.show_menu = False
        self.music_playing = True
        self.paused = False
        self.game_over = False
        self.bg_y = 0
        self.visible_buttons: set[str] = {BUTTON_START, BUTTON_MUSIC, BUTTON_QUIT}
        self.fighter = self._new_fighter()
        self.spawn_enemy()

    @property
    def running(self) -> bool:
        """True while frames and enemy spawns should be processed."""
        return self.started and not self.paused

    def _new_fighter(self) -> Fighter:
        width, height = self.sizes.fighter
        fighter = Fighter(
            *FIGHTER_START, width=width, height=height, image=FIGHTER_IMAGE
        )
        fighter.set_boundary(0, 0, WIN_WIDTH, WIN_HEIGHT)
        return fighter

    def _bullet(self, x: int, y: int, size: tuple[int, int], image: str) -> Bullet:
        width, height = size
        return Bullet(x, y, -1, width=width, height=height, image=image)

    def start(self) -> None:
        """Begin play from the title menu."""
        self.started = True
        self.show_menu = False
        self.visible_buttons -= {BUTTON_START, BUTTON_MUSIC, BUTTON_QUIT}

    def tick(self, held: Iterable[Direction] = ()) -> None:
        """Advance one frame, steering the fighter by the held directions."""
        if not self.running:
            return
        self.score += 1

        self.bg_y += BG_SPEED
        if self.bg_y >= BG_WRAP:
            self.bg_y = 0

        held = set(held)
        for direction in Direction:
            if direction in held:
                self.fighter.move(direction.dx, direction.dy)
        self.fighter.set_boundary(0, 0, PLAY_WIDTH, WIN_HEIGHT)

        for enemy in self.enemies:
            enemy.move()
            enemy.attack(self.bullets)

        self.check_collisions()

        for bullet in self.bullets:
            bullet.update()
        self.bullets = [b for b in self.bullets if not b.is_off_screen()]

        earned = self.score // 1000
        if earned > self.special_attack_uses + self.used_special_attack_count:
            self.special_attack_uses = earned - self.used_special_attack_count

    def spawn_enemy(self) -> None:
        """Add an enemy at a random column; past 1000 points, an advanced one too."""
        x = self.rng.randrange(WIN_WIDTH - 250)
        bw, bh = self.sizes.enemy_bullet
        if self.score >= ADVANCED_SCORE:
            aw, ah = self.sizes.advanced_enemy
            abw, abh = self.sizes.advanced_enemy_bullet
            self.enemies.append(
                AdvancedEnemy(
                    x,
                    0,
                    width=aw,
                    height=ah,
                    image=ADVANCED_ENEMY_IMAGE,
                    bullet_width=abw,
                    bullet_height=abh,
                )
            )
        ew, eh = self.sizes.enemy
        self.enemies.append(
            Enemy(
                x,
                0,
                width=ew,
                height=eh,
                image=ENEMY_IMAGE,
                bullet_width=bw,
                bullet_height=bh,
            )
        )

    def fire(self, special: bool = False) -> None:
        """Fire the fighter's guns, plus a special barrage if asked and available."""
        if not self.running:
            return
        x = self.fighter.x + self.fighter.width // 2 - 10
        y = self.fighter.y - 10

        if special and self.special_attack_uses > 0:
            for column in range(0, PLAY_WIDTH, SPECIAL_SPACING):
                for offset in SPECIAL_ROW_OFFSETS:
                    self.bullets.append(
                        self._bullet(
                            column,
                            y + offset,
                            self.sizes.special_bullet,
                            SPECIAL_BULLET_IMAGE,
                        )
                    )
            self.special_attack_uses -= 1
            self.used_special_attack_count += 1

        columns = (x - 40, x) if self.score >= ADVANCED_SCORE else (x,)
        for column in columns:
            self.bullets.append(
                self._bullet(column, y, self.sizes.bullet, PLAYER_BULLET_IMAGE)
            )

    def _end_game(self, shown: Iterable[str]) -> None:
        self.started = False
        self.show_menu = True
        self.game_over = True
        self.visible_buttons |= set(shown)

    def check_collisions(self) -> None:
        """Resolve hits between bullets, enemies and the fighter."""
        fighter = self.fighter
        for bullet in self.bullets:
            if bullet.direction == 1 and _overlaps(fighter, bullet):
                fighter.take_damage()
                bullet.destroy()
                if fighter.lives <= 0:
                    self._end_game((BUTTON_RESTART, BUTTON_MUSIC))
                    return

        for enemy in self.enemies:
            for bullet in self.bullets:
                if bullet.direction == -1 and _overlaps(enemy, bullet):
                    enemy.take_damage()
                    bullet.destroy()
                    if enemy.destroyed:
                        self.score += KILL_SCORE
            if _overlaps(fighter, enemy):
                self._end_game((BUTTON_START, BUTTON_RESTART, BUTTON_MUSIC))
                return

        self.bullets = [
            b for b in self.bullets if not (b.is_off_screen() or b.destroyed)
        ]
        self.enemies = [e for e in self.enemies if not e.destroyed]

    def toggle_pause(self) -> bool:
        """Pause or unpause a game in progress; return whether it is now paused."""
        if self.started:
            self.paused = not self.paused
            if self.paused:
                self.visible_buttons |= set(MENU_BUTTONS)
            else:
                self.visible_buttons -= set(MENU_BUTTONS)
        return self.paused

    def resume(self) -> None:
        """Leave the pause menu."""
        self.paused = False
        self.visible_buttons -= set(MENU_BUTTONS)

    def restart(self) -> None:
        """Reset score, sprites and the fighter, and start playing again."""
        self.show_menu = False
        self.score = 0
        self.special_attack_uses = 0
        self.used_special_attack_count = 0
        self.paused = False
        self.game_over = False
        self.bullets = []
        self.enemies = []
        self.fighter = self._new_fighter()
        self.visible_buttons.clear()
        self.started = True

    def toggle_music(self) -> bool:
        """Flip the background music flag and return the new value."""
        self.music_playing = not self.music_playing
        return self.music_playing


__all__ = [
    "ADVANCED_ENEMY_BULLET_IMAGE",
    "BUTTON_MUSIC",
    "BUTTON_QUIT",
    "BUTTON_RESTART",
    "BUTTON_RESUME",
    "BUTTON_START",
    "Direction",
    "FRAME_MS",
    "Game",
    "SPAWN_MS",
    "SpriteSizes",
    "WIN_HEIGHT",
    "WIN_WIDTH",
    "check_collision",
]