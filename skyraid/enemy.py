"""Enemy aircraft and their movement and firing patterns."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from skyraid.bullet import ADVANCED_ENEMY_BULLET_IMAGE, ENEMY_BULLET_IMAGE, Bullet

ENEMY_IMAGE = "resource/image/enemy.png"
ADVANCED_ENEMY_IMAGE = "resource/image/advanced_enemy.png"

FIELD_WIDTH = 500
FIELD_HEIGHT = 400
FRAME_MS = 50


@dataclass
class Enemy:
    """A basic enemy that weaves sideways while drifting up and down."""

    x: int
    y: int
    width: int = 50
    height: int = 50
    image: str = ENEMY_IMAGE
    bullet_width: int = 20
    bullet_height: int = 20
    health: int = 3
    destroyed: bool = False
    attack_timer: int = 0
    move_timer: int = 0
    moving_down: bool = True

    MOVE_PERIOD: ClassVar[int] = 2000
    ATTACK_PERIOD: ClassVar[int] = 2000
    BULLET_IMAGE: ClassVar[str] = ENEMY_BULLET_IMAGE

    def _advance_move_timer(self) -> None:
        self.move_timer += FRAME_MS
        if self.move_timer >= self.MOVE_PERIOD:
            self.moving_down = not self.moving_down
            self.move_timer = 0

    def _clamp(self) -> None:
        self.x = max(self.x, 0)
        if self.x + self.width > FIELD_WIDTH:
            self.x = FIELD_WIDTH - self.width
        self.y = max(self.y, 0)
        if self.y + self.height > FIELD_HEIGHT:
            self.y = FIELD_HEIGHT - self.height

    def move(self) -> None:
        """Advance one frame of movement, staying inside the play field."""
        self._advance_move_timer()
        self.y += 5 if self.moving_down else -5
        self.x = int(self.x + 20 * math.sin(self.move_timer * 3.14 / 180))
        self._clamp()

    def attack(self, bullets: list[Bullet]) -> None:
        """Append a downward bullet to ``bullets`` when the attack timer fires."""
        self.attack_timer += FRAME_MS
        if self.attack_timer >= self.ATTACK_PERIOD:
            bullets.append(
                Bullet(
                    self.x + self.width // 2 - 10,
                    self.y + self.height,
                    1,
                    width=self.bullet_width,
                    height=self.bullet_height,
                    image=self.BULLET_IMAGE,
                )
            )
            self.attack_timer = 0

    def take_damage(self) -> None:
        """Lose one point of health, being destroyed when none is left."""
        self.health -= 1
        if self.health <= 0:
            self.destroy()

    def destroy(self) -> None:
        """Mark the enemy for removal."""
        self.destroyed = True


@dataclass
class AdvancedEnemy(Enemy):
    """A faster enemy that zig-zags diagonally and fires twice as often."""

    image: str = ADVANCED_ENEMY_IMAGE

    MOVE_PERIOD: ClassVar[int] = 1000
    ATTACK_PERIOD: ClassVar[int] = 1000
    BULLET_IMAGE: ClassVar[str] = ADVANCED_ENEMY_BULLET_IMAGE

    def move(self) -> None:
        """Advance one frame along a diagonal, reversing every second."""
        self._advance_move_timer()
        if self.moving_down:
            self.x -= 5
            self.y += 5
        else:
            self.x += 5
            self.y -= 5
        self._clamp()

    def attack(self, bullets: list[Bullet]) -> None:
        """Append a downward bullet to ``bullets`` when the attack timer fires."""
        super().attack(bullets)