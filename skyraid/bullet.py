"""Projectiles fired by the player and by enemies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

PLAYER_BULLET_IMAGE = "resource/image/bullet.png"
SPECIAL_BULLET_IMAGE = "resource/image/special_bullet.png"
ENEMY_BULLET_IMAGE = "resource/image/enemy_bullet.png"
ADVANCED_ENEMY_BULLET_IMAGE = "resource/image/advanced_enemy_bullet.png"


@dataclass
class Bullet:
    """A bullet travelling vertically; direction -1 is up, 1 is down."""

    x: int
    y: int
    direction: int
    width: int = 20
    height: int = 20
    image: str = PLAYER_BULLET_IMAGE
    destroyed: bool = False

    SPEED: ClassVar[int] = 10
    SCREEN_BOTTOM: ClassVar[int] = 800

    def update(self) -> None:
        """Advance one frame along the bullet's direction."""
        self.y += self.direction * self.SPEED

    def is_off_screen(self) -> bool:
        """True once the bullet has left the top or bottom of the screen."""
        return self.y + self.height < 0 or self.y > self.SCREEN_BOTTOM

    def destroy(self) -> None:
        """Mark the bullet for removal."""
        self.destroyed = True