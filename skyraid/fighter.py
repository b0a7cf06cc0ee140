"""The player's fighter aircraft."""

from __future__ import annotations

from dataclasses import dataclass

FIGHTER_IMAGE = "resource/image/fighter.png"


@dataclass
class Fighter:
    """The player-controlled aircraft, kept inside a movement boundary."""

    x: int
    y: int
    width: int = 50
    height: int = 50
    image: str = FIGHTER_IMAGE
    lives: int = 3
    left_boundary: int = 0
    top_boundary: int = 0
    right_boundary: int = 0
    bottom_boundary: int = 0

    def move(self, dx: int, dy: int) -> None:
        """Shift by (dx, dy), then clamp to the boundary."""
        self.x += dx
        self.y += dy
        self.x = max(self.x, self.left_boundary)
        self.y = max(self.y, self.top_boundary)
        if self.x + self.width > self.right_boundary:
            self.x = self.right_boundary - self.width
        if self.y + self.height > self.bottom_boundary:
            self.y = self.bottom_boundary - self.height

    def set_boundary(self, left: int, top: int, right: int, bottom: int) -> None:
        """Set the rectangle the fighter must stay within."""
        self.left_boundary = left
        self.top_boundary = top
        self.right_boundary = right
        self.bottom_boundary = bottom

    def take_damage(self) -> None:
        """Lose one life."""
        self.lives -= 1