"""Physics of the sprint mini-game: a jumping runner and scrolling obstacles."""

from __future__ import annotations

from dataclasses import dataclass

HORIZONTAL_SPEED = 30.0
GROUND_Y = -133.0
GRAVITY = 9.8
JUMP_SPEED = 20.0

PLAYER_START_X = -200.0
PLAYER_HALF_SIZE = 32.0
OBSTACLE_COUNT = 100
OBSTACLE_SPACING = 100.0
DESPAWN_X = -500.0


@dataclass
class SprintBody:
    """A body that falls under gravity and stops on the ground."""

    x: float = PLAYER_START_X
    y: float = GROUND_Y
    vx: float = 0.0
    vy: float = 0.0

    def step(self, dt: float) -> None:
        """Move by the velocity for ``dt`` seconds, then apply ground or gravity."""
        self.y += self.vy * dt
        self.x += self.vx * dt
        if self.y < GROUND_Y:
            self.y = GROUND_Y
            self.vy = 0.0
        else:
            self.vy -= GRAVITY * dt

    def jump(self) -> bool:
        """Start a jump if not already moving vertically; return whether it did."""
        if self.vy != 0.0:
            return False
        self.vy = JUMP_SPEED
        return True


def obstacle_positions(count: int) -> list[tuple[float, float]]:
    """Starting positions of ``count`` obstacles spaced along the ground."""
    if count < 0:
        raise ValueError("Obstacle count must not be negative")
    return [(i * OBSTACLE_SPACING, GROUND_Y) for i in range(count)]


def is_off_screen(x: float) -> bool:
    """Whether an obstacle at ``x`` has scrolled far enough left to be removed."""
    return x < DESPAWN_X