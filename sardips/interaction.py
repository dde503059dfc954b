"""Pointer interaction: clickable areas and things that follow the cursor."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

Vec2 = tuple[float, float]


@dataclass(frozen=True)
class Clickable:
    """Rectangle around an entity, given as offsets from its position.

    ``width`` holds the (min, max) x offsets and ``height`` the (min, max)
    y offsets.
    """

    width: Vec2 = (0.0, 0.0)
    height: Vec2 = (0.0, 0.0)

    def contains(self, position: Vec2, point: Vec2) -> bool:
        """Whether ``point`` lies inside the area of an entity at ``position``."""
        x, y = position[0], position[1]
        px, py = point[0], point[1]
        min_x, max_x = self.width
        min_y, max_y = self.height
        return x + min_x <= px <= x + max_x and y + min_y <= py <= y + max_y


@dataclass(frozen=True)
class AttachToCursor:
    """Pins the chosen axes of an entity's position to the cursor."""

    attach_x: bool = True
    attach_y: bool = True

    def with_attach_x(self, attach_x: bool) -> AttachToCursor:
        return replace(self, attach_x=attach_x)

    def with_attach_y(self, attach_y: bool) -> AttachToCursor:
        return replace(self, attach_y=attach_y)

    def apply(self, position: tuple[float, ...], cursor: Vec2) -> tuple[float, ...]:
        """Return ``position`` with the attached axes replaced by the cursor's."""
        result = list(position)
        if self.attach_x:
            result[0] = cursor[0]
        if self.attach_y:
            result[1] = cursor[1]
        return tuple(result)


def _normalize(dx: float, dy: float) -> Vec2:
    length = math.hypot(dx, dy)
    if length == 0:
        return math.nan, math.nan
    return dx / length, dy / length


@dataclass(frozen=True)
class MoveTowardsCursor:
    """Steers the chosen velocity axes towards the cursor at a fixed speed."""

    x: bool = False
    y: bool = False

    def with_x(self, x: bool) -> MoveTowardsCursor:
        return replace(self, x=x)

    def with_y(self, y: bool) -> MoveTowardsCursor:
        return replace(self, y=y)

    def velocity(self, velocity: Vec2, position: Vec2, cursor: Vec2, speed: float) -> Vec2:
        """New velocity pointing from ``position`` to ``cursor`` on enabled axes."""
        dir_x, dir_y = _normalize(cursor[0] - position[0], cursor[1] - position[1])
        vx, vy = velocity
        if self.x:
            vx = dir_x * speed
        if self.y:
            vy = dir_y * speed
        return vx, vy