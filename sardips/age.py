"""How long a simulated creature has been alive."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

_SECONDS_PER_MINUTE = 60
_MINUTES_PER_HOUR = 60
_HOURS_PER_DAY = 24
_DAYS_PER_YEAR = 365


def _as_timedelta(delta: timedelta | float) -> timedelta:
    if isinstance(delta, timedelta):
        return delta
    return timedelta(seconds=delta)


@dataclass
class Age:
    """Accumulated lifetime of an entity."""

    duration: timedelta = field(default_factory=timedelta)

    def lived_for_text(self) -> str:
        """Return the age in its largest whole unit, e.g. ``"3 d"``."""
        seconds = int(self.duration.total_seconds())
        minutes = seconds // _SECONDS_PER_MINUTE
        hours = minutes // _MINUTES_PER_HOUR
        days = hours // _HOURS_PER_DAY
        years = days // _DAYS_PER_YEAR

        if years > 0:
            return f"{years} y"
        if days > 0:
            return f"{days} d"
        if hours > 0:
            return f"{hours} h"
        if minutes > 0:
            return f"{minutes} m"
        return f"{seconds} s"

    def tick(self, delta: timedelta | float) -> None:
        """Advance the age by ``delta`` (a timedelta or seconds)."""
        self.duration += _as_timedelta(delta)