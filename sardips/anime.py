"""Sprite-sheet frame animation driven by a repeating timer."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnimeIndices:
    """Inclusive range of atlas frames an animation cycles through."""

    first: int
    last: int

    def __post_init__(self) -> None:
        if self.first > self.last:
            raise ValueError("First index must be less than or equal to last index")


@dataclass
class RepeatingTimer:
    """A timer that fires every ``duration`` seconds and starts over."""

    duration: float
    elapsed: float = 0.0
    times_finished: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("Timer duration must not be negative")

    @property
    def just_finished(self) -> bool:
        return self.times_finished > 0

    def tick(self, delta: float) -> bool:
        """Advance by ``delta`` seconds; return whether the timer fired."""
        if delta < 0:
            raise ValueError("Cannot tick a timer backwards")
        self.elapsed += delta
        if self.duration == 0:
            self.times_finished = 1
            self.elapsed = 0.0
        elif self.elapsed >= self.duration:
            self.times_finished = int(self.elapsed // self.duration)
            self.elapsed %= self.duration
        else:
            self.times_finished = 0
        return self.just_finished


@dataclass
class FrameAnimation:
    """Current atlas index that steps forward each time the timer fires."""

    timer: RepeatingTimer
    indices: AnimeIndices
    index: int = 0

    def tick(self, delta: float) -> int:
        """Advance time and return the (possibly updated) frame index."""
        if self.timer.tick(delta):
            if self.index == self.indices.last:
                self.index = self.indices.first
            else:
                self.index += 1
        return self.index