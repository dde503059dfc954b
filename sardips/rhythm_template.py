"""Rhythm mini-game templates: song, pages of lyric lines and timed inputs."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from datetime import timedelta


class TapButton(enum.Enum):
    """Which button a tap input expects."""

    CLICK = "Click"


@dataclass
class Tap:
    """A single button press expected at ``start`` seconds into the song."""

    button: TapButton = TapButton.CLICK
    sound_path: str = ""
    start: float = 0.0
    page: int = 0
    line: int = 0


@dataclass
class RhythmTemplateIntro:
    """Opening screen shown until ``end`` seconds."""

    intro_text_key: str = ""
    image: str = ""
    end: float = 0.0

    def duration(self) -> timedelta:
        return timedelta(seconds=self.end)


@dataclass
class RhythmTemplateBackgroundEntry:
    """A background image shown until ``end`` seconds."""

    path: str = ""
    end: float = 0.0


@dataclass
class RhythmTemplateLine:
    """A lyric line ending at ``end``; ``start`` is filled in by ``prepare``."""

    text: str = ""
    end: float = 0.0
    start: float = 0.0


@dataclass
class LineText:
    """A text key shown from ``start`` seconds."""

    text_key: str = ""
    start: float = 0.0

    def duration(self) -> timedelta:
        return timedelta(seconds=self.start)


@dataclass
class RhythmTemplate:
    """A complete rhythm game: song, intro, pages of lines, inputs, backgrounds."""

    song_path: str = ""
    intro: RhythmTemplateIntro = field(default_factory=RhythmTemplateIntro)
    pages: list[list[RhythmTemplateLine]] = field(default_factory=list)
    inputs: list[Tap] = field(default_factory=list)
    backgrounds: list[RhythmTemplateBackgroundEntry] = field(default_factory=list)

    def prepare(self) -> None:
        """Chain line start times and assign each input its page and line.

        Each line starts where the previous one ended; the very first line
        starts at the end of the intro. Inputs outside every line keep their
        current page and line.
        """
        previous_end = self.intro.end
        for page in self.pages:
            for line in page:
                line.start = previous_end
                previous_end = line.end

        for tap in self.inputs:
            found = self.index_for_time(tap.start)
            if found is not None:
                tap.page, tap.line = found

    def page_end(self, page: int) -> float:
        """End time of the last line of ``page``; IndexError if it is empty."""
        return self.pages[page][-1].end

    def page_start(self, page: int) -> float:
        """Start time of the first line of ``page``; IndexError if it is empty."""
        return self.pages[page][0].start

    def index_for_time(self, time: float) -> tuple[int, int] | None:
        """(page, line) of the first line whose span contains ``time``."""
        return next(
            (
                (page_index, line_index)
                for page_index, page in enumerate(self.pages)
                for line_index, line in enumerate(page)
                if line.start <= time <= line.end
            ),
            None,
        )

    def sound_paths(self) -> list[str]:
        """Distinct sound paths used by the inputs, in first-use order."""
        return list(dict.fromkeys(tap.sound_path for tap in self.inputs))


_TEST_LENGTH = 74.0
_TEST_STEP_COUNT = (_TEST_LENGTH / 60.0) * 105.0
_TEST_STEP_SIZE = 60.0 / _TEST_STEP_COUNT
_TEST_FIRST_TAP = 6.0

_TEST_PAGE_ENDS = [
    [6.25, 11.0, 13.0],
    [18.0, 20.0],
    [22.0, 26.0, 29.0, 30.0],
    [33.5, 36.0, 37.0, 38.0],
    [42.0, 44.0, 46.0, 47.0],
    [56.0, 59.0, 65.0],
    [67.0, 74.0],
]


def testing_template() -> RhythmTemplate:
    """The built-in bird song template, not yet prepared."""
    inputs = [
        Tap(
            TapButton.CLICK,
            "sounds/mini_games/rhythm/hey.wav",
            _TEST_FIRST_TAP + i * _TEST_STEP_SIZE,
        )
        for i in range(int(_TEST_STEP_COUNT))
    ]

    pages = []
    line_number = 1
    for ends in _TEST_PAGE_ENDS:
        page = []
        for end in ends:
            page.append(RhythmTemplateLine(text=f"bird.line_{line_number}", end=end))
            line_number += 1
        pages.append(page)

    return RhythmTemplate(
        song_path="sounds/mini_games/rhythm/bird.ogg",
        intro=RhythmTemplateIntro(
            intro_text_key="bird.intro",
            image="textures/mini_games/rhythm/test/intro_background.png",
            end=1.5,
        ),
        pages=pages,
        inputs=inputs,
        backgrounds=[
            RhythmTemplateBackgroundEntry(
                "textures/mini_games/rhythm/test/background_1.png", 3.58
            )
        ],
    )


_TESTING_TEMPLATE = testing_template()


def _default_selection() -> RhythmTemplate | None:
    return copy.deepcopy(_TESTING_TEMPLATE)


@dataclass
class ActiveRhythmTemplate:
    """The rhythm template chosen for the next game."""

    selected_template: RhythmTemplate | None = field(default_factory=_default_selection)

    def active(self) -> RhythmTemplate:
        """The selected template; LookupError if none is selected."""
        if self.selected_template is None:
            raise LookupError("No rhythm template is selected")
        return self.selected_template