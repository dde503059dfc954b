# sardips

Plain-Python rules and data models for a virtual pet game. It has no
rendering or game engine. Each piece is a small dataclass or function that a
game loop can call.

## Modules

- `sardips.age`
  - `Age` holds a `timedelta`.
  - `tick(delta)` accepts a `timedelta` or a number of seconds.
  - `lived_for_text()` gives the age in its largest whole unit: `"2 y"`,
    `"3 d"`, `"5 h"`, `"12 m"` or `"40 s"`.
- `sardips.anime`
  - `AnimeIndices` is an inclusive range of frames. It raises `ValueError`
    when `first > last`.
  - `RepeatingTimer` fires every `duration` seconds.
  - `FrameAnimation` steps its frame `index` each time the timer fires. After
    `last` it wraps back to `first`.
- `sardips.money`
  - `Money` is an integer count of cents.
  - `Wallet` prints its balance with two decimals, so `Wallet(1234)` prints as
    `12.34`.
  - `MoneyHungry` records a previous balance and a maximum level of care.
- `sardips.interaction`
  - `Clickable` is a hit box given as offsets around a position. Its method is
    `contains(position, point)`.
  - `AttachToCursor.apply(position, cursor)` pins the chosen axes to the
    cursor.
  - `MoveTowardsCursor.velocity(...)` steers the chosen velocity axes towards
    the cursor at a given speed.
- `sardips.sprint` covers the runner physics of the sprint mini-game.
  - `SprintBody` has `step(dt)`, which applies gravity and the ground at
    `GROUND_Y`.
  - `SprintBody.jump()` starts a jump only while vertical speed is zero.
  - `obstacle_positions(count)` gives obstacle start positions.
  - `is_off_screen(x)` tells when an obstacle has scrolled far enough left to
    be removed.
- `sardips.rhythm_template` describes rhythm-game templates: `RhythmTemplate`,
  `RhythmTemplateIntro`, `RhythmTemplateLine`, `RhythmTemplateBackgroundEntry`,
  `Tap`, `TapButton` and `LineText`.
  - `prepare()` chains the line start times and assigns each tap its page and
    line.
  - `index_for_time(t)`, `page_start(p)`, `page_end(p)` and `sound_paths()`
    look things up.
  - `testing_template()` builds the built-in bird song template.
  - `ActiveRhythmTemplate` holds the selected template.
- `sardips.console_commands` handles the developer console's commands.
  - `CommandKind` lists the commands.
  - `parse_command(text)` returns a `DevConsoleCommand` or `None`. It raises
    `UnknownCommandError` for an unknown word.
  - `complete_command(text, food_names)` does tab completion.
  - `command_names()` and `common_prefix(matches)` are also available.
- `sardips.dev_console` holds the console's state.
  - `DevConsoleInput.press(key, shift, food_names)` takes key codes such as
    `"KeyA"`, `"Digit1"`, `"Tab"`, `"ArrowUp"`, `"Backspace"` and `"Enter"`.
  - `DevConsoleInput.submit()` parses the line and records it.
  - `DevConsoleHistory` keeps what was typed and printed.
  - `CursorFlash` blinks the cursor every half second.

## Example

```python
from datetime import timedelta

from sardips.age import Age
from sardips.console_commands import complete_command, parse_command
from sardips.money import Wallet
from sardips.rhythm_template import testing_template

print(Age(timedelta(days=3)).lived_for_text())   # 3 d
print(Wallet(1234))                              # 12.34

print(complete_command("spawn_f"))               # spawn_food
command = parse_command("set_sim_time_scale 2.5")
print(command.kind, command.argument)            # CommandKind.SET_SIM_TIME_SCALE 2.5

template = testing_template()
template.prepare()
print(template.index_for_time(7.0))              # (0, 1)
print(template.page_start(1))                    # 13.0
```

## What it does not do

This is a library only. It has:

- no window, drawing, sound or input handling;
- no command to run;
- no save files or other storage.

Several things are also missing. There are no pet or species names, food
catalogue or food preferences, and no colour palettes or button styles.
Mini-game prizes and a random spawning area are missing too.

The console commands are parsed, but nothing here carries them out.

## Installing

```
pip install .
pip install ".[test]"
pytest
```

Python 3.10 or later; no third-party runtime dependencies.