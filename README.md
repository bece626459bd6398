# powercheck

A small borderless OpenGL window that shows the current battery charge as
line-segment digits, with two buttons below it:

- **SD**: shut the machine down
- **SS**: suspend the machine

The charge is read from `/sys/class/power_supply/BAT0/capacity`. Shutdown and
suspend run the system's own commands on Linux, macOS and Windows; on any other
platform a warning is logged and nothing is run. If a command fails, the error
is logged and the window stays open.

## Installation

```
pip install .
```

This installs the `powercheck` command and its one dependency, `pyglet`.

## Usage

Show the indicator right away:

```
powercheck
```

Closing the window exits the program with status 0.

Run it in silence mode:

```
powercheck --smode
```

(`-smode` is accepted as well.) In silence mode no window is shown at start.
The battery is checked every half second. When the charge is below 10 %, the
window appears and the next check waits one more minute. After four alerts the
count is reset and the program waits three minutes before checking again.
Closing the window in silence mode only hides it until the next alert; the
program keeps running.

If the capacity file cannot be read, the error is logged and the program exits
with status 1.

## Using it from Python

The geometry is plain Python and needs no display:

```python
from powercheck import power, ui

level = power.show("/sys/class/power_supply/BAT0/capacity")
vertices, counts = ui.get_digits(level)
```

`vertices` is a flat list of `x, y, z` coordinates and `counts` gives the number
of points in each line strip, in order. Other pieces:

- `power.check(path)`: True when the charge is below 10 (unreadable numbers count as 0).
- `power.PowerManager.next_delay(silent, low_battery)`: returns `(notify, delay)` for one monitoring step.
- `ui.get_buttons()`: captions and button outlines as `(vertices, counts)`.
- `ui.button_at(buttons, mouse_x, mouse_y)`: the `ui.Button` under a point given in window pixels.
- `ui.on_click(mouse_x, mouse_y)`: runs the shutdown or suspend action of the button there.
- `commands.shutdown(platform)` and `commands.suspend(platform)`: `platform` is `linux`, `darwin` or `windows`, defaulting to the running system.
- `render.Renderer`: draws line strips with a shader program (needs a current OpenGL 4.1 context).
- `render.line_strips(counts)`: yields `(start, count)` for each strip.

## What it does not do

It reads only the first battery, `BAT0`, through the Linux sysfs interface, so
the charge display does not work on other systems. The window size, position,
alert threshold and timings are fixed; there are no settings.

## Development

```
pip install -e ".[test]"
pytest
```