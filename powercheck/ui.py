"""Window layout: the battery digits, the two buttons and click handling."""

import logging
import subprocess
from dataclasses import dataclass

from powercheck import commands
from powercheck.digits import digit_vertices
from powercheck.letters import create_vertex_letters
from powercheck.shapes import create_quad

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 200
WINDOW_HEIGHT = 90

BUTTON_CAPTIONS = "SD SS"
_CAPTION_START = -0.02
_CAPTION_GAP = 0.7
_DIGIT_ADVANCE = 0.2


@dataclass(frozen=True)
class Button:
    """A clickable rectangle in normalised device coordinates.

    ``(x1, y1)`` is the top-left corner and ``(x2, y2)`` the bottom-right.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    text: str

    def contains(self, x, y):
        """Return True when the point ``(x, y)`` lies inside the button."""
        return self.x1 <= x <= self.x2 and self.y2 <= y <= self.y1

    @property
    def outline(self):
        """Flat vertex data of the button's rectangle outline."""
        return create_quad(self.x1, self.y1, self.x2, self.y2)


SHUTDOWN_BUTTON = Button(-0.85, -0.3, -0.18, -0.8, "shutdown")
SUSPEND_BUTTON = Button(0.17, -0.3, 0.85, -0.8, "suspend")


def get_digits(power):
    """Return ``(vertices, counts)`` drawing the battery level text ``power``.

    Shorter numbers are shifted right so that they stay roughly centred.
    """
    if len(power) == 2:
        offset = 0.15
    elif len(power) < 2:
        offset = 0.25
    else:
        offset = 0.0
    vertices = []
    counts = []
    for ch in power:
        strip, count = digit_vertices(ch, offset)
        vertices.extend(strip)
        counts.append(count)
        offset += _DIGIT_ADVANCE
    return vertices, counts


def text_for_buttons():
    """Return ``(vertices, counts)`` for the button captions."""
    offset = _CAPTION_START
    vertices = []
    counts = []
    for ch in BUTTON_CAPTIONS:
        if ch == " ":
            offset += _CAPTION_GAP
        strip, count, width = create_vertex_letters(ch, offset)
        vertices.extend(strip)
        counts.append(count)
        offset += width
    return vertices, counts


def button_boxes():
    """Return ``(shutdown_outline, suspend_outline, buttons)``."""
    buttons = [SHUTDOWN_BUTTON, SUSPEND_BUTTON]
    return SHUTDOWN_BUTTON.outline, SUSPEND_BUTTON.outline, buttons


def get_buttons():
    """Return ``(vertices, counts)`` for the captions followed by both boxes."""
    vertices, counts = text_for_buttons()
    shutdown_outline, suspend_outline, _ = button_boxes()
    vertices = vertices + shutdown_outline + suspend_outline
    counts = counts + [len(shutdown_outline) // 3, len(suspend_outline) // 3]
    return vertices, counts


def to_gl(mouse_x, mouse_y):
    """Convert window pixels (origin top-left) to normalised coordinates."""
    gl_x = mouse_x / WINDOW_WIDTH * 2 - 1
    gl_y = 1 - mouse_y / WINDOW_HEIGHT * 2
    return gl_x, gl_y


def button_at(buttons, mouse_x, mouse_y):
    """Return the first button under the cursor, or None."""
    gl_x, gl_y = to_gl(mouse_x, mouse_y)
    return next((b for b in buttons if b.contains(gl_x, gl_y)), None)


_ACTIONS = {
    "shutdown": commands.shutdown,
    "suspend": commands.suspend,
}


def on_click(mouse_x, mouse_y):
    """Run the action of the button under a left click; return that button.

    Failures of the system command are logged, not raised.
    """
    _, _, buttons = button_boxes()
    button = button_at(buttons, mouse_x, mouse_y)
    if button is None:
        return None
    action = _ACTIONS.get(button.text)
    if action is not None:
        try:
            action()
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.error("%s failed: %s", button.text, exc)
    return button