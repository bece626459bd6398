"""Line-strip outlines for button captions."""

MIN_X = -0.6
MAX_X = -0.5
TOP_Y = -0.4
BOTTOM_Y = -0.7

_TL = (MIN_X, TOP_Y)
_TR = (MAX_X, TOP_Y)
_BL = (MIN_X, BOTTOM_Y)
_BR = (MAX_X, BOTTOM_Y)
_E_RIGHT = MAX_X + 0.03
_T_STEM = MIN_X + 0.05

# Each letter maps to its line-strip points and its horizontal advance.
_LETTERS = {
    "S": ((_TR, (MIN_X, TOP_Y - 0.1), (MAX_X, TOP_Y - 0.2), _BL), 0.15),
    "D": ((_TL, _BL, (MAX_X, BOTTOM_Y + 0.05), (MAX_X, TOP_Y - 0.05), _TL), 0.15),
    "T": (
        ((MIN_X + 0.02, TOP_Y), (_T_STEM, TOP_Y), (_T_STEM, BOTTOM_Y - 0.01), (_T_STEM, TOP_Y), (MIN_X + 0.12, TOP_Y)),
        0.15,
    ),
    "E": (
        ((_E_RIGHT, TOP_Y), _TL, (MIN_X, TOP_Y - 0.15), (_E_RIGHT, TOP_Y - 0.15), (MIN_X, TOP_Y - 0.15), _BL, (_E_RIGHT, BOTTOM_Y)),
        0.1,
    ),
    "O": ((_TL, _BL, _BR, _TR, _TL), 0.15),
    "N": ((_BL, _TL, _BR, _TR), 0.2),
    "P": (((MIN_X, BOTTOM_Y - 0.03), _TL, (MIN_X + 0.05, TOP_Y), (MAX_X, TOP_Y - 0.15), (MIN_X, TOP_Y - 0.22)), 0.15),
}


def create_vertex_letters(letter, offset):
    """Return ``(vertices, count, width)`` for a letter shifted by ``offset``.

    ``width`` is the horizontal advance to the next letter. Unknown letters
    (including space) yield a single origin point and no advance.
    """
    entry = _LETTERS.get(letter)
    if entry is None:
        return [0.0, 0.0, 0.0], 1, 0.0
    points, width = entry
    vertices = [coord for x, y in points for coord in (x + offset, y, 0.0)]
    return vertices, len(points), width