"""Line-strip outlines for the battery percentage digits."""

MIN_X = -0.3
MAX_X = -0.2
SCALE = 1.5

MAX_Y = 0.4 * SCALE
MIN_Y = -0.19 * SCALE

_MID_Y = MAX_Y * 0.37
_MID_Y2 = MAX_Y * 0.5
_MID_Y3 = MAX_Y * 0.6
_MID_Y4 = MAX_Y * 0.75

_BOTTOM_Y = MIN_Y * 0.6
_BOTTOM_Y2 = MIN_Y * 0.7
_BOTTOM_Y3 = MIN_Y * 0.3

_CENTER_X = (MIN_X + MAX_X) / 2

# Corner points shared by several glyphs.
_TL = (MIN_X, MAX_Y)
_TR = (MAX_X, MAX_Y)
_ML = (MIN_X, _MID_Y)
_MR = (MAX_X, _MID_Y)
_BL = (MIN_X, _BOTTOM_Y)
_BR = (MAX_X, _BOTTOM_Y)

_SHAPES = {
    0: (_TL, _TR, _BR, _BL, _TL),
    1: ((MIN_X, 0.0 * SCALE), (MAX_X, MAX_Y * 1.025), (MAX_X, _BOTTOM_Y2)),
    2: ((MIN_X, _MID_Y4), (_CENTER_X, MAX_Y), (MAX_X, _MID_Y4), _BL, (MAX_X + 0.02, _BOTTOM_Y)),
    3: (_TL, _TR, _MR, _ML, _MR, _BR, _BL),
    4: (_TL, (MIN_X, _MID_Y2), (MAX_X, _MID_Y2), _TR, (MAX_X, _BOTTOM_Y2)),
    5: (_TR, _TL, _ML, _MR, _BR, _BL),
    6: (_TR, _TL, _BL, _BR, _MR, _ML),
    7: (_TL, _TR, (_CENTER_X, _BOTTOM_Y2)),
    8: (_TL, _TR, _BR, _BL, _TL, _ML, _MR),
    9: (_TR, _TL, _ML, _MR, _TR, (MAX_X, MIN_Y)),
    # Upper and lower strokes of a colon.
    10: ((MIN_X, _MID_Y4), (MIN_X, _MID_Y3)),
    11: ((MIN_X, 0.0 * SCALE), (MIN_X, _BOTTOM_Y3)),
}


def create_vertex_digits(number, offset):
    """Return ``(vertices, count)`` for a digit shifted right by ``offset``.

    ``vertices`` is flat (x, y, z) data and ``count`` the number of points in
    the line strip. Unknown numbers yield a single point at the origin.
    """
    points = _SHAPES.get(number)
    if points is None:
        return [0.0, 0.0, 0.0], 1
    vertices = [coord for x, y in points for coord in (x + offset, y, 0.0)]
    return vertices, len(points)


def digit_vertices(ch, offset):
    """Return ``(vertices, count)`` for the character ``ch``."""
    return create_vertex_digits(ord(ch) - ord("0"), offset)