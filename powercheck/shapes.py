"""Outline shapes drawn as line strips."""


def create_quad(x1, y1, x2, y2):
    """Return a closed rectangle outline as flat (x, y, z) vertex data.

    The outline starts and ends at ``(x1, y1)`` so that it can be drawn as a
    single line strip of five points.
    """
    corners = [(x1, y1), (x1, y2), (x2, y2), (x2, y1), (x1, y1)]
    return [coord for x, y in corners for coord in (x, y, 0.0)]