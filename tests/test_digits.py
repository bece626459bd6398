import pytest

from powercheck import digits
from powercheck.digits import create_vertex_digits, digit_vertices

ALL_SHAPES = list(range(12))


@pytest.mark.parametrize("number", ALL_SHAPES)
def test_vertex_data_matches_count(number):
    vertices, count = create_vertex_digits(number, 0.0)
    assert len(vertices) == 3 * count


@pytest.mark.parametrize("number", ALL_SHAPES)
def test_vertices_lie_in_plane(number):
    vertices, _ = create_vertex_digits(number, 0.3)
    assert all(z == 0.0 for z in vertices[2::3])


@pytest.mark.parametrize("number", ALL_SHAPES)
def test_offset_shifts_only_x(number):
    base, base_count = create_vertex_digits(number, 0.0)
    moved, moved_count = create_vertex_digits(number, 0.45)
    assert moved_count == base_count
    assert moved[0::3] == pytest.approx([x + 0.45 for x in base[0::3]])
    assert moved[1::3] == base[1::3]


@pytest.mark.parametrize("number", ALL_SHAPES)
def test_shapes_stay_in_cell(number):
    vertices, _ = create_vertex_digits(number, 0.0)
    xs = vertices[0::3]
    ys = vertices[1::3]
    assert min(xs) >= digits.MIN_X
    assert max(xs) <= digits.MAX_X + 0.02
    assert min(ys) >= digits.MIN_Y
    assert max(ys) <= digits.MAX_Y * 1.025


@pytest.mark.parametrize("number", [-1, 12, 42])
def test_unknown_number_is_single_origin_point(number):
    assert create_vertex_digits(number, 0.7) == ([0.0, 0.0, 0.0], 1)


@pytest.mark.parametrize("number, count", [(1, 3), (8, 7)])
def test_pinned_counts(number, count):
    assert create_vertex_digits(number, 0.0)[1] == count


def test_one_starts_at_left_edge():
    vertices, _ = create_vertex_digits(1, 0.0)
    assert vertices[0] == digits.MIN_X


def test_digit_vertices_maps_characters():
    for ch in "0123456789":
        assert digit_vertices(ch, 0.2) == create_vertex_digits(int(ch), 0.2)


def test_colon_characters_map_past_nine():
    assert digit_vertices(":", 0.0) == create_vertex_digits(10, 0.0)
    assert digit_vertices(";", 0.0) == create_vertex_digits(11, 0.0)


def test_other_characters_fall_back():
    assert digit_vertices("%", 0.5) == create_vertex_digits(-1, 0.5)