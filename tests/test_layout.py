import numpy as np
import pytest

from hexkernel import (
    SQRT3, Coordinates, EdgeCoordinates, FLAT_TOP, POINTY_TOP, Layout, Point, PointPair,
)


@pytest.fixture
def layout():
    return Layout.new(POINTY_TOP, [10.0, 5.0], [2.5, 3.0])


def test_orientation_presets():
    assert POINTY_TOP.mat2screen == ((SQRT3, SQRT3 / 2.0), (0.0, 1.5))
    assert POINTY_TOP.mat2coord == ((SQRT3 / 3.0, -1.0 / 3.0), (0.0, 2.0 / 3.0))
    assert POINTY_TOP.start_angle == 0.5
    assert FLAT_TOP.mat2screen == ((1.5, 0.0), (SQRT3 / 2.0, SQRT3))
    assert FLAT_TOP.mat2coord == ((2.0 / 3.0, 0.0), (-1.0 / 3.0, SQRT3 / 3.0))
    assert FLAT_TOP.start_angle == 0.0
    assert SQRT3 == pytest.approx(1.7320508, abs=1e-7)


def test_vertex_offset():
    layout = Layout.new(POINTY_TOP, [1.0, 0.5], [2.5, 3.0])
    expected = [
        Point(SQRT3 / 2.0, 0.25),
        Point(SQRT3 / 2.0, -0.25),
        Point(0.0, -0.5),
        Point(-SQRT3 / 2.0, -0.25),
        Point(-SQRT3 / 2.0, 0.25),
        Point(0.0, 0.5),
    ]
    assert [layout.vertex_offset(i) for i in range(6)] == expected


def test_center_of_hex(layout):
    assert layout.center_of_hex(Coordinates.at(1, 2)) == Point(20.0 * SQRT3 + 2.5, 18.0)
    assert layout.center_of_hex(Coordinates.at(0, 0)) == Point(2.5, 3.0)


def test_vertices_of_hex(layout):
    c = Coordinates.at(-2, 1)
    center = layout.center_of_hex(c)
    vertices = layout.vertices_of_hex(c)
    assert len(vertices) == 6
    for i, v in enumerate(vertices):
        assert v == center + layout.vertex_offset(i)


def test_all_edges_chain_vertices(layout):
    c = Coordinates.at(3, -1)
    vertices = layout.vertices_of_hex(c)
    edges = layout.all_edges_of_hex(c)
    assert len(edges) == 6
    for i, edge in enumerate(edges):
        assert edge == PointPair(vertices[i], vertices[(i + 1) % 6])
        assert edge == layout.vertices_of_edge(EdgeCoordinates(c, i))
        assert edge == layout.edge_towards(c, i)


def test_edge_wraps_to_first_vertex(layout):
    c = Coordinates.at(0, 0)
    vertices = layout.vertices_of_hex(c)
    assert layout.edge_towards(c, 5) == PointPair(vertices[5], vertices[0])


def test_pointy_top_edges_face_neighbours(layout):
    c = Coordinates.at(1, 1)
    for d in range(6):
        edge = layout.edge_towards(c, d)
        other = layout.edge_towards(c.neighbour(d), (d + 3) % 6)
        assert edge == PointPair(other.b, other.a)


def test_bounding_box_pointy_top():
    layout = Layout.new(POINTY_TOP, [1.0, 0.5], [0.0, 0.0])
    box = layout.bounding_box_of(Coordinates.at(0, 0))
    assert box.x == pytest.approx(-SQRT3 / 2.0)
    assert box.y == pytest.approx(-0.5)
    assert box.width == pytest.approx(SQRT3)
    assert box.height == pytest.approx(1.0)


def test_bounding_box_flat_top():
    layout = Layout.new(FLAT_TOP, [1.0, 1.0], [10.0, 20.0])
    x, y, w, h = layout.bounding_box_of(Coordinates.at(0, 0))
    assert (x, y) == pytest.approx((9.0, 20.0 - SQRT3 / 2.0))
    assert (w, h) == pytest.approx((2.0, SQRT3))


def test_bounding_box_contains_vertices(layout):
    c = Coordinates.at(-4, 2)
    box = layout.bounding_box_of(c)
    for v in layout.vertices_of_hex(c):
        assert box.x - 1e-9 <= v.x <= box.x + box.width + 1e-9
        assert box.y - 1e-9 <= v.y <= box.y + box.height + 1e-9


def test_move_to_returns_new_layout(layout):
    moved = layout.move_to((100.0, 50.0))
    assert moved.origin == Point(100.0, 50.0)
    assert moved.radius == layout.radius
    assert layout.origin == Point(2.5, 3.0)
    c = Coordinates.at(2, 2)
    assert moved.center_of_hex(c) - layout.center_of_hex(c) == Point(97.5, 47.0)


def test_scale_returns_new_layout(layout):
    assert layout.scale((2.0, 3.0)).radius == Point(20.0, 15.0)
    assert layout.scale(2).radius == Point(20.0, 10.0)
    assert layout.radius == Point(10.0, 5.0)


def test_zero_radius_rejected():
    with pytest.raises(ValueError):
        Layout.new(POINTY_TOP, [0.0, 5.0], [0.0, 0.0])
    with pytest.raises(ValueError):
        Layout.new(POINTY_TOP, [1.0, 1.0], [0.0, 0.0]).scale(0)


def test_centers_of_hexes_matches_scalar(layout):
    coords = [Coordinates.at(q, r) for q in range(-3, 4) for r in range(-3, 4)]
    centers = layout.centers_of_hexes(coords)
    assert centers.shape == (len(coords), 2)
    for c, (x, y) in zip(coords, centers):
        assert layout.center_of_hex(c) == Point(x, y)


def test_coords_at_points_roundtrip(layout):
    qr = np.array([(q, r) for q in range(-4, 5) for r in range(-4, 5)])
    centers = layout.centers_of_hexes(qr)
    assert np.array_equal(layout.coords_at_points(centers), qr)


def test_coords_at_points_accepts_point_likes(layout):
    out = layout.coords_at_points([Point(44.5, 17.0), (2.5, 3.0)])
    assert out.tolist() == [[1, 2], [0, 0]]


def test_batch_queries_handle_empty_input(layout):
    assert layout.centers_of_hexes([]).shape == (0, 2)
    assert layout.coords_at_points([]).shape == (0, 2)


def test_batch_queries_reject_bad_shape(layout):
    with pytest.raises(ValueError):
        layout.centers_of_hexes(np.zeros((4, 3)))


def test_constructor_coerces_point_likes():
    layout = Layout(POINTY_TOP, (10.0, 5.0), [2.5, 3.0])
    assert layout.radius == Point(10.0, 5.0)
    assert layout.origin == Point(2.5, 3.0)
    assert layout.coord_at((44.5, 17.0)) == Coordinates.at(1, 2)


def test_scale_accepts_numpy_scalars(layout):
    assert layout.scale(np.int64(2)).radius == Point(20.0, 10.0)
    assert layout.scale(np.float64(0.5)).radius == Point(5.0, 2.5)
    with pytest.raises(TypeError):
        layout.scale(True)
