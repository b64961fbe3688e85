import math

import pytest

from roomfit.core.geometry import (
    boxes_overlap,
    check_overlap,
    effective_rotation,
    floor_coverage,
    object_to_polygon,
    oriented_box,
    overlap_area,
)


def test_free_standing_object_keeps_its_rotation(make):
    obj = make("plant", rotation=30)
    b = oriented_box(obj)
    assert b.angle == 30
    assert b.ux == pytest.approx(math.cos(math.radians(30)))
    assert b.uy == pytest.approx(math.sin(math.radians(30)))


@pytest.mark.parametrize("wall", ["N", "S"])
def test_north_south_wall_items_ignore_rotation(make, wall):
    obj = make("panel", "panel", w=2, d=0.2, rotation=45, wall=wall)
    assert effective_rotation(obj) == 0.0


@pytest.mark.parametrize("wall", ["E", "W"])
def test_east_west_wall_items_span_along_the_wall(make, wall):
    tv = make("tv", "tv", cx=20, cy=7, w=4.8, d=0.5, wall=wall)
    b = oriented_box(tv)
    assert b.angle == 90.0
    minx, miny, maxx, maxy = object_to_polygon(tv).bounds
    # declared width runs along Y, depth protrudes along X
    assert maxy - miny == pytest.approx(4.8)
    assert maxx - minx == pytest.approx(0.5)


def test_separated_boxes(make):
    assert not check_overlap(make("a", cx=0, cy=0, w=2, d=2), make("b", cx=3, cy=0, w=2, d=2))


def test_touching_boxes_count_as_overlap(make):
    assert check_overlap(make("a", cx=0, cy=0, w=2, d=2), make("b", cx=2, cy=0, w=2, d=2))


def test_rotated_box_overlap(make):
    diamond = make("a", cx=0, cy=0, w=2, d=2, rotation=45)
    assert check_overlap(diamond, make("b", cx=2.2, cy=0, w=2, d=2))
    assert not check_overlap(diamond, make("c", cx=2.5, cy=0, w=2, d=2))


def test_aabb_overlap_but_oriented_boxes_separate(make):
    diamond = make("a", cx=0, cy=0, w=2, d=2, rotation=45)
    corner = make("b", cx=1.6, cy=1.6, w=1, d=1)
    assert not check_overlap(diamond, corner)


PAIRS = [
    ((0, 0, 2, 2, 45), (2.2, 0, 2, 2, 0)),
    ((0, 0, 2, 2, 45), (1.6, 1.6, 1, 1, 0)),
    ((5, 5, 4, 1, 30), (7, 6, 3, 0.5, 100)),
    ((5, 5, 4, 1, 10), (5, 8, 4, 1, 170)),
    ((1, 1, 6, 0.4, 135), (1.9, 2, 0.5, 3, 0)),
]


@pytest.mark.parametrize("spec_a,spec_b", PAIRS)
def test_overlap_is_symmetric_and_matches_shapely(make, spec_a, spec_b):
    a = make("a", cx=spec_a[0], cy=spec_a[1], w=spec_a[2], d=spec_a[3], rotation=spec_a[4])
    b = make("b", cx=spec_b[0], cy=spec_b[1], w=spec_b[2], d=spec_b[3], rotation=spec_b[4])
    box_a, box_b = oriented_box(a), oriented_box(b)
    assert boxes_overlap(box_a, box_b) == boxes_overlap(box_b, box_a)
    assert boxes_overlap(box_a, box_b) == object_to_polygon(a).intersects(object_to_polygon(b))


def test_overlap_area(make):
    a = make("a", cx=0, cy=0, w=2, d=2)
    b = make("b", cx=1, cy=0, w=2, d=2)
    assert overlap_area(a, b) == pytest.approx(2.0)
    assert overlap_area(a, make("c", cx=5, cy=5)) == 0.0


def test_floor_coverage_counts_floor_layer_once(room, make, table):
    objects = [
        table("t1", 10, 7),
        table("t2", 10, 7),
        make("panel", "panel", cx=5, cy=0, w=2, d=0.2, wall="N"),
    ]
    assert floor_coverage(room, objects) == pytest.approx(21 / 280 * 100)


def test_floor_coverage_empty_room(room):
    assert floor_coverage(room, []) == 0.0
