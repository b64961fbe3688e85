import pytest

from roomfit.core.kinds import priority, rule_for
from roomfit.core.layers import layer_of, layer_summary, shares_space, vertical_range
from roomfit.models.room import Layer


@pytest.mark.parametrize("kind,expected", [
    ("chair", Layer.FLOOR),
    ("table", Layer.FLOOR),
    ("plant", Layer.FLOOR),
    ("tv", Layer.WALL),
    ("whiteboard", Layer.WALL),
    ("panel", Layer.WALL),
    ("decal", Layer.WALL),
    ("ceiling_light", Layer.CEILING),
])
def test_default_layer_by_kind(make, kind, expected):
    assert layer_of(make("x", kind)) == expected


def test_wall_attribute_forces_wall_layer(make):
    assert layer_of(make("shelf", "plant", cy=0, wall="N")) == Layer.WALL


def test_explicit_layer_wins(make):
    laptop = make("laptop", "custom", layer="surface", attachTo="table")
    assert layer_of(laptop) == Layer.SURFACE
    assert laptop.attach_to == "table"


def test_default_vertical_ranges(room, make):
    assert vertical_range(make("a", "chair"), room) == (0.0, 3.0)
    assert vertical_range(make("b", layer="surface"), room) == (2.3, 5.0)
    assert vertical_range(make("c", "tv"), room) == (0.0, 10.0)
    assert vertical_range(make("d", "ceiling_light"), room) == (8.5, 10.0)


def test_mounted_wall_item_gets_tight_range(room, make):
    assert vertical_range(make("tv", "tv", mount_h=7, h=2), room) == (6.0, 8.0)
    assert vertical_range(make("high", "panel", mount_h=9.5, h=2), room) == (8.5, 10.0)
    assert vertical_range(make("low", "panel", mount_h=0.5, h=2), room) == (0.0, 1.5)


def test_mount_height_without_height_uses_full_wall(room, make):
    assert vertical_range(make("tv", "tv", mount_h=7), room) == (0.0, 10.0)


def test_floor_and_ceiling_never_share_space(room, table, make):
    assert not shares_space(table("t", 10, 7), make("light", "ceiling_light"), room)


def test_wall_items_at_different_heights(room, make):
    low = make("low", "panel", mount_h=1, h=1)
    high = make("high", "panel", mount_h=6, h=1)
    also_low = make("also_low", "panel", mount_h=1.2, h=1)
    assert not shares_space(low, high, room)
    assert shares_space(low, also_low, room)


def test_layer_summary(make):
    counts = layer_summary([make("a", "chair"), make("b", "tv"), make("c", "chair")])
    assert counts == {"floor": 2, "surface": 0, "wall": 1, "ceiling": 0}


def test_priority_order(make):
    assert priority(make("a", "chair", locked=True)) == 0
    assert priority(make("b", "chair", cy=0, wall="N")) == 1
    assert priority(make("c", "table")) == 2
    assert priority(make("d", "panel")) == 3
    assert priority(make("e", "chair")) == 4
    assert priority(make("f", "plant")) == 5


def test_unknown_kind_gets_default_rule():
    rule = rule_for("grommet")
    assert rule.priority == 5
    assert rule.default_layer == Layer.FLOOR
    assert rule.role is None
