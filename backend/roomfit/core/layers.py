"""
Vertical layering model.

Each object lives in a coarse layer (floor/surface/wall/ceiling) and occupies
a height interval. Two objects compete for the same plan footprint only when
they share a layer and their intervals intersect.
"""

from typing import Dict, List, Tuple

from roomfit.core.kinds import rule_for
from roomfit.models.room import Layer, PlacedObject, Room

FLOOR_RANGE = (0.0, 3.0)
SURFACE_RANGE = (2.3, 5.0)
CEILING_BAND = 1.5


def layer_of(obj: PlacedObject) -> Layer:
    """Explicit layer, else wall for wall-mounted objects, else the kind default."""
    if obj.layer is not None:
        return obj.layer
    if obj.wall is not None:
        return Layer.WALL
    return rule_for(obj.kind).default_layer


def vertical_range(obj: PlacedObject, room: Room) -> Tuple[float, float]:
    """Occupied height interval [z0, z1] in feet."""
    layer = layer_of(obj)
    if layer == Layer.WALL:
        if obj.mount_h is not None and obj.h is not None:
            half = obj.h / 2
            return (
                max(0.0, obj.mount_h - half),
                min(room.height, obj.mount_h + half),
            )
        return (0.0, room.height)
    if layer == Layer.CEILING:
        return (room.height - CEILING_BAND, room.height)
    if layer == Layer.SURFACE:
        return SURFACE_RANGE
    return FLOOR_RANGE


def ranges_intersect(r1: Tuple[float, float], r2: Tuple[float, float]) -> bool:
    return min(r1[1], r2[1]) > max(r1[0], r2[0])


def shares_space(a: PlacedObject, b: PlacedObject, room: Room) -> bool:
    """True when a and b are in the same layer at intersecting heights."""
    if layer_of(a) != layer_of(b):
        return False
    return ranges_intersect(vertical_range(a, room), vertical_range(b, room))


def layer_summary(objects: List[PlacedObject]) -> Dict[str, int]:
    """Object count per layer (used in analysis responses)."""
    counts = {layer.value: 0 for layer in Layer}
    for obj in objects:
        counts[layer_of(obj).value] += 1
    return counts
