"""
Geometry Utilities

Plan-view geometry for placed objects:
- Building oriented boxes (with wall-mount orientation rules)
- Separating-axis overlap test between two oriented boxes
- Shapely polygons for overlap area and floor coverage reporting
"""

import math
from typing import List, NamedTuple, Tuple

from shapely.affinity import rotate
from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from roomfit.core.layers import layer_of
from roomfit.models.room import Layer, PlacedObject, Room, Wall


class OrientedBox(NamedTuple):
    """Rectangle with center, local width axis (ux, uy) and half-extents."""
    cx: float
    cy: float
    angle: float   # degrees
    ux: float
    uy: float
    hw: float
    hd: float

    @property
    def axes(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Local width axis and local depth axis."""
        return (self.ux, self.uy), (-self.uy, self.ux)


def effective_rotation(obj: PlacedObject) -> float:
    """
    Rotation used for geometry, in degrees.

    Wall-mounted objects ignore their own rotation: E/W items are turned 90
    degrees so their declared width runs along the wall (Y) and their depth
    protrudes into the room (X); N/S items stay at 0.
    """
    if obj.wall in (Wall.EAST, Wall.WEST):
        return 90.0
    if obj.wall in (Wall.NORTH, Wall.SOUTH):
        return 0.0
    return obj.rotation or 0.0


def oriented_box(obj: PlacedObject) -> OrientedBox:
    """
    Convert a PlacedObject to an oriented box.

    Example:
        >>> tv = PlacedObject(id="tv", kind="tv", cx=20, cy=7, w=4.8, d=0.5, wall="E")
        >>> b = oriented_box(tv)
        >>> round(b.uy, 6), b.hw, b.hd
        (1.0, 2.4, 0.25)
    """
    angle = effective_rotation(obj)
    theta = math.radians(angle)
    return OrientedBox(
        cx=obj.cx,
        cy=obj.cy,
        angle=angle,
        ux=math.cos(theta),
        uy=math.sin(theta),
        hw=(obj.w or 0.0) / 2,
        hd=(obj.d or 0.0) / 2,
    )


def _projected_radius(b: OrientedBox, ax: float, ay: float) -> float:
    (ux, uy), (vx, vy) = b.axes
    return b.hw * abs(ux * ax + uy * ay) + b.hd * abs(vx * ax + vy * ay)


def boxes_overlap(a: OrientedBox, b: OrientedBox) -> bool:
    """
    Separating axis test on the four local axes of two rectangles.

    Touching edges count as overlap; only a strict gap separates.
    """
    dx = a.cx - b.cx
    dy = a.cy - b.cy
    for ax, ay in a.axes + b.axes:
        distance = abs(dx * ax + dy * ay)
        if distance > _projected_radius(a, ax, ay) + _projected_radius(b, ax, ay):
            return False
    return True


def check_overlap(obj_a: PlacedObject, obj_b: PlacedObject) -> bool:
    """Check if the footprints of two objects overlap (ignores layers)."""
    return boxes_overlap(oriented_box(obj_a), oriented_box(obj_b))


def box_to_polygon(b: OrientedBox) -> Polygon:
    """Shapely polygon for an oriented box."""
    poly = box(b.cx - b.hw, b.cy - b.hd, b.cx + b.hw, b.cy + b.hd)
    if b.angle:
        poly = rotate(poly, b.angle, origin=(b.cx, b.cy))
    return poly


def object_to_polygon(obj: PlacedObject) -> Polygon:
    """Convert a PlacedObject to a Shapely Polygon."""
    return box_to_polygon(oriented_box(obj))


def overlap_area(obj_a: PlacedObject, obj_b: PlacedObject) -> float:
    """
    Calculate the overlapping footprint area between two objects.

    Returns:
        Overlap area in square feet. Returns 0 if no overlap.
    """
    return object_to_polygon(obj_a).intersection(object_to_polygon(obj_b)).area


def floor_coverage(room: Room, objects: List[PlacedObject]) -> float:
    """
    Percentage (0-100) of the floor covered by floor-layer footprints.

    Overlapping footprints are counted once; anything outside the room is
    ignored.
    """
    footprints = [object_to_polygon(o) for o in objects if layer_of(o) == Layer.FLOOR]
    if not footprints:
        return 0.0
    floor = box(0, 0, room.width, room.depth)
    covered = unary_union(footprints).intersection(floor)
    return (covered.area / floor.area) * 100


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
