"""
Layout Constraints

Detects what is wrong with a layout. Hard constraints (severity "error")
cover room bounds, wall mounting and footprint overlaps; soft constraints
(severity "warning") cover seating clearances and table aisles.

All functions are pure: they read the room and object list and return new
Violation records in a deterministic order (input order, then pair order).
"""

import logging
import math
from typing import List, Optional

from roomfit.core.geometry import boxes_overlap, oriented_box
from roomfit.core.kinds import is_chair, is_table
from roomfit.core.layers import layer_of, shares_space
from roomfit.models.room import (
    Clearances,
    Layer,
    PlacedObject,
    ReasonCode,
    Room,
    Severity,
    Violation,
    Wall,
    severity_for,
)

logger = logging.getLogger(__name__)


def _flag(a: PlacedObject, reason: ReasonCode, b: Optional[PlacedObject] = None) -> Violation:
    return Violation(a=a, b=b, reason=reason, severity=severity_for(reason))


# ============ Hard constraints ============

def is_out_of_bounds(obj: PlacedObject, room: Room) -> bool:
    """
    Conservative bounds check for free-standing objects.

    Uses the larger footprint side as margin in every direction instead of
    the rotated hull, so it holds for any rotation.
    """
    margin = max(obj.w, obj.d)
    return (
        obj.cx - margin < 0
        or obj.cx + margin > room.width
        or obj.cy - margin < 0
        or obj.cy + margin > room.depth
    )


def wall_line(wall: Wall, room: Room) -> float:
    """Coordinate of the wall on its own axis (x for E/W, y for N/S)."""
    if wall == Wall.EAST:
        return room.width
    if wall == Wall.SOUTH:
        return room.depth
    return 0.0


def is_on_wall(obj: PlacedObject, room: Room, tolerance: float) -> bool:
    coord = obj.cx if obj.wall in (Wall.EAST, Wall.WEST) else obj.cy
    return abs(coord - wall_line(obj.wall, room)) <= tolerance


def is_wall_item_outside(obj: PlacedObject, room: Room) -> bool:
    """
    A wall item is outside when its interior edge leaves the room or its
    center is off the wall's span.
    """
    half_depth = obj.d / 2
    if obj.wall == Wall.WEST:
        inner, extent, along, span = obj.cx + half_depth, room.width, obj.cy, room.depth
    elif obj.wall == Wall.EAST:
        inner, extent, along, span = obj.cx - half_depth, room.width, obj.cy, room.depth
    elif obj.wall == Wall.NORTH:
        inner, extent, along, span = obj.cy + half_depth, room.depth, obj.cx, room.width
    else:
        inner, extent, along, span = obj.cy - half_depth, room.depth, obj.cx, room.width
    return not (0 <= inner <= extent) or not (0 <= along <= span)


def check_placement(obj: PlacedObject, room: Room, clearances: Clearances) -> List[Violation]:
    """Bounds and wall-fit violations for a single object."""
    if obj.wall is None:
        if is_out_of_bounds(obj, room):
            return [_flag(obj, ReasonCode.OUT_OF_BOUNDS)]
        return []

    violations = []
    if not is_on_wall(obj, room, clearances.wall_gap_tol):
        violations.append(_flag(obj, ReasonCode.WALL_NOT_ON))
    if is_wall_item_outside(obj, room):
        violations.append(_flag(obj, ReasonCode.OUT_OF_BOUNDS))
    return violations


def can_collide(a: PlacedObject, b: PlacedObject, room: Room) -> bool:
    """Whether a pair is eligible for the footprint overlap test at all."""
    if a.attach_to == b.id or b.attach_to == a.id:
        return False
    if not shares_space(a, b, room):
        return False
    if (
        layer_of(a) == Layer.WALL
        and a.wall is not None
        and b.wall is not None
        and a.wall != b.wall
    ):
        return False
    # Chair/table spacing is a clearance question, not a collision
    if (is_table(a) and is_chair(b)) or (is_chair(a) and is_table(b)):
        return False
    return True


def detect_hard_violations(
    room: Room,
    objects: List[PlacedObject],
    clearances: Optional[Clearances] = None,
) -> List[Violation]:
    """
    Find all error-severity violations.

    Returns:
        Per-object bounds/wall violations in input order, followed by
        overlap violations for every colliding pair (i < j).
    """
    clearances = clearances or Clearances()
    violations: List[Violation] = []

    for obj in objects:
        violations.extend(check_placement(obj, room, clearances))

    boxes = [oriented_box(o) for o in objects]
    for i, obj_a in enumerate(objects):
        for j in range(i + 1, len(objects)):
            obj_b = objects[j]
            if not can_collide(obj_a, obj_b, room):
                continue
            if boxes_overlap(boxes[i], boxes[j]):
                violations.append(_flag(obj_a, ReasonCode.OVERLAP, obj_b))

    return violations


# ============ Soft constraints ============

def chair_table_clearance(chair: PlacedObject, table: PlacedObject) -> float:
    """Distance from a chair center to the table's axis-aligned edge."""
    dx = max(0.0, abs(chair.cx - table.cx) - table.w / 2)
    dy = max(0.0, abs(chair.cy - table.cy) - table.d / 2)
    return math.hypot(dx, dy)


def wall_clearance(table: PlacedObject, room: Room) -> float:
    """Gap between a table and its nearest wall, using its larger side."""
    nearest = min(table.cx, room.width - table.cx, table.cy, room.depth - table.cy)
    return nearest - max(table.w, table.d) / 2


def detect_soft_violations(
    room: Room,
    objects: List[PlacedObject],
    clearances: Optional[Clearances] = None,
) -> List[Violation]:
    """Find all warning-severity violations (seating and aisle clearances)."""
    clearances = clearances or Clearances()
    chairs = [o for o in objects if is_chair(o)]
    tables = [o for o in objects if is_table(o)]
    violations: List[Violation] = []

    for chair in chairs:
        for table in tables:
            if chair_table_clearance(chair, table) < clearances.chair_back_to_table:
                violations.append(_flag(chair, ReasonCode.CHAIR_TOO_CLOSE_TO_TABLE, table))

    for i, chair_a in enumerate(chairs):
        for chair_b in chairs[i + 1:]:
            distance = math.hypot(chair_a.cx - chair_b.cx, chair_a.cy - chair_b.cy)
            if distance < clearances.chair_to_chair:
                violations.append(_flag(chair_a, ReasonCode.CHAIRS_TOO_CLOSE, chair_b))

    for table in tables:
        if wall_clearance(table, room) < clearances.aisle_min:
            violations.append(_flag(table, ReasonCode.AISLE_VIOLATION))

    return violations


def detect_collisions(
    room: Room,
    objects: List[PlacedObject],
    clearances: Optional[Clearances] = None,
) -> List[Violation]:
    """All violations: hard first, then soft."""
    violations = detect_hard_violations(room, objects, clearances)
    violations.extend(detect_soft_violations(room, objects, clearances))
    logger.debug(
        "Detected %d violation(s) (%d error, %d warning) across %d object(s)",
        len(violations), count_errors(violations), count_warnings(violations), len(objects),
    )
    return violations


def count_errors(violations: List[Violation]) -> int:
    return sum(1 for v in violations if v.severity == Severity.ERROR)


def count_warnings(violations: List[Violation]) -> int:
    return sum(1 for v in violations if v.severity == Severity.WARNING)
