"""
Sweep Resolver

Moves objects apart until the hard violations are gone or the sweep budget
runs out, then relaxes the remaining clearance warnings in one analytical
pass. Locked and wall-mounted objects are never displaced.

Algorithm per sweep:
1. Recompute hard violations (stop when there are none)
2. For each conflicting pair: step the lower-priority object away from
   the other one
3. For each bounds/wall-fit violation: clamp the object back inside
"""

import logging
import math
from typing import Dict, List, Optional, Tuple

from roomfit.core.constraints import (
    count_errors,
    count_warnings,
    detect_collisions,
    detect_hard_violations,
    detect_soft_violations,
)
from roomfit.core.geometry import clamp
from roomfit.core.kinds import is_movable, priority
from roomfit.models.room import (
    Clearances,
    PlacedObject,
    ReasonCode,
    ResolveResult,
    Room,
)

logger = logging.getLogger(__name__)

SWEEP_STEP = 0.25       # ft moved per sweep for an overlapping pair
SWEEP_MARGIN = 0.25     # keep nudged centers this far from the walls
BOUNDS_MARGIN = 0.5     # clamp margin for out-of-bounds objects
SOFT_SLACK = 0.1        # extra clearance added when relaxing warnings
AISLE_PULL = 0.25       # fraction of the way to the room center per pass


def unit_vector(dx: float, dy: float) -> Tuple[float, float]:
    """Normalized (dx, dy); coincident points fall back to +X."""
    length = math.hypot(dx, dy)
    if length == 0:
        return (1.0, 0.0)
    return (dx / length, dy / length)


def clamp_inside(obj: PlacedObject, room: Room, margin: float) -> None:
    obj.cx = clamp(obj.cx, margin, room.width - margin)
    obj.cy = clamp(obj.cy, margin, room.depth - margin)


def pull_toward_center(obj: PlacedObject, room: Room, fraction: float) -> None:
    center_x, center_y = room.center
    obj.cx += (center_x - obj.cx) * fraction
    obj.cy += (center_y - obj.cy) * fraction


def choose_mover(a: PlacedObject, b: PlacedObject) -> Tuple[PlacedObject, PlacedObject]:
    """(mover, anchor): the higher priority number moves, ties move `a`."""
    if priority(a) >= priority(b):
        return a, b
    return b, a


def _nudge_apart(mover: PlacedObject, anchor: PlacedObject, room: Room) -> None:
    angle = math.atan2(mover.cy - anchor.cy, mover.cx - anchor.cx)
    mover.cx = clamp(mover.cx + math.cos(angle) * SWEEP_STEP, SWEEP_MARGIN, room.width - SWEEP_MARGIN)
    mover.cy = clamp(mover.cy + math.sin(angle) * SWEEP_STEP, SWEEP_MARGIN, room.depth - SWEEP_MARGIN)


def _sweep(room: Room, by_id: Dict[str, PlacedObject], violations) -> None:
    for violation in violations:
        obj_a = by_id[violation.a.id]
        if violation.b is None:
            if is_movable(obj_a):
                clamp_inside(obj_a, room, BOUNDS_MARGIN)
            continue

        mover, anchor = choose_mover(obj_a, by_id[violation.b.id])
        if not is_movable(mover):
            continue
        _nudge_apart(mover, anchor, room)


def seat_chair(chair: PlacedObject, table: PlacedObject, room: Room, clearances: Clearances) -> None:
    """Place a chair along the table-to-chair direction at the required clearance."""
    ux, uy = unit_vector(chair.cx - table.cx, chair.cy - table.cy)
    need = clearances.chair_back_to_table + SOFT_SLACK
    chair.cx = clamp(table.cx + ux * (table.w / 2 + need), SWEEP_MARGIN, room.width - SWEEP_MARGIN)
    chair.cy = clamp(table.cy + uy * (table.d / 2 + need), SWEEP_MARGIN, room.depth - SWEEP_MARGIN)


def space_chairs(chair_a: PlacedObject, chair_b: PlacedObject, clearances: Clearances) -> None:
    """Spread two chairs to the required spacing along their connecting line."""
    ux, uy = unit_vector(chair_a.cx - chair_b.cx, chair_a.cy - chair_b.cy)
    separation = clearances.chair_to_chair + SOFT_SLACK

    if not is_movable(chair_a) and not is_movable(chair_b):
        return
    if not is_movable(chair_a):
        chair_b.cx = chair_a.cx - ux * separation
        chair_b.cy = chair_a.cy - uy * separation
        return
    if not is_movable(chair_b):
        chair_a.cx = chair_b.cx + ux * separation
        chair_a.cy = chair_b.cy + uy * separation
        return

    mid_x = (chair_a.cx + chair_b.cx) / 2
    mid_y = (chair_a.cy + chair_b.cy) / 2
    half = separation / 2
    chair_a.cx, chair_a.cy = mid_x + ux * half, mid_y + uy * half
    chair_b.cx, chair_b.cy = mid_x - ux * half, mid_y - uy * half


def relax_warnings(
    room: Room,
    by_id: Dict[str, PlacedObject],
    objects: List[PlacedObject],
    clearances: Clearances,
) -> None:
    """One analytical pass over the current soft violations."""
    for violation in detect_soft_violations(room, objects, clearances):
        obj_a = by_id[violation.a.id]
        if violation.reason == ReasonCode.CHAIR_TOO_CLOSE_TO_TABLE:
            if is_movable(obj_a):
                seat_chair(obj_a, by_id[violation.b.id], room, clearances)
        elif violation.reason == ReasonCode.CHAIRS_TOO_CLOSE:
            space_chairs(obj_a, by_id[violation.b.id], clearances)
        elif violation.reason == ReasonCode.AISLE_VIOLATION:
            if is_movable(obj_a):
                pull_toward_center(obj_a, room, AISLE_PULL)


def resolve_collisions(
    room: Room,
    objects: List[PlacedObject],
    iterations: int = 6,
    clearances: Optional[Clearances] = None,
) -> ResolveResult:
    """
    Separate colliding objects and relax clearance warnings.

    Args:
        room: Room dimensions
        objects: Current layout (not modified)
        iterations: Maximum number of hard-violation sweeps
        clearances: Clearance policy (defaults when omitted)

    Returns:
        ResolveResult with moved copies of the objects and the full set of
        violations that remain afterwards.
    """
    clearances = clearances or Clearances()
    working = [obj.model_copy() for obj in objects]
    by_id = {obj.id: obj for obj in working}

    sweeps = 0
    for _ in range(iterations):
        errors = detect_hard_violations(room, working, clearances)
        if not errors:
            break
        sweeps += 1
        _sweep(room, by_id, errors)

    relax_warnings(room, by_id, working, clearances)

    remaining = detect_collisions(room, working, clearances)
    logger.debug(
        "[Resolver] %d sweep(s), %d error(s) and %d warning(s) remain",
        sweeps, count_errors(remaining), count_warnings(remaining),
    )
    return ResolveResult(objects=working, remaining=remaining)
