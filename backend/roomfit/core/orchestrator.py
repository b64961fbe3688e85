"""
Layout Orchestrator ("make it valid")

Runs full passes of resolve -> seat chairs -> space wall items -> re-check
until the layout meets the quality bar or the pass budget is exhausted.
"""

import logging
from typing import List, Optional

from roomfit.core.constraints import count_errors, count_warnings, detect_collisions, wall_line
from roomfit.core.geometry import clamp
from roomfit.core.kinds import is_chair, is_movable, is_table
from roomfit.core.resolver import pull_toward_center, resolve_collisions
from roomfit.models.room import (
    Clearances,
    PlacedObject,
    QualityPolicy,
    ReasonCode,
    Room,
    ValidationResult,
    Wall,
)

logger = logging.getLogger(__name__)

RESOLVE_ITERATIONS = 8
WALL_PAD = 0.5           # keep wall items this far from the corners
MIN_WALL_GAP = 0.5
DEFAULT_WALL_ITEM_WIDTH = 1.0
AISLE_NUDGE = 1 / 3      # fraction of the way to the room center

NEAR_ROW_ROTATION = 180.0
FAR_ROW_ROTATION = 0.0


def _place_row(row: List[PlacedObject], table: PlacedObject, y: float, rotation: float, spacing: float) -> None:
    if not row:
        return
    row.sort(key=lambda c: c.cx)
    start_x = table.cx - (len(row) - 1) * spacing / 2
    for i, chair in enumerate(row):
        chair.cx = start_x + i * spacing
        chair.cy = y
        chair.rotation = rotation


def redistribute_chairs(
    objects: List[PlacedObject],
    clearances: Optional[Clearances] = None,
) -> List[PlacedObject]:
    """
    Seat unlocked chairs in two rows facing the largest table.

    Chairs at or above the table's center line form the near row, the rest
    the far row. Each row keeps its left-to-right order and is centered on
    the table at the chair-back clearance from its edge.
    """
    clearances = clearances or Clearances()
    result = [obj.model_copy() for obj in objects]

    tables = [o for o in result if is_table(o)]
    if not tables:
        return result
    table = max(tables, key=lambda t: t.w * t.d)

    chairs = [o for o in result if is_chair(o) and is_movable(o)]
    near = [c for c in chairs if c.cy <= table.cy]
    far = [c for c in chairs if c.cy > table.cy]

    offset = table.d / 2 + clearances.chair_back_to_table
    _place_row(near, table, table.cy - offset, NEAR_ROW_ROTATION, clearances.chair_to_chair)
    _place_row(far, table, table.cy + offset, FAR_ROW_ROTATION, clearances.chair_to_chair)
    return result


def space_wall_items(room: Room, objects: List[PlacedObject]) -> List[PlacedObject]:
    """
    Evenly distribute unlocked wall items along each wall.

    Items keep their order along the wall, get equal gaps (never below
    MIN_WALL_GAP) and are pinned exactly onto the wall line.
    """
    result = [obj.model_copy() for obj in objects]

    for wall in (Wall.NORTH, Wall.SOUTH, Wall.EAST, Wall.WEST):
        items = [o for o in result if o.wall == wall and not o.locked]
        if not items:
            continue

        along_x = wall in (Wall.NORTH, Wall.SOUTH)
        length = room.width if along_x else room.depth
        items.sort(key=lambda o: o.cx if along_x else o.cy)

        sizes = [o.w or DEFAULT_WALL_ITEM_WIDTH for o in items]
        free = max(0.0, (length - 2 * WALL_PAD) - sum(sizes))
        gap = max(MIN_WALL_GAP, free / (len(items) + 1))

        line = wall_line(wall, room)
        cursor = WALL_PAD + gap
        for obj, size in zip(items, sizes):
            center = clamp(cursor + size / 2, 0, length)
            if along_x:
                obj.cx, obj.cy = center, line
            else:
                obj.cx, obj.cy = line, center
            cursor += size + gap

    return result


def _nudge_lone_aisle_table(room: Room, objects: List[PlacedObject], violations) -> None:
    hits = [v.a.id for v in violations if v.reason == ReasonCode.AISLE_VIOLATION]
    if len(hits) != 1:
        return
    table = next(o for o in objects if o.id == hits[0])
    if is_movable(table):
        pull_toward_center(table, room, AISLE_NUDGE)


def make_valid(
    room: Room,
    objects: List[PlacedObject],
    policy: Optional[QualityPolicy] = None,
    clearances: Optional[Clearances] = None,
) -> ValidationResult:
    """
    Iterate until the layout has no errors and at most
    `policy.max_warnings` warnings, or `policy.max_passes` passes ran.

    Non-convergence is not an error: the best-effort layout is returned with
    whatever violations remain.
    """
    policy = policy or QualityPolicy()
    clearances = clearances or Clearances()
    working = [obj.model_copy() for obj in objects]
    violations = detect_collisions(room, working, clearances)

    for pass_number in range(1, policy.max_passes + 1):
        working = resolve_collisions(room, working, RESOLVE_ITERATIONS, clearances).objects
        working = redistribute_chairs(working, clearances)
        working = space_wall_items(room, working)

        _nudge_lone_aisle_table(room, working, detect_collisions(room, working, clearances))

        violations = detect_collisions(room, working, clearances)
        errors, warnings = count_errors(violations), count_warnings(violations)
        logger.debug("[Validator] pass %d: %d error(s), %d warning(s)", pass_number, errors, warnings)
        if errors == 0 and warnings <= policy.max_warnings:
            logger.info("[Validator] Layout valid after %d pass(es), %d warning(s)", pass_number, warnings)
            return ValidationResult(objects=working, violations=violations, passes_used=pass_number)

    logger.info(
        "[Validator] Stopped after %d passes: %d error(s), %d warning(s) remain",
        policy.max_passes, count_errors(violations), count_warnings(violations),
    )
    return ValidationResult(objects=working, violations=violations, passes_used=policy.max_passes)
