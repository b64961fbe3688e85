"""
Kind Rules

One lookup table for everything the engine decides from an object's kind:
who yields in a conflict, which vertical layer it lives in by default, and
whether it takes part in the seating rules.
"""

from typing import Dict, NamedTuple, Optional

from roomfit.models.room import Layer, PlacedObject


class KindRule(NamedTuple):
    priority: int            # lower moves less; 0 and 1 are reserved for locked/wall
    default_layer: Layer
    role: Optional[str] = None


DEFAULT_RULE = KindRule(priority=5, default_layer=Layer.FLOOR)

KIND_RULES: Dict[str, KindRule] = {
    "table": KindRule(priority=2, default_layer=Layer.FLOOR, role="table"),
    "panel": KindRule(priority=3, default_layer=Layer.WALL),
    "chair": KindRule(priority=4, default_layer=Layer.FLOOR, role="chair"),
    "tv": KindRule(priority=5, default_layer=Layer.WALL),
    "whiteboard": KindRule(priority=5, default_layer=Layer.WALL),
    "decal": KindRule(priority=5, default_layer=Layer.WALL),
    "ceiling_light": KindRule(priority=5, default_layer=Layer.CEILING),
}

LOCKED_PRIORITY = 0
WALL_PRIORITY = 1


def rule_for(kind: str) -> KindRule:
    return KIND_RULES.get(kind, DEFAULT_RULE)


def priority(obj: PlacedObject) -> int:
    """Conflict priority: the higher number is the one that gets moved."""
    if obj.locked:
        return LOCKED_PRIORITY
    if obj.wall is not None:
        return WALL_PRIORITY
    return rule_for(obj.kind).priority


def is_table(obj: PlacedObject) -> bool:
    return rule_for(obj.kind).role == "table"


def is_chair(obj: PlacedObject) -> bool:
    return rule_for(obj.kind).role == "chair"


def is_movable(obj: PlacedObject) -> bool:
    """Locked and wall-mounted objects are never displaced by the resolver."""
    return not obj.locked and obj.wall is None
