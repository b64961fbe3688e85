"""
Presets

Room templates, default object sizes per kind, and the baseline meeting
room used as a starting layout.
"""

from typing import Any, Dict, List

from roomfit.models.room import PlacedObject, Room

ROOM_TEMPLATES: Dict[str, Room] = {
    "interview": Room(width=20, depth=14, height=10),
    "compact": Room(width=18, depth=12, height=10),    # tighter, still workable
}

# Sizes in ft; mount_h is the vertical center of wall items
OBJECT_DEFAULTS: Dict[str, Dict[str, float]] = {
    "table": {"w": 7, "d": 3, "h": 2.5},                # 84" x 36" x 30"
    "table_compact": {"w": 6, "d": 3, "h": 2.5},        # 72" x 36"
    "chair": {"w": 1.6, "d": 1.6, "h": 3},
    "panel": {"w": 2, "d": 0.2, "h": 4},                # 24" x 48" acoustic panel
    "tv": {"w": 4.8, "d": 0.5, "h": 2.7, "mount_h": 5},
    "whiteboard": {"w": 6, "d": 0.5, "h": 4, "mount_h": 4.5},
    "decal": {"w": 6, "d": 0.1, "h": 1},
}

GENERIC_SIZE = {"w": 1.0, "d": 1.0}


def new_object(id: str, kind: str, cx: float, cy: float, **overrides: Any) -> PlacedObject:
    """
    Create a PlacedObject with the default size for its kind.

    Example:
        >>> chair = new_object("chair_1", "chair", 5, 5, locked=True)
        >>> chair.w, chair.locked
        (1.6, True)
    """
    fields: Dict[str, Any] = dict(OBJECT_DEFAULTS.get(kind, GENERIC_SIZE))
    fields.update(id=id, kind=kind, cx=cx, cy=cy, label=overrides.pop("label", id))
    fields.update(overrides)
    return PlacedObject(**fields)


def baseline_scene() -> Dict[str, Any]:
    """Baseline meeting room: one table, four chairs and wall fixtures."""
    room = ROOM_TEMPLATES["interview"].model_copy()
    objects: List[PlacedObject] = [
        new_object("table", "table", 10, 7),
        new_object("chairs_n1", "chair", 8.75, 5.5, label="chair_N1", h=1.5),
        new_object("chairs_n2", "chair", 11.25, 5.5, label="chair_N2", h=1.5),
        new_object("chairs_s1", "chair", 8.75, 8.5, label="chair_S1", h=1.5),
        new_object("chairs_s2", "chair", 11.25, 8.5, label="chair_S2", h=1.5),
        new_object("whiteboard", "whiteboard", 1, 7, w=0.5, d=0.2, h=4 / 12, wall="W", mount_h=7),
        new_object("tv", "tv", 19, 7, label="tv_65", w=5.7 / 12, d=0.3, h=3.2 / 12, wall="E", mount_h=7),
        new_object("panels1", "panel", 12, 7, label="panel1", wall="N", mount_h=5.5),
        new_object("panels2", "panel", 14.5, 7, label="panel2", wall="N", mount_h=5.5),
        new_object("panels3", "panel", 17, 7, label="panel3", wall="N", mount_h=5.5),
        new_object("decal", "decal", 18.8, 7, wall="E", mount_h=4.5),
    ]
    return {"name": "interview_room_v1", "room": room, "objects": objects}
