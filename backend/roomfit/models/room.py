"""
Room and Layout Data Models

These Pydantic models define the core data structures for representing
a room, the objects placed in it, and the violations found in a layout.
They are the "contract" between the engine, the API and any caller.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Wall(str, Enum):
    """Compass side of the room an object is mounted on."""
    NORTH = "N"   # y = 0
    SOUTH = "S"   # y = depth
    EAST = "E"    # x = width
    WEST = "W"    # x = 0


class Layer(str, Enum):
    """Coarse vertical zone an object occupies."""
    FLOOR = "floor"
    SURFACE = "surface"
    WALL = "wall"
    CEILING = "ceiling"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class ReasonCode(str, Enum):
    """Why a placement was flagged."""
    OUT_OF_BOUNDS = "out_of_bounds"
    WALL_NOT_ON = "wall_not_on"
    OVERLAP = "overlap"
    CHAIR_TOO_CLOSE_TO_TABLE = "chair_too_close_to_table"
    CHAIRS_TOO_CLOSE = "chairs_too_close"
    AISLE_VIOLATION = "aisle_violation"


ERROR_REASONS = {
    ReasonCode.OUT_OF_BOUNDS,
    ReasonCode.WALL_NOT_ON,
    ReasonCode.OVERLAP,
}

WARNING_REASONS = {
    ReasonCode.CHAIR_TOO_CLOSE_TO_TABLE,
    ReasonCode.CHAIRS_TOO_CLOSE,
    ReasonCode.AISLE_VIOLATION,
}


def is_error(reason: ReasonCode) -> bool:
    return reason in ERROR_REASONS


def is_warning(reason: ReasonCode) -> bool:
    return reason in WARNING_REASONS


def severity_for(reason: ReasonCode) -> Severity:
    """Severity a reason code is always reported with."""
    if is_error(reason):
        return Severity.ERROR
    if is_warning(reason):
        return Severity.WARNING
    raise ValueError(f"Unclassified reason code: {reason}")


class Room(BaseModel):
    """Rectangular room, dimensions in feet."""
    width: float = Field(..., gt=0, description="Extent along X (west to east)")
    depth: float = Field(..., gt=0, description="Extent along Y (north to south)")
    height: float = Field(default=10.0, gt=0, description="Floor to ceiling")

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.depth / 2)


class PlacedObject(BaseModel):
    """
    A single object placed in the room.

    Attributes:
        id: Unique identifier (e.g., "table", "chair_n1")
        kind: Object kind; "table" and "chair" get special rule treatment
        cx, cy: Center position in room-plane feet
        w, d: Footprint width/depth in the object's local axes
        rotation: Plan-view rotation in degrees
        wall: Wall the object is mounted on, if any
        mount_h: Height of the object's vertical center above the floor
        layer: Explicit layer; derived from kind/wall when absent
        attach_to: Parent object id (JSON: attachTo)
        locked: Whether the resolver may move this object
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unique object ID")
    kind: str = Field(..., description="Object kind")
    label: str = Field(default="", description="Display text")
    cx: float = Field(..., description="Center X (ft)")
    cy: float = Field(..., description="Center Y (ft)")
    w: float = Field(..., description="Footprint width (ft)")
    d: float = Field(..., description="Footprint depth (ft)")
    h: Optional[float] = Field(default=None, description="Height (ft)")
    rotation: float = Field(default=0.0, description="Plan rotation in degrees")
    wall: Optional[Wall] = Field(default=None)
    mount_h: Optional[float] = Field(default=None, description="Mount center height (ft)")
    layer: Optional[Layer] = Field(default=None)
    attach_to: Optional[str] = Field(default=None, alias="attachTo", description="Parent object ID")
    locked: bool = Field(default=False, description="User-locked status")


class Violation(BaseModel):
    """A single constraint violation detected in the layout."""
    a: PlacedObject
    b: Optional[PlacedObject] = None
    reason: ReasonCode
    severity: Severity

    @property
    def object_ids(self) -> List[str]:
        return [self.a.id] if self.b is None else [self.a.id, self.b.id]

    def describe(self) -> str:
        """Human-readable explanation."""
        name_a = self.a.label or self.a.id
        name_b = (self.b.label or self.b.id) if self.b is not None else ""
        if self.reason == ReasonCode.OUT_OF_BOUNDS:
            return f"{name_a} extends outside the room"
        if self.reason == ReasonCode.WALL_NOT_ON:
            return f"{name_a} is not flush with the {self.a.wall.value} wall"
        if self.reason == ReasonCode.OVERLAP:
            return f"{name_a} overlaps {name_b}"
        if self.reason == ReasonCode.CHAIR_TOO_CLOSE_TO_TABLE:
            return f"{name_a} has too little clearance to {name_b}"
        if self.reason == ReasonCode.CHAIRS_TOO_CLOSE:
            return f"{name_a} and {name_b} are spaced too tightly"
        return f"{name_a} leaves too narrow an aisle to the nearest wall"


class Clearances(BaseModel):
    """Clearance policy in feet (tunable, not physics)."""
    aisle_min: float = Field(default=3.0, description="36in walkway")
    chair_back_to_table: float = Field(default=1.5, description="18in")
    chair_to_chair: float = Field(default=2.5, description="30in")
    wall_gap_tol: float = Field(default=0.1, description="Float tolerance for wall pinning")


class QualityPolicy(BaseModel):
    """Stopping criteria for make_valid."""
    max_warnings: int = Field(default=2, ge=0)
    max_passes: int = Field(default=12, ge=1, le=50)


class ResolveResult(BaseModel):
    """Output of one resolve_collisions run."""
    objects: List[PlacedObject]
    remaining: List[Violation]


class ValidationResult(BaseModel):
    """Output of make_valid."""
    objects: List[PlacedObject]
    violations: List[Violation]
    passes_used: int
