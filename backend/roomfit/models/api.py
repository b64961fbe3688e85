"""
API Request/Response Schemas

Pydantic models for API endpoints.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from roomfit.models.room import Clearances, PlacedObject, QualityPolicy, Room


class ConstraintViolation(BaseModel):
    """A violation as reported to API clients."""
    constraint_name: str = Field(..., description="Reason code of the violated constraint")
    description: str = Field(..., description="Human-readable explanation")
    severity: str = Field(default="error", description="'error' or 'warning'")
    objects_involved: List[str] = Field(default_factory=list, description="IDs of objects involved")
    overlap_area: Optional[float] = Field(None, description="Footprint overlap in sq ft (overlaps only)")


class LayoutRequest(BaseModel):
    """Room plus the current object list."""
    room: Room = Field(..., description="Room size")
    objects: List[PlacedObject] = Field(..., description="Current object placements")
    clearances: Optional[Clearances] = Field(None, description="Override the default clearance policy")


# ============ Analyze Endpoint ============

class AnalyzeResponse(BaseModel):
    """Response from /analyze endpoint."""
    violations: List[ConstraintViolation] = Field(default_factory=list)
    error_count: int
    warning_count: int
    floor_coverage: float = Field(..., description="Percent of the floor covered by floor-layer objects")
    layers: Dict[str, int] = Field(default_factory=dict, description="Object count per layer")
    message: str = "Analysis complete"


# ============ Optimize Endpoints ============

class ResolveRequest(LayoutRequest):
    """Request body for /optimize/resolve endpoint."""
    iterations: int = Field(default=6, ge=1, le=50, description="Max sweep iterations")


class ResolveResponse(BaseModel):
    """Response from /optimize/resolve endpoint."""
    objects: List[PlacedObject]
    remaining: List[ConstraintViolation] = Field(default_factory=list)
    error_count: int
    warning_count: int


class OptimizeRequest(LayoutRequest):
    """Request body for /optimize endpoint."""
    policy: Optional[QualityPolicy] = Field(None, description="Stopping criteria")


class OptimizeResponse(BaseModel):
    """Response from /optimize endpoint."""
    new_layout: List[PlacedObject]
    constraint_violations: List[ConstraintViolation] = Field(default_factory=list)
    passes_used: int
    is_valid: bool
    moved_ids: List[str] = Field(default_factory=list, description="Objects whose position or rotation changed")
    explanation: str


# ============ Presets ============

class SceneResponse(BaseModel):
    """A named room with its objects."""
    name: str
    room: Room
    objects: List[PlacedObject]


# ============ Health Check ============

class HealthResponse(BaseModel):
    """Response from /health endpoint."""
    status: str = "ok"
    version: str
    message: str = "Roomfit API is running"
