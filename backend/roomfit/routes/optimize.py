"""
Optimize Routes

POST /optimize         - Run the make-valid loop on a layout.
POST /optimize/resolve - Run the sweep resolver once.
POST /optimize/quick   - Make-valid limited to 2 passes.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from roomfit.config import get_settings
from roomfit.core.constraints import count_errors, count_warnings
from roomfit.core.orchestrator import make_valid
from roomfit.core.resolver import resolve_collisions
from roomfit.models.api import (
    OptimizeRequest,
    OptimizeResponse,
    ResolveRequest,
    ResolveResponse,
)
from roomfit.models.room import PlacedObject
from roomfit.routes.analyze import to_constraint_violations

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/optimize", tags=["Optimization"])

QUICK_PASSES = 2


def changed_ids(before: List[PlacedObject], after: List[PlacedObject]) -> List[str]:
    """IDs of objects whose position or rotation differs between two layouts."""
    original = {obj.id: obj for obj in before}
    moved = []
    for obj in after:
        old = original.get(obj.id)
        if old and (old.cx, old.cy, old.rotation) != (obj.cx, obj.cy, obj.rotation):
            moved.append(obj.id)
    return moved


@router.post("", response_model=OptimizeResponse)
async def optimize_layout(request: OptimizeRequest) -> OptimizeResponse:
    """
    Repair a layout while respecting locked objects.

    The optimizer will:
    - Push apart overlapping objects (lower-priority object moves)
    - Seat chairs in rows around the largest table
    - Space wall items evenly and pin them to their wall
    - Iterate until no errors and few enough warnings remain, or the pass
      budget is exhausted
    """
    settings = get_settings()
    policy = request.policy or settings.quality_policy()
    clearances = request.clearances or settings.clearances()
    try:
        result = make_valid(request.room, request.objects, policy, clearances)
    except Exception as e:
        logger.exception("[Optimize] make_valid failed")
        raise HTTPException(
            status_code=500,
            detail=f"Optimization failed: {str(e)}"
        )

    errors, warnings = count_errors(result.violations), count_warnings(result.violations)
    is_valid = errors == 0 and warnings <= policy.max_warnings
    moved = changed_ids(request.objects, result.objects)
    if is_valid:
        explanation = f"Layout valid after {result.passes_used} pass(es); moved {len(moved)} object(s)."
    else:
        explanation = (
            f"Stopped after {result.passes_used} passes: "
            f"{errors} error(s), {warnings} warning(s) remain."
        )

    return OptimizeResponse(
        new_layout=result.objects,
        constraint_violations=to_constraint_violations(result.violations),
        passes_used=result.passes_used,
        is_valid=is_valid,
        moved_ids=moved,
        explanation=explanation,
    )


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_layout(request: ResolveRequest) -> ResolveResponse:
    """Run a single resolver call (sweeps plus one warning-relaxation pass)."""
    clearances = request.clearances or get_settings().clearances()
    try:
        result = resolve_collisions(request.room, request.objects, request.iterations, clearances)
    except Exception as e:
        logger.exception("[Optimize] resolve_collisions failed")
        raise HTTPException(
            status_code=500,
            detail=f"Resolve failed: {str(e)}"
        )

    return ResolveResponse(
        objects=result.objects,
        remaining=to_constraint_violations(result.remaining),
        error_count=count_errors(result.remaining),
        warning_count=count_warnings(result.remaining),
    )


@router.post("/quick", response_model=OptimizeResponse)
async def quick_optimize(request: OptimizeRequest) -> OptimizeResponse:
    """
    Quick optimization with fewer passes.

    Same as /optimize but limited to 2 passes for faster response.
    """
    policy = request.policy or get_settings().quality_policy()
    request.policy = policy.model_copy(update={"max_passes": min(policy.max_passes, QUICK_PASSES)})
    return await optimize_layout(request)
