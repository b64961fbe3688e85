"""
Analyze Route

POST /analyze - Report every violation in a layout without moving anything.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from roomfit.config import get_settings
from roomfit.core.constraints import count_errors, count_warnings, detect_collisions
from roomfit.core.geometry import floor_coverage, overlap_area
from roomfit.core.layers import layer_summary
from roomfit.models.api import AnalyzeResponse, ConstraintViolation, LayoutRequest
from roomfit.models.room import ReasonCode, Violation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["Analysis"])


def to_constraint_violations(violations: List[Violation]) -> List[ConstraintViolation]:
    """Convert engine violations to the API representation."""
    out = []
    for v in violations:
        area = None
        if v.reason == ReasonCode.OVERLAP and v.b is not None:
            area = round(overlap_area(v.a, v.b), 3)
        out.append(ConstraintViolation(
            constraint_name=v.reason.value,
            description=v.describe(),
            severity=v.severity.value,
            objects_involved=v.object_ids,
            overlap_area=area,
        ))
    return out


@router.post("", response_model=AnalyzeResponse)
async def analyze_layout(request: LayoutRequest) -> AnalyzeResponse:
    """
    Analyze a layout and list its violations.

    Errors are invalid placements (out of bounds, off the wall, overlaps);
    warnings are legal but uncomfortable ones (seating and aisle clearances).
    """
    clearances = request.clearances or get_settings().clearances()
    try:
        violations = detect_collisions(request.room, request.objects, clearances)
        coverage = floor_coverage(request.room, request.objects)
    except Exception as e:
        logger.exception("[Analyze] Detection failed")
        raise HTTPException(
            status_code=500,
            detail=f"Analysis failed: {str(e)}"
        )

    errors, warnings = count_errors(violations), count_warnings(violations)
    return AnalyzeResponse(
        violations=to_constraint_violations(violations),
        error_count=errors,
        warning_count=warnings,
        floor_coverage=round(coverage, 1),
        layers=layer_summary(request.objects),
        message=f"Checked {len(request.objects)} objects. {errors} error(s), {warnings} warning(s) found."
    )
