"""
Presets Routes

GET /presets/rooms   - Room templates
GET /presets/objects - Default object sizes per kind
GET /presets/scene   - Baseline meeting-room layout
"""

from typing import Dict

from fastapi import APIRouter, HTTPException

from roomfit.core.presets import OBJECT_DEFAULTS, ROOM_TEMPLATES, baseline_scene
from roomfit.models.api import SceneResponse
from roomfit.models.room import Room


router = APIRouter(prefix="/presets", tags=["Presets"])


@router.get("/rooms", response_model=Dict[str, Room])
async def list_rooms() -> Dict[str, Room]:
    return ROOM_TEMPLATES


@router.get("/rooms/{name}", response_model=Room)
async def get_room(name: str) -> Room:
    room = ROOM_TEMPLATES.get(name)
    if room is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown room template '{name}'. Available: {sorted(ROOM_TEMPLATES)}"
        )
    return room


@router.get("/objects", response_model=Dict[str, Dict[str, float]])
async def list_object_defaults() -> Dict[str, Dict[str, float]]:
    return OBJECT_DEFAULTS


@router.get("/scene", response_model=SceneResponse)
async def get_baseline_scene() -> SceneResponse:
    """Baseline layout; run it through /optimize to see the repair loop."""
    return SceneResponse(**baseline_scene())
