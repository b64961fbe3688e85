"""
Roomfit API

FastAPI application around the room layout constraint engine.
Run with `uvicorn roomfit.main:app` from the backend directory.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roomfit.config import get_settings
from roomfit.models.api import HealthResponse
from roomfit.routes import analyze, optimize, presets

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

OPENAPI_TAGS = [
    {"name": "Analysis", "description": "Errors and warnings for a layout, nothing is moved"},
    {"name": "Optimization", "description": "Move unlocked objects until the layout is valid"},
    {"name": "Presets", "description": "Room templates, object sizes and the baseline scene"},
    {"name": "Health"},
]

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    summary="Validates and repairs furniture layouts inside a rectangular room.",
    openapi_tags=OPENAPI_TAGS,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (analyze, optimize, presets):
    app.include_router(module.router, prefix=settings.api_prefix)


def _health(message: str = "Roomfit API is running") -> HealthResponse:
    return HealthResponse(status="ok", version=settings.app_version, message=message)


@app.get("/", response_model=HealthResponse, tags=["Health"])
async def root():
    return _health(f"Roomfit API is running. See /docs; endpoints live under {settings.api_prefix}.")


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    return _health()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("roomfit.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
