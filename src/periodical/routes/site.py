"""Site routes — global magazine config and a liveness probe."""

from __future__ import annotations

from fastapi import APIRouter, Request

from periodical.models.theme import GlobalConfig

router = APIRouter(tags=["site"])


@router.get("/api/site", response_model=GlobalConfig)
async def site_config(request: Request) -> GlobalConfig:
    """Return the magazine-wide config."""
    return request.app.state.site.config


@router.get("/healthz")
async def healthz(request: Request):
    """Report liveness and the number of registered editions."""
    registry = request.app.state.registry
    return {"status": "ok", "editions": len(registry)}
