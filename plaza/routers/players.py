from __future__ import annotations

from fastapi import APIRouter

from ..schemas import HealthResponse, PlayersResponse
from ..state import plaza

router = APIRouter(prefix="", tags=["players"])


@router.get("/players", response_model=PlayersResponse)
async def list_players():
    snapshot = plaza.registry.snapshot()
    return PlayersResponse(count=len(snapshot), players=snapshot)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(connections=len(plaza.connections), players=len(plaza.registry))
