from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .routers import players as players_router
from .routers import websockets as ws_router
from .state import plaza

# -----------------------------
# FastAPI app instance
# -----------------------------

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Player state never outlives the process.
    plaza.shutdown()


app = FastAPI(title="Plaza Presence Relay", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Register routers
app.include_router(players_router.router)
app.include_router(ws_router.router)

__all__ = ["app"]
