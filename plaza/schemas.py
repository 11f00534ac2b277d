"""Pydantic data schemas used across the plaza service.

Runtime records, inbound websocket payloads and REST responses all live
here so the routers and the event handlers share a single definition.

Player records travel over the wire with the short keys ``s`` (state) and
``d`` (direction); use ``model_dump(by_alias=True)`` when emitting them.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_DIRECTION, DEFAULT_STATE, SPAWN_X, SPAWN_Y

Coordinate = Union[int, float]
Direction = Literal["left", "right"]

# -----------------------------
# Runtime
# -----------------------------

class PlayerRecord(BaseModel):
    """Ephemeral state of one joined connection."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    nickname: str
    x: Coordinate = SPAWN_X
    y: Coordinate = SPAWN_Y
    state: str = Field(default=DEFAULT_STATE, alias="s")
    direction: str = Field(default=DEFAULT_DIRECTION, alias="d")
    avatar: Any = None  # cosmetic configuration, forwarded verbatim


# -----------------------------
# Inbound websocket payloads
# -----------------------------

class JoinRequest(BaseModel):
    nickname: str
    x: Optional[Coordinate] = None
    y: Optional[Coordinate] = None
    avatar: Any


class MoveRequest(BaseModel):
    x: Coordinate
    y: Coordinate
    s: str
    d: Direction


class ChatRequest(BaseModel):
    message: Any


class SdpSignal(BaseModel):
    """Offer or answer addressed to one peer."""

    target: str
    sdp: Any


class IceCandidateSignal(BaseModel):
    target: str
    candidate: Any


# -----------------------------
# REST responses
# -----------------------------

class PlayersResponse(BaseModel):
    count: int
    players: Dict[str, PlayerRecord]


class HealthResponse(BaseModel):
    status: str = "ok"
    connections: int
    players: int


__all__ = [
    "Coordinate",
    "Direction",
    # runtime
    "PlayerRecord",
    # inbound
    "JoinRequest",
    "MoveRequest",
    "ChatRequest",
    "SdpSignal",
    "IceCandidateSignal",
    # REST
    "PlayersResponse",
    "HealthResponse",
]
