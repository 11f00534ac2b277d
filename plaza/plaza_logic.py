"""Plaza event handlers.

Every handler reacts to one inbound websocket event for one connection.
Handlers never await: the registry read-modify step and the queuing of
every outbound frame run to completion before any other handler on the
event loop gets a turn, so each client sees events in the order they
were applied.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from pydantic import ValidationError

from .constants import SIGNAL_SENDER_KEYS, UNKNOWN_NICKNAME
from .plaza import Plaza
from .schemas import (
    ChatRequest,
    IceCandidateSignal,
    JoinRequest,
    MoveRequest,
    PlayerRecord,
    SdpSignal,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Session lifecycle
# ---------------------------------------------------------------------------

async def handle_join(plaza: Plaza, conn_id: str, data: dict) -> PlayerRecord:
    req = JoinRequest.model_validate(data)
    # Omitted coordinates fall back to PlayerRecord's spawn defaults.
    record = PlayerRecord(
        id=conn_id,
        nickname=req.nickname,
        avatar=req.avatar,
        **req.model_dump(include={"x", "y"}, exclude_none=True),
    )
    plaza.registry.insert(conn_id, record)
    snapshot = {pid: p.model_dump(by_alias=True) for pid, p in plaza.registry.snapshot().items()}
    logger.info("%s joined the plaza as %r", conn_id, req.nickname)

    plaza.emit_to_all_except("new_player", record.model_dump(by_alias=True), conn_id)
    plaza.emit_to_one("current_players", snapshot, conn_id)
    return record


async def handle_leave(plaza: Plaza, conn_id: str) -> None:
    """Forget *conn_id* and tell everyone still connected that it left."""
    plaza.disconnect(conn_id)
    removed = plaza.registry.remove(conn_id)
    logger.info("%s left the plaza%s", conn_id, "" if removed else " (never joined)")
    plaza.emit_to_all("player_leave", conn_id)


# ---------------------------------------------------------------------------
# State sync
# ---------------------------------------------------------------------------

async def handle_move(plaza: Plaza, conn_id: str, data: dict) -> None:
    req = MoveRequest.model_validate(data)
    updated = plaza.registry.update_fields(
        conn_id, {"x": req.x, "y": req.y, "state": req.s, "direction": req.d}
    )
    if not updated:
        return
    plaza.emit_to_all_except(
        "player_moved",
        {"id": conn_id, "x": req.x, "y": req.y, "s": req.s, "d": req.d},
        conn_id,
    )


# ---------------------------------------------------------------------------
# Chat
# ---------------------------------------------------------------------------

async def handle_chat(plaza: Plaza, conn_id: str, data: dict) -> None:
    req = ChatRequest.model_validate(data)
    player = plaza.registry.get(conn_id)
    nickname = player.nickname if player else UNKNOWN_NICKNAME
    plaza.emit_to_all("chat_updated", {"id": conn_id, "nickname": nickname, "message": req.message})


# ---------------------------------------------------------------------------
# WebRTC signaling
# ---------------------------------------------------------------------------

async def handle_signal(plaza: Plaza, conn_id: str, event: str, data: dict) -> bool:
    """Forward one offer / answer / ICE candidate to its target only.

    The payload is never inspected and no call state is kept; returns
    whether the target was a live connection.
    """
    sender_key = SIGNAL_SENDER_KEYS[event]
    payload: Dict[str, Any]
    if event == "webrtc_ice_candidate":
        ice = IceCandidateSignal.model_validate(data)
        target = ice.target
        payload = {"candidate": ice.candidate, sender_key: conn_id}
    else:
        sdp = SdpSignal.model_validate(data)
        target = sdp.target
        payload = {"sdp": sdp.sdp, sender_key: conn_id}
    logger.debug("%s %s -> %s", event, conn_id, target)
    return plaza.emit_to_one(event, payload, target)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

async def handle_ws_message(plaza: Plaza, conn_id: str, data: Any) -> None:
    if not isinstance(data, dict):
        logger.warning("Ignoring non-object frame from %s", conn_id)
        return
    msg_type = data.get("type")
    if not isinstance(msg_type, str):
        logger.debug("Ignoring frame without a string type from %s", conn_id)
        return
    try:
        if msg_type == "join_plaza":
            await handle_join(plaza, conn_id, data)
        elif msg_type == "player_move":
            await handle_move(plaza, conn_id, data)
        elif msg_type == "chat_message":
            await handle_chat(plaza, conn_id, data)
        elif msg_type in SIGNAL_SENDER_KEYS:
            await handle_signal(plaza, conn_id, msg_type, data)
        else:
            logger.debug("Ignoring unknown event %r from %s", msg_type, conn_id)
    except ValidationError as exc:
        logger.warning("Rejected %r from %s: %s", msg_type, conn_id, exc.errors(include_url=False))


__all__ = [
    "handle_join",
    "handle_leave",
    "handle_move",
    "handle_chat",
    "handle_signal",
    "handle_ws_message",
]
