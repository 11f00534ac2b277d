from __future__ import annotations

import json
import logging
import uuid

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..plaza_logic import handle_leave, handle_ws_message
from ..state import plaza

router = APIRouter(prefix="", tags=["ws"])

logger = logging.getLogger(__name__)


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    await ws.accept()
    conn_id = uuid.uuid4().hex
    plaza.connect(conn_id, ws)
    logger.info("Connection %s accepted", conn_id)
    try:
        plaza.emit_to_one("connected", {"id": conn_id}, conn_id)
        while True:
            try:
                data = await ws.receive_json()
            except json.JSONDecodeError:
                logger.warning("Ignoring non-JSON frame from %s", conn_id)
                continue
            await handle_ws_message(plaza, conn_id, data)
    except WebSocketDisconnect:
        pass
    except Exception:
        logger.exception("Unexpected error on connection %s", conn_id)
        plaza.disconnect(conn_id)
        try:
            await ws.close(code=1011)
        except Exception:
            pass
    finally:
        await handle_leave(plaza, conn_id)


__all__ = ["router"]
