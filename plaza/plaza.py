from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional, Set

from fastapi import WebSocket

from .registry import Registry

logger = logging.getLogger(__name__)

# Frames allowed to pile up for one peer before it is considered stalled.
OUTBOX_LIMIT = 1024

# NOTE: ``Plaza`` only knows how to reach connections. What gets sent in
# response to which event lives in ``plaza.plaza_logic``.


class Connection:
    """One live websocket plus the frames waiting to be written to it."""

    def __init__(self, conn_id: str, ws: WebSocket):
        self.conn_id = conn_id
        self.ws = ws
        self.outbox: asyncio.Queue = asyncio.Queue(maxsize=OUTBOX_LIMIT)
        self.writer: Optional[asyncio.Task] = None


class Plaza:
    """Holds the player registry and the live websocket connections of the plaza.

    Emission never waits on the network: ``emit_*`` queue frames on each
    recipient's outbox, and a per-connection writer task drains it. The
    order of frames on the wire is therefore fixed at the moment a handler
    emits, and a slow peer only delays its own outbox.
    """

    def __init__(self) -> None:
        self.registry = Registry()
        # active connections: connection id -> Connection
        self.connections: Dict[str, Connection] = {}
        self._closing: Set[asyncio.Task] = set()

    # -------------------- Connection management -------------------- #

    def connect(self, conn_id: str, ws: WebSocket) -> Connection:
        """Register *ws* under *conn_id* and start its writer (needs a running loop)."""
        conn = Connection(conn_id, ws)
        conn.writer = asyncio.create_task(self._write_loop(conn), name=f"plaza-writer-{conn_id}")
        self.connections[conn_id] = conn
        return conn

    def disconnect(self, conn_id: str) -> None:
        conn = self.connections.pop(conn_id, None)
        if conn is not None and conn.writer is not None:
            conn.writer.cancel()

    def shutdown(self) -> None:
        """Stop every writer and discard all player state."""
        for conn_id in list(self.connections):
            self.disconnect(conn_id)
        self.registry.clear()

    async def _write_loop(self, conn: Connection) -> None:
        while True:
            frame = await conn.outbox.get()
            try:
                await conn.ws.send_json(frame)
            except Exception as exc:
                # Peer vanished; its own endpoint runs the leave.
                logger.warning("Dropping connection %s after failed %r send: %r", conn.conn_id, frame["type"], exc)
                if self.connections.get(conn.conn_id) is conn:
                    del self.connections[conn.conn_id]
                return
            finally:
                conn.outbox.task_done()

    async def _close_stalled(self, conn: Connection) -> None:
        try:
            await conn.ws.close(code=1013)
        except Exception as exc:
            logger.debug("Closing stalled connection %s failed: %r", conn.conn_id, exc)

    # -------------------- Emission helpers -------------------- #

    @staticmethod
    def frame(event: str, payload: Any) -> dict:
        return {"type": event, "data": payload}

    def _enqueue(self, conn: Connection, frame: dict) -> None:
        try:
            conn.outbox.put_nowait(frame)
        except asyncio.QueueFull:
            logger.warning("Outbox of %s is full, closing the connection", conn.conn_id)
            self.disconnect(conn.conn_id)
            task = asyncio.create_task(self._close_stalled(conn))
            self._closing.add(task)
            task.add_done_callback(self._closing.discard)

    def emit_to_all(self, event: str, payload: Any) -> None:
        """Queue *payload* for every live connection."""
        self.emit_to_all_except(event, payload, None)

    def emit_to_all_except(self, event: str, payload: Any, excluded_id: Optional[str]) -> None:
        """Queue *payload* for every live connection other than *excluded_id*."""
        frame = self.frame(event, payload)
        for conn_id, conn in list(self.connections.items()):
            if conn_id == excluded_id:
                continue
            self._enqueue(conn, frame)

    def emit_to_one(self, event: str, payload: Any, target_id: str) -> bool:
        """Queue *payload* for *target_id* only.

        Returns *False* when the target is not a live connection; the message
        is then dropped without telling anyone.
        """
        conn = self.connections.get(target_id)
        if conn is None:
            logger.debug("No live connection %s for %r, dropped", target_id, event)
            return False
        self._enqueue(conn, self.frame(event, payload))
        return True


__all__ = ["Connection", "OUTBOX_LIMIT", "Plaza"]
