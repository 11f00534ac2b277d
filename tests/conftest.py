import asyncio

import pytest
import pytest_asyncio

from plaza.plaza import Plaza
from plaza.state import plaza as shared_plaza


class FakeWebSocket:
    """Records every frame sent to it."""

    def __init__(self, fail=False, stall=False):
        self.sent = []
        self.fail = fail
        self.stall = stall
        self.closed_with = None

    async def send_json(self, data):
        # Yield like a real socket write so other tasks can run in between.
        await asyncio.sleep(0)
        if self.stall:
            await asyncio.Event().wait()
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(data)

    async def close(self, code=1000):
        self.closed_with = code

    def events(self, event_type=None):
        return [f for f in self.sent if event_type is None or f["type"] == event_type]


@pytest_asyncio.fixture
async def plaza():
    p = Plaza()
    yield p
    p.shutdown()
    await asyncio.sleep(0)


@pytest.fixture
def connect(plaza):
    """Attach a fake websocket to the plaza under the given id (call inside a test coroutine)."""

    def _connect(conn_id, **kwargs):
        ws = FakeWebSocket(**kwargs)
        plaza.connect(conn_id, ws)
        return ws

    return _connect


@pytest.fixture
def flush(plaza):
    """Wait until the outboxes of the given (default: all) connections are written."""

    async def _flush(*conn_ids):
        ids = conn_ids or tuple(plaza.connections)
        await asyncio.gather(
            *(plaza.connections[cid].outbox.join() for cid in ids if cid in plaza.connections)
        )

    return _flush


@pytest.fixture(autouse=True)
def reset_shared_plaza():
    shared_plaza.connections.clear()
    shared_plaza.registry.clear()
    yield
    shared_plaza.connections.clear()
    shared_plaza.registry.clear()
