from plaza.registry import Registry
from plaza.schemas import PlayerRecord


def make_record(conn_id, nickname="Kai"):
    return PlayerRecord(id=conn_id, nickname=nickname)


def test_registry_starts_empty():
    registry = Registry()
    assert len(registry) == 0
    assert registry.snapshot() == {}


def test_insert_and_get():
    registry = Registry()
    record = make_record("a")
    registry.insert("a", record)
    assert registry.get("a") is record
    assert "a" in registry
    assert len(registry) == 1


def test_get_unknown_returns_none():
    assert Registry().get("ghost") is None


def test_update_fields_in_place():
    registry = Registry()
    record = make_record("a")
    registry.insert("a", record)

    assert registry.update_fields("a", {"x": 150, "y": 120, "state": "walk", "direction": "left"})
    assert (record.x, record.y, record.state, record.direction) == (150, 120, "walk", "left")
    assert record.nickname == "Kai"


def test_update_fields_unknown_is_noop():
    registry = Registry()
    assert registry.update_fields("ghost", {"x": 1}) is False
    assert len(registry) == 0


def test_remove():
    registry = Registry()
    registry.insert("a", make_record("a"))
    assert registry.remove("a") is True
    assert registry.remove("a") is False
    assert registry.get("a") is None


def test_snapshot_is_a_copy():
    registry = Registry()
    registry.insert("a", make_record("a"))
    snap = registry.snapshot()
    registry.insert("b", make_record("b", "Mina"))
    assert set(snap) == {"a"}
    assert set(registry.snapshot()) == {"a", "b"}


def test_n_joins_give_n_records():
    registry = Registry()
    for i in range(25):
        registry.insert(f"c{i}", make_record(f"c{i}", f"player{i}"))
    assert len(registry) == 25
    assert sorted(registry) == sorted(f"c{i}" for i in range(25))
