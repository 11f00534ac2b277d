"""In-memory registry of joined players keyed by connection id."""
from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional

from .schemas import PlayerRecord


class Registry:
    """Authoritative mapping of connection id → :class:`PlayerRecord`.

    A record exists for an id exactly while that connection is joined. The
    registry never raises for unknown ids; absence is reported as ``None``
    or ``False``.
    """

    def __init__(self) -> None:
        self._records: Dict[str, PlayerRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, conn_id: object) -> bool:
        return conn_id in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._records))

    def insert(self, conn_id: str, record: PlayerRecord) -> None:
        self._records[conn_id] = record

    def get(self, conn_id: str) -> Optional[PlayerRecord]:
        return self._records.get(conn_id)

    def update_fields(self, conn_id: str, partial: Mapping[str, Any]) -> bool:
        """Overwrite the given fields of *conn_id*'s record in place.

        Returns *False* (and changes nothing) if the id has no record.
        """
        record = self._records.get(conn_id)
        if record is None:
            return False
        for field, value in partial.items():
            setattr(record, field, value)
        return True

    def remove(self, conn_id: str) -> bool:
        return self._records.pop(conn_id, None) is not None

    def snapshot(self) -> Dict[str, PlayerRecord]:
        """Return a shallow copy of the whole mapping."""
        return dict(self._records)

    def clear(self) -> None:
        self._records.clear()


__all__ = ["Registry"]
