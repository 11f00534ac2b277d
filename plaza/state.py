"""Centralised in-memory runtime state.

Holds the process-wide ``Plaza`` singleton so routers and handlers can
import it without worrying about circular imports. It starts empty and is
discarded when the process stops.
"""
from __future__ import annotations

from .plaza import Plaza

plaza = Plaza()

__all__ = ["plaza"]
