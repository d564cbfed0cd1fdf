"""Identifier services: directive ids and stable ids for trigger targets."""
from __future__ import annotations

import threading
import uuid
from typing import Dict, Optional

from src.smil.types import NodeRef
from src.utils.config import settings


class AnimationIdGenerator:
    """Monotonic ``<prefix><n>`` ids for directives that don't carry one.

    Increments are guarded by a lock so a shared instance is safe across
    threads. Pass a fresh instance (or call ``reset``) for deterministic ids.
    """

    def __init__(self, prefix: Optional[str] = None, start: int = 0):
        self.prefix = settings.animation_id_prefix if prefix is None else prefix
        self._counter = start
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            self._counter += 1
            value = self._counter
        return f"{self.prefix}{value}"

    def reset(self, start: int = 0) -> None:
        with self._lock:
            self._counter = start

    @property
    def current(self) -> int:
        with self._lock:
            return self._counter


default_id_generator = AnimationIdGenerator()


class NodeIdRegistry:
    """Stable string ids for host nodes, keyed by NodeRef.

    Stands in for the host document's ``id`` attribute: once a ref has an id
    it keeps it for the registry's lifetime.
    """

    def __init__(self, prefix: Optional[str] = None):
        self.prefix = settings.trigger_id_prefix if prefix is None else prefix
        self._ids: Dict[NodeRef, str] = {}
        self._lock = threading.Lock()

    def get(self, ref: NodeRef) -> Optional[str]:
        with self._lock:
            return self._ids.get(ref)

    def assign(self, ref: NodeRef, node_id: str) -> None:
        if not node_id:
            raise ValueError("Node id must be a non-empty string")
        with self._lock:
            self._ids[ref] = node_id

    def ensure_id(self, ref: NodeRef) -> str:
        """Return the ref's id, generating one on first use."""
        with self._lock:
            existing = self._ids.get(ref)
            if existing:
                return existing
            node_id = f"{self.prefix}{uuid.uuid4().hex[:12]}"
            self._ids[ref] = node_id
            return node_id

    def __contains__(self, ref: object) -> bool:
        with self._lock:
            return ref in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)
