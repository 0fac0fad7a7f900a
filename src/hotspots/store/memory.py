"""In-process document store for local development and tests."""

import asyncio
import copy
import secrets
import time
from typing import Any

from ..logging import get_logger
from .base import DocumentStore, TransactionUpdate, split_path

logger = get_logger(__name__)

# Alphabet used by Firebase push ids, in ascending ASCII order
PUSH_CHARS = "-0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz"


class PushIdGenerator:
    """Generate 20-character, lexicographically time-ordered push keys."""

    def __init__(self) -> None:
        self._last_ms = 0
        self._last_random = [0] * 12

    def __call__(self) -> str:
        now_ms = int(time.time() * 1000)
        if now_ms == self._last_ms:
            # Same millisecond: increment the random suffix to keep ordering
            for i in range(11, -1, -1):
                if self._last_random[i] != 63:
                    self._last_random[i] += 1
                    break
                self._last_random[i] = 0
        else:
            self._last_ms = now_ms
            self._last_random = [secrets.randbelow(64) for _ in range(12)]

        time_chars = []
        remaining = now_ms
        for _ in range(8):
            time_chars.append(PUSH_CHARS[remaining % 64])
            remaining //= 64
        return "".join(reversed(time_chars)) + "".join(PUSH_CHARS[i] for i in self._last_random)


class InMemoryDocumentStore(DocumentStore):
    """Nested-dict tree with Realtime Database write semantics.

    Writing None deletes a node and parents left empty disappear with it.
    Documents handed in or out are deep-copied.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._root: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._lock = asyncio.Lock()
        self._push_id = PushIdGenerator()

    def snapshot(self) -> dict[str, Any]:
        """Return a copy of the whole tree."""
        return copy.deepcopy(self._root)

    def _read(self, path: str) -> Any:
        node: Any = self._root
        for segment in split_path(path):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        return copy.deepcopy(node)

    def _write(self, path: str, value: Any) -> None:
        segments = split_path(path)
        if value is None or value == {}:
            self._delete(segments)
            return
        if not segments:
            if not isinstance(value, dict):
                raise ValueError("Root value must be a mapping")
            self._root = copy.deepcopy(value)
            return

        node = self._root
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = {}
                node[segment] = child
            node = child
        node[segments[-1]] = copy.deepcopy(value)

    def _delete(self, segments: list[str]) -> None:
        if not segments:
            self._root = {}
            return

        trail = [self._root]
        for segment in segments[:-1]:
            child = trail[-1].get(segment)
            if not isinstance(child, dict):
                return
            trail.append(child)

        trail[-1].pop(segments[-1], None)

        # Prune parents left empty
        for depth in range(len(trail) - 1, 0, -1):
            if trail[depth]:
                break
            trail[depth - 1].pop(segments[depth - 1], None)

    async def get(self, path: str) -> Any:
        return self._read(path)

    async def set(self, path: str, value: Any) -> None:
        async with self._lock:
            self._write(path, value)

    async def remove(self, path: str) -> None:
        async with self._lock:
            self._delete(split_path(path))

    async def push(self, path: str, value: Any) -> str:
        async with self._lock:
            key = self._push_id()
            self._write(f"{path.rstrip('/')}/{key}", value)
            return key

    async def transaction(self, path: str, update: TransactionUpdate) -> Any:
        async with self._lock:
            new_value = update(self._read(path))
            if new_value is None:
                raise ValueError("Transaction update must return a value")
            self._write(path, new_value)
            logger.debug("Transaction committed", path=path)
            return copy.deepcopy(new_value)
