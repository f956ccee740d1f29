"""Annotation ID generation.

IDs have the form ``<prefix><n>`` where ``n`` is the creation time in
milliseconds.  When the clock has not advanced since the previous ID
(or has gone backwards), ``n`` is bumped past the last value issued, so
IDs are strictly increasing and never collide within a process.
"""

from __future__ import annotations


class AnnotationIdGenerator:
    """Monotonic, collision-free ID source for annotations.

    Not locked — callers mutate it only while holding the store lock.
    """

    __slots__ = ("_prefix", "_last")

    def __init__(self, prefix: str = "ann-") -> None:
        self._prefix = prefix
        self._last = 0

    @property
    def prefix(self) -> str:
        return self._prefix

    def next_id(self, now_ms: int) -> str:
        value = max(now_ms, self._last + 1)
        self._last = value
        return f"{self._prefix}{value}"
