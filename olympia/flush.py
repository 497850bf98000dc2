"""Flush signalling between pipeline blocks."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


class FlushCause(enum.IntEnum):
    """Why a flush was requested."""

    TRAP = 0
    MISPREDICTION = 1
    TARGET_MISPREDICTION = 2
    MISFETCH = 3
    POST_SYNC = 4
    UNKNOWN = 5

    def __str__(self) -> str:
        return self.name


_INCLUSIVE_FLUSH = {
    FlushCause.TRAP: True,
    FlushCause.MISFETCH: True,
    FlushCause.MISPREDICTION: False,
    FlushCause.TARGET_MISPREDICTION: False,
    FlushCause.POST_SYNC: False,
}


def determine_inclusive(cause: FlushCause) -> bool:
    """Whether a flush of this cause also removes the instigating instruction."""
    try:
        return _INCLUSIVE_FLUSH[cause]
    except KeyError:
        raise ValueError(f"Unknown flush cause: {int(cause)}") from None


class FlushingCriteria:
    """What to flush: the instigating instruction and the cause.

    ``inst`` is any object with a ``unique_id`` attribute; younger
    instructions have larger ids.
    """

    def __init__(self, cause: FlushCause, inst: Any) -> None:
        self.cause = cause
        self.is_inclusive = determine_inclusive(cause)
        self.inst = inst

    @property
    def is_lower_pipe_flush(self) -> bool:
        return self.cause == FlushCause.MISFETCH

    def included_in_flush(self, other: Any) -> bool:
        """Return True if instruction ``other`` is removed by this flush."""
        own = self.inst.unique_id
        if self.is_inclusive:
            return own <= other.unique_id
        return own < other.unique_id

    def __str__(self) -> str:
        return f"{self.inst} {self.cause}"

    def __repr__(self) -> str:
        return f"FlushingCriteria(cause={self.cause.name}, inst={self.inst!r})"


class FlushManager:
    """Keeps the oldest pending flush request and forwards it on demand.

    Lower-pipe flushes (misfetch) go to ``on_lower``; all others go to
    ``on_upper``.
    """

    name = "flushmanager"

    def __init__(
        self,
        on_lower: Callable[[FlushingCriteria], Any],
        on_upper: Callable[[FlushingCriteria], Any],
    ) -> None:
        self._on_lower = on_lower
        self._on_upper = on_upper
        self.pending: FlushingCriteria | None = None

    def receive(self, criteria: FlushingCriteria) -> None:
        """Accept a flush request, keeping only the oldest one."""
        if self.pending is not None and self.pending.included_in_flush(criteria.inst):
            return
        self.pending = criteria

    def forward(self) -> FlushingCriteria:
        """Send the pending flush to the matching pipe and clear it."""
        if self.pending is None:
            raise RuntimeError("no flush to forward onwards?")
        flush_data = self.pending
        if flush_data.is_lower_pipe_flush:
            logger.info("instigating lower pipeline flush for: %s", flush_data)
            self._on_lower(flush_data)
        else:
            logger.info("instigating upper pipeline flush for: %s", flush_data)
            self._on_upper(flush_data)
        self.pending = None
        return flush_data