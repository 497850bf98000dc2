"""Start/stop markers that delimit the traced region of a workload."""

from __future__ import annotations

import enum


class TraceMarker(enum.IntEnum):
    """32-bit opcodes that a simulator treats as trace start/stop markers."""

    START = 0x00004033
    STOP = 0x0010C033

    @property
    def assembly(self) -> str:
        """The instruction a workload emits to produce this marker."""
        return _ASSEMBLY[self]


_ASSEMBLY = {
    TraceMarker.START: "xor x0, x0, x0",
    TraceMarker.STOP: "xor x0, x1, x1",
}


def trace_marker(opcode: int) -> TraceMarker | None:
    """Return the marker that ``opcode`` encodes, or None if it is not one."""
    try:
        return TraceMarker(opcode)
    except ValueError:
        return None