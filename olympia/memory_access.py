"""State of one memory access as it travels through the memory subsystem."""

from __future__ import annotations

import enum
from typing import Any


class MMUState(enum.IntEnum):
    """Address translation status of an access."""

    NO_ACCESS = 0
    MISS = 1
    HIT = 2

    def __str__(self) -> str:
        return self.name.lower()


class CacheState(enum.IntEnum):
    """Data cache status of an access."""

    NO_ACCESS = 0
    RELOAD = 1
    MISS = 2
    HIT = 3

    def __str__(self) -> str:
        return self.name.lower()


class ArchUnit(enum.IntEnum):
    """Architectural unit that sends or receives a memory request."""

    NO_ACCESS = 0
    ICACHE = 1
    LSU = 2
    DCACHE = 3
    L2CACHE = 4
    BIU = 5

    def __str__(self) -> str:
        return self.name


class MemoryAccessInfo:
    """Tracks translation, cache and routing state for one load/store.

    ``inst`` is any object exposing ``unique_id`` and ``mnemonic``, and
    ``raddr`` / ``target_vaddr`` when addresses are asked for. It may be
    None for an access with no associated instruction.
    """

    def __init__(self, inst: Any) -> None:
        self.inst = inst
        self.phy_addr_ready = False
        self.mmu_state = MMUState.NO_ACCESS
        self.cache_state = CacheState.NO_ACCESS
        self.data_ready = False
        self.is_refill = False
        self.src_unit = ArchUnit.NO_ACCESS
        self.dest_unit = ArchUnit.NO_ACCESS
        # Next request to the same line; kept for tracking only.
        self.next_req: MemoryAccessInfo | None = None
        # Positions of this access in the owning unit's queues.
        self.issue_queue_entry: Any = None
        self.replay_queue_entry: Any = None
        self.mshr_entry: Any = None

    @property
    def inst_unique_id(self) -> int:
        """Unique id of the associated instruction, or 0 if there is none."""
        return 0 if self.inst is None else self.inst.unique_id

    @property
    def mnemonic(self) -> str:
        """Mnemonic of the associated instruction, or ``<unassoc>``."""
        return "<unassoc>" if self.inst is None else self.inst.mnemonic

    @property
    def phy_addr(self) -> int:
        return self.inst.raddr

    @property
    def vaddr(self) -> int:
        return self.inst.target_vaddr

    @property
    def is_cache_hit(self) -> bool:
        return self.cache_state == CacheState.HIT

    def pair_values(self) -> dict[str, Any]:
        """Named values recorded for pipeline collection."""
        uid = self.inst_unique_id
        return {
            "DID": uid,
            "uid": uid,
            "mnemonic": self.mnemonic,
            "mmu": str(self.mmu_state),
            "dcs": str(self.cache_state),
        }

    def __str__(self) -> str:
        return f"memptr: {self.inst}"

    def __repr__(self) -> str:
        return (
            f"MemoryAccessInfo(uid={self.inst_unique_id}, "
            f"mmu={self.mmu_state.name}, cache={self.cache_state.name})"
        )