"""Issue bookkeeping for a load/store in the load-store unit."""

from __future__ import annotations

import enum
from typing import Any

from olympia.memory_access import MemoryAccessInfo


class IssuePriority(enum.IntEnum):
    """Arbitration priority; lower values win."""

    HIGHEST = 0
    CACHE_RELOAD = 1  # miss acknowledged, waiting for cache re-access
    CACHE_PENDING = 2  # waiting for another outstanding miss
    MMU_RELOAD = 3  # miss acknowledged, waiting for MMU re-access
    MMU_PENDING = 4  # waiting for another outstanding miss
    NEW_DISP = 5  # waiting for first issue
    LOWEST = 6

    def __str__(self) -> str:
        return _PRIORITY_LABELS[self]


_PRIORITY_LABELS = {
    IssuePriority.HIGHEST: "(highest)",
    IssuePriority.CACHE_RELOAD: "($_reload)",
    IssuePriority.CACHE_PENDING: "($_pending)",
    IssuePriority.MMU_RELOAD: "(mmu_reload)",
    IssuePriority.MMU_PENDING: "(mmu_pending)",
    IssuePriority.NEW_DISP: "(new_disp)",
    IssuePriority.LOWEST: "(lowest)",
}


class IssueState(enum.IntEnum):
    """Whether a load/store can be issued."""

    READY = 0
    ISSUED = 1
    NOT_READY = 2

    def __str__(self) -> str:
        return f"({self.name.lower()})"


class LoadStoreInstInfo:
    """Load/store issue state layered over a :class:`MemoryAccessInfo`."""

    def __init__(self, mem_access_info: MemoryAccessInfo | None) -> None:
        self.mem_access_info = mem_access_info
        self.priority = IssuePriority.LOWEST
        self.state = IssueState.NOT_READY
        self.in_ready_queue = False

    @property
    def inst(self) -> Any:
        return self.mem_access_info.inst

    @property
    def inst_unique_id(self) -> int:
        """Unique id of the instruction, or 0 if not associated."""
        if self.mem_access_info is None:
            return 0
        return self.mem_access_info.inst_unique_id

    @property
    def mnemonic(self) -> str:
        if self.mem_access_info is None:
            return "<unassoc>"
        return self.mem_access_info.mnemonic

    @property
    def is_ready(self) -> bool:
        return self.state == IssueState.READY

    @property
    def is_retired(self) -> bool:
        """True once the instruction's status is RETIRED."""
        status = self.inst.status
        return getattr(status, "name", status) == "RETIRED"

    @property
    def issue_queue_entry(self) -> Any:
        return self.mem_access_info.issue_queue_entry

    @issue_queue_entry.setter
    def issue_queue_entry(self, entry: Any) -> None:
        self.mem_access_info.issue_queue_entry = entry

    @property
    def replay_queue_entry(self) -> Any:
        return self.mem_access_info.replay_queue_entry

    @replay_queue_entry.setter
    def replay_queue_entry(self, entry: Any) -> None:
        self.mem_access_info.replay_queue_entry = entry

    def win_arb(self, that: LoadStoreInstInfo | None) -> bool:
        """Return True if this entry beats ``that`` in issue arbitration."""
        if that is None:
            return True
        return self.priority < that.priority

    def pair_values(self) -> dict[str, Any]:
        """Named values recorded for pipeline collection."""
        uid = self.inst_unique_id
        return {
            "DID": uid,
            "uid": uid,
            "mnemonic": self.mnemonic,
            "pri:": str(self.priority),
            "state": str(self.state),
        }

    def __lt__(self, other: LoadStoreInstInfo) -> bool:
        return self.inst_unique_id < other.inst_unique_id

    def __str__(self) -> str:
        return f"lsinfo: uid:{self.inst_unique_id} pri:{self.priority} state:{self.state}"

    def __repr__(self) -> str:
        return (
            f"LoadStoreInstInfo(uid={self.inst_unique_id}, "
            f"priority={self.priority.name}, state={self.state.name})"
        )