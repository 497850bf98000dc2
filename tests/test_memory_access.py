from dataclasses import dataclass

import pytest

from olympia.memory_access import ArchUnit, CacheState, MemoryAccessInfo, MMUState


@dataclass
class FakeInst:
    unique_id: int
    mnemonic: str = "lw"
    raddr: int = 0
    target_vaddr: int = 0

    def __str__(self) -> str:
        return f"inst-{self.unique_id}"


def test_defaults():
    info = MemoryAccessInfo(FakeInst(3))
    assert info.mmu_state is MMUState.NO_ACCESS
    assert info.cache_state is CacheState.NO_ACCESS
    assert info.src_unit is ArchUnit.NO_ACCESS
    assert info.dest_unit is ArchUnit.NO_ACCESS
    assert info.phy_addr_ready is False
    assert info.data_ready is False
    assert info.is_refill is False
    assert info.next_req is None


def test_unassociated_access():
    info = MemoryAccessInfo(None)
    assert info.inst_unique_id == 0
    assert info.mnemonic == "<unassoc>"


def test_associated_identity_and_addresses():
    info = MemoryAccessInfo(FakeInst(42, "sd", raddr=0x1000, target_vaddr=0x2000))
    assert info.inst_unique_id == 42
    assert info.mnemonic == "sd"
    assert info.phy_addr == 0x1000
    assert info.vaddr == 0x2000


@pytest.mark.parametrize("state", list(CacheState))
def test_cache_hit_only_for_hit(state):
    info = MemoryAccessInfo(FakeInst(1))
    info.cache_state = state
    assert info.is_cache_hit == (state is CacheState.HIT)


@pytest.mark.parametrize(
    "value, text",
    [
        (MMUState.NO_ACCESS, "no_access"),
        (MMUState.MISS, "miss"),
        (MMUState.HIT, "hit"),
        (CacheState.NO_ACCESS, "no_access"),
        (CacheState.RELOAD, "reload"),
        (CacheState.MISS, "miss"),
        (CacheState.HIT, "hit"),
        (ArchUnit.NO_ACCESS, "NO_ACCESS"),
        (ArchUnit.ICACHE, "ICACHE"),
        (ArchUnit.LSU, "LSU"),
        (ArchUnit.DCACHE, "DCACHE"),
        (ArchUnit.L2CACHE, "L2CACHE"),
        (ArchUnit.BIU, "BIU"),
    ],
)
def test_enum_text(value, text):
    assert str(value) == text


def test_pair_values_follow_state():
    info = MemoryAccessInfo(FakeInst(7, "ld"))
    info.mmu_state = MMUState.HIT
    info.cache_state = CacheState.RELOAD
    assert info.pair_values() == {
        "DID": 7,
        "uid": 7,
        "mnemonic": "ld",
        "mmu": "hit",
        "dcs": "reload",
    }


def test_str_uses_instruction():
    info = MemoryAccessInfo(FakeInst(9))
    assert str(info) == "memptr: " + str(FakeInst(9))


def test_next_request_chain():
    first = MemoryAccessInfo(FakeInst(1))
    second = MemoryAccessInfo(FakeInst(2))
    first.next_req = second
    assert first.next_req.inst_unique_id == 2