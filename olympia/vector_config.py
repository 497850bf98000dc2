"""Vector unit configuration (SEW, LMUL, VL, tail policy)."""

from __future__ import annotations


class VectorConfig:
    """Vector configuration; VLMAX follows SEW and LMUL."""

    VLEN = 1024  # vector register length in bits
    MAX_LMUL = 8

    def __init__(self, vl: int = 16, sew: int = 8, lmul: int = 1, vta: bool = False) -> None:
        self.sew = sew
        self.lmul = lmul
        self.vl = vl
        self.vta = vta
        if self.lmul > self.MAX_LMUL:
            raise ValueError(f"LMUL ({self.lmul}) cannot be greater than {self.MAX_LMUL}")
        if self.vl > self.vlmax:
            raise ValueError(f"VL ({self.vl}) cannot be greater than VLMAX ({self.vlmax})")

    @property
    def vta(self) -> bool:
        """Tail agnostic (True) or undisturbed (False)."""
        return self._vta

    @vta.setter
    def vta(self, value) -> None:
        self._vta = bool(value)

    @property
    def vlmax(self) -> int:
        """Maximum vector length for the current SEW and LMUL."""
        return (self.VLEN // self.sew) * self.lmul

    def __str__(self) -> str:
        tail = "ta" if self.vta else ""
        return f"e{self.sew}m{self.lmul}{tail} vl: {self.vl} vlmax: {self.vlmax}"

    def __repr__(self) -> str:
        return (
            f"VectorConfig(vl={self.vl}, sew={self.sew}, "
            f"lmul={self.lmul}, vta={self.vta})"
        )


def describe_vector_config(config: VectorConfig | None) -> str:
    """Describe a possibly missing configuration."""
    return "nullptr" if config is None else str(config)