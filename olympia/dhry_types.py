"""Data types shared by the Dhrystone benchmark procedures."""

from __future__ import annotations

import dataclasses
import enum


class Enumeration(enum.IntEnum):
    """The benchmark's five-valued enumeration type."""

    IDENT_1 = 0
    IDENT_2 = 1
    IDENT_3 = 2
    IDENT_4 = 3
    IDENT_5 = 4


@dataclasses.dataclass(eq=False)
class Record:
    """A benchmark record.

    ``ptr_comp`` refers to another record, possibly this one. The
    remaining fields belong to the variant that the benchmark uses
    when ``discr`` is ``IDENT_1``.
    """

    ptr_comp: Record | None = dataclasses.field(default=None, repr=False)
    discr: Enumeration = Enumeration.IDENT_1
    enum_comp: Enumeration = Enumeration.IDENT_1
    int_comp: int = 0
    str_comp: str = ""

    def assign_from(self, other: Record) -> None:
        """Copy every field of ``other`` into this record (shallow copy)."""
        for field in dataclasses.fields(self):
            setattr(self, field.name, getattr(other, field.name))