"""Procedures and global state of the Dhrystone benchmark."""

from __future__ import annotations

from olympia.dhry_types import Enumeration, Record

ARRAY_SIZE = 50
SOME_STRING = "DHRYSTONE PROGRAM, SOME STRING"


def proc_7(int_1: int, int_2: int) -> int:
    """Return ``int_2 + int_1 + 2``."""
    int_loc = int_1 + 2
    return int_2 + int_loc


def func_3(enum_par: Enumeration) -> bool:
    """Return True if ``enum_par`` is ``IDENT_3``."""
    return enum_par == Enumeration.IDENT_3


class DhrystoneState:
    """The benchmark's global variables and the procedures that use them."""

    def __init__(self) -> None:
        self.next_ptr_glob = Record()
        self.ptr_glob: Record | None = Record(
            ptr_comp=self.next_ptr_glob,
            discr=Enumeration.IDENT_1,
            enum_comp=Enumeration.IDENT_3,
            int_comp=40,
            str_comp=SOME_STRING,
        )
        self.int_glob = 0
        self.bool_glob = False
        self.ch_1_glob = "\0"
        self.ch_2_glob = "\0"
        self.arr_1_glob = [0] * ARRAY_SIZE
        self.arr_2_glob = [[0] * ARRAY_SIZE for _ in range(ARRAY_SIZE)]
        self.arr_2_glob[8][7] = 10

    def proc_1(self, ptr_val_par: Record) -> None:
        """Shuffle fields between ``ptr_val_par`` and the record it points to."""
        next_record = ptr_val_par.ptr_comp
        next_record.assign_from(self._glob())
        ptr_val_par.int_comp = 5
        next_record.int_comp = ptr_val_par.int_comp
        next_record.ptr_comp = ptr_val_par.ptr_comp
        next_record.ptr_comp = self.proc_3()
        if next_record.discr == Enumeration.IDENT_1:
            next_record.int_comp = 6
            next_record.enum_comp = self.proc_6(ptr_val_par.enum_comp)
            next_record.ptr_comp = self._glob().ptr_comp
            next_record.int_comp = proc_7(next_record.int_comp, 10)
        else:
            ptr_val_par.assign_from(ptr_val_par.ptr_comp)

    def proc_2(self, int_par: int) -> int:
        """Return the updated value of ``int_par``."""
        if self.ch_1_glob != "A":
            raise RuntimeError("Proc_2 does not terminate unless Ch_1_Glob is 'A'")
        int_loc = int_par + 10
        int_loc -= 1
        return int_loc - self.int_glob

    def proc_3(self) -> Record | None:
        """Update the global record's int field; return its pointer field."""
        glob = self._glob()
        glob.int_comp = proc_7(10, self.int_glob)
        return glob.ptr_comp

    def proc_4(self) -> None:
        bool_loc = self.ch_1_glob == "A"
        self.bool_glob = bool_loc or bool(self.bool_glob)
        self.ch_2_glob = "B"

    def proc_5(self) -> None:
        self.ch_1_glob = "A"
        self.bool_glob = False

    def proc_6(self, enum_val_par: Enumeration) -> Enumeration:
        """Return the enumeration value that ``enum_val_par`` maps to."""
        result = enum_val_par
        if not func_3(enum_val_par):
            result = Enumeration.IDENT_4
        if enum_val_par == Enumeration.IDENT_1:
            result = Enumeration.IDENT_1
        elif enum_val_par == Enumeration.IDENT_2:
            result = Enumeration.IDENT_1 if self.int_glob > 100 else Enumeration.IDENT_4
        elif enum_val_par == Enumeration.IDENT_3:
            result = Enumeration.IDENT_2
        elif enum_val_par == Enumeration.IDENT_5:
            result = Enumeration.IDENT_3
        return result

    def proc_8(self, arr_1: list[int], arr_2: list[list[int]], int_1: int, int_2: int) -> None:
        """Write into both arrays around index ``int_1 + 5``."""
        int_loc = int_1 + 5
        arr_1[int_loc] = int_2
        arr_1[int_loc + 1] = arr_1[int_loc]
        arr_1[int_loc + 30] = int_loc
        for int_index in range(int_loc, int_loc + 2):
            arr_2[int_loc][int_index] = int_loc
        arr_2[int_loc][int_loc - 1] += 1
        arr_2[int_loc + 20][int_loc] = arr_1[int_loc]
        self.int_glob = 5

    def func_1(self, ch_1: str, ch_2: str) -> Enumeration:
        """Return ``IDENT_1`` if the characters differ, else record ``ch_1``."""
        ch_1_loc = ch_1
        ch_2_loc = ch_1_loc
        if ch_2_loc != ch_2:
            return Enumeration.IDENT_1
        self.ch_1_glob = ch_1_loc
        return Enumeration.IDENT_2

    def func_2(self, str_1: str, str_2: str) -> bool:
        """Compare two benchmark strings."""
        int_loc = 2
        ch_loc = ""
        while int_loc <= 2:
            if self.func_1(str_1[int_loc], str_2[int_loc + 1]) != Enumeration.IDENT_1:
                raise RuntimeError("Func_2 does not terminate for these strings")
            ch_loc = "A"
            int_loc += 1
        if "W" <= ch_loc < "Z":
            int_loc = 7
        if ch_loc == "R":
            return True
        if str_1 > str_2:
            int_loc += 7
            self.int_glob = int_loc
            return True
        return False

    def _glob(self) -> Record:
        if self.ptr_glob is None:
            raise RuntimeError("Ptr_Glob is not set")
        return self.ptr_glob