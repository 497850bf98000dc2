"""Dhrystone 2.1 main loop, result reporting and command-line entry point."""

from __future__ import annotations

import argparse
import dataclasses
import sys
import time

from olympia.dhry_procs import DhrystoneState, SOME_STRING, proc_7
from olympia.dhry_types import Enumeration, Record

STR_1 = "DHRYSTONE PROGRAM, 1'ST STRING"
STR_2 = "DHRYSTONE PROGRAM, 2'ND STRING"
STR_3 = "DHRYSTONE PROGRAM, 3'RD STRING"

# Measurements shorter than this (in seconds of process time) are too short
# to give meaningful figures.
TOO_SMALL_TIME = 2.0
MICROSECONDS_PER_SECOND = 1_000_000.0


@dataclasses.dataclass(frozen=True)
class DhrystoneResult:
    """Final values of the benchmark variables and the measured time.

    Locals that the loop never assigned (no runs) are None.
    """

    runs: int
    int_glob: int
    bool_glob: bool
    ch_1_glob: str
    ch_2_glob: str
    arr_1_glob_8: int
    arr_2_glob_8_7: int
    ptr_glob: Record
    next_ptr_glob: Record
    int_1_loc: int | None
    int_2_loc: int | None
    int_3_loc: int | None
    enum_loc: Enumeration | None
    str_1_loc: str
    str_2_loc: str | None
    user_time: float

    @property
    def time_too_small(self) -> bool:
        return self.user_time < TOO_SMALL_TIME

    @property
    def microseconds(self) -> float | None:
        """Microseconds per run, or None if the measurement is too short."""
        if self.time_too_small:
            return None
        return self.user_time * MICROSECONDS_PER_SECOND / self.runs

    @property
    def dhrystones_per_second(self) -> float | None:
        """Runs per second, or None if the measurement is too short."""
        if self.time_too_small:
            return None
        return self.runs / self.user_time


def run_benchmark(runs: int) -> DhrystoneResult:
    """Run the measurement loop ``runs`` times and collect the final values."""
    state = DhrystoneState()
    str_1_loc = STR_1
    int_1_loc: int | None = None
    int_2_loc: int | None = None
    int_3_loc: int | None = None
    enum_loc: Enumeration | None = None
    str_2_loc: str | None = None

    begin = time.process_time()
    for run_index in range(1, runs + 1):
        state.proc_5()
        state.proc_4()
        int_1_loc = 2
        int_2_loc = 3
        str_2_loc = STR_2
        enum_loc = Enumeration.IDENT_2
        state.bool_glob = not state.func_2(str_1_loc, str_2_loc)
        while int_1_loc < int_2_loc:
            int_3_loc = 5 * int_1_loc - int_2_loc
            int_3_loc = proc_7(int_1_loc, int_2_loc)
            int_1_loc += 1
        state.proc_8(state.arr_1_glob, state.arr_2_glob, int_1_loc, int_3_loc)
        state.proc_1(state.ptr_glob)
        ch_index = "A"
        while ch_index <= state.ch_2_glob:
            if enum_loc == state.func_1(ch_index, "C"):
                enum_loc = state.proc_6(Enumeration.IDENT_1)
                str_2_loc = STR_3
                int_2_loc = run_index
                state.int_glob = run_index
            ch_index = chr(ord(ch_index) + 1)
        int_2_loc = int_2_loc * int_1_loc
        int_1_loc = int(int_2_loc / int_3_loc)
        int_2_loc = 7 * (int_2_loc - int_3_loc) - int_1_loc
        int_1_loc = state.proc_2(int_1_loc)
    end = time.process_time()

    return DhrystoneResult(
        runs=runs,
        int_glob=state.int_glob,
        bool_glob=bool(state.bool_glob),
        ch_1_glob=state.ch_1_glob,
        ch_2_glob=state.ch_2_glob,
        arr_1_glob_8=state.arr_1_glob[8],
        arr_2_glob_8_7=state.arr_2_glob[8][7],
        ptr_glob=state.ptr_glob,
        next_ptr_glob=state.next_ptr_glob,
        int_1_loc=int_1_loc,
        int_2_loc=int_2_loc,
        int_3_loc=int_3_loc,
        enum_loc=enum_loc,
        str_1_loc=str_1_loc,
        str_2_loc=str_2_loc,
        user_time=end - begin,
    )


def _value(value: object) -> str:
    if value is None:
        return "(undefined)"
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, Enumeration):
        return str(int(value))
    return str(value)


def _record_lines(record: Record, expected_enum: int, expected_int: int, same: bool) -> list[str]:
    ptr_note = "(implementation-dependent)"
    if same:
        ptr_note += ", same as above"
    return [
        f"  Ptr_Comp:          {id(record.ptr_comp)}",
        f"        should be:   {ptr_note}",
        f"  Discr:             {int(record.discr)}",
        f"        should be:   {int(Enumeration.IDENT_1)}",
        f"  Enum_Comp:         {int(record.enum_comp)}",
        f"        should be:   {expected_enum}",
        f"  Int_Comp:          {record.int_comp}",
        f"        should be:   {expected_int}",
        f"  Str_Comp:          {record.str_comp}",
        f"        should be:   {SOME_STRING}",
    ]


def format_report(result: DhrystoneResult) -> str:
    """Render the final variable values and timing figures as text."""
    lines = [
        "Execution ends",
        "",
        "Final values of the variables used in the benchmark:",
        "",
        f"Int_Glob:            {result.int_glob}",
        "        should be:   5",
        f"Bool_Glob:           {_value(result.bool_glob)}",
        "        should be:   1",
        f"Ch_1_Glob:           {result.ch_1_glob}",
        "        should be:   A",
        f"Ch_2_Glob:           {result.ch_2_glob}",
        "        should be:   B",
        f"Arr_1_Glob[8]:       {result.arr_1_glob_8}",
        "        should be:   7",
        f"Arr_2_Glob[8][7]:    {result.arr_2_glob_8_7}",
        "        should be:   Number_Of_Runs + 10",
        "Ptr_Glob->",
        *_record_lines(result.ptr_glob, 2, 17, same=False),
        "Next_Ptr_Glob->",
        *_record_lines(result.next_ptr_glob, 1, 18, same=True),
        f"Int_1_Loc:           {_value(result.int_1_loc)}",
        "        should be:   5",
        f"Int_2_Loc:           {_value(result.int_2_loc)}",
        "        should be:   13",
        f"Int_3_Loc:           {_value(result.int_3_loc)}",
        "        should be:   7",
        f"Enum_Loc:            {_value(result.enum_loc)}",
        "        should be:   1",
        f"Str_1_Loc:           {result.str_1_loc}",
        f"        should be:   {STR_1}",
        f"Str_2_Loc:           {_value(result.str_2_loc)}",
        f"        should be:   {STR_2}",
        "",
    ]
    if result.time_too_small:
        lines += [
            "Measured time too small to obtain meaningful results",
            "Please increase number of runs",
            "",
        ]
    else:
        lines += [
            f"Microseconds for one run through Dhrystone: {result.microseconds:6.1f} ",
            f"Dhrystones per Second:                      {result.dhrystones_per_second:6.1f} ",
            "",
        ]
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Run the benchmark; the number of runs comes from ``argv`` or stdin."""
    parser = argparse.ArgumentParser(description="Run the Dhrystone 2.1 benchmark.")
    parser.add_argument("runs", nargs="?", help="number of runs through the benchmark")
    args = parser.parse_args(argv)

    print()
    print("Dhrystone Benchmark, Version 2.1")
    print()
    prompt = "Please give the number of runs through the benchmark: "
    if args.runs is None:
        text = input(prompt)
    else:
        print(prompt, end="")
        text = args.runs
    try:
        runs = int(text)
    except ValueError:
        parser.error(f"invalid number of runs: {text!r}")
    print()
    print(f"Execution starts, {runs} runs through Dhrystone")
    sys.stdout.flush()

    result = run_benchmark(runs)
    print(format_report(result), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())