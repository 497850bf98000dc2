import dataclasses
import io

import pytest

from olympia.dhry_procs import SOME_STRING
from olympia.dhry_types import Enumeration
from olympia.dhrystone import (
    STR_1,
    STR_2,
    DhrystoneResult,
    format_report,
    main,
    run_benchmark,
)


@pytest.fixture
def result():
    return run_benchmark(3)


def test_global_final_values(result):
    assert result.int_glob == 5
    assert result.bool_glob is True
    assert result.ch_1_glob == "A"
    assert result.ch_2_glob == "B"
    assert result.arr_1_glob_8 == 7


def test_arr_2_grows_with_runs():
    for runs in (1, 3, 10):
        assert run_benchmark(runs).arr_2_glob_8_7 == runs + 10


def test_ptr_glob_final_values(result):
    assert result.ptr_glob.discr == Enumeration.IDENT_1
    assert result.ptr_glob.enum_comp == Enumeration.IDENT_3
    assert result.ptr_glob.int_comp == 17
    assert result.ptr_glob.str_comp == SOME_STRING


def test_next_ptr_glob_final_values(result):
    assert result.next_ptr_glob.discr == Enumeration.IDENT_1
    assert result.next_ptr_glob.enum_comp == Enumeration.IDENT_2
    assert result.next_ptr_glob.int_comp == 18
    assert result.next_ptr_glob.str_comp == SOME_STRING
    assert result.next_ptr_glob.ptr_comp is result.ptr_glob.ptr_comp


def test_local_final_values(result):
    assert result.int_1_loc == 5
    assert result.int_2_loc == 13
    assert result.int_3_loc == 7
    assert result.enum_loc == Enumeration.IDENT_2
    assert result.str_1_loc == STR_1
    assert result.str_2_loc == STR_2


def test_zero_runs_leaves_locals_undefined():
    res = run_benchmark(0)
    assert res.int_1_loc is None
    assert res.enum_loc is None
    assert res.str_2_loc is None
    assert res.arr_2_glob_8_7 == 10
    assert "(undefined)" in format_report(res)


def test_short_run_reports_too_small(result):
    assert result.time_too_small
    assert result.microseconds is None
    report = format_report(result)
    assert "Measured time too small to obtain meaningful results" in report
    assert "Please increase number of runs" in report


def test_timing_figures_are_consistent(result):
    timed = dataclasses.replace(result, user_time=4.0)
    assert not timed.time_too_small
    assert timed.microseconds * timed.runs == pytest.approx(4.0e6)
    assert timed.dhrystones_per_second * timed.user_time == pytest.approx(timed.runs)
    report = format_report(timed)
    assert "Microseconds for one run through Dhrystone: " in report
    assert "Measured time too small" not in report


def test_report_lines(result):
    lines = format_report(result).splitlines()
    assert lines[0] == "Execution ends"
    assert "Int_Glob:            5" in lines
    assert "Bool_Glob:           1" in lines
    assert "Arr_2_Glob[8][7]:    13" in lines
    assert f"Str_2_Loc:           {STR_2}" in lines
    ptr_lines = [line for line in lines if line.startswith("  Ptr_Comp:")]
    assert len(ptr_lines) == 2
    assert ptr_lines[0] == ptr_lines[1]


def test_result_is_frozen(result):
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.runs = 7
    assert isinstance(result, DhrystoneResult)
    assert result.runs == 3


def test_main_with_argument(capsys):
    assert main(["2"]) == 0
    out = capsys.readouterr().out
    assert "Execution starts, 2 runs through Dhrystone" in out
    assert "Arr_2_Glob[8][7]:    12" in out


def test_main_reads_runs_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Please give the number of runs through the benchmark: " in out
    assert "Execution starts, 1 runs through Dhrystone" in out


def test_main_rejects_non_integer():
    with pytest.raises(SystemExit) as info:
        main(["many"])
    assert info.value.code == 2