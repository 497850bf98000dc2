# olympia

Data types from a performance model of an out-of-order RISC-V core, and the
Dhrystone 2.1 benchmark that serves as its traced workload. No dependencies
beyond the standard library. Requires Python 3.10 or later.

## Modules

- `olympia.markers`: `TraceMarker`, an `IntEnum` with the two 32-bit opcodes
  that mark where a traced region starts (`0x00004033`) and stops
  (`0x0010c033`). Its `assembly` property gives the instruction a workload
  emits for each marker. `trace_marker(opcode)` returns the matching marker,
  or `None`.
- `olympia.misc`: `is_one_of(var, *args)` returns True if `var` equals any
  of the given values.
- `olympia.vector_config`: `VectorConfig(vl=16, sew=8, lmul=1, vta=False)`.
  `vlmax` is computed as `(1024 // sew) * lmul`. The constructor raises
  `ValueError` when LMUL is above 8 or VL is above VLMAX. `str()` gives text
  such as `e8m1 vl: 16 vlmax: 128`. `describe_vector_config(None)` returns
  `"nullptr"`.
- `olympia.flush`: `FlushCause`, `determine_inclusive(cause)`,
  `FlushingCriteria` and `FlushManager`. A TRAP or MISFETCH flush is
  inclusive: it also removes the instruction that caused it. MISPREDICTION,
  TARGET_MISPREDICTION and POST_SYNC are not inclusive. `determine_inclusive`
  raises `ValueError` for UNKNOWN. `FlushManager` holds only the oldest
  pending request. `forward()` hands that request to the `on_lower` callback
  for a misfetch and to `on_upper` for every other cause, clears it and
  returns it. With nothing pending it raises `RuntimeError`.
- `olympia.memory_access`: `MemoryAccessInfo` with the enums `MMUState`,
  `CacheState` and `ArchUnit`. It records translation state, cache state,
  source and destination units, and queue positions for one access.
  `pair_values()` returns the values recorded for pipeline collection.
- `olympia.load_store`: `LoadStoreInstInfo` with the enums `IssuePriority`
  and `IssueState`.
  - `win_arb(that)` is True when this entry has a strictly better (lower)
    priority, or when `that` is `None`.
  - Entries sort by instruction unique id.
- `olympia.dhry_types`, `olympia.dhry_procs`, `olympia.dhrystone`: the
  Dhrystone benchmark. These modules hold, respectively, the `Enumeration`
  and `Record` types, the `DhrystoneState` procedures, and the driver with
  `run_benchmark`, `format_report` and `main`.

Instructions are duck-typed. Any object with a `unique_id` attribute will do:

- `MemoryAccessInfo` also reads `mnemonic`.
- `phy_addr` and `vaddr` read `raddr` and `target_vaddr`.
- `LoadStoreInstInfo.is_retired` reads `status`.

## Running Dhrystone

    olympia-dhrystone 100000

If no number of runs is given, the command asks for one on standard input.
It then runs the benchmark and prints the final value of each benchmark
variable next to the value it should have. Timing figures follow:
microseconds per run and Dhrystones per second. If less than two seconds of
process time were measured, it prints a notice to increase the number of
runs instead.

From Python:

    from olympia.dhrystone import run_benchmark, format_report

    result = run_benchmark(1000)
    assert result.int_glob == 5
    print(format_report(result))

## Flushing example

    from types import SimpleNamespace
    from olympia.flush import FlushCause, FlushingCriteria, FlushManager

    manager = FlushManager(on_lower=print, on_upper=print)
    manager.receive(FlushingCriteria(FlushCause.MISPREDICTION, SimpleNamespace(unique_id=7)))
    manager.receive(FlushingCriteria(FlushCause.MISPREDICTION, SimpleNamespace(unique_id=9)))
    flushed = manager.forward()   # sent to on_upper; flushed.inst.unique_id == 7

The second request is dropped because instruction 9 is younger than
instruction 7, so the first flush already removes it.

## What this package does not do

The package has no event scheduler, no pipeline units and no simulation
driver. `FlushManager.forward()` and the load/store bookkeeping are invoked
directly by the caller, not on clock cycles. It does not read or write
instruction traces, and it does not produce pipeline-collection output
files. `pair_values()` only returns the values as a dictionary.

## Tests

    pip install .[test]
    pytest