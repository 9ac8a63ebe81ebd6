import time
from functools import partial
from typing import List, Sequence, TextIO, Tuple

import pandas as pd

from sortscope.algorithms import Algorithm, implementation
from sortscope.counters import Counters, RunStatistics
from sortscope.output import log, output
from sortscope.snapshots import (
    SnapshotEmitter,
    SnapshotSink,
    check_snapshot_length,
    console_sink,
)


def sort(
    algorithm: Algorithm,
    values: Sequence[int],
    show_steps: bool = False,
    sink: SnapshotSink | None = None,
) -> Tuple[List[int], RunStatistics]:
    """
    Sort a copy of ``values`` with ``algorithm``.

    Args:
        algorithm (Algorithm): Which algorithm to run.
        values (sequence of int): The input.  It is never modified.
        show_steps (bool): Hand the array to ``sink`` at each snapshot point.
        sink (callable, optional): Receives the snapshots.  Defaults to
            printing them to the console.

    Returns:
        The sorted copy and the statistics of the run.  The duration covers
        the whole algorithm call, including any snapshot printing.

    Raises:
        SnapshotLimitError: If ``show_steps`` is set for more than
            ``MAX_SNAPSHOT_LENGTH`` values.
    """
    if show_steps:
        check_snapshot_length(len(values))

    func = implementation(algorithm)
    working = list(values)
    counters = Counters()
    emit = SnapshotEmitter(show_steps, sink)

    start_time = time.perf_counter()
    func(working, counters, emit)
    end_time = time.perf_counter()

    stats = counters.freeze((end_time - start_time) * 1000)
    log(
        f"{algorithm}: n={len(working)} comparisons={stats.comparisons} "
        f"swaps={stats.swaps} snapshots={emit.count}"
    )
    return working, stats


def format_report(algorithm: Algorithm, stats: RunStatistics) -> str:
    return "\n".join(
        [
            f"{algorithm}",
            f"  Comparisons: {stats.comparisons}",
            f"  Swaps:       {stats.swaps}",
            f"  Time:        {stats.duration_ms:.3f} ms",
        ]
    )


def run_algorithm(
    algorithm: Algorithm,
    base: Sequence[int],
    show_steps: bool = False,
    file: TextIO | None = None,
) -> RunStatistics:
    """
    Run one algorithm on a copy of ``base`` and write its report.
    The sorted result is discarded.
    """
    if show_steps:
        output.message(f"Steps for {algorithm}:", file=file)
    _, stats = sort(algorithm, base, show_steps, partial(console_sink, file=file))
    output.message(format_report(algorithm, stats), file=file)
    return stats


def statistics_table(results: List[Tuple[Algorithm, RunStatistics]]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            (algorithm.title, stats.comparisons, stats.swaps, stats.duration_ms)
            for algorithm, stats in results
        ],
        columns=["algorithm", "comparisons", "swaps", "time_ms"],
    )


def run_all(
    base: Sequence[int],
    show_steps: bool = False,
    file: TextIO | None = None,
) -> pd.DataFrame:
    """
    Run every algorithm on its own copy of ``base``, report each one, then
    print a side by side comparison.  Returns the comparison table.
    """
    results = []
    for algorithm in Algorithm:
        stats = run_algorithm(algorithm, base, show_steps, file)
        output.message("", file=file)
        results.append((algorithm, stats))

    table = statistics_table(results)
    output.message("Comparison", file=file)
    output.message("----------", file=file)
    output.message(
        table.to_string(index=False, formatters={"time_ms": "{:.3f}".format}),
        file=file,
    )
    return table
