from sortscope.algorithms import Algorithm
from sortscope.arrays import random_array
from sortscope.counters import RunStatistics
from sortscope.errors import InvalidRangeError, SnapshotLimitError, SortScopeError
from sortscope.growth import infer_growth, measure_growth
from sortscope.runner import format_report, run_algorithm, run_all, sort
from sortscope.snapshots import MAX_SNAPSHOT_LENGTH

__all__ = [
    "Algorithm",
    "InvalidRangeError",
    "MAX_SNAPSHOT_LENGTH",
    "RunStatistics",
    "SnapshotLimitError",
    "SortScopeError",
    "format_report",
    "infer_growth",
    "measure_growth",
    "random_array",
    "run_algorithm",
    "run_all",
    "sort",
]
