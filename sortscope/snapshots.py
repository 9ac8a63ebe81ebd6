from typing import Callable, List, Sequence, TextIO

from sortscope.errors import SnapshotLimitError
from sortscope.output import output

# Longest sequence we are willing to print after every step.
MAX_SNAPSHOT_LENGTH = 20

SnapshotSink = Callable[[Sequence[int]], None]


def console_sink(values: Sequence[int], file: TextIO | None = None) -> None:
    output.snapshot(values, file=file)


def check_snapshot_length(length: int) -> None:
    if length > MAX_SNAPSHOT_LENGTH:
        raise SnapshotLimitError(
            f"Step display is limited to {MAX_SNAPSHOT_LENGTH} elements, got {length}.",
            "Printing the whole array after every step is only readable for small "
            f"arrays. Run again without step display or with at most "
            f"{MAX_SNAPSHOT_LENGTH} elements.",
        )


class SnapshotEmitter:
    """
    Hands the current array state to a sink at the points an algorithm
    chooses.  A disabled emitter does nothing, so algorithms can call it
    unconditionally.
    """

    def __init__(self, enabled: bool = False, sink: SnapshotSink | None = None):
        self.enabled = enabled
        self.sink = console_sink if sink is None else sink
        self.count = 0

    def __call__(self, values: List[int]) -> None:
        if self.enabled:
            self.count += 1
            # hand out a copy so sinks may keep what they receive
            self.sink(list(values))


class RecordingSink:
    """A sink that keeps every snapshot it receives."""

    def __init__(self):
        self.snapshots: List[List[int]] = []

    def __call__(self, values: Sequence[int]) -> None:
        self.snapshots.append(list(values))

    def __len__(self):
        return len(self.snapshots)
