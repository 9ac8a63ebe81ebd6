from dataclasses import dataclass


@dataclass(frozen=True)
class RunStatistics:
    """
    Comparison and swap counts plus elapsed time for one finished sorting run.
    Duration is wall-clock milliseconds around the algorithm call.
    """

    comparisons: int = 0
    swaps: int = 0
    duration_ms: float = 0.0


@dataclass
class Counters:
    """Mutable counters owned by a single sorting run."""

    comparisons: int = 0
    swaps: int = 0

    def compare(self, count: int = 1) -> None:
        self.comparisons += count

    def swap(self, count: int = 1) -> None:
        self.swaps += count

    def freeze(self, duration_ms: float) -> RunStatistics:
        return RunStatistics(
            comparisons=self.comparisons,
            swaps=self.swaps,
            duration_ms=duration_ms,
        )
