import random

import pytest

import sortscope.algorithms
from sortscope import Algorithm, SnapshotLimitError, sort
from sortscope.snapshots import RecordingSink


ALL = list(Algorithm)


@pytest.mark.parametrize("algorithm", ALL)
def test_small_example(algorithm):
    result, _ = sort(algorithm, [5, 3, 8, 1])
    assert result == [1, 3, 5, 8]


@pytest.mark.parametrize("algorithm", ALL)
@pytest.mark.parametrize("values", [[], [42]])
def test_trivial_inputs(algorithm, values):
    result, stats = sort(algorithm, values)
    assert result == values
    assert stats.comparisons == 0
    assert stats.swaps == 0
    assert stats.duration_ms >= 0


@pytest.mark.parametrize("algorithm", ALL)
def test_sorts_permutations(algorithm):
    rand = random.Random(7)
    for _ in range(50):
        values = [rand.randint(-20, 20) for _ in range(rand.randint(0, 40))]
        result, _ = sort(algorithm, values)
        assert result == sorted(values)


@pytest.mark.parametrize("algorithm", ALL)
def test_input_is_not_modified(algorithm):
    values = [4, 2, 9, 1, 1, 7]
    sort(algorithm, values)
    assert values == [4, 2, 9, 1, 1, 7]


def test_bubble_counts():
    _, stats = sort(Algorithm.BUBBLE, [5, 3, 8, 1])
    assert stats.comparisons == 6
    assert stats.swaps == 4


def test_bubble_stops_after_one_clean_pass():
    _, stats = sort(Algorithm.BUBBLE, list(range(10)))
    assert stats.comparisons == 9
    assert stats.swaps == 0


def test_selection_counts():
    # the minimum is already in place at i=1, so only two swaps happen
    _, stats = sort(Algorithm.SELECTION, [5, 3, 8, 1])
    assert stats.comparisons == 6
    assert stats.swaps == 2


@pytest.mark.parametrize("n", [0, 1, 2, 5, 13, 30])
def test_selection_bounds(n):
    values = random.Random(n).sample(range(100), n)
    _, stats = sort(Algorithm.SELECTION, values)
    assert stats.comparisons == n * (n - 1) // 2
    assert stats.swaps <= n


def test_selection_sorted_input_never_swaps():
    _, stats = sort(Algorithm.SELECTION, [1, 2, 2, 3, 9])
    assert stats.swaps == 0


def test_insertion_counts():
    _, stats = sort(Algorithm.INSERTION, [5, 3, 8, 1])
    assert stats.comparisons == 5
    assert stats.swaps == 4


def test_insertion_counts_stopping_comparison():
    # 3 is shifted past 4; then 2 stops the scan
    _, stats = sort(Algorithm.INSERTION, [2, 4, 3])
    assert stats.swaps == 1
    assert stats.comparisons == 3


def test_insertion_comparisons_bound_swaps():
    rand = random.Random(3)
    for _ in range(30):
        values = [rand.randint(0, 9) for _ in range(rand.randint(0, 25))]
        _, stats = sort(Algorithm.INSERTION, values)
        assert stats.comparisons >= stats.swaps


def test_quick_counts():
    _, stats = sort(Algorithm.QUICK, [5, 3, 8, 1])
    assert stats.comparisons == 5
    assert stats.swaps == 3


def test_quick_counts_self_swaps():
    # every element is <= the pivot, so each advance counts as a swap
    _, stats = sort(Algorithm.QUICK, [1, 2, 3])
    assert stats.comparisons == 3
    assert stats.swaps == 5


@pytest.mark.parametrize("n", [2, 5, 8, 31])
def test_quick_reverse_sorted_is_quadratic(n):
    _, stats = sort(Algorithm.QUICK, list(range(n, 0, -1)))
    assert stats.comparisons == n * (n - 1) // 2


def test_quick_handles_long_reverse_input():
    n = 1500
    result, stats = sort(Algorithm.QUICK, list(range(n, 0, -1)))
    assert result == list(range(1, n + 1))
    assert stats.comparisons == n * (n - 1) // 2


def test_quick_comparisons_match_partition_sizes(monkeypatch):
    sizes = []
    original = sortscope.algorithms.partition

    def recording_partition(values, low, high, counters):
        sizes.append(high - low + 1)
        return original(values, low, high, counters)

    monkeypatch.setattr(sortscope.algorithms, "partition", recording_partition)
    values = random.Random(11).sample(range(1000), 60)
    _, stats = sort(Algorithm.QUICK, values)
    assert stats.comparisons == sum(size - 1 for size in sizes)


def test_bubble_snapshots_every_comparison():
    sink = RecordingSink()
    _, stats = sort(Algorithm.BUBBLE, [5, 3, 8, 1], show_steps=True, sink=sink)
    assert len(sink) == stats.comparisons
    assert sink.snapshots[0] == [3, 5, 8, 1]
    assert sink.snapshots[-1] == [1, 3, 5, 8]


def test_selection_snapshots():
    sink = RecordingSink()
    sort(Algorithm.SELECTION, [5, 3, 8, 1], show_steps=True, sink=sink)
    assert sink.snapshots == [
        [1, 3, 8, 5],
        [1, 3, 8, 5],
        [1, 3, 5, 8],
        [1, 3, 5, 8],
    ]


def test_insertion_snapshots():
    sink = RecordingSink()
    sort(Algorithm.INSERTION, [5, 3, 8, 1], show_steps=True, sink=sink)
    assert sink.snapshots == [[3, 5, 8, 1], [3, 5, 8, 1], [1, 3, 5, 8]]


def test_quick_snapshots_once_per_partition():
    sink = RecordingSink()
    sort(Algorithm.QUICK, [5, 3, 8, 1], show_steps=True, sink=sink)
    assert sink.snapshots == [[1, 3, 8, 5], [1, 3, 5, 8]]


@pytest.mark.parametrize("algorithm", ALL)
def test_no_snapshots_unless_requested(algorithm, capsys):
    sink = RecordingSink()
    sort(algorithm, [5, 3, 8, 1], sink=sink)
    assert len(sink) == 0
    # the same sink does receive them once steps are on
    sort(algorithm, [5, 3, 8, 1], show_steps=True, sink=sink)
    assert len(sink) > 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("algorithm", ALL)
def test_empty_sink_is_used(algorithm, capsys):
    sink = RecordingSink()
    assert not sink
    sort(algorithm, [2, 1], show_steps=True, sink=sink)
    assert sink.snapshots[-1] == [1, 2]
    assert capsys.readouterr().out == ""


def test_default_sink_prints(capsys):
    sort(Algorithm.QUICK, [2, 1], show_steps=True)
    assert capsys.readouterr().out == "  1 2\n"


@pytest.mark.parametrize("algorithm", ALL)
def test_snapshot_length_limit(algorithm):
    sort(algorithm, list(range(20, 0, -1)), show_steps=True, sink=RecordingSink())
    with pytest.raises(SnapshotLimitError):
        sort(algorithm, list(range(21)), show_steps=True, sink=RecordingSink())


def test_algorithm_lookup():
    assert Algorithm.from_letter("q") is Algorithm.QUICK
    assert Algorithm.from_key("Insertion") is Algorithm.INSERTION
    assert str(Algorithm.BUBBLE) == "Bubble Sort"
    with pytest.raises(ValueError):
        Algorithm.from_letter("X")
