"""
Growth analysis: measure every algorithm over increasing input sizes and
fit the counts against complexity classes.
"""

from dataclasses import dataclass
from typing import Iterable, List

from matplotlib.figure import Figure, SubFigure
import numpy as np
import pandas as pd
import seaborn as sns

from sortscope import models
from sortscope.algorithms import Algorithm
from sortscope.arrays import random_array
from sortscope.output import log, timer
from sortscope.runner import sort

DEFAULT_SIZES = (50, 100, 200, 300, 400, 500)
DEFAULT_TRIALS = 3
DEFAULT_LOW = 0
DEFAULT_HIGH = 1000
# Two-parameter models need more distinct sizes than parameters.
MIN_GROWTH_SIZES = 3

METRICS = {"comparisons": "Comparisons", "swaps": "Swaps"}


@dataclass
class Result:
    success: bool
    message: str
    details: str
    warnings: List[str]


def measure_growth(
    sizes: Iterable[int] = DEFAULT_SIZES,
    trials: int = DEFAULT_TRIALS,
    seed: int | None = None,
    low: int = DEFAULT_LOW,
    high: int = DEFAULT_HIGH,
) -> pd.DataFrame:
    """
    Sort ``trials`` random arrays of each size with every algorithm.
    All algorithms see the same arrays.  Returns one row per run with
    columns algorithm, n, comparisons, swaps and time_ms.
    """
    rng = np.random.default_rng(seed)
    rows = []
    for n in sizes:
        with timer(f"Measuring n={n}"):
            for _ in range(trials):
                base = random_array(n, low, high, seed=int(rng.integers(2**32)))
                for algorithm in Algorithm:
                    _, stats = sort(algorithm, base)
                    rows.append(
                        (
                            algorithm.key,
                            n,
                            stats.comparisons,
                            stats.swaps,
                            stats.duration_ms,
                        )
                    )
    log(f"{len(rows)} runs measured")
    return pd.DataFrame(
        rows, columns=["algorithm", "n", "comparisons", "swaps", "time_ms"]
    )


def infer_growth(
    table: pd.DataFrame, algorithm: Algorithm, metric: str = "comparisons"
) -> models.InferBoundResult:
    """Fit the growth models to one algorithm's ``metric`` column."""
    rows = table[table["algorithm"] == algorithm.key]
    return models.infer_bound(rows["n"].to_numpy(), rows[metric].to_numpy())


class GrowthAnalysis:
    def __init__(self, algorithm: Algorithm, table: pd.DataFrame):
        self.algorithm = algorithm
        self.table = table
        self.fits: dict[str, models.InferBoundResult] = {}

    def title(self) -> str:
        return f"Growth of {self.algorithm}"

    def run(self) -> Result:
        with timer(self.title()):
            for metric in METRICS:
                self.fits[metric] = infer_growth(self.table, self.algorithm, metric)

        best = {metric: self.fits[metric].best for metric in METRICS}
        named = {
            metric: str(fit) if fit is not None else "no fit"
            for metric, fit in best.items()
        }
        details = [f"Ranked fits for {self.algorithm}"]
        for metric, label in METRICS.items():
            ranked = ", ".join(str(f) for f in self.fits[metric].models[:3])
            details.append(f"{label}: {ranked or 'no fit'}")
        return Result(
            success=all(fit is not None for fit in best.values()),
            message=(
                f"Comparisons grow as {named['comparisons']}.  "
                f"Swaps grow as {named['swaps']}."
            ),
            details="\n".join(details),
            warnings=[w for fit in self.fits.values() for w in fit.warnings],
        )

    def plot_fit(self, ax, metric: str, color: str):
        fit = self.fits[metric].best
        rows = self.table[self.table["algorithm"] == self.algorithm.key]
        sns.scatterplot(
            x=rows["n"], y=rows[metric], ax=ax, color=color, alpha=0.7, label="Runs"
        )
        if fit is not None:
            fit_n = np.unique(fit.n)
            sns.lineplot(
                x=fit_n,
                y=fit.predict(fit_n),
                ax=ax,
                color=color,
                linewidth=2,
                label=f"Best fit: {fit}",
            )
        ax.set_xlabel("Input Size (n)")
        ax.set_ylabel(METRICS[metric])
        ax.set_title(f"{self.algorithm} {METRICS[metric].lower()}", fontsize=12)
        ax.legend()

    def plot(self, fig: Figure | SubFigure | None = None):
        if fig is None:
            fig = Figure(constrained_layout=True, figsize=(12, 4))
        comparisons_ax, swaps_ax = fig.subplots(1, 2)
        self.plot_fit(comparisons_ax, "comparisons", "C0")
        self.plot_fit(swaps_ax, "swaps", "C1")
        return fig


def save_growth_plot(analyses: List[GrowthAnalysis], filename: str) -> str:
    sns.set_style("whitegrid")
    sns.set_palette("tab10")
    fig = Figure(constrained_layout=True, figsize=(12, 4 * len(analyses)))
    subfigs = fig.subfigures(len(analyses), 1, squeeze=False).ravel()
    for subfig, analysis in zip(subfigs, analyses):
        analysis.plot(subfig)
        subfig.suptitle(analysis.title())
    fig.savefig(filename)
    return filename
