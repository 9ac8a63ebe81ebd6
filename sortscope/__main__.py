import textwrap
from typing import List, Optional

import click

from sortscope.algorithms import Algorithm
from sortscope.arrays import VALUE_MAX, VALUE_MIN, random_array
from sortscope.errors import SortScopeError
from sortscope.growth import (
    DEFAULT_SIZES,
    DEFAULT_TRIALS,
    MIN_GROWTH_SIZES,
    GrowthAnalysis,
    measure_growth,
    save_growth_plot,
)
from sortscope.output import output, set_debug, timer
from sortscope.runner import run_algorithm, run_all
from sortscope.snapshots import MAX_SNAPSHOT_LENGTH


system_name = "sortscope"

# Array values must fit the int64 generator.
VALUE = click.IntRange(VALUE_MIN, VALUE_MAX)

MENU = """\
1. Run one algorithm
2. Run all algorithms for comparison
3. Exit"""


def parse_sizes(ctx, param, value) -> List[int]:
    try:
        sizes = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter("Sizes must be a comma separated list of integers.")
    if any(size < 1 for size in sizes):
        raise click.BadParameter("Sizes must be positive.")
    if len(set(sizes)) < MIN_GROWTH_SIZES:
        raise click.BadParameter(
            f"At least {MIN_GROWTH_SIZES} different sizes are needed to fit growth models."
        )
    return sizes


def make_array(length: int, low: int, high: int, seed: Optional[int]) -> List[int]:
    try:
        return random_array(length, low, high, seed)
    except SortScopeError as e:
        raise click.BadParameter(e.message)


def show_array(base: List[int]):
    if len(base) <= MAX_SNAPSHOT_LENGTH:
        output.message("Array:", " ".join(str(v) for v in base))


def check_steps(base: List[int], steps: bool):
    if steps and len(base) > MAX_SNAPSHOT_LENGTH:
        raise click.UsageError(
            f"--steps is only available for arrays of at most {MAX_SNAPSHOT_LENGTH} elements."
        )


array_options = [
    click.option(
        "--length", "length", type=click.IntRange(min=1), default=10, show_default=True,
        help="Number of elements in the array.",
    ),
    click.option("--min", "low", type=VALUE, default=0, show_default=True, help="Smallest value."),
    click.option("--max", "high", type=VALUE, default=100, show_default=True, help="Largest value."),
    click.option("--seed", "seed", type=int, default=None, help="Seed for the random array."),
    click.option(
        "--steps", "steps", is_flag=True,
        help=f"Print the array after each step (at most {MAX_SNAPSHOT_LENGTH} elements).",
    ),
]


def with_array_options(func):
    for option in reversed(array_options):
        func = option(func)
    return func


@click.group(invoke_without_command=True)
@click.option(
    "--debug",
    "debug",
    is_flag=True,
    envvar="SORTSCOPE_DEBUG",
    help="Show debug output.",
)
@click.pass_context
def main(ctx: click.Context, debug: bool):
    """Compare bubble, selection, insertion and quick sort."""
    set_debug(debug)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@main.command()
def menu():
    """Interactive menu (the default)."""
    length = click.prompt("Array length", type=click.IntRange(min=1))
    while True:
        low = click.prompt("Minimum value", type=VALUE)
        high = click.prompt("Maximum value", type=VALUE)
        if low <= high:
            break
        output.error(f"Minimum {low} is greater than maximum {high}, try again.")

    base = random_array(length, low, high)
    show_array(base)

    while True:
        output.message("")
        output.message(MENU)
        choice = click.prompt("Choice", type=click.Choice(["1", "2", "3"]))
        if choice == "3":
            output.message("Goodbye.")
            return

        algorithm = None
        if choice == "1":
            letter = click.prompt(
                "Algorithm (B)ubble, (S)election, (I)nsertion, (Q)uick",
                type=click.Choice(["B", "S", "I", "Q"], case_sensitive=False),
            )
            algorithm = Algorithm.from_letter(letter)

        steps = False
        if length <= MAX_SNAPSHOT_LENGTH:
            steps = click.confirm("Show steps?", default=False)

        output.message("")
        if algorithm is None:
            run_all(base, steps)
        else:
            run_algorithm(algorithm, base, steps)


@main.command()
@click.argument(
    "algorithm",
    type=click.Choice([algorithm.key for algorithm in Algorithm], case_sensitive=False),
)
@with_array_options
def run(algorithm: str, length: int, low: int, high: int, seed: Optional[int], steps: bool):
    """Run one algorithm on a random array."""
    base = make_array(length, low, high, seed)
    check_steps(base, steps)
    show_array(base)
    run_algorithm(Algorithm.from_key(algorithm), base, steps)


@main.command()
@with_array_options
def compare(length: int, low: int, high: int, seed: Optional[int], steps: bool):
    """Run all four algorithms on the same random array."""
    base = make_array(length, low, high, seed)
    check_steps(base, steps)
    show_array(base)
    run_all(base, steps)


@main.command()
@click.option(
    "--sizes",
    "sizes",
    default=",".join(str(size) for size in DEFAULT_SIZES),
    show_default=True,
    callback=parse_sizes,
    help="Comma separated input sizes to measure.",
)
@click.option(
    "--trials", "trials", type=click.IntRange(min=1), default=DEFAULT_TRIALS,
    show_default=True, help="Random arrays per size.",
)
@click.option("--seed", "seed", type=int, default=None, help="Seed for the random arrays.")
@click.option(
    "--plot",
    "plot_file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Save a plot of the measurements and fits to this file.",
)
def growth(sizes: List[int], trials: int, seed: Optional[int], plot_file: Optional[str]):
    """Fit comparison and swap counts against complexity classes."""
    with timer("Measuring"):
        table = measure_growth(sizes, trials, seed)

    summary = table.groupby(["algorithm", "n"], sort=False).mean(numeric_only=True)
    output.message(summary.to_string(float_format="{:.1f}".format))

    analyses = [GrowthAnalysis(algorithm, table) for algorithm in Algorithm]
    for analysis in analyses:
        output.message("")
        output.message(analysis.title())
        output.message("-" * len(analysis.title()))
        result = analysis.run()
        output.message(textwrap.indent(result.message, "  "))
        output.message(textwrap.indent(result.details, "  "))
        if result.warnings:
            output.message(
                textwrap.indent("\n".join(["Warnings:"] + result.warnings), "  ")
            )

    if plot_file:
        with timer("Plotting"):
            save_growth_plot(analyses, plot_file)
        output.message(f"{plot_file} written.")


if __name__ == "__main__":
    main()
