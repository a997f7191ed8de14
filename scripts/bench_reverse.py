"""Compare delegated reversal against buffering."""

import timeit
from collections.abc import Callable
from functools import partial
from typing import Annotated, Final, NamedTuple

import typer
from rich.console import Console
from rich.table import Table

import reviter as rv

app = typer.Typer(help="Benchmarks for reviter reversal strategies.")

CONSOLE: Final = Console()


class Case(NamedTuple):
    """Two implementations of the same operation."""

    name: str
    delegated: Callable[[list[int]], object]
    buffered: Callable[[list[int]], object]


def _double(x: int) -> int:
    return x * 2


def _reverse_mapped(data: list[int]) -> object:
    return rv.first(rv.RevIter.from_(data).map(_double).reverse())


def _reverse_mapped_buffered(data: list[int]) -> object:
    return rv.first(reversed(list(map(_double, data))))


def _last_filtered(data: list[int]) -> object:
    return rv.RevIter.from_(data).filter(lambda x: x % 7 == 0).last()


def _last_filtered_scan(data: list[int]) -> object:
    return rv.last(x for x in data if x % 7 == 0)


CASES: Final = (
    Case("map then reverse", _reverse_mapped, _reverse_mapped_buffered),
    Case("filter then last", _last_filtered, _last_filtered_scan),
)


def _median(fn: Callable[[], object], runs: int, number: int) -> float:
    timings = sorted(timeit.repeat(fn, repeat=runs, number=number))
    return timings[len(timings) // 2] / number


@app.command()
def main(
    size: Annotated[int, typer.Option(help="Number of elements.")] = 100_000,
    runs: Annotated[int, typer.Option(help="Timing repetitions.")] = 5,
    number: Annotated[int, typer.Option(help="Calls per repetition.")] = 10,
) -> None:
    """Run benchmarks."""
    data = list(range(size))
    table = Table(title="Benchmark Results")
    table.add_column("Operation", style="cyan")
    table.add_column("Size", justify="right", style="magenta")
    table.add_column("Delegated (μs, median)", justify="right", style="green")
    table.add_column("Buffered (μs, median)", justify="right", style="yellow")
    table.add_column("Speedup", justify="right")

    CONSOLE.print("Running benchmarks...", style="bold blue")
    for case in CASES:
        if case.delegated(data) != case.buffered(data):
            msg = f"{case.name}: both implementations must produce the same result"
            raise RuntimeError(msg)
        delegated = _median(partial(case.delegated, data), runs, number)
        buffered = _median(partial(case.buffered, data), runs, number)
        ratio = buffered / delegated if delegated else float("inf")
        table.add_row(
            case.name,
            str(size),
            f"{delegated * 1_000_000:.2f}",
            f"{buffered * 1_000_000:.2f}",
            f"x{ratio:.1f}",
            style="green bold" if ratio >= 1 else "red bold",
        )
    CONSOLE.print(table)


if __name__ == "__main__":
    app()
