#!/usr/bin/env python3
"""
coldflow vs RxPY Throughput Comparison

Times equivalent cold pipelines in both libraries and prints a rich table.

Benchmark Categories:
- Subscription: subscribing to a synchronous source
- Projection: multiply every value
- Filtering: drop even values
- Filter then Project: the canonical ``ignore_even().multiply(10)`` chain
- Deep Chain: many stacked projections
"""

import argparse
import time
from dataclasses import dataclass
from typing import Callable, List, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

import coldflow
from coldflow import ignore_even, multiply

try:
    import rx
except ImportError:
    raise SystemExit("RxPY not available. Install with: pip install -e '.[benchmark]'")

from rx import operators as ops


# ============================================================================
# Configuration
# ============================================================================


@dataclass
class ComparisonConfig:
    """Comparison configuration parameters."""

    values: int = 10_000
    repeats: int = 5
    chain_depth: int = 50


@dataclass
class ComparisonResult:
    """Timing for one operation in both libraries."""

    operation: str
    coldflow_seconds: float
    rxpy_seconds: float
    matched: bool

    @property
    def speedup(self) -> float:
        if self.coldflow_seconds == 0:
            return float("inf")
        return self.rxpy_seconds / self.coldflow_seconds


def best_of(repeats: int, run: Callable[[], List[int]]) -> Tuple[float, List[int]]:
    """Run ``run`` several times and keep the fastest time and its output."""
    best = float("inf")
    output: List[int] = []
    for _ in range(repeats):
        start = time.perf_counter()
        output = run()
        best = min(best, time.perf_counter() - start)
    return best, output


def collect_coldflow(stream: coldflow.Observable) -> List[int]:
    received: List[int] = []
    stream.subscribe(received.append)
    return received


def collect_rxpy(observable) -> List[int]:
    received: List[int] = []
    observable.subscribe(on_next=received.append)
    return received


# ============================================================================
# Comparison
# ============================================================================


class ColdflowRxpyComparison:
    """Compare coldflow and RxPY on equivalent pipelines."""

    def __init__(self, config: ComparisonConfig):
        self.config = config
        self.console = Console()
        self.results: List[ComparisonResult] = []

    def pipelines(self):
        values = list(range(self.config.values))
        depth = self.config.chain_depth

        def deep_coldflow():
            stream = coldflow.from_iterable(values)
            for _ in range(depth):
                stream = stream.multiply(1)
            return stream

        def deep_rxpy():
            return rx.from_iterable(values).pipe(*[ops.map(lambda v: v * 1) for _ in range(depth)])

        return [
            (
                "Subscription",
                lambda: coldflow.from_iterable(values),
                lambda: rx.from_iterable(values),
            ),
            (
                "Projection",
                lambda: coldflow.from_iterable(values).multiply(3),
                lambda: rx.from_iterable(values).pipe(ops.map(lambda v: v * 3)),
            ),
            (
                "Filtering",
                lambda: ignore_even(coldflow.from_iterable(values)),
                lambda: rx.from_iterable(values).pipe(ops.filter(lambda v: v % 2 == 1)),
            ),
            (
                "Filter then Project",
                lambda: multiply(coldflow.from_iterable(values).ignore_even(), 10),
                lambda: rx.from_iterable(values).pipe(
                    ops.filter(lambda v: v % 2 == 1), ops.map(lambda v: v * 10)
                ),
            ),
            ("Deep Chain", deep_coldflow, deep_rxpy),
        ]

    def run(self) -> None:
        self.console.print(
            Panel(
                f"coldflow vs RxPY\n{self.config.values} values, best of {self.config.repeats}",
                title="Library Comparison",
                border_style="blue",
            )
        )

        for operation, build_coldflow, build_rxpy in self.pipelines():
            self.console.print(f"[yellow]Running {operation}...[/yellow]")
            coldflow_stream = build_coldflow()
            rxpy_observable = build_rxpy()
            coldflow_time, coldflow_out = best_of(
                self.config.repeats, lambda: collect_coldflow(coldflow_stream)
            )
            rxpy_time, rxpy_out = best_of(
                self.config.repeats, lambda: collect_rxpy(rxpy_observable)
            )
            self.results.append(
                ComparisonResult(operation, coldflow_time, rxpy_time, coldflow_out == rxpy_out)
            )

        self.display()

    def display(self) -> None:
        table = Table(title="Performance Comparison")
        table.add_column("Operation", style="cyan")
        table.add_column("coldflow ms", style="green", justify="right")
        table.add_column("RxPY ms", style="blue", justify="right")
        table.add_column("Speedup", style="magenta", justify="right")
        table.add_column("Same output", style="yellow", justify="center")

        for result in self.results:
            table.add_row(
                result.operation,
                f"{result.coldflow_seconds * 1000:.2f}",
                f"{result.rxpy_seconds * 1000:.2f}",
                f"{result.speedup:.2f}x",
                "yes" if result.matched else "[red]NO[/red]",
            )

        self.console.print(table)


def main():
    """Main entry point for the comparison script."""
    parser = argparse.ArgumentParser(description="coldflow vs RxPY Throughput Comparison")
    parser.add_argument("--values", type=int, default=ComparisonConfig.values)
    parser.add_argument("--repeats", type=int, default=ComparisonConfig.repeats)
    parser.add_argument("--depth", type=int, default=ComparisonConfig.chain_depth)
    args = parser.parse_args()

    config = ComparisonConfig(values=args.values, repeats=args.repeats, chain_depth=args.depth)
    ColdflowRxpyComparison(config).run()


if __name__ == "__main__":
    main()
