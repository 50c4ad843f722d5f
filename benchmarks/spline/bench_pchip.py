"""Benchmarks for PCHIP fitting and evaluation.

This module compares torchpchip against scipy.interpolate.PchipInterpolator
for a range of knot and query counts.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch
from scipy.interpolate import PchipInterpolator

from torchpchip import pchip_evaluate, pchip_fit


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics ('mean', 'std', 'min', 'max'),
        in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    pchip_time: dict[str, float],
    scipy_time: dict[str, float],
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchpchip: {format_time(pchip_time['mean'])} +/- {format_time(pchip_time['std'])}"
    )
    print(
        f"  scipy:      {format_time(scipy_time['mean'])} +/- {format_time(scipy_time['std'])}"
    )
    speedup = scipy_time["mean"] / pchip_time["mean"]
    if speedup >= 1:
        print(f"  Speedup:    {speedup:.2f}x faster")
    else:
        print(f"  Slowdown:   {1 / speedup:.2f}x slower")


class BenchPCHIP:
    """Benchmark suite for PCHIP fitting and evaluation."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _data(self, n_knots: int, n_queries: int):
        generator = torch.Generator().manual_seed(0)
        x = torch.cumsum(
            torch.rand(n_knots, generator=generator, dtype=torch.float64)
            + 0.1,
            dim=0,
        )
        y = torch.sin(x)
        t = x[0] + (x[-1] - x[0]) * torch.rand(
            n_queries, generator=generator, dtype=torch.float64
        )
        return x, y, t

    def bench_fit(self, n_knots: int) -> None:
        x, y, _ = self._data(n_knots, 1)

        pchip_time = benchmark(
            pchip_fit, x, y, warmup=self.warmup, iterations=self.iterations
        )
        scipy_time = benchmark(
            PchipInterpolator,
            x.numpy(),
            y.numpy(),
            warmup=self.warmup,
            iterations=self.iterations,
        )

        print_comparison(f"fit (n_knots={n_knots})", pchip_time, scipy_time)

    def bench_evaluate(self, n_knots: int, n_queries: int) -> None:
        x, y, t = self._data(n_knots, n_queries)

        spline = pchip_fit(x, y)
        reference = PchipInterpolator(x.numpy(), y.numpy())
        t_numpy = t.numpy()

        pchip_time = benchmark(
            pchip_evaluate,
            spline,
            t,
            warmup=self.warmup,
            iterations=self.iterations,
        )
        scipy_time = benchmark(
            reference,
            t_numpy,
            warmup=self.warmup,
            iterations=self.iterations,
        )

        print_comparison(
            f"evaluate (n_knots={n_knots}, n_queries={n_queries})",
            pchip_time,
            scipy_time,
        )

    def run_all(self) -> None:
        print("=" * 60)
        print("PCHIP Benchmarks")
        print("=" * 60)

        for n_knots in [10, 100, 1000]:
            self.bench_fit(n_knots)

        for n_knots in [10, 100, 1000]:
            self.bench_evaluate(n_knots, 10000)


if __name__ == "__main__":
    bench = BenchPCHIP(warmup=5, iterations=20)
    bench.run_all()
