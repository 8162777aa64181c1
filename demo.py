#!/usr/bin/env python3
"""
Demo and benchmarks for the fastdiscrete samplers.

Usage:
    python3 demo.py --binomial      # Binomial demo
    python3 demo.py --categorical   # Categorical demo
    python3 demo.py --multinomial   # Multinomial demo
    python3 demo.py --benchmark     # Time each sampler against a stdlib baseline
"""

import argparse
import logging
import random
import time

from fastdiscrete import (
    AESCounterGenerator,
    BinomialDistribution,
    CategoricalDistribution,
    MultinomialDistribution,
    RandomGenerator,
    ShakeGenerator,
)


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_count(n: int) -> str:
    """Format number with K/M suffix."""
    if n >= 1_000_000:
        return f"{n/1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n/1_000:.1f}K"
    return str(n)


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    return f"{seconds*1_000_000:.1f}us"


def parse_weights(text: str) -> list[float]:
    """Parse a comma-separated weight list, e.g. "1,2,3"."""
    return [float(w) for w in text.split(",") if w.strip()]


def make_generator(kind: str, seed: int):
    """Build one of the reference generators from an integer seed."""
    if kind == "shake":
        return ShakeGenerator(seed.to_bytes(32, "little"))
    if kind == "aes":
        return AESCounterGenerator(seed.to_bytes(16, "little"))
    if kind == "random":
        return RandomGenerator.seeded(seed)
    raise ValueError(f"Unknown generator: {kind}")


# =============================================================================
# Demos
# =============================================================================


def run_binomial_demo(t: int, p: float, num_samples: int, g) -> None:
    dist = BinomialDistribution(t, p)
    print("=" * 70)
    print(f"{dist!r}")
    print("=" * 70)

    start = time.perf_counter()
    samples = dist.sample_iter(g, num_samples)
    elapsed = time.perf_counter() - start

    mean = sum(samples) / len(samples)
    variance = sum((s - mean) ** 2 for s in samples) / len(samples)
    print(f"  Samples:        {format_count(num_samples):>10}")
    print(f"  Mean:           {mean:>10.4f}  (expected {dist.mean:.4f})")
    print(f"  Variance:       {variance:>10.4f}  (expected {t * p * (1 - p):.4f})")
    print(f"  Range seen:     [{min(samples)}, {max(samples)}]  (support [0, {dist.max}])")
    print(f"  Time/sample:    {format_time(elapsed / num_samples):>10}")


def run_categorical_demo(weights: list[float], num_samples: int, g) -> None:
    dist = CategoricalDistribution(weights)
    print("=" * 70)
    print(f"{dist!r}")
    print("=" * 70)

    start = time.perf_counter()
    samples = dist.sample_iter(g, num_samples)
    elapsed = time.perf_counter() - start

    counts = [0] * dist.max
    for s in samples:
        counts[s] += 1

    print(f"  {'Category':>8}  {'Observed':>10}  {'Expected':>10}")
    for k, prob in enumerate(dist.probabilities):
        print(f"  {k:>8}  {counts[k] / num_samples:>10.4f}  {prob:>10.4f}")
    print(f"  Time/sample:    {format_time(elapsed / num_samples):>10}")


def run_multinomial_demo(t: int, weights: list[float], num_samples: int, g) -> None:
    dist = MultinomialDistribution(t, weights)
    print("=" * 70)
    print(f"{dist!r}")
    print("=" * 70)

    start = time.perf_counter()
    samples = dist.sample_iter(g, num_samples)
    elapsed = time.perf_counter() - start

    totals = [0] * dist.num_categories
    exact = 0
    for sample in samples:
        if sum(sample) == t:
            exact += 1
        for k, count in enumerate(sample):
            totals[k] += count

    mass = sum(dist.weights)
    print(f"  First sample:   {samples[0]}")
    print(f"  {'Category':>8}  {'Mean count':>10}  {'Expected':>10}")
    for k, w in enumerate(dist.weights):
        print(f"  {k:>8}  {totals[k] / num_samples:>10.3f}  {t * w / mass:>10.3f}")
    print(f"  Samples summing to {t}: {exact}/{num_samples}")
    print(f"  Time/sample:    {format_time(elapsed / num_samples):>10}")


# =============================================================================
# Benchmark
# =============================================================================


def _time_per_call(fn, repeats: int) -> float:
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def run_benchmark(t: int, p: float, weights: list[float], repeats: int, seed: int) -> None:
    """Compare each sampler against a pure random.Random baseline."""
    print("=" * 70)
    print(f"Benchmark: t={t}, p={p}, K={len(weights)}, {format_count(repeats)} calls each")
    print("=" * 70)

    rng = random.Random(seed)
    g = RandomGenerator(rng)
    categories = list(range(len(weights)))

    binom = BinomialDistribution(t, p)
    cat = CategoricalDistribution(weights)
    multi = MultinomialDistribution(t, weights)

    rows = [
        ("binomial", lambda: binom(g), lambda: sum(rng.random() < p for _ in range(t))),
        ("categorical", lambda: cat(g), lambda: rng.choices(categories, weights)[0]),
        ("multinomial", lambda: multi(g), lambda: rng.choices(categories, weights, k=t)),
    ]

    print(f"  {'Sampler':<12}  {'fastdiscrete':>12}  {'baseline':>12}")
    for name, ours, baseline in rows:
        print(
            f"  {name:<12}  {format_time(_time_per_call(ours, repeats)):>12}"
            f"  {format_time(_time_per_call(baseline, repeats)):>12}"
        )
    print("=" * 70)


# =============================================================================
# Main
# =============================================================================


# Default parameters
DEFAULT_TRIALS = 10
DEFAULT_P = 0.3
DEFAULT_WEIGHTS = "1,2,3,4"
DEFAULT_NUM_SAMPLES = 10_000
DEFAULT_SEED = 20240101
DEFAULT_GENERATOR = "shake"


def main():
    parser = argparse.ArgumentParser(
        description="fastdiscrete sampler demo and benchmark",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 demo.py --binomial --trials 20 --p 0.25
  python3 demo.py --categorical --weights 1,1,2
  python3 demo.py --multinomial --trials 100 --weights 1,1,1,1
  python3 demo.py --benchmark --generator random
        """,
    )
    parser.add_argument("--binomial", action="store_true", help="Run binomial demo")
    parser.add_argument("--categorical", action="store_true", help="Run categorical demo")
    parser.add_argument("--multinomial", action="store_true", help="Run multinomial demo")
    parser.add_argument("--benchmark", action="store_true", help="Benchmark all samplers")
    parser.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help=f"Number of trials t (default: {DEFAULT_TRIALS})")
    parser.add_argument("--p", type=float, default=DEFAULT_P, help=f"Binomial success probability (default: {DEFAULT_P})")
    parser.add_argument("--weights", type=parse_weights, default=parse_weights(DEFAULT_WEIGHTS), help=f"Comma-separated category weights (default: {DEFAULT_WEIGHTS})")
    parser.add_argument("--samples", type=int, default=DEFAULT_NUM_SAMPLES, help=f"Number of samples (default: {DEFAULT_NUM_SAMPLES})")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help=f"Generator seed (default: {DEFAULT_SEED})")
    parser.add_argument("--generator", choices=["shake", "aes", "random"], default=DEFAULT_GENERATOR, help=f"Generator (default: {DEFAULT_GENERATOR})")
    parser.add_argument("--verbose", action="store_true", help="Log distribution tables")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    if args.samples < 1:
        parser.error("--samples must be at least 1")

    g = make_generator(args.generator, args.seed)

    if args.benchmark:
        run_benchmark(args.trials, args.p, args.weights, args.samples, args.seed)
    elif args.binomial:
        run_binomial_demo(args.trials, args.p, args.samples, g)
    elif args.categorical:
        run_categorical_demo(args.weights, args.samples, g)
    elif args.multinomial:
        run_multinomial_demo(args.trials, args.weights, args.samples, g)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
