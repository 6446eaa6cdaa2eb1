"""Benchmark the sorted-edge prefix tree against the baseline structures."""

import argparse
import gc
import json
import random
import time
import tracemalloc
from pathlib import Path
from typing import Any, Callable

import matplotlib.pyplot as plt
import psutil

from prefix_tree.config import BenchmarkConfig, load_config_file
from prefix_tree.loader import (
    load_dict_trie,
    load_prefix_tree,
    load_sorted_lines,
    read_lines,
)
from prefix_tree.logger import setup_logging

CONFIG_PATH = Path(__file__).parent / "configs" / "config.txt"
RESULTS_FILE_NAME = "results.json"
PLOT_FILE_NAME = "benchmark_prefix_structures.png"
RANDOM_SEED = 1234

STRUCTURES: dict[str, Callable[[Path], Any]] = {
    "Sorted-edge prefix tree": load_prefix_tree,
    "Dict trie": load_dict_trie,
    "Sorted lines": load_sorted_lines,
}


def make_queries(lines: list[str], count: int, seed: int) -> list[str]:
    """Build a reproducible mix of present and absent prefixes.

    Every other query is a prefix of a random line; the rest are the same
    kind of prefix with an extra character that is unlikely to follow it.

    Args:
        lines (list[str]): The lines loaded into the structures.
        count (int): The number of queries to build.
        seed (int): Seed of the random generator.

    Returns:
        list[str]: The queries.

    """
    rng = random.Random(seed)
    queries: list[str] = []
    for i in range(count):
        line = rng.choice(lines)
        prefix = line[: rng.randint(1, len(line))]
        if i % 2:
            prefix += "\x00"
        queries.append(prefix)
    return queries


def measure_build(
    loader: Callable[[Path], Any],
    data_path: Path,
) -> tuple[Any, float, int]:
    """Load the data file with `loader`, timing it and tracing its memory.

    Args:
        loader (Callable[[Path], Any]): The function building the structure.
        data_path (Path): The data file to load.

    Returns:
        tuple[Any, float, int]: The structure, the build time in
        milliseconds and the peak traced memory in bytes.

    """
    gc.collect()
    tracemalloc.start()
    try:
        start = time.perf_counter()
        structure = loader(data_path)
        elapsed_ms = (time.perf_counter() - start) * 1000
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return structure, elapsed_ms, peak


def measure_lookups(structure: Any, queries: list[str], repeat: int) -> float:
    """Time `structure.exists` over every query.

    Args:
        structure (Any): Any object with an ``exists(prefix)`` method.
        queries (list[str]): The prefixes to look up.
        repeat (int): The number of timed rounds.

    Returns:
        float: The mean duration of one round in milliseconds.

    """
    durations: list[float] = []
    for _ in range(repeat):
        start = time.perf_counter()
        for query in queries:
            structure.exists(query)
        durations.append((time.perf_counter() - start) * 1000)
    return sum(durations) / len(durations)


def run_benchmarks(config: BenchmarkConfig) -> dict[str, dict[str, Any]]:
    """Run every benchmark described by `config`.

    Args:
        config (BenchmarkConfig): The benchmark settings.

    Raises:
        ValueError: If the data file holds no lines.

    Returns:
        dict[str, dict[str, Any]]: Metrics keyed by structure name.

    """
    lines = list(read_lines(config.data_path))
    if not lines:
        raise ValueError(f"The data file {config.data_path} holds no lines.")

    queries = make_queries(lines, config.query_count, RANDOM_SEED)
    process = psutil.Process()
    results: dict[str, dict[str, Any]] = {}
    answers: dict[str, list[bool]] = {}

    for name, loader in STRUCTURES.items():
        print(f"\n--- Benchmarking {name} ---")
        structure, build_ms, peak_bytes = measure_build(
            loader,
            config.data_path,
        )
        lookup_ms = measure_lookups(structure, queries, config.repeat)
        answers[name] = [structure.exists(query) for query in queries]

        results[name] = {
            "build_time_ms": build_ms,
            "lookup_time_ms": lookup_ms,
            "peak_memory_bytes": peak_bytes,
            "rss_bytes": process.memory_info().rss,
        }
        print(f"Build time: {build_ms:.2f} ms")
        print(f"Lookup time ({len(queries)} queries): {lookup_ms:.2f} ms")
        print(f"Peak traced memory: {peak_bytes / 1024:.1f} KiB")

        del structure
        gc.collect()

    expected = answers[next(iter(STRUCTURES))]
    for name, given in answers.items():
        if given != expected:
            print(f"[BENCHMARK] Warning: {name} disagrees on some queries.")

    return results


def save_plot(results: dict[str, dict[str, Any]], output_path: Path) -> None:
    """Save a bar chart comparing lookup time and memory.

    Args:
        results (dict[str, dict[str, Any]]): The benchmark metrics.
        output_path (Path): Where to write the chart.

    """
    names = list(results)
    x = range(len(names))
    try:
        fig, (time_ax, memory_ax) = plt.subplots(1, 2, figsize=(12, 5))

        lookup = [results[name]["lookup_time_ms"] for name in names]
        time_ax.bar(x, lookup, color="steelblue")
        time_ax.set_xticks(list(x))
        time_ax.set_xticklabels(names, rotation=15)
        time_ax.set_ylabel("Lookup Time (ms)")
        time_ax.set_title("Prefix Lookup Time")
        for i, v in enumerate(lookup):
            time_ax.text(i, v, f"{v:.2f}", ha="center", va="bottom")

        memory = [results[name]["peak_memory_bytes"] / 1024 for name in names]
        memory_ax.bar(x, memory, color="darkorange")
        memory_ax.set_xticks(list(x))
        memory_ax.set_xticklabels(names, rotation=15)
        memory_ax.set_ylabel("Peak Traced Memory (KiB)")
        memory_ax.set_title("Build Memory")
        for i, v in enumerate(memory):
            memory_ax.text(i, v, f"{v:.0f}", ha="center", va="bottom")

        fig.tight_layout()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path)
    finally:
        plt.close("all")


def main() -> None:
    """Main function."""
    parser = argparse.ArgumentParser(
        description="Benchmark the sorted-edge prefix tree.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    args = parser.parse_args()

    config_path = Path(args.config_path)
    config = load_config_file(config_path)
    setup_logging(level=config.log_level)
    print(config)

    results = run_benchmarks(config)

    results_path = config_path.parent / RESULTS_FILE_NAME
    with open(results_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)
    print(f"[BENCHMARK] Results written to {results_path}")

    if config.save_plot:
        plot_path = config_path.parent / PLOT_FILE_NAME
        save_plot(results, plot_path)
        print(f"[BENCHMARK] Chart written to {plot_path}")


if __name__ == "__main__":
    main()
