"""Benchmark: Monkey tokenize and parse throughput.

Measures how many tokenize and parse operations can complete per second
using the public monkey.tokenize() and monkey.parse_with_errors() APIs.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import monkey

_ITERATIONS: int = 2_000

_SAMPLE_SOURCE = """
let five = 5;
let ten = 10;
return five;
five * (ten - 1) > 40 == true;
!false != -five < ten;
a + b * c + d / e - f;
3 + 4 * 5 == 3 * 1 + 4 * 5;
-(5 + 5) * (2 / (1 + 1));
"""


def _timed(operation: str, iterations: int, fn) -> dict[str, object]:  # type: ignore[no-untyped-def]
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_tokenize_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark lexing of the sample program.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    return _timed("monkey_tokenize_throughput", iterations, lambda: monkey.tokenize(_SAMPLE_SOURCE))


def bench_parse_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark lexing plus parsing of the sample program.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    return _timed("monkey_parse_throughput", iterations, lambda: monkey.parse_with_errors(_SAMPLE_SOURCE))


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_tokenize_throughput, "tokenize_throughput_baseline.json"),
        (bench_parse_throughput, "parse_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
