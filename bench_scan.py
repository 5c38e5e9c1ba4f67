import argparse
import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from photostats.core import PhotoStatsApp


def run_once(src: Path) -> float:
    app = PhotoStatsApp(show_progress=False)
    t0 = time.perf_counter()
    app.analyse(src)
    return time.perf_counter() - t0


def benchmark(src: Path, repeats: int, out_file: Path) -> Dict[str, Any]:
    warm_avg: Optional[float] = None
    times: List[float] = [run_once(src) for _ in range(repeats)]
    cold = times[0]
    warm_runs = times[1:]
    if warm_runs:
        warm_avg = sum(warm_runs) / len(warm_runs)
        print(f"{cold:.2f}s (cold), avg warm over {len(warm_runs)} runs: {warm_avg:.2f}s")
    else:
        print(f"{cold:.2f}s (single run)")

    out_file.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "timestamp": datetime.now().isoformat(),
        "src": str(src),
        "repeats": repeats,
        "times": times,
        "cold": cold,
        "warm_avg": warm_avg,
    }
    out_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"Wrote results to {out_file}")
    return payload


def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return n


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Benchmark a photostats scan over a directory tree.")
    p.add_argument("src", type=Path, help="Source root to scan")
    p.add_argument("--repeats", type=positive_int, default=3, help="Number of runs; first is treated as cold")
    p.add_argument("--output", type=Path, default=Path("bench_scan_results.json"), help="Path to write JSON results")
    return p.parse_args(argv)


def main():
    args = parse_args()
    benchmark(args.src, args.repeats, args.output)


if __name__ == "__main__":
    main()
