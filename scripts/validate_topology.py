#!/usr/bin/env python3
"""
Grid Topology Validation Script

Sweeps a set of grid sizes and checks every cell against the topology
invariants: index/coordinate round-trip, neighbor symmetry, corner/edge/
interior neighbor counts, and agreement between classify(), the numpy
classification map and has_full_neighbor_set(). Writes a JSON report.
"""

import json
import logging
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Tuple

import psutil

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridindex import (
    BoundaryClass, GridDescriptor, GridIndexError, NeighborMode,
    classification_map, classify, has_full_neighbor_set, neighbors,
    to_coordinate, to_index,
)

logger = logging.getLogger("validate_topology")

DEFAULT_SIZES: List[Tuple[int, int]] = [
    (2, 2), (2, 3), (3, 2), (2, 17), (17, 2), (3, 3), (4, 4), (5, 3),
    (8, 7), (12, 10), (31, 32), (64, 64),
]

# Expected neighbor counts per boundary class
EXPECTED_COUNTS: Dict[NeighborMode, Dict[BoundaryClass, int]] = {
    NeighborMode.FOUR_CONNECTED: {
        BoundaryClass.CORNER: 2, BoundaryClass.EDGE: 3, BoundaryClass.INTERIOR: 4},
    NeighborMode.EIGHT_CONNECTED: {
        BoundaryClass.CORNER: 3, BoundaryClass.EDGE: 5, BoundaryClass.INTERIOR: 8},
}


def measure_memory_mb() -> float:
    """Get current process memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def validate_grid(width: int, height: int) -> List[str]:
    """Check every cell of one grid; return a list of failure messages."""
    failures = []
    grid = GridDescriptor(width, height)
    table = classification_map(grid)

    for i in range(grid.cell_count):
        cell = to_coordinate(grid, i)
        if to_index(grid, cell) != i:
            failures.append(f"{grid}: round-trip failed at index {i}")

        cls = classify(grid, cell)
        if table[cell.y, cell.x] != cls.value:
            failures.append(f"{grid}: classification map disagrees at {tuple(cell)}")

        for mode in NeighborMode:
            found = neighbors(grid, cell, mode)
            if len(found) != EXPECTED_COUNTS[mode][cls]:
                failures.append(
                    f"{grid}: {cls.name} cell {tuple(cell)} has {len(found)} "
                    f"{mode.name} neighbors")
            if has_full_neighbor_set(grid, cell, mode) != (cls is BoundaryClass.INTERIOR):
                failures.append(f"{grid}: full-set check disagrees with class at {tuple(cell)}")
            for other in found:
                if cell not in neighbors(grid, other, mode):
                    failures.append(f"{grid}: asymmetric {mode.name} pair {tuple(cell)}/{tuple(other)}")

    return failures


def validate_limits() -> List[str]:
    """Check that construction accepts the supported range and nothing else."""
    failures = []
    for width, height in [(2, 2), (511, 511), (2, 511), (511, 2)]:
        try:
            GridDescriptor(width, height)
        except GridIndexError as e:
            failures.append(f"{width}x{height} rejected: {e}")

    for width, height in [(1, 5), (5, 1), (0, 0), (512, 511), (511, 512)]:
        try:
            GridDescriptor(width, height)
        except GridIndexError:
            continue
        failures.append(f"{width}x{height} accepted")
    return failures


def generate_report(results: Dict[str, List[str]], elapsed: float, memory_mb: float,
                    output: Path) -> dict:
    """Generate and save a validation report."""
    failed = {name: msgs for name, msgs in results.items() if msgs}
    report = {
        "component": "Grid Topology",
        "validation_date": datetime.now().isoformat(timespec="seconds"),
        "result": "FAILED" if failed else "PASSED",
        "grids_checked": [name for name in results if name != "limits"],
        "elapsed_seconds": round(elapsed, 3),
        "memory_mb": round(memory_mb, 1),
        # Cap per-check output so a systematic bug doesn't explode the report
        "failures": {name: msgs[:20] for name, msgs in failed.items()},
    }

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, 'w') as f:
        json.dump(report, f, indent=2)

    print(f"\nReport saved to: {output}")
    return report


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Grid topology invariant sweep")
    parser.add_argument("--size", action="append", default=None, metavar="WxH",
                        help="Grid size to check (repeatable); defaults to a built-in set")
    parser.add_argument("--output", default="docs/validation/topology_report.json",
                        help="Where to write the JSON report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.size:
        sizes = []
        for size_arg in args.size:
            try:
                w, h = (int(part) for part in size_arg.lower().split("x"))
            except ValueError:
                parser.error(f"Bad size {size_arg!r}, expected WxH")
            sizes.append((w, h))
    else:
        sizes = DEFAULT_SIZES

    print("🔬 GRID TOPOLOGY VALIDATION")
    print("=" * 70)

    memory_before = measure_memory_mb()
    start = time.perf_counter()

    results: Dict[str, List[str]] = {"limits": validate_limits()}
    for width, height in sizes:
        name = f"{width}x{height}"
        logger.debug(f"Validating {name} grid")
        try:
            results[name] = validate_grid(width, height)
        except GridIndexError as e:
            results[name] = [f"{name}: {e}"]
        status_icon = "✅" if not results[name] else "❌"
        print(f"{status_icon} {name}")

    elapsed = time.perf_counter() - start
    memory_used = measure_memory_mb() - memory_before

    report = generate_report(results, elapsed, memory_used, Path(args.output))
    success = report["result"] == "PASSED"

    for name, msgs in report["failures"].items():
        for msg in msgs:
            print(f"  ✗ [{name}] {msg}")

    print(f"\n{'🟢' if success else '🔴'} TOPOLOGY VALIDATION: {report['result']} "
          f"({elapsed:.2f}s, {memory_used:.1f}MB)")
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
