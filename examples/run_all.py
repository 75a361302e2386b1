#!/usr/bin/env python3
"""examples/run_all.py – smoke-test for both route searches.

Run this file directly, or execute `python -m examples.run_all` from the project
root.  It prints small, illustrative outputs and timings for:

  1. Exhaustive search ("naive")
  2. Greedy nearest neighbour ("closest")
  3. The step-paced variants, with their progress snapshots
"""

from __future__ import annotations

import asyncio
import time
from typing import List

import route_search.algs.geometry as geometry
from route_search import find_shortest
from route_search.algs import closest_search, naive_search
from route_search.algs.geometry import Point
from route_search.scheduling import ManualTicker, pump
from route_search.visualization.algs import ANIMATED_ALGORITHMS
from route_search.visualization.sinks import CallbackSink

# Activate verbose internal logging so the user can see the search traces.
geometry.VERBOSE = True

SEP = "=" * 80

POINTS: List[Point] = [Point(0, 0), Point(1, 0), Point(-2, 0), Point(4, 0), Point(1, 3)]


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def run_sync_examples() -> None:
    for name, solver in (("naive", naive_search), ("closest", closest_search)):
        _hdr(f"Synchronous search – {name}")
        print(f"Input points             : {[(p.x, p.y) for p in POINTS]}\n")
        t0 = time.perf_counter()
        route, length = solver(POINTS)
        dt = time.perf_counter() - t0
        print(f"Route                    : {route}")
        print(f"Length                   : {length:.4f}")
        print(f"Elapsed: {dt:.6f} s")


def run_animated_examples() -> None:
    for name, solver in ANIMATED_ALGORITHMS.items():
        _hdr(f"Step-paced search – {name}")
        ticker = ManualTicker()
        sink = CallbackSink(lambda snap: print(f"  frame {ticker.ticks:3d}: {list(snap)}"))
        (route, length), ticks = asyncio.run(pump(solver(POINTS, ticker=ticker, sink=sink), ticker))
        print(f"Route                    : {route}  ({ticks} ticks, length {length:.4f})")


def run_api_example() -> None:
    _hdr("Host API – find_shortest")
    payload = [{"x": p.x, "y": p.y} for p in POINTS]
    print(f"naive   -> {find_shortest('naive', payload)}")
    print(f"closest -> {find_shortest('closest', payload)}")
    print(f"bad     -> {find_shortest('fastest', payload, alert=lambda msg: print(f'  alert: {msg}'))}")


if __name__ == "__main__":
    run_sync_examples()
    run_animated_examples()
    run_api_example()
