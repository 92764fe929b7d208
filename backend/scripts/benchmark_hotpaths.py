#!/usr/bin/env python3
"""Time move generation and alpha-beta search on a few fixed 5x4 positions.

Prints one JSON document: per-depth perft classification from the start
position, and per-position search results with node counts, so a change to
move ordering shows up as a node-count change as well as a timing change.
"""
from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from microchess.core import Position  # noqa: E402
from microchess.engine import Engine  # noqa: E402
from microchess.fen import STARTPOS_FEN, parse_fen  # noqa: E402
from microchess.notation import move_to_uci  # noqa: E402
from microchess.perft import perft_stats  # noqa: E402

SEARCH_POSITIONS = {
    "start": STARTPOS_FEN,
    "hanging_queen": "3k/4/2q1/1P2/K3 w",
    "mate_in_one": "rkr1/4/P3/3Q/K3 w",
    "two_rooks": "k3/4/K3/4/2RR w",
}


def generation_profile(max_depth: int) -> List[Dict[str, Any]]:
    rows = []
    for depth in range(1, max_depth + 1):
        pos = Position()
        t0 = time.perf_counter()
        stats = perft_stats(pos, depth)
        elapsed = time.perf_counter() - t0
        rows.append({"depth": depth, **asdict(stats), "seconds": round(elapsed, 4)})
    return rows


def search_profile(depth: int) -> Dict[str, Dict[str, Any]]:
    out = {}
    engine = Engine()
    for name, fen in SEARCH_POSITIONS.items():
        pos = parse_fen(fen)
        t0 = time.perf_counter()
        best = engine.best_move(pos, depth)
        elapsed = time.perf_counter() - t0
        out[name] = {
            "best": move_to_uci(best) if best is not None else None,
            "nodes": engine.nodes,
            "seconds": round(elapsed, 4),
        }
    return out


def main() -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--perft-depth", type=int, default=4)
    ap.add_argument("--search-depth", type=int, default=4)
    args = ap.parse_args()

    report = {
        "perft": generation_profile(args.perft_depth),
        "search": {"depth": args.search_depth, "positions": search_profile(args.search_depth)},
    }
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
