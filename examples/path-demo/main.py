"""Path demo - cheapest route over a six-cell adjacency graph.

Edges are directed: 0->1 (1), 0->2 (5), 1->0 (1), 1->5 (2), 2->0 (5), 4->1 (2).
Cell 3 is isolated.
"""
from __future__ import annotations

import argparse
import logging

from hexsight import HexCell
from hexsight_path import find_path


def build_cells() -> list[HexCell]:
    return [
        HexCell(index=0, q=0, r=0, connections={1: 1, 2: 5}),
        HexCell(index=1, q=1, r=0, connections={0: 1, 5: 2}),
        HexCell(index=2, q=0, r=1, connections={0: 5}),
        HexCell(index=3, q=1, r=1, connections={}),
        HexCell(index=4, q=2, r=1, connections={1: 2}),
        HexCell(index=5, q=2, r=0, connections={}),
    ]


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Path demo - hexsight pathfinding")
    p.add_argument("--start", type=int, default=0, help="Start cell index (default: 0)")
    p.add_argument("--goal", type=int, default=5, help="Goal cell index (default: 5)")
    p.add_argument("--dijkstra", action="store_true", help="Disable the A* heuristic")
    p.add_argument("--verbose", action="store_true", help="Show engine debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    cells = build_cells()
    if not all(0 <= i < len(cells) for i in (args.start, args.goal)):
        raise SystemExit(f"Cell indices must be in 0..{len(cells) - 1}")

    result = find_path(cells, args.start, args.goal, use_heuristic=not args.dijkstra)
    if result.path is None:
        print("No path found.")
        return
    print("Path: " + " -> ".join(str(i) for i in result.path))
    print(f"Cost: {result.cost:g}")


if __name__ == "__main__":
    main()
