"""
命令行入口：对一组点给出算法推荐。

    python -m dronepath recommend --point 51.5,-0.12 --point 48.85,2.35
    python -m dronepath recommend --csv points.csv --top 5 --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from dronepath.core.errors import InsufficientPointsError
from dronepath.core.recommend import compute_recommendation, ranking_to_frame
from logging_config import get_logger, set_run_id

logger = get_logger(__name__)

EXIT_USAGE = 2


def parse_point(text: str) -> Tuple[float, float]:
    """'lat,lng' -> (lat, lng)"""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected LAT,LNG, got {text!r}")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected numeric LAT,LNG, got {text!r}") from e


def load_points_csv(path: Path) -> List[Tuple[float, float]]:
    df = pd.read_csv(path)
    missing = [c for c in ("lat", "lng") if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {missing}")
    return [(float(lat), float(lng)) for lat, lng in zip(df["lat"], df["lng"])]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dronepath", description="DronePath algorithm recommendation demo.")
    sub = parser.add_subparsers(dest="command", required=True)

    rec = sub.add_parser("recommend", help="Rank the algorithm catalog for a point set.")
    rec.add_argument("--point", action="append", type=parse_point, default=[], metavar="LAT,LNG")
    rec.add_argument("--csv", type=Path, default=None, help="CSV file with lat,lng columns (appended after --point).")
    rec.add_argument("--top", type=int, default=12, help="Number of ranking rows to print.")
    rec.add_argument("--json", action="store_true", help="Print a JSON document instead of a table.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_run_id("cli")

    points = list(args.point)
    if args.csv is not None:
        try:
            points.extend(load_points_csv(args.csv))
        except (OSError, ValueError) as e:
            print(f"[DronePath] cannot read {args.csv}: {e}", file=sys.stderr)
            return EXIT_USAGE

    try:
        rec = compute_recommendation(points)
    except InsufficientPointsError as e:
        print(f"[DronePath] {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.json:
        payload = rec.to_dict()
        payload["ranking"] = payload["ranking"][: max(0, args.top)]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print(ranking_to_frame(rec.top(args.top)).to_string(index=False))
    print()
    print(f"Best:        {rec.best.name} ({rec.best.descriptor.complexity_label})")
    print(f"Distance:    {rec.distance_label}")
    print(f"Points:      {rec.statistics.count}")
    print(rec.selection_reason)
    print(rec.top_explanation)
    return 0
