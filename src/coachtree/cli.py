"""Command-line interface for building positioned coaching trees from CSV."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from coachtree.config import LayoutSettings
from coachtree.config_loader import SettingsProfile
from coachtree.errors import CoachTreeError
from coachtree.export import dump_json, positions_to_csv
from coachtree.ingest import load_rows_csv, sample_rows
from coachtree.pipeline import CoachingTree


logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a coaching tree layout from assignment CSV")
    parser.add_argument("rows", type=Path, nargs="?", help="Path to coaching assignments CSV")
    parser.add_argument("--sample", action="store_true", help="Use the bundled NFL sample data")
    parser.add_argument("--output", type=Path, default=None, help="Write the positioned tree as JSON")
    parser.add_argument(
        "--positions",
        type=Path,
        default=None,
        help="Write per-coach level and coordinates as CSV",
    )
    parser.add_argument("--settings", type=Path, default=None, help="Load layout settings JSON")
    parser.add_argument("--save-settings", type=Path, default=None, help="Save layout settings JSON")
    parser.add_argument(
        "--coach",
        action="append",
        default=[],
        help="Print role history for a coach (repeatable)",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (e.g., INFO, DEBUG)")
    args = parser.parse_args(argv)
    if args.rows is None and not args.sample:
        parser.error("a rows CSV path or --sample is required")
    return args


def _resolve_settings(args: argparse.Namespace) -> LayoutSettings:
    if args.settings:
        return SettingsProfile.load(args.settings).to_settings()
    return LayoutSettings.from_env()


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = _resolve_settings(args)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Invalid settings: {exc}") from exc

    if args.save_settings:
        SettingsProfile.from_settings(settings).save(args.save_settings)
        print(f"Saved layout settings to {args.save_settings}")

    tree = CoachingTree(settings)
    try:
        rows = sample_rows() if args.sample else load_rows_csv(args.rows)
        tree.load(rows)
    except OSError as exc:
        raise SystemExit(f"Unable to read {args.rows}: {exc}") from exc
    except CoachTreeError as exc:
        logger.error("Load failed: %s", exc)
        raise SystemExit(f"Load failed: {exc}") from exc

    canvas = tree.canvas
    print(
        f"Loaded {len(tree.connections())} connections between {len(tree.coaches())} coaches "
        f"across {canvas.total_levels} levels (canvas {canvas.width:.0f}x{canvas.height:.0f})"
    )

    if args.output:
        dump_json(tree, args.output)
        print(f"Wrote tree JSON to {args.output}")
    if args.positions:
        args.positions.write_text(positions_to_csv(tree), encoding="utf-8")
        print(f"Wrote positions CSV to {args.positions}")

    for name in args.coach:
        try:
            history = tree.role_history(name)
        except KeyError:
            print(f"No coach named {name!r}")
            continue
        print(f"{name}:")
        for role in history:
            print(f"  {role.season} {role.team} - {role.role} ({role.record})")


if __name__ == "__main__":
    main()
