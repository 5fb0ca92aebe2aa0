#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Generate a procedural 2D city layout (roads/parks/fountain/buildings) with citydesigner,
optionally place extra buildings, and write the result:

  - <output>.json   layout in the save format (version 1.0)
  - <preview>.png   top-down preview

A saved layout can be loaded instead of generating a new one with --load.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _ensure_import_paths(repo_root: Path) -> None:
    # Running from source: `<repo_root>/citydesigner` becomes importable.
    if (repo_root / "citydesigner").is_dir():
        sys.path.insert(0, str(repo_root))


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a procedural 2D city layout.")
    parser.add_argument("--config", type=str, default=None, help="User YAML merged over the default config.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for deterministic generation.")
    parser.add_argument("--pattern", type=str, default=None, help="Road pattern: grid, radial or random.")
    parser.add_argument("--skyline", type=str, default=None, help="Skyline: low-rise, mid-rise, skyscraper or mixed.")
    parser.add_argument("--buildings", type=int, default=None, help="Target number of buildings.")
    parser.add_argument("--layout-size", type=int, default=None, help="Grid blocks per side / spokes.")
    parser.add_argument("--parks", type=int, default=None, help="Number of parks.")
    parser.add_argument(
        "--place",
        type=float,
        nargs=2,
        action="append",
        default=[],
        metavar=("X", "Y"),
        help="Place a standard building at X Y after generation (repeatable).",
    )
    parser.add_argument("--load", type=str, default=None, help="Load saves/<name>.json instead of generating.")
    parser.add_argument("--save-name", type=str, default=None, help="Also save as saves/<name>.json.")
    parser.add_argument("--output", type=Path, default=None, help="Write the layout JSON to this path.")
    parser.add_argument("--preview", type=Path, default=None, help="Write a PNG preview to this path.")
    args = parser.parse_args()

    repo_root = Path(__file__).resolve().parents[1]
    _ensure_import_paths(repo_root)

    from citydesigner.citygen.function_call import CityFunctionCall  # noqa: E402
    from citydesigner.config import Config, ConfigurationError  # noqa: E402
    from citydesigner.utils.logger import Logger  # noqa: E402

    config = Config(args.config)
    Logger.configure_from(config)

    overrides = {
        "road_pattern": args.pattern,
        "skyline_type": args.skyline,
        "num_buildings": args.buildings,
        "layout_size": args.layout_size,
        "num_parks": args.parks,
    }
    for key, value in overrides.items():
        if value is not None:
            config.set(f"city.{key}", value)

    try:
        cfc = CityFunctionCall(config, seed=args.seed)
        if args.load:
            if not cfc.load_city(args.load):
                print(f"Save not found: {args.load}", file=sys.stderr)
                return 1
        else:
            report = cfc.generate_city()
            print(f"Placed {report.placed}/{report.requested} buildings in {report.attempts} attempts")
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    for x, y in args.place:
        print(cfc.place_building(x, y).message)

    if args.save_name:
        cfc.save_city(args.save_name)
    if args.output:
        cfc.export_city(str(args.output))
        print(f"Layout written: {args.output}")
    if args.preview:
        cfc.visualization(str(args.preview))
        print(f"Preview written: {args.preview}")

    stats = cfc.statistics()
    print(f"Roads: {stats['roads']} ({stats['road_points']} points), parks: {stats['parks']}, "
          f"buildings: {stats['buildings']} {stats['building_types']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
