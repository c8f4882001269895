#!/usr/bin/env python3
"""Write a country-list template for the annotation spreadsheet.

Downloads the map topology, takes every shape's display name, sorts them,
and writes a two-column sheet (Country Name, Remark) that editors fill in
and upload as the annotation source.

Usage:
    # CSV next to the current directory
    python scripts/build_country_list.py

    # Parquet, custom topology
    python scripts/build_country_list.py --output countries.parquet \\
        --geo-url https://cdn.jsdelivr.net/npm/world-atlas@2/countries-110m.json

Environment Variables:
    WORLDMAP_GEO_URL: Default topology URL
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import pandas as pd

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from worldmapidentity.errors import WorldMapError
from worldmapidentity.shapes.shapeapi import GEO_URL, load_shapes


def build_country_list(shapes) -> pd.DataFrame:
    """Sorted, de-duplicated shape names with an empty Remark column."""
    names = sorted({s.display_name for s in shapes}, key=str.lower)
    return pd.DataFrame({"Country Name": names, "Remark": [""] * len(names)})


def write_country_list(df: pd.DataFrame, output: Path) -> None:
    if output.suffix == ".parquet":
        df.to_parquet(output, index=False)
    elif output.suffix == ".csv":
        df.to_csv(output, index=False)
    else:
        raise ValueError(f"Unsupported file format: {output.suffix}. Use .csv or .parquet")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Write a Country Name / Remark template from the map topology",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=Path("world_countries_list.csv"),
        help="Output file (.csv or .parquet)",
    )
    parser.add_argument(
        '--geo-url',
        default=os.environ.get("WORLDMAP_GEO_URL", GEO_URL),
        help="TopoJSON URL",
    )
    parser.add_argument(
        '--collection',
        default="countries",
        help="Object collection inside the topology",
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help="Log progress",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        shapes = load_shapes(args.geo_url, collection=args.collection)
        df = build_country_list(shapes)
        write_country_list(df, args.output)
    except (WorldMapError, ValueError, OSError) as e:
        print(f"❌ Failed: {e}", file=sys.stderr)
        return 1

    print(f"✅ Wrote {len(df)} countries to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
