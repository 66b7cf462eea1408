#!/usr/bin/env python3
"""
Sample data generator for testing the CSV Viewer application.

Generates synthetic CSV files with:
- A market listing table mixing text and numeric columns
- A semicolon-delimited copy to exercise delimiter detection
- A file with malformed rows the parser should skip
"""

import argparse
from pathlib import Path

import numpy as np
import pandas as pd

ITEM_NAMES = [
    "Poring Card", "Angeling Card", "Elven Ears", "Evil Wing Ears",
    "Valkyrie Helm", "Excalibur", "Mjolnir", "Sleipnir",
    "Brisingamen", "Megingjard", "Bloody Roar", "Thanatos Card",
]
CATEGORIES = ["card", "headgear", "weapon", "accessory", "garment"]


def generate_market_listing(output_path: Path, num_rows: int = 1000, seed: int = 0, sep: str = ","):
    """
    Generate a market listing file.

    Contains: item_id, item_name, category, price, quantity, refine, snapped.
    """
    rng = np.random.default_rng(seed)

    df = pd.DataFrame({
        "item_id": np.arange(1, num_rows + 1),
        "item_name": rng.choice(ITEM_NAMES, num_rows),
        "category": rng.choice(CATEGORIES, num_rows),
        "price": rng.integers(1_000, 50_000_000, num_rows),
        "quantity": rng.integers(1, 20, num_rows),
        "refine": rng.choice(["", "+4", "+7", "+10", "+15"], num_rows),
        "snapped": rng.choice(["yes", "no"], num_rows),
    })

    df.to_csv(output_path, index=False, sep=sep)
    print(f"Generated: {output_path} ({num_rows} rows, {len(df.columns)} columns)")


def generate_malformed(output_path: Path):
    """Generate a small file with blank lines and a row with too many fields."""
    lines = [
        "name,age,city",
        "Alice,30,Paris",
        "",
        "Bob,25,Berlin,EXTRA",
        "Carol,41",
        "Dave,19,Oslo",
    ]
    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    print(f"Generated: {output_path} (with malformed rows)")


def main():
    parser = argparse.ArgumentParser(description="Generate sample data for CSV Viewer")
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=Path("sample_data"),
        help="Output directory for generated files"
    )
    parser.add_argument(
        "--rows", "-n",
        type=int,
        default=1000,
        help="Number of rows in the market listing"
    )
    parser.add_argument(
        "--large",
        action="store_true",
        help="Also generate a large listing for performance testing"
    )

    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)

    generate_market_listing(args.output_dir / "market.csv", args.rows)
    generate_market_listing(args.output_dir / "market_semicolon.csv", args.rows, seed=1, sep=";")
    generate_malformed(args.output_dir / "malformed.csv")

    if args.large:
        generate_market_listing(args.output_dir / "market_large.csv", 200_000, seed=2)

    print(f"\nAll files generated in: {args.output_dir.absolute()}")


if __name__ == "__main__":
    main()
