#!/usr/bin/env python
"""
Curve Engine Demo Script

This script demonstrates the curve workflow:
1. Load discount factor anchors from CSV and build a DiscountCurve
2. Print zero and forward rates at standard tenors
3. Build a RateCurve from the same anchors and compare discount factors

Usage:
    python run_demo.py [--anchors CSV] [--day-count ACT/360] [--compounding Continuous]
                       [--frequency Annual] [--output-csv PATH] [--verbose]
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import pandas as pd

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from ratecurves.conventions import Compounding, DayCount, Frequency, year_fraction
from ratecurves.curves import DiscountCurve, RateCurve
from ratecurves.dates import DateUtils, format_iso_date, parse_iso_date


TENORS = ["1M", "3M", "6M", "1Y", "2Y", "3Y", "5Y", "7Y", "10Y", "15Y"]


def load_anchors(path: Path) -> pd.DataFrame:
    """Load date/discount_factor anchors from CSV."""
    frame = pd.read_csv(path, comment="#")
    frame['date'] = frame['date'].map(parse_iso_date)
    return frame


def build_discount_curve(
    anchors: pd.DataFrame,
    day_count: DayCount,
    compounding: Compounding,
    frequency: Frequency,
) -> DiscountCurve:
    """Build a DiscountCurve from loaded anchors."""
    print("\n" + "="*60)
    print("Building Discount Curve (log-linear)")
    print("="*60)

    curve = DiscountCurve(day_count=day_count, compounding=compounding, frequency=frequency)
    for _, row in anchors.iterrows():
        curve.add_point(row['date'], row['discount_factor'])
        print(f"  Added: {format_iso_date(row['date'])} @ {row['discount_factor']:.6f}")

    curve.build()
    print(f"\nBuild complete: {curve.get_point_count()} anchors, "
          f"reference {format_iso_date(curve.reference_date)}")
    return curve


def tabulate_rates(curve: DiscountCurve, tenors: List[str]) -> pd.DataFrame:
    """Zero and forward rates at each tenor from the reference date."""
    reference = curve.reference_date
    rows = []
    previous: Optional[date] = None
    for tenor in tenors:
        d = DateUtils.add_tenor(reference, tenor)
        row = {
            'tenor': tenor,
            'date': format_iso_date(d),
            'discount_factor': curve.discount(d),
            'zero_rate': curve.zero_rate(d),
            'forward_rate': curve.forward_rate(previous, d) if previous else curve.zero_rate(d),
        }
        rows.append(row)
        previous = d
    return pd.DataFrame(rows)


def compare_rate_curve(curve: DiscountCurve, table: pd.DataFrame) -> pd.DataFrame:
    """Rebuild the tenor grid as a RateCurve and compare discount factors."""
    reference = curve.reference_date
    rate_curve = RateCurve()
    times = []
    for _, row in table.iterrows():
        t = year_fraction(reference, parse_iso_date(row['date']), curve.day_count)
        rate_curve.add_point(t, curve.zero_rate(parse_iso_date(row['date']), Compounding.CONTINUOUS))
        times.append(t)

    comparison = table[['tenor', 'discount_factor']].copy()
    comparison['rate_curve_df'] = [rate_curve.discount(t) for t in times]
    comparison['difference'] = comparison['rate_curve_df'] - comparison['discount_factor']
    return comparison


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Curve Engine Demo")
    parser.add_argument(
        "--anchors",
        type=str,
        default=str(Path(__file__).parent.parent / "data" / "sample_discount_factors.csv"),
        help="CSV with date,discount_factor columns"
    )
    parser.add_argument("--day-count", type=str, default="ACT/360", help="Day count convention")
    parser.add_argument("--compounding", type=str, default="Continuous", help="Compounding rule")
    parser.add_argument("--frequency", type=str, default="Annual", help="Compounding frequency")
    parser.add_argument("--output-csv", type=str, default=None, help="Write the rate table here")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    print("="*60)
    print("CURVE ENGINE DEMO")
    print("="*60)

    anchors = load_anchors(Path(args.anchors))
    curve = build_discount_curve(
        anchors,
        DayCount.from_string(args.day_count),
        Compounding.coerce(args.compounding),
        Frequency.coerce(args.frequency),
    )

    table = tabulate_rates(curve, TENORS)
    print("\n" + "="*60)
    print(f"Rates ({curve.compounding.name}, {curve.frequency.name}, {curve.day_count.value})")
    print("="*60)
    print(table.to_string(index=False, float_format=lambda x: f"{x:.6f}"))

    comparison = compare_rate_curve(curve, table)
    print("\n" + "="*60)
    print("RateCurve comparison (linear zero rates)")
    print("="*60)
    print(comparison.to_string(index=False, float_format=lambda x: f"{x:.8f}"))

    if args.output_csv:
        output = Path(args.output_csv)
        output.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(output, index=False)
        print(f"\nExported rate table to {output}")

    print("\n" + "="*60)
    print("DEMO COMPLETE")
    print("="*60)


if __name__ == "__main__":
    main()
