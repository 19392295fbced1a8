"""
Check a harvested salary export for gaps per season.
"""

import argparse

import pandas as pd

from nba_salary_harvest.config import DEFAULT_OUTPUT_PATHS
from nba_salary_harvest.data_collection.export_salaries import read_harvest


def summarize_seasons(df: pd.DataFrame) -> pd.DataFrame:
    """Per-season row count, missing salaries and payroll, in first-seen season order."""
    grouped = df.groupby("Season", sort=False)["Salary"]
    summary = pd.DataFrame({
        "PLAYERS": grouped.size(),
        "MISSING_SALARY": df["Salary"].isna().groupby(df["Season"], sort=False).sum().astype(int),
        "TOTAL_SALARY_M": (grouped.sum(min_count=1) / 1_000_000).round(2),
        "MEDIAN_SALARY_M": (grouped.median() / 1_000_000).round(2),
    })
    return summary.reset_index()


def check_harvest(path: str = DEFAULT_OUTPUT_PATHS[0]) -> pd.DataFrame:
    """Print the season summary and any rows without a usable salary."""
    df = read_harvest(path)
    summary = summarize_seasons(df)

    print("=" * 60)
    print(f"Season summary for {path}:")
    print("=" * 60)
    if summary.empty:
        print("(no rows)")
    else:
        print(summary.to_string(index=False))

    missing = df[df["Salary"].isna()]
    print("\n" + "=" * 60)
    print("Rows with missing salary:")
    print("=" * 60)
    if missing.empty:
        print("(none)")
    else:
        print(missing[["Season", "Player"]].head(50).to_string(index=False))

    return summary


def main():
    parser = argparse.ArgumentParser(description="Summarize a harvested salary file")
    parser.add_argument("--input", type=str, default=DEFAULT_OUTPUT_PATHS[0])
    args = parser.parse_args()
    check_harvest(args.input)


if __name__ == "__main__":
    main()
