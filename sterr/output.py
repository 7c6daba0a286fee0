"""Write summary tables to reproducible CSV files.

This module is the output boundary between in-memory analysis and tabular
artifacts on disk.
"""

from __future__ import annotations

import logging
import os

import pandas as pd

from .reporting import add_formatted_reporting_columns, relative_uncertainty

logger = logging.getLogger(__name__)


def save_statistics_to_csv(stats_df: pd.DataFrame, output_dir: str = "output") -> str:
    """Save the statistics table with reporting columns to CSV.

    Args:
        stats_df (pandas.DataFrame): Output from ``calculate_statistics``.
        output_dir (str): Directory where the CSV is written; created if
            missing.

    Returns:
        str: Path to ``statistical_summary.csv``.

    Note:
        Adds ``Mean (reported)``, ``Standard Error (reported)`` and
        ``Relative Standard Error (%)`` next to the numeric columns.
    """
    os.makedirs(output_dir, exist_ok=True)
    stats_path = os.path.join(output_dir, "statistical_summary.csv")

    report = add_formatted_reporting_columns(stats_df, [("Mean", "Standard Error")])
    report["Relative Standard Error (%)"] = [
        relative_uncertainty(v, u)
        for v, u in zip(
            pd.to_numeric(report["Mean"], errors="coerce"),
            pd.to_numeric(report["Standard Error"], errors="coerce"),
        )
    ]
    report.to_csv(stats_path, index=False)

    logger.info("Saved statistical summary to %s", stats_path)
    return stats_path
