"""
Grouped standard-error summaries for tabular samples.

Each group of observations is reduced to its size, mean, unbiased sample
standard deviation and standard error of the mean:

    SE = sd / sqrt(n),   sd = sqrt(sum((x_i - mean)^2) / (n - 1))

A 95% Student-t half-width is added when SciPy is installed. Groups with fewer
than two finite observations keep their row (``n`` and ``Mean`` where
defined) but report ``nan`` spread statistics, and a warning is logged.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np
import pandas as pd

from .data_processing import count_nonfinite, extract_samples
from .reporting import format_value_with_uncertainty
from .stats import InvalidInputError, summarize_sample

logger = logging.getLogger(__name__)

STATS_COLUMNS = ["n", "Mean", "SD", "Standard Error", "CI95 half-width"]


def _summary_row(values: np.ndarray, label: str) -> Dict[str, float]:
    dropped = count_nonfinite(values)
    if dropped:
        logger.warning("Dropping %d non-finite value(s) from sample '%s'", dropped, label)
    finite = values[np.isfinite(values)]

    try:
        summary = summarize_sample(finite)
    except InvalidInputError as exc:
        logger.warning("Sample '%s' has n=%d: %s", label, len(finite), exc)
        return {
            "n": int(len(finite)),
            "Mean": float(np.mean(finite)) if len(finite) else np.nan,
            "SD": np.nan,
            "Standard Error": np.nan,
            "CI95 half-width": np.nan,
        }

    return {
        "n": summary["n"],
        "Mean": summary["mean"],
        "SD": summary["sd"],
        "Standard Error": summary["se"],
        "CI95 half-width": summary["ci95"],
    }


def calculate_statistics(
    df: pd.DataFrame, value_col: str, group_col: Optional[str] = None
) -> pd.DataFrame:
    """Summarize one value column, optionally per group.

    Args:
        df (pandas.DataFrame): Long-format table of observations.
        value_col (str): Column holding the numeric observations.
        group_col (str, optional): Column whose distinct values define groups.

    Returns:
        pandas.DataFrame: One row per group (a single row when ungrouped) with
        columns ``n``, ``Mean``, ``SD``, ``Standard Error`` and
        ``CI95 half-width``, preceded by ``group_col`` when grouping.

    Raises:
        KeyError: If a requested column is missing.
        InvalidInputError: If a non-blank cell is not numeric.
    """
    columns = ([group_col] if group_col else []) + STATS_COLUMNS
    for col in (value_col, group_col):
        if col is not None and col not in df.columns:
            raise KeyError(f"Column '{col}' not found; available: {list(df.columns)}")
    if df.empty:
        return pd.DataFrame(columns=columns)

    samples = extract_samples(df, value_col, group_col=group_col)

    rows = []
    for label, values in samples.items():
        row = _summary_row(values, label)
        if group_col:
            row = {group_col: label, **row}
        rows.append(row)

    logger.info("Summarized %d sample(s) from column '%s'", len(rows), value_col)
    return pd.DataFrame.from_records(rows, columns=columns)


def print_statistics(stats_df: pd.DataFrame, group_col: Optional[str] = None):
    print("\nStandard error summary:")
    if stats_df.empty:
        print("  (no data)")
        return

    for _, row in stats_df.iterrows():
        label = row[group_col] if group_col else "sample"
        n = int(row["n"])
        mean = row["Mean"]
        se = row["Standard Error"]

        if pd.notna(se):
            text = format_value_with_uncertainty(mean, se)
            print(f" - {label}: Mean = {text} (SE, n={n})")
        else:
            print(f" - {label}: Mean = {mean:.6g} (standard error not available) (n={n})")
