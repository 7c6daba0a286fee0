"""
Handles CSV parsing and reshaping of sample tables.
"""

# Two layouts are accepted: long tables with one value column (and an optional
# group column), and wide tables with one column per sample. Wide tables are
# melted to long form before grouping so the rest of the pipeline only sees
# one shape.

import logging
import os

import numpy as np
import pandas as pd

from .stats import InvalidInputError

logger = logging.getLogger(__name__)


def load_sample_table(filepath):
    """Load a CSV file of observations into a DataFrame.

    Args:
        filepath: Path to a comma-separated file with a header row.

    Returns:
        pandas.DataFrame: The parsed table.

    Raises:
        FileNotFoundError: If ``filepath`` does not exist.
        InvalidInputError: If the file has no columns.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"No such sample file: {filepath}")
    try:
        df = pd.read_csv(filepath)
    except pd.errors.EmptyDataError as exc:
        raise InvalidInputError(f"Sample file {filepath} is empty.") from exc
    logger.info("Loaded %d rows x %d columns from %s", len(df), len(df.columns), filepath)
    return df


def wide_to_long(df, value_col="value", group_col="group"):
    """Melt a wide table (one column per sample) into long form.

    Blank cells are dropped, so samples of different lengths may share one
    CSV.
    """
    long_df = df.melt(var_name=group_col, value_name=value_col)
    long_df = long_df.dropna(subset=[value_col])
    if not pd.api.types.is_numeric_dtype(long_df[value_col]):
        long_df = long_df[long_df[value_col].astype(str).str.strip() != ""]
    return long_df.reset_index(drop=True)


def _numeric_values(series, label):
    values = series.dropna()
    if not pd.api.types.is_numeric_dtype(values):
        values = values[values.astype(str).str.strip() != ""]
    try:
        numeric = pd.to_numeric(values, errors="raise")
    except (ValueError, TypeError) as exc:
        raise InvalidInputError(f"Non-numeric values in sample '{label}': {exc}") from exc
    return numeric.to_numpy(dtype=float)


def extract_samples(df, value_col, group_col=None):
    """Split a long table into named samples.

    Args:
        df: Long-format :class:`pandas.DataFrame`.
        value_col (str): Column holding the observations.
        group_col (str, optional): Column labelling each observation's group.
            When omitted the whole column is a single sample keyed by
            ``value_col``.

    Returns:
        dict[str, numpy.ndarray]: Mapping of group label to float values in
        row order, with blank cells removed.

    Raises:
        KeyError: If a requested column is missing.
        InvalidInputError: If a non-blank cell is not numeric.
    """
    for col in (value_col, group_col):
        if col is not None and col not in df.columns:
            raise KeyError(f"Column '{col}' not found; available: {list(df.columns)}")

    if group_col is None:
        return {str(value_col): _numeric_values(df[value_col], value_col)}

    unlabeled = int(df[group_col].isna().sum())
    if unlabeled:
        logger.warning(
            "Dropping %d row(s) with a blank '%s' label", unlabeled, group_col
        )

    samples = {}
    for label, group in df.groupby(group_col, sort=True):
        samples[str(label)] = _numeric_values(group[value_col], label)
    return samples


def count_nonfinite(values):
    """Number of ``nan``/``inf`` entries in a float array."""
    return int(np.sum(~np.isfinite(np.asarray(values, dtype=float))))
