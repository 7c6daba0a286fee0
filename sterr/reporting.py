"""Format and validate summary tables for value ± standard-error reporting.

This module is used after numerical analysis to enforce consistent value and
uncertainty presentation in printed summaries and exported CSV artifacts.
"""

from __future__ import annotations

import math
from typing import Iterable, Tuple

import numpy as np
import pandas as pd


def round_uncertainty(uncertainty: float) -> Tuple[float, int]:
    """Round an uncertainty to significant figures.

    Args:
        uncertainty (float): Absolute uncertainty, such as a standard error.

    Returns:
        tuple[float, int]: Rounded uncertainty and the ``ndigits`` argument
        that :func:`round` used (negative for tens, hundreds, ...).

    Raises:
        ValueError: If uncertainty is non-finite or non-positive.

    Note:
        Use one significant figure by default and two when the leading digit
        is 1.
    """
    u = float(uncertainty)
    if not np.isfinite(u) or u <= 0:
        raise ValueError(f"Uncertainty must be finite and > 0, got {uncertainty!r}")

    exponent = math.floor(math.log10(u))
    leading = u / (10**exponent)
    sig_figs = 2 if 1.0 <= leading < 2.0 else 1
    ndigits = sig_figs - 1 - exponent
    return float(round(u, ndigits)), int(ndigits)


def uncertainty_decimal_places(uncertainty: float) -> int:
    """Return decimal places implied by significant-figure rounding.

    Args:
        uncertainty (float): Absolute uncertainty for a reported value
            (same unit as the value being reported).

    Returns:
        int: Number of decimal places that the paired value should use.
    """
    _, ndigits = round_uncertainty(uncertainty)
    return max(0, ndigits)


def format_value_with_uncertainty(
    value: float, uncertainty: float, unit: str = ""
) -> str:
    """Format ``value ± uncertainty`` with matching precision.

    Zero or non-finite uncertainties cannot set a precision; both numbers are
    then printed with ``%.6g``.
    """
    u = float(uncertainty)
    if not np.isfinite(u) or u <= 0:
        return f"{float(value):.6g} ± {u:.6g} {unit}".strip()

    ru, ndigits = round_uncertainty(u)
    dp = max(0, ndigits)
    v_str = f"{round(float(value), ndigits):.{dp}f}"
    u_str = f"{ru:.{dp}f}"
    return f"{v_str} ± {u_str} {unit}".strip()


def relative_uncertainty(value: float, uncertainty: float) -> float:
    """Return ``|uncertainty / value|`` as a percentage.

    Note:
        Returns ``nan`` when ``value`` is zero or either input is non-finite.
    """
    v = float(value)
    u = float(uncertainty)
    if not np.isfinite(v) or not np.isfinite(u) or v == 0:
        return np.nan
    return float(abs(u / v) * 100.0)


def validate_uncertainty_columns(
    df: pd.DataFrame,
    value_uncertainty_pairs: Iterable[tuple[str, str]],
) -> None:
    """Check that value/uncertainty column pairs exist.

    Raises:
        KeyError: If any required value or uncertainty column is missing.
    """
    for value_col, unc_col in value_uncertainty_pairs:
        if value_col not in df.columns:
            raise KeyError(f"Missing value column '{value_col}' for reporting format.")
        if unc_col not in df.columns:
            raise KeyError(
                f"Missing uncertainty column '{unc_col}' required for '{value_col}'."
            )


def add_formatted_reporting_columns(
    df: pd.DataFrame,
    value_uncertainty_pairs: Iterable[tuple[str, str]],
    suffix: str = " (reported)",
) -> pd.DataFrame:
    """Add reporting-ready string columns for values and uncertainties.

    Args:
        df (pandas.DataFrame): Input numeric table.
        value_uncertainty_pairs (Iterable[tuple[str, str]]): Sequence of
            ``(value_column, uncertainty_column)`` pairs to format.
        suffix (str, optional): Suffix appended to generated reporting columns.
            Defaults to ``" (reported)"``.

    Returns:
        pandas.DataFrame: Copy of ``df`` with formatted string columns added.
        Rows whose uncertainty is missing, zero or non-finite get the value
        in ``%.6g`` form and an empty uncertainty cell.

    Raises:
        KeyError: If required value/uncertainty columns are absent.

    Note:
        Original numeric columns are preserved for downstream computation.
    """
    pairs = list(value_uncertainty_pairs)
    out = df.copy()
    validate_uncertainty_columns(out, pairs)

    for value_col, unc_col in pairs:
        values = pd.to_numeric(out[value_col], errors="coerce")
        uncs = pd.to_numeric(out[unc_col], errors="coerce")

        value_cells = []
        unc_cells = []
        for v, u in zip(values, uncs):
            if np.isfinite(v) and np.isfinite(u) and u > 0:
                ru, ndigits = round_uncertainty(u)
                dp = max(0, ndigits)
                value_cells.append(f"{round(float(v), ndigits):.{dp}f}")
                unc_cells.append(f"{ru:.{dp}f}")
            else:
                value_cells.append(f"{v:.6g}" if np.isfinite(v) else "")
                unc_cells.append("")

        out[f"{value_col}{suffix}"] = value_cells
        out[f"{unc_col}{suffix}"] = unc_cells

    return out
