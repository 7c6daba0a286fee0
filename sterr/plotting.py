"""
Figures for standard-error summaries.

Group means are drawn as open markers with ±1 SE error bars; groups whose
standard error is undefined are drawn without a bar. Figures use a
black-and-white serif style so they print cleanly.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def setup_plot_style():
    """High-legibility style for black-and-white report figures."""
    if "seaborn-v0_8-whitegrid" in plt.style.available:
        plt.style.use("seaborn-v0_8-whitegrid")
    else:
        plt.style.use("default")

    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.serif": ["Times New Roman", "Times", "Nimbus Roman", "DejaVu Serif"],
            "mathtext.fontset": "stix",
            "font.size": 14,
            "axes.titlesize": 18,
            "axes.labelsize": 16,
            "legend.fontsize": 12,
            "figure.dpi": 120,
            "savefig.dpi": 300,
            "savefig.bbox": "tight",
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": 0.25,
            "grid.linestyle": "--",
            "legend.frameon": False,
        }
    )


def plot_statistical_summary(
    stats_df: pd.DataFrame,
    group_col: Optional[str] = None,
    output_dir: str = "output",
    value_label: str = "Mean",
) -> str:
    """Plot group means with standard-error bars and save the figure.

    Args:
        stats_df (pandas.DataFrame): Output from ``calculate_statistics``.
        group_col (str, optional): Group column of ``stats_df``; the x axis
            shows its labels. Without it, rows are numbered.
        output_dir (str): Directory for ``standard_error_summary.png``.
        value_label (str): Y-axis label.

    Returns:
        str: Path of the saved PNG.

    Raises:
        KeyError: If ``Mean``, ``Standard Error`` or ``group_col`` is missing.
    """
    required = ["Mean", "Standard Error"] + ([group_col] if group_col else [])
    missing = [c for c in required if c not in stats_df.columns]
    if missing:
        raise KeyError(f"stats_df is missing column(s): {missing}")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    y = pd.to_numeric(stats_df["Mean"], errors="coerce").to_numpy(dtype=float)
    yerr = pd.to_numeric(stats_df["Standard Error"], errors="coerce").to_numpy(
        dtype=float
    )
    yerr = np.where(np.isfinite(yerr), yerr, 0.0)
    x = np.arange(len(y))
    labels = (
        [str(v) for v in stats_df[group_col]]
        if group_col
        else [str(i + 1) for i in x]
    )

    fig, ax = plt.subplots(figsize=(8.0, 5.5))
    ax.errorbar(
        x,
        y,
        yerr=yerr,
        fmt="D",
        markersize=8,
        markerfacecolor="white",
        markeredgecolor="black",
        ecolor=(0, 0, 0, 0.5),
        elinewidth=1.6,
        capsize=4,
        label="Mean ± SE",
        zorder=10,
    )

    if "n" in stats_df.columns:
        for xi, yi, n in zip(x, y, stats_df["n"]):
            if np.isfinite(yi):
                ax.annotate(
                    f"n={int(n)}",
                    (xi, yi),
                    textcoords="offset points",
                    xytext=(8, 6),
                    fontsize=10,
                )

    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_xlabel(group_col or "Sample")
    ax.set_ylabel(value_label)
    ax.legend(loc="best")

    out_path = os.path.join(output_dir, "standard_error_summary.png")
    fig.savefig(out_path)
    plt.close(fig)
    logger.info("Saved summary figure to %s", out_path)
    return out_path
