"""Tests for export-layer formatting behavior."""

import math

import numpy as np
import pandas as pd

from sterr.output import save_statistics_to_csv


def test_save_statistics_to_csv(tmp_path):
    stats_df = pd.DataFrame(
        {
            "group": ["a", "b"],
            "n": [6, 1],
            "Mean": [5.6667, 9.0],
            "SD": [2.5033, np.nan],
            "Standard Error": [1.02198, np.nan],
            "CI95 half-width": [2.627, np.nan],
        }
    )
    path = save_statistics_to_csv(stats_df, output_dir=str(tmp_path / "out"))

    assert path.endswith("statistical_summary.csv")
    written = pd.read_csv(path, dtype=str, keep_default_na=False)
    assert written.loc[0, "Mean (reported)"] == "5.7"
    assert written.loc[0, "Standard Error (reported)"] == "1.0"
    assert math.isclose(float(written.loc[0, "Relative Standard Error (%)"]), 1.02198 / 5.6667 * 100)
    assert written.loc[1, "Standard Error (reported)"] == ""
