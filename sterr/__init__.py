"""
A Python package for the standard error of the mean.

Computes SE = sd / sqrt(n) for numeric samples and applies it to tables of
grouped observations.

Modules:
    - stats: Standard error, sample standard deviation and t intervals.
    - data_processing: Loads sample tables from CSV files and splits them into samples.
    - analysis: Grouped summary tables of mean, SD and standard error.
    - reporting: Significant-figure formatting of value ± standard error.
    - output: Writes summary tables to CSV.
    - plotting: Means with standard-error bars.
"""

__version__ = "1.0.0"

from .analysis import calculate_statistics, print_statistics
from .data_processing import extract_samples, load_sample_table, wide_to_long
from .output import save_statistics_to_csv
from .plotting import plot_statistical_summary, setup_plot_style
from .reporting import format_value_with_uncertainty, round_uncertainty
from .stats import (
    InvalidInputError,
    compute_standard_error,
    mean_confidence_interval,
    sample_standard_deviation,
    std_err,
    summarize_sample,
)

__all__ = [
    # Core
    "InvalidInputError",
    "compute_standard_error",
    "std_err",
    "sample_standard_deviation",
    "summarize_sample",
    "mean_confidence_interval",
    # Data processing
    "load_sample_table",
    "wide_to_long",
    "extract_samples",
    # Analysis
    "calculate_statistics",
    "print_statistics",
    # Reporting and output
    "format_value_with_uncertainty",
    "round_uncertainty",
    "save_statistics_to_csv",
    # Plotting
    "setup_plot_style",
    "plot_statistical_summary",
]
