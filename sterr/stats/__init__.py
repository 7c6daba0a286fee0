"""
Statistical core of the package.

This subpackage holds the numerical routines only. All functions operate on
arrays and primitive types; no table, reporting or plotting logic is included.

Modules:
    standard_error:
        Standard error of the mean with the unbiased (n - 1) sample standard
        deviation, plus the summary and t-interval helpers built on it.

Design Principle:
    This subpackage has no dependencies on the table, reporting or plotting
    modules. It can be imported and tested on its own.
"""

from .standard_error import (
    DEFAULT_CONFIDENCE_LEVEL,
    HAVE_SCIPY,
    InvalidInputError,
    compute_standard_error,
    mean_confidence_interval,
    sample_standard_deviation,
    std_err,
    summarize_sample,
)

__all__ = [
    "DEFAULT_CONFIDENCE_LEVEL",
    "HAVE_SCIPY",
    "InvalidInputError",
    "compute_standard_error",
    "mean_confidence_interval",
    "sample_standard_deviation",
    "std_err",
    "summarize_sample",
]
