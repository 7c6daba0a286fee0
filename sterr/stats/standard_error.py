"""Standard error of the mean and the descriptive statistics around it.

The standard error is the unbiased (n - 1) sample standard deviation divided
by the square root of the sample size. A single observation has no defined
sample standard deviation, so samples with fewer than two values are rejected
with :class:`InvalidInputError` rather than returning ``nan``.
"""

from __future__ import annotations

import importlib.util
import math
import numbers
from typing import Dict, Iterable, Tuple

import numpy as np

HAVE_SCIPY = importlib.util.find_spec("scipy") is not None
if HAVE_SCIPY:
    from scipy.stats import t as student_t

MIN_SAMPLE_SIZE = 2
DEFAULT_CONFIDENCE_LEVEL = 0.95


class InvalidInputError(ValueError):
    """Raised when a sample cannot produce a defined standard error."""


def _is_real_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_sample(x: Iterable[float], drop_nonfinite: bool = False) -> np.ndarray:
    """Validate ``x`` and return it as a new one-dimensional float array.

    Args:
        x: Numeric collection (list, tuple, numpy array, pandas Series).
        drop_nonfinite (bool, optional): Remove ``nan`` and ``inf`` values
            before the size checks. Defaults to ``False``.

    Returns:
        numpy.ndarray: Float copy of the sample; ``x`` itself is untouched.

    Raises:
        InvalidInputError: If ``x`` is a scalar or string, is not
            one-dimensional, holds non-numeric elements, or has fewer than
            two values.
    """
    if isinstance(x, (str, bytes)) or x is None:
        raise InvalidInputError("Sample must be a collection of numbers.")
    try:
        arr = np.asarray(x)
    except (OverflowError, TypeError, ValueError) as exc:
        raise InvalidInputError(f"Sample could not be read as numbers: {exc}") from exc

    if arr.ndim != 1:
        raise InvalidInputError(
            f"Sample must be one-dimensional, got {arr.ndim} dimension(s)."
        )
    if arr.size == 0:
        raise InvalidInputError("Standard error undefined for an empty sample.")

    if arr.dtype.kind == "O":
        bad = [v for v in arr if not _is_real_number(v)]
        if bad:
            raise InvalidInputError(f"Sample contains non-numeric values: {bad[:5]!r}")
    elif arr.dtype.kind not in "iuf":
        raise InvalidInputError(
            f"Sample contains non-numeric values (dtype '{arr.dtype}')."
        )

    try:
        values = arr.astype(float)
    except (OverflowError, TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"Sample values cannot be represented as floats: {exc}"
        ) from exc
    if drop_nonfinite:
        values = values[np.isfinite(values)]
        if values.size == 0:
            raise InvalidInputError("Sample has no finite values.")

    if values.size < MIN_SAMPLE_SIZE:
        raise InvalidInputError("Standard error undefined for sample size 1.")
    return values


def _sd(values: np.ndarray) -> float:
    # Constant samples are exactly zero; the floating-point mean of repeated
    # values is not always bit-identical to the value itself.
    if np.isfinite(values[0]) and np.all(values == values[0]):
        return 0.0
    n = values.size
    mean = float(np.mean(values))
    ss = float(np.sum((values - mean) ** 2))
    return math.sqrt(ss / (n - 1))


def sample_standard_deviation(
    x: Iterable[float], drop_nonfinite: bool = False
) -> float:
    """Return the unbiased (n - 1 denominator) sample standard deviation.

    Raises:
        InvalidInputError: Under the same conditions as
            :func:`compute_standard_error`.
    """
    return _sd(_as_sample(x, drop_nonfinite=drop_nonfinite))


def compute_standard_error(x: Iterable[float], drop_nonfinite: bool = False) -> float:
    """Compute the standard error of the mean of a numeric sample.

    Args:
        x: One-dimensional collection of numbers. Not modified.
        drop_nonfinite (bool, optional): Discard ``nan``/``inf`` values
            before computing. When ``False`` they propagate under IEEE-754
            rules and the result is ``nan``. Defaults to ``False``.

    Returns:
        float: ``sd(x) / sqrt(len(x))``, always ``>= 0`` for finite input and
        exactly ``0.0`` when every value is identical.

    Raises:
        InvalidInputError: If the sample is empty, has exactly one value,
            contains non-numeric elements, or is not one-dimensional.

    Note:
        A size-1 sample raises instead of returning ``nan``: the n - 1
        estimator divides by zero there, and a silent ``nan`` would travel
        through downstream tables unnoticed.

    Examples:
        >>> round(compute_standard_error([4, 7, 2, 7, 5, 9]), 5)
        1.02198
    """
    values = _as_sample(x, drop_nonfinite=drop_nonfinite)
    return float(_sd(values) / math.sqrt(values.size))


std_err = compute_standard_error


def mean_confidence_interval(
    x: Iterable[float],
    level: float = DEFAULT_CONFIDENCE_LEVEL,
    drop_nonfinite: bool = False,
) -> Tuple[float, float]:
    """Two-sided Student-t confidence interval for the population mean.

    Args:
        x: Numeric sample with at least two values.
        level (float, optional): Confidence level in ``(0, 1)``.
            Defaults to ``0.95``.
        drop_nonfinite (bool, optional): See :func:`compute_standard_error`.

    Returns:
        tuple[float, float]: ``(low, high)`` bounds around the sample mean.

    Raises:
        ValueError: If ``level`` is outside ``(0, 1)``.
        InvalidInputError: If the sample is invalid.
        RuntimeError: If SciPy is not installed.
    """
    if not 0.0 < float(level) < 1.0:
        raise ValueError(f"level must be in (0, 1), got {level!r}")
    if not HAVE_SCIPY:
        raise RuntimeError("SciPy is required for t-based confidence intervals.")

    values = _as_sample(x, drop_nonfinite=drop_nonfinite)
    se = _sd(values) / math.sqrt(values.size)
    mean = float(np.mean(values))
    t_crit = float(student_t.ppf(0.5 + float(level) / 2.0, values.size - 1))
    half = t_crit * se
    return mean - half, mean + half


def summarize_sample(x: Iterable[float], drop_nonfinite: bool = False) -> Dict[str, float]:
    """Return ``n``, ``mean``, ``sd``, ``se`` and ``ci95`` for one sample.

    ``ci95`` is the half-width of the 95% t interval, or ``nan`` when SciPy is
    unavailable.
    """
    values = _as_sample(x, drop_nonfinite=drop_nonfinite)
    n = int(values.size)
    sd = _sd(values)
    se = sd / math.sqrt(n)

    ci95 = math.nan
    if HAVE_SCIPY:
        t_crit = float(student_t.ppf(0.5 + DEFAULT_CONFIDENCE_LEVEL / 2.0, n - 1))
        ci95 = t_crit * se

    return {
        "n": n,
        "mean": float(np.mean(values)),
        "sd": float(sd),
        "se": float(se),
        "ci95": ci95,
    }
