import math

import numpy as np
import pandas as pd
import pytest

from sterr.stats import (
    DEFAULT_CONFIDENCE_LEVEL,
    HAVE_SCIPY,
    InvalidInputError,
    compute_standard_error,
    mean_confidence_interval,
    sample_standard_deviation,
    std_err,
    summarize_sample,
)


def test_known_value():
    se = compute_standard_error([4, 7, 2, 7, 5, 9])
    assert abs(se - 1.02198064778) < 1e-10


def test_one_to_five():
    # mean 3, sd sqrt(2.5), se sqrt(2.5) / sqrt(5)
    se = compute_standard_error([1, 2, 3, 4, 5])
    assert math.isclose(se, math.sqrt(2.5) / math.sqrt(5))
    assert math.isclose(se, 0.70710678, abs_tol=1e-8)
    assert math.isclose(sample_standard_deviation([1, 2, 3, 4, 5]), 1.5811388, abs_tol=1e-7)


def test_std_err_alias_and_return_type():
    assert std_err is compute_standard_error
    assert type(compute_standard_error(np.array([1.0, 2.0]))) is float


@pytest.mark.parametrize("c", [0.1, -3.7, 1e9, 0.0])
@pytest.mark.parametrize("n", [2, 3, 7, 100])
def test_constant_sample_is_exactly_zero(c, n):
    assert compute_standard_error([c] * n) == 0.0


def test_non_negative_on_random_samples():
    rng = np.random.default_rng(0)
    for _ in range(50):
        x = rng.normal(loc=rng.uniform(-10, 10), scale=5.0, size=rng.integers(2, 40))
        assert compute_standard_error(x) >= 0.0


@pytest.mark.parametrize("k", [2.0, -3.0, 0.5, -0.01])
def test_scaling_by_constant(k):
    x = np.array([4, 7, 2, 7, 5, 9], dtype=float)
    assert math.isclose(
        compute_standard_error(k * x), abs(k) * compute_standard_error(x), rel_tol=1e-12
    )


@pytest.mark.parametrize("k", [2.0, -3.0, 0.5, -0.01])
def test_scaling_by_constant_on_random_samples(k):
    rng = np.random.default_rng(0)
    for _ in range(50):
        x = rng.normal(loc=rng.uniform(-10, 10), scale=5.0, size=rng.integers(2, 40))
        assert math.isclose(
            compute_standard_error(k * x), abs(k) * compute_standard_error(x), rel_tol=1e-9
        )


def test_expected_se_shrinks_with_sample_size():
    rng = np.random.default_rng(42)
    small = np.mean([compute_standard_error(rng.normal(size=10)) for _ in range(400)])
    large = np.mean([compute_standard_error(rng.normal(size=1000)) for _ in range(400)])
    assert large < small
    # SE ~ 1 / sqrt(n) for unit-variance draws
    assert abs(large - 1.0 / math.sqrt(1000)) < 0.005


def test_empty_sample_raises():
    with pytest.raises(InvalidInputError, match="empty"):
        compute_standard_error([])


def test_single_value_raises():
    with pytest.raises(InvalidInputError, match="sample size 1"):
        compute_standard_error([5.0])


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        compute_standard_error([1.0])


@pytest.mark.parametrize(
    "bad",
    [
        [1, "a", 3],
        ["1", "2"],
        [1, None, 3],
        [True, False, True],
        [1 + 2j, 3 + 0j],
        [[1, 2], [3, 4]],
        "12345",
        5.0,
        None,
        [10**400, 1],
    ],
)
def test_non_numeric_or_badly_shaped_raises(bad):
    with pytest.raises(InvalidInputError):
        compute_standard_error(bad)


def test_input_not_mutated():
    x = [4, 7, 2, 7, 5, 9]
    arr = np.array(x, dtype=float)
    compute_standard_error(x)
    compute_standard_error(arr)
    assert x == [4, 7, 2, 7, 5, 9]
    assert np.array_equal(arr, [4, 7, 2, 7, 5, 9])


def test_accepts_pandas_series_and_tuple():
    expected = compute_standard_error([4, 7, 2, 7, 5, 9])
    assert compute_standard_error(pd.Series([4, 7, 2, 7, 5, 9])) == expected
    assert compute_standard_error((4, 7, 2, 7, 5, 9)) == expected


def test_nan_propagates_unless_dropped():
    x = [4, 7, 2, np.nan, 7, 5, 9]
    assert math.isnan(compute_standard_error(x))
    assert math.isclose(
        compute_standard_error(x, drop_nonfinite=True),
        compute_standard_error([4, 7, 2, 7, 5, 9]),
    )


def test_dropping_nonfinite_rechecks_size():
    with pytest.raises(InvalidInputError):
        compute_standard_error([1.0, np.nan, np.inf], drop_nonfinite=True)
    with pytest.raises(InvalidInputError, match="no finite"):
        compute_standard_error([np.nan, np.nan], drop_nonfinite=True)


def test_summarize_sample():
    out = summarize_sample([1, 2, 3, 4, 5])
    assert out["n"] == 5
    assert math.isclose(out["mean"], 3.0)
    assert math.isclose(out["sd"], math.sqrt(2.5))
    assert math.isclose(out["se"], compute_standard_error([1, 2, 3, 4, 5]))
    if HAVE_SCIPY:
        # t(0.975, 4) = 2.776445
        assert math.isclose(out["ci95"], 2.776445 * out["se"], rel_tol=1e-5)
    else:
        assert math.isnan(out["ci95"])


def test_mean_confidence_interval():
    pytest.importorskip("scipy")
    low, high = mean_confidence_interval([1, 2, 3, 4, 5])
    se = compute_standard_error([1, 2, 3, 4, 5])
    assert math.isclose(0.5 * (low + high), 3.0)
    assert math.isclose(0.5 * (high - low), 2.776445 * se, rel_tol=1e-5)

    low90, high90 = mean_confidence_interval([1, 2, 3, 4, 5], level=0.90)
    assert low < low90 < high90 < high


@pytest.mark.parametrize("level", [0.0, 1.0, 1.5, -0.2])
def test_mean_confidence_interval_rejects_level(level):
    with pytest.raises(ValueError):
        mean_confidence_interval([1, 2, 3], level=level)


def test_huge_integer_raises_invalid_input():
    with pytest.raises(InvalidInputError):
        compute_standard_error([10**400, 1])


def test_summary_interval_uses_default_level():
    pytest.importorskip("scipy")
    x = [4, 7, 2, 7, 5, 9]
    low, high = mean_confidence_interval(x, level=DEFAULT_CONFIDENCE_LEVEL)
    assert math.isclose(summarize_sample(x)["ci95"], 0.5 * (high - low))
