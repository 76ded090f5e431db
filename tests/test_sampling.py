from numpy import array, allclose, arange, diff, float32, full, isnan, linspace, zeros
from scipy.interpolate import CubicSpline
from natspline import fit_coefficients, plot_coeffs_into, sample_counts, evaluate_coefficients
from natspline import InvalidLengthError
from natspline.sampling import evaluate_cubic
from natspline.utils import reference_knots, reference_values
import warnings
import pytest


coefficients = fit_coefficients(reference_knots, reference_values)
reference = CubicSpline(reference_knots.astype(float), reference_values.astype(float), bc_type="natural")


def sample_positions(counts, m):
    step = (reference_knots[-1] - reference_knots[0]) / m
    positions = []
    for i, count in enumerate(counts):
        positions.extend(reference_knots[i] + arange(count) * step)
    return array(positions[:m])


def test_evaluate_cubic():
    values = zeros(64, dtype=float32)
    evaluate_cubic(4.0, 2.0, 2.0, 1.5, values, start=0.0, step=0.05)
    assert allclose(values[:5], [4.0, 4.1051874, 4.2215, 4.350063, 4.492])
    assert allclose(values[-3:], [71.26394, 74.10651, 77.028824])


def test_round_counts():
    counts = sample_counts(reference_knots, 100)
    expected = [3, 7, 7, 10, 3, 7, 7, 7, 7, 7, 10, 3, 7, 7, 7]
    assert (counts == expected).all()
    assert counts.sum() == 99


def test_largest_remainder_counts():
    counts = sample_counts(reference_knots, 100, allocation="largest_remainder")
    expected = [4, 7, 7, 10, 3, 7, 7, 7, 7, 7, 10, 3, 7, 7, 7]
    assert (counts == expected).all()


@pytest.mark.parametrize("m", [1, 7, 15, 64, 100, 1001])
def test_largest_remainder_partition(m):
    counts = sample_counts(reference_knots, m, allocation="largest_remainder")
    assert counts.sum() == m
    assert (counts >= 0).all()


def test_unknown_allocation():
    buffer = full(100, -1., dtype=float32)
    with pytest.raises(ValueError):
        plot_coeffs_into(buffer, coefficients, reference_knots, allocation="nearest")
    assert (buffer == -1.).all()


def test_sampler_coverage():
    buffer = full(100, float("nan"), dtype=float32)
    # the rounded interval shares only add up to 99 of the 100 samples
    with pytest.warns(UserWarning):
        written = plot_coeffs_into(buffer, coefficients, reference_knots)

    assert written == 99
    assert buffer[0] == reference_values[0]
    assert isnan(buffer[99])
    # the final written sample sits 0.87 into the last interval
    assert abs(buffer[98] - reference_values[-1]) < 0.25

    samples = buffer[:99]
    assert samples.min() > -1. and samples.max() < 11.
    assert abs(diff(samples)).max() < 2.

    positions = sample_positions(sample_counts(reference_knots, 100), 100)
    assert allclose(samples, reference(positions), atol=1e-3)


def test_sampler_exact_partition():
    buffer = full(100, float("nan"), dtype=float32)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        written = plot_coeffs_into(
            buffer, coefficients, reference_knots, allocation="largest_remainder"
        )

    assert written == 100
    assert not isnan(buffer).any()
    assert buffer[0] == reference_values[0]
    positions = sample_positions(
        sample_counts(reference_knots, 100, allocation="largest_remainder"), 100
    )
    assert allclose(buffer, reference(positions), atol=1e-3)


def test_sampler_clamps_overflow():
    # with 10 samples the rounded shares add up to 12
    assert sample_counts(reference_knots, 10).sum() == 12
    storage = full(12, float("nan"), dtype=float32)
    buffer = storage[:10]
    with pytest.warns(UserWarning, match="dropped"):
        written = plot_coeffs_into(buffer, coefficients, reference_knots)
    assert written == 10
    assert not isnan(buffer).any()
    assert isnan(storage[10:]).all()


def test_sampler_silenced_warnings():
    buffer = zeros(100, dtype=float32)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        plot_coeffs_into(buffer, coefficients, reference_knots, show_warnings=False)


def test_sample_counts_validation():
    with pytest.raises(ValueError):
        sample_counts(reference_knots, -5)
    with pytest.raises(InvalidLengthError):
        sample_counts(reference_knots[:5], 100)
    assert sample_counts(reference_knots, 0).sum() == 0


def test_integer_buffer_rejected():
    buffer = full(100, -1, dtype=int)
    with pytest.raises(ValueError):
        plot_coeffs_into(buffer, coefficients, reference_knots)
    assert (buffer == -1).all()


def test_empty_buffer():
    assert plot_coeffs_into(zeros(0, dtype=float32), coefficients, reference_knots) == 0


def test_sampler_length_validation():
    buffer = full(100, -1., dtype=float32)
    with pytest.raises(InvalidLengthError):
        plot_coeffs_into(buffer, coefficients[:-1], reference_knots)
    with pytest.raises(InvalidLengthError):
        plot_coeffs_into(buffer, coefficients, reference_knots[:-1])
    with pytest.raises(InvalidLengthError):
        plot_coeffs_into(buffer, coefficients[:, :3], reference_knots)
    assert (buffer == -1.).all()

    with pytest.raises(InvalidLengthError):
        plot_coeffs_into(full([10, 10], -1., dtype=float32), coefficients, reference_knots)


def test_evaluate_coefficients():
    assert allclose(evaluate_coefficients(reference_knots, reference_knots, coefficients), reference_values, atol=1e-4)

    x = linspace(reference_knots[0], reference_knots[-1], 500)
    assert allclose(evaluate_coefficients(x, reference_knots, coefficients), reference(x), atol=1e-3)
    for order in [1, 2, 3]:
        assert allclose(
            evaluate_coefficients(x, reference_knots, coefficients, derivative=order),
            reference(x, order),
            atol=2e-3,
        )

    value = evaluate_coefficients(3.3, reference_knots, coefficients)
    assert allclose(value, reference(3.3), atol=1e-4)

    with pytest.raises(ValueError):
        evaluate_coefficients(x, reference_knots, coefficients, derivative=4)
