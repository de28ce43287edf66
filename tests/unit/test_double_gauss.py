"""Test the double-Gaussian resolution."""

import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from scipy.integrate import quad

from resfunc.core.resolutions import (
    DoubleGaussianResolution,
    check_double_gaussian_sanity,
)
from resfunc.core.resolutions.functions import TINY
from resfunc.core.shared.exceptions import ParameterCountError, ParameterIndexError

SQRT_2PI = math.sqrt(2.0 * math.pi)


def gauss(r, mu, sigma):
    return math.exp(-0.5 * ((r - mu) / sigma) ** 2) / (sigma * SQRT_2PI)


class TestSanityCheck:
    """Tests for the degeneracy guard."""

    def test_valid_parameters_unchanged(self):
        result = check_double_gaussian_sanity(2.0, 0.3, 5.0)
        assert result.scale == 0.3
        assert result.sigma1_negative is False

    def test_negative_scale_clamped(self):
        assert check_double_gaussian_sanity(2.0, -0.3, 5.0).scale == 0.0

    def test_negative_sigma2_clamps_scale(self):
        # Long-standing behaviour: the scale is switched off, sigma2 is not corrected
        assert check_double_gaussian_sanity(2.0, 0.3, -5.0).scale == 0.0

    def test_negative_sigma1_only_flagged(self):
        result = check_double_gaussian_sanity(-2.0, 0.3, 5.0)
        assert result.sigma1_negative is True
        assert result.scale == 0.3

    def test_guard_is_pure(self):
        first = check_double_gaussian_sanity(-1.0, -0.5, -2.0)
        second = check_double_gaussian_sanity(-1.0, -0.5, -2.0)
        assert first == second


class TestConstruction:
    """Tests for explicit construction."""

    def test_default_layout(self):
        resolution = DoubleGaussianResolution([0.0] * 10)
        assert resolution.order == 1
        assert resolution.n_parameters == 10
        assert DoubleGaussianResolution.expected_parameters() == 10
        assert DoubleGaussianResolution.expected_parameters(order=2) == 15

    @pytest.mark.parametrize("size", [0, 5, 9, 11])
    def test_wrong_length(self, size):
        with pytest.raises(ParameterCountError):
            DoubleGaussianResolution([1.0] * size)

    def test_order_zero(self, constant_values):
        resolution = DoubleGaussianResolution(constant_values, order=0)
        assert resolution.values == constant_values

    def test_par_access(self, linear_values):
        resolution = DoubleGaussianResolution(linear_values)
        assert resolution.par(2) == 1.0
        with pytest.raises(ParameterIndexError):
            resolution.par(10)

    def test_with_parameters_returns_new_object(self, linear_values, reporter):
        resolution = DoubleGaussianResolution(linear_values, reporter=reporter)
        updated = resolution.with_parameters([0.0] * 10)
        assert updated is not resolution
        assert resolution.values == linear_values
        assert updated.values == [0.0] * 10
        assert updated.reporter is reporter

    def test_with_parameters_checks_length(self, linear_values):
        resolution = DoubleGaussianResolution(linear_values)
        with pytest.raises(ParameterCountError):
            resolution.with_parameters([0.0] * 5)

    def test_describe(self, linear_values):
        info = DoubleGaussianResolution(linear_values).describe()
        assert info["name"] == "double_gauss"
        assert info["groups"]["sigma1"] == [1.0, 0.02]


class TestShapeParameters:
    """Tests for energy-dependent shape evaluation."""

    def test_linear_shape(self, linear_values):
        resolution = DoubleGaussianResolution(linear_values)
        shape = resolution.shape(100.0)
        assert shape.mu1 == pytest.approx(1.5)
        assert shape.sigma1 == pytest.approx(3.0)
        assert shape.scale == pytest.approx(0.3)
        assert shape.mu2 == pytest.approx(-1.0)
        assert shape.sigma2 == pytest.approx(9.0)
        assert resolution.sigma(100.0) == pytest.approx(3.0)

    def test_shape_parameters_dict(self, linear_values):
        params = DoubleGaussianResolution(linear_values).shape_parameters(0.0)
        assert params == {"mu1": 0.5, "sigma1": 1.0, "scale": 0.2, "mu2": -1.0, "sigma2": 4.0}

    def test_energy_dependent_density(self, linear_values):
        resolution = DoubleGaussianResolution(linear_values)
        x, xmeas = 100.0, 104.0
        expected = (gauss(4.0, 1.5, 3.0) + 0.3 * gauss(4.0, -1.0, 9.0)) / 1.3
        assert resolution.density(x, xmeas) == pytest.approx(expected, rel=1e-12)


class TestDensity:
    """Tests for the double-Gaussian density."""

    def test_peak_reference_value(self, make_constant):
        """(G1(0,2) + 0.3*G2(0,5)) / 1.3 at the peak."""
        resolution = make_constant()
        expected = (1.0 / (2.0 * SQRT_2PI) + 0.3 / (5.0 * SQRT_2PI)) / 1.3
        assert expected == pytest.approx(0.1718520592, rel=1e-9)
        assert resolution.density(100.0, 100.0) == pytest.approx(expected, rel=1e-12)

    def test_far_tail_small_positive(self, make_constant):
        resolution = make_constant()
        value = resolution.density(100.0, 1100.0)
        assert math.isfinite(value)
        assert 0.0 < value < 1e-300

    def test_far_tail_log_density_exact(self, make_constant):
        resolution = make_constant()
        expected = (
            -0.5 * (1000.0 / 5.0) ** 2
            - math.log(5.0 * SQRT_2PI)
            + math.log(0.3)
            - math.log(1.3)
        )
        assert resolution.log_density(100.0, 1100.0) == pytest.approx(expected, rel=1e-12)

    def test_log_density_matches_density(self, make_constant):
        resolution = make_constant(mu1=0.5, mu2=-1.0)
        for xmeas in (95.0, 100.0, 103.0):
            assert resolution.log_density(100.0, xmeas) == pytest.approx(
                math.log(resolution.density(100.0, xmeas)), rel=1e-12
            )

    def test_symmetric_without_offsets(self, make_constant):
        resolution = make_constant()
        assert resolution.density(50.0, 47.0) == pytest.approx(resolution.density(50.0, 53.0))

    def test_deterministic(self, linear_values):
        resolution = DoubleGaussianResolution(linear_values)
        first = resolution.density(80.0, 83.5)
        assert all(resolution.density(80.0, 83.5) == first for _ in range(10))

    def test_grid_matches_scalar(self, linear_values):
        resolution = DoubleGaussianResolution(linear_values)
        measured = np.linspace(60.0, 140.0, 41)
        grid = resolution.density_grid(100.0, measured)
        assert grid.shape == measured.shape
        np.testing.assert_allclose(grid, [resolution.density(100.0, m) for m in measured])

    @pytest.mark.parametrize(
        "values",
        [
            [0.0, 0.0, 2.0, 0.0, 0.3, 0.0, 0.0, 0.0, 5.0, 0.0],
            [0.5, 0.01, 1.0, 0.02, 0.2, 0.001, -1.0, 0.0, 4.0, 0.05],
            [-0.2, 0.0, 0.5, 0.0, 1.5, 0.0, 3.0, 0.0, 0.8, 0.0],
            [0.0, 0.0, 1.0, 0.0, -0.4, 0.0, 0.0, 0.0, 2.0, 0.0],
        ],
    )
    @pytest.mark.parametrize("x", [-20.0, 0.0, 35.0, 250.0])
    def test_non_negative(self, values, x):
        resolution = DoubleGaussianResolution(values)
        measured = np.linspace(x - 200.0, x + 200.0, 801)
        assert np.all(resolution.density_grid(x, measured) >= 0.0)

    @pytest.mark.parametrize(
        "values",
        [
            [0.0, 0.0, 2.0, 0.0, 0.3, 0.0, 0.0, 0.0, 5.0, 0.0],
            [0.5, 0.01, 1.0, 0.02, 0.2, 0.001, -1.0, 0.0, 4.0, 0.05],
            [-0.2, 0.0, 0.5, 0.0, 1.5, 0.0, 3.0, 0.0, 0.8, 0.0],
        ],
    )
    @pytest.mark.parametrize("x", [10.0, 100.0])
    def test_normalisation(self, values, x):
        resolution = DoubleGaussianResolution(values)
        shape = resolution.shape(x)
        area, _ = quad(
            lambda m: resolution.density(x, m),
            x - 300.0,
            x + 300.0,
            points=[x + shape.mu1, x + shape.mu2],
            limit=200,
        )
        assert area == pytest.approx(1.0, abs=1e-7)

    def test_thread_safe_evaluation(self, linear_values):
        resolution = DoubleGaussianResolution(linear_values)
        pairs = [(x, x + d) for x in np.linspace(10.0, 200.0, 20) for d in (-3.0, 0.0, 2.5)]
        expected = [resolution.density(x, m) for x, m in pairs]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda p: resolution.density(*p), pairs))
        assert results == expected


class TestDegenerateParameters:
    """Tests for guarded and degenerate shapes."""

    def test_negative_scale_same_as_zero(self, make_constant):
        clamped = make_constant(scale=-0.7)
        zero = make_constant(scale=0.0)
        for xmeas in (90.0, 100.0, 101.5, 130.0):
            assert clamped.density(100.0, xmeas) == zero.density(100.0, xmeas)

    def test_zero_scale_is_main_gaussian(self, make_constant):
        resolution = make_constant(scale=0.0)
        assert resolution.density(100.0, 101.0) == pytest.approx(gauss(1.0, 0.0, 2.0))

    def test_negative_sigma2_switches_off_second_gaussian(self, make_constant):
        # Suspected defect kept on purpose: sigma2 < 0 zeroes the scale instead of sigma2
        negative = make_constant(sigma2=-5.0)
        no_tail = make_constant(scale=0.0)
        for xmeas in (90.0, 100.0, 104.0):
            assert negative.density(100.0, xmeas) == no_tail.density(100.0, xmeas)
        assert negative.density(100.0, 100.0) != make_constant().density(100.0, 100.0)

    def test_negative_sigma1_warns_once_per_call(self, make_constant, reporter):
        resolution = make_constant(sigma1=-2.0)
        resolution.density(100.0, 108.0)
        assert len(reporter.warnings) == 1
        resolution.density_grid(100.0, np.linspace(90.0, 110.0, 11))
        assert len(reporter.warnings) == 2
        assert "sigma of the main gaussian is < 0" in reporter.warnings[0].lower()

    def test_no_warning_for_valid_sigma1(self, make_constant, reporter):
        make_constant().density(100.0, 100.0)
        assert reporter.warnings == []

    def test_negative_sigma1_keeps_formula(self, make_constant):
        resolution = make_constant(sigma1=-2.0)
        expected = (gauss(8.0, 0.0, -2.0) + 0.3 * gauss(8.0, 0.0, 5.0)) / 1.3
        assert expected > 0.0
        assert resolution.density(100.0, 108.0) == pytest.approx(expected, rel=1e-12)

    def test_negative_sigma1_negative_mixture_is_zero(self, make_constant):
        resolution = make_constant(sigma1=-2.0)
        assert resolution.density(100.0, 100.0) == 0.0
        assert resolution.log_density(100.0, 100.0) == -math.inf

    @pytest.mark.parametrize(("sigma1", "sigma2"), [(0.0, 5.0), (2.0, 0.0), (0.0, 0.0)])
    def test_zero_width_gives_zero_density(self, make_constant, sigma1, sigma2):
        resolution = make_constant(sigma1=sigma1, sigma2=sigma2)
        assert resolution.density(100.0, 100.0) == 0.0
        assert resolution.log_density(100.0, 100.0) == -math.inf
        np.testing.assert_array_equal(resolution.density_grid(100.0, [99.0, 100.0]), [0.0, 0.0])

    def test_width_crossing_zero_with_energy(self, reporter):
        # sigma1 = 1 - 0.1 x is negative above x = 10
        values = [0.0, 0.0, 1.0, -0.1, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0]
        resolution = DoubleGaussianResolution(values, reporter=reporter)
        assert resolution.density(5.0, 5.0) > 0.0
        assert reporter.warnings == []
        assert resolution.density(10.0, 10.0) == 0.0
        assert resolution.density(20.0, 20.0) == 0.0
        assert len(reporter.warnings) == 1

    @pytest.mark.parametrize("x", [math.nan, math.inf, -math.inf])
    def test_non_finite_true_value_is_zero_likelihood(self, linear_values, make_constant, x):
        for resolution in (DoubleGaussianResolution(linear_values), make_constant()):
            assert resolution.density(x, 1.0) == 0.0
            assert resolution.log_density(x, 1.0) == -math.inf
            np.testing.assert_array_equal(resolution.density_grid(x, [0.0, 1.0]), [0.0, 0.0])

    @pytest.mark.parametrize("xmeas", [math.nan, math.inf])
    def test_non_finite_measured_value_is_zero_likelihood(self, make_constant, xmeas):
        resolution = make_constant()
        assert resolution.density(100.0, xmeas) == 0.0
        assert resolution.log_density(100.0, xmeas) == -math.inf

    def test_unused_second_width_may_be_non_finite(self, make_constant):
        resolution = make_constant(scale=0.0, sigma2=math.inf)
        expected = 1.0 / (2.0 * math.sqrt(2 * math.pi))
        assert resolution.density(100.0, 100.0) == pytest.approx(expected)
        assert resolution.log_density(100.0, 100.0) == pytest.approx(math.log(expected))
