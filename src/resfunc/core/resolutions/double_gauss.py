"""Double-Gaussian resolution with energy-dependent parameters.

The measured value is distributed around the true value as a core Gaussian
plus a broader second component whose relative amplitude is ``scale``::

    p(xmeas | x) = (G(r; mu1, sigma1) + scale * G(r; mu2, sigma2)) / (1 + scale)

with ``r = xmeas - x``. Each of the five shape parameters is a polynomial in
the true value ``x``. The default order 1 gives the classic ten-coefficient
layout ``[mu1_0, mu1_1, sigma1_0, sigma1_1, scale_0, ...]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import numpy as np
from scipy.special import logsumexp

from resfunc.core.resolutions.base import ResolutionBase
from resfunc.core.resolutions.functions import TINY, double_gaussian_pdf, gaussian_logpdf
from resfunc.core.resolutions.registry import register_resolution
from resfunc.core.shared.exceptions import DomainError

if TYPE_CHECKING:
    import numpy.typing as npt

    from resfunc.core.shared.typing import FloatArray

SIGMA1_NEGATIVE_MESSAGE = "Sigma of the main Gaussian is < 0, fit result will not be reliable"


class SanityResult(NamedTuple):
    """Outcome of :func:`check_double_gaussian_sanity`."""

    scale: float
    sigma1_negative: bool


def check_double_gaussian_sanity(sigma1: float, scale: float, sigma2: float) -> SanityResult:
    """Correct degenerate double-Gaussian parameters.

    - ``sigma1 < 0`` is only flagged; the width is used as given.
    - ``scale < 0`` switches the second component off.
    - ``sigma2 < 0`` also switches the second component off. ``sigma2`` itself
      is never touched.

    Note:
        Clamping ``scale`` rather than ``sigma2`` for a negative second width
        is the long-standing behaviour of this guard and is kept for
        compatibility with existing parameterisations, although it looks like
        a defect (``sigma2`` was probably meant to be corrected).
    """
    if scale < 0.0:
        scale = 0.0
    if sigma2 < 0.0:
        scale = 0.0
    return SanityResult(scale=scale, sigma1_negative=sigma1 < 0.0)


@dataclass(frozen=True, slots=True)
class DoubleGaussianShape:
    """Shape parameters of the double Gaussian at one true value."""

    mu1: float
    sigma1: float
    scale: float
    mu2: float
    sigma2: float

    def guarded(self) -> tuple[DoubleGaussianShape, bool]:
        """Return the sanity-corrected shape and whether ``sigma1`` is negative."""
        scale, sigma1_negative = check_double_gaussian_sanity(self.sigma1, self.scale, self.sigma2)
        shape = DoubleGaussianShape(self.mu1, self.sigma1, scale, self.mu2, self.sigma2)
        return shape, sigma1_negative

    def is_finite(self) -> bool:
        """Whether every parameter that enters the mixture is finite."""
        used = [self.mu1, self.sigma1, self.scale]
        if self.scale != 0.0:
            used += [self.mu2, self.sigma2]
        return bool(np.all(np.isfinite(used)))

    def check_domain(self) -> None:
        """Raise ``DomainError`` if a component width is zero."""
        if self.sigma1 == 0.0:
            msg = "sigma of the main Gaussian is zero"
            raise DomainError(msg)
        if self.sigma2 == 0.0:
            msg = "sigma of the second Gaussian is zero"
            raise DomainError(msg)


@register_resolution(["double_gauss", "double_gaussian"])
class DoubleGaussianResolution(ResolutionBase):
    """Double-Gaussian resolution whose shape parameters are polynomials in x."""

    NAME = "double_gauss"
    GROUP_NAMES = ("mu1", "sigma1", "scale", "mu2", "sigma2")
    DEFAULT_ORDER = 1

    def shape(self, true_value: float) -> DoubleGaussianShape:
        """Evaluate the raw (unguarded) shape parameters at ``true_value``."""
        mu1, sigma1, scale, mu2, sigma2 = self.parameters.evaluate(true_value).tolist()
        return DoubleGaussianShape(mu1, sigma1, scale, mu2, sigma2)

    def _guarded_shape(self, true_value: float) -> DoubleGaussianShape:
        shape, sigma1_negative = self.shape(true_value).guarded()
        if sigma1_negative:
            self._reporter.warning(
                f"{SIGMA1_NEGATIVE_MESSAGE} (x={true_value:g}, sigma1={shape.sigma1:g})"
            )
        return shape

    @staticmethod
    def _mixture(shape: DoubleGaussianShape, residual: FloatArray) -> FloatArray:
        shape.check_domain()
        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            values = double_gaussian_pdf(
                residual, shape.mu1, shape.sigma1, shape.scale, shape.mu2, shape.sigma2
            )
        # A negative main width can drive the mixture below zero
        degenerate = ~np.isfinite(values) | ~np.isfinite(residual) | (values < 0.0)
        values = np.where(degenerate, 0.0, values)
        if shape.sigma1 > 0.0:
            # Valid densities that underflow stay strictly positive
            values = np.where(~degenerate & (values < TINY), TINY, values)
        return values

    def _evaluate(self, true_value: float, measured: npt.ArrayLike) -> FloatArray:
        shape = self._guarded_shape(true_value)
        with np.errstate(invalid="ignore"):
            residual = np.asarray(measured, dtype=float) - true_value
        try:
            return self._mixture(shape, residual)
        except DomainError:
            return np.zeros_like(residual)

    def density(self, true_value: float, measured_value: float) -> float:
        """Return p(measured_value | true_value).

        Degenerate shapes (a zero width, a non-finite shape or residual, or a
        negative result caused by a negative main width) give a density of 0.
        """
        return float(self._evaluate(true_value, measured_value))

    def density_grid(self, true_value: float, measured_values: npt.ArrayLike) -> FloatArray:
        """Vectorised density over measured values; the guard runs once."""
        return self._evaluate(true_value, measured_values)

    def log_density(self, true_value: float, measured_value: float) -> float:
        """Natural log of the density, exact in the far tails."""
        shape = self._guarded_shape(true_value)
        residual = measured_value - true_value
        try:
            shape.check_domain()
        except DomainError:
            return -np.inf
        if not (shape.is_finite() and np.isfinite(residual)):
            return -np.inf

        if shape.sigma1 < 0.0:
            with np.errstate(divide="ignore"):
                return float(np.log(self._mixture(shape, np.asarray(residual))))
        if shape.scale == 0.0:
            return float(gaussian_logpdf(residual, shape.mu1, shape.sigma1))
        terms = [
            gaussian_logpdf(residual, shape.mu1, shape.sigma1),
            gaussian_logpdf(residual, shape.mu2, shape.sigma2),
        ]
        return float(logsumexp(terms, b=[1.0, shape.scale]) - np.log1p(shape.scale))

    def sigma(self, true_value: float) -> float:
        """Width of the main Gaussian at ``true_value``."""
        return self.parameters.evaluate_group("sigma1", true_value)
