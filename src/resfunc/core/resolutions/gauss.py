"""Single-Gaussian resolution with energy-dependent mean and width."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from resfunc.core.resolutions.base import ResolutionBase
from resfunc.core.resolutions.functions import TINY, gaussian_logpdf, gaussian_pdf
from resfunc.core.resolutions.registry import register_resolution

if TYPE_CHECKING:
    import numpy.typing as npt

    from resfunc.core.shared.typing import FloatArray


@register_resolution(["gauss", "gaussian"])
class GaussianResolution(ResolutionBase):
    """Gaussian resolution: p(xmeas | x) = G(xmeas - x; mu(x), sigma(x))."""

    NAME = "gauss"
    GROUP_NAMES = ("mu", "sigma")
    DEFAULT_ORDER = 1

    def _width(self, true_value: float) -> tuple[float, float] | None:
        mu, sigma = self.parameters.evaluate(true_value).tolist()
        if not math.isfinite(mu):
            return None
        if not (math.isfinite(sigma) and sigma > 0.0):
            self._reporter.warning(
                f"Sigma of the Gaussian resolution is not a positive number at "
                f"x={true_value:g} (sigma={sigma:g}), density set to 0"
            )
            return None
        return mu, sigma

    def density_grid(self, true_value: float, measured_values: npt.ArrayLike) -> FloatArray:
        with np.errstate(invalid="ignore"):
            residual = np.asarray(measured_values, dtype=float) - true_value
        width = self._width(true_value)
        if width is None:
            return np.zeros_like(residual)
        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            values = gaussian_pdf(residual, *width)
        finite = np.isfinite(values) & np.isfinite(residual)
        return np.where(finite, np.maximum(values, TINY), 0.0)

    def density(self, true_value: float, measured_value: float) -> float:
        return float(self.density_grid(true_value, measured_value))

    def log_density(self, true_value: float, measured_value: float) -> float:
        width = self._width(true_value)
        residual = measured_value - true_value
        if width is None or not math.isfinite(residual):
            return -np.inf
        return float(gaussian_logpdf(residual, *width))

    def sigma(self, true_value: float) -> float:
        return self.parameters.evaluate_group("sigma", true_value)
