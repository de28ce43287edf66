"""Pure NumPy Gaussian kernels for resolution densities.

Unlike height-normalised lineshapes, these kernels are area-normalised: each
one integrates to 1 over the measured value, which is what a likelihood
contribution needs. Widths are used exactly as given, including negative
values; callers decide what a non-positive width means.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

    from resfunc.core.shared.typing import FloatArray

# =============================================================================
# Module-Level Constants
# =============================================================================

SQRT_2PI = np.sqrt(2.0 * np.pi)
LOG_SQRT_2PI = 0.5 * np.log(2.0 * np.pi)
TINY = np.finfo(float).tiny


def gaussian_pdf(residual: npt.ArrayLike, mean: float, sigma: float) -> FloatArray:
    """Normal density of ``residual`` around ``mean`` with width ``sigma``.

    G(r) = exp(-0.5 * ((r - mean) / sigma)²) / (sigma * sqrt(2π))

    ``sigma`` must be non-zero; its sign is kept in the normalisation.
    """
    z = (np.asarray(residual, dtype=float) - mean) / sigma
    return np.exp(-0.5 * z * z) / (sigma * SQRT_2PI)


def gaussian_logpdf(residual: npt.ArrayLike, mean: float, sigma: float) -> FloatArray:
    """Natural log of :func:`gaussian_pdf` for ``sigma > 0``."""
    z = (np.asarray(residual, dtype=float) - mean) / sigma
    return -0.5 * z * z - np.log(sigma) - LOG_SQRT_2PI


def double_gaussian_pdf(
    residual: npt.ArrayLike,
    mu1: float,
    sigma1: float,
    scale: float,
    mu2: float,
    sigma2: float,
) -> FloatArray:
    """Two-component Gaussian mixture normalised by ``1 + scale``.

    p(r) = (G(r; mu1, sigma1) + scale * G(r; mu2, sigma2)) / (1 + scale)
    """
    core = gaussian_pdf(residual, mu1, sigma1)
    if scale == 0.0:
        # sigma2 may be negative or meaningless once the tail is switched off
        return core
    tail = gaussian_pdf(residual, mu2, sigma2)
    return (core + scale * tail) / (1.0 + scale)


__all__ = [
    "LOG_SQRT_2PI",
    "SQRT_2PI",
    "TINY",
    "double_gaussian_pdf",
    "gaussian_logpdf",
    "gaussian_pdf",
]
