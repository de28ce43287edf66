"""Resolution function models.

Each module implements one resolution shape and registers it under one or
more names, so that configurations can refer to shapes by name.
"""

from resfunc.core.resolutions.base import Resolution, ResolutionBase
from resfunc.core.resolutions.double_gauss import (
    DoubleGaussianResolution,
    DoubleGaussianShape,
    SanityResult,
    check_double_gaussian_sanity,
)
from resfunc.core.resolutions.factory import create_resolution, create_resolutions
from resfunc.core.resolutions.functions import (
    double_gaussian_pdf,
    gaussian_logpdf,
    gaussian_pdf,
)
from resfunc.core.resolutions.gauss import GaussianResolution
from resfunc.core.resolutions.registry import (
    RESOLUTIONS,
    get_resolution,
    list_resolutions,
    register_resolution,
)

__all__ = [
    "RESOLUTIONS",
    "DoubleGaussianResolution",
    "DoubleGaussianShape",
    "GaussianResolution",
    "Resolution",
    "ResolutionBase",
    "SanityResult",
    "check_double_gaussian_sanity",
    "create_resolution",
    "create_resolutions",
    "double_gaussian_pdf",
    "gaussian_logpdf",
    "gaussian_pdf",
    "get_resolution",
    "list_resolutions",
    "register_resolution",
]
