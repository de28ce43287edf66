"""Core module for resfunc - parameter storage and resolution models."""

from resfunc.core.parameters import ParameterSet, expected_size
from resfunc.core.resolutions import (
    DoubleGaussianResolution,
    GaussianResolution,
    Resolution,
    ResolutionBase,
    check_double_gaussian_sanity,
)

__all__ = [
    "DoubleGaussianResolution",
    "GaussianResolution",
    "ParameterSet",
    "Resolution",
    "ResolutionBase",
    "check_double_gaussian_sanity",
    "expected_size",
]
