"""resfunc - Energy-dependent resolution functions for likelihood fits.

Public API:
    - DoubleGaussianResolution: double-Gaussian resolution, polynomial in x
    - GaussianResolution: single-Gaussian resolution, polynomial in x
    - ParameterSet: coefficient storage shared by all resolutions

Configuration:
    - ResFuncConfig, ResolutionConfig: TOML-backed configuration models
    - create_resolution: build a resolution from its configuration
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from resfunc.core.domain.config import ResFuncConfig, ResolutionConfig
from resfunc.core.parameters import ParameterSet
from resfunc.core.resolutions import (
    DoubleGaussianResolution,
    GaussianResolution,
    Resolution,
    ResolutionBase,
    check_double_gaussian_sanity,
    create_resolution,
    get_resolution,
    list_resolutions,
)
from resfunc.core.shared.exceptions import (
    ConfigError,
    DomainError,
    ParameterCountError,
    ParameterIndexError,
    ParameterLoadError,
    ResFuncError,
)
from resfunc.core.shared.reporter import LoggingReporter, NullReporter, Reporter

__all__ = [
    # Version
    "__version__",
    # Resolutions
    "DoubleGaussianResolution",
    "GaussianResolution",
    "ParameterSet",
    "Resolution",
    "ResolutionBase",
    "check_double_gaussian_sanity",
    "create_resolution",
    "get_resolution",
    "list_resolutions",
    # Configuration
    "ResFuncConfig",
    "ResolutionConfig",
    # Diagnostics
    "LoggingReporter",
    "NullReporter",
    "Reporter",
    # Errors
    "ConfigError",
    "DomainError",
    "ParameterCountError",
    "ParameterIndexError",
    "ParameterLoadError",
    "ResFuncError",
]
