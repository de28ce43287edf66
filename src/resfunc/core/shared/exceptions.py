"""Exception taxonomy for resfunc.

This module defines a small, coherent hierarchy of exceptions. Construction
errors are fatal to the resolution being built; ``DomainError`` is raised
while evaluating a density and absorbed by the resolution itself so that a
single degenerate hypothesis never aborts a fit scan.
"""

from __future__ import annotations


class ResFuncError(Exception):
    """Base class for all resfunc-specific exceptions."""


class ConfigError(ResFuncError):
    """Configuration-related errors (invalid/missing options, unknown shapes)."""


class DataIOError(ResFuncError):
    """Data loading/saving errors (files, formats, permissions)."""


class ParameterLoadError(DataIOError):
    """A parameter file is missing, malformed or has the wrong coefficient count."""


class ParameterCountError(ResFuncError, ValueError):
    """An explicit coefficient sequence does not match the expected layout."""


class ParameterValueError(ResFuncError, ValueError):
    """A coefficient is not a finite real number."""


class ParameterIndexError(ResFuncError, IndexError):
    """A parameter was accessed with an index outside the parameter set."""


class NumericsError(ResFuncError):
    """Numeric instability or invalid arithmetic conditions (NaNs, overflows)."""


class DomainError(NumericsError):
    """Shape parameters at a given true value do not define a density."""


__all__ = [
    "ConfigError",
    "DataIOError",
    "DomainError",
    "NumericsError",
    "ParameterCountError",
    "ParameterIndexError",
    "ParameterLoadError",
    "ParameterValueError",
    "ResFuncError",
]
