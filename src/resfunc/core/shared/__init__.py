"""Shared primitives: exceptions, typing aliases and diagnostic reporting."""

from resfunc.core.shared.exceptions import (
    ConfigError,
    DataIOError,
    DomainError,
    NumericsError,
    ParameterCountError,
    ParameterIndexError,
    ParameterLoadError,
    ParameterValueError,
    ResFuncError,
)
from resfunc.core.shared.reporter import (
    CompositeReporter,
    LoggingReporter,
    NullReporter,
    Reporter,
    default_reporter,
)

__all__ = [
    "CompositeReporter",
    "ConfigError",
    "DataIOError",
    "DomainError",
    "LoggingReporter",
    "NullReporter",
    "NumericsError",
    "ParameterCountError",
    "ParameterIndexError",
    "ParameterLoadError",
    "ParameterValueError",
    "Reporter",
    "ResFuncError",
    "default_reporter",
]
