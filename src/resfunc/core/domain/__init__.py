"""Domain models for resfunc configuration."""

from resfunc.core.domain.config import (
    LoggingConfig,
    ResFuncConfig,
    ResolutionConfig,
)

__all__ = ["LoggingConfig", "ResFuncConfig", "ResolutionConfig"]
