"""Factory helpers for constructing resolution instances from configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from resfunc.core.resolutions.registry import get_resolution

if TYPE_CHECKING:
    from resfunc.core.domain.config import ResFuncConfig, ResolutionConfig
    from resfunc.core.resolutions.base import ResolutionBase
    from resfunc.core.shared.reporter import Reporter


def create_resolution(
    config: ResolutionConfig,
    *,
    base_dir: Path | None = None,
    reporter: Reporter | None = None,
) -> ResolutionBase:
    """Create a resolution from its configuration.

    Relative parameter files are resolved against ``base_dir`` (usually the
    directory of the configuration file).
    """
    resolution_cls = get_resolution(config.kind)

    if config.parameter_file is not None:
        path = config.parameter_file
        if not path.is_absolute() and base_dir is not None:
            path = base_dir / path
        return resolution_cls.from_file(path, order=config.order, reporter=reporter)

    assert config.parameters is not None
    return resolution_cls(config.parameters, order=config.order, reporter=reporter)


def create_resolutions(
    config: ResFuncConfig,
    *,
    base_dir: Path | None = None,
    reporter: Reporter | None = None,
) -> dict[str, ResolutionBase]:
    """Create every resolution declared in a configuration, keyed by label."""
    return {
        label: create_resolution(entry, base_dir=base_dir, reporter=reporter)
        for label, entry in config.resolutions.items()
    }
