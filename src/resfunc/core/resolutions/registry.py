"""Registry of resolution shapes for lookup by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resfunc.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from resfunc.core.resolutions.base import ResolutionBase

# Global resolution registry
RESOLUTIONS: dict[str, type[ResolutionBase]] = {}


def register_resolution(
    names: str | Iterable[str],
) -> Callable[[type[ResolutionBase]], type[ResolutionBase]]:
    """Register a resolution class.

    Args:
        names: Single name or iterable of names to register the class under

    Returns
    -------
        Decorator that registers the resolution class

    Example:
        @register_resolution(["double_gauss", "double_gaussian"])
        class DoubleGaussianResolution(ResolutionBase):
            ...
    """
    if isinstance(names, str):
        names = [names]

    def decorator(resolution_class: type[ResolutionBase]) -> type[ResolutionBase]:
        for name in names:
            RESOLUTIONS[name] = resolution_class
        return resolution_class

    return decorator


def get_resolution(name: str) -> type[ResolutionBase]:
    """Get a resolution class by name.

    Raises
    ------
        ConfigError: If the name is not registered
    """
    try:
        return RESOLUTIONS[name]
    except KeyError:
        known = ", ".join(sorted(RESOLUTIONS))
        msg = f"Unknown resolution '{name}'. Available: {known}"
        raise ConfigError(msg) from None


def list_resolutions() -> list[str]:
    """List all registered resolution names."""
    return sorted(RESOLUTIONS.keys())
