"""Input/output helpers: parameter files and TOML configuration."""

from resfunc.io.config import generate_default_config, load_config, save_config
from resfunc.io.parameters import load_parameters, register_reader, save_parameters

__all__ = [
    "generate_default_config",
    "load_config",
    "load_parameters",
    "register_reader",
    "save_config",
    "save_parameters",
]
