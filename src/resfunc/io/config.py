"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from resfunc.core.domain.config import ResFuncConfig
from resfunc.core.shared.exceptions import ConfigError


def load_config(path: Path) -> ResFuncConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        ResFuncConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ConfigError: If the configuration does not validate.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return ResFuncConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}:\n{exc}"
        raise ConfigError(msg) from exc


def save_config(config: ResFuncConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# resfunc configuration file
# Generated automatically - edit as needed

[logging]
# file = "resfunc.log"  # Uncomment to write a log file (.json for structured logs)
format = "text"
verbose = false

# Double Gaussian: groups mu1, sigma1, scale, mu2, sigma2, each c0 + c1*x
[resolutions.jet]
kind = "double_gauss"
order = 1
parameters = [
    0.0, 0.0,   # mu1
    2.0, 0.0,   # sigma1
    0.3, 0.0,   # scale
    0.0, 0.0,   # mu2
    5.0, 0.0,   # sigma2
]

# Single Gaussian: groups mu, sigma
[resolutions.electron]
kind = "gauss"
order = 1
parameters = [0.0, 0.0, 0.5, 0.01]

# Coefficients can also be read from a file:
# [resolutions.bjet]
# kind = "double_gauss"
# parameter_file = "par_energy_bJets.txt"
"""
