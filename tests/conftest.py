"""Pytest fixtures for resfunc tests."""

import pytest

from resfunc.core.resolutions import DoubleGaussianResolution


class MockReporter:
    """Test double for capturing reporter calls."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    @property
    def warnings(self) -> list[str]:
        return [message for level, message in self.messages if level == "warning"]


@pytest.fixture
def reporter():
    """Reporter recording every diagnostic."""
    return MockReporter()


@pytest.fixture
def constant_values():
    """Order-0 coefficients: mu1=0, sigma1=2, scale=0.3, mu2=0, sigma2=5."""
    return [0.0, 2.0, 0.3, 0.0, 5.0]


@pytest.fixture
def make_constant(reporter):
    """Build an order-0 double Gaussian from the five shape parameters."""

    def _make(mu1=0.0, sigma1=2.0, scale=0.3, mu2=0.0, sigma2=5.0):
        return DoubleGaussianResolution(
            [mu1, sigma1, scale, mu2, sigma2], order=0, reporter=reporter
        )

    return _make


@pytest.fixture
def linear_values():
    """Order-1 coefficients with energy-dependent widths and offsets."""
    return [
        0.5, 0.01,  # mu1
        1.0, 0.02,  # sigma1
        0.2, 0.001,  # scale
        -1.0, 0.0,  # mu2
        4.0, 0.05,  # sigma2
    ]


@pytest.fixture
def sample_parameter_file(tmp_path, linear_values):
    """Create a text parameter file in the classic two-coefficients-per-line layout."""
    path = tmp_path / "par_energy_jets.txt"
    lines = ["# double Gaussian, linear in E"]
    for name, start in zip(("mu1", "sigma1", "scale", "mu2", "sigma2"), range(0, 10, 2)):
        lines.append(f"{linear_values[start]} {linear_values[start + 1]}  # {name}")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def sample_config_file(tmp_path, sample_parameter_file):
    """Create a sample TOML configuration file."""
    config_path = tmp_path / "resfunc.toml"
    content = f"""
[logging]
format = "json"

[resolutions.jet]
kind = "double_gauss"
parameter_file = "{sample_parameter_file.name}"

[resolutions.electron]
kind = "gauss"
order = 0
parameters = [0.0, 0.5]
"""
    config_path.write_text(content)
    return config_path
