"""Configuration models for resfunc."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

LogFormat = Literal["text", "json"]


class ResolutionConfig(BaseModel):
    """Description of one resolution function.

    Coefficients come either inline or from a parameter file:

        [resolutions.light_jet]
        kind = "double_gauss"
        order = 1
        parameter_file = "par_energy_lJets_eta1.txt"

        [resolutions.electron]
        kind = "gauss"
        parameters = [0.0, 0.0, 0.5, 0.01]
    """

    model_config = ConfigDict(extra="forbid")

    kind: str = Field(
        default="double_gauss",
        description="Resolution shape, as registered in the resolution registry.",
    )
    order: Annotated[int, Field(ge=0, le=10)] | None = Field(
        default=None,
        description="Polynomial order of every shape parameter. Defaults to the shape's own.",
    )
    parameters: list[float] | None = Field(
        default=None,
        description="Inline coefficients, groups concatenated in shape order.",
    )
    parameter_file: Path | None = Field(
        default=None,
        description="File holding the coefficients (text, TOML or JSON).",
    )

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        """Require a name known to the resolution registry."""
        from resfunc.core.resolutions import get_resolution
        from resfunc.core.shared.exceptions import ConfigError

        try:
            get_resolution(v)
        except ConfigError as exc:
            raise ValueError(str(exc)) from exc
        return v

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, v: list[float] | None) -> list[float] | None:
        """Reject empty inline coefficient lists."""
        if v is not None and len(v) == 0:
            msg = "parameters must not be empty"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_source(self) -> "ResolutionConfig":
        """Require exactly one coefficient source."""
        if (self.parameters is None) == (self.parameter_file is None):
            msg = "Exactly one of 'parameters' or 'parameter_file' must be given"
            raise ValueError(msg)
        return self


class LoggingConfig(BaseModel):
    """Configuration of the optional log file."""

    model_config = ConfigDict(extra="forbid")

    file: Path | None = Field(default=None, description="Log file; disabled when unset.")
    format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )
    verbose: bool = Field(default=False, description="Also echo log records to the console.")


class ResFuncConfig(BaseModel):
    """Top-level resfunc configuration.

    Example TOML configuration:
        [logging]
        file = "resfunc.log"

        [resolutions.bjet]
        kind = "double_gauss"
        parameter_file = "par_energy_bJets.txt"
    """

    model_config = ConfigDict(extra="forbid")

    resolutions: dict[str, ResolutionConfig] = Field(
        default_factory=dict,
        description="Resolution functions keyed by a free label.",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
