"""Configuration models for bouncecurve."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bouncecurve.core.curves.bounce import BounceEvaluator, make_bounce_function
from bouncecurve.core.curves.defaults import DEFAULT_SAMPLES


class BounceConfig(BaseModel):
    """Bounce shape configuration.

    Values are kept raw; defaulting and clamping happen when the evaluator
    is built, so a config file gets the same forgiving behavior as a direct
    call to ``make_bounce_function``: a string such as "0.3" is not a number
    and falls back to the default.
    """

    decay_ratio: Any = Field(
        default=None, description="Height retained between bounces (default 0.5)"
    )
    rest_threshold: Any = Field(
        default=None, description="Apex height considered at rest (default 0.01)"
    )
    n_samples: int = Field(default=DEFAULT_SAMPLES, ge=2, description="Samples per curve")

    def build_evaluator(self) -> BounceEvaluator:
        """Build an evaluator from this configuration."""
        return make_bounce_function(self.decay_ratio, self.rest_threshold)

    def curve_params(self) -> dict[str, Any]:
        """Generator keyword arguments, omitting unset values."""
        return self.model_dump(include={"decay_ratio", "rest_threshold"}, exclude_none=True)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    bounce: BounceConfig = Field(default_factory=BounceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
