"""Curve schema models for bounce easing.

This module defines the value objects shared by the bounce builder,
the evaluator and the curve generators:
- CurvePoint: A single normalized point (t, v) in [0,1] x [0,1]
- BounceParams: Normalized bounce shape parameters
- BounceProfile: The precomputed, immutable segment table of a bounce curve

All models are frozen and validate on construction.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurvePoint(BaseModel):
    """A single point on a normalized curve.

    Both t and v are normalized to [0, 1].
    This model is immutable (frozen=True).

    Attributes:
        t: Normalized time in range [0, 1].
        v: Normalized value in range [0, 1].

    Example:
        >>> point = CurvePoint(t=0.5, v=0.7)
        >>> point.t
        0.5
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    v: float = Field(..., ge=0.0, le=1.0, description="Normalized value [0,1]")


class BounceParams(BaseModel):
    """Normalized bounce shape parameters.

    Instances are produced by ``normalize_bounce_params`` after defaulting
    and clamping, so they always describe a curve that comes to rest.

    Attributes:
        decay_ratio: Fraction of height retained between bounces, in [0, 1).
        rest_threshold: Apex height below which the ball is at rest (> 0).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    decay_ratio: float = Field(default=0.5, ge=0.0, lt=1.0)
    rest_threshold: float = Field(default=0.01, gt=0.0)


class BounceProfile(BaseModel):
    """Precomputed segment table for a bounce curve.

    Segment 0 is the initial fall from 1 down to the first impact; segment
    ``i`` (1..bounce_count) is the i-th rebound. Each segment is the parabola
    ``scales[i] * (t - vertex_times[i]) ** 2 + baselines[i]`` and is active
    for ``breakpoints[i - 1] <= t < breakpoints[i]``.

    Attributes:
        decay_ratio: Height retained from one apex to the next.
        rest_threshold: Apex height at which the bounce sequence stops.
        bounce_count: Number of rebound segments after the initial fall.
        total_duration_units: Unnormalized length of the whole curve.
        breakpoints: Normalized end time of each segment (last is 1.0).
        vertex_times: Normalized time of each segment's dip.
        scales: Quadratic coefficient of each segment.
        baselines: Value at each segment's dip.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    decay_ratio: float = Field(..., ge=0.0, lt=1.0)
    rest_threshold: float = Field(..., gt=0.0)
    bounce_count: int = Field(..., ge=0)
    total_duration_units: float = Field(..., gt=0.0)
    breakpoints: tuple[float, ...] = Field(..., min_length=1)
    vertex_times: tuple[float, ...] = Field(..., min_length=1)
    scales: tuple[float, ...] = Field(..., min_length=1)
    baselines: tuple[float, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _validate_segment_table(self) -> "BounceProfile":
        """Validate that every segment column has one entry per segment."""
        expected = self.bounce_count + 1
        for name in ("breakpoints", "vertex_times", "scales", "baselines"):
            if len(getattr(self, name)) != expected:
                raise ValueError(
                    f"BounceProfile.{name} must have {expected} entries "
                    f"(bounce_count + 1), got {len(getattr(self, name))}"
                )
        return self

    @property
    def segment_count(self) -> int:
        """Number of parabolic segments, including the initial fall."""
        return len(self.breakpoints)

    def segment_value(self, index: int, t: float) -> float:
        """Evaluate segment ``index``'s parabola at ``t`` without lookup."""
        offset = t - self.vertex_times[index]
        return self.scales[index] * offset * offset + self.baselines[index]
