"""Bounce easing curve generators backed by easing-functions."""

from __future__ import annotations

from typing import Any

from easing_functions.easing import EasingBase

from bouncecurve.core.curves.bounce import BounceEvaluator, make_bounce_function
from bouncecurve.core.curves.models import CurvePoint
from bouncecurve.core.curves.sampling import sample_uniform_grid


class ProfiledBounceEaseOut(EasingBase):
    """Bounce ease-out with a configurable decay ratio and rest threshold.

    Drop-in replacement for ``easing_functions.BounceEaseOut``: ``start``,
    ``end`` and ``duration`` behave the same way, while the bounce shape
    comes from a precomputed ``BounceProfile``.

    Example:
        >>> ease = ProfiledBounceEaseOut(decay_ratio=0.5, rest_threshold=0.1)
        >>> ease.ease(1.0)
        1.0
    """

    def __init__(
        self,
        start: float = 0,
        end: float = 1,
        duration: float = 1,
        *,
        decay_ratio: Any = None,
        rest_threshold: Any = None,
    ) -> None:
        super().__init__(start=start, end=end, duration=duration)
        self.evaluator: BounceEvaluator = make_bounce_function(decay_ratio, rest_threshold)

    def func(self, t: float) -> float:
        return self.evaluator(t)


class ProfiledBounceEaseIn(ProfiledBounceEaseOut):
    """Bounce ease-in: the ease-out curve played backwards and flipped."""

    def func(self, t: float) -> float:
        return 1.0 - self.evaluator(1.0 - t)


class ProfiledBounceEaseInOut(ProfiledBounceEaseOut):
    """Bounce ease-in for the first half, ease-out for the second."""

    def func(self, t: float) -> float:
        if t < 0.5:
            return 0.5 * (1.0 - self.evaluator(1.0 - 2.0 * t))
        return 0.5 * self.evaluator(2.0 * t - 1.0) + 0.5


def _make_easing(
    easing_cls: type[ProfiledBounceEaseOut],
    *,
    decay_ratio: Any = None,
    rest_threshold: Any = None,
) -> ProfiledBounceEaseOut:
    return easing_cls(decay_ratio=decay_ratio, rest_threshold=rest_threshold)


def _to_point(t: float, v: float) -> CurvePoint:
    # Impacts can land a rounding error above 1.0.
    return CurvePoint(t=t, v=max(0.0, min(1.0, float(v))))


def _sample_easing(n_samples: int, easing: EasingBase) -> list[CurvePoint]:
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    t_grid = sample_uniform_grid(n_samples, include_end=True)
    return [_to_point(t, easing.ease(t)) for t in t_grid]


def generate_bounce_out(
    n_samples: int,
    decay_ratio: float | None = None,
    rest_threshold: float | None = None,
    **kwargs,  # Accept but ignore extra params
) -> list[CurvePoint]:
    """Generate a bounce-out curve (falls to 1, then settles with bounces).

    Args:
        n_samples: Number of samples to generate (must be >= 2).
        decay_ratio: Height retained between bounces (default 0.5).
        rest_threshold: Apex height considered at rest (default 0.01).
        **kwargs: Ignored parameters (for compatibility).

    Returns:
        List of CurvePoints over [0, 1], ending at (1.0, 1.0).

    Raises:
        ValueError: If n_samples < 2.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    evaluator = make_bounce_function(decay_ratio, rest_threshold)
    t_grid = sample_uniform_grid(n_samples, include_end=True)
    values = evaluator.evaluate_many(t_grid)
    return [_to_point(t, v) for t, v in zip(t_grid, values, strict=True)]


def generate_bounce_in(
    n_samples: int,
    decay_ratio: float | None = None,
    rest_threshold: float | None = None,
    **kwargs,
) -> list[CurvePoint]:
    """Generate a bounce-in curve (bounces grow, then leaves 0 for 1)."""
    easing = _make_easing(
        ProfiledBounceEaseIn, decay_ratio=decay_ratio, rest_threshold=rest_threshold
    )
    return _sample_easing(n_samples, easing)


def generate_bounce_in_out(
    n_samples: int,
    decay_ratio: float | None = None,
    rest_threshold: float | None = None,
    **kwargs,
) -> list[CurvePoint]:
    """Generate a bounce-in-out curve."""
    easing = _make_easing(
        ProfiledBounceEaseInOut, decay_ratio=decay_ratio, rest_threshold=rest_threshold
    )
    return _sample_easing(n_samples, easing)
