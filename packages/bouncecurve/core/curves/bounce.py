"""Bounce easing: profile construction and evaluation.

A bounce curve is a chain of parabolas. The first one is the initial fall
from 0 up to the first impact at value 1; every following one is a rebound
that leaves 1, dips to a baseline and returns to 1 at the next impact.
Rebound heights shrink with ``decay_ratio ** 2`` per bounce while rebound
durations shrink with ``decay_ratio``, so lower bounces are also shorter.

Example:
    >>> ease = make_bounce_function()
    >>> ease(0.0), ease(1.0)
    (0.0, 1.0)
    >>> ease.profile.bounce_count
    5
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
import logging
import math
import numbers
from typing import Any

import numpy as np

from bouncecurve.core.curves.defaults import DEFAULT_DECAY_RATIO, DEFAULT_REST_THRESHOLD
from bouncecurve.core.curves.models import BounceParams, BounceProfile

logger = logging.getLogger(__name__)


def _as_real(value: Any) -> float | None:
    """Return ``value`` as a float, or None if it is not a real number.

    Bools and NaN are not numbers here. Integers too large for a float
    become signed infinity.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    try:
        result = float(value)
    except OverflowError:
        result = math.inf if value > 0 else -math.inf
    return None if math.isnan(result) else result


def normalize_bounce_params(
    decay_ratio: Any = None,
    rest_threshold: Any = None,
) -> BounceParams:
    """Coerce raw shape parameters into a valid ``BounceParams``.

    Invalid values never raise; they are replaced with defaults:

    - ``decay_ratio`` missing, non-numeric or >= 1 becomes 0.5 (a ratio of 1
      or more would bounce higher each time and never come to rest).
      Negative values are clamped to 0.
    - ``rest_threshold`` missing, zero, non-numeric or negative becomes 0.01.

    Args:
        decay_ratio: Fraction of height kept from one bounce to the next.
        rest_threshold: Apex height below which the ball is at rest.

    Returns:
        Normalized parameters.

    Example:
        >>> normalize_bounce_params(1.5, 0)
        BounceParams(decay_ratio=0.5, rest_threshold=0.01)
    """
    ratio = _as_real(decay_ratio)
    if ratio is None or ratio >= 1:
        if decay_ratio is not None:
            logger.debug(f"Invalid decay_ratio {decay_ratio!r}, using {DEFAULT_DECAY_RATIO}")
        resolved_decay = DEFAULT_DECAY_RATIO
    elif ratio < 0:
        logger.debug(f"Negative decay_ratio {decay_ratio!r} clamped to 0")
        resolved_decay = 0.0
    else:
        resolved_decay = ratio

    # A negative threshold would never end the bounce loop.
    threshold = _as_real(rest_threshold)
    if threshold is None or threshold <= 0:
        if rest_threshold is not None:
            logger.debug(
                f"Invalid rest_threshold {rest_threshold!r}, using {DEFAULT_REST_THRESHOLD}"
            )
        resolved_threshold = DEFAULT_REST_THRESHOLD
    else:
        resolved_threshold = threshold

    return BounceParams(decay_ratio=resolved_decay, rest_threshold=resolved_threshold)


def count_bounces(decay_ratio: float, rest_threshold: float) -> int:
    """Count the rebounds needed before the apex falls to ``rest_threshold``.

    Heights are ``decay_ratio ** (2 * i)`` for i = 0, 1, 2, ...; the count is
    the number of heights computed until one is at or below the threshold.
    A zero decay ratio never leaves the ground after the first impact.

    Args:
        decay_ratio: Normalized decay ratio in [0, 1).
        rest_threshold: Normalized rest threshold (> 0).

    Returns:
        Number of rebound segments (0 when the threshold is 1 or more).
    """
    if rest_threshold >= 1.0:
        return 0
    if decay_ratio == 0.0:
        return 1

    height = 1.0
    count = 0
    while height > rest_threshold:
        height = decay_ratio ** (2 * count)
        count += 1
    return count


def build_bounce_profile(
    decay_ratio: Any = None,
    rest_threshold: Any = None,
) -> BounceProfile:
    """Precompute the segment table for a bounce curve.

    Args:
        decay_ratio: Raw decay ratio (normalized via ``normalize_bounce_params``).
        rest_threshold: Raw rest threshold (normalized likewise).

    Returns:
        Immutable ``BounceProfile``. Its last breakpoint is exactly 1.0.

    Example:
        >>> profile = build_bounce_profile(0.5, 0.01)
        >>> profile.bounce_count, profile.total_duration_units
        (5, 2.9375)
    """
    params = normalize_bounce_params(decay_ratio, rest_threshold)
    ratio = params.decay_ratio
    bounce_count = count_bounces(ratio, params.rest_threshold)

    total = 1.0
    for k in range(1, bounce_count + 1):
        total += ratio**k * 2

    first_break = 1.0 / total
    breakpoints = [first_break]
    vertex_times = [0.0]
    scales = [1.0 / (first_break * first_break)]
    baselines = [0.0]

    last_break = breakpoints[0]
    for i in range(1, bounce_count + 1):
        if i == bounce_count:
            # Pin the final impact so accumulated rounding never leaves a gap below t=1.
            next_break = 1.0
        else:
            next_break = last_break + ratio**i / total * 2
        half = (next_break - last_break) / 2
        baseline = 1.0 - ratio ** (2 * i)

        breakpoints.append(next_break)
        vertex_times.append(last_break + half)
        baselines.append(baseline)
        # Zero-width rebounds (zero ratio, or durations below float resolution) are never active.
        scales.append((1.0 - baseline) / (half * half) if half > 0 else 0.0)
        last_break = next_break

    logger.debug(
        f"Built bounce profile: decay_ratio={ratio}, rest_threshold={params.rest_threshold}, "
        f"bounces={bounce_count}, total_duration_units={total}"
    )

    return BounceProfile(
        decay_ratio=ratio,
        rest_threshold=params.rest_threshold,
        bounce_count=bounce_count,
        total_duration_units=total,
        breakpoints=tuple(breakpoints),
        vertex_times=tuple(vertex_times),
        scales=tuple(scales),
        baselines=tuple(baselines),
    )


class BounceEvaluator:
    """Pure easing function over a precomputed ``BounceProfile``.

    The evaluator holds no mutable state and can be shared across threads.
    Progress values outside [0, 1] are clamped; NaN propagates.
    """

    __slots__ = ("_profile", "_breakpoints", "_vertex_times", "_scales", "_baselines")

    def __init__(self, profile: BounceProfile) -> None:
        self._profile = profile
        self._breakpoints = np.asarray(profile.breakpoints, dtype=float)
        self._vertex_times = np.asarray(profile.vertex_times, dtype=float)
        self._scales = np.asarray(profile.scales, dtype=float)
        self._baselines = np.asarray(profile.baselines, dtype=float)

    @property
    def profile(self) -> BounceProfile:
        """The segment table this evaluator reads from."""
        return self._profile

    def segment_index(self, t: float) -> int:
        """Index of the first segment whose breakpoint exceeds ``t``."""
        index = bisect_right(self._profile.breakpoints, t)
        return min(index, self._profile.segment_count - 1)

    def __call__(self, t: float) -> float:
        t = float(t)
        if math.isnan(t):
            return math.nan
        t = max(0.0, min(1.0, t))
        if t == 1.0:
            return 1.0
        return self._profile.segment_value(self.segment_index(t), t)

    def evaluate_many(self, ts: Iterable[float] | np.ndarray) -> np.ndarray:
        """Evaluate many progress values at once.

        Args:
            ts: Progress values; clamped to [0, 1].

        Returns:
            Array of eased values with the same shape as ``ts``.
        """
        t_arr = np.clip(np.asarray(ts, dtype=float), 0.0, 1.0)
        idx = np.searchsorted(self._breakpoints, t_arr, side="right")
        idx = np.minimum(idx, len(self._breakpoints) - 1)

        offset = t_arr - self._vertex_times[idx]
        values = self._scales[idx] * offset * offset + self._baselines[idx]
        return np.where(t_arr == 1.0, 1.0, values)

    def __repr__(self) -> str:
        return (
            f"BounceEvaluator(decay_ratio={self._profile.decay_ratio}, "
            f"rest_threshold={self._profile.rest_threshold}, "
            f"bounce_count={self._profile.bounce_count})"
        )


def make_bounce_function(
    decay_ratio: Any = None,
    rest_threshold: Any = None,
) -> BounceEvaluator:
    """Create a bounce easing function.

    A decay ratio of 0.5 gives the familiar Penner-style bounce cadence. As
    the ratio approaches 1 more bounces are needed to come to rest, and a
    lower rest threshold adds bounces even if they are visually negligible.

    Args:
        decay_ratio: Fraction of height kept from one bounce to the next.
        rest_threshold: Apex height at which the ball is considered at rest.

    Returns:
        Callable mapping progress in [0, 1] to an eased value in [0, 1].
    """
    return BounceEvaluator(build_bounce_profile(decay_ratio, rest_threshold))
