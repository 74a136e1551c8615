"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from bouncecurve.core.curves.bounce import BounceEvaluator, make_bounce_function
from bouncecurve.core.curves.models import BounceProfile, CurvePoint


@pytest.fixture
def default_evaluator() -> BounceEvaluator:
    """Evaluator built with default parameters (0.5, 0.01)."""
    return make_bounce_function()


@pytest.fixture
def default_profile(default_evaluator: BounceEvaluator) -> BounceProfile:
    """Segment table of the default evaluator."""
    return default_evaluator.profile


@pytest.fixture
def dense_grid() -> list[float]:
    """1001 evenly spaced progress values covering [0, 1]."""
    return [i / 1000 for i in range(1001)]


@pytest.fixture
def ramp_up_points() -> list[CurvePoint]:
    """Create ascending ramp points."""
    return [
        CurvePoint(t=0.0, v=0.0),
        CurvePoint(t=0.25, v=0.1),
        CurvePoint(t=1.0, v=1.0),
    ]
