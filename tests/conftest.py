"""Shared pytest fixtures for bouncecurve tests."""

from __future__ import annotations

import pytest

# ============================================================================
# Parameter Fixtures
# ============================================================================


@pytest.fixture(params=[(0.5, 0.01), (0.5, 0.1), (0.25, 0.05), (0.75, 0.001)])
def bounce_params(request: pytest.FixtureRequest) -> tuple[float, float]:
    """Representative (decay_ratio, rest_threshold) pairs."""
    return request.param
