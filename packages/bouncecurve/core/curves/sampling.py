"""Curve sampling infrastructure.

This module provides the uniform time grids used to turn easing
functions into lists of curve points.
"""


def sample_uniform_grid(n: int, *, include_end: bool = False) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1) or [0, 1].

    By default returns [0.0, 1/N, ..., (N-1)/N]. With ``include_end`` the
    grid spans the closed interval: [0.0, 1/(N-1), ..., 1.0], which keeps
    the final impact of a bounce curve in the output.

    Args:
        n: Number of samples to generate. Must be >= 2.
        include_end: If True, the last sample is exactly 1.0.

    Returns:
        List of N evenly-spaced float values.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(4)
        [0.0, 0.25, 0.5, 0.75]
        >>> sample_uniform_grid(5, include_end=True)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if include_end:
        return [i / (n - 1) for i in range(n)]
    return [i / n for i in range(n)]
