from __future__ import annotations

from enum import Enum

from bouncecurve.core.curves.models import CurvePoint


class CurveModifier(str, Enum):
    """Curve transformation modifiers.

    Applied to sampled curves to derive bounce-in and other variations
    without defining new curve types. Can be combined.
    """

    REVERSE = "reverse"  # Flip curve horizontally (reverse time)
    MIRROR = "mirror"  # Mirror curve vertically (flip values)


def reverse_curve(points: list[CurvePoint]) -> list[CurvePoint]:
    """Reverse curve time (flip horizontally)."""
    return [CurvePoint(t=1.0 - p.t, v=p.v) for p in reversed(points)]


def mirror_curve(points: list[CurvePoint]) -> list[CurvePoint]:
    """Mirror curve vertically (flip values)."""
    return [CurvePoint(t=p.t, v=1.0 - p.v) for p in points]


def apply_modifiers(
    points: list[CurvePoint], modifiers: list[CurveModifier | str]
) -> list[CurvePoint]:
    """Apply modifiers in order.

    Raises:
        ValueError: If a modifier name is unknown.
    """
    result = points
    for modifier in modifiers:
        modifier = CurveModifier(modifier)
        if modifier is CurveModifier.REVERSE:
            result = reverse_curve(result)
        elif modifier is CurveModifier.MIRROR:
            result = mirror_curve(result)
    return result
