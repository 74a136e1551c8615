"""Bounce curve utilities and models."""

from bouncecurve.core.curves.bounce import (
    BounceEvaluator,
    build_bounce_profile,
    make_bounce_function,
    normalize_bounce_params,
)
from bouncecurve.core.curves.library import CurveLibrary, build_default_registry
from bouncecurve.core.curves.models import BounceParams, BounceProfile, CurvePoint

__all__ = [
    "BounceEvaluator",
    "BounceParams",
    "BounceProfile",
    "CurveLibrary",
    "CurvePoint",
    "build_bounce_profile",
    "build_default_registry",
    "make_bounce_function",
    "normalize_bounce_params",
]
