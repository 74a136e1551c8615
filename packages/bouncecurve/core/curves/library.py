"""Curve library for registering built-in bounce curves."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from bouncecurve.core.curves.defaults import DEFAULT_BOUNCE_PARAMS, DEFAULT_SAMPLES
from bouncecurve.core.curves.functions.easing import (
    generate_bounce_in,
    generate_bounce_in_out,
    generate_bounce_out,
)
from bouncecurve.core.curves.registry import CurveDefinition, CurveGeneratorSpec, CurveRegistry

if TYPE_CHECKING:
    from bouncecurve.core.config.models import BounceConfig


class CurveLibrary(str, Enum):
    """Identifiers for built-in curves."""

    # Generators
    BOUNCE_OUT = "bounce_out"
    BOUNCE_IN = "bounce_in"
    BOUNCE_IN_OUT = "bounce_in_out"

    # Presets
    BOUNCE_SOFT = "bounce_soft"  # Few, quickly fading bounces
    BOUNCE_HARD = "bounce_hard"  # Lively ball, many bounces


def build_default_registry(config: BounceConfig | None = None) -> CurveRegistry:
    """Construct a registry containing all built-in curves.

    Args:
        config: Optional bounce configuration. Its sample count and shape
            parameters become the generator defaults; presets keep their own
            shape but use the configured sample count.

    Returns:
        Registry with the generators and presets of ``CurveLibrary``.
    """
    registry = CurveRegistry()
    default_samples = config.n_samples if config is not None else DEFAULT_SAMPLES
    default_params = dict(DEFAULT_BOUNCE_PARAMS)
    if config is not None:
        default_params.update(config.curve_params())

    def register(curve_id: CurveLibrary, generator, description: str) -> None:
        registry.register(
            CurveGeneratorSpec(
                curve_id=curve_id.value,
                generator=generator,
                default_samples=default_samples,
                default_params=dict(default_params),
                description=description,
            )
        )

    register(CurveLibrary.BOUNCE_OUT, generate_bounce_out, "Fall to 1 and settle with bounces")
    register(CurveLibrary.BOUNCE_IN, generate_bounce_in, "Growing bounces, then rise to 1")
    register(CurveLibrary.BOUNCE_IN_OUT, generate_bounce_in_out, "Bounce in, then bounce out")

    registry.register_preset(
        CurveDefinition(
            curve_id=CurveLibrary.BOUNCE_SOFT.value,
            base_curve_id=CurveLibrary.BOUNCE_OUT.value,
            params={"decay_ratio": 0.35, "rest_threshold": 0.02},
            description="Heavy ball that settles after a couple of bounces",
        )
    )
    registry.register_preset(
        CurveDefinition(
            curve_id=CurveLibrary.BOUNCE_HARD.value,
            base_curve_id=CurveLibrary.BOUNCE_OUT.value,
            params={"decay_ratio": 0.7, "rest_threshold": 0.005},
            description="Rubber ball with a long tail of bounces",
        )
    )

    return registry
