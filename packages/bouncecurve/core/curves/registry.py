"""Curve registry and preset resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import logging
from typing import Any

from bouncecurve.core.curves.models import CurvePoint
from bouncecurve.core.curves.modifiers import CurveModifier, apply_modifiers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveDefinition:
    """Curve definition or preset.

    A preset points at a registered generator through ``base_curve_id`` and
    overrides its parameters and/or applies modifiers.
    """

    curve_id: str
    base_curve_id: str | None = None
    params: dict[str, Any] | None = None
    modifiers: list[CurveModifier] | None = None
    description: str | None = None


@dataclass(frozen=True)
class CurveGeneratorSpec:
    """Registry entry for curve generation."""

    curve_id: str
    generator: Callable[..., list[CurvePoint]]
    default_samples: int
    default_params: dict[str, Any] | None = None
    description: str | None = None


class CurveRegistry:
    """Registry for curve generators and preset resolution."""

    def __init__(self) -> None:
        self._registry: dict[str, CurveGeneratorSpec] = {}
        self._presets: dict[str, CurveDefinition] = {}

    def register(self, spec: CurveGeneratorSpec) -> None:
        if spec.curve_id in self._registry or spec.curve_id in self._presets:
            raise ValueError(f"Curve '{spec.curve_id}' already registered")
        self._registry[spec.curve_id] = spec

    def register_preset(self, definition: CurveDefinition) -> None:
        if definition.curve_id in self._registry or definition.curve_id in self._presets:
            raise ValueError(f"Curve '{definition.curve_id}' already registered")
        if definition.base_curve_id is None:
            raise ValueError(f"Preset '{definition.curve_id}' requires a base_curve_id")
        self.get(definition.base_curve_id)
        self._presets[definition.curve_id] = definition

    def get(self, curve_id: str) -> CurveGeneratorSpec:
        try:
            return self._registry[curve_id]
        except KeyError as exc:
            raise ValueError(f"Curve '{curve_id}' is not registered") from exc

    def get_preset(self, curve_id: str) -> CurveDefinition:
        try:
            return self._presets[curve_id]
        except KeyError as exc:
            raise ValueError(f"Preset '{curve_id}' is not registered") from exc

    def curve_ids(self) -> list[str]:
        """All registered generator and preset ids, sorted."""
        return sorted([*self._registry, *self._presets])

    def resolve(
        self, definition: CurveDefinition, *, n_samples: int | None = None
    ) -> list[CurvePoint]:
        """Resolve a curve definition into points.

        Args:
            definition: Curve definition or preset.
            n_samples: Optional override for sample count.
        """
        if definition.base_curve_id:
            spec = self.get(definition.base_curve_id)
        else:
            spec = self.get(definition.curve_id)

        params = dict(spec.default_params or {})
        params.update(definition.params or {})
        sample_count = n_samples or spec.default_samples
        logger.debug(f"Resolving curve '{definition.curve_id}' with {sample_count} samples")
        points = spec.generator(sample_count, **params)

        modifiers = definition.modifiers or []
        if modifiers:
            points = apply_modifiers(points, modifiers)

        return points

    def resolve_id(self, curve_id: str, *, n_samples: int | None = None) -> list[CurvePoint]:
        """Resolve a registered generator or preset by id."""
        definition = self._presets.get(curve_id) or CurveDefinition(curve_id=curve_id)
        return self.resolve(definition, n_samples=n_samples)


def resolve_curve(
    registry: CurveRegistry,
    definition: CurveDefinition,
    *,
    n_samples: int | None = None,
) -> list[CurvePoint]:
    """Convenience wrapper for resolving a curve definition."""
    return registry.resolve(definition, n_samples=n_samples)
