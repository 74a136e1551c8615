"""Tests for curve registry and preset resolution."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from bouncecurve.core.config.models import BounceConfig
from bouncecurve.core.curves.functions.easing import generate_bounce_out
from bouncecurve.core.curves.library import CurveLibrary, build_default_registry
from bouncecurve.core.curves.models import CurvePoint
from bouncecurve.core.curves.modifiers import CurveModifier
from bouncecurve.core.curves.registry import (
    CurveDefinition,
    CurveGeneratorSpec,
    CurveRegistry,
    resolve_curve,
)


def mock_generator(n_samples: int, **kwargs) -> list[CurvePoint]:
    """Mock curve generator for testing."""
    return [CurvePoint(t=i / (n_samples - 1), v=i / (n_samples - 1)) for i in range(n_samples)]


def mock_constant_generator(n_samples: int, value: float = 0.5, **kwargs) -> list[CurvePoint]:
    """Mock generator returning constant value."""
    return [CurvePoint(t=i / (n_samples - 1), v=value) for i in range(n_samples)]


@pytest.fixture
def registry() -> CurveRegistry:
    """Registry with two mock generators."""
    reg = CurveRegistry()
    reg.register(CurveGeneratorSpec(curve_id="ramp", generator=mock_generator, default_samples=5))
    reg.register(
        CurveGeneratorSpec(
            curve_id="const",
            generator=mock_constant_generator,
            default_samples=4,
            default_params={"value": 0.25},
        )
    )
    return reg


class TestCurveDefinition:
    """Tests for CurveDefinition dataclass."""

    def test_create_with_required_fields(self) -> None:
        """Create with only curve_id."""
        defn = CurveDefinition(curve_id="bounce_out")
        assert defn.base_curve_id is None
        assert defn.params is None
        assert defn.modifiers is None

    def test_is_frozen(self) -> None:
        """Definition is immutable (frozen dataclass)."""
        defn = CurveDefinition(curve_id="bounce_out")
        with pytest.raises(FrozenInstanceError):
            defn.curve_id = "bounce_in"  # type: ignore[misc]


class TestCurveRegistry:
    """Tests for CurveRegistry."""

    def test_duplicate_registration_raises(self, registry: CurveRegistry) -> None:
        """Registering the same id twice is an error."""
        with pytest.raises(ValueError, match="already registered"):
            registry.register(
                CurveGeneratorSpec(curve_id="ramp", generator=mock_generator, default_samples=2)
            )

    def test_unknown_curve_raises(self, registry: CurveRegistry) -> None:
        """Unknown ids are reported."""
        with pytest.raises(ValueError, match="is not registered"):
            registry.get("missing")

    def test_resolve_uses_default_samples(self, registry: CurveRegistry) -> None:
        """Sample count falls back to the generator default."""
        points = registry.resolve(CurveDefinition(curve_id="ramp"))
        assert len(points) == 5

    def test_resolve_sample_override(self, registry: CurveRegistry) -> None:
        """n_samples overrides the default."""
        points = resolve_curve(registry, CurveDefinition(curve_id="ramp"), n_samples=9)
        assert len(points) == 9

    def test_resolve_merges_params(self, registry: CurveRegistry) -> None:
        """Definition params override generator defaults."""
        default = registry.resolve(CurveDefinition(curve_id="const"))
        assert all(p.v == 0.25 for p in default)
        override = registry.resolve(CurveDefinition(curve_id="const", params={"value": 0.75}))
        assert all(p.v == 0.75 for p in override)

    def test_resolve_applies_modifiers(self, registry: CurveRegistry) -> None:
        """Modifiers run after generation."""
        points = registry.resolve(
            CurveDefinition(curve_id="ramp", modifiers=[CurveModifier.MIRROR])
        )
        assert points[0].v == 1.0
        assert points[-1].v == 0.0

    def test_preset_requires_known_base(self, registry: CurveRegistry) -> None:
        """Presets must point at a registered generator."""
        with pytest.raises(ValueError, match="is not registered"):
            registry.register_preset(CurveDefinition(curve_id="p", base_curve_id="missing"))

    def test_preset_requires_base_id(self, registry: CurveRegistry) -> None:
        """Presets without a base are rejected."""
        with pytest.raises(ValueError, match="requires a base_curve_id"):
            registry.register_preset(CurveDefinition(curve_id="p"))

    def test_preset_id_conflicts_with_generator(self, registry: CurveRegistry) -> None:
        """Preset ids share the namespace with generators."""
        with pytest.raises(ValueError, match="already registered"):
            registry.register_preset(CurveDefinition(curve_id="ramp", base_curve_id="const"))

    def test_resolve_id_uses_preset(self, registry: CurveRegistry) -> None:
        """resolve_id looks up presets before generators."""
        registry.register_preset(
            CurveDefinition(curve_id="half", base_curve_id="const", params={"value": 0.5})
        )
        assert all(p.v == 0.5 for p in registry.resolve_id("half"))
        assert registry.get_preset("half").base_curve_id == "const"
        assert registry.curve_ids() == ["const", "half", "ramp"]


class TestDefaultRegistry:
    """Tests for the built-in bounce curves."""

    def test_all_library_ids_registered(self) -> None:
        """Every CurveLibrary member resolves."""
        registry = build_default_registry()
        assert registry.curve_ids() == sorted(member.value for member in CurveLibrary)
        for member in CurveLibrary:
            points = registry.resolve_id(member.value, n_samples=16)
            assert len(points) == 16

    def test_bounce_out_uses_default_shape(self) -> None:
        """BOUNCE_OUT resolves with default parameters."""
        registry = build_default_registry()
        assert registry.resolve_id(CurveLibrary.BOUNCE_OUT.value) == generate_bounce_out(64)

    def test_soft_preset_parameters(self) -> None:
        """BOUNCE_SOFT overrides the shape of BOUNCE_OUT."""
        registry = build_default_registry()
        expected = generate_bounce_out(32, decay_ratio=0.35, rest_threshold=0.02)
        assert registry.resolve_id(CurveLibrary.BOUNCE_SOFT.value, n_samples=32) == expected

    def test_hard_preset_differs_from_soft(self) -> None:
        """Presets produce distinct curves."""
        registry = build_default_registry()
        soft = registry.resolve_id(CurveLibrary.BOUNCE_SOFT.value)
        hard = registry.resolve_id(CurveLibrary.BOUNCE_HARD.value)
        assert soft != hard

    def test_config_sets_generator_defaults(self) -> None:
        """BounceConfig shape and sample count become generator defaults."""
        registry = build_default_registry(BounceConfig(n_samples=16, decay_ratio=0.3))
        expected = generate_bounce_out(16, decay_ratio=0.3, rest_threshold=0.01)
        assert registry.resolve_id(CurveLibrary.BOUNCE_OUT.value) == expected

    def test_config_sample_count_applies_to_presets(self) -> None:
        """Presets keep their shape but use the configured sample count."""
        registry = build_default_registry(BounceConfig(n_samples=12, decay_ratio=0.9))
        expected = generate_bounce_out(12, decay_ratio=0.35, rest_threshold=0.02)
        assert registry.resolve_id(CurveLibrary.BOUNCE_SOFT.value) == expected

    def test_unset_config_matches_no_config(self) -> None:
        """An empty BounceConfig changes nothing."""
        configured = build_default_registry(BounceConfig())
        assert configured.resolve_id(CurveLibrary.BOUNCE_IN.value) == (
            build_default_registry().resolve_id(CurveLibrary.BOUNCE_IN.value)
        )
