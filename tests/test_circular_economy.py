# -*- coding: utf-8 -*-
"""Tests for the circular economy engine."""

import pytest
from pydantic import ValidationError

from sustainability_engine.circular_economy import (
    calculate_circular_economy_metrics,
    calculate_material_circularity_index,
    derive_circular_economy_input,
    generate_circular_economy_recommendations,
)
from sustainability_engine.models import CircularEconomyInput, Material

FLOW_ANALYSIS = "Conduct a material flow analysis to identify circular economy opportunities"

HIGH_PERFORMER = {
    "material_recycled_content": 1.0,
    "material_reuse_rate": 0.9,
    "material_recyclability": 1.0,
    "product_lifespan": 50,
    "waste_recycling_rate": 0.9,
    "design_for_disassembly": 1.0,
    "repairability_score": 1.0,
    "biodegradable_content": 1.0,
    "byproduct_synergy_potential": 1.0,
}


# ==============================================================================
# Metrics
# ==============================================================================

class TestCircularEconomyMetrics:
    """calculate_circular_economy_metrics."""

    def test_defaults(self):
        metrics = calculate_circular_economy_metrics()

        assert metrics.resource_reuse_rate == pytest.approx(0.4)
        assert metrics.product_lifespan == pytest.approx(15)
        assert metrics.closed_loop_potential == pytest.approx(0.56)
        assert metrics.material_circularity_index == pytest.approx(0.41)
        assert metrics.waste_diversion_rate == pytest.approx(0.52)
        assert metrics.remanufacturing_potential == pytest.approx(0.55)
        assert metrics.circular_procurement_rate == pytest.approx(0.33)

    def test_camel_case_and_partial_input(self):
        metrics = calculate_circular_economy_metrics({"materialRecyclability": 1.0})

        assert metrics.closed_loop_potential == pytest.approx(0.6 + 0.2)
        assert metrics.waste_recycling_rate == pytest.approx(0.6)

    def test_explicit_zero_is_kept(self):
        metrics = calculate_circular_economy_metrics(
            CircularEconomyInput(material_reuse_rate=0)
        )
        assert metrics.resource_reuse_rate == 0

    def test_ratio_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            calculate_circular_economy_metrics({"material_reuse_rate": 1.5})


# ==============================================================================
# Recommendations
# ==============================================================================

class TestCircularEconomyRecommendations:
    """generate_circular_economy_recommendations."""

    def test_default_profile(self):
        recommendations = generate_circular_economy_recommendations(
            calculate_circular_economy_metrics()
        )
        texts = [r.recommendation for r in recommendations]

        assert len(texts) == 5
        assert texts[0] == (
            "Implement material reuse strategies to capture value from existing materials"
        )
        assert FLOW_ANALYSIS not in texts

    def test_high_performer_gets_fallback_only(self):
        recommendations = generate_circular_economy_recommendations(
            calculate_circular_economy_metrics(HIGH_PERFORMER)
        )

        assert len(recommendations) == 1
        fallback = recommendations[0]
        assert fallback.recommendation == FLOW_ANALYSIS
        assert fallback.impact == "Medium"
        assert fallback.timeframe == "Short-term"
        assert len(fallback.potential_benefits) == 4

    def test_fallback_appended_below_three(self):
        profile = dict(HIGH_PERFORMER, material_reuse_rate=0.1)
        recommendations = generate_circular_economy_recommendations(
            calculate_circular_economy_metrics(profile)
        )

        assert [r.recommendation for r in recommendations][-1] == FLOW_ANALYSIS
        assert len(recommendations) == 2

    @pytest.mark.parametrize("field", ["repairability_score", "design_for_disassembly"])
    def test_zero_score_is_not_assessed(self, field):
        recommendations = generate_circular_economy_recommendations(
            calculate_circular_economy_metrics(dict(HIGH_PERFORMER, **{field: 0}))
        )
        assert [r.recommendation for r in recommendations] == [FLOW_ANALYSIS]

    def test_zero_circularity_index_is_not_assessed(self):
        profile = dict(
            HIGH_PERFORMER,
            material_recycled_content=0,
            material_recyclability=0,
            material_reuse_rate=0,
            biodegradable_content=0,
            byproduct_synergy_potential=0,
        )
        metrics = calculate_circular_economy_metrics(profile)
        texts = [r.recommendation for r in generate_circular_economy_recommendations(metrics)]

        assert metrics.material_circularity_index == 0
        assert (
            "Increase use of recycled and renewable materials in procurement specifications"
            not in texts
        )


# ==============================================================================
# Material circularity index
# ==============================================================================

class TestMaterialCircularityIndex:
    """calculate_material_circularity_index."""

    def test_single_material(self):
        result = calculate_material_circularity_index([
            Material(
                name="Timber",
                recycled_content=50,
                renewable_content=100,
                recyclability=80,
                lifespan=50,
                modular=True,
                biodegradable=True,
                embodied_carbon=0.4,
            ),
        ])

        assert result.input_factors.recycled_content_factor == pytest.approx(0.5)
        assert result.input_factors.renewable_content_factor == pytest.approx(1.0)
        assert result.input_factors.reuse_factor == pytest.approx(0.94)
        assert result.use_factors.lifespan_factor == pytest.approx(1.0)
        assert result.use_factors.intensity_factor == pytest.approx(0.74)
        assert result.output_factors.waste_factor == pytest.approx(0.14)
        assert result.circularity_index == pytest.approx(85.16)

    def test_bare_material_uses_neutral_factors(self):
        result = calculate_material_circularity_index([Material(name="Glass")])

        assert result.use_factors.lifespan_factor == pytest.approx(0.5)
        assert result.use_factors.intensity_factor == pytest.approx(0.5)
        assert result.output_factors.waste_factor == pytest.approx(1.0)

    def test_strength_to_density_bonus_is_capped(self):
        result = calculate_material_circularity_index([
            Material(name="Steel", strength=500000, density=1),
        ])
        assert result.use_factors.intensity_factor == pytest.approx(0.7)

    def test_empty(self):
        assert calculate_material_circularity_index([]).circularity_index == 0.0


class TestDeriveCircularEconomyInput:
    """derive_circular_economy_input."""

    def test_averages_reported_signals(self):
        derived = derive_circular_economy_input([
            Material(name="A", recycled_content=40, modular=True, biodegradable=False),
            Material(name="B", recycled_content=60, lifespan=30),
        ])

        assert derived.material_recycled_content == pytest.approx(0.5)
        assert derived.product_lifespan == pytest.approx(30)
        assert derived.design_for_disassembly == pytest.approx(1.0)
        assert derived.biodegradable_content == pytest.approx(0.0)
        assert derived.material_recyclability is None

    def test_no_materials_leaves_defaults(self):
        assert derive_circular_economy_input([]) == CircularEconomyInput()
