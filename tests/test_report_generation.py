# -*- coding: utf-8 -*-
"""Tests for report assembly."""

import pytest

from sustainability_engine.config import EngineConfig, set_config
from sustainability_engine.models import (
    Availability,
    CostParameters,
    EnergyItem,
    Material,
    ReportFormat,
    ReportRequestOptions,
    TransportItem,
)
from sustainability_engine.report_generation import (
    calculate_data_completeness,
    calculate_sustainability_score,
    generate_basic_sustainability_report,
    generate_comprehensive_sustainability_report,
    generate_detailed_sustainability_report,
    generate_energy_recommendations,
    generate_implementation_roadmap,
    generate_lifecycle_analysis,
    generate_material_recommendations,
    generate_sustainability_report,
    generate_transport_recommendations,
    round_half_up,
)


@pytest.fixture
def recommendation_inputs():
    materials = [Material(name="Concrete"), Material(name="Glass")]
    transport = [
        TransportItem(type="truck", distance=100),
        TransportItem(type="road", distance=600),
    ]
    energy = [
        EnergyItem(source="grid", quantity=10),
        EnergyItem(source="solar", quantity=10),
    ]
    return (
        generate_material_recommendations(materials),
        generate_transport_recommendations(transport),
        generate_energy_recommendations(energy),
    )


class TestRoundHalfUp:

    @pytest.mark.parametrize("value, expected", [
        (0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (-0.5, 0), (-1.5, -1),
    ])
    def test_ties_round_up(self, value, expected):
        assert round_half_up(value) == expected


# ==============================================================================
# Completeness
# ==============================================================================

class TestDataCompleteness:
    """calculate_data_completeness."""

    def test_empty(self):
        assert calculate_data_completeness([], [], []) == 0.0

    def test_bare_material(self):
        assert calculate_data_completeness([Material(name="Glass")], [], []) == 10.0

    def test_detailed_material(self):
        score = calculate_data_completeness([Material(name="Glass", recyclable=False)], [], [])
        assert score == 15.0

    def test_caps(self):
        materials = [Material(name=f"M{i}", locally_sourced=True) for i in range(6)]
        energy = [EnergyItem(quantity=1) for _ in range(4)]
        assert calculate_data_completeness(materials, [], energy) == 40 + 20 + 30

    def test_transport_fuel_points(self):
        score = calculate_data_completeness(
            [], [TransportItem(distance=5), TransportItem(distance=5, fuel_type="")], [],
        )
        assert score == 20 + 5

    def test_total_capped_at_hundred(self, sample_materials, sample_transport, sample_energy):
        materials = sample_materials * 3
        transport = sample_transport * 2
        assert calculate_data_completeness(materials, transport, sample_energy) == 100.0


# ==============================================================================
# Recommendations
# ==============================================================================

class TestRecommendations:
    """Material, transport and energy recommendation rules."""

    @pytest.mark.parametrize("name, alternative, availability", [
        ("Reinforced Steel Beam", "Recycled steel", Availability.HIGH),
        ("Precast concrete", "Low-carbon concrete", Availability.HIGH),
        ("Mineral wool insulation", "Bio-based insulation", Availability.MEDIUM),
        ("Hardwood", "FSC-certified engineered timber", Availability.HIGH),
        ("Glass", "Recycled or locally-sourced alternative", Availability.MEDIUM),
    ])
    def test_material_rules(self, name, alternative, availability):
        [rec] = generate_material_recommendations([Material(name=name)])
        assert rec.original_material == name
        assert rec.recommended_alternative == alternative
        assert rec.availability == availability

    def test_material_zero_quantity_skipped(self):
        assert generate_material_recommendations([Material(name="Glass", quantity=0)]) == []

    @pytest.mark.parametrize("kind, distance, mode, feasibility", [
        ("road", 600, "Rail freight", "medium"),
        ("truck", 100, "Electric truck", "high"),
        ("air", 1500, "Sea freight", "high"),
        ("air", 500, "Sea freight", "low"),
        ("ship", 800, "Optimized logistics", "high"),
    ])
    def test_transport_rules(self, kind, distance, mode, feasibility):
        [rec] = generate_transport_recommendations([TransportItem(type=kind, distance=distance)])
        assert rec.current_mode == kind
        assert rec.recommended_mode == mode
        assert rec.feasibility == feasibility
        assert rec.distance == distance

    def test_transport_zero_distance_skipped(self):
        assert generate_transport_recommendations([TransportItem(distance=0)]) == []

    @pytest.mark.parametrize("source, recommended, complexity", [
        ("Grid electricity", "On-site solar PV", "medium"),
        ("Natural gas", "Electric equipment with renewable energy", "medium"),
        ("Heating oil", "Renewable energy sources", "high"),
        ("Solar", "Energy-efficient alternative", "low"),
    ])
    def test_energy_rules(self, source, recommended, complexity):
        [rec] = generate_energy_recommendations([EnergyItem(source=source, quantity=5)])
        assert rec.recommended_source == recommended
        assert rec.implementation_complexity == complexity

    def test_energy_non_positive_quantity_skipped(self):
        assert generate_energy_recommendations([EnergyItem(quantity=-3)]) == []


# ==============================================================================
# Lifecycle analysis
# ==============================================================================

class TestLifecycleAnalysis:
    """generate_lifecycle_analysis percentage split."""

    def test_defaults_without_emissions(self):
        analysis = generate_lifecycle_analysis([], [], [])

        assert analysis.stages.model_dump() == {
            "extraction": 25,
            "manufacturing": 20,
            "transportation": 15,
            "construction": 10,
            "operation": 25,
            "end_of_life": 5,
        }
        assert analysis.total_lifecycle_emissions == 0
        assert analysis.recommendations

    def test_materials_only(self):
        analysis = generate_lifecycle_analysis(
            [Material(name="Concrete", carbon_footprint=1, quantity=100)], [], [],
        )

        assert analysis.stages.model_dump() == {
            "extraction": 33,
            "manufacturing": 26,
            "transportation": 10,
            "construction": 7,
            "operation": 16,
            "end_of_life": 8,
        }
        assert analysis.total_lifecycle_emissions == 120

    def test_stages_sum_to_hundred(self, sample_materials, sample_transport, sample_energy):
        analysis = generate_lifecycle_analysis(sample_materials, sample_transport, sample_energy)
        assert sum(analysis.stages.model_dump().values()) == 100


# ==============================================================================
# Roadmap
# ==============================================================================

class TestImplementationRoadmap:
    """generate_implementation_roadmap."""

    def test_phases(self, recommendation_inputs):
        roadmap = generate_implementation_roadmap(*recommendation_inputs)

        assert [step.phase for step in roadmap] == [
            "immediate", "short-term", "medium-term", "long-term",
        ]
        assert roadmap[1].actions == [
            "Replace Concrete with Low-carbon concrete",
            "Switch from truck to Electric truck for applicable routes",
            "Transition from solar to Energy-efficient alternative where possible",
        ]
        assert roadmap[2].actions == [
            "Implement Recycled or locally-sourced alternative across all applicable use cases",
            "Develop infrastructure for Rail freight transport",
            "Install On-site solar PV systems",
        ]

    def test_max_actions(self, recommendation_inputs):
        roadmap = generate_implementation_roadmap(*recommendation_inputs, max_actions=2)
        assert len(roadmap[1].actions) == 2
        assert len(roadmap[2].actions) == 2

    def test_max_actions_from_config(self, recommendation_inputs):
        set_config(EngineConfig(roadmap_max_actions=1))
        roadmap = generate_implementation_roadmap(*recommendation_inputs)
        assert len(roadmap[1].actions) == 1

    def test_empty_phases_omitted(self):
        roadmap = generate_implementation_roadmap([], [], [])
        assert [step.phase for step in roadmap] == ["immediate", "long-term"]
        assert roadmap[0].actions


# ==============================================================================
# Score
# ==============================================================================

class TestSustainabilityScore:
    """calculate_sustainability_score."""

    def test_baseline(self):
        score = calculate_sustainability_score([], [], [])
        assert (score.overall, score.materials, score.transport, score.energy) == (50, 50, 50, 50)

    def test_domain_scores(self):
        score = calculate_sustainability_score(
            [Material(name="Brick", recyclable=True, locally_sourced=True, recycled_content=100)],
            [TransportItem(type="rail", distance=50)],
            [EnergyItem(source="coal", quantity=10)],
        )

        assert score.materials == 100
        assert score.transport == 100
        assert score.energy == 20
        assert score.overall == 84

    def test_long_distance_penalty(self):
        score = calculate_sustainability_score([], [TransportItem(distance=2000)], [])
        assert score.transport == 35

    def test_renewable_bonus(self):
        score = calculate_sustainability_score([], [], [EnergyItem(source="wind", quantity=1)])
        assert score.energy == 90


# ==============================================================================
# Report generators
# ==============================================================================

class TestReportGenerators:
    """Basic, detailed and comprehensive reports."""

    def test_basic(self, sample_materials, sample_transport, sample_energy):
        report = generate_basic_sustainability_report(
            sample_materials, sample_transport, sample_energy,
        )

        assert report.format == ReportFormat.BASIC
        assert report.suggestions
        assert set(report.priority_suggestions) <= set(report.suggestions)
        assert report.material_recommendations is None
        assert report.life_cycle_analysis is None
        assert report.provenance_hash == ""

    def test_detailed_optional_sections(self, sample_materials, sample_transport, sample_energy):
        options = ReportRequestOptions(format="detailed", include_lifecycle_analysis=True)
        report = generate_detailed_sustainability_report(
            sample_materials, sample_transport, sample_energy, options,
        )

        assert report.format == ReportFormat.DETAILED
        assert len(report.material_recommendations) == 2
        assert len(report.transport_recommendations) == 2
        assert len(report.energy_recommendations) == 2
        assert report.life_cycle_analysis is not None
        assert report.implementation_roadmap is None
        assert report.circular_economy_metrics is None

    def test_detailed_circular_section(self, sample_materials):
        options = ReportRequestOptions(include_circular_economy=True)
        report = generate_detailed_sustainability_report(sample_materials, [], [], options)

        assert report.circular_economy_metrics.recycled_content_rate == pytest.approx(0.4)
        assert report.circular_economy_recommendations

    def test_comprehensive(self, sample_materials, sample_transport, sample_energy):
        report = generate_comprehensive_sustainability_report(
            sample_materials, sample_transport, sample_energy,
        )

        assert report.format == ReportFormat.COMPREHENSIVE
        assert report.life_cycle_analysis is not None
        assert report.implementation_roadmap is not None
        assert report.circular_economy_metrics is not None
        assert report.material_metrics.total_materials == 2
        assert report.transport_metrics.total_transport_items == 2
        assert report.energy_metrics.total_energy_items == 2
        assert len(report.lifecycle_assessment.stages) == 6
        assert report.lifecycle_cost_analysis is None

    def test_comprehensive_with_costs(self, sample_materials):
        options = ReportRequestOptions(cost_parameters=CostParameters(lifespan=10))
        report = generate_comprehensive_sustainability_report(sample_materials, [], [], options)

        assert report.lifecycle_cost_analysis is not None
        assert len(report.lifecycle_cost_analysis.sensitivity_analysis) == 8

    def test_dispatch_and_project_fields(self, sample_materials):
        options = ReportRequestOptions(
            format=ReportFormat.DETAILED, project_id="p-1", project_name="Depot",
        )
        report = generate_sustainability_report(sample_materials, [], [], options)

        assert report.format == ReportFormat.DETAILED
        assert report.project_id == "p-1"
        assert report.project_name == "Depot"

    def test_default_is_basic(self, sample_materials):
        report = generate_sustainability_report(sample_materials, [], [])
        assert report.format == ReportFormat.BASIC

    def test_deterministic_content(self, sample_materials, sample_transport, sample_energy):
        options = ReportRequestOptions(format=ReportFormat.COMPREHENSIVE)
        first = generate_sustainability_report(
            sample_materials, sample_transport, sample_energy, options,
        )
        second = generate_sustainability_report(
            sample_materials, sample_transport, sample_energy, options,
        )
        assert first.model_dump(exclude={"generated_at"}) == second.model_dump(
            exclude={"generated_at"}
        )
