# -*- coding: utf-8 -*-
"""Tests for the energy metrics calculators."""

import pytest

from sustainability_engine.energy_metrics import (
    calculate_detailed_energy_metrics,
    calculate_energy_lifecycle_assessment,
    calculate_peak_demand_reduction_potential,
    identify_energy_efficiency_opportunities,
    is_renewable,
)
from sustainability_engine.models import EnergyItem, EnergyMetrics


@pytest.fixture
def site_supply():
    return [
        EnergyItem(
            source="grid",
            quantity=2000,
            consumption=2000,
            carbon_intensity=0.8,
            efficiency=0.6,
            peak_demand=0.9,
        ),
        EnergyItem(
            source="solar",
            quantity=500,
            consumption=500,
            carbon_intensity=0.05,
            efficiency=0.9,
            smart_monitoring=True,
        ),
    ]


class TestIsRenewable:

    @pytest.mark.parametrize("item, expected", [
        (EnergyItem(source="Hydro power", quantity=1), True),
        (EnergyItem(source="grid", quantity=1, renewable=True), True),
        (EnergyItem(source="diesel", quantity=1), False),
    ])
    def test_source_or_flag(self, item, expected):
        assert is_renewable(item) is expected


# ==============================================================================
# Detailed metrics
# ==============================================================================

class TestDetailedEnergyMetrics:
    """calculate_detailed_energy_metrics."""

    def test_empty(self):
        assert calculate_detailed_energy_metrics([]) == EnergyMetrics()

    def test_aggregates(self, site_supply):
        metrics = calculate_detailed_energy_metrics(site_supply)

        assert metrics.total_energy_items == 2
        assert metrics.total_consumption == 2500
        assert metrics.grid_dependency == pytest.approx(80.0)
        assert metrics.renewable_percentage == pytest.approx(50.0)
        assert metrics.energy_efficiency == pytest.approx(0.75)
        assert metrics.peak_demand_reduction == pytest.approx(0.1)
        assert metrics.average_carbon_intensity == pytest.approx(0.425)
        assert metrics.energy_by_source == {"grid": 2000, "solar": 500}
        assert metrics.energy_by_unit == {"kwh": 2500}

    def test_share_metrics_absent_when_zero(self, site_supply):
        metrics = calculate_detailed_energy_metrics(site_supply)

        assert metrics.smart_monitoring_percentage == pytest.approx(50.0)
        assert metrics.demand_response_capability is None
        assert metrics.backup_system_coverage is None
        assert metrics.time_of_use_optimization is None

    def test_unmetered_records_count_once_per_source(self):
        metrics = calculate_detailed_energy_metrics([
            EnergyItem(source="diesel", quantity=40),
            EnergyItem(source="diesel", quantity=60),
        ])
        assert metrics.total_consumption == 0
        assert metrics.energy_by_source == {"diesel": 2}
        assert metrics.grid_dependency is None


# ==============================================================================
# Opportunities
# ==============================================================================

class TestEnergyEfficiencyOpportunities:
    """identify_energy_efficiency_opportunities."""

    def test_rules(self, site_supply):
        areas = [o.area for o in identify_energy_efficiency_opportunities(site_supply)]

        assert areas == [
            "Renewable Energy Integration",
            "Equipment Upgrades",
            "Peak Demand Management",
            "Energy Storage Implementation",
        ]

    def test_fallback_opportunities(self):
        opportunities = identify_energy_efficiency_opportunities([
            EnergyItem(
                source="solar",
                quantity=10,
                consumption=10,
                smart_monitoring=True,
                storage_capacity=50,
            ),
        ])

        assert [o.area for o in opportunities] == ["Lighting Systems", "HVAC Optimization"]
        lighting = opportunities[0]
        assert lighting.potential_savings == pytest.approx(0.3)
        assert lighting.investment_required == 10000
        assert lighting.payback_period == 2
        assert lighting.implementation_complexity == "Simple"

    def test_empty(self):
        assert identify_energy_efficiency_opportunities([]) == []


# ==============================================================================
# Peak demand
# ==============================================================================

class TestPeakDemandReductionPotential:
    """calculate_peak_demand_reduction_potential."""

    def test_high_peak(self, site_supply):
        potential = calculate_peak_demand_reduction_potential(site_supply)

        assert potential.overall_potential == pytest.approx(0.36)
        assert potential.cost_savings_potential == pytest.approx(0.54)
        load_shifting = potential.implementation_approaches[0]
        assert load_shifting.approach == "Load Shifting"
        assert load_shifting.potential_reduction == pytest.approx(0.216)
        assert len(potential.recommended_actions) == 4

    def test_default_average_peak(self):
        potential = calculate_peak_demand_reduction_potential([
            EnergyItem(source="grid", quantity=100),
        ])
        assert potential.overall_potential == pytest.approx(0.32)

    def test_bounds(self):
        low = calculate_peak_demand_reduction_potential([
            EnergyItem(source="grid", quantity=1, peak_demand=0.1),
        ])
        assert low.overall_potential == pytest.approx(0.1)

    def test_fallback_actions(self):
        potential = calculate_peak_demand_reduction_potential([
            EnergyItem(
                source="grid",
                quantity=1,
                peak_demand=0.5,
                storage_capacity=20,
                demand_response=True,
                time_of_use="Night shift",
            ),
        ])
        assert potential.recommended_actions == [
            "Conduct a detailed peak demand analysis to identify specific reduction opportunities",
            "Implement smart controls for major energy-consuming equipment to prevent simultaneous operation",
        ]

    def test_empty(self):
        potential = calculate_peak_demand_reduction_potential(None)
        assert potential.overall_potential == 0.0
        assert potential.implementation_approaches == []


# ==============================================================================
# Lifecycle
# ==============================================================================

class TestEnergyLifecycleAssessment:
    """calculate_energy_lifecycle_assessment."""

    def test_values(self, site_supply):
        result = calculate_energy_lifecycle_assessment(site_supply)

        assert result.generation_emissions == pytest.approx(1625.0)
        assert result.transmission_losses == pytest.approx(200.0)
        assert result.embodied_energy == pytest.approx(375.0)
        assert result.total_lifecycle_emissions == pytest.approx(1875.0)
        assert result.renewable_percentage == pytest.approx(20.0)
        assert result.end_use_efficiency == pytest.approx(0.75)
        assert result.improvement_potential == pytest.approx(0.58)

    def test_hotspots(self, site_supply):
        result = calculate_energy_lifecycle_assessment(site_supply)
        assert result.hotspots == [
            "High dependence on non-renewable energy sources",
            "High carbon intensity energy sources",
            "High peak demand periods",
        ]

    def test_fallback_hotspot(self):
        result = calculate_energy_lifecycle_assessment([
            EnergyItem(source="wind", quantity=10, consumption=10, efficiency=0.9),
        ])
        assert result.hotspots == ["Overall energy system optimization"]

    def test_default_efficiency(self):
        result = calculate_energy_lifecycle_assessment([
            EnergyItem(source="grid", quantity=10, consumption=10),
        ])
        assert result.end_use_efficiency == pytest.approx(0.7)

    def test_empty(self):
        result = calculate_energy_lifecycle_assessment([])
        assert result.total_lifecycle_emissions == 0.0
        assert result.hotspots == []
