# -*- coding: utf-8 -*-
"""Tests for the six-stage lifecycle assessment engine."""

import pytest
from pydantic import ValidationError

from sustainability_engine.lifecycle import (
    calculate_lifecycle_assessment,
    derive_lifecycle_input,
    resolve_lifecycle_values,
)
from sustainability_engine.models import (
    EnergyItem,
    LifecycleInput,
    Material,
    TransportItem,
)

STAGE_NAMES = [
    "Raw Material Extraction",
    "Manufacturing",
    "Transportation",
    "Construction",
    "Use Phase",
    "End of Life",
]

ALL_ZERO = {
    f"{prefix}_{suffix}": 0
    for prefix in ("material", "transport", "construction", "use_phase", "end_of_life")
    for suffix in ("carbon_footprint", "water_footprint", "energy_consumption")
}
ALL_ZERO.update({
    "energy_carbon_footprint": 0,
    "energy_water_footprint": 0,
    "energy_consumption": 0,
})


class TestDefaults:
    """Assessment with no supplied data."""

    def test_stage_order(self):
        assessment = calculate_lifecycle_assessment()
        assert [s.name for s in assessment.stages] == STAGE_NAMES

    def test_default_totals(self):
        assessment = calculate_lifecycle_assessment({})

        assert assessment.total_carbon_footprint == pytest.approx(1.1)
        assert assessment.total_water_footprint == pytest.approx(1.15)
        assert assessment.total_energy_consumption == pytest.approx(1.45)

    def test_totals_equal_stage_sums(self):
        assessment = calculate_lifecycle_assessment({
            "material_carbon_footprint": 0.7,
            "use_phase_carbon_footprint": 0.45,
        })
        assert assessment.total_carbon_footprint == pytest.approx(
            sum(s.carbon_footprint for s in assessment.stages)
        )

    def test_manufacturing_reads_energy_inputs(self):
        stage = calculate_lifecycle_assessment().stages[1]
        assert stage.carbon_footprint == pytest.approx(0.25)
        assert stage.water_footprint == pytest.approx(0.15)
        assert stage.energy_consumption == pytest.approx(0.35)

    def test_default_hotspots(self):
        assessment = calculate_lifecycle_assessment()
        assert assessment.hotspots == [
            "Raw Material Extraction carbon emissions",
            "Manufacturing carbon emissions",
            "Raw Material Extraction water usage",
            "Manufacturing energy consumption",
        ]

    def test_improvement_potential_is_carbon_weighted(self):
        assessment = calculate_lifecycle_assessment()
        assert assessment.improvement_potential == pytest.approx(0.37 / 1.1)

    def test_metadata(self):
        assessment = calculate_lifecycle_assessment()
        assert assessment.uncertainty_level
        assert 0 <= assessment.data_quality <= 1
        assert assessment.functional_unit
        assert assessment.system_boundaries
        assert assessment.allocation_method


class TestSuppliedValues:
    """Caller-supplied inputs."""

    def test_camel_case_keys(self):
        assessment = calculate_lifecycle_assessment({
            "materialCarbonFootprint": 0.5,
            "energyConsumption": 0.9,
        })
        assert assessment.stages[0].carbon_footprint == pytest.approx(0.5)
        assert assessment.stages[1].energy_consumption == pytest.approx(0.9)

    def test_explicit_zero_is_kept(self):
        values = resolve_lifecycle_values(LifecycleInput(material_carbon_footprint=0))
        assert values["material_carbon_footprint"] == 0

    def test_all_zero_input(self):
        """Zero totals give no improvement potential and the fallback hotspot."""
        assessment = calculate_lifecycle_assessment(ALL_ZERO)

        assert assessment.total_carbon_footprint == 0
        assert assessment.improvement_potential == 0.0
        assert assessment.hotspots == ["Overall lifecycle efficiency"]

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            calculate_lifecycle_assessment({"materialCarbon": 1.0})

    def test_hotspots_never_empty(self):
        assessment = calculate_lifecycle_assessment({
            **ALL_ZERO, "end_of_life_carbon_footprint": 0.05,
        })
        assert assessment.hotspots


class TestDeriveLifecycleInput:
    """derive_lifecycle_input maps project emission shares onto stages."""

    def test_shares(self):
        derived = derive_lifecycle_input(
            [Material(name="Concrete", carbon_footprint=2, quantity=10)],
            [TransportItem(distance=100, weight=1, emissions_factor=0.1)],
            [],
        )

        assert derived.material_carbon_footprint == pytest.approx(2 / 3)
        assert derived.transport_carbon_footprint == pytest.approx(1 / 3)
        assert derived.energy_carbon_footprint is None

    def test_energy_share(self):
        derived = derive_lifecycle_input(
            [], [], [EnergyItem(source="grid", quantity=100, emissions_factor=0.5)],
        )
        assert derived.energy_carbon_footprint == pytest.approx(1.0)

    def test_no_emissions_uses_defaults(self):
        assert derive_lifecycle_input([], [], []) == LifecycleInput()
