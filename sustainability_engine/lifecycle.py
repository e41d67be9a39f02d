# -*- coding: utf-8 -*-
"""
Lifecycle Assessment Engine - Sustainability Metrics & Lifecycle Modeling Engine

Builds a six-stage cradle-to-grave assessment from per-stage carbon, water
and energy impacts. Any of the 18 inputs that is absent is replaced by its
stage default; explicit zeros are kept.

Stages (fixed order, improvement weight):
    Raw Material Extraction  0.40
    Manufacturing            0.35
    Transportation           0.30
    Construction             0.25
    Use Phase                0.20
    End of Life              0.45

Stage Defaults (carbon / water / energy):
    Raw Material Extraction  0.30 / 0.40 / 0.25
    Manufacturing            0.25 / 0.15 / 0.35
    Transportation           0.20 / 0.10 / 0.30
    Construction             0.15 / 0.20 / 0.25
    Use Phase                0.10 / 0.20 / 0.20
    End of Life              0.10 / 0.10 / 0.10

Hotspot Rules:
    top carbon stage > 0.20, second carbon stage > 0.15,
    top water stage > 0.30, top energy stage > 0.30;
    otherwise "Overall lifecycle efficiency".

Improvement Potential:
    sum(stage_weight * stage_carbon / total_carbon)   (0 when total is 0)

Example:
    >>> from sustainability_engine.lifecycle import calculate_lifecycle_assessment
    >>> lca = calculate_lifecycle_assessment({"materialCarbonFootprint": 0.4})
    >>> print(lca.total_carbon_footprint, lca.hotspots)

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from sustainability_engine import constants as c
from sustainability_engine.models import (
    EnergyItem,
    LifecycleAssessment,
    LifecycleInput,
    LifecycleStage,
    Material,
    TransportItem,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _field_names(prefix: str) -> Tuple[str, str, str]:
    """Input field names holding a stage's carbon, water and energy values."""
    energy_field = (
        "energy_consumption" if prefix == "energy" else f"{prefix}_energy_consumption"
    )
    return f"{prefix}_carbon_footprint", f"{prefix}_water_footprint", energy_field


def _coerce_input(
    data: Union[LifecycleInput, Mapping[str, Any], None],
) -> LifecycleInput:
    if data is None:
        return LifecycleInput()
    if isinstance(data, LifecycleInput):
        return data
    return LifecycleInput.model_validate(dict(data))


def resolve_lifecycle_values(
    data: Union[LifecycleInput, Mapping[str, Any], None],
) -> Dict[str, float]:
    """Return all 18 stage inputs with absent values replaced by defaults."""
    supplied = _coerce_input(data)
    values: Dict[str, float] = {}
    for prefix, defaults in c.LIFECYCLE_DEFAULTS.items():
        for field, default in zip(_field_names(prefix), defaults):
            value = getattr(supplied, field)
            values[field] = default if value is None else value
    return values


def define_lifecycle_stages(values: Mapping[str, float]) -> List[LifecycleStage]:
    """Build the six stages in fixed order from resolved input values."""
    stages: List[LifecycleStage] = []
    for name, prefix, description, hotspots, weight in c.LIFECYCLE_STAGES:
        carbon, water, energy = _field_names(prefix)
        stages.append(LifecycleStage(
            name=name,
            carbon_footprint=values[carbon],
            water_footprint=values[water],
            energy_consumption=values[energy],
            description=description,
            hotspots=list(hotspots),
            improvement_potential=weight,
        ))
    return stages


def identify_lifecycle_hotspots(stages: Sequence[LifecycleStage]) -> List[str]:
    """Name the dominant stages; never returns an empty list.

    Rankings use a stable sort so equal impacts keep stage order.
    """
    by_carbon = sorted(stages, key=lambda s: s.carbon_footprint, reverse=True)
    by_water = sorted(stages, key=lambda s: s.water_footprint, reverse=True)
    by_energy = sorted(stages, key=lambda s: s.energy_consumption, reverse=True)

    hotspots: List[str] = []
    if by_carbon and by_carbon[0].carbon_footprint > c.LIFECYCLE_TOP_CARBON_THRESHOLD:
        hotspots.append(f"{by_carbon[0].name} carbon emissions")
    if len(by_carbon) > 1 and by_carbon[1].carbon_footprint > c.LIFECYCLE_SECOND_CARBON_THRESHOLD:
        hotspots.append(f"{by_carbon[1].name} carbon emissions")
    if by_water and by_water[0].water_footprint > c.LIFECYCLE_TOP_WATER_THRESHOLD:
        hotspots.append(f"{by_water[0].name} water usage")
    if by_energy and by_energy[0].energy_consumption > c.LIFECYCLE_TOP_ENERGY_THRESHOLD:
        hotspots.append(f"{by_energy[0].name} energy consumption")

    if not hotspots:
        hotspots.append(c.LIFECYCLE_FALLBACK_HOTSPOT)
    return hotspots


def calculate_improvement_potential(
    stages: Sequence[LifecycleStage], total_carbon: float,
) -> float:
    """Carbon-weighted mean of stage improvement weights."""
    if total_carbon == 0:
        return 0.0
    return sum(
        stage.improvement_potential * (stage.carbon_footprint / total_carbon)
        for stage in stages
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_lifecycle_assessment(
    data: Union[LifecycleInput, Mapping[str, Any], None] = None,
) -> LifecycleAssessment:
    """Run the six-stage lifecycle assessment.

    Args:
        data: LifecycleInput, or a mapping with snake_case or camelCase keys.
            Absent keys take the stage defaults.

    Returns:
        LifecycleAssessment whose totals equal the sums over its stages.
    """
    values = resolve_lifecycle_values(data)
    stages = define_lifecycle_stages(values)

    total_carbon = sum(s.carbon_footprint for s in stages)
    total_water = sum(s.water_footprint for s in stages)
    total_energy = sum(s.energy_consumption for s in stages)

    metadata = c.LIFECYCLE_METADATA
    assessment = LifecycleAssessment(
        stages=stages,
        total_carbon_footprint=total_carbon,
        total_water_footprint=total_water,
        total_energy_consumption=total_energy,
        hotspots=identify_lifecycle_hotspots(stages),
        improvement_potential=calculate_improvement_potential(stages, total_carbon),
        uncertainty_level=metadata["uncertainty_level"],
        data_quality=metadata["data_quality"],
        functional_unit=metadata["functional_unit"],
        system_boundaries=list(metadata["system_boundaries"]),
        allocation_method=metadata["allocation_method"],
    )
    logger.debug(
        "Lifecycle assessment: carbon=%.3f water=%.3f energy=%.3f hotspots=%s",
        total_carbon, total_water, total_energy, assessment.hotspots,
    )
    return assessment


def derive_lifecycle_input(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> LifecycleInput:
    """Map project emission shares onto the stage carbon inputs.

    Material emissions feed raw material extraction, transport emissions
    feed transportation and energy emissions feed manufacturing, each as a
    share of the project total. Stages without project data keep their
    defaults; with no emissions at all every input is left to default.
    """
    material_emissions = sum(m.carbon_footprint * m.quantity for m in materials)
    transport_emissions = sum(
        t.emissions_factor * t.distance * t.weight for t in transport
    )
    energy_emissions = sum(e.emissions_factor * e.quantity for e in energy)
    total = material_emissions + transport_emissions + energy_emissions
    if total <= 0:
        return LifecycleInput()

    def _share(emissions: float, present: bool) -> Optional[float]:
        return emissions / total if present else None

    return LifecycleInput(
        material_carbon_footprint=_share(material_emissions, bool(materials)),
        transport_carbon_footprint=_share(transport_emissions, bool(transport)),
        energy_carbon_footprint=_share(energy_emissions, bool(energy)),
    )


__all__ = [
    "resolve_lifecycle_values",
    "define_lifecycle_stages",
    "identify_lifecycle_hotspots",
    "calculate_improvement_potential",
    "calculate_lifecycle_assessment",
    "derive_lifecycle_input",
]
