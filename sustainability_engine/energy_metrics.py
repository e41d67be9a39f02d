# -*- coding: utf-8 -*-
"""
Energy Metrics Calculator - Sustainability Metrics & Lifecycle Modeling Engine

Aggregates energy supply records into an :class:`EnergyMetrics` value object
and derives efficiency opportunities, peak demand reduction potential and a
simplified energy lifecycle assessment.

A record is renewable when flagged ``renewable`` or when its source names
solar, wind, geothermal, biomass or hydro. Consumption-weighted metrics use
the metered ``consumption`` field; records without it contribute to counts
only.

Peak Demand Reduction Potential:
    overall = clamp(avg_peak_demand * 0.4, 0.1, 0.5)   (avg defaults to 0.8)
    cost    = overall * 1.5

Energy Lifecycle:
    generation   = sum(carbon_intensity * consumption)
    transmission = total_consumption * 0.08
    embodied     = total_consumption * 0.15
    total        = generation + transmission * 0.5 + embodied * 0.4
    improvement  = (1 - renewable_pct/100) * 0.6 + (1 - end_use_efficiency) * 0.4

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from sustainability_engine import constants as c
from sustainability_engine.models import (
    EnergyItem,
    EnergyLifecycleAssessment,
    EnergyMetrics,
    EnergyOpportunity,
    PeakDemandApproach,
    PeakDemandReductionPotential,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _average(values: List[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def is_renewable(item: EnergyItem) -> bool:
    """True when the record is flagged renewable or names a renewable source."""
    source = item.source.lower()
    return item.renewable is True or any(
        keyword in source for keyword in c.RENEWABLE_SOURCE_KEYWORDS
    )


def _share_or_none(count: int, total: int) -> Optional[float]:
    return count / total * 100 if count > 0 else None


def _opportunity(area: str) -> EnergyOpportunity:
    savings, investment, payback, complexity, cobenefits = c.ENERGY_OPPORTUNITIES[area]
    return EnergyOpportunity(
        area=area,
        potential_savings=savings,
        investment_required=investment,
        payback_period=payback,
        implementation_complexity=complexity,
        cobenefits=list(cobenefits),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_detailed_energy_metrics(
    energy: Optional[Sequence[EnergyItem]],
) -> EnergyMetrics:
    """Aggregate energy records into summary metrics.

    ``time_of_use_optimization`` is never populated.
    """
    if not energy:
        return EnergyMetrics()

    total = len(energy)
    metered = [e for e in energy if e.consumption is not None]
    total_consumption = sum(e.consumption for e in metered)

    by_source: Dict[str, float] = {}
    by_unit: Dict[str, float] = {}
    for item in energy:
        increment = item.consumption if item.consumption is not None else 1
        by_source[item.source] = by_source.get(item.source, 0) + increment
        if item.consumption is not None:
            by_unit[item.unit] = by_unit.get(item.unit, 0) + item.consumption

    peaks = [e.peak_demand for e in energy if e.peak_demand is not None]
    storage = [e.storage_capacity for e in energy if e.storage_capacity is not None]

    grid_dependency: Optional[float] = None
    if total_consumption > 0:
        grid = sum(
            e.consumption for e in metered if e.source.lower() == c.GRID_SOURCE
        )
        grid_dependency = grid / total_consumption * 100

    metrics = EnergyMetrics(
        total_energy_items=total,
        total_consumption=total_consumption,
        average_carbon_intensity=_average(
            [e.carbon_intensity for e in energy if e.carbon_intensity is not None]
        ) or 0.0,
        renewable_percentage=sum(1 for e in energy if is_renewable(e)) / total * 100,
        energy_efficiency=_average(
            [e.efficiency for e in energy if e.efficiency is not None]
        ) or 0.0,
        peak_demand_reduction=1.0 - _average(peaks) if peaks else 0.0,
        energy_by_source=by_source,
        energy_by_unit=by_unit,
        cost_per_unit_average=_average(
            [e.cost_per_unit for e in energy if e.cost_per_unit is not None]
        ),
        storage_capacity=sum(storage) if storage else None,
        grid_dependency=grid_dependency,
        smart_monitoring_percentage=_share_or_none(
            sum(1 for e in energy if e.smart_monitoring is True), total,
        ),
        demand_response_capability=_share_or_none(
            sum(1 for e in energy if e.demand_response is True), total,
        ),
        backup_system_coverage=_share_or_none(
            sum(1 for e in energy if e.backup_system is True), total,
        ),
        time_of_use_optimization=None,
    )
    logger.debug(
        "Energy metrics: %d items, consumption=%.1f, renewable=%.1f%%",
        total, total_consumption, metrics.renewable_percentage,
    )
    return metrics


def identify_energy_efficiency_opportunities(
    energy: Optional[Sequence[EnergyItem]],
) -> List[EnergyOpportunity]:
    """Match the energy profile against the opportunity catalogue.

    Returns an empty list for empty input; otherwise pads with the lighting
    and HVAC opportunities when fewer than three rules fire.
    """
    if not energy:
        return []

    total = len(energy)
    areas: List[str] = []

    if any(
        e.consumption is not None
        and e.consumption > c.HIGH_CONSUMPTION_THRESHOLD
        and not is_renewable(e)
        for e in energy
    ):
        areas.append("Renewable Energy Integration")
    if any(
        e.efficiency is not None and e.efficiency < c.LOW_EFFICIENCY_THRESHOLD
        for e in energy
    ):
        areas.append("Equipment Upgrades")
    if any(
        e.peak_demand is not None and e.peak_demand > c.HIGH_PEAK_DEMAND_THRESHOLD
        for e in energy
    ):
        areas.append("Peak Demand Management")

    unmonitored = sum(1 for e in energy if e.smart_monitoring is not True)
    if unmonitored > total * c.MONITORING_GAP_SHARE:
        areas.append("Energy Monitoring Systems")

    without_storage = sum(
        1 for e in energy
        if e.storage_capacity is None or e.storage_capacity < c.MIN_STORAGE_CAPACITY
    )
    if without_storage > total * c.STORAGE_GAP_SHARE:
        areas.append("Energy Storage Implementation")

    if len(areas) < c.MIN_ENERGY_OPPORTUNITIES:
        areas.extend(c.FALLBACK_ENERGY_OPPORTUNITIES)

    return [_opportunity(area) for area in areas]


def calculate_peak_demand_reduction_potential(
    energy: Optional[Sequence[EnergyItem]],
) -> PeakDemandReductionPotential:
    """Estimate peak demand savings and the actions that unlock them."""
    if not energy:
        return PeakDemandReductionPotential()

    peaks = [e.peak_demand for e in energy if e.peak_demand is not None]
    average_peak = _average(peaks)
    if average_peak is None:
        average_peak = c.PEAK_DEFAULT_AVERAGE

    low, high = c.PEAK_REDUCTION_BOUNDS
    overall = min(high, max(low, average_peak * c.PEAK_REDUCTION_FACTOR))

    approaches = [
        PeakDemandApproach(
            approach=name,
            potential_reduction=overall * share,
            implementation_cost=cost,
            complexity=complexity,
        )
        for name, share, cost, complexity in c.PEAK_APPROACHES
    ]

    actions: List[str] = []
    if average_peak > c.PEAK_HIGH_AVERAGE:
        actions.append(c.PEAK_ACTIONS["high_peak"])
    if not any(e.storage_capacity is not None and e.storage_capacity > 0 for e in energy):
        actions.append(c.PEAK_ACTIONS["no_storage"])
    if not any(e.demand_response is True for e in energy):
        actions.append(c.PEAK_ACTIONS["no_demand_response"])
    if not any(
        e.time_of_use is not None
        and any(keyword in e.time_of_use.lower() for keyword in c.OFF_PEAK_KEYWORDS)
        for e in energy
    ):
        actions.append(c.PEAK_ACTIONS["no_time_of_use"])
    if len(actions) < 3:
        actions.extend(c.PEAK_FALLBACK_ACTIONS)

    return PeakDemandReductionPotential(
        overall_potential=overall,
        cost_savings_potential=overall * c.PEAK_COST_FACTOR,
        implementation_approaches=approaches,
        recommended_actions=actions,
    )


def calculate_energy_lifecycle_assessment(
    energy: Optional[Sequence[EnergyItem]],
) -> EnergyLifecycleAssessment:
    """Simplified generation-to-end-use lifecycle view of the energy supply."""
    if not energy:
        return EnergyLifecycleAssessment()

    generation = sum(
        e.carbon_intensity * e.consumption
        for e in energy
        if e.carbon_intensity is not None and e.consumption is not None
    )
    total_consumption = sum(e.consumption for e in energy if e.consumption is not None)
    transmission = total_consumption * c.ENERGY_TRANSMISSION_LOSS
    embodied = total_consumption * c.ENERGY_EMBODIED_SHARE

    efficiency = _average([e.efficiency for e in energy if e.efficiency is not None])
    if efficiency is None:
        efficiency = c.ENERGY_DEFAULT_EFFICIENCY

    w = c.ENERGY_LIFECYCLE_WEIGHTS
    total_emissions = (
        generation * w["generation"]
        + transmission * w["transmission"]
        + embodied * w["embodied"]
    )

    renewable_consumption = sum(
        e.consumption for e in energy
        if e.consumption is not None and is_renewable(e)
    )
    renewable_pct = (
        renewable_consumption / total_consumption * 100 if total_consumption > 0 else 0.0
    )

    texts = c.ENERGY_HOTSPOTS
    hotspots: List[str] = []
    if 100 - renewable_pct > c.ENERGY_NON_RENEWABLE_THRESHOLD:
        hotspots.append(texts["non_renewable"])
    if efficiency < c.LOW_EFFICIENCY_THRESHOLD:
        hotspots.append(texts["low_efficiency"])
    if any(
        e.carbon_intensity is not None
        and e.carbon_intensity > c.ENERGY_HIGH_INTENSITY_THRESHOLD
        for e in energy
    ):
        hotspots.append(texts["high_intensity"])
    if any(
        e.peak_demand is not None and e.peak_demand > c.HIGH_PEAK_DEMAND_THRESHOLD
        for e in energy
    ):
        hotspots.append(texts["high_peak"])
    if not hotspots:
        hotspots.append(c.ENERGY_FALLBACK_HOTSPOT)

    w = c.ENERGY_IMPROVEMENT_WEIGHTS
    return EnergyLifecycleAssessment(
        generation_emissions=generation,
        transmission_losses=transmission,
        end_use_efficiency=efficiency,
        total_lifecycle_emissions=total_emissions,
        renewable_percentage=renewable_pct,
        embodied_energy=embodied,
        hotspots=hotspots,
        improvement_potential=(
            (1 - renewable_pct / 100) * w["renewable"] + (1 - efficiency) * w["efficiency"]
        ),
    )


__all__ = [
    "is_renewable",
    "calculate_detailed_energy_metrics",
    "identify_energy_efficiency_opportunities",
    "calculate_peak_demand_reduction_potential",
    "calculate_energy_lifecycle_assessment",
]
