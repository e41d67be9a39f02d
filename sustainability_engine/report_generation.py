# -*- coding: utf-8 -*-
"""
Report Assembler - Sustainability Metrics & Lifecycle Modeling Engine

Assembles sustainability reports at three depths from validated material,
transport and energy records.

Formats:
    basic          suggestions, priority suggestions and the 0-100 score
    detailed       basic + material / transport / energy recommendations,
                   optional lifecycle analysis, implementation roadmap and
                   circular economy section
    comprehensive  detailed (all optional sections) + domain metrics,
                   six-stage lifecycle assessment, circular economy
                   metrics and recommendations, lifecycle cost analysis
                   when cost parameters are supplied

Data Completeness (0-100):
    materials  min(10 * n, 40) + min(5 * detailed, 20)
    transport  min(10 * n, 30) + 5 * legs with a fuel type
    energy     min(10 * n, 30)

Sustainability Score:
    every domain starts at 50; adjustments per domain; each clamped to
    [0, 100] and rounded half-up; overall = 0.5 m + 0.3 t + 0.2 e

Example:
    >>> from sustainability_engine.report_generation import (
    ...     generate_sustainability_report,
    ... )
    >>> report = generate_sustainability_report(materials, transport, energy)
    >>> print(report.score.overall, report.priority_suggestions)

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence

from sustainability_engine import constants as c
from sustainability_engine.circular_economy import (
    calculate_circular_economy_metrics,
    derive_circular_economy_input,
    generate_circular_economy_recommendations,
)
from sustainability_engine.config import get_config
from sustainability_engine.cost_analysis import calculate_lifecycle_cost_analysis
from sustainability_engine.energy_metrics import calculate_detailed_energy_metrics
from sustainability_engine.lifecycle import (
    calculate_lifecycle_assessment,
    derive_lifecycle_input,
)
from sustainability_engine.material_metrics import calculate_detailed_material_metrics
from sustainability_engine.models import (
    EnergyItem,
    EnergyRecommendation,
    ImplementationStep,
    LifecycleAnalysis,
    LifecycleStageBreakdown,
    Material,
    MaterialRecommendation,
    ReportFormat,
    ReportRequestOptions,
    SustainabilityReport,
    SustainabilityScore,
    TransportItem,
    TransportRecommendation,
)
from sustainability_engine.suggestions import (
    generate_sustainability_suggestions,
    priority_suggestions,
)
from sustainability_engine.transport_metrics import calculate_detailed_transport_metrics

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (towards +inf)."""
    return int(math.floor(value + 0.5))


def _mentions(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


# ---------------------------------------------------------------------------
# Data completeness
# ---------------------------------------------------------------------------


def calculate_data_completeness(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> float:
    """Score (0-100) of how much usable data a request carries."""
    score = 0

    if materials:
        score += min(len(materials) * c.COMPLETENESS_MATERIAL_ITEM_POINTS,
                     c.COMPLETENESS_MATERIAL_ITEM_CAP)
        detailed = sum(
            1 for m in materials
            if m.recyclable is not None
            or m.recycled_content is not None
            or m.locally_sourced is not None
        )
        score += min(detailed * c.COMPLETENESS_MATERIAL_DETAIL_POINTS,
                     c.COMPLETENESS_MATERIAL_DETAIL_CAP)

    if transport:
        score += min(len(transport) * c.COMPLETENESS_TRANSPORT_ITEM_POINTS,
                     c.COMPLETENESS_TRANSPORT_ITEM_CAP)
        score += sum(1 for t in transport if t.fuel_type) * c.COMPLETENESS_TRANSPORT_FUEL_POINTS

    if energy:
        score += min(len(energy) * c.COMPLETENESS_ENERGY_ITEM_POINTS,
                     c.COMPLETENESS_ENERGY_ITEM_CAP)

    return float(min(score, c.COMPLETENESS_MAX))


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------


def generate_material_recommendations(
    materials: Sequence[Material],
) -> List[MaterialRecommendation]:
    """One recommendation per material with a positive quantity."""
    recommendations: List[MaterialRecommendation] = []
    for material in materials:
        if material.quantity <= 0:
            continue
        alternative, reduction, cost, availability, benefits = c.MATERIAL_RECOMMENDATION_FALLBACK
        for keywords, rule_alt, rule_red, rule_cost, rule_avail, rule_benefits in (
            c.MATERIAL_RECOMMENDATION_RULES
        ):
            if _mentions(material.name, keywords):
                alternative, reduction, cost = rule_alt, rule_red, rule_cost
                availability, benefits = rule_avail, rule_benefits
                break
        recommendations.append(MaterialRecommendation(
            original_material=material.name,
            recommended_alternative=alternative,
            carbon_reduction=reduction,
            cost_impact=cost,
            availability=availability,
            additional_benefits=list(benefits),
        ))
    return recommendations


def _transport_shift(item: TransportItem) -> tuple:
    if _mentions(item.type, c.ROAD_TRANSPORT_KEYWORDS):
        key = "rail" if item.distance > c.RAIL_SHIFT_DISTANCE else "electric"
        return c.TRANSPORT_RECOMMENDATIONS[key]
    if _mentions(item.type, c.AIR_TRANSPORT_KEYWORDS):
        mode, reduction, cost, _ = c.TRANSPORT_RECOMMENDATIONS["sea"]
        feasibility = "high" if item.distance > c.SEA_SHIFT_DISTANCE else "low"
        return mode, reduction, cost, feasibility
    return c.TRANSPORT_RECOMMENDATIONS["generic"]


def generate_transport_recommendations(
    transport: Sequence[TransportItem],
) -> List[TransportRecommendation]:
    """One modal-shift recommendation per leg with a positive distance."""
    recommendations: List[TransportRecommendation] = []
    for item in transport:
        if item.distance <= 0:
            continue
        mode, reduction, cost, feasibility = _transport_shift(item)
        recommendations.append(TransportRecommendation(
            current_mode=item.type,
            recommended_mode=mode,
            distance=item.distance,
            carbon_reduction=reduction,
            cost_impact=cost,
            feasibility=feasibility,
        ))
    return recommendations


def generate_energy_recommendations(
    energy: Sequence[EnergyItem],
) -> List[EnergyRecommendation]:
    """One source-switch recommendation per record with a positive quantity."""
    recommendations: List[EnergyRecommendation] = []
    for item in energy:
        if item.quantity <= 0:
            continue
        source, reduction, cost, complexity = c.ENERGY_RECOMMENDATION_FALLBACK
        for keywords, rule_source, rule_red, rule_cost, rule_complexity in (
            c.ENERGY_RECOMMENDATION_RULES
        ):
            if _mentions(item.source, keywords):
                source, reduction, cost, complexity = (
                    rule_source, rule_red, rule_cost, rule_complexity,
                )
                break
        recommendations.append(EnergyRecommendation(
            current_source=item.source,
            recommended_source=source,
            carbon_reduction=reduction,
            cost_impact=cost,
            implementation_complexity=complexity,
        ))
    return recommendations


# ---------------------------------------------------------------------------
# Lifecycle analysis (percentage split)
# ---------------------------------------------------------------------------


def _domain_emissions(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> Dict[str, float]:
    return {
        "materials": sum(m.carbon_footprint * m.quantity for m in materials),
        "transport": sum(t.emissions_factor * t.distance * t.weight for t in transport),
        "energy": sum(e.emissions_factor * e.quantity for e in energy),
    }


def generate_lifecycle_analysis(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> LifecycleAnalysis:
    """Distribute project emissions across six stages as whole percentages.

    Without attributable emissions the default split is returned. Otherwise
    each stage fed by a domain with emissions is recomputed from that
    domain's share, the split is normalised to 100 and the operation stage
    absorbs any rounding remainder.
    """
    emissions = _domain_emissions(materials, transport, energy)
    total_emissions = sum(emissions.values())

    stages: Dict[str, int] = dict(c.LIFECYCLE_ANALYSIS_DEFAULTS)
    if total_emissions > 0:
        for stage, (source, scale, offset) in c.LIFECYCLE_ANALYSIS_FORMULAS.items():
            if emissions[source] > 0:
                stages[stage] = round_half_up(emissions[source] / total_emissions * scale) + offset

        factor = 100 / sum(stages.values())
        stages = {stage: round_half_up(pct * factor) for stage, pct in stages.items()}
        stages["operation"] += 100 - sum(stages.values())

    return LifecycleAnalysis(
        stages=LifecycleStageBreakdown(**stages),
        total_lifecycle_emissions=round_half_up(total_emissions * c.LIFECYCLE_TOTAL_MULTIPLIER),
        recommendations=list(c.LIFECYCLE_ANALYSIS_RECOMMENDATIONS),
    )


# ---------------------------------------------------------------------------
# Implementation roadmap
# ---------------------------------------------------------------------------


def _roadmap_step(phase: str, actions: List[str]) -> ImplementationStep:
    timeframe, cost_range, savings = c.ROADMAP_PHASES[phase]
    return ImplementationStep(
        phase=phase,
        actions=actions,
        estimated_timeframe=timeframe,
        estimated_cost_range=cost_range,
        estimated_carbon_savings=savings,
    )


def generate_implementation_roadmap(
    material_recs: Sequence[MaterialRecommendation],
    transport_recs: Sequence[TransportRecommendation],
    energy_recs: Sequence[EnergyRecommendation],
    max_actions: Optional[int] = None,
) -> List[ImplementationStep]:
    """Phase recommendations into an implementation plan.

    Easy wins (high availability or feasibility, low complexity) go to the
    short-term phase, medium ones to the medium-term phase. Those two phases
    are omitted when empty and capped at ``max_actions`` actions.
    """
    if max_actions is None:
        max_actions = get_config().roadmap_max_actions

    short_term = (
        [f"Replace {r.original_material} with {r.recommended_alternative}"
         for r in material_recs if r.availability == "high"]
        + [f"Switch from {r.current_mode} to {r.recommended_mode} for applicable routes"
           for r in transport_recs if r.feasibility == "high"]
        + [f"Transition from {r.current_source} to {r.recommended_source} where possible"
           for r in energy_recs if r.implementation_complexity == "low"]
    )
    medium_term = (
        [f"Implement {r.recommended_alternative} across all applicable use cases"
         for r in material_recs if r.availability == "medium"]
        + [f"Develop infrastructure for {r.recommended_mode} transport"
           for r in transport_recs if r.feasibility == "medium"]
        + [f"Install {r.recommended_source} systems"
           for r in energy_recs if r.implementation_complexity == "medium"]
    )

    roadmap = [_roadmap_step("immediate", list(c.ROADMAP_IMMEDIATE_ACTIONS))]
    if short_term:
        roadmap.append(_roadmap_step("short-term", short_term[:max_actions]))
    if medium_term:
        roadmap.append(_roadmap_step("medium-term", medium_term[:max_actions]))
    roadmap.append(_roadmap_step("long-term", list(c.ROADMAP_LONG_TERM_ACTIONS)))
    return roadmap


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def _clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def calculate_sustainability_score(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> SustainabilityScore:
    """Score each domain from a baseline of 50 and combine them."""
    materials_score = c.SCORE_BASELINE
    transport_score = c.SCORE_BASELINE
    energy_score = c.SCORE_BASELINE

    if materials:
        n = len(materials)
        w = c.MATERIAL_SCORE_WEIGHTS
        recyclable = sum(1 for m in materials if m.recyclable is True)
        local = sum(1 for m in materials if m.locally_sourced is True)
        recycled = [m.recycled_content for m in materials if (m.recycled_content or 0) > 0]
        materials_score += recyclable / n * w["recyclable"]
        materials_score += local / n * w["local"]
        if recycled:
            materials_score += sum(recycled) / len(recycled) / 100 * w["recycled_content"]

    if transport:
        n = len(transport)
        adjust = c.TRANSPORT_DISTANCE_ADJUSTMENTS
        average_distance = sum(t.distance for t in transport) / n
        if average_distance < c.TRANSPORT_SHORT_DISTANCE:
            transport_score += adjust["short"]
        elif average_distance < c.TRANSPORT_MEDIUM_DISTANCE:
            transport_score += adjust["medium"]
        elif average_distance > c.TRANSPORT_LONG_DISTANCE:
            transport_score += adjust["long"]
        low_carbon = sum(1 for t in transport if _mentions(t.type, c.LOW_CARBON_TRANSPORT_TYPES))
        transport_score += low_carbon / n * c.LOW_CARBON_TRANSPORT_BONUS

    if energy:
        n = len(energy)
        renewable = sum(1 for e in energy if _mentions(e.source, c.RENEWABLE_ENERGY_TYPES))
        fossil = sum(1 for e in energy if _mentions(e.source, c.FOSSIL_ENERGY_TYPES))
        energy_score += renewable / n * c.RENEWABLE_ENERGY_BONUS
        energy_score -= fossil / n * c.FOSSIL_ENERGY_PENALTY

    m = _clamp_score(materials_score)
    t = _clamp_score(transport_score)
    e = _clamp_score(energy_score)
    w = c.SCORE_WEIGHTS
    overall = round_half_up(m * w["materials"] + t * w["transport"] + e * w["energy"])
    return SustainabilityScore(overall=overall, materials=m, transport=t, energy=e)


# ---------------------------------------------------------------------------
# Report generators
# ---------------------------------------------------------------------------


def generate_basic_sustainability_report(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
    options: Optional[ReportRequestOptions] = None,
) -> SustainabilityReport:
    """Suggestions, priority suggestions and score."""
    options = options or ReportRequestOptions()
    suggestions = generate_sustainability_suggestions(materials, transport, energy)
    return SustainabilityReport(
        format=ReportFormat.BASIC,
        project_id=options.project_id,
        project_name=options.project_name,
        suggestions=suggestions,
        priority_suggestions=priority_suggestions(suggestions),
        score=calculate_sustainability_score(materials, transport, energy),
    )


def _circular_section(materials: Sequence[Material]) -> dict:
    metrics = calculate_circular_economy_metrics(derive_circular_economy_input(materials))
    return {
        "circular_economy_metrics": metrics,
        "circular_economy_recommendations": generate_circular_economy_recommendations(metrics),
    }


def generate_detailed_sustainability_report(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
    options: Optional[ReportRequestOptions] = None,
) -> SustainabilityReport:
    """Basic report plus recommendations and the requested optional sections."""
    options = options or ReportRequestOptions()
    basic = generate_basic_sustainability_report(materials, transport, energy, options)

    material_recs = generate_material_recommendations(materials)
    transport_recs = generate_transport_recommendations(transport)
    energy_recs = generate_energy_recommendations(energy)

    update: dict = {
        "format": ReportFormat.DETAILED,
        "material_recommendations": material_recs,
        "transport_recommendations": transport_recs,
        "energy_recommendations": energy_recs,
    }
    if options.include_lifecycle_analysis:
        update["life_cycle_analysis"] = generate_lifecycle_analysis(materials, transport, energy)
    if options.include_implementation_roadmap:
        update["implementation_roadmap"] = generate_implementation_roadmap(
            material_recs, transport_recs, energy_recs,
        )
    if options.include_circular_economy:
        update.update(_circular_section(materials))

    return basic.model_copy(update=update)


def generate_comprehensive_sustainability_report(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
    options: Optional[ReportRequestOptions] = None,
) -> SustainabilityReport:
    """Every section the engine can produce.

    The lifecycle cost analysis is included only when the options carry
    cost parameters.
    """
    options = options or ReportRequestOptions()
    detailed = generate_detailed_sustainability_report(
        materials, transport, energy,
        options.model_copy(update={
            "include_lifecycle_analysis": True,
            "include_implementation_roadmap": True,
            "include_circular_economy": True,
        }),
    )

    update: dict = {
        "format": ReportFormat.COMPREHENSIVE,
        "material_metrics": calculate_detailed_material_metrics(materials),
        "transport_metrics": calculate_detailed_transport_metrics(transport),
        "energy_metrics": calculate_detailed_energy_metrics(energy),
        "lifecycle_assessment": calculate_lifecycle_assessment(
            derive_lifecycle_input(materials, transport, energy),
        ),
    }
    if options.cost_parameters is not None:
        update["lifecycle_cost_analysis"] = calculate_lifecycle_cost_analysis(
            options.cost_parameters,
        )
    return detailed.model_copy(update=update)


_GENERATORS = {
    ReportFormat.BASIC: generate_basic_sustainability_report,
    ReportFormat.DETAILED: generate_detailed_sustainability_report,
    ReportFormat.COMPREHENSIVE: generate_comprehensive_sustainability_report,
}


def generate_sustainability_report(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
    options: Optional[ReportRequestOptions] = None,
) -> SustainabilityReport:
    """Generate a report in the format named by ``options`` (default basic).

    Args:
        materials: Validated material records.
        transport: Validated transport records.
        energy: Validated energy records.
        options: Report options; ``None`` means a basic report.

    Returns:
        SustainabilityReport carrying the project id and name from options.
    """
    options = options or ReportRequestOptions()
    report = _GENERATORS[options.format](materials, transport, energy, options)
    logger.info(
        "Generated %s report: %d suggestions, overall score %d",
        report.format.value, len(report.suggestions), report.score.overall,
    )
    return report


__all__ = [
    "round_half_up",
    "calculate_data_completeness",
    "generate_material_recommendations",
    "generate_transport_recommendations",
    "generate_energy_recommendations",
    "generate_lifecycle_analysis",
    "generate_implementation_roadmap",
    "calculate_sustainability_score",
    "generate_basic_sustainability_report",
    "generate_detailed_sustainability_report",
    "generate_comprehensive_sustainability_report",
    "generate_sustainability_report",
]
