# -*- coding: utf-8 -*-
"""
Transport Metrics Calculator - Sustainability Metrics & Lifecycle Modeling Engine

Aggregates transport legs into a :class:`TransportMetrics` value object and
provides route-level analyses: high-emission routes, route optimisation
potential and vehicle lifecycle emissions.

Carbon Intensity:
    carbon_intensity = sum(emissions_factor * distance) / total_distance

Congestion Contribution (averaged over all legs):
    +0.4  urban / delivery / local transport type
    +0.3  operates at peak time
    +0.2  frequent stops
    +0.1  large or heavy vehicle

Route Optimisation Potential:
    overall   = max(0, 0.5 - 0.5 * optimised_share)
    fuel      = overall * 1.2
    time      = overall * 0.8
    emissions = fuel * 0.9

Vehicle Lifecycle Emissions:
    operational   = sum(emissions_factor * distance)
    manufacturing = sum(type_factor * max(0.5, 1 - vehicle_age / 20))
    maintenance   = operational * 0.15
    disposal      = manufacturing * 0.1

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from sustainability_engine import constants as c
from sustainability_engine.models import (
    HighEmissionRoute,
    RouteOptimizationPotential,
    TransportItem,
    TransportLifecycleEmissions,
    TransportMetrics,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _average(values: List[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def _is_electric(item: TransportItem) -> bool:
    return item.is_electric is True or item.fuel_type.lower() in c.ELECTRIC_FUEL_TYPES


def _is_urban(item: TransportItem) -> bool:
    kind = item.type.lower()
    return any(keyword in kind for keyword in c.CONGESTION_TYPE_KEYWORDS)


def _congestion_score(item: TransportItem) -> float:
    w = c.CONGESTION_WEIGHTS
    score = 0.0
    if _is_urban(item):
        score += w["type"]
    if item.peak_time is True:
        score += w["peak_time"]
    if item.frequent_stops is True:
        score += w["frequent_stops"]
    if item.vehicle_size is not None and any(
        keyword in item.vehicle_size.lower() for keyword in c.CONGESTION_VEHICLE_KEYWORDS
    ):
        score += w["vehicle_size"]
    return score


def _route_endpoints(item: TransportItem) -> tuple:
    kind = item.type.lower()
    for keywords, origin, destination in c.ROUTE_ENDPOINT_RULES:
        if any(keyword in kind for keyword in keywords):
            return origin, destination
        # the long-haul rule also matches on distance alone
        if "long" in keywords and item.distance > c.LONG_HAUL_DISTANCE:
            return origin, destination
    return c.DEFAULT_ROUTE_ENDPOINTS


def _has_multiple_stops(item: TransportItem) -> bool:
    return (
        _is_urban(item)
        or item.frequent_stops is True
        or (item.destinations is not None and len(item.destinations) > 1)
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_detailed_transport_metrics(
    transport: Optional[Sequence[TransportItem]],
) -> TransportMetrics:
    """Aggregate transport legs into summary metrics.

    Args:
        transport: Transport records; ``None`` or empty yields the zero object.

    Returns:
        TransportMetrics with percentages in [0, 100].
    """
    if not transport:
        return TransportMetrics()

    total = len(transport)
    total_distance = sum(t.distance for t in transport)

    by_type: Dict[str, int] = {}
    by_fuel: Dict[str, int] = {}
    for item in transport:
        by_type[item.type] = by_type.get(item.type, 0) + 1
        by_fuel[item.fuel_type] = by_fuel.get(item.fuel_type, 0) + 1

    carbon_intensity = 0.0
    if total_distance > 0:
        carbon_intensity = sum(
            t.emissions_factor * t.distance for t in transport
        ) / total_distance

    idling_time_percentage: Optional[float] = None
    timed = [
        t for t in transport
        if t.idling_time is not None and t.operating_hours is not None
    ]
    operating_hours = sum(t.operating_hours for t in timed)
    if timed and operating_hours > 0:
        idling_time_percentage = sum(t.idling_time for t in timed) / operating_hours * 100

    maintenance_score: Optional[float] = None
    rated = [t for t in transport if t.maintenance_status is not None]
    if rated:
        good = sum(
            1 for t in rated
            if t.maintenance_status.lower() in c.GOOD_MAINTENANCE_STATUSES
        )
        maintenance_score = good / len(rated) * 100

    metrics = TransportMetrics(
        total_transport_items=total,
        total_distance=total_distance,
        average_emissions_factor=sum(t.emissions_factor for t in transport) / total,
        sustainable_transport_percentage=sum(
            1 for t in transport
            if t.carbon_footprint is not None
            or t.is_electric is True
            or t.route_optimization is True
        ) / total * 100,
        electric_vehicle_percentage=sum(1 for t in transport if _is_electric(t)) / total * 100,
        route_optimization_percentage=sum(
            1 for t in transport if t.route_optimization is True
        ) / total * 100,
        fuel_efficiency=_average(
            [t.efficiency for t in transport if t.efficiency is not None]
        ) or 0.0,
        transport_by_type=by_type,
        fuel_by_type=by_fuel,
        carbon_intensity=carbon_intensity,
        idling_time_percentage=idling_time_percentage,
        maintenance_score=maintenance_score,
        noise_impact=_average(
            [t.noise_level for t in transport if t.noise_level is not None]
        ),
        air_quality_impact=_average(
            [t.air_quality_impact for t in transport if t.air_quality_impact is not None]
        ),
        congestion_contribution=sum(_congestion_score(t) for t in transport) / total,
    )
    logger.debug(
        "Transport metrics: %d legs, %.1f km, intensity=%.4f",
        total, total_distance, carbon_intensity,
    )
    return metrics


def identify_high_emission_routes(
    transport: Optional[Sequence[TransportItem]],
) -> List[HighEmissionRoute]:
    """List legs whose emissions factor exceeds 0.8 with mode alternatives."""
    if not transport:
        return []

    routes: List[HighEmissionRoute] = []
    for item in transport:
        if item.emissions_factor <= c.HIGH_EMISSION_FACTOR:
            continue
        origin, destination = _route_endpoints(item)
        routes.append(HighEmissionRoute(
            origin=origin,
            destination=destination,
            distance=item.distance,
            emissions=item.emissions_factor,
            optimization_potential=(
                c.ROUTE_OPTIMIZED_POTENTIAL
                if item.route_optimization is True
                else c.ROUTE_UNOPTIMIZED_POTENTIAL
            ),
            alternative_options=list(
                c.TRANSPORT_ALTERNATIVES.get(
                    item.type.lower(), c.DEFAULT_TRANSPORT_ALTERNATIVES,
                )
            ),
        ))
    return routes


def calculate_route_optimization_potential(
    transport: Optional[Sequence[TransportItem]],
) -> RouteOptimizationPotential:
    """Estimate savings from route optimisation across the fleet."""
    if not transport:
        return RouteOptimizationPotential()

    optimised_share = sum(
        1 for t in transport if t.route_optimization is True
    ) / len(transport)
    overall = max(0.0, c.ROUTE_BASE_POTENTIAL - optimised_share * c.ROUTE_BASE_POTENTIAL)
    fuel = overall * c.ROUTE_FUEL_FACTOR

    recommendations: List[str] = []
    texts = c.ROUTE_RECOMMENDATIONS
    if any(t.distance > c.ROUTE_LONG_DISTANCE for t in transport):
        recommendations.append(texts["long_distance"])
    if any(_is_urban(t) for t in transport):
        recommendations.append(texts["urban"])
    if any(_has_multiple_stops(t) for t in transport):
        recommendations.append(texts["multi_stop"])
    if any(
        t.efficiency is not None and t.efficiency < c.ROUTE_LOW_EFFICIENCY
        for t in transport
    ):
        recommendations.append(texts["low_efficiency"])
    if len(recommendations) < 3:
        recommendations.extend(c.ROUTE_FALLBACK_RECOMMENDATIONS)

    return RouteOptimizationPotential(
        overall_potential=overall,
        fuel_savings_potential=fuel,
        time_savings_potential=overall * c.ROUTE_TIME_FACTOR,
        emissions_reduction_potential=fuel * c.ROUTE_EMISSIONS_FACTOR,
        specific_recommendations=recommendations,
    )


def calculate_transport_lifecycle_emissions(
    transport: Optional[Sequence[TransportItem]],
) -> TransportLifecycleEmissions:
    """Split fleet emissions into operation, manufacture, upkeep and disposal."""
    if not transport:
        return TransportLifecycleEmissions()

    operational = sum(t.emissions_factor * t.distance for t in transport)

    manufacturing = 0.0
    for item in transport:
        factor = c.VEHICLE_MANUFACTURING_FACTORS.get(
            item.type.lower(), c.DEFAULT_VEHICLE_MANUFACTURING_FACTOR,
        )
        if item.vehicle_age is not None:
            factor *= max(
                c.VEHICLE_MIN_AGE_FACTOR,
                1 - item.vehicle_age / c.VEHICLE_AGE_REFERENCE,
            )
        manufacturing += factor

    maintenance = operational * c.TRANSPORT_MAINTENANCE_SHARE
    disposal = manufacturing * c.TRANSPORT_DISPOSAL_SHARE
    total = operational + manufacturing + maintenance + disposal

    thresholds = c.TRANSPORT_HOTSPOT_THRESHOLDS
    hotspots: List[str] = []
    if total > 0:
        if operational / total > thresholds["operational"]:
            hotspots.append("Operational fuel consumption")
        if manufacturing / total > thresholds["manufacturing"]:
            hotspots.append("Vehicle manufacturing")
        if maintenance / total > thresholds["maintenance"]:
            hotspots.append("Vehicle maintenance")

    if operational > 0:
        by_type: Dict[str, float] = {}
        for item in transport:
            by_type[item.type] = by_type.get(item.type, 0.0) + item.emissions_factor * item.distance
        for kind, emissions in by_type.items():
            if emissions / operational > thresholds["type"]:
                hotspots.append(f"{kind} operations")

    if not hotspots:
        hotspots.append(c.TRANSPORT_FALLBACK_HOTSPOT)

    return TransportLifecycleEmissions(
        operational_emissions=operational,
        manufacturing_emissions=manufacturing,
        maintenance_emissions=maintenance,
        disposal_emissions=disposal,
        total_lifecycle_emissions=total,
        hotspots=hotspots,
    )


__all__ = [
    "calculate_detailed_transport_metrics",
    "identify_high_emission_routes",
    "calculate_route_optimization_potential",
    "calculate_transport_lifecycle_emissions",
]
