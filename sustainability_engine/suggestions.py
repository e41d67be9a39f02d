# -*- coding: utf-8 -*-
"""
Sustainability Suggestions - Sustainability Metrics & Lifecycle Modeling Engine

Plain-language suggestion generators used by the report assembler and by
lightweight callers that only need text.

Three families are provided:
    - generate_sustainability_suggestions: the flat list embedded in every
      report; padded with general advice when fewer than ten are produced.
    - generate_suggestions: categorised, de-duplicated suggestions with
      priority items first and per-category counts.
    - generate_*_suggestions_text: short sentence lists per domain plus a
      combined, de-duplicated variant.

Suggestions beginning with ``"Priority:"`` are priority suggestions.

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from sustainability_engine.models import (
    EnergyItem,
    Material,
    SuggestionResult,
    TransportItem,
)

logger = logging.getLogger(__name__)

PRIORITY_PREFIX = "Priority:"
MIN_REPORT_SUGGESTIONS = 10

LONG_DISTANCE_KM = 500.0
HIGH_ENERGY_QUANTITY = 1000.0
CONCRETE_PRIORITY_QUANTITY = 100.0
STEEL_PRIORITY_QUANTITY = 50.0
ELECTRICITY_PRIORITY_QUANTITY = 1000.0
TOP_IMPACT_MATERIALS = 3

# ---------------------------------------------------------------------------
# Report suggestion texts
# ---------------------------------------------------------------------------

CONCRETE_SUGGESTIONS = (
    "Priority: Replace traditional concrete with geopolymer or low-carbon alternatives",
    "Consider using fly ash or slag as cement replacement to reduce embodied carbon",
)
STEEL_SUGGESTIONS = (
    "Priority: Source steel with high recycled content",
    "Consider using steel certified under responsible production schemes",
)
MATERIAL_BASELINE_SUGGESTIONS = (
    "Select materials with Environmental Product Declarations (EPDs)",
    "Prioritize materials with low embodied carbon",
    "Source locally manufactured materials where possible to reduce transport emissions",
)
LONG_DISTANCE_SUGGESTIONS = (
    "Priority: Consolidate shipments to reduce number of deliveries",
    "Consider rail freight for long-distance material transport",
)
TRANSPORT_BASELINE_SUGGESTIONS = (
    "Optimize delivery routes to minimize travel distances",
    "Use electric or hybrid vehicles for material transport where feasible",
    "Implement a just-in-time delivery system to reduce unnecessary trips",
)
HIGH_ENERGY_SUGGESTIONS = (
    "Priority: Implement on-site renewable energy generation",
    "Use energy-efficient equipment and machinery on construction sites",
)
ENERGY_BASELINE_SUGGESTIONS = (
    "Switch to LED lighting for construction sites",
    "Use smart meters to monitor and manage energy usage",
    "Consider battery storage systems to optimize renewable energy use",
)
GENERAL_REPORT_SUGGESTIONS = (
    "Implement a comprehensive waste management plan focusing on reduction and recycling",
    "Train staff on sustainability best practices and energy-efficient operations",
    "Consider pursuing green building certification (e.g., Green Star, NABERS)",
    "Design buildings for disassembly to facilitate future material reuse",
    "Install water-efficient fixtures to reduce water consumption",
    "Incorporate passive design principles to reduce operational energy needs",
    "Use low-VOC paints and finishes to improve indoor air quality",
    "Implement a sustainable procurement policy for all materials and services",
)

# Categorised suggestions
GENERAL_SUGGESTIONS = (
    "Plan for material reuse and recycling at the end of the building lifecycle",
    "Consider lifecycle assessment in material selection",
    "Implement a waste management plan to minimize landfill waste",
    "Design for disassembly to enable future material recovery",
    "Consider using Building Information Modeling (BIM) for optimizing material use",
    "Engage with suppliers on their sustainability commitments",
)


def is_priority(suggestion: str) -> bool:
    """True for suggestions flagged with the priority prefix."""
    return suggestion.startswith(PRIORITY_PREFIX)


def _mentions(text: str, *keywords: str) -> bool:
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def _material_mentions(material: Material, *keywords: str) -> bool:
    return _mentions(material.name, *keywords) or _mentions(material.category, *keywords)


# ---------------------------------------------------------------------------
# Report suggestions
# ---------------------------------------------------------------------------


def generate_sustainability_suggestions(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> List[str]:
    """Flat suggestion list embedded in every report.

    Domain suggestions are emitted only for domains with data. When fewer
    than ten result, the general suggestions are appended.
    """
    suggestions: List[str] = []

    if materials:
        if any(_mentions(m.name, "concrete") for m in materials):
            suggestions.extend(CONCRETE_SUGGESTIONS)
        if any(_mentions(m.name, "steel") for m in materials):
            suggestions.extend(STEEL_SUGGESTIONS)
        suggestions.extend(MATERIAL_BASELINE_SUGGESTIONS)

    if transport:
        if any(t.distance > LONG_DISTANCE_KM for t in transport):
            suggestions.extend(LONG_DISTANCE_SUGGESTIONS)
        suggestions.extend(TRANSPORT_BASELINE_SUGGESTIONS)

    if energy:
        if any(e.quantity > HIGH_ENERGY_QUANTITY for e in energy):
            suggestions.extend(HIGH_ENERGY_SUGGESTIONS)
        suggestions.extend(ENERGY_BASELINE_SUGGESTIONS)

    if len(suggestions) < MIN_REPORT_SUGGESTIONS:
        suggestions.extend(GENERAL_REPORT_SUGGESTIONS)

    return suggestions


def priority_suggestions(suggestions: Iterable[str]) -> List[str]:
    """Priority suggestions in their original order."""
    return [s for s in suggestions if is_priority(s)]


# ---------------------------------------------------------------------------
# Categorised suggestions
# ---------------------------------------------------------------------------


def _material_suggestions(materials: Sequence[Material]) -> List[str]:
    if not materials:
        return []

    suggestions = [
        "Source materials locally to reduce embodied carbon",
        "Consider using certified sustainable materials",
    ]

    concrete = [m for m in materials if _material_mentions(m, "concrete")]
    if concrete:
        if sum(m.quantity for m in concrete) > CONCRETE_PRIORITY_QUANTITY:
            suggestions.append(CONCRETE_SUGGESTIONS[0])
        else:
            suggestions.append("Consider using geopolymer or low-carbon concrete alternatives")
        suggestions.append("Optimize concrete mix design to reduce cement content")

    steel = [m for m in materials if _material_mentions(m, "steel")]
    if steel:
        suggestions.append("Use recycled steel products where structural requirements permit")
        if sum(m.quantity for m in steel) > STEEL_PRIORITY_QUANTITY:
            suggestions.append("Priority: Source steel from electric arc furnace production")

    if any(_material_mentions(m, "wood", "timber") for m in materials):
        suggestions.append("Use FSC-certified timber products")
        suggestions.append("Consider engineered wood products like cross-laminated timber (CLT)")

    if any(_material_mentions(m, "insulation") for m in materials):
        suggestions.append("Select insulation materials with low embodied carbon")
        suggestions.append("Consider natural insulation materials like wool, cellulose, or hemp")

    return suggestions


def _transport_suggestions(transport: Sequence[TransportItem]) -> List[str]:
    if not transport:
        return []

    suggestions = ["Optimize delivery schedules to reduce empty return trips"]
    if sum(t.distance for t in transport) > LONG_DISTANCE_KM:
        suggestions.append("Priority: Source materials locally to reduce transportation emissions")

    has_truck = any(_mentions(t.type, "truck") for t in transport)
    has_train = any(_mentions(t.type, "train", "rail") for t in transport)
    has_ship = any(_mentions(t.type, "ship", "sea") for t in transport)

    if has_truck:
        suggestions.append("Consider using biodiesel or electric trucks for material delivery")
        suggestions.append("Ensure trucks are fully loaded to maximize transport efficiency")
    if has_train:
        suggestions.append("Increase the proportion of materials transported by rail")
    if has_ship:
        suggestions.append("Select shipping companies with newer, more efficient vessels")
    if has_truck and not has_train and not has_ship:
        suggestions.append("Consider rail transport as an alternative to trucks for long distances")

    return suggestions


def _energy_suggestions(energy: Sequence[EnergyItem]) -> List[str]:
    if not energy:
        return []

    suggestions = [
        "Implement energy monitoring systems on construction sites",
        "Turn off equipment when not in use to reduce energy consumption",
    ]

    electricity = [e for e in energy if _mentions(e.source, "electricity", "grid")]
    if electricity:
        if sum(e.quantity for e in electricity) > ELECTRICITY_PRIORITY_QUANTITY:
            suggestions.append("Priority: Switch to certified GreenPower or renewable energy")
        else:
            suggestions.append("Consider switching to certified GreenPower or renewable energy")

    if any(_mentions(e.source, "diesel") for e in energy):
        suggestions.append("Use biodiesel blends in construction equipment")
        suggestions.append("Consider hybrid or electric alternatives for diesel equipment")

    if any(_mentions(e.source, "gas") for e in energy):
        suggestions.append("Evaluate electric alternatives to natural gas heating")
        suggestions.append(
            "Install high-efficiency gas heaters if electric alternatives are not feasible"
        )

    return suggestions


def generate_suggestions(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> SuggestionResult:
    """Categorised, de-duplicated suggestions with priority items first.

    ``metadata`` counts every suggestion produced per category (before
    de-duplication) plus the final ``count``.
    """
    counts: Dict[str, int] = {
        "material": 0, "transport": 0, "energy": 0, "general": 0, "priority": 0,
    }
    priority: Dict[str, None] = {}
    regular: Dict[str, None] = {}
    per_category: Dict[str, Dict[str, None]] = {
        "material": {}, "transport": {}, "energy": {}, "general": {},
    }

    generated = (
        ("material", _material_suggestions(materials)),
        ("transport", _transport_suggestions(transport)),
        ("energy", _energy_suggestions(energy)),
        ("general", list(GENERAL_SUGGESTIONS)),
    )
    for category, items in generated:
        for suggestion in items:
            if is_priority(suggestion):
                priority[suggestion] = None
                counts["priority"] += 1
            else:
                regular[suggestion] = None
                per_category[category][suggestion] = None
                counts[category] += 1

    priority_list = list(priority)
    combined = priority_list + [s for s in regular if s not in priority]
    counts["count"] = len(combined)

    logger.debug("Generated %d suggestions (%d priority)", len(combined), len(priority_list))
    return SuggestionResult(
        suggestions=combined,
        priority_suggestions=priority_list,
        material_suggestions=list(per_category["material"]),
        transport_suggestions=list(per_category["transport"]),
        energy_suggestions=list(per_category["energy"]),
        general_suggestions=list(per_category["general"]),
        metadata=counts,
    )


# ---------------------------------------------------------------------------
# Plain text generators
# ---------------------------------------------------------------------------


def generate_material_suggestions_text(materials: Sequence[Material]) -> List[str]:
    """Alternatives for the three highest-impact materials plus general advice."""
    if not materials:
        return ["Consider using low-carbon materials to reduce embodied carbon."]

    impact: Dict[str, float] = {}
    for m in materials:
        # later records with the same name replace earlier ones
        impact[m.name] = m.carbon_footprint * (m.quantity or 1)
    ranked = sorted(impact.items(), key=lambda item: item[1], reverse=True)

    suggestions = [
        f"Consider lower-carbon alternatives for {name}."
        for name, _ in ranked[:TOP_IMPACT_MATERIALS]
    ]
    suggestions.extend([
        "Source materials locally to reduce transport emissions.",
        "Prioritize materials with high recycled content.",
        "Select materials that can be easily disassembled and reused.",
    ])
    return suggestions


def generate_transport_suggestions_text(transport: Sequence[TransportItem]) -> List[str]:
    if not transport:
        return ["Plan efficient transport routes to minimize emissions."]

    suggestions: List[str] = []
    if any(t.type == "air" for t in transport):
        suggestions.append("Replace air transport with sea or rail where possible.")
    if any(t.type == "road" for t in transport):
        suggestions.append("Optimize road transport routes to minimize distance.")
        suggestions.append(
            "Consider using electric or hybrid vehicles for short-distance transport."
        )
    suggestions.append("Consolidate shipments to reduce the number of trips.")
    suggestions.append("Implement a local procurement strategy to minimize transport distances.")
    return suggestions


def generate_energy_suggestions_text(energy: Sequence[EnergyItem]) -> List[str]:
    if not energy:
        return ["Implement renewable energy sources for construction operations."]

    if any(e.source in ("solar", "wind", "battery") for e in energy):
        suggestions = ["Expand renewable energy capacity to cover more site operations."]
    else:
        suggestions = [
            "Implement solar power for site operations.",
            "Consider battery storage to optimize energy use.",
        ]
    suggestions.extend([
        "Use energy-efficient equipment and machinery.",
        "Implement an energy management system to track and optimize usage.",
        "Train site personnel on energy-efficient practices.",
    ])
    return suggestions


def generate_comprehensive_suggestions_text(
    materials: Sequence[Material],
    transport: Sequence[TransportItem],
    energy: Sequence[EnergyItem],
) -> List[str]:
    """All domain text suggestions plus design advice, duplicates removed."""
    suggestions = (
        generate_material_suggestions_text(materials)
        + generate_transport_suggestions_text(transport)
        + generate_energy_suggestions_text(energy)
        + [
            "Design buildings for optimal energy performance.",
            "Implement a construction waste management plan.",
            "Consider circular economy principles in project planning.",
        ]
    )
    return list(dict.fromkeys(suggestions))


__all__ = [
    "PRIORITY_PREFIX",
    "is_priority",
    "generate_sustainability_suggestions",
    "priority_suggestions",
    "generate_suggestions",
    "generate_material_suggestions_text",
    "generate_transport_suggestions_text",
    "generate_energy_suggestions_text",
    "generate_comprehensive_suggestions_text",
]
