# -*- coding: utf-8 -*-
"""
Circular Economy Engine - Sustainability Metrics & Lifecycle Modeling Engine

Scores how well project materials are kept in use and turns weak scores
into prioritised recommendations. Also computes a material-level
circularity index directly from material records.

Defaults (absent input -> value):
    material_recycled_content 0.3, material_reuse_rate 0.4,
    material_recyclability 0.6, product_lifespan 15 years,
    waste_recycling_rate 0.6, design_for_disassembly 0.5,
    repairability_score 0.6, biodegradable_content 0.2,
    byproduct_synergy_potential 0.4

Composite Scores:
    closed_loop       = 0.6 * recyclability + 0.4 * disassembly
    circularity_index = 0.3 * recycled + 0.3 * recyclability + 0.2 * reuse
                        + 0.1 * biodegradable + 0.1 * byproduct_synergy
    waste_diversion   = 0.8 * waste_recycling + 0.2 * biodegradable
    remanufacturing   = 0.5 * disassembly + 0.5 * repairability
    procurement       = 0.7 * recycled + 0.3 * reuse

Material Circularity Index (0-100):
    input  = 0.4 * recycled + 0.4 * renewable + 0.2 * reuse
    use    = 0.6 * lifespan + 0.4 * intensity
    output = 0.5 * recyclability + 0.3 * biodegradability + 0.2 * (1 - waste)
    index  = (0.3 * input + 0.2 * use + 0.5 * output) * 100

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sustainability_engine import constants as c
from sustainability_engine.models import (
    CircularEconomyInput,
    CircularEconomyMetrics,
    CircularEconomyRecommendation,
    CircularityInputFactors,
    CircularityOutputFactors,
    CircularityUseFactors,
    Material,
    MaterialCircularityIndex,
)

logger = logging.getLogger(__name__)


def _weighted(values: Mapping[str, float], weights: Mapping[str, float]) -> float:
    return sum(values[name] * weight for name, weight in weights.items())


def resolve_circular_values(
    data: Union[CircularEconomyInput, Mapping[str, Any], None],
) -> Dict[str, float]:
    """Return the nine circularity inputs with absent values defaulted."""
    if data is None:
        supplied = CircularEconomyInput()
    elif isinstance(data, CircularEconomyInput):
        supplied = data
    else:
        supplied = CircularEconomyInput.model_validate(dict(data))

    values: Dict[str, float] = {}
    for name, default in c.CIRCULAR_DEFAULTS.items():
        value = getattr(supplied, name)
        values[name] = default if value is None else value
    return values


def calculate_circular_economy_metrics(
    data: Union[CircularEconomyInput, Mapping[str, Any], None] = None,
) -> CircularEconomyMetrics:
    """Compute circular economy scores from (possibly partial) inputs."""
    v = resolve_circular_values(data)
    metrics = CircularEconomyMetrics(
        resource_reuse_rate=v["material_reuse_rate"],
        waste_recycling_rate=v["waste_recycling_rate"],
        product_lifespan=v["product_lifespan"],
        closed_loop_potential=_weighted(v, c.CLOSED_LOOP_WEIGHTS),
        material_circularity_index=_weighted(v, c.MCI_WEIGHTS),
        repairability_score=v["repairability_score"],
        remanufacturing_potential=_weighted(v, c.REMANUFACTURING_WEIGHTS),
        biodegradable_content=v["biodegradable_content"],
        recycled_content_rate=v["material_recycled_content"],
        waste_diversion_rate=_weighted(v, c.WASTE_DIVERSION_WEIGHTS),
        byproduct_synergy_potential=v["byproduct_synergy_potential"],
        circular_procurement_rate=_weighted(v, c.CIRCULAR_PROCUREMENT_WEIGHTS),
        design_for_disassembly=v["design_for_disassembly"],
    )
    logger.debug(
        "Circular economy: mci=%.3f closed_loop=%.3f",
        metrics.material_circularity_index, metrics.closed_loop_potential,
    )
    return metrics


def generate_circular_economy_recommendations(
    metrics: CircularEconomyMetrics,
) -> List[CircularEconomyRecommendation]:
    """Recommend actions for every score below its threshold.

    At least one recommendation is always returned: when fewer than three
    rules fire, a material flow analysis is appended.
    """
    recommendations: List[CircularEconomyRecommendation] = []
    for metric, threshold, text, impact, difficulty, timeframe, benefits in (
        c.CIRCULAR_RECOMMENDATION_RULES
    ):
        value = getattr(metrics, metric)
        if metric in c.CIRCULAR_POSITIVE_ONLY_METRICS and not value:
            continue
        if value < threshold:
            recommendations.append(CircularEconomyRecommendation(
                recommendation=text,
                impact=impact,
                implementation_difficulty=difficulty,
                timeframe=timeframe,
                potential_benefits=list(benefits),
            ))

    if len(recommendations) < c.MIN_CIRCULAR_RECOMMENDATIONS:
        text, impact, difficulty, timeframe, benefits = c.CIRCULAR_FALLBACK_RECOMMENDATION
        recommendations.append(CircularEconomyRecommendation(
            recommendation=text,
            impact=impact,
            implementation_difficulty=difficulty,
            timeframe=timeframe,
            potential_benefits=list(benefits),
        ))
    return recommendations


def calculate_material_circularity_index(
    materials: Optional[Sequence[Material]],
) -> MaterialCircularityIndex:
    """Three-tier (input / use / output) circularity index for materials."""
    if not materials:
        return MaterialCircularityIndex()

    n = len(materials)

    recycled = sum(
        m.recycled_content / 100 for m in materials if m.recycled_content is not None
    ) / n
    renewable = sum(
        m.renewable_content / 100 for m in materials if m.renewable_content is not None
    ) / n

    reuse_total = 0.0
    lifespan_total = 0.0
    intensity_total = 0.0
    for m in materials:
        reuse = c.MCI_MODULAR_REUSE_BONUS if m.modular is True else 0.0
        if m.lifespan is not None:
            reuse += min(c.MCI_LIFESPAN_REUSE_CAP, m.lifespan / 100)
        if m.recyclability is not None:
            reuse += m.recyclability / 100 * 0.3
        reuse_total += reuse

        if m.lifespan is not None:
            lifespan_total += min(1.0, m.lifespan / c.MCI_REFERENCE_LIFESPAN)
        else:
            lifespan_total += c.MCI_DEFAULT_LIFESPAN_FACTOR

        intensity = 0.5
        if m.embodied_carbon is not None:
            intensity += max(0.0, (2 - m.embodied_carbon) / 2) * 0.3
        if m.strength is not None and m.density is not None:
            intensity += min(0.2, m.strength / m.density / 1000)
        intensity_total += intensity

    reuse_factor = reuse_total / n
    lifespan_factor = lifespan_total / n
    intensity_factor = intensity_total / n

    recyclability = sum(
        m.recyclability / 100 for m in materials if m.recyclability is not None
    ) / n
    biodegradability = sum(1 for m in materials if m.biodegradable is True) / n
    waste = 1 - (recyclability * 0.7 + biodegradability * 0.3)

    w_in, w_use, w_out = c.MCI_INPUT_WEIGHTS, c.MCI_USE_WEIGHTS, c.MCI_OUTPUT_WEIGHTS
    input_score = (
        recycled * w_in["recycled"]
        + renewable * w_in["renewable"]
        + reuse_factor * w_in["reuse"]
    )
    use_score = lifespan_factor * w_use["lifespan"] + intensity_factor * w_use["intensity"]
    output_score = (
        recyclability * w_out["recyclability"]
        + biodegradability * w_out["biodegradability"]
        + (1 - waste) * w_out["waste_avoidance"]
    )

    tiers = c.MCI_TIER_WEIGHTS
    index = (
        input_score * tiers["input"]
        + use_score * tiers["use"]
        + output_score * tiers["output"]
    ) * 100

    return MaterialCircularityIndex(
        circularity_index=index,
        input_factors=CircularityInputFactors(
            recycled_content_factor=recycled,
            renewable_content_factor=renewable,
            reuse_factor=reuse_factor,
        ),
        use_factors=CircularityUseFactors(
            lifespan_factor=lifespan_factor,
            intensity_factor=intensity_factor,
        ),
        output_factors=CircularityOutputFactors(
            recyclability_factor=recyclability,
            biodegradability_factor=biodegradability,
            waste_factor=waste,
        ),
    )


def derive_circular_economy_input(
    materials: Sequence[Material],
) -> CircularEconomyInput:
    """Average material-level signals into circular economy inputs.

    Only ratios that some material actually reports are set; the rest are
    left for the engine defaults.
    """
    def _mean_ratio(values: List[float]) -> Optional[float]:
        return sum(values) / len(values) / 100 if values else None

    recycled = [m.recycled_content for m in materials if m.recycled_content is not None]
    recyclability = [m.recyclability for m in materials if m.recyclability is not None]
    lifespans = [m.lifespan for m in materials if m.lifespan is not None]
    flagged = [m for m in materials if m.biodegradable is not None]
    modular = [m for m in materials if m.modular is not None]

    return CircularEconomyInput(
        material_recycled_content=_mean_ratio(recycled),
        material_recyclability=_mean_ratio(recyclability),
        product_lifespan=sum(lifespans) / len(lifespans) if lifespans else None,
        biodegradable_content=(
            sum(1 for m in flagged if m.biodegradable) / len(flagged) if flagged else None
        ),
        design_for_disassembly=(
            sum(1 for m in modular if m.modular) / len(modular) if modular else None
        ),
    )


__all__ = [
    "resolve_circular_values",
    "calculate_circular_economy_metrics",
    "generate_circular_economy_recommendations",
    "calculate_material_circularity_index",
    "derive_circular_economy_input",
]
