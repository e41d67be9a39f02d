# -*- coding: utf-8 -*-
"""
Lifecycle Cost Analysis Engine - Sustainability Metrics & Lifecycle Modeling Engine

Discounted lifecycle cost (LCCA) of a project with a cost breakdown and a
one-at-a-time sensitivity analysis. Absent parameters take defaults;
explicit zeros are honoured so that undiscounted analyses are possible.

Defaults:
    initial_cost 1,000,000; operational_cost_annual 50,000;
    maintenance_cost_annual 25,000; end_of_life_cost 100,000;
    lifespan 30 years; discount_rate 0.05; inflation_rate 0.02;
    energy_cost_escalation 0.03

Present Values (n = whole years of lifespan, r = real discount rate):
    r            = (1 + discount) / (1 + inflation) - 1
    operational  = sum_{y=1..n} op * (1 + escalation)^(y-1) / (1 + r)^y
    maintenance  = sum_{y=1..n} mt * (1 + inflation)^(y-1) / (1 + r)^y
    end_of_life  = eol / (1 + r)^lifespan
    total        = initial + operational + maintenance + end_of_life
    npv          = -total
    annualized   = total * r(1+r)^n / ((1+r)^n - 1)
                   (total / n when r == 0; total when n == 0)

Sensitivity (per parameter, normalised to [0, 1]):
    impact = min(1, |%change in total cost / %change in parameter| / 2)

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Union

from sustainability_engine import constants as c
from sustainability_engine.models import (
    CostBreakdownEntry,
    CostParameters,
    LifecycleCostAnalysis,
    SensitivityEntry,
)

logger = logging.getLogger(__name__)

CostInput = Union[CostParameters, Mapping[str, Any], None]


# ---------------------------------------------------------------------------
# Core present value arithmetic
# ---------------------------------------------------------------------------


def resolve_cost_parameters(data: CostInput) -> Dict[str, float]:
    """Return all eight cost parameters with absent values defaulted."""
    if data is None:
        supplied = CostParameters()
    elif isinstance(data, CostParameters):
        supplied = data
    else:
        supplied = CostParameters.model_validate(dict(data))

    params: Dict[str, float] = {}
    for name, default in c.COST_DEFAULTS.items():
        value = getattr(supplied, name)
        params[name] = default if value is None else value
    return params


def real_discount_rate(discount_rate: float, inflation_rate: float) -> float:
    """Fisher real rate: ``(1 + d) / (1 + i) - 1``."""
    return (1 + discount_rate) / (1 + inflation_rate) - 1


def _present_values(params: Mapping[str, float]) -> Dict[str, float]:
    rate = real_discount_rate(params["discount_rate"], params["inflation_rate"])
    lifespan = params["lifespan"]
    years = int(math.floor(lifespan))

    operational = 0.0
    maintenance = 0.0
    for year in range(1, years + 1):
        discount = (1 + rate) ** year
        operational += (
            params["operational_cost_annual"]
            * (1 + params["energy_cost_escalation"]) ** (year - 1)
            / discount
        )
        maintenance += (
            params["maintenance_cost_annual"]
            * (1 + params["inflation_rate"]) ** (year - 1)
            / discount
        )

    end_of_life = params["end_of_life_cost"] / (1 + rate) ** lifespan
    initial = params["initial_cost"]
    return {
        "rate": rate,
        "years": years,
        "initial": initial,
        "operational": operational,
        "maintenance": maintenance,
        "end_of_life": end_of_life,
        "total": initial + operational + maintenance + end_of_life,
    }


def calculate_total_lifecycle_cost(data: CostInput) -> float:
    """Total discounted lifecycle cost for the (defaulted) parameters."""
    return _present_values(resolve_cost_parameters(data))["total"]


def _annualized_cost(total: float, rate: float, years: int) -> float:
    if years <= 0:
        return total
    if rate == 0:
        return total / years
    growth = (1 + rate) ** years
    denominator = growth - 1
    if denominator == 0:
        return total / years
    return total * rate * growth / denominator


# ---------------------------------------------------------------------------
# Sensitivity
# ---------------------------------------------------------------------------


def calculate_sensitivity(
    params: Mapping[str, float],
    parameter: str,
    base_value: float,
    delta: float,
) -> float:
    """Normalised elasticity of total cost to a change in one parameter.

    Args:
        params: Fully resolved cost parameters.
        parameter: Name of the parameter to perturb.
        base_value: Current value of the parameter.
        delta: Change applied to the parameter.

    Returns:
        Impact in [0, 1]; 0 when the parameter does not change.
    """
    base_cost = _present_values(params)["total"]
    modified = dict(params)

    if base_value == 0:
        # percentage change undefined; use the absolute shift in cost
        if abs(delta) < c.SENSITIVITY_EPSILON:
            return 0.0
        modified[parameter] = delta
        modified_cost = _present_values(modified)["total"]
        if abs(base_cost) < c.SENSITIVITY_EPSILON:
            return 1.0 if modified_cost > 0 else 0.0
        return min(1.0, abs(modified_cost - base_cost) / abs(base_cost))

    modified[parameter] = base_value + delta
    modified_cost = _present_values(modified)["total"]

    param_change = delta / base_value
    if abs(param_change) < c.SENSITIVITY_EPSILON:
        return 0.0

    if abs(base_cost) < c.SENSITIVITY_EPSILON:
        return 1.0 if modified_cost > 0 else 0.0

    cost_change = (modified_cost - base_cost) / base_cost
    elasticity = abs(cost_change / param_change)
    return min(1.0, elasticity / c.SENSITIVITY_ELASTICITY_SCALE)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_lifecycle_cost_analysis(data: CostInput = None) -> LifecycleCostAnalysis:
    """Run the full lifecycle cost analysis.

    Args:
        data: CostParameters, or a mapping with snake_case or camelCase keys.

    Returns:
        LifecycleCostAnalysis with four breakdown entries and eight
        sensitivity entries.
    """
    params = resolve_cost_parameters(data)
    pv = _present_values(params)
    total = pv["total"]

    breakdown: List[CostBreakdownEntry] = [
        CostBreakdownEntry(
            category=category,
            percentage=(pv[key] / total * 100) if total else 0.0,
            npv=pv[key],
        )
        for category, key in c.COST_CATEGORIES
    ]

    sensitivity: List[SensitivityEntry] = []
    for label, name, delta, relative in c.SENSITIVITY_PARAMETERS:
        base_value = params[name]
        step = base_value * delta if relative else delta
        sensitivity.append(SensitivityEntry(
            parameter=label,
            impact=calculate_sensitivity(params, name, base_value, step),
        ))

    analysis = LifecycleCostAnalysis(
        initial_cost=pv["initial"],
        operational_cost=pv["operational"],
        maintenance_cost=pv["maintenance"],
        end_of_life_cost=pv["end_of_life"],
        total_lifecycle_cost=total,
        net_present_value=-total,
        annualized_cost=_annualized_cost(total, pv["rate"], pv["years"]),
        cost_breakdown=breakdown,
        sensitivity_analysis=sensitivity,
    )
    logger.debug(
        "Lifecycle cost: total=%.2f annualized=%.2f real_rate=%.4f",
        total, analysis.annualized_cost, pv["rate"],
    )
    return analysis


__all__ = [
    "resolve_cost_parameters",
    "real_discount_rate",
    "calculate_total_lifecycle_cost",
    "calculate_sensitivity",
    "calculate_lifecycle_cost_analysis",
]
