# -*- coding: utf-8 -*-
"""
Sustainability Metrics & Lifecycle Modeling Engine
==================================================

Pure, stateless calculators that turn construction material, transport and
energy line items into sustainability metrics and reports:

- Material, transport and energy metrics with route, opportunity and
  circularity analyses
- Six-stage cradle-to-grave lifecycle assessment with hotspot detection
- Circular economy scoring and recommendations
- Discounted lifecycle cost analysis with sensitivity estimation
- Basic, detailed and comprehensive sustainability reports
- Request validation with a data completeness gate
- SHA-256 provenance and Prometheus metrics at the service boundary
- Thread-safe configuration with SUSTAINABILITY_ENGINE_ env prefix

Key Components:
    - material_metrics / transport_metrics / energy_metrics: domain calculators
    - lifecycle: LifecycleAssessment engine
    - circular_economy: circular economy engine
    - cost_analysis: lifecycle cost analysis engine
    - report_generation / suggestions: report assembler
    - validation: raw request -> typed records
    - service: SustainabilityService facade
    - config: EngineConfig with SUSTAINABILITY_ENGINE_ env prefix

Example:
    >>> from sustainability_engine import calculate_lifecycle_cost_analysis
    >>> lcca = calculate_lifecycle_cost_analysis({
    ...     "initialCost": 1000, "operationalCostAnnual": 100,
    ...     "maintenanceCostAnnual": 50, "endOfLifeCost": 0, "lifespan": 1,
    ...     "discountRate": 0, "inflationRate": 0, "energyCostEscalation": 0,
    ... })
    >>> print(lcca.total_lifecycle_cost)  # 1150.0
"""

__version__ = "0.3.0"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
from sustainability_engine.config import (
    EngineConfig,
    get_config,
    reset_config,
    set_config,
)

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
from sustainability_engine.models import (
    CircularEconomyInput,
    CostParameters,
    EnergyItem,
    LifecycleInput,
    Material,
    ReportFormat,
    ReportRequestOptions,
    SuggestionsResponse,
    SustainabilityReport,
    TransportItem,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
from sustainability_engine.exceptions import (
    ConfigurationError,
    PayloadValidationError,
    SustainabilityEngineError,
)

# ---------------------------------------------------------------------------
# Engines
# ---------------------------------------------------------------------------
from sustainability_engine.material_metrics import calculate_detailed_material_metrics
from sustainability_engine.transport_metrics import calculate_detailed_transport_metrics
from sustainability_engine.energy_metrics import calculate_detailed_energy_metrics
from sustainability_engine.lifecycle import calculate_lifecycle_assessment
from sustainability_engine.circular_economy import (
    calculate_circular_economy_metrics,
    generate_circular_economy_recommendations,
)
from sustainability_engine.cost_analysis import calculate_lifecycle_cost_analysis
from sustainability_engine.report_generation import (
    calculate_data_completeness,
    generate_sustainability_report,
)
from sustainability_engine.suggestions import generate_suggestions

# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------
from sustainability_engine.service import SustainabilityService, get_service

__all__ = [
    "__version__",
    # Configuration
    "EngineConfig",
    "get_config",
    "set_config",
    "reset_config",
    # Models
    "Material",
    "TransportItem",
    "EnergyItem",
    "LifecycleInput",
    "CircularEconomyInput",
    "CostParameters",
    "ReportFormat",
    "ReportRequestOptions",
    "SustainabilityReport",
    "SuggestionsResponse",
    # Exceptions
    "SustainabilityEngineError",
    "PayloadValidationError",
    "ConfigurationError",
    # Engines
    "calculate_detailed_material_metrics",
    "calculate_detailed_transport_metrics",
    "calculate_detailed_energy_metrics",
    "calculate_lifecycle_assessment",
    "calculate_circular_economy_metrics",
    "generate_circular_economy_recommendations",
    "calculate_lifecycle_cost_analysis",
    "calculate_data_completeness",
    "generate_sustainability_report",
    "generate_suggestions",
    # Service
    "SustainabilityService",
    "get_service",
]
