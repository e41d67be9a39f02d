# -*- coding: utf-8 -*-
"""
Sustainability Engine Data Models - Sustainability Metrics & Lifecycle Modeling Engine

Pydantic v2 data models for the sustainability engine. Input records accept
both snake_case field names and the camelCase names used by JSON clients.
Every output value object is frozen; engines build a fresh instance per call.

Models:
    - Enums: ReportFormat, Availability, Feasibility, ImplementationComplexity
    - Input records: Material, TransportItem, EnergyItem
    - Engine inputs: LifecycleInput, CircularEconomyInput, CostParameters
    - Material outputs: MaterialMetrics, MaterialAlternative,
      CategoryAlternative, MaterialCircularityIndex
    - Transport outputs: TransportMetrics, HighEmissionRoute,
      RouteOptimizationPotential, TransportLifecycleEmissions
    - Energy outputs: EnergyMetrics, EnergyOpportunity,
      PeakDemandReductionPotential, EnergyLifecycleAssessment
    - Lifecycle: LifecycleStage, LifecycleAssessment
    - Circular economy: CircularEconomyMetrics, CircularEconomyRecommendation
    - Cost: CostBreakdownEntry, SensitivityEntry, LifecycleCostAnalysis
    - Report: MaterialRecommendation, TransportRecommendation,
      EnergyRecommendation, LifecycleAnalysis, ImplementationStep,
      SustainabilityScore, SuggestionResult, ReportRequestOptions,
      SustainabilityReport, SuggestionsResponse

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


def _utcnow() -> datetime:
    """Return current UTC datetime with microseconds zeroed."""
    return datetime.now(timezone.utc).replace(microsecond=0)


# =============================================================================
# Base classes
# =============================================================================


class _InputModel(BaseModel):
    """Base for caller-supplied records (camelCase or snake_case keys)."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }


class _EngineInput(BaseModel):
    """Base for engine parameter objects; unknown keys are rejected."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "forbid",
    }


class _ValueObject(BaseModel):
    """Base for immutable engine outputs."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
        "extra": "forbid",
    }


# =============================================================================
# Enumerations
# =============================================================================


class ReportFormat(str, Enum):
    """Depth of a generated sustainability report."""
    BASIC = "basic"
    DETAILED = "detailed"
    COMPREHENSIVE = "comprehensive"


class Availability(str, Enum):
    """Market availability of a recommended alternative."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Feasibility and implementation complexity share the same three levels.
Feasibility = Availability
ImplementationComplexity = Availability


# =============================================================================
# Input records
# =============================================================================


class Material(_InputModel):
    """A construction material line item.

    ``recycled_content``, ``recyclability`` and ``renewable_content`` are
    percentages in [0, 100]. ``embodied_carbon`` is used by the circularity
    and alternative-generation calculators; ``carbon_footprint`` (per unit)
    drives report-level emissions.
    """

    id: str = Field(default="", description="Material identifier")
    name: str = Field(..., min_length=1, description="Material name")
    category: str = Field(default="other", description="Material category")
    carbon_footprint: float = Field(
        default=1.0, ge=0.0, description="Carbon footprint per unit",
    )
    quantity: float = Field(default=1.0, description="Quantity used")
    unit: str = Field(default="kg", description="Unit of quantity")
    recyclable: Optional[bool] = Field(None, description="Material is recyclable")
    recycled_content: Optional[float] = Field(
        None, ge=0.0, le=100.0, description="Recycled content percentage",
    )
    locally_sourced: Optional[bool] = Field(None, description="Sourced locally")
    embodied_carbon: Optional[float] = Field(
        None, ge=0.0, description="Embodied carbon factor",
    )
    water_footprint: Optional[float] = Field(
        None, ge=0.0, description="Water footprint per unit",
    )
    recyclability: Optional[float] = Field(
        None, ge=0.0, le=100.0, description="Recyclability percentage",
    )
    renewable_content: Optional[float] = Field(
        None, ge=0.0, le=100.0, description="Renewable content percentage",
    )
    biodegradable: Optional[bool] = Field(None, description="Material is biodegradable")
    lifespan: Optional[float] = Field(None, ge=0.0, description="Service life in years")
    sustainability_score: Optional[float] = Field(
        None, ge=0.0, le=100.0, description="Third-party sustainability score",
    )
    certifications: Optional[List[str]] = Field(
        None, description="Sustainability certifications held",
    )
    alternatives: Optional[List[str]] = Field(
        None, description="Known lower-impact alternatives",
    )
    cost: Optional[float] = Field(None, ge=0.0, description="Unit cost")
    modular: Optional[bool] = Field(None, description="Modular / demountable product")
    strength: Optional[float] = Field(None, ge=0.0, description="Material strength")
    density: Optional[float] = Field(None, gt=0.0, description="Material density")


class TransportItem(_InputModel):
    """A transport leg moving materials to site."""

    id: str = Field(default="", description="Transport identifier")
    type: str = Field(default="road", description="Transport mode")
    distance: float = Field(..., ge=0.0, description="Distance in km")
    weight: float = Field(default=1.0, ge=0.0, description="Payload weight")
    fuel_type: str = Field(default="diesel", description="Fuel type")
    emissions_factor: float = Field(
        default=0.1, ge=0.0, description="Emissions per unit distance",
    )
    carbon_footprint: Optional[float] = Field(None, ge=0.0, description="Measured footprint")
    is_electric: Optional[bool] = Field(None, description="Electric vehicle")
    route_optimization: Optional[bool] = Field(None, description="Route optimised")
    efficiency: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Fuel efficiency ratio",
    )
    idling_time: Optional[float] = Field(None, ge=0.0, description="Idling hours")
    operating_hours: Optional[float] = Field(None, ge=0.0, description="Operating hours")
    maintenance_status: Optional[str] = Field(None, description="Maintenance rating")
    noise_level: Optional[float] = Field(None, ge=0.0, description="Noise level")
    air_quality_impact: Optional[float] = Field(None, description="Air quality impact")
    peak_time: Optional[bool] = Field(None, description="Operates at peak time")
    frequent_stops: Optional[bool] = Field(None, description="Route has frequent stops")
    vehicle_size: Optional[str] = Field(None, description="Vehicle size class")
    vehicle_age: Optional[float] = Field(None, ge=0.0, description="Vehicle age in years")
    destinations: Optional[List[str]] = Field(None, description="Stops on the route")


class EnergyItem(_InputModel):
    """An energy supply line item.

    ``quantity`` is the billed amount used by the report assembler.
    ``consumption`` is the metered amount used by the energy calculators.
    """

    id: str = Field(default="", description="Energy identifier")
    source: str = Field(default="grid", description="Energy source")
    quantity: float = Field(..., description="Quantity consumed")
    unit: str = Field(default="kwh", description="Unit of quantity")
    emissions_factor: float = Field(
        default=0.5, ge=0.0, description="Emissions per unit",
    )
    consumption: Optional[float] = Field(None, ge=0.0, description="Metered consumption")
    renewable: Optional[bool] = Field(None, description="Renewable supply")
    carbon_intensity: Optional[float] = Field(None, ge=0.0, description="Carbon intensity")
    efficiency: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="End-use efficiency ratio",
    )
    peak_demand: Optional[float] = Field(
        None, ge=0.0, le=1.0, description="Peak demand ratio",
    )
    smart_monitoring: Optional[bool] = Field(None, description="Smart metering installed")
    demand_response: Optional[bool] = Field(None, description="Enrolled in demand response")
    backup_system: Optional[bool] = Field(None, description="Backup supply available")
    storage_capacity: Optional[float] = Field(None, ge=0.0, description="Storage capacity")
    time_of_use: Optional[str] = Field(None, description="Time-of-use pattern")
    cost_per_unit: Optional[float] = Field(None, ge=0.0, description="Cost per unit")


# =============================================================================
# Engine inputs
# =============================================================================


class LifecycleInput(_EngineInput):
    """Per-stage carbon, water and energy impacts; absent values are defaulted."""

    material_carbon_footprint: Optional[float] = None
    material_water_footprint: Optional[float] = None
    material_energy_consumption: Optional[float] = None
    transport_carbon_footprint: Optional[float] = None
    transport_water_footprint: Optional[float] = None
    transport_energy_consumption: Optional[float] = None
    energy_carbon_footprint: Optional[float] = None
    energy_water_footprint: Optional[float] = None
    energy_consumption: Optional[float] = None
    construction_carbon_footprint: Optional[float] = None
    construction_water_footprint: Optional[float] = None
    construction_energy_consumption: Optional[float] = None
    use_phase_carbon_footprint: Optional[float] = None
    use_phase_water_footprint: Optional[float] = None
    use_phase_energy_consumption: Optional[float] = None
    end_of_life_carbon_footprint: Optional[float] = None
    end_of_life_water_footprint: Optional[float] = None
    end_of_life_energy_consumption: Optional[float] = None


class CircularEconomyInput(_EngineInput):
    """Circularity ratios in [0, 1] plus product lifespan in years."""

    material_recycled_content: Optional[float] = Field(None, ge=0.0, le=1.0)
    material_reuse_rate: Optional[float] = Field(None, ge=0.0, le=1.0)
    material_recyclability: Optional[float] = Field(None, ge=0.0, le=1.0)
    product_lifespan: Optional[float] = Field(None, ge=0.0)
    waste_recycling_rate: Optional[float] = Field(None, ge=0.0, le=1.0)
    design_for_disassembly: Optional[float] = Field(None, ge=0.0, le=1.0)
    repairability_score: Optional[float] = Field(None, ge=0.0, le=1.0)
    biodegradable_content: Optional[float] = Field(None, ge=0.0, le=1.0)
    byproduct_synergy_potential: Optional[float] = Field(None, ge=0.0, le=1.0)


class CostParameters(_EngineInput):
    """Lifecycle cost inputs; ``None`` means "use the default"."""

    initial_cost: Optional[float] = None
    operational_cost_annual: Optional[float] = None
    maintenance_cost_annual: Optional[float] = None
    end_of_life_cost: Optional[float] = None
    lifespan: Optional[float] = Field(None, ge=0.0)
    discount_rate: Optional[float] = Field(None, gt=-1.0)
    inflation_rate: Optional[float] = Field(None, gt=-1.0)
    energy_cost_escalation: Optional[float] = Field(None, gt=-1.0)


# =============================================================================
# Material outputs
# =============================================================================


class MaterialMetrics(_ValueObject):
    """Aggregate statistics over a material list."""

    total_materials: int = 0
    sustainable_material_percentage: float = 0.0
    average_embodied_carbon: float = 0.0
    average_recycled_content: float = 0.0
    locally_sourced_percentage: float = 0.0
    high_impact_materials: List[str] = Field(default_factory=list)
    materials_by_category: Dict[str, int] = Field(default_factory=dict)
    certification_coverage: float = 0.0
    total_weight: Optional[float] = None
    carbon_intensity: Optional[float] = None
    water_intensity: Optional[float] = None
    resource_efficiency: float = 0.0
    circularity_potential: float = 0.0
    reuse_potential: float = 0.0
    recyclability_rate: float = 0.0
    biodegradable_percentage: float = 0.0
    average_lifespan: Optional[float] = None


class PotentialSavings(_ValueObject):
    """Fractional savings an alternative could deliver."""

    carbon: float
    cost: Optional[float] = None
    water: Optional[float] = None


class MaterialAlternative(_ValueObject):
    """Lower-impact alternatives for one high-embodied-carbon material."""

    material: str
    alternatives: List[str]
    potential_savings: PotentialSavings


class CategoryAlternative(_ValueObject):
    """A category-specific substitute product for a material."""

    id: str
    name: str
    alternative_to: str
    carbon_footprint: float
    sustainability_score: float
    carbon_reduction: float
    cost_difference: float
    availability: Availability
    recyclable: bool = True
    recycled_content: Optional[float] = None
    locally_sourced: Optional[bool] = None


class CircularityInputFactors(_ValueObject):
    recycled_content_factor: float = 0.0
    renewable_content_factor: float = 0.0
    reuse_factor: float = 0.0


class CircularityUseFactors(_ValueObject):
    lifespan_factor: float = 0.0
    intensity_factor: float = 0.0


class CircularityOutputFactors(_ValueObject):
    recyclability_factor: float = 0.0
    biodegradability_factor: float = 0.0
    waste_factor: float = 0.0


class MaterialCircularityIndex(_ValueObject):
    """Three-tier circularity index on a 0-100 scale."""

    circularity_index: float = 0.0
    input_factors: CircularityInputFactors = Field(default_factory=CircularityInputFactors)
    use_factors: CircularityUseFactors = Field(default_factory=CircularityUseFactors)
    output_factors: CircularityOutputFactors = Field(default_factory=CircularityOutputFactors)


# =============================================================================
# Transport outputs
# =============================================================================


class TransportMetrics(_ValueObject):
    """Aggregate statistics over a transport list."""

    total_transport_items: int = 0
    total_distance: float = 0.0
    average_emissions_factor: float = 0.0
    sustainable_transport_percentage: float = 0.0
    electric_vehicle_percentage: float = 0.0
    route_optimization_percentage: float = 0.0
    fuel_efficiency: float = 0.0
    transport_by_type: Dict[str, int] = Field(default_factory=dict)
    fuel_by_type: Dict[str, int] = Field(default_factory=dict)
    carbon_intensity: float = 0.0
    idling_time_percentage: Optional[float] = None
    maintenance_score: Optional[float] = None
    noise_impact: Optional[float] = None
    air_quality_impact: Optional[float] = None
    congestion_contribution: float = 0.0


class HighEmissionRoute(_ValueObject):
    origin: str
    destination: str
    distance: float
    emissions: float
    optimization_potential: float
    alternative_options: List[str]


class RouteOptimizationPotential(_ValueObject):
    overall_potential: float = 0.0
    fuel_savings_potential: float = 0.0
    time_savings_potential: float = 0.0
    emissions_reduction_potential: float = 0.0
    specific_recommendations: List[str] = Field(default_factory=list)


class TransportLifecycleEmissions(_ValueObject):
    operational_emissions: float = 0.0
    manufacturing_emissions: float = 0.0
    maintenance_emissions: float = 0.0
    disposal_emissions: float = 0.0
    total_lifecycle_emissions: float = 0.0
    hotspots: List[str] = Field(default_factory=list)


# =============================================================================
# Energy outputs
# =============================================================================


class EnergyMetrics(_ValueObject):
    """Aggregate statistics over an energy list."""

    total_energy_items: int = 0
    total_consumption: float = 0.0
    average_carbon_intensity: float = 0.0
    renewable_percentage: float = 0.0
    energy_efficiency: float = 0.0
    peak_demand_reduction: float = 0.0
    energy_by_source: Dict[str, float] = Field(default_factory=dict)
    energy_by_unit: Dict[str, float] = Field(default_factory=dict)
    cost_per_unit_average: Optional[float] = None
    storage_capacity: Optional[float] = None
    grid_dependency: Optional[float] = None
    smart_monitoring_percentage: Optional[float] = None
    demand_response_capability: Optional[float] = None
    backup_system_coverage: Optional[float] = None
    time_of_use_optimization: Optional[float] = None


class EnergyOpportunity(_ValueObject):
    area: str
    potential_savings: float
    investment_required: float
    payback_period: float
    implementation_complexity: str
    cobenefits: List[str]


class PeakDemandApproach(_ValueObject):
    approach: str
    potential_reduction: float
    implementation_cost: str
    complexity: str


class PeakDemandReductionPotential(_ValueObject):
    overall_potential: float = 0.0
    cost_savings_potential: float = 0.0
    implementation_approaches: List[PeakDemandApproach] = Field(default_factory=list)
    recommended_actions: List[str] = Field(default_factory=list)


class EnergyLifecycleAssessment(_ValueObject):
    generation_emissions: float = 0.0
    transmission_losses: float = 0.0
    end_use_efficiency: float = 0.0
    total_lifecycle_emissions: float = 0.0
    renewable_percentage: float = 0.0
    embodied_energy: float = 0.0
    hotspots: List[str] = Field(default_factory=list)
    improvement_potential: float = 0.0


# =============================================================================
# Lifecycle assessment
# =============================================================================


class LifecycleStage(_ValueObject):
    name: str
    carbon_footprint: float
    water_footprint: float
    energy_consumption: float
    description: str
    hotspots: List[str]
    improvement_potential: float


class LifecycleAssessment(_ValueObject):
    """Six-stage cradle-to-grave assessment with hotspots and metadata."""

    stages: List[LifecycleStage]
    total_carbon_footprint: float
    total_water_footprint: float
    total_energy_consumption: float
    hotspots: List[str] = Field(..., min_length=1)
    improvement_potential: float
    uncertainty_level: str
    data_quality: float
    functional_unit: str
    system_boundaries: List[str]
    allocation_method: str


# =============================================================================
# Circular economy
# =============================================================================


class CircularEconomyMetrics(_ValueObject):
    resource_reuse_rate: float
    waste_recycling_rate: float
    product_lifespan: float
    closed_loop_potential: float
    material_circularity_index: float
    repairability_score: float
    remanufacturing_potential: float
    biodegradable_content: float
    recycled_content_rate: float
    waste_diversion_rate: float
    byproduct_synergy_potential: float
    circular_procurement_rate: float
    design_for_disassembly: float


class CircularEconomyRecommendation(_ValueObject):
    recommendation: str
    impact: str
    implementation_difficulty: str
    timeframe: str
    potential_benefits: List[str]


# =============================================================================
# Lifecycle cost analysis
# =============================================================================


class CostBreakdownEntry(_ValueObject):
    category: str
    percentage: float
    npv: float


class SensitivityEntry(_ValueObject):
    parameter: str
    impact: float = Field(..., ge=0.0, le=1.0)


class LifecycleCostAnalysis(_ValueObject):
    """Discounted lifecycle cost with breakdown and sensitivity analysis."""

    initial_cost: float
    operational_cost: float
    maintenance_cost: float
    end_of_life_cost: float
    total_lifecycle_cost: float
    net_present_value: float
    annualized_cost: float
    cost_breakdown: List[CostBreakdownEntry]
    sensitivity_analysis: List[SensitivityEntry]


# =============================================================================
# Report
# =============================================================================


class MaterialRecommendation(_ValueObject):
    original_material: str
    recommended_alternative: str
    carbon_reduction: float
    cost_impact: float
    availability: Availability
    additional_benefits: List[str]


class TransportRecommendation(_ValueObject):
    current_mode: str
    recommended_mode: str
    distance: float
    carbon_reduction: float
    cost_impact: float
    feasibility: Feasibility


class EnergyRecommendation(_ValueObject):
    current_source: str
    recommended_source: str
    carbon_reduction: float
    cost_impact: float
    implementation_complexity: ImplementationComplexity


class LifecycleStageBreakdown(_ValueObject):
    """Percentage of lifecycle emissions per stage; sums to 100."""

    extraction: int
    manufacturing: int
    transportation: int
    construction: int
    operation: int
    end_of_life: int


class LifecycleAnalysis(_ValueObject):
    stages: LifecycleStageBreakdown
    total_lifecycle_emissions: int
    recommendations: List[str]


class ImplementationStep(_ValueObject):
    phase: str
    actions: List[str]
    estimated_timeframe: str
    estimated_cost_range: str
    estimated_carbon_savings: int


class SustainabilityScore(_ValueObject):
    overall: int = Field(..., ge=0, le=100)
    materials: int = Field(..., ge=0, le=100)
    transport: int = Field(..., ge=0, le=100)
    energy: int = Field(..., ge=0, le=100)


class SuggestionResult(_ValueObject):
    """Categorised suggestion lists with per-category counts."""

    suggestions: List[str]
    priority_suggestions: List[str]
    material_suggestions: List[str]
    transport_suggestions: List[str]
    energy_suggestions: List[str]
    general_suggestions: List[str]
    metadata: Dict[str, int]


class ReportRequestOptions(_InputModel):
    """Caller options controlling report depth and optional sections."""

    format: ReportFormat = ReportFormat.BASIC
    include_lifecycle_analysis: bool = False
    include_circular_economy: bool = False
    include_compliance_details: bool = False
    include_implementation_roadmap: bool = False
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    cost_parameters: Optional[CostParameters] = None


class SustainabilityReport(_ValueObject):
    """Assembled sustainability report."""

    generated_at: datetime = Field(default_factory=_utcnow)
    format: ReportFormat
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    suggestions: List[str]
    priority_suggestions: List[str]
    score: SustainabilityScore
    material_recommendations: Optional[List[MaterialRecommendation]] = None
    transport_recommendations: Optional[List[TransportRecommendation]] = None
    energy_recommendations: Optional[List[EnergyRecommendation]] = None
    life_cycle_analysis: Optional[LifecycleAnalysis] = None
    implementation_roadmap: Optional[List[ImplementationStep]] = None
    material_metrics: Optional[MaterialMetrics] = None
    transport_metrics: Optional[TransportMetrics] = None
    energy_metrics: Optional[EnergyMetrics] = None
    lifecycle_assessment: Optional[LifecycleAssessment] = None
    circular_economy_metrics: Optional[CircularEconomyMetrics] = None
    circular_economy_recommendations: Optional[List[CircularEconomyRecommendation]] = None
    lifecycle_cost_analysis: Optional[LifecycleCostAnalysis] = None
    provenance_hash: str = ""


class SuggestionsResponse(_ValueObject):
    """Response envelope returned by the service facade."""

    status_code: int = 200
    report: Optional[SustainabilityReport] = None
    completeness_score: float = 0.0
    suggestions_count: int = 0
    error: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        """Serialise to the JSON body a transport layer would send."""
        body: Dict[str, Any] = {
            "completenessScore": self.completeness_score,
            "suggestionsCount": self.suggestions_count,
        }
        if self.report is not None:
            body["report"] = self.report.model_dump(
                mode="json", by_alias=True, exclude_none=True,
            )
        if self.error is not None:
            body["error"] = self.error
        return body


__all__ = [
    "ReportFormat",
    "Availability",
    "Feasibility",
    "ImplementationComplexity",
    "Material",
    "TransportItem",
    "EnergyItem",
    "LifecycleInput",
    "CircularEconomyInput",
    "CostParameters",
    "MaterialMetrics",
    "PotentialSavings",
    "MaterialAlternative",
    "CategoryAlternative",
    "CircularityInputFactors",
    "CircularityUseFactors",
    "CircularityOutputFactors",
    "MaterialCircularityIndex",
    "TransportMetrics",
    "HighEmissionRoute",
    "RouteOptimizationPotential",
    "TransportLifecycleEmissions",
    "EnergyMetrics",
    "EnergyOpportunity",
    "PeakDemandApproach",
    "PeakDemandReductionPotential",
    "EnergyLifecycleAssessment",
    "LifecycleStage",
    "LifecycleAssessment",
    "CircularEconomyMetrics",
    "CircularEconomyRecommendation",
    "CostBreakdownEntry",
    "SensitivityEntry",
    "LifecycleCostAnalysis",
    "MaterialRecommendation",
    "TransportRecommendation",
    "EnergyRecommendation",
    "LifecycleStageBreakdown",
    "LifecycleAnalysis",
    "ImplementationStep",
    "SustainabilityScore",
    "SuggestionResult",
    "ReportRequestOptions",
    "SustainabilityReport",
    "SuggestionsResponse",
]
