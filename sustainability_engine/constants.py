# -*- coding: utf-8 -*-
"""
Calculation Constants - Sustainability Metrics & Lifecycle Modeling Engine

Every fixed weight, default, threshold and canned text used by the engines
lives in this module as a named table. Engines read from these tables only;
no numeric literal that carries domain meaning is hard-coded elsewhere.

Tables:
    - Lifecycle stage defaults, improvement weights and hotspot text
    - Circular economy defaults, weights and recommendation catalogue
    - Lifecycle cost defaults and sensitivity deltas
    - Material / transport / energy calculator weights
    - Energy efficiency opportunity catalogue
    - Report scoring, completeness and roadmap tables

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

from typing import Dict, List, Tuple

# ===========================================================================
# Lifecycle assessment
# ===========================================================================

#: (stage name, input prefix, description, hotspots, improvement weight)
#: in fixed cradle-to-grave order.
LIFECYCLE_STAGES: Tuple[Tuple[str, str, str, Tuple[str, ...], float], ...] = (
    (
        "Raw Material Extraction",
        "material",
        "Extraction and processing of raw materials",
        ("Energy-intensive extraction processes", "Water usage in processing"),
        0.4,
    ),
    (
        "Manufacturing",
        "energy",
        "Manufacturing and fabrication processes",
        ("Energy consumption", "Process emissions"),
        0.35,
    ),
    (
        "Transportation",
        "transport",
        "Transportation of materials and products",
        ("Fuel consumption", "Logistics efficiency"),
        0.3,
    ),
    (
        "Construction",
        "construction",
        "On-site construction activities",
        ("Equipment emissions", "Material waste"),
        0.25,
    ),
    (
        "Use Phase",
        "use_phase",
        "Operation and maintenance during use",
        ("Operational energy use", "Maintenance activities"),
        0.2,
    ),
    (
        "End of Life",
        "end_of_life",
        "Demolition, disposal, recycling, or reuse",
        ("Waste management", "Recycling efficiency"),
        0.45,
    ),
)

#: Default (carbon, water, energy) impact per stage input prefix.
LIFECYCLE_DEFAULTS: Dict[str, Tuple[float, float, float]] = {
    "material": (0.3, 0.4, 0.25),
    "energy": (0.25, 0.15, 0.35),
    "transport": (0.2, 0.1, 0.3),
    "construction": (0.15, 0.2, 0.25),
    "use_phase": (0.1, 0.2, 0.2),
    "end_of_life": (0.1, 0.1, 0.1),
}

LIFECYCLE_TOP_CARBON_THRESHOLD = 0.2
LIFECYCLE_SECOND_CARBON_THRESHOLD = 0.15
LIFECYCLE_TOP_WATER_THRESHOLD = 0.3
LIFECYCLE_TOP_ENERGY_THRESHOLD = 0.3
LIFECYCLE_FALLBACK_HOTSPOT = "Overall lifecycle efficiency"

LIFECYCLE_METADATA: Dict[str, object] = {
    "uncertainty_level": "Medium",
    "data_quality": 0.7,
    "functional_unit": "Per project",
    "system_boundaries": ["Cradle-to-grave", "Excludes some indirect processes"],
    "allocation_method": "Mass-based allocation",
}

# ===========================================================================
# Circular economy
# ===========================================================================

CIRCULAR_DEFAULTS: Dict[str, float] = {
    "material_recycled_content": 0.3,
    "material_reuse_rate": 0.4,
    "material_recyclability": 0.6,
    "product_lifespan": 15.0,
    "waste_recycling_rate": 0.6,
    "design_for_disassembly": 0.5,
    "repairability_score": 0.6,
    "biodegradable_content": 0.2,
    "byproduct_synergy_potential": 0.4,
}

CLOSED_LOOP_WEIGHTS = {"material_recyclability": 0.6, "design_for_disassembly": 0.4}

MCI_WEIGHTS = {
    "material_recycled_content": 0.3,
    "material_recyclability": 0.3,
    "material_reuse_rate": 0.2,
    "biodegradable_content": 0.1,
    "byproduct_synergy_potential": 0.1,
}

WASTE_DIVERSION_WEIGHTS = {"waste_recycling_rate": 0.8, "biodegradable_content": 0.2}

REMANUFACTURING_WEIGHTS = {"design_for_disassembly": 0.5, "repairability_score": 0.5}

CIRCULAR_PROCUREMENT_WEIGHTS = {"material_recycled_content": 0.7, "material_reuse_rate": 0.3}

#: (metric, threshold, recommendation, impact, difficulty, timeframe, benefits)
#: A recommendation fires when the metric falls below its threshold.
CIRCULAR_RECOMMENDATION_RULES: Tuple[Tuple[str, float, str, str, str, str, Tuple[str, ...]], ...] = (
    (
        "resource_reuse_rate",
        0.5,
        "Implement material reuse strategies to capture value from existing materials",
        "High", "Medium", "Medium-term",
        (
            "Reduced raw material costs",
            "Lower embodied carbon",
            "Decreased waste disposal costs",
            "Potential for unique design elements",
        ),
    ),
    (
        "waste_recycling_rate",
        0.7,
        "Enhance on-site waste segregation and recycling processes",
        "Medium", "Low", "Short-term",
        (
            "Reduced waste disposal costs",
            "Potential revenue from recyclable materials",
            "Improved regulatory compliance",
            "Enhanced sustainability reporting metrics",
        ),
    ),
    (
        "product_lifespan",
        20.0,
        "Design for longevity and adaptability to extend useful life",
        "High", "Medium", "Long-term",
        (
            "Reduced lifecycle costs",
            "Increased asset value",
            "Improved resilience to changing requirements",
            "Reduced embodied carbon over time",
        ),
    ),
    (
        "closed_loop_potential",
        0.6,
        "Develop closed-loop material flows through take-back programs and partnerships",
        "High", "High", "Long-term",
        (
            "Secure material supply",
            "Reduced exposure to price volatility",
            "Enhanced brand reputation",
            "Potential for innovative business models",
        ),
    ),
    (
        "material_circularity_index",
        0.5,
        "Increase use of recycled and renewable materials in procurement specifications",
        "Medium", "Medium", "Medium-term",
        (
            "Reduced environmental impact",
            "Potential cost savings",
            "Improved sustainability metrics",
            "Market differentiation",
        ),
    ),
    (
        "repairability_score",
        0.6,
        "Improve product repairability through modular design and accessible components",
        "Medium", "Medium", "Medium-term",
        (
            "Extended product life",
            "Reduced maintenance costs",
            "Improved user satisfaction",
            "Reduced waste generation",
        ),
    ),
    (
        "design_for_disassembly",
        0.5,
        "Implement design for disassembly principles in new projects",
        "High", "Medium", "Medium-term",
        (
            "Easier material recovery at end of life",
            "Simplified maintenance and upgrades",
            "Potential for component reuse",
            "Reduced end-of-life costs",
        ),
    ),
)

#: Rules on these metrics only fire for a positive score; 0 means not assessed.
CIRCULAR_POSITIVE_ONLY_METRICS = frozenset({
    "material_circularity_index",
    "repairability_score",
    "design_for_disassembly",
})

CIRCULAR_FALLBACK_RECOMMENDATION: Tuple[str, str, str, str, Tuple[str, ...]] = (
    "Conduct a material flow analysis to identify circular economy opportunities",
    "Medium", "Low", "Short-term",
    (
        "Identification of waste streams with value potential",
        "Data-driven decision making",
        "Baseline for measuring improvements",
        "Prioritization of circular initiatives",
    ),
)

MIN_CIRCULAR_RECOMMENDATIONS = 3

# Material circularity index tier weights
MCI_INPUT_WEIGHTS = {"recycled": 0.4, "renewable": 0.4, "reuse": 0.2}
MCI_USE_WEIGHTS = {"lifespan": 0.6, "intensity": 0.4}
MCI_OUTPUT_WEIGHTS = {"recyclability": 0.5, "biodegradability": 0.3, "waste_avoidance": 0.2}
MCI_TIER_WEIGHTS = {"input": 0.3, "use": 0.2, "output": 0.5}
MCI_MODULAR_REUSE_BONUS = 0.3
MCI_LIFESPAN_REUSE_CAP = 0.4
MCI_REFERENCE_LIFESPAN = 50.0
MCI_DEFAULT_LIFESPAN_FACTOR = 0.5

# ===========================================================================
# Lifecycle cost analysis
# ===========================================================================

COST_DEFAULTS: Dict[str, float] = {
    "initial_cost": 1_000_000.0,
    "operational_cost_annual": 50_000.0,
    "maintenance_cost_annual": 25_000.0,
    "end_of_life_cost": 100_000.0,
    "lifespan": 30.0,
    "discount_rate": 0.05,
    "inflation_rate": 0.02,
    "energy_cost_escalation": 0.03,
}

#: (display name, parameter, delta, relative). Relative deltas are a
#: fraction of the base value; absolute deltas are added as-is.
SENSITIVITY_PARAMETERS: Tuple[Tuple[str, str, float, bool], ...] = (
    ("Discount Rate", "discount_rate", 0.01, False),
    ("Lifespan", "lifespan", 5.0, False),
    ("Energy Cost Escalation", "energy_cost_escalation", 0.01, False),
    ("Operational Cost", "operational_cost_annual", 0.1, True),
    ("Maintenance Cost", "maintenance_cost_annual", 0.1, True),
    ("Initial Cost", "initial_cost", 0.1, True),
    ("End of Life Cost", "end_of_life_cost", 0.1, True),
    ("Inflation Rate", "inflation_rate", 0.01, False),
)

SENSITIVITY_EPSILON = 1e-4
SENSITIVITY_ELASTICITY_SCALE = 2.0

COST_CATEGORIES = (
    ("Initial Cost", "initial"),
    ("Operational Cost", "operational"),
    ("Maintenance Cost", "maintenance"),
    ("End of Life Cost", "end_of_life"),
)

# ===========================================================================
# Material metrics
# ===========================================================================

SUSTAINABLE_RECYCLED_CONTENT_THRESHOLD = 50.0
HIGH_IMPACT_EMBODIED_CARBON = 0.8
SUSTAINABILITY_SCORE_THRESHOLD = 70.0

RESOURCE_EFFICIENCY_WEIGHTS = {"recycled": 0.7, "local": 0.3}
CIRCULARITY_POTENTIAL_WEIGHTS = {"recyclability": 0.5, "renewable": 0.3, "recycled": 0.2}
REUSE_POTENTIAL_WEIGHTS = {"recyclability": 0.7, "embodied": 0.3}

ALTERNATIVE_EMBODIED_CARBON_THRESHOLD = 0.5
ALTERNATIVE_CARBON_SAVING_FACTOR = 0.7
ALTERNATIVE_MAX_CARBON_SAVING = 0.8
ALTERNATIVE_HIGH_COST_THRESHOLD = 100.0
ALTERNATIVE_COST_SAVINGS = (0.2, 0.1)
ALTERNATIVE_WATER_SAVING = 0.3

HIGH_IMPACT_SHARE = 0.3
HIGH_IMPACT_MIN_COUNT = 3

# ===========================================================================
# Transport metrics
# ===========================================================================

ELECTRIC_FUEL_TYPES = ("electricity", "electric")
GOOD_MAINTENANCE_STATUSES = ("good", "excellent")

#: (substrings matched against a lowercased field, contribution)
CONGESTION_TYPE_KEYWORDS = ("urban", "delivery", "local")
CONGESTION_WEIGHTS = {
    "type": 0.4,
    "peak_time": 0.3,
    "frequent_stops": 0.2,
    "vehicle_size": 0.1,
}
CONGESTION_VEHICLE_KEYWORDS = ("large", "heavy")

HIGH_EMISSION_FACTOR = 0.8
ROUTE_OPTIMIZED_POTENTIAL = 0.2
ROUTE_UNOPTIMIZED_POTENTIAL = 0.4
LONG_HAUL_DISTANCE = 500.0

TRANSPORT_ALTERNATIVES: Dict[str, List[str]] = {
    "truck": ["Rail transport", "Electric trucks", "Optimized routing"],
    "plane": ["Rail transport", "Sea freight", "Biofuel aircraft"],
    "ship": ["Slow steaming", "Wind-assisted propulsion", "Alternative fuels"],
}
DEFAULT_TRANSPORT_ALTERNATIVES = [
    "Electric alternatives",
    "Route optimization",
    "Load optimization",
]

#: Ordered (keywords, origin, destination); first match wins. The long-haul
#: rule also matches any route longer than LONG_HAUL_DISTANCE.
ROUTE_ENDPOINT_RULES = (
    (("local", "delivery"), "Local Warehouse", "Project Site"),
    (("long",), "Manufacturing Facility", "Regional Hub"),
    (("import", "export"), "International Port", "Local Distribution"),
)
DEFAULT_ROUTE_ENDPOINTS = ("Distribution Center", "Construction Site")

ROUTE_BASE_POTENTIAL = 0.5
ROUTE_FUEL_FACTOR = 1.2
ROUTE_TIME_FACTOR = 0.8
ROUTE_EMISSIONS_FACTOR = 0.9
ROUTE_LONG_DISTANCE = 200.0
ROUTE_LOW_EFFICIENCY = 0.6
ROUTE_RECOMMENDATIONS = {
    "long_distance": "Implement advanced route planning software for long-distance routes",
    "urban": "Use real-time traffic data to optimize urban delivery routes",
    "multi_stop": "Optimize stop sequencing to minimize total distance traveled",
    "low_efficiency": "Identify and address vehicles with high fuel consumption",
}
ROUTE_FALLBACK_RECOMMENDATIONS = (
    "Implement load optimization to maximize vehicle capacity utilization",
    "Consider consolidating shipments to reduce the number of trips",
)

VEHICLE_MANUFACTURING_FACTORS = {
    "truck": 0.3,
    "plane": 0.5,
    "ship": 0.4,
    "train": 0.25,
}
DEFAULT_VEHICLE_MANUFACTURING_FACTOR = 0.2
VEHICLE_AGE_REFERENCE = 20.0
VEHICLE_MIN_AGE_FACTOR = 0.5
TRANSPORT_MAINTENANCE_SHARE = 0.15
TRANSPORT_DISPOSAL_SHARE = 0.1
TRANSPORT_HOTSPOT_THRESHOLDS = {
    "operational": 0.7,
    "manufacturing": 0.3,
    "maintenance": 0.2,
    "type": 0.4,
}
TRANSPORT_FALLBACK_HOTSPOT = "Overall transport efficiency"

# ===========================================================================
# Energy metrics
# ===========================================================================

RENEWABLE_SOURCE_KEYWORDS = ("solar", "wind", "geothermal", "biomass", "hydro")
GRID_SOURCE = "grid"

HIGH_CONSUMPTION_THRESHOLD = 1000.0
LOW_EFFICIENCY_THRESHOLD = 0.7
HIGH_PEAK_DEMAND_THRESHOLD = 0.8
MONITORING_GAP_SHARE = 0.5
STORAGE_GAP_SHARE = 0.7
MIN_STORAGE_CAPACITY = 10.0
MIN_ENERGY_OPPORTUNITIES = 3

#: area -> (potential savings, investment, payback years, complexity, co-benefits)
ENERGY_OPPORTUNITIES: Dict[str, Tuple[float, float, float, str, Tuple[str, ...]]] = {
    "Renewable Energy Integration": (
        0.4, 50000, 5, "Moderate",
        ("Reduced carbon emissions", "Energy independence", "Regulatory compliance"),
    ),
    "Equipment Upgrades": (
        0.25, 30000, 3, "Moderate",
        ("Reduced maintenance costs", "Improved reliability", "Extended equipment life"),
    ),
    "Peak Demand Management": (
        0.2, 15000, 2, "Simple",
        ("Reduced utility demand charges", "Grid stability", "Avoided capacity upgrades"),
    ),
    "Energy Monitoring Systems": (
        0.15, 20000, 2.5, "Simple",
        ("Real-time energy visibility", "Anomaly detection", "Behavior change enablement"),
    ),
    "Energy Storage Implementation": (
        0.3, 40000, 6, "Complex",
        ("Resilience during outages", "Renewable energy optimization", "Demand charge reduction"),
    ),
    "Lighting Systems": (
        0.3, 10000, 2, "Simple",
        ("Improved lighting quality", "Reduced maintenance", "Occupant comfort"),
    ),
    "HVAC Optimization": (
        0.25, 25000, 3.5, "Moderate",
        ("Improved comfort", "Better air quality", "Extended equipment life"),
    ),
}
FALLBACK_ENERGY_OPPORTUNITIES = ("Lighting Systems", "HVAC Optimization")

PEAK_DEFAULT_AVERAGE = 0.8
PEAK_REDUCTION_FACTOR = 0.4
PEAK_REDUCTION_BOUNDS = (0.1, 0.5)
PEAK_COST_FACTOR = 1.5
PEAK_HIGH_AVERAGE = 0.7
OFF_PEAK_KEYWORDS = ("off-peak", "night", "weekend")

#: (approach, reduction potential, implementation cost, complexity)
PEAK_APPROACHES = (
    ("Load Shifting", 0.6, "Low", "Moderate"),
    ("Energy Storage", 0.8, "High", "Complex"),
    ("Demand Response Programs", 0.5, "Low", "Simple"),
    ("Peak-Aware Equipment Scheduling", 0.4, "Medium", "Moderate"),
)
PEAK_ACTIONS = {
    "high_peak": "Implement an automated load management system to monitor and control peak demand",
    "no_storage": "Install energy storage systems to offset peak demand periods",
    "no_demand_response": "Enroll in utility demand response programs to receive incentives for reducing peak demand",
    "no_time_of_use": "Shift energy-intensive operations to off-peak hours to reduce demand charges",
}
PEAK_FALLBACK_ACTIONS = (
    "Conduct a detailed peak demand analysis to identify specific reduction opportunities",
    "Implement smart controls for major energy-consuming equipment to prevent simultaneous operation",
)

ENERGY_TRANSMISSION_LOSS = 0.08
ENERGY_EMBODIED_SHARE = 0.15
ENERGY_DEFAULT_EFFICIENCY = 0.7
ENERGY_LIFECYCLE_WEIGHTS = {"generation": 1.0, "transmission": 0.5, "embodied": 0.4}
ENERGY_IMPROVEMENT_WEIGHTS = {"renewable": 0.6, "efficiency": 0.4}
ENERGY_HOTSPOTS = {
    "non_renewable": "High dependence on non-renewable energy sources",
    "low_efficiency": "Low end-use energy efficiency",
    "high_intensity": "High carbon intensity energy sources",
    "high_peak": "High peak demand periods",
}
ENERGY_NON_RENEWABLE_THRESHOLD = 70.0
ENERGY_HIGH_INTENSITY_THRESHOLD = 0.7
ENERGY_FALLBACK_HOTSPOT = "Overall energy system optimization"

# ===========================================================================
# Report assembly
# ===========================================================================

COMPLETENESS_MATERIAL_ITEM_POINTS = 10
COMPLETENESS_MATERIAL_ITEM_CAP = 40
COMPLETENESS_MATERIAL_DETAIL_POINTS = 5
COMPLETENESS_MATERIAL_DETAIL_CAP = 20
COMPLETENESS_TRANSPORT_ITEM_POINTS = 10
COMPLETENESS_TRANSPORT_ITEM_CAP = 30
COMPLETENESS_TRANSPORT_FUEL_POINTS = 5
COMPLETENESS_ENERGY_ITEM_POINTS = 10
COMPLETENESS_ENERGY_ITEM_CAP = 30
COMPLETENESS_MAX = 100

SCORE_BASELINE = 50.0
SCORE_WEIGHTS = {"materials": 0.5, "transport": 0.3, "energy": 0.2}
MATERIAL_SCORE_WEIGHTS = {"recyclable": 25.0, "local": 15.0, "recycled_content": 10.0}
TRANSPORT_SHORT_DISTANCE = 100.0
TRANSPORT_MEDIUM_DISTANCE = 500.0
TRANSPORT_LONG_DISTANCE = 1000.0
TRANSPORT_DISTANCE_ADJUSTMENTS = {"short": 30.0, "medium": 15.0, "long": -15.0}
LOW_CARBON_TRANSPORT_TYPES = ("electric", "rail", "sea")
LOW_CARBON_TRANSPORT_BONUS = 20.0
RENEWABLE_ENERGY_TYPES = ("solar", "wind", "hydro", "renewable")
FOSSIL_ENERGY_TYPES = ("coal", "oil", "diesel", "petrol")
RENEWABLE_ENERGY_BONUS = 40.0
FOSSIL_ENERGY_PENALTY = 30.0

#: Stage -> default percentage when no emissions can be attributed.
LIFECYCLE_ANALYSIS_DEFAULTS: Dict[str, int] = {
    "extraction": 25,
    "manufacturing": 20,
    "transportation": 15,
    "construction": 10,
    "operation": 25,
    "end_of_life": 5,
}

#: Stage -> (emission source, scale, offset) for the percentage split.
LIFECYCLE_ANALYSIS_FORMULAS: Dict[str, Tuple[str, float, int]] = {
    "extraction": ("materials", 40, 10),
    "manufacturing": ("materials", 30, 10),
    "transportation": ("transport", 80, 5),
    "construction": ("energy", 30, 5),
    "operation": ("energy", 40, 10),
    "end_of_life": ("materials", 10, 2),
}
LIFECYCLE_TOTAL_MULTIPLIER = 1.2

LIFECYCLE_ANALYSIS_RECOMMENDATIONS = (
    "Consider material substitution to reduce extraction emissions",
    "Source materials from manufacturers with renewable energy",
    "Optimize transportation routes and use low-carbon transport modes",
    "Implement energy-efficient construction methods",
    "Design for energy efficiency during operation",
    "Plan for material reuse and recycling at end of life",
)

#: Roadmap phase -> (timeframe, cost range, estimated carbon savings)
ROADMAP_PHASES: Dict[str, Tuple[str, str, int]] = {
    "immediate": ("1-4 weeks", "Low", 500),
    "short-term": ("1-3 months", "Low to Medium", 1200),
    "medium-term": ("3-12 months", "Medium", 3000),
    "long-term": ("1-3 years", "High", 8000),
}
ROADMAP_IMMEDIATE_ACTIONS = (
    "Source recycled steel instead of virgin steel",
    "Optimize transport routes to minimize distances",
    "Use energy-efficient equipment on site",
)
ROADMAP_LONG_TERM_ACTIONS = (
    "Develop closed-loop material recycling system",
    "Transition to fully electric transport fleet",
    "Implement on-site renewable energy generation",
    "Establish carbon offsetting program for residual emissions",
)

#: (name keywords, alternative, carbon reduction %, cost impact %,
#: availability, additional benefits); first match wins.
MATERIAL_RECOMMENDATION_RULES: Tuple[
    Tuple[Tuple[str, ...], str, float, float, str, Tuple[str, ...]], ...
] = (
    (("concrete",), "Low-carbon concrete", 30, 15, "high",
     ("Comparable strength properties", "Reduces cement content")),
    (("steel",), "Recycled steel", 40, -5, "high",
     ("Reduces virgin material use", "Same structural properties")),
    (("insulation",), "Bio-based insulation", 45, 20, "medium",
     ("Natural material", "Non-toxic", "Biodegradable")),
    (("timber", "wood"), "FSC-certified engineered timber", 60, 10, "high",
     ("Carbon sequestration", "Renewable resource")),
)
MATERIAL_RECOMMENDATION_FALLBACK = (
    "Recycled or locally-sourced alternative", 20, 5, "medium",
    ("Reduced carbon footprint", "Supports circular economy"),
)

ROAD_TRANSPORT_KEYWORDS = ("truck", "road")
AIR_TRANSPORT_KEYWORDS = ("air",)
RAIL_SHIFT_DISTANCE = 500.0
SEA_SHIFT_DISTANCE = 1000.0
#: mode -> (recommended mode, carbon reduction %, cost impact %, feasibility)
TRANSPORT_RECOMMENDATIONS: Dict[str, Tuple[str, float, float, str]] = {
    "rail": ("Rail freight", 70, -10, "medium"),
    "electric": ("Electric truck", 40, 15, "high"),
    "sea": ("Sea freight", 85, -30, "low"),
    "generic": ("Optimized logistics", 15, -5, "high"),
}

#: (source keywords, recommended source, carbon reduction %, cost impact %,
#: implementation complexity); first match wins.
ENERGY_RECOMMENDATION_RULES: Tuple[
    Tuple[Tuple[str, ...], str, float, float, str], ...
] = (
    (("grid", "electricity"), "On-site solar PV", 80, -5, "medium"),
    (("diesel", "petrol", "gas"), "Electric equipment with renewable energy", 65, 25, "medium"),
    (("coal", "oil"), "Renewable energy sources", 90, 15, "high"),
)
ENERGY_RECOMMENDATION_FALLBACK = ("Energy-efficient alternative", 30, 0, "low")

# ===========================================================================
# Request validation defaults
# ===========================================================================

MATERIAL_FIELD_DEFAULTS = {
    "category": "other",
    "carbon_footprint": 1.0,
    "unit": "kg",
    "quantity": 1.0,
}
TRANSPORT_FIELD_DEFAULTS = {
    "type": "road",
    "weight": 1.0,
    "fuel_type": "diesel",
    "emissions_factor": 0.1,
}
ENERGY_FIELD_DEFAULTS = {
    "source": "grid",
    "unit": "kwh",
    "emissions_factor": 0.5,
}

INSUFFICIENT_DATA_MESSAGE = (
    "Insufficient data to generate meaningful sustainability suggestions"
)
