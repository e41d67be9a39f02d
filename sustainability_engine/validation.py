# -*- coding: utf-8 -*-
"""
Request Validation - Sustainability Metrics & Lifecycle Modeling Engine

Coerces an untyped request body into typed material, transport and energy
records and report options. The engines downstream assume well-typed
input; every tolerance for messy client data lives here.

Rules:
    - The body must be a JSON object (a mapping, or a str / bytes holding
      one); ``materials``, ``transport`` and ``energy`` must be lists when
      present. Anything else raises PayloadValidationError.
    - Entries that are not objects are skipped. Materials without a name,
      transport legs without a (non-zero) distance and energy records
      without a (non-zero) quantity are skipped.
    - Missing or unparseable core fields take defaults: material
      ``carbonFootprint`` 1, ``unit`` "kg", ``quantity`` 1, ``category``
      "other"; transport ``type`` "road", ``weight`` 1, ``fuelType``
      "diesel", ``emissionsFactor`` 0.1; energy ``source`` "grid",
      ``unit`` "kwh", ``emissionsFactor`` 0.5. Explicit zeros are kept.
      A material without a usable ``carbonFootprint`` takes its ``factor``
      when one is given, and ``recyclable`` is always set (False when
      absent). Records without an id get a positional one
      (``material-0``, ``transport-1``, ...).
    - Optional enrichment fields are kept when they parse and are within
      range, and dropped otherwise.

Author: GreenLang Platform Team
Date: October 2026
Status: Production Ready
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Annotated, Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel, TypeAdapter, ValidationError

from sustainability_engine import constants as c
from sustainability_engine.config import EngineConfig, get_config
from sustainability_engine.exceptions import PayloadValidationError
from sustainability_engine.models import (
    CostParameters,
    EnergyItem,
    Material,
    ReportFormat,
    ReportRequestOptions,
    TransportItem,
)

logger = logging.getLogger(__name__)

_COMPONENT = "validation"


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ValidatedRequest:
    """Typed view of a request body."""

    materials: List[Material] = field(default_factory=list)
    transport: List[TransportItem] = field(default_factory=list)
    energy: List[EnergyItem] = field(default_factory=list)
    options: ReportRequestOptions = field(default_factory=ReportRequestOptions)
    skipped: Dict[str, int] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Field-level coercion
# ---------------------------------------------------------------------------


@lru_cache(maxsize=None)
def _field_adapter(model: Type[BaseModel], name: str) -> TypeAdapter:
    """TypeAdapter enforcing a model field's type and constraints."""
    info = model.model_fields[name]
    if info.metadata:
        return TypeAdapter(Annotated[(info.annotation, *info.metadata)])
    return TypeAdapter(info.annotation)


@lru_cache(maxsize=None)
def _key_map(model: Type[BaseModel]) -> Dict[str, str]:
    """Map both field names and camelCase aliases to field names."""
    keys: Dict[str, str] = {}
    for name, info in model.model_fields.items():
        keys[name] = name
        if info.alias:
            keys[info.alias] = name
    return keys


def _normalise_keys(model: Type[BaseModel], raw: Mapping[str, Any]) -> Dict[str, Any]:
    keys = _key_map(model)
    normalised: Dict[str, Any] = {}
    for key, value in raw.items():
        name = keys.get(key)
        # a camelCase key wins over its snake_case twin
        if name is not None and (name not in normalised or key != name):
            normalised[name] = value
    return normalised


def _parse(model: Type[BaseModel], name: str, value: Any) -> Tuple[bool, Any]:
    """Return ``(ok, parsed)`` for a single field value."""
    if value is None:
        return False, None
    try:
        parsed = _field_adapter(model, name).validate_python(value)
    except ValidationError:
        return False, None
    return parsed is not None, parsed


def _coerce_fields(
    model: Type[BaseModel],
    values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    skip: Tuple[str, ...] = (),
) -> Dict[str, Any]:
    """Parse every known field; default core fields and drop bad optional ones."""
    result: Dict[str, Any] = {}
    for name in model.model_fields:
        if name in skip:
            continue
        ok, parsed = _parse(model, name, values.get(name))
        if ok:
            result[name] = parsed
        elif name in defaults:
            result[name] = defaults[name]
        elif values.get(name) is not None:
            logger.debug("Dropping malformed %s.%s=%r", model.__name__, name, values.get(name))
    return result


def _identifier(value: Any, fallback: str = "") -> str:
    if value is None or value == "" or isinstance(value, (dict, list)):
        return fallback
    return str(value)


def _required_number(model: Type[BaseModel], name: str, value: Any) -> Optional[float]:
    """Parsed non-zero value of a required numeric field, else None."""
    ok, parsed = _parse(model, name, value)
    if not ok or not parsed:
        return None
    return parsed


# ---------------------------------------------------------------------------
# Record validators
# ---------------------------------------------------------------------------


def _as_list(payload: Mapping[str, Any], key: str) -> List[Any]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise PayloadValidationError(
            f"'{key}' must be a list",
            component=_COMPONENT,
            context={"received_type": type(value).__name__},
            invalid_fields={key: "must be a list"},
        )
    return value


def validate_materials(raw_items: List[Any]) -> Tuple[List[Material], int]:
    """Return the usable materials and the number skipped."""
    materials: List[Material] = []
    skipped = 0
    for raw in raw_items:
        if not isinstance(raw, Mapping):
            skipped += 1
            continue
        values = _normalise_keys(Material, raw)
        name = values.get("name")
        if not isinstance(name, str) or not name.strip():
            skipped += 1
            continue
        ok, _ = _parse(Material, "carbon_footprint", values.get("carbon_footprint"))
        if not ok and raw.get("factor") is not None:
            values["carbon_footprint"] = raw["factor"]
        fields = _coerce_fields(
            Material, values, c.MATERIAL_FIELD_DEFAULTS, skip=("id", "name"),
        )
        fields.setdefault("recyclable", bool(values.get("recyclable")))
        materials.append(Material(
            id=_identifier(values.get("id"), f"material-{len(materials)}"),
            name=name,
            **fields,
        ))
    return materials, skipped


def validate_transport(raw_items: List[Any]) -> Tuple[List[TransportItem], int]:
    """Return the usable transport legs and the number skipped."""
    transport: List[TransportItem] = []
    skipped = 0
    for raw in raw_items:
        if not isinstance(raw, Mapping):
            skipped += 1
            continue
        values = _normalise_keys(TransportItem, raw)
        distance = _required_number(TransportItem, "distance", values.get("distance"))
        if distance is None:
            skipped += 1
            continue
        fields = _coerce_fields(
            TransportItem, values, c.TRANSPORT_FIELD_DEFAULTS, skip=("id", "distance"),
        )
        transport.append(TransportItem(
            id=_identifier(values.get("id"), f"transport-{len(transport)}"),
            distance=distance,
            **fields,
        ))
    return transport, skipped


def validate_energy(raw_items: List[Any]) -> Tuple[List[EnergyItem], int]:
    """Return the usable energy records and the number skipped."""
    energy: List[EnergyItem] = []
    skipped = 0
    for raw in raw_items:
        if not isinstance(raw, Mapping):
            skipped += 1
            continue
        values = _normalise_keys(EnergyItem, raw)
        quantity = _required_number(EnergyItem, "quantity", values.get("quantity"))
        if quantity is None:
            skipped += 1
            continue
        fields = _coerce_fields(
            EnergyItem, values, c.ENERGY_FIELD_DEFAULTS, skip=("id", "quantity"),
        )
        energy.append(EnergyItem(
            id=_identifier(values.get("id"), f"energy-{len(energy)}"),
            quantity=quantity,
            **fields,
        ))
    return energy, skipped


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


def parse_options(
    raw: Any, config: Optional[EngineConfig] = None,
) -> ReportRequestOptions:
    """Build report options, falling back to configured defaults.

    Unknown formats fall back to ``config.default_report_format`` with a
    warning. Malformed cost parameters are dropped field by field.
    """
    config = config or get_config()
    default_format = ReportFormat(config.default_report_format)

    if raw is None:
        return ReportRequestOptions(format=default_format)
    if not isinstance(raw, Mapping):
        raise PayloadValidationError(
            "'options' must be an object",
            component=_COMPONENT,
            context={"received_type": type(raw).__name__},
            invalid_fields={"options": "must be an object"},
        )

    values = _normalise_keys(ReportRequestOptions, raw)

    report_format = default_format
    requested = values.get("format")
    if requested is not None:
        try:
            report_format = ReportFormat(str(requested).lower())
        except ValueError:
            logger.warning(
                "Unknown report format %r, using %s", requested, default_format.value,
            )

    fields = _coerce_fields(
        ReportRequestOptions,
        values,
        {},
        skip=("format", "project_id", "project_name", "cost_parameters"),
    )

    cost_parameters: Optional[CostParameters] = None
    raw_costs = values.get("cost_parameters")
    if isinstance(raw_costs, Mapping):
        cost_parameters = CostParameters(**_coerce_fields(
            CostParameters, _normalise_keys(CostParameters, raw_costs), {},
        ))
    elif raw_costs is not None:
        logger.warning("Ignoring malformed costParameters of type %s", type(raw_costs).__name__)

    return ReportRequestOptions(
        format=report_format,
        project_id=_identifier(values.get("project_id")) or None,
        project_name=_identifier(values.get("project_name")) or None,
        cost_parameters=cost_parameters,
        **fields,
    )


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


def _load_body(payload: Any) -> Mapping[str, Any]:
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except ValueError as exc:
            raise PayloadValidationError(
                "Request body is not valid JSON",
                component=_COMPONENT,
                context={"reason": str(exc)},
            ) from exc
    if not isinstance(payload, Mapping):
        raise PayloadValidationError(
            "Request body must be a JSON object",
            component=_COMPONENT,
            context={"received_type": type(payload).__name__},
        )
    return payload


def validate_request(
    payload: Any, config: Optional[EngineConfig] = None,
) -> ValidatedRequest:
    """Validate a whole request body.

    Args:
        payload: Mapping, or JSON text, with optional ``materials``,
            ``transport``, ``energy`` lists and an ``options`` object.
        config: Configuration supplying option defaults.

    Returns:
        ValidatedRequest with typed records and options.

    Raises:
        PayloadValidationError: If the body or one of its lists has the
            wrong shape.
    """
    body = _load_body(payload)

    materials, skipped_materials = validate_materials(_as_list(body, "materials"))
    transport, skipped_transport = validate_transport(_as_list(body, "transport"))
    energy, skipped_energy = validate_energy(_as_list(body, "energy"))
    options = parse_options(body.get("options"), config)

    skipped = {
        "materials": skipped_materials,
        "transport": skipped_transport,
        "energy": skipped_energy,
    }
    if any(skipped.values()):
        logger.debug("Skipped unusable entries: %s", skipped)

    return ValidatedRequest(
        materials=materials,
        transport=transport,
        energy=energy,
        options=options,
        skipped=skipped,
    )


__all__ = [
    "ValidatedRequest",
    "validate_materials",
    "validate_transport",
    "validate_energy",
    "parse_options",
    "validate_request",
]
