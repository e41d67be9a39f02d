# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import os
from typing import Any, Dict, List

import pytest

from sustainability_engine.config import reset_config
from sustainability_engine.models import EnergyItem, Material, TransportItem
from sustainability_engine.service import reset_service

_ENV_PREFIX = "SUSTAINABILITY_ENGINE_"


@pytest.fixture(autouse=True)
def _isolated_engine_state(monkeypatch):
    """Fresh config and service singletons with no env overrides."""
    for key in list(os.environ):
        if key.startswith(_ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    reset_service()
    yield
    reset_config()
    reset_service()


# ==============================================================================
# Typed records
# ==============================================================================

@pytest.fixture
def concrete() -> Material:
    """High-volume concrete with full detail."""
    return Material(
        id="mat-1",
        name="Concrete",
        category="concrete",
        carbon_footprint=0.15,
        quantity=200,
        unit="kg",
        recyclable=True,
        recycled_content=20,
        locally_sourced=True,
        embodied_carbon=1.0,
    )


@pytest.fixture
def steel() -> Material:
    """Structural steel without sourcing detail."""
    return Material(
        id="mat-2",
        name="Steel Beam",
        category="steel",
        carbon_footprint=1.8,
        quantity=80,
        unit="kg",
        recyclable=True,
        recycled_content=60,
        embodied_carbon=1.5,
    )


@pytest.fixture
def sample_materials(concrete, steel) -> List[Material]:
    return [concrete, steel]


@pytest.fixture
def sample_transport() -> List[TransportItem]:
    return [
        TransportItem(id="tr-1", type="truck", distance=120, weight=2, emissions_factor=0.2),
        TransportItem(id="tr-2", type="rail", distance=650, weight=5, emissions_factor=0.05),
    ]


@pytest.fixture
def sample_energy() -> List[EnergyItem]:
    return [
        EnergyItem(id="en-1", source="grid", quantity=2500, emissions_factor=0.8),
        EnergyItem(id="en-2", source="solar", quantity=400, emissions_factor=0.05),
    ]


# ==============================================================================
# Raw request bodies
# ==============================================================================

@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """camelCase request body as a JSON client would send it."""
    return {
        "materials": [
            {
                "id": "mat-1",
                "name": "Concrete",
                "category": "concrete",
                "carbonFootprint": 0.15,
                "quantity": 200,
                "recyclable": True,
                "recycledContent": 20,
                "locallySourced": True,
            },
            {
                "id": "mat-2",
                "name": "Steel Beam",
                "category": "steel",
                "carbonFootprint": 1.8,
                "quantity": 80,
                "recyclable": True,
            },
        ],
        "transport": [
            {"id": "tr-1", "type": "truck", "distance": 120, "weight": 2, "fuelType": "diesel"},
            {"id": "tr-2", "type": "rail", "distance": 650, "weight": 5},
        ],
        "energy": [
            {"id": "en-1", "source": "grid", "quantity": 2500, "emissionsFactor": 0.8},
        ],
        "options": {"format": "detailed", "projectId": "proj-42"},
    }
