"""Pytest configuration and fixtures."""

import random

import pytest

from dndtracker.engine.encounter_manager import EncounterManager
from factories import make_participant


@pytest.fixture
def participant():
    """Sample participant at 80/100 hit points."""
    return make_participant()


@pytest.fixture
def encounter():
    """Empty draft encounter."""
    return EncounterManager.create_encounter(
        owner_id="507f1f77bcf86cd799439000",
        name="Test Encounter",
        description="Test description",
        target_level=5,
        estimated_duration=60,
    )


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)
