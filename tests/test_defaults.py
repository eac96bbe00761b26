"""Tests for default encounter settings and combat state."""

from dndtracker.engine.defaults import create_default_combat_state, create_default_encounter_settings


class TestDefaults:
    """Test suite for the default-state constructors."""

    def test_default_settings(self):
        """Test the default encounter settings."""
        settings = create_default_encounter_settings()
        assert settings.model_dump(by_alias=True) == {
            "allowPlayerVisibility": True,
            "autoRollInitiative": False,
            "trackResources": True,
            "enableLairActions": False,
            "enableGridMovement": False,
            "gridSize": 5,
        }

    def test_default_combat_state(self):
        """Test the default combat state."""
        state = create_default_combat_state()
        assert state.model_dump(by_alias=True) == {
            "isActive": False,
            "currentRound": 0,
            "currentTurn": 0,
            "initiativeOrder": [],
            "totalDuration": 0,
            "startedAt": None,
            "pausedAt": None,
            "endedAt": None,
        }

    def test_settings_deterministic(self):
        """Test that two calls give equal settings."""
        assert create_default_encounter_settings() == create_default_encounter_settings()

    def test_combat_state_deterministic(self):
        """Test that two calls give equal combat states."""
        assert create_default_combat_state() == create_default_combat_state()

    def test_combat_state_not_shared(self):
        """Test that each call returns independent objects."""
        first = create_default_combat_state()
        second = create_default_combat_state()
        assert first is not second
        assert first.initiative_order is not second.initiative_order

    def test_every_field_set_explicitly(self):
        """Test that no field relies on an implicit default."""
        assert create_default_encounter_settings().model_fields_set == set(
            create_default_encounter_settings().model_dump().keys()
        )
        assert create_default_combat_state().model_fields_set == set(
            create_default_combat_state().model_dump().keys()
        )
