"""Canonical default values for new encounters."""

from dndtracker.config import (
    DEFAULT_ALLOW_PLAYER_VISIBILITY,
    DEFAULT_AUTO_ROLL_INITIATIVE,
    DEFAULT_CURRENT_ROUND,
    DEFAULT_CURRENT_TURN,
    DEFAULT_ENABLE_GRID_MOVEMENT,
    DEFAULT_ENABLE_LAIR_ACTIONS,
    DEFAULT_GRID_SIZE,
    DEFAULT_TOTAL_DURATION,
    DEFAULT_TRACK_RESOURCES,
)
from dndtracker.models.encounter import CombatState, EncounterSettings


def create_default_encounter_settings() -> EncounterSettings:
    """Settings for a newly created encounter."""
    return EncounterSettings(
        allow_player_visibility=DEFAULT_ALLOW_PLAYER_VISIBILITY,
        auto_roll_initiative=DEFAULT_AUTO_ROLL_INITIATIVE,
        track_resources=DEFAULT_TRACK_RESOURCES,
        enable_lair_actions=DEFAULT_ENABLE_LAIR_ACTIONS,
        enable_grid_movement=DEFAULT_ENABLE_GRID_MOVEMENT,
        grid_size=DEFAULT_GRID_SIZE,
    )


def create_default_combat_state() -> CombatState:
    """Combat state for an encounter that is not in combat."""
    return CombatState(
        is_active=False,
        current_round=DEFAULT_CURRENT_ROUND,
        current_turn=DEFAULT_CURRENT_TURN,
        initiative_order=[],
        total_duration=DEFAULT_TOTAL_DURATION,
        started_at=None,
        paused_at=None,
        ended_at=None,
    )
