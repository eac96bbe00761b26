"""Combat engine package."""

from dndtracker.engine.combat import CombatSystem
from dndtracker.engine.conditions import add_condition, remove_condition
from dndtracker.engine.defaults import create_default_combat_state, create_default_encounter_settings
from dndtracker.engine.dice import DiceRoller, RandomSource
from dndtracker.engine.difficulty import calculate_encounter_difficulty
from dndtracker.engine.encounter_manager import EncounterManager
from dndtracker.engine.export import build_export_data, generate_export_filename
from dndtracker.engine.hit_points import apply_damage, heal, validate_participant_hp
from dndtracker.engine.initiative import sort_initiative_order
from dndtracker.engine.lookup import find_initiative_entry, find_participant_by_id
from dndtracker.engine.time_manager import calculate_combat_duration

__all__ = [
    "CombatSystem",
    "DiceRoller",
    "EncounterManager",
    "RandomSource",
    "add_condition",
    "apply_damage",
    "build_export_data",
    "calculate_combat_duration",
    "calculate_encounter_difficulty",
    "create_default_combat_state",
    "create_default_encounter_settings",
    "find_initiative_entry",
    "find_participant_by_id",
    "generate_export_filename",
    "heal",
    "remove_condition",
    "sort_initiative_order",
    "validate_participant_hp",
]
