"""Data models module for dndtracker."""

# Participants and initiative
from dndtracker.models.participant import InitiativeEntry, Participant, ParticipantType

# Encounter
from dndtracker.models.encounter import CombatState, Encounter, EncounterSettings, EncounterSummary

# Metadata
from dndtracker.models.metadata import Difficulty, EncounterStatus

__all__ = [
    # Participants and initiative
    "Participant",
    "ParticipantType",
    "InitiativeEntry",
    # Encounter
    "CombatState",
    "Encounter",
    "EncounterSettings",
    "EncounterSummary",
    # Metadata
    "Difficulty",
    "EncounterStatus",
]
