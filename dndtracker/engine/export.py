"""Initiative export for sharing or archiving a combat."""

import re
from datetime import datetime
from typing import Any, Optional

from dndtracker.helpers.identity import canonical_id
from dndtracker.models.encounter import Encounter, utcnow
from dndtracker.models.participant import InitiativeEntry, Participant

UNKNOWN = "Unknown"


def _export_entry(entry: InitiativeEntry, participant: Optional[Participant]) -> dict[str, Any]:
    """Flatten one initiative entry with its participant's combat stats."""
    return {
        "name": participant.name if participant else UNKNOWN,
        "initiative": entry.initiative,
        "dexterity": entry.dexterity,
        "hasActed": entry.has_acted,
        "hitPoints": f"{participant.current_hit_points}/{participant.max_hit_points}" if participant else UNKNOWN,
        "armorClass": participant.armor_class if participant else UNKNOWN,
        "conditions": list(participant.conditions) if participant else [],
    }


def build_export_data(encounter: Encounter, now: Optional[datetime] = None) -> dict[str, Any]:
    """
    Build a JSON-ready snapshot of the initiative tracker.

    Args:
        encounter: Encounter to export
        now: Export timestamp; current UTC time when omitted

    Returns:
        Dictionary with encounter name, round, turn, initiative rows and export time
    """
    participants = {canonical_id(p.character_id): p for p in encounter.participants}
    combat_state = encounter.combat_state
    return {
        "encounterName": encounter.name,
        "round": combat_state.current_round,
        "turn": combat_state.current_turn,
        "initiativeOrder": [
            _export_entry(entry, participants.get(canonical_id(entry.participant_id)))
            for entry in combat_state.initiative_order
        ],
        "exportedAt": (now or utcnow()).isoformat(),
    }


def generate_export_filename(encounter_name: str, round_number: int) -> str:
    """File name for an initiative export."""
    safe_name = re.sub(r"[^a-z0-9]", "_", encounter_name, flags=re.IGNORECASE).lower()
    return f"{safe_name}_initiative_round_{round_number}.json"
