"""Encounter participant management."""

import copy
import logging
import uuid
from typing import Any, Optional

from dndtracker.config import DEFAULT_COPY_SUFFIX, DEFAULT_ENCOUNTER_VERSION
from dndtracker.engine import conditions, hit_points
from dndtracker.engine.combat import CombatSystem
from dndtracker.engine.defaults import create_default_combat_state, create_default_encounter_settings
from dndtracker.engine.difficulty import calculate_encounter_difficulty
from dndtracker.engine.lookup import find_initiative_entry, find_participant_by_id
from dndtracker.helpers.identity import canonical_id
from dndtracker.models.encounter import Encounter, EncounterSummary, utcnow
from dndtracker.models.metadata import Difficulty, EncounterStatus
from dndtracker.models.participant import Participant

logger = logging.getLogger(__name__.split(".")[-1])


class EncounterManager:
    """Handles encounter participants and their hit points and conditions."""

    @staticmethod
    def create_encounter(owner_id: Any, name: str, **fields: Any) -> Encounter:
        """
        Create a draft encounter with default settings and combat state.

        Args:
            owner_id: Owning user identifier
            name: Encounter name
            **fields: Any other Encounter fields

        Returns:
            New Encounter
        """
        fields.setdefault("settings", create_default_encounter_settings())
        fields.setdefault("combat_state", create_default_combat_state())
        return Encounter(owner_id=canonical_id(owner_id), name=name, **fields)

    @staticmethod
    def add_participant(encounter: Encounter, participant: Participant) -> None:
        """Add a participant, repairing its hit points first."""
        hit_points.validate_participant_hp(participant)
        encounter.participants.append(participant)
        encounter.touch()
        logger.debug(f"Added {participant.name} ({participant.character_id}) to {encounter.encounter_id}")

    @staticmethod
    def remove_participant(encounter: Encounter, character_id: Any) -> bool:
        """
        Remove a participant and its initiative entry.

        Args:
            encounter: Encounter to modify
            character_id: Character id of the participant

        Returns:
            True if a participant was removed
        """
        participant = find_participant_by_id(encounter.participants, character_id)
        if participant is None:
            logger.warning(f"Participant {character_id} not found in {encounter.encounter_id}")
            return False

        encounter.participants.remove(participant)

        combat_state = encounter.combat_state
        order = combat_state.initiative_order
        wanted = canonical_id(character_id)
        for index, entry in enumerate(order):
            if canonical_id(entry.participant_id) == wanted:
                del order[index]
                if index < combat_state.current_turn:
                    combat_state.current_turn -= 1
                elif index == combat_state.current_turn and combat_state.is_active and order:
                    # The acting entry left; the turn passes to whoever followed it
                    if index >= len(order):
                        combat_state.current_turn = 0
                        CombatSystem.start_new_round(combat_state)
                    order[combat_state.current_turn].is_active = True
                break

        # Keep current_turn inside the (possibly shorter) order
        last_index = max(0, len(combat_state.initiative_order) - 1)
        combat_state.current_turn = max(0, min(combat_state.current_turn, last_index))

        encounter.touch()
        return True

    @staticmethod
    def update_participant(encounter: Encounter, character_id: Any, updates: dict[str, Any]) -> bool:
        """
        Assign fields on a participant and repair its hit points.

        Args:
            encounter: Encounter to modify
            character_id: Character id of the participant
            updates: Field name to new value

        Returns:
            True if the participant exists
        """
        participant = find_participant_by_id(encounter.participants, character_id)
        if participant is None:
            logger.warning(f"Participant {character_id} not found in {encounter.encounter_id}")
            return False

        unknown = set(updates) - set(Participant.model_fields)
        if unknown:
            raise ValueError(f"Unknown participant fields: {sorted(unknown)}")

        # Validate the whole result before touching the stored participant
        candidate = Participant.model_validate({**participant.model_dump(), **updates})

        old_id = participant.character_id
        if candidate.character_id != old_id:
            clash = find_participant_by_id(encounter.participants, candidate.character_id)
            if clash is not None:
                raise ValueError(f"Participant {candidate.character_id} already exists in {encounter.encounter_id}")

        for field_name in updates:
            setattr(participant, field_name, getattr(candidate, field_name))

        if participant.character_id != old_id:
            entry = find_initiative_entry(encounter.combat_state.initiative_order, old_id)
            if entry is not None:
                entry.participant_id = participant.character_id
            logger.info(f"Participant {old_id} renamed to {participant.character_id} in {encounter.encounter_id}")

        hit_points.validate_participant_hp(participant)
        encounter.touch()
        return True

    @staticmethod
    def get_participant(encounter: Encounter, character_id: Any) -> Optional[Participant]:
        """Get a participant by character id."""
        return find_participant_by_id(encounter.participants, character_id)

    @staticmethod
    def apply_damage(encounter: Encounter, character_id: Any, amount: int) -> bool:
        """Apply damage to a participant; False if missing or amount is negative."""
        participant = find_participant_by_id(encounter.participants, character_id)
        if participant is None:
            return False
        applied = hit_points.apply_damage(participant, amount)
        if applied:
            encounter.touch()
        return applied

    @staticmethod
    def apply_healing(encounter: Encounter, character_id: Any, amount: int) -> bool:
        """Heal a participant; False if missing or amount is negative."""
        participant = find_participant_by_id(encounter.participants, character_id)
        if participant is None:
            return False
        healed = hit_points.heal(participant, amount)
        if healed:
            encounter.touch()
        return healed

    @staticmethod
    def add_condition(encounter: Encounter, character_id: Any, condition: str) -> bool:
        """Add a condition to a participant; False if missing or already present."""
        participant = find_participant_by_id(encounter.participants, character_id)
        if participant is None:
            return False
        added = conditions.add_condition(participant, condition)
        if added:
            encounter.touch()
        return added

    @staticmethod
    def remove_condition(encounter: Encounter, character_id: Any, condition: str) -> bool:
        """Remove a condition from a participant; False if missing or not present."""
        participant = find_participant_by_id(encounter.participants, character_id)
        if participant is None:
            return False
        removed = conditions.remove_condition(participant, condition)
        if removed:
            encounter.touch()
        return removed

    @staticmethod
    def calculate_difficulty(encounter: Encounter) -> Difficulty:
        """Estimate difficulty from the encounter's players and participants."""
        return calculate_encounter_difficulty(encounter.player_count, encounter.participant_count)

    @staticmethod
    def duplicate_encounter(encounter: Encounter, new_name: Optional[str] = None) -> Encounter:
        """
        Copy an encounter as a fresh draft.

        Args:
            encounter: Encounter to copy
            new_name: Name for the copy; defaults to "<name> (Copy)"

        Returns:
            New Encounter with reset combat state
        """
        now = utcnow()
        return encounter.model_copy(
            update={
                "encounter_id": str(uuid.uuid4()),
                "name": new_name or f"{encounter.name}{DEFAULT_COPY_SUFFIX}",
                "status": EncounterStatus.DRAFT,
                "version": DEFAULT_ENCOUNTER_VERSION,
                "participants": copy.deepcopy(encounter.participants),
                "combat_state": create_default_combat_state(),
                "settings": encounter.settings.model_copy(),
                "tags": list(encounter.tags),
                "created_at": now,
                "updated_at": now,
            }
        )

    @staticmethod
    def to_summary(encounter: Encounter) -> EncounterSummary:
        """Build the listing view of an encounter."""
        return EncounterSummary(
            encounter_id=encounter.encounter_id,
            name=encounter.name,
            description=encounter.description,
            tags=list(encounter.tags),
            difficulty=encounter.difficulty,
            estimated_duration=encounter.estimated_duration,
            target_level=encounter.target_level,
            status=encounter.status,
            is_public=encounter.is_public,
            participant_count=encounter.participant_count,
            player_count=encounter.player_count,
            is_active=encounter.is_active,
            created_at=encounter.created_at,
            updated_at=encounter.updated_at,
        )
