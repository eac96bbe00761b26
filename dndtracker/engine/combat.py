"""Combat system for turn-based combat."""

import logging
from datetime import datetime
from typing import Any, Optional

from dndtracker.config import DEFAULT_DEXTERITY, DEFAULT_TOTAL_DURATION, UNROLLED_INITIATIVE
from dndtracker.engine.dice import DiceRoller, RandomSource
from dndtracker.engine.initiative import sort_initiative_order
from dndtracker.engine.lookup import find_initiative_entry, find_participant_by_id
from dndtracker.engine.time_manager import calculate_combat_duration
from dndtracker.helpers.debug import log_call
from dndtracker.helpers.identity import canonical_id
from dndtracker.models.encounter import CombatState, Encounter, utcnow
from dndtracker.models.metadata import EncounterStatus
from dndtracker.models.participant import InitiativeEntry, Participant

logger = logging.getLogger(__name__.split(".")[-1])


class CombatSystem:
    """Handles turn-based combat sequencing for an encounter."""

    @staticmethod
    def is_in_combat(encounter: Encounter) -> bool:
        """Check if the encounter is currently in combat."""
        return encounter.combat_state.is_active

    @staticmethod
    @log_call
    def start_combat(
        encounter: Encounter,
        auto_roll: bool = False,
        rng: Optional[RandomSource] = None,
        now: Optional[datetime] = None,
        dexterity_scores: Optional[dict[str, int]] = None,
    ) -> None:
        """
        Build the initiative order and start round 1.

        Args:
            encounter: Encounter to start
            auto_roll: Roll initiative for everyone (also enabled by the encounter settings)
            rng: Random source for initiative rolls
            now: Start timestamp; current UTC time when omitted
            dexterity_scores: Character id to dexterity, for tie-breaks
        """
        roll = auto_roll or encounter.settings.auto_roll_initiative
        scores = {canonical_id(key): value for key, value in (dexterity_scores or {}).items()}

        entries = [
            InitiativeEntry(
                participant_id=participant.character_id,
                initiative=DiceRoller.roll_initiative(rng) if roll else UNROLLED_INITIATIVE,
                dexterity=scores.get(participant.character_id, DEFAULT_DEXTERITY),
            )
            for participant in encounter.participants
        ]
        order = sort_initiative_order(entries)
        if order:
            order[0].is_active = True

        combat_state = encounter.combat_state
        combat_state.initiative_order = order
        combat_state.is_active = True
        combat_state.current_round = 1
        combat_state.current_turn = 0
        combat_state.total_duration = DEFAULT_TOTAL_DURATION
        combat_state.started_at = now or utcnow()
        combat_state.paused_at = None
        combat_state.ended_at = None

        encounter.status = EncounterStatus.ACTIVE
        encounter.touch()
        logger.info(f"Combat started in {encounter.encounter_id} with {len(order)} combatants")

    @staticmethod
    @log_call
    def end_combat(encounter: Encounter, now: Optional[datetime] = None) -> bool:
        """
        Stop combat and record its duration.

        Args:
            encounter: Encounter to end
            now: End timestamp; current UTC time when omitted

        Returns:
            False if combat was not running
        """
        combat_state = encounter.combat_state
        if not combat_state.is_active:
            return False
        ended_at = now or utcnow()

        if combat_state.started_at is not None:
            combat_state.total_duration += calculate_combat_duration(
                combat_state.started_at, ended_at, combat_state.paused_at
            )

        combat_state.is_active = False
        combat_state.ended_at = ended_at
        combat_state.paused_at = None
        for entry in combat_state.initiative_order:
            entry.is_active = False
            entry.has_acted = False
            entry.is_delayed = False
            entry.ready_action = None

        encounter.status = EncounterStatus.COMPLETED
        encounter.touch()
        logger.info(f"Combat ended in {encounter.encounter_id} after {combat_state.total_duration} ms")
        return True

    @staticmethod
    def pause_combat(encounter: Encounter, now: Optional[datetime] = None) -> bool:
        """Pause the combat clock; False if not in combat or already paused."""
        combat_state = encounter.combat_state
        if not combat_state.is_active or combat_state.paused_at is not None:
            return False

        combat_state.paused_at = now or utcnow()
        encounter.touch()
        logger.info(f"Combat paused in {encounter.encounter_id}")
        return True

    @staticmethod
    def resume_combat(encounter: Encounter, now: Optional[datetime] = None) -> bool:
        """Resume a paused combat; the interval before the pause is banked."""
        combat_state = encounter.combat_state
        if combat_state.paused_at is None:
            return False

        resumed_at = now or utcnow()
        if combat_state.started_at is not None:
            combat_state.total_duration += calculate_combat_duration(
                combat_state.started_at, resumed_at, combat_state.paused_at
            )
        combat_state.started_at = resumed_at
        combat_state.paused_at = None
        encounter.touch()
        logger.info(f"Combat resumed in {encounter.encounter_id}")
        return True

    @staticmethod
    def next_turn(encounter: Encounter) -> bool:
        """
        Advance to the next entry in initiative order.

        Args:
            encounter: Encounter in combat

        Returns:
            False if combat is not active or nobody is in the order
        """
        combat_state = encounter.combat_state
        order = combat_state.initiative_order
        if not combat_state.is_active or not order:
            return False

        current_index = combat_state.current_turn % len(order)
        current = order[current_index]
        current.has_acted = True
        current.is_active = False

        next_turn = current_index + 1
        if next_turn >= len(order):
            next_turn = 0
            CombatSystem.start_new_round(combat_state)
            logger.debug(f"Round {combat_state.current_round} begins in {encounter.encounter_id}")

        combat_state.current_turn = next_turn
        order[next_turn].is_active = True
        encounter.touch()
        return True

    @staticmethod
    def start_new_round(combat_state: CombatState) -> None:
        """Bump the round counter and clear per-round flags on every entry."""
        combat_state.current_round += 1
        for entry in combat_state.initiative_order:
            entry.has_acted = False
            entry.is_delayed = False
            entry.ready_action = None

    @staticmethod
    def previous_turn(encounter: Encounter) -> bool:
        """
        Step back to the previous entry in initiative order.

        Args:
            encounter: Encounter in combat

        Returns:
            False if combat is not active or nobody is in the order
        """
        combat_state = encounter.combat_state
        order = combat_state.initiative_order
        if not combat_state.is_active or not order:
            return False

        current_index = combat_state.current_turn % len(order)
        order[current_index].is_active = False

        previous_turn = current_index - 1
        if previous_turn < 0:
            previous_turn = len(order) - 1
            combat_state.current_round = max(1, combat_state.current_round - 1)

        combat_state.current_turn = previous_turn
        order[previous_turn].is_active = True
        order[previous_turn].has_acted = False
        encounter.touch()
        return True

    @staticmethod
    def set_initiative(encounter: Encounter, participant_id: Any, initiative: int, dexterity: int) -> bool:
        """
        Change an entry's initiative and re-sort the order.

        Args:
            encounter: Encounter to modify
            participant_id: Character id of the entry
            initiative: New initiative value
            dexterity: New dexterity tie-break

        Returns:
            False if the participant has no initiative entry
        """
        combat_state = encounter.combat_state
        entry = find_initiative_entry(combat_state.initiative_order, participant_id)
        if entry is None:
            logger.warning(f"No initiative entry for {participant_id} in {encounter.encounter_id}")
            return False

        entry.initiative = initiative
        entry.dexterity = dexterity
        combat_state.initiative_order = sort_initiative_order(combat_state.initiative_order)

        # Follow the active entry to its new position
        for index, candidate in enumerate(combat_state.initiative_order):
            if candidate.is_active:
                combat_state.current_turn = index
                break

        encounter.touch()
        return True

    @staticmethod
    def delay_action(encounter: Encounter, participant_id: Any) -> bool:
        """
        Mark an entry as delaying its turn for the rest of the round.

        Returns:
            False if combat is not active or the participant has no entry
        """
        combat_state = encounter.combat_state
        if not combat_state.is_active:
            return False
        entry = find_initiative_entry(combat_state.initiative_order, participant_id)
        if entry is None:
            logger.warning(f"No initiative entry for {participant_id} in {encounter.encounter_id}")
            return False

        entry.is_delayed = True
        encounter.touch()
        logger.info(f"{entry.participant_id} delays in {encounter.encounter_id}")
        return True

    @staticmethod
    def set_ready_action(encounter: Encounter, participant_id: Any, action: Optional[str]) -> bool:
        """
        Record (or clear, with None) the action an entry has readied.

        Returns:
            False if combat is not active or the participant has no entry
        """
        combat_state = encounter.combat_state
        if not combat_state.is_active:
            return False
        entry = find_initiative_entry(combat_state.initiative_order, participant_id)
        if entry is None:
            logger.warning(f"No initiative entry for {participant_id} in {encounter.encounter_id}")
            return False

        entry.ready_action = action
        encounter.touch()
        return True

    @staticmethod
    def get_initiative_order(encounter: Encounter) -> list[InitiativeEntry]:
        """Get a copy of the initiative order."""
        return [entry.model_copy(deep=True) for entry in encounter.combat_state.initiative_order]

    @staticmethod
    def get_current_participant(encounter: Encounter) -> Optional[Participant]:
        """Get the participant whose turn it is."""
        combat_state = encounter.combat_state
        if not combat_state.is_active or not combat_state.initiative_order:
            raise ValueError("Combat is not active")
        entry = combat_state.initiative_order[combat_state.current_turn % len(combat_state.initiative_order)]
        return find_participant_by_id(encounter.participants, entry.participant_id)
