"""Identity-keyed lookups over encounter structures."""

from collections.abc import Iterable
from typing import Any, Optional

from dndtracker.helpers.identity import canonical_id
from dndtracker.models.participant import InitiativeEntry, Participant


def find_participant_by_id(participants: Iterable[Participant], character_id: Any) -> Optional[Participant]:
    """Return the first participant whose character id matches, or None."""
    wanted = canonical_id(character_id)
    return next((p for p in participants if canonical_id(p.character_id) == wanted), None)


def find_initiative_entry(order: Iterable[InitiativeEntry], participant_id: Any) -> Optional[InitiativeEntry]:
    """Return the first initiative entry for a participant, or None."""
    wanted = canonical_id(participant_id)
    return next((e for e in order if canonical_id(e.participant_id) == wanted), None)
