"""Condition set operations."""

from dndtracker.models.participant import Participant


def add_condition(participant: Participant, condition: str) -> bool:
    """Add a condition; False if the participant already has it."""
    if condition in participant.conditions:
        return False
    participant.conditions.append(condition)
    return True


def remove_condition(participant: Participant, condition: str) -> bool:
    """Remove a condition; False if the participant does not have it."""
    if condition not in participant.conditions:
        return False
    participant.conditions.remove(condition)
    return True
