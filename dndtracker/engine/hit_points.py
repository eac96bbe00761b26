"""Hit point mutation and repair."""

import logging

from dndtracker.models.participant import Participant

logger = logging.getLogger(__name__.split(".")[-1])


def apply_damage(participant: Participant, amount: int) -> bool:
    """
    Apply damage, draining temporary hit points first.

    Args:
        participant: Participant to damage (mutated in place)
        amount: Damage amount

    Returns:
        False for negative amounts (nothing changes), True otherwise
    """
    if amount < 0:
        logger.debug(f"Rejected negative damage {amount} for {participant.name}")
        return False

    temporary = max(0, participant.temporary_hit_points)
    absorbed = min(amount, temporary)
    overflow = amount - absorbed

    participant.temporary_hit_points = temporary - absorbed
    participant.current_hit_points = max(0, participant.current_hit_points - overflow)

    logger.debug(
        f"{participant.name} took {amount} damage ({absorbed} absorbed): "
        f"hp={participant.current_hit_points}, temp={participant.temporary_hit_points}"
    )
    return True


def heal(participant: Participant, amount: int) -> bool:
    """
    Restore hit points up to the maximum. Temporary hit points are not affected.

    Args:
        participant: Participant to heal (mutated in place)
        amount: Healing amount

    Returns:
        False for negative amounts (nothing changes), True otherwise
    """
    if amount < 0:
        logger.debug(f"Rejected negative healing {amount} for {participant.name}")
        return False

    participant.current_hit_points = min(participant.max_hit_points, participant.current_hit_points + amount)
    logger.debug(f"{participant.name} healed {amount}: hp={participant.current_hit_points}")
    return True


def validate_participant_hp(participant: Participant) -> None:
    """Clamp hit point fields back into range after an unchecked edit."""
    # Ensure stats don't go below 0
    participant.max_hit_points = max(0, participant.max_hit_points)
    participant.temporary_hit_points = max(0, participant.temporary_hit_points)

    # Current can't exceed max
    participant.current_hit_points = min(participant.current_hit_points, participant.max_hit_points)
    participant.current_hit_points = max(0, participant.current_hit_points)
