"""Encounter difficulty estimation."""

from dndtracker.config import (
    DIFFICULTY_EASY_MAX_RATIO,
    DIFFICULTY_HARD_MAX_RATIO,
    DIFFICULTY_MEDIUM_MAX_RATIO,
    DIFFICULTY_TRIVIAL_MAX_RATIO,
)
from dndtracker.models.metadata import Difficulty

# (exclusive upper ratio bound, label), checked in order
_THRESHOLDS = (
    (DIFFICULTY_TRIVIAL_MAX_RATIO, Difficulty.TRIVIAL),
    (DIFFICULTY_EASY_MAX_RATIO, Difficulty.EASY),
    (DIFFICULTY_MEDIUM_MAX_RATIO, Difficulty.MEDIUM),
    (DIFFICULTY_HARD_MAX_RATIO, Difficulty.HARD),
)


def calculate_encounter_difficulty(player_count: int, total_combatant_count: int) -> Difficulty:
    """
    Classify an encounter by combatants per player.

    Args:
        player_count: Number of player characters
        total_combatant_count: Number of combatants including players

    Returns:
        Difficulty label; DEADLY when there are no players
    """
    player_count = max(0, player_count)
    total_combatant_count = max(0, total_combatant_count)
    if player_count == 0:
        return Difficulty.DEADLY

    ratio = total_combatant_count / player_count
    for upper_bound, label in _THRESHOLDS:
        if ratio < upper_bound:
            return label
    return Difficulty.DEADLY
