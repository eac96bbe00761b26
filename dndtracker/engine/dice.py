"""Dice rolling system for DnD mechanics."""

import random
from typing import Optional, Protocol

from dndtracker.config import INITIATIVE_DIE_SIDES


class RandomSource(Protocol):
    """Anything that can produce a uniform integer in an inclusive range (e.g. random.Random)."""

    def randint(self, a: int, b: int) -> int:
        ...


class DiceRoller:
    """Handles DnD dice mechanics."""

    @staticmethod
    def roll(
        dice_type: int, modifier: int = 0, count: int = 1, rng: Optional[RandomSource] = None
    ) -> dict[str, int]:
        """
        Roll dice with modifier.

        Args:
            dice_type: Type of dice (e.g., 20 for d20, 6 for d6)
            modifier: Modifier to add to result
            count: Number of dice to roll
            rng: Random source; the process-wide generator when omitted

        Returns:
            Dictionary with 'total', 'rolls', and 'modifier' keys
        """
        if dice_type < 1:
            raise ValueError(f"Invalid dice type: d{dice_type}")
        if count < 0:
            raise ValueError(f"Invalid dice count: {count}")
        source = rng if rng is not None else random
        rolls = [source.randint(1, dice_type) for _ in range(count)]
        total = sum(rolls) + modifier
        return {
            "total": total,
            "rolls": rolls,
            "modifier": modifier,
            "dice_type": dice_type,
            "count": count,
        }

    @staticmethod
    def roll_d20(modifier: int = 0, rng: Optional[RandomSource] = None) -> dict[str, int]:
        """Roll a d20 with modifier."""
        return DiceRoller.roll(20, modifier, 1, rng)

    @staticmethod
    def roll_initiative(rng: Optional[RandomSource] = None) -> int:
        """Roll a single initiative die, uniform over 1..20."""
        return DiceRoller.roll(INITIATIVE_DIE_SIDES, 0, 1, rng)["total"]
