"""Initiative ordering."""

from collections.abc import Iterable

from dndtracker.models.participant import InitiativeEntry


def sort_initiative_order(entries: Iterable[InitiativeEntry]) -> list[InitiativeEntry]:
    """
    Order entries for turn taking.

    Highest initiative first, dexterity breaks ties. Python's sort is stable,
    so entries tied on both keys keep their input order.

    Args:
        entries: Initiative entries in any order

    Returns:
        New list with the same entry objects in turn order
    """
    return sorted(entries, key=lambda entry: (-entry.initiative, -entry.dexterity))
