"""Encounter classification enums."""

from enum import Enum


class Difficulty(str, Enum):
    """Encounter difficulty labels, in increasing severity."""

    TRIVIAL = "trivial"
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    DEADLY = "deadly"


class EncounterStatus(str, Enum):
    """Lifecycle status of an encounter."""

    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"
