"""Participant and initiative models."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from dndtracker.helpers.identity import canonical_id

# Mutable document shape: combat operations update these models in place
DOCUMENT_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, extra="forbid", validate_assignment=True
)


class ParticipantType(str, Enum):
    """Kind of combatant."""

    PC = "pc"
    NPC = "npc"
    MONSTER = "monster"


class Participant(BaseModel):
    """A combatant placed into an encounter."""

    model_config = DOCUMENT_CONFIG

    character_id: str = Field(description="Reference to the source character or monster")
    name: str = Field(description="Display name")
    type: ParticipantType = Field(description="Player character, NPC or monster")

    # Hit points. Range invariants are enforced by the engine, not at construction,
    # so that out-of-range values written by other paths can still be loaded and repaired.
    max_hit_points: int = Field(ge=0, description="Ceiling for current hit points")
    current_hit_points: int = Field(description="Current hit points")
    temporary_hit_points: int = Field(default=0, description="Damage buffer consumed before current hit points")

    armor_class: int = Field(default=10, description="Armor class (informational)")
    is_player: bool = Field(default=False, description="Whether a player controls this participant")
    is_visible: bool = Field(default=True, description="Whether players can see this participant")
    conditions: list[str] = Field(
        default_factory=list, description="Status conditions (e.g., 'poisoned', 'stunned')"
    )
    notes: str = Field(default="", description="Free-text notes")

    # Caller-specific data lives here instead of ad-hoc attributes
    metadata: dict[str, Any] = Field(default_factory=dict, description="Extension data owned by the caller")

    @field_validator("character_id", mode="before")
    @classmethod
    def _canonicalize_character_id(cls, value: Any) -> str:
        return canonical_id(value)

    @field_validator("conditions")
    @classmethod
    def _dedupe_conditions(cls, value: list[str]) -> list[str]:
        # Conditions are a set; keep first-seen order
        return list(dict.fromkeys(value))


class InitiativeEntry(BaseModel):
    """One combatant's position in turn order."""

    model_config = DOCUMENT_CONFIG

    participant_id: str = Field(description="Character id of the participant this entry refers to")
    initiative: int = Field(description="Initiative roll result")
    dexterity: int = Field(description="Dexterity score, used only to break initiative ties")
    is_active: bool = Field(default=False, description="Whether it is this entry's turn")
    has_acted: bool = Field(default=False, description="Whether this entry has acted this round")
    is_delayed: bool = Field(default=False, description="Whether this entry is delaying its turn this round")
    ready_action: Optional[str] = Field(default=None, description="Action readied for a trigger this round")

    @field_validator("participant_id", mode="before")
    @classmethod
    def _canonicalize_participant_id(cls, value: Any) -> str:
        return canonical_id(value)
