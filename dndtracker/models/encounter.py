"""Encounter, settings and combat state models."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from dndtracker.models.metadata import Difficulty, EncounterStatus
from dndtracker.models.participant import DOCUMENT_CONFIG, InitiativeEntry, Participant


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class EncounterSettings(BaseModel):
    """Per-encounter configuration."""

    model_config = DOCUMENT_CONFIG

    allow_player_visibility: bool = Field(description="Whether players may view the encounter")
    auto_roll_initiative: bool = Field(description="Roll initiative automatically when combat starts")
    track_resources: bool = Field(description="Track spell slots and other limited resources")
    enable_lair_actions: bool = Field(description="Insert lair actions into the turn order")
    enable_grid_movement: bool = Field(description="Track positions on a grid")
    grid_size: int = Field(ge=1, description="Grid square size in feet")


class CombatState(BaseModel):
    """Transient combat information for an encounter."""

    model_config = DOCUMENT_CONFIG

    is_active: bool = Field(description="Whether combat is currently running")
    current_round: int = Field(ge=0, description="Current round number (0 before combat starts)")
    current_turn: int = Field(ge=0, description="Index into initiative_order of the acting entry")
    initiative_order: list[InitiativeEntry] = Field(description="Turn order, highest initiative first")
    total_duration: int = Field(ge=0, description="Accumulated combat time in milliseconds")
    started_at: Optional[datetime] = Field(default=None, description="When the current timing interval started")
    paused_at: Optional[datetime] = Field(default=None, description="When combat was paused, if paused")
    ended_at: Optional[datetime] = Field(default=None, description="When combat ended")


class Encounter(BaseModel):
    """Aggregate of participants, settings and combat state for one session."""

    model_config = DOCUMENT_CONFIG

    encounter_id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique encounter identifier")
    owner_id: str = Field(description="User that owns the encounter")
    name: str = Field(min_length=1, description="Encounter name")
    description: str = Field(default="", description="Encounter description")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    difficulty: Optional[Difficulty] = Field(default=None, description="Difficulty chosen by the owner")
    estimated_duration: Optional[int] = Field(default=None, ge=0, description="Estimated duration in minutes")
    target_level: Optional[int] = Field(default=None, ge=1, description="Intended character level")
    status: EncounterStatus = Field(default=EncounterStatus.DRAFT, description="Lifecycle status")

    participants: list[Participant] = Field(default_factory=list, description="All combatants")
    combat_state: CombatState = Field(description="Combat state")
    settings: EncounterSettings = Field(description="Encounter settings")

    is_public: bool = Field(default=False, description="Whether the encounter is shared")
    version: int = Field(default=1, ge=1, description="Document version")
    created_at: datetime = Field(default_factory=utcnow, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utcnow, description="Last modification timestamp")

    @property
    def participant_count(self) -> int:
        """Number of participants in the encounter."""
        return len(self.participants)

    @property
    def player_count(self) -> int:
        """Number of player-controlled participants."""
        return sum(1 for participant in self.participants if participant.is_player)

    @property
    def is_active(self) -> bool:
        """Whether combat is running."""
        return self.combat_state.is_active

    def touch(self) -> None:
        """Mark the encounter as modified."""
        self.updated_at = utcnow()


class EncounterSummary(BaseModel):
    """Listing view of an encounter."""

    model_config = DOCUMENT_CONFIG

    encounter_id: str
    name: str
    description: str
    tags: list[str]
    difficulty: Optional[Difficulty]
    estimated_duration: Optional[int]
    target_level: Optional[int]
    status: EncounterStatus
    is_public: bool
    participant_count: int
    player_count: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
