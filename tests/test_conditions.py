"""Tests for condition management."""

from dndtracker.engine.conditions import add_condition, remove_condition
from factories import make_participant


class TestAddCondition:
    """Test suite for add_condition."""

    def test_add_new_condition(self):
        """Test adding a condition the participant lacks."""
        participant = make_participant(conditions=["poisoned"])
        assert add_condition(participant, "stunned") is True
        assert participant.conditions == ["poisoned", "stunned"]

    def test_duplicate_not_added(self):
        """Test that a present condition is not added twice."""
        participant = make_participant(conditions=["poisoned"])
        assert add_condition(participant, "poisoned") is False
        assert participant.conditions.count("poisoned") == 1


class TestRemoveCondition:
    """Test suite for remove_condition."""

    def test_remove_existing(self):
        """Test removing a present condition."""
        participant = make_participant(conditions=["poisoned"])
        assert remove_condition(participant, "poisoned") is True
        assert "poisoned" not in participant.conditions

    def test_remove_missing(self):
        """Test that removing an absent condition changes nothing."""
        participant = make_participant(conditions=["poisoned"])
        assert remove_condition(participant, "stunned") is False
        assert participant.conditions == ["poisoned"]

    def test_other_conditions_preserved(self):
        """Test that the remaining conditions are kept."""
        participant = make_participant(conditions=["blinded", "poisoned", "prone"])
        remove_condition(participant, "poisoned")
        assert participant.conditions == ["blinded", "prone"]
