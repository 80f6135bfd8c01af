"""
Unit tests for the scoring table
"""

import dataclasses

import pytest

from app.services.points_service import DEFAULT_SCORING, EventScoring, ScoringTable


class TestScoringTable:
    """Test suite for ScoringTable."""

    def test_default_individual_points(self):
        individual = DEFAULT_SCORING.for_event_type("INDIVIDUAL")

        assert individual.points == (10, 7, 5)
        assert individual.category == "individual"
        assert [individual.points_for(rank) for rank in (1, 2, 3)] == [10, 7, 5]

    def test_default_group_points(self):
        group = DEFAULT_SCORING.for_event_type("GROUP")

        assert group.points == (20, 15, 10)
        assert group.category == "group"

    def test_unknown_event_types(self):
        assert DEFAULT_SCORING.for_event_type("RELAY") is None
        assert DEFAULT_SCORING.for_event_type(None) is None
        assert DEFAULT_SCORING.for_event_type("GROUP") is not None
        assert DEFAULT_SCORING.for_event_type("group") is None

    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            DEFAULT_SCORING.events["RELAY"] = EventScoring(points=(1, 1, 1), category="group")

        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SCORING.events = {}

    def test_table_is_detached_from_source_dict(self):
        source = {"SWIM": EventScoring(points=(5, 3, 1), category="individual")}
        table = ScoringTable(events=source)

        source["DIVE"] = EventScoring(points=(1, 1, 1), category="individual")

        assert table.for_event_type("SWIM").points == (5, 3, 1)
        assert table.for_event_type("DIVE") is None
