"""
Servicio de Puntos - Tabla de puntos por lugar y tipo de evento
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping, Optional

MedalCategory = Literal["individual", "group"]


class PlacementOutcome(str, Enum):
    """What happened to a single placement while scoring a result."""

    APPLIED = "applied"
    SKIPPED_UNKNOWN_TYPE = "skipped_unknown_type"
    SKIPPED_UNKNOWN_INSTITUTE = "skipped_unknown_institute"


@dataclass(frozen=True)
class EventScoring:
    """Points for 1st, 2nd and 3rd place, and which medal counter they feed."""

    points: tuple[int, int, int]
    category: MedalCategory

    def points_for(self, rank: int) -> int:
        """Points for a 1-based rank (1, 2 or 3)."""
        return self.points[rank - 1]


@dataclass(frozen=True)
class ScoringTable:
    """
    Immutable point table keyed by event type.

    Event types are matched exactly (case-sensitive). Pass a different
    table to the leaderboard functions to score with other rules.
    """

    events: Mapping[str, EventScoring] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "events", MappingProxyType(dict(self.events)))

    def for_event_type(self, event_type: Optional[str]) -> Optional[EventScoring]:
        if event_type is None:
            return None
        return self.events.get(event_type)


# Sistema de puntos:
# - INDIVIDUAL: 10 / 7 / 5
# - GROUP: 20 / 15 / 10
DEFAULT_SCORING = ScoringTable(
    events={
        "INDIVIDUAL": EventScoring(points=(10, 7, 5), category="individual"),
        "GROUP": EventScoring(points=(20, 15, 10), category="group"),
    }
)
