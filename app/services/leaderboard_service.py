"""
LeaderboardService - Calculates the institute leaderboard in real-time.

Every request reads a fresh snapshot of institutes and results and tallies
placements into point totals and medal counts. Nothing is cached or stored.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from app.database import SupabaseGateway
from app.models.institute import Institute, InstituteId
from app.models.leaderboard import LeaderboardEntry
from app.models.result import Result
from app.repositories.institute_repository import InstituteRepository
from app.repositories.result_repository import ResultRepository
from app.services.points_service import DEFAULT_SCORING, PlacementOutcome, ScoringTable

logger = logging.getLogger(__name__)


@dataclass
class InstituteTally:
    """Mutable accumulator for one institute during aggregation."""

    institute_id: InstituteId
    name: Optional[str]
    individual: list[int] = field(default_factory=lambda: [0, 0, 0])
    group: list[int] = field(default_factory=lambda: [0, 0, 0])
    total: int = 0

    def to_entry(self) -> LeaderboardEntry:
        return LeaderboardEntry(
            id=self.institute_id,
            name=self.name,
            individual=list(self.individual),
            group=list(self.group),
            total=self.total,
        )


@dataclass(frozen=True)
class PlacementRecord:
    """One present placement of one result and how it was scored."""

    event_name: Optional[str]
    rank: int
    institute_id: InstituteId
    outcome: PlacementOutcome
    points: int = 0


@dataclass
class LeaderboardTally:
    tallies: dict[str, InstituteTally]
    placements: list[PlacementRecord]

    def outcomes(self, outcome: PlacementOutcome) -> list[PlacementRecord]:
        return [p for p in self.placements if p.outcome == outcome]


def _key(institute_id: InstituteId) -> str:
    # 1 y "1" son la misma institución
    return str(institute_id)


def _is_present(placement: Optional[InstituteId]) -> bool:
    return placement is not None and placement != ""


def _tie_break_key(institute_id: InstituteId) -> tuple:
    # Integer ids numerically, then string ids lexicographically
    if isinstance(institute_id, int):
        return (0, institute_id, "")
    return (1, 0, str(institute_id))


def tally_results(
    institutes: Iterable[Institute],
    results: Iterable[Result],
    scoring: ScoringTable = DEFAULT_SCORING,
) -> LeaderboardTally:
    """
    Tally every placement of every result against the institutes.

    Returns the per-institute accumulators plus one PlacementRecord per
    present placement, so callers can see which ones were skipped and why.
    """
    tallies: dict[str, InstituteTally] = {}
    for institute in institutes:
        tallies.setdefault(
            _key(institute.id),
            InstituteTally(institute_id=institute.id, name=institute.name),
        )

    placements: list[PlacementRecord] = []

    for result in results:
        event_scoring = scoring.for_event_type(result.event_type)

        for rank, institute_id in enumerate(result.placements, start=1):
            if not _is_present(institute_id):
                continue

            if event_scoring is None:
                placements.append(PlacementRecord(
                    event_name=result.event_name,
                    rank=rank,
                    institute_id=institute_id,
                    outcome=PlacementOutcome.SKIPPED_UNKNOWN_TYPE,
                ))
                continue

            tally = tallies.get(_key(institute_id))
            if tally is None:
                placements.append(PlacementRecord(
                    event_name=result.event_name,
                    rank=rank,
                    institute_id=institute_id,
                    outcome=PlacementOutcome.SKIPPED_UNKNOWN_INSTITUTE,
                ))
                continue

            points = event_scoring.points_for(rank)
            tally.total += points
            medals = tally.individual if event_scoring.category == "individual" else tally.group
            medals[rank - 1] += 1

            placements.append(PlacementRecord(
                event_name=result.event_name,
                rank=rank,
                institute_id=institute_id,
                outcome=PlacementOutcome.APPLIED,
                points=points,
            ))

    return LeaderboardTally(tallies=tallies, placements=placements)


def build_leaderboard(
    institutes: Iterable[Institute],
    results: Iterable[Result],
    scoring: ScoringTable = DEFAULT_SCORING,
) -> list[LeaderboardEntry]:
    """
    Rank institutes by total points (descending).

    Every institute appears exactly once, including those with no results.
    Equal totals are ordered by institute id ascending.
    """
    tally = tally_results(institutes, results, scoring)

    skipped = len(tally.placements) - len(tally.outcomes(PlacementOutcome.APPLIED))
    if skipped:
        logger.debug(f"Skipped {skipped} placements while building the leaderboard")

    ordered = sorted(
        tally.tallies.values(),
        key=lambda t: (-t.total, _tie_break_key(t.institute_id)),
    )
    return [t.to_entry() for t in ordered]


class LeaderboardService:
    def __init__(self, db: SupabaseGateway, scoring: ScoringTable = DEFAULT_SCORING):
        self.institute_repo = InstituteRepository(db)
        self.result_repo = ResultRepository(db)
        self.scoring = scoring

    async def get_leaderboard(self) -> list[LeaderboardEntry]:
        """
        Fetch institutes and results, then aggregate.

        GatewayError from either read propagates to the caller.
        """
        institutes = await self.institute_repo.get_all()
        results = await self.result_repo.get_all()

        return build_leaderboard(institutes, results, self.scoring)
