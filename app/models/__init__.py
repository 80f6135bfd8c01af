from .institute import Institute, InstituteId
from .event import Event
from .result import Result, ResultCreate
from .leaderboard import LeaderboardEntry

__all__ = [
    "Institute",
    "InstituteId",
    "Event",
    "Result",
    "ResultCreate",
    "LeaderboardEntry",
]
