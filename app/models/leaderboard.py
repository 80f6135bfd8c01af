from typing import Optional
from pydantic import BaseModel

from app.models.institute import InstituteId


class LeaderboardEntry(BaseModel):
    """Fila del leaderboard (resultado agregado, no se persiste)"""

    id: InstituteId
    name: Optional[str] = None

    individual: list[int]  # [oro, plata, bronce] en eventos INDIVIDUAL
    group: list[int]       # [oro, plata, bronce] en eventos GROUP

    total: int

    class Config:
        populate_by_name = True
