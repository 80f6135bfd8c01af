"""
Controlador de leaderboard - Endpoint de clasificación pública

La tabla se calcula en cada request a partir de instituciones y resultados.
"""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import ReadGateway, Scoring
from app.database import GatewayError
from app.models.leaderboard import LeaderboardEntry
from app.services.leaderboard_service import LeaderboardService


router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("", response_model=list[LeaderboardEntry])
async def get_leaderboard(
    db: ReadGateway,
    scoring: Scoring
):
    """
    Obtener el leaderboard: puntos totales y medallas por institución,
    ordenado por puntos (descendente).
    """
    leaderboard_service = LeaderboardService(db, scoring)

    try:
        return await leaderboard_service.get_leaderboard()
    except GatewayError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
