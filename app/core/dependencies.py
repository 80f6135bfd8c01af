"""
Dependencies de FastAPI para inyeccion de BD y configuracion de puntajes
"""

from typing import Annotated

from fastapi import Depends

from app.database import SupabaseGateway, get_read_gateway, get_write_gateway
from app.services.points_service import DEFAULT_SCORING, ScoringTable


def get_scoring_table() -> ScoringTable:
    """
    Dependency con la tabla de puntos.

    Los tests pueden reemplazarla con app.dependency_overrides.
    """
    return DEFAULT_SCORING


# Alias de tipos para que se vea mas limpio en los endpoints
ReadGateway = Annotated[SupabaseGateway, Depends(get_read_gateway)]
WriteGateway = Annotated[SupabaseGateway, Depends(get_write_gateway)]
Scoring = Annotated[ScoringTable, Depends(get_scoring_table)]
