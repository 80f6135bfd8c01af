"""
Controlador de salud - Endpoint de comprobación del servicio
"""

from fastapi import APIRouter
from pydantic import BaseModel

from app.database import Database


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    gateway: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Endpoint de verificación de estado.

    Comprueba que la API esté en funcionamiento y que los clientes de Supabase estén creados.
    """
    gateway_status = "connected" if Database.reader is not None else "disconnected"

    return HealthResponse(
        status="ok",
        gateway=gateway_status
    )
