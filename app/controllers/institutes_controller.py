"""
Controlador de instituciones - Endpoints de las instituciones que compiten
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import ReadGateway
from app.database import GatewayError
from app.models.institute import InstituteId
from app.services.event_service import EventService


router = APIRouter(prefix="/institutes", tags=["institutes"])


class InstituteResponse(BaseModel):
    """Institución devuelta por la API."""
    id: InstituteId
    name: Optional[str] = None


@router.get("", response_model=list[InstituteResponse])
async def get_institutes(db: ReadGateway):
    """Obtener todas las instituciones (para los dropdowns del panel de administración)."""
    event_service = EventService(db)

    try:
        institutes = await event_service.get_institutes()
    except GatewayError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return [InstituteResponse(id=i.id, name=i.name) for i in institutes]
