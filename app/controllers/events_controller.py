"""
Controlador de eventos - Endpoints relacionados con eventos
"""

from typing import Optional, Union

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import ReadGateway
from app.database import GatewayError
from app.services.event_service import EventService


router = APIRouter(prefix="/events", tags=["events"])


class EventResponse(BaseModel):
    """Evento predefinido devuelto por la API."""
    id: Union[int, str]
    name: Optional[str] = None
    type: Optional[str] = None


@router.get("", response_model=list[EventResponse])
async def get_events(db: ReadGateway):
    """
    Obtener todos los eventos predefinidos.

    Se usan en los dropdowns del panel de administración.
    """
    event_service = EventService(db)

    try:
        events = await event_service.get_events()
    except GatewayError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return [EventResponse(id=e.id, name=e.name, type=e.type) for e in events]
