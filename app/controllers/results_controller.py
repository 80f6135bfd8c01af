"""
Controlador de resultados - Alta de resultados de eventos (panel de administración)
"""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import WriteGateway
from app.database import GatewayError
from app.models.result import ResultCreate
from app.services.result_service import ResultService, ResultValidationError


router = APIRouter(prefix="/results", tags=["results"])


class ResultCreatedResponse(BaseModel):
    """Confirmación del alta con las filas insertadas."""
    message: str
    data: list[dict[str, Any]]


@router.post("", response_model=ResultCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_result(
    result_data: ResultCreate,
    db: WriteGateway
):
    """
    Registrar el resultado de un evento.

    event_name y event_type son obligatorios; los lugares pueden venir vacíos.
    """
    result_service = ResultService(db)

    try:
        data = await result_service.add_result(result_data)
    except ResultValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except GatewayError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

    return ResultCreatedResponse(message="Result added successfully", data=data)
