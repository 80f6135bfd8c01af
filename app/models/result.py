from datetime import datetime
from typing import Any, Optional, Union
from pydantic import BaseModel, field_validator

from app.models.institute import InstituteId


class Result(BaseModel):
    """Resultado registrado de un evento (1ro/2do/3er lugar)"""

    id: Optional[Union[int, str]] = None

    event_name: Optional[str] = None
    event_type: Optional[str] = None  # INDIVIDUAL | GROUP (otros valores se ignoran al puntuar)

    # Cualquier lugar puede faltar (sin ganador para ese puesto)
    first_place_id: Optional[InstituteId] = None
    second_place_id: Optional[InstituteId] = None
    third_place_id: Optional[InstituteId] = None

    created_at: Optional[datetime] = None

    class Config:
        populate_by_name = True

    @field_validator("event_type", mode="before")
    @classmethod
    def _stringify_event_type(cls, value: Any) -> Optional[str]:
        # Un tipo mal cargado en la tabla no debe romper la lectura; al puntuar se ignora
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @property
    def placements(self) -> tuple[Optional[InstituteId], Optional[InstituteId], Optional[InstituteId]]:
        """Ids de 1ro, 2do y 3er lugar, en ese orden"""
        return (self.first_place_id, self.second_place_id, self.third_place_id)


class ResultCreate(BaseModel):
    """Body de POST /results. Los obligatorios se validan en el servicio."""

    event_name: Optional[str] = None
    event_type: Optional[str] = None
    first_place_id: Optional[InstituteId] = None
    second_place_id: Optional[InstituteId] = None
    third_place_id: Optional[InstituteId] = None
