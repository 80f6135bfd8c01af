from typing import Optional, Union
from pydantic import BaseModel

# Supabase puede devolver ids enteros (bigint) o strings (uuid)
InstituteId = Union[int, str]


class Institute(BaseModel):
    """Institución que compite en el leaderboard"""

    id: InstituteId
    name: Optional[str] = None  # una fila sin nombre igual entra al leaderboard

    class Config:
        populate_by_name = True
