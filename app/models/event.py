from typing import Optional, Union
from pydantic import BaseModel


class Event(BaseModel):
    """Categoría de competencia predefinida (INDIVIDUAL o GROUP)"""

    id: Union[int, str]
    name: Optional[str] = None
    type: Optional[str] = None  # INDIVIDUAL | GROUP

    class Config:
        populate_by_name = True
