"""
📅 EventRepository - Lectura de eventos predefinidos
"""

from pydantic import ValidationError

from app.database import GatewayError, SupabaseGateway
from app.models.event import Event


class EventRepository:
    def __init__(self, db: SupabaseGateway):
        self.db = db
        self.table = "events"

    async def get_all(self) -> list[Event]:
        """Obtiene todos los eventos (id, name, type)"""
        rows = await self.db.select(self.table, "id, name, type")
        try:
            return [Event(**row) for row in rows]
        except (TypeError, ValidationError) as e:
            raise GatewayError(f"Invalid row in table {self.table}: {e}")
