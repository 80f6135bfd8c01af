"""
🏫 InstituteRepository - Lectura de instituciones
"""

from pydantic import ValidationError

from app.database import GatewayError, SupabaseGateway
from app.models.institute import Institute


class InstituteRepository:
    def __init__(self, db: SupabaseGateway):
        self.db = db
        self.table = "institutes"

    async def get_all(self) -> list[Institute]:
        """Obtiene todas las instituciones (id, name)"""
        rows = await self.db.select(self.table, "id, name")
        try:
            return [Institute(**row) for row in rows]
        except (TypeError, ValidationError) as e:
            raise GatewayError(f"Invalid row in table {self.table}: {e}")
