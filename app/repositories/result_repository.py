"""
🥇 ResultRepository - Lectura y alta de resultados
"""

from typing import Any

from pydantic import ValidationError

from app.database import GatewayError, SupabaseGateway
from app.models.result import Result


class ResultRepository:
    def __init__(self, db: SupabaseGateway):
        self.db = db
        self.table = "results"

    # ============================================
    # 📌 CREATE
    # ============================================

    async def create(self, payload: dict[str, Any]) -> list[dict[str, Any]]:
        """Inserta un resultado y retorna las filas insertadas"""
        return await self.db.insert(self.table, [payload])

    # ============================================
    # 📌 READ
    # ============================================

    async def get_all(self) -> list[Result]:
        """Obtiene todos los resultados"""
        rows = await self.db.select(self.table, "*")
        try:
            return [Result(**row) for row in rows]
        except (TypeError, ValidationError) as e:
            raise GatewayError(f"Invalid row in table {self.table}: {e}")
