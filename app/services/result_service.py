"""
ResultService - Business logic for recording event results.

Validates the submitted result, normalizes empty placements and writes it.
"""

import logging
from typing import Any

from app.database import GatewayError, SupabaseGateway
from app.models.result import ResultCreate
from app.repositories.result_repository import ResultRepository

logger = logging.getLogger(__name__)


class ResultServiceError(Exception):
    """Base exception for result service errors."""
    pass


class ResultValidationError(ResultServiceError):
    """Raised when a submitted result is missing required fields."""
    pass


def build_result_payload(result_data: ResultCreate) -> dict[str, Any]:
    """
    Validate a submitted result and build the row to store.

    event_name and event_type are required. Empty-string placements are
    stored as None (no institute for that rank).
    """
    if not result_data.event_name or not result_data.event_type:
        raise ResultValidationError("Event name and type are required.")

    return {
        "event_name": result_data.event_name,
        "event_type": result_data.event_type,
        "first_place_id": result_data.first_place_id or None,
        "second_place_id": result_data.second_place_id or None,
        "third_place_id": result_data.third_place_id or None,
    }


class ResultService:
    def __init__(self, db: SupabaseGateway):
        self.result_repo = ResultRepository(db)

    async def add_result(self, result_data: ResultCreate) -> list[dict[str, Any]]:
        """
        Record a new result.

        Raises ResultValidationError before touching the database, and
        GatewayError if the insert fails.
        """
        payload = build_result_payload(result_data)

        try:
            return await self.result_repo.create(payload)
        except GatewayError as e:
            logger.error(f"Result insert failed: {e}")
            raise
