from app.database import SupabaseGateway
from app.repositories.institute_repository import InstituteRepository
from app.repositories.event_repository import EventRepository
from app.models.institute import Institute
from app.models.event import Event


class EventService:
    """Read-only catalog of institutes and predefined events."""

    def __init__(self, db: SupabaseGateway):
        self.institute_repo = InstituteRepository(db)
        self.event_repo = EventRepository(db)

    async def get_institutes(self) -> list[Institute]:
        """Get all institutes for the admin panel dropdowns."""
        return await self.institute_repo.get_all()

    async def get_events(self) -> list[Event]:
        """Get all predefined events for the admin panel dropdowns."""
        return await self.event_repo.get_all()
