from .institute_repository import InstituteRepository
from .event_repository import EventRepository
from .result_repository import ResultRepository

__all__ = [
    "InstituteRepository",
    "EventRepository",
    "ResultRepository",
]
