from pymongo.database import Database
from typing import Any, Dict, List

from ..core.database import SERVICES, BOOKINGS, serialize_documents
from .availability import compute_availability

class CatalogService:
    """Read access to the treatments the clinic offers."""

    def __init__(self, db: Database):
        self.services = db[SERVICES]
        self.bookings = db[BOOKINGS]

    def list_service_names(self) -> List[Dict[str, Any]]:
        return serialize_documents(self.services.find({}, {"name": 1}))

    def available_on(self, date: str) -> List[Dict[str, Any]]:
        """Every service with the slots still open on `date`."""
        services = self.services.find()
        bookings = self.bookings.find({"date": date})
        return serialize_documents(compute_availability(date, services, bookings))
