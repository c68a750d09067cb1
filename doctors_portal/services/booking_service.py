from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
from bson import ObjectId
from typing import Any, Dict, List, NamedTuple, Optional
import logging

from ..core.database import BOOKINGS, BOOKING_KEY, serialize_document, serialize_documents
from ..schemas.booking import BookingCreate

logger = logging.getLogger(__name__)

class BookingSubmission(NamedTuple):
    created: bool
    booking: Dict[str, Any]

class BookingService:
    def __init__(self, db: Database):
        self.bookings = db[BOOKINGS]

    def submit_booking(self, booking_data: BookingCreate) -> BookingSubmission:
        """Store a booking unless the patient already holds the same one.

        A booking is identified by treatment, date and patient name. A repeat
        submission returns the stored booking with created=False.
        """
        booking = booking_data.to_document()
        query = {field: booking[field] for field in BOOKING_KEY}

        existing = self.bookings.find_one(query)
        if existing:
            logger.info(
                f"Duplicate booking for {booking['patientName']}: "
                f"{booking['treatment']} on {booking['date']}"
            )
            return BookingSubmission(False, serialize_document(existing))

        try:
            result = self.bookings.insert_one(booking)
        except DuplicateKeyError:
            # Lost a race with an identical submission
            existing = self.bookings.find_one(query)
            if existing is None:
                raise
            return BookingSubmission(False, serialize_document(existing))

        booking["_id"] = result.inserted_id
        logger.info(
            f"Booked {booking['treatment']} at {booking['slot']} on {booking['date']} "
            f"for {booking['patientEmail']}"
        )
        return BookingSubmission(True, serialize_document(booking))

    def bookings_for_patient(self, patient_email: str) -> List[Dict[str, Any]]:
        """All bookings made with `patient_email`."""
        return serialize_documents(self.bookings.find({"patientEmail": patient_email}))

    def get_booking(self, booking_id: str) -> Optional[Dict[str, Any]]:
        """Fetch one booking by its id.

        Raises bson.errors.InvalidId when `booking_id` is not an ObjectId.
        """
        return serialize_document(self.bookings.find_one({"_id": ObjectId(booking_id)}))
