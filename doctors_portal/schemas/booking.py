from typing import Any, Dict

from pydantic import BaseModel

from .common import DocumentModel

class BookingCreate(DocumentModel):
    treatment: str
    date: str
    slot: str
    patient_email: str
    patient_name: str

class BookingSubmitResponse(BaseModel):
    success: bool
    booking: Dict[str, Any]
