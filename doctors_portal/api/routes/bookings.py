from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo.database import Database
from typing import Any, Dict, List

from ...core.database import get_db
from ...core.security import TokenPayload, AuthorizationError
from ...api.deps import get_current_user_token
from ...services.booking_service import BookingService
from ...schemas.booking import BookingCreate, BookingSubmitResponse

router = APIRouter(tags=["Bookings"])

@router.post("/booking", response_model=BookingSubmitResponse)
def submit_booking(
    booking_data: BookingCreate,
    db: Database = Depends(get_db)
):
    """Book a slot; a repeat of an existing booking returns it with success false."""
    submission = BookingService(db).submit_booking(booking_data)
    return BookingSubmitResponse(success=submission.created, booking=submission.booking)

@router.get("/booking", response_model=List[Dict[str, Any]])
def patient_bookings(
    patient_email: str = Query(..., alias="patientEmail"),
    db: Database = Depends(get_db),
    token_payload: TokenPayload = Depends(get_current_user_token)
):
    """List the caller's own bookings."""
    if patient_email != token_payload.email:
        raise AuthorizationError()
    return BookingService(db).bookings_for_patient(patient_email)

@router.get("/bookings/{booking_id}", response_model=Dict[str, Any])
def get_booking(
    booking_id: str,
    db: Database = Depends(get_db),
    _: TokenPayload = Depends(get_current_user_token)
):
    """Fetch one booking, e.g. for the payment page."""
    booking = BookingService(db).get_booking(booking_id)
    if not booking:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Booking not found"
        )
    return booking
