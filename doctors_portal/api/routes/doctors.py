from fastapi import APIRouter, Depends
from pymongo.database import Database
from typing import Any, Dict, List

from ...core.database import get_db
from ...core.security import TokenPayload
from ...api.deps import get_current_user_token, get_admin_user
from ...services.doctor_service import DoctorService
from ...schemas.common import DeleteResult, InsertResult
from ...schemas.doctor import DoctorCreate

router = APIRouter(prefix="/doctor", tags=["Doctors"])

@router.post("", response_model=InsertResult)
def add_doctor(
    doctor_data: DoctorCreate,
    db: Database = Depends(get_db),
    _: TokenPayload = Depends(get_admin_user)
):
    """Add a doctor (admin only)."""
    return DoctorService(db).add_doctor(doctor_data)

@router.get("", response_model=List[Dict[str, Any]])
def list_doctors(
    db: Database = Depends(get_db),
    _: TokenPayload = Depends(get_current_user_token)
):
    """List all doctors."""
    return DoctorService(db).list_doctors()

@router.delete("/{email}", response_model=DeleteResult)
def delete_doctor(
    email: str,
    db: Database = Depends(get_db),
    _: TokenPayload = Depends(get_admin_user)
):
    """Remove a doctor (admin only)."""
    return DoctorService(db).delete_doctor(email)
