from pymongo.database import Database
from typing import Any, Dict, List
import logging

from ..core.database import DOCTORS, serialize_documents
from ..schemas.common import DeleteResult, InsertResult
from ..schemas.doctor import DoctorCreate

logger = logging.getLogger(__name__)

class DoctorService:
    def __init__(self, db: Database):
        self.doctors = db[DOCTORS]

    def add_doctor(self, doctor_data: DoctorCreate) -> InsertResult:
        doctor = doctor_data.to_document()
        result = self.doctors.insert_one(doctor)
        logger.info(f"Added doctor {doctor['email']}")
        return InsertResult.from_pymongo(result)

    def list_doctors(self) -> List[Dict[str, Any]]:
        return serialize_documents(self.doctors.find())

    def delete_doctor(self, email: str) -> DeleteResult:
        """Remove one doctor listed under `email`."""
        result = self.doctors.delete_one({"email": email})
        logger.info(f"Deleted doctor {email} ({result.deleted_count} removed)")
        return DeleteResult.from_pymongo(result)
