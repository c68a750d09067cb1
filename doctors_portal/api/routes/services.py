from fastapi import APIRouter, Depends, Query
from pymongo.database import Database
from typing import Any, Dict, List

from ...core.database import get_db
from ...services.catalog_service import CatalogService

router = APIRouter(tags=["Services"])

@router.get("/services", response_model=List[Dict[str, Any]])
def list_services(db: Database = Depends(get_db)):
    """List service names."""
    return CatalogService(db).list_service_names()

@router.get("/available", response_model=List[Dict[str, Any]])
def available_slots(
    date: str = Query(..., description="Day to check, as stored on bookings"),
    db: Database = Depends(get_db)
):
    """Every service with the slots still open on the given date."""
    return CatalogService(db).available_on(date)
