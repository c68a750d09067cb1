from pymongo import MongoClient, ASCENDING
from pymongo.database import Database
from fastapi import Request
from typing import Any, Dict, List, Optional
from bson import ObjectId
import logging

from .config import settings

logger = logging.getLogger(__name__)

# Collection names
SERVICES = "services"
BOOKINGS = "bookings"
USERS = "users"
DOCTORS = "doctors"

# Fields that identify one booking submission
BOOKING_KEY = ("treatment", "date", "patientName")

def open_database() -> Database:
    """Connect to MongoDB and return the portal database.

    The client is lazy: no server round trip happens until the first
    operation, which is `init_db` during startup.
    """
    client = MongoClient(
        settings.MONGODB_URL,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
    )
    return client[settings.get_database_name]

def close_database(db: Database) -> None:
    """Close the client that owns `db`."""
    db.client.close()

# Database dependency
def get_db(request: Request) -> Database:
    """Get the database handle opened at startup."""
    return request.app.state.db

# Database initialization
def init_db(db: Database) -> None:
    """Create the indexes the portal relies on."""
    db[USERS].create_index([("email", ASCENDING)], unique=True)
    db[SERVICES].create_index([("name", ASCENDING)], unique=True)
    # Backs the booking dedup check when two submissions race
    db[BOOKINGS].create_index(
        [(field, ASCENDING) for field in BOOKING_KEY],
        unique=True,
        name="booking_identity",
    )
    db[BOOKINGS].create_index([("patientEmail", ASCENDING)])
    db[BOOKINGS].create_index([("date", ASCENDING)])
    db[DOCTORS].create_index([("email", ASCENDING)])
    logger.info(f"Indexes ensured on database '{db.name}'")

def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a JSON-ready copy of a stored document."""
    if document is None:
        return None
    data = dict(document)
    if isinstance(data.get("_id"), ObjectId):
        data["_id"] = str(data["_id"])
    return data

def serialize_documents(documents) -> List[Dict[str, Any]]:
    return [serialize_document(document) for document in documents]
