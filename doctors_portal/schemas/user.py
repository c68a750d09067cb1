from pydantic import BaseModel

from .common import DocumentModel, UpdateResult

class UserUpsert(DocumentModel):
    """Profile fields sent by the portal on sign-in (name, photo, ...)."""

class UserUpsertResponse(BaseModel):
    result: UpdateResult
    token: str

class AdminStatus(BaseModel):
    admin: bool
