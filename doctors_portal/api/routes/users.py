from fastapi import APIRouter, Depends
from pymongo.database import Database
from typing import Any, Dict, List

from ...core.database import get_db
from ...core.security import TokenPayload
from ...api.deps import get_current_user_token, get_admin_user
from ...services.user_service import UserService
from ...schemas.common import UpdateResult
from ...schemas.user import UserUpsert, UserUpsertResponse, AdminStatus

router = APIRouter(tags=["Users"])

@router.put("/user/admin/{email}", response_model=UpdateResult)
def make_admin(
    email: str,
    db: Database = Depends(get_db),
    _: TokenPayload = Depends(get_admin_user)
):
    """Promote a user to admin (admin only)."""
    return UserService(db).make_admin(email)

@router.put("/user/{email}", response_model=UserUpsertResponse)
def upsert_user(
    email: str,
    profile: UserUpsert,
    db: Database = Depends(get_db)
):
    """Create or update a user and return a fresh access token."""
    return UserService(db).upsert_user(email, profile)

@router.get("/admin/{email}", response_model=AdminStatus)
def check_admin(
    email: str,
    db: Database = Depends(get_db)
):
    """Report whether the user holds the admin role."""
    return AdminStatus(admin=UserService(db).is_admin(email))

@router.get("/user", response_model=List[Dict[str, Any]])
def list_users(
    db: Database = Depends(get_db),
    _: TokenPayload = Depends(get_current_user_token)
):
    """List all users."""
    return UserService(db).list_users()
