from pymongo.database import Database
from typing import Any, Dict, List, Optional
import logging

from ..core.database import USERS, serialize_documents
from ..core.security import UserRole, create_access_token
from ..schemas.common import UpdateResult
from ..schemas.user import UserUpsert, UserUpsertResponse

logger = logging.getLogger(__name__)

# Never taken from a sign-in payload
PROTECTED_FIELDS = ("_id", "email", "role")

class UserService:
    def __init__(self, db: Database):
        self.users = db[USERS]

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return self.users.find_one({"email": email})

    def upsert_user(self, email: str, profile: UserUpsert) -> UserUpsertResponse:
        """Create or refresh the user record and issue a fresh access token."""
        update = {
            key: value
            for key, value in profile.model_dump(by_alias=True).items()
            if key not in PROTECTED_FIELDS
        }
        update["email"] = email

        result = self.users.update_one({"email": email}, {"$set": update}, upsert=True)
        if result.upserted_id is not None:
            logger.info(f"Registered new user {email}")

        return UserUpsertResponse(
            result=UpdateResult.from_pymongo(result),
            token=create_access_token(email),
        )

    def make_admin(self, email: str) -> UpdateResult:
        """Grant the admin role to an existing user."""
        result = self.users.update_one(
            {"email": email},
            {"$set": {"role": UserRole.ADMIN.value}},
        )
        logger.info(f"Promoted {email} to admin (matched {result.matched_count})")
        return UpdateResult.from_pymongo(result)

    def role_of(self, email: str) -> Optional[UserRole]:
        """Role of the user, or None when there is no such user."""
        user = self.get_by_email(email)
        if user is None:
            return None
        return UserRole.from_stored(user.get("role"))

    def is_admin(self, email: str) -> bool:
        return self.role_of(email) == UserRole.ADMIN

    def list_users(self) -> List[Dict[str, Any]]:
        return serialize_documents(self.users.find())
