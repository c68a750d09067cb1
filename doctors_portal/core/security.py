from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from jose import JWTError, jwt
from fastapi import HTTPException, status
from fastapi.security import HTTPBearer
from pydantic import BaseModel, ValidationError
from enum import Enum

from .config import settings

# JWT Security; a missing header is reported by the gate itself as 401
security = HTTPBearer(auto_error=False)

class UserRole(str, Enum):
    NONE = "none"
    ADMIN = "admin"

    @classmethod
    def from_stored(cls, value: Any) -> "UserRole":
        """Read a role field from a user document.

        Users created before any promotion have no role field at all; any
        value that is not a known role grants nothing.
        """
        try:
            return cls(value)
        except ValueError:
            return cls.NONE

class TokenPayload(BaseModel):
    """Identity claim carried by an access token."""
    email: str
    exp: Optional[int] = None

# JWT utilities
def create_access_token(
    email: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Sign an identity token for `email`."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode = {
        "email": email,
        "exp": expire,
    }

    encoded_jwt = jwt.encode(
        to_encode,
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM
    )
    return encoded_jwt

def verify_token(token: str) -> Optional[TokenPayload]:
    """Verify and decode JWT token.

    Returns None when the signature does not match, the token has expired,
    or the payload carries no email.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            options={"require_exp": True}
        )

        return TokenPayload(**payload)

    except (JWTError, ValidationError):
        return None

# Security exceptions
class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "UnAuthorized access"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "forbiddenAccess"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )
