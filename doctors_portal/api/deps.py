from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials
from pymongo.database import Database
from typing import Optional
import logging

from ..core.database import get_db
from ..core.security import (
    security, verify_token, AuthenticationError,
    AuthorizationError, UserRole, TokenPayload
)
from ..services.user_service import UserService

logger = logging.getLogger(__name__)

async def get_current_user_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> TokenPayload:
    """Extract and verify the JWT from the Authorization header.

    The decoded claim is returned and also kept on `request.state.decoded`.
    """
    if credentials is None:
        raise AuthenticationError()

    token_payload = verify_token(credentials.credentials)
    if not token_payload:
        logger.info(f"Rejected token on {request.method} {request.url.path}")
        raise AuthorizationError()

    request.state.decoded = token_payload
    return token_payload

def get_admin_user(
    token_payload: TokenPayload = Depends(get_current_user_token),
    db: Database = Depends(get_db)
) -> TokenPayload:
    """Require the caller's user record to hold the admin role."""
    role = UserService(db).role_of(token_payload.email)
    if role != UserRole.ADMIN:
        if role is None:
            logger.warning(f"Admin check for unknown user {token_payload.email}")
        raise AuthorizationError()
    return token_payload
