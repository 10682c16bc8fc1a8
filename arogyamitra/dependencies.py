# dependencies.py
import logging
from dataclasses import dataclass

from databases import Database
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .core.exceptions import AuthenticationInvalid, AuthenticationMissing, InvalidTokenError
from .crud.user import user_exists
from .database import get_database
from .utils.jwt_handler import TokenClaims, verify_token
from .utils.openai_client import PlanGenerator

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is reported as 401 by us, not by HTTPBearer
bearer_scheme = HTTPBearer(auto_error=False)

STALE_SESSION_MESSAGE = "User no longer exists. Please log in again."


@dataclass(frozen=True)
class CurrentUser:
    id: int
    email: str


def authenticate_token(credentials: HTTPAuthorizationCredentials | None) -> TokenClaims:
    """Stage one: a bearer token must be present and correctly signed."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationMissing()
    try:
        return verify_token(credentials.credentials)
    except InvalidTokenError:
        raise AuthenticationInvalid("Invalid token")


async def resolve_principal(database: Database, claims: TokenClaims) -> CurrentUser:
    """Stage two: the signed user id must still exist."""
    if not await user_exists(database, claims.user_id):
        logger.info("Rejected token for missing user %s", claims.user_id)
        raise AuthenticationInvalid(STALE_SESSION_MESSAGE, status_code=401)
    return CurrentUser(id=claims.user_id, email=claims.email)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    database: Database = Depends(get_database),
) -> CurrentUser:
    claims = authenticate_token(credentials)
    return await resolve_principal(database, claims)


def get_plan_generator(request: Request) -> PlanGenerator:
    return request.app.state.plan_generator
