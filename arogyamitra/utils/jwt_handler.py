# utils/jwt_handler.py

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from ..core.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from ..core.exceptions import InvalidTokenError


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    email: str


# token creation
def create_access_token(user_id: int, email: str, expire_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    to_encode = {"sub": str(user_id), "id": user_id, "email": email}
    if expire_minutes > 0:
        to_encode["exp"] = datetime.now(timezone.utc) + timedelta(minutes=expire_minutes)
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


# token verification: signature and claims only, user liveness is the gate's job
def verify_token(token: str) -> TokenClaims:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("id")
    if user_id is None:
        raise InvalidTokenError("token carries no user id")
    # whole-number ids only; int() would truncate a float claim
    if isinstance(user_id, bool) or not (isinstance(user_id, int) or (isinstance(user_id, str) and user_id.isdigit())):
        raise InvalidTokenError("malformed user id claim")
    return TokenClaims(user_id=int(user_id), email=payload.get("email", ""))
