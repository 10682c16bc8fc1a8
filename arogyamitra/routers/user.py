# routers/user.py
import logging

from databases import Database
from fastapi import APIRouter, Depends

from ..core.exceptions import CredentialMismatch, DuplicateEmailError, ValidationConflict
from ..crud.profile import create_default_profile
from ..crud.user import create_user, get_user_by_email
from ..database import get_database
from ..schemas.user import AuthResponse, UserLogin, UserOut, UserSignup
from ..utils.jwt_handler import create_access_token
from ..utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse)
async def signup(user: UserSignup, database: Database = Depends(get_database)):
    try:
        user_id = await create_user(database, user.email, get_password_hash(user.password), user.name)
    except DuplicateEmailError:
        raise ValidationConflict("User already exists")

    # every account starts with a placeholder profile
    await create_default_profile(database, user_id)
    logger.info("Created user %s", user_id)

    return AuthResponse(
        token=create_access_token(user_id, user.email),
        user=UserOut(id=user_id, email=user.email, name=user.name),
    )


@router.post("/login", response_model=AuthResponse)
async def login(user: UserLogin, database: Database = Depends(get_database)):
    record = await get_user_by_email(database, user.email)
    # one message for unknown email and wrong password
    if not record or not verify_password(user.password, record["password"]):
        raise CredentialMismatch()

    return AuthResponse(
        token=create_access_token(record["id"], record["email"]),
        user=UserOut(id=record["id"], email=record["email"], name=record["name"]),
    )
