# schemas/user.py
from pydantic import BaseModel, field_validator

from ..utils.security import MAX_PASSWORD_BYTES, password_too_long


class UserSignup(BaseModel):
    email: str
    password: str
    name: str

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")
        return value


class UserLogin(BaseModel):
    email: str
    password: str


class UserOut(BaseModel):
    id: int
    email: str
    name: str | None = None


class AuthResponse(BaseModel):
    token: str
    user: UserOut
