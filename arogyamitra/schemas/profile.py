# schemas/profile.py
from pydantic import BaseModel


class ProfileUpdate(BaseModel):
    # every field is written on save; anything left out is stored as null
    age: int | None = None
    gender: str | None = None
    weight: float | None = None
    height: float | None = None
    goal: str | None = None
    activity_level: str | None = None
    dietary_preferences: str | None = None
    medications: str | None = None
    health_conditions: str | None = None
    allergies: str | None = None
