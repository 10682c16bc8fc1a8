# crud/profile.py
from databases import Database

PROFILE_FIELDS = (
    "age",
    "gender",
    "weight",
    "height",
    "goal",
    "activity_level",
    "dietary_preferences",
    "medications",
    "health_conditions",
    "allergies",
)

# placeholder values written at signup
DEFAULT_PROFILE = {
    "age": 25,
    "gender": "Male",
    "weight": 70,
    "height": 175,
    "goal": "General Fitness",
    "activity_level": "Moderate",
    "dietary_preferences": "None",
    "medications": None,
    "health_conditions": None,
    "allergies": None,
}


async def get_profile(database: Database, user_id: int) -> dict:
    """Returns the stored profile, or {} when the user has none."""
    query = f"SELECT user_id, {', '.join(PROFILE_FIELDS)} FROM profiles WHERE user_id = :user_id"
    row = await database.fetch_one(query=query, values={"user_id": user_id})
    return dict(row._mapping) if row else {}


async def put_profile(database: Database, user_id: int, profile: dict):
    """Replaces every profile field in one statement; missing keys are stored as NULL."""
    columns = ", ".join(PROFILE_FIELDS)
    placeholders = ", ".join(f":{field}" for field in PROFILE_FIELDS)
    query = f"INSERT OR REPLACE INTO profiles (user_id, {columns}) VALUES (:user_id, {placeholders})"
    values = {"user_id": user_id, **{field: profile.get(field) for field in PROFILE_FIELDS}}
    await database.execute(query=query, values=values)


async def create_default_profile(database: Database, user_id: int):
    await put_profile(database, user_id, DEFAULT_PROFILE)
