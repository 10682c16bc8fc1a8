# models.py
import sqlalchemy
from sqlalchemy import Column, Integer, String, Float, Text, DateTime, ForeignKey, func

metadata = sqlalchemy.MetaData()

users = sqlalchemy.Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String, unique=True),
    Column("password", String),
    Column("name", String),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
    sqlite_autoincrement=True,
)

profiles = sqlalchemy.Table(
    "profiles",
    metadata,
    Column("user_id", Integer, ForeignKey("users.id"), primary_key=True),
    Column("age", Integer),
    Column("gender", String),
    Column("weight", Float),
    Column("height", Float),
    Column("goal", String),
    Column("activity_level", String),
    Column("dietary_preferences", String),
    Column("medications", Text),
    Column("health_conditions", Text),
    Column("allergies", Text),
)

# columns added after the first release; older databases get them via ALTER TABLE
PROFILE_MIGRATION_COLUMNS = ("medications", "health_conditions", "allergies")

workouts = sqlalchemy.Table(
    "workouts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), index=True),
    Column("plan_json", Text),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
    sqlite_autoincrement=True,
)

meals = sqlalchemy.Table(
    "meals",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), index=True),
    Column("plan_json", Text),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
    sqlite_autoincrement=True,
)

chat_history = sqlalchemy.Table(
    "chat_history",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), index=True),
    Column("role", String),
    Column("content", Text),
    Column("created_at", DateTime, server_default=func.current_timestamp()),
    sqlite_autoincrement=True,
)
