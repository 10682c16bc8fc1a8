# crud/user.py
import sqlite3

from databases import Database

from ..core.exceptions import DuplicateEmailError


async def create_user(database: Database, email: str, password_hash: str, name: str) -> int:
    # email uniqueness is left to the UNIQUE constraint; no pre-check
    insert_query = "INSERT INTO users (email, password, name) VALUES (:email, :password, :name)"
    try:
        return await database.execute(
            query=insert_query,
            values={"email": email, "password": password_hash, "name": name},
        )
    except sqlite3.IntegrityError as e:
        raise DuplicateEmailError(email) from e


async def get_user_by_email(database: Database, email: str) -> dict | None:
    query = "SELECT id, email, password, name, created_at FROM users WHERE email = :email"
    row = await database.fetch_one(query=query, values={"email": email})
    return dict(row._mapping) if row else None


async def get_user_by_id(database: Database, user_id: int) -> dict | None:
    query = "SELECT id, email, name, created_at FROM users WHERE id = :user_id"
    row = await database.fetch_one(query=query, values={"user_id": user_id})
    return dict(row._mapping) if row else None


async def user_exists(database: Database, user_id: int) -> bool:
    query = "SELECT id FROM users WHERE id = :user_id"
    result = await database.fetch_one(query=query, values={"user_id": user_id})
    return result is not None
