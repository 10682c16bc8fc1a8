# crud/chat.py
from databases import Database

CHAT_HISTORY_LIMIT = 20


async def save_chat_message(database: Database, user_id: int, role: str, content: str):
    """Append one message to the user's transcript."""
    insert_query = """
        INSERT INTO chat_history (user_id, role, content)
        VALUES (:user_id, :role, :content)
    """
    await database.execute(query=insert_query, values={"user_id": user_id, "role": role, "content": content})


async def get_recent_chat_history(database: Database, user_id: int, limit: int = CHAT_HISTORY_LIMIT) -> list[dict]:
    """The last `limit` messages, oldest first."""
    query = """
        SELECT role, content
        FROM chat_history
        WHERE user_id = :user_id
        ORDER BY created_at DESC, id DESC
        LIMIT :limit
    """
    results = await database.fetch_all(query=query, values={"user_id": user_id, "limit": limit})
    return [{"role": row["role"], "content": row["content"]} for row in reversed(results)]


async def clear_chat_history(database: Database, user_id: int):
    query = "DELETE FROM chat_history WHERE user_id = :user_id"
    await database.execute(query=query, values={"user_id": user_id})
