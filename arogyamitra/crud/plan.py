# crud/plan.py
import json
from typing import Any, Literal

from databases import Database

PlanKind = Literal["workout", "nutrition"]

# workout and nutrition histories share one layout, one table each
PLAN_TABLES = {
    "workout": "workouts",
    "nutrition": "meals",
}


async def append_plan(database: Database, kind: PlanKind, user_id: int, payload: Any):
    """Store a generated plan as-is; the shape is never checked here."""
    query = f"INSERT INTO {PLAN_TABLES[kind]} (user_id, plan_json) VALUES (:user_id, :plan_json)"
    await database.execute(query=query, values={"user_id": user_id, "plan_json": json.dumps(payload)})


async def latest_plan(database: Database, kind: PlanKind, user_id: int) -> Any:
    """Most recently created plan for the user, or [] if there is none."""
    query = f"""
        SELECT plan_json
        FROM {PLAN_TABLES[kind]}
        WHERE user_id = :user_id
        ORDER BY created_at DESC, id DESC
        LIMIT 1
    """
    row = await database.fetch_one(query=query, values={"user_id": user_id})
    return json.loads(row["plan_json"]) if row else []
