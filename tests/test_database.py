import sqlite3

from fastapi.testclient import TestClient

from arogyamitra.database import init_db
from arogyamitra.main import create_app


def _columns(db_path, table):
    with sqlite3.connect(db_path) as conn:
        return {row[1] for row in conn.execute(f"PRAGMA table_info({table})")}


def test_init_db_creates_all_tables(tmp_path):
    db_path = tmp_path / "fresh.db"
    init_db(f"sqlite:///{db_path}")
    with sqlite3.connect(db_path) as conn:
        tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"users", "profiles", "workouts", "meals", "chat_history"} <= tables


def test_init_db_adds_medical_columns_to_old_profiles(tmp_path):
    db_path = tmp_path / "old.db"
    with sqlite3.connect(db_path) as conn:
        conn.execute(
            "CREATE TABLE profiles (user_id INTEGER PRIMARY KEY, age INTEGER, gender TEXT, weight REAL, "
            "height REAL, goal TEXT, activity_level TEXT, dietary_preferences TEXT)"
        )
        conn.execute("INSERT INTO profiles (user_id, age) VALUES (1, 30)")

    init_db(f"sqlite:///{db_path}")

    assert {"medications", "health_conditions", "allergies"} <= _columns(db_path, "profiles")
    with sqlite3.connect(db_path) as conn:
        assert conn.execute("SELECT age, allergies FROM profiles WHERE user_id = 1").fetchone() == (30, None)


def test_init_db_is_idempotent(tmp_path):
    url = f"sqlite:///{tmp_path / 'twice.db'}"
    init_db(url)
    init_db(url)


def test_data_survives_app_restart(tmp_path, generator):
    url = f"sqlite:///{tmp_path / 'durable.db'}"

    with TestClient(create_app(database_url=url, plan_generator=generator)) as first:
        token = first.post("/api/auth/signup", json={"email": "a@x.com", "password": "pw", "name": "A"}).json()["token"]
        first.post("/api/ai/save-workout", json={"plan": [1, 2, 3]}, headers={"Authorization": f"Bearer {token}"})

    with TestClient(create_app(database_url=url, plan_generator=generator)) as second:
        resp = second.get("/api/ai/workout", headers={"Authorization": f"Bearer {token}"})
        assert resp.json() == [1, 2, 3]


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_unhandled_errors_become_500(tmp_path, generator):
    app = create_app(database_url=f"sqlite:///{tmp_path / 'boom.db'}", plan_generator=generator)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as test_client:
        resp = test_client.get("/boom")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal Server Error"}
