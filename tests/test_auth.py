import sqlite3

from arogyamitra.utils.jwt_handler import verify_token
from arogyamitra.utils.security import get_password_hash, verify_password

from conftest import auth_headers, signup


def _count(db_path, table):
    with sqlite3.connect(db_path) as conn:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def test_signup_creates_user_and_default_profile(client, db_path):
    resp = signup(client, email="a@x.com", password="pw", name="A")
    assert resp.status_code == 200
    body = resp.json()
    assert body["token"]
    assert body["user"]["email"] == "a@x.com"
    assert body["user"]["name"] == "A"
    assert _count(db_path, "users") == 1
    assert _count(db_path, "profiles") == 1


def test_signup_stores_hashed_password(client, db_path):
    signup(client, password="secret-pw")
    with sqlite3.connect(db_path) as conn:
        stored = conn.execute("SELECT password FROM users").fetchone()[0]
    assert stored != "secret-pw"
    assert stored.startswith("$2")


def test_duplicate_signup_is_rejected_and_creates_nothing(client, db_path):
    assert signup(client).status_code == 200

    resp = signup(client, name="Someone Else")
    assert resp.status_code == 400
    assert resp.json() == {"error": "User already exists"}
    assert _count(db_path, "users") == 1
    assert _count(db_path, "profiles") == 1


def test_login_token_resolves_to_signed_up_user(client):
    user_id = signup(client).json()["user"]["id"]

    resp = client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["user"] == {"id": user_id, "email": "a@x.com", "name": "A"}

    claims = verify_token(body["token"])
    assert claims.user_id == user_id
    assert claims.email == "a@x.com"


def test_login_wrong_password_fails(client):
    signup(client)
    resp = client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_login_unknown_email_gives_same_error(client):
    resp = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "pw"})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_signup_token_is_usable_immediately(client):
    token = signup(client).json()["token"]
    resp = client.get("/api/profile", headers=auth_headers(token))
    assert resp.status_code == 200


def test_signup_requires_all_fields(client):
    resp = client.post("/api/auth/signup", json={"email": "a@x.com"})
    assert resp.status_code == 422


def test_signup_rejects_password_over_bcrypt_limit(client, db_path):
    resp = signup(client, password="correct horse battery staple " * 3)
    assert resp.status_code == 422
    assert _count(db_path, "users") == 0


def test_signup_accepts_password_at_bcrypt_limit(client):
    resp = signup(client, password="x" * 72)
    assert resp.status_code == 200


def test_signup_limit_counts_bytes_not_characters(client):
    # 37 two-byte characters is 74 bytes
    resp = signup(client, password="é" * 37)
    assert resp.status_code == 422


def test_login_with_overlong_password_is_invalid_credentials(client):
    signup(client)
    resp = client.post("/api/auth/login", json={"email": "a@x.com", "password": "x" * 100})
    assert resp.status_code == 401
    assert resp.json() == {"error": "Invalid credentials"}


def test_verify_password_returns_false_for_overlong_input():
    hashed = get_password_hash("pw")
    assert verify_password("pw", hashed)
    assert not verify_password("p" * 100, hashed)
