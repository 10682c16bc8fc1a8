"""
Pytest fixtures.

Every test gets its own SQLite file under tmp_path and an app whose
plan generator is a local fake, so nothing touches the network.
"""
import pytest
from fastapi.testclient import TestClient

from arogyamitra.core.exceptions import GenerationError
from arogyamitra.main import create_app
from arogyamitra.utils.openai_client import PlanGenerator

SAMPLE_WORKOUT = [
    {
        "day": "Mon",
        "title": "Upper Body",
        "exercises": [
            {
                "name": "Push-up",
                "sets": "3",
                "reps": "12",
                "rest": "60s",
                "intensity": "Moderate",
                "youtube_search_query": "push up form",
            }
        ],
    }
]

SAMPLE_MEALS = [
    {
        "day": "Mon",
        "meals": [
            {
                "type": "Breakfast",
                "name": "Poha",
                "calories": 320,
                "protein": "8g",
                "carbs": "55g",
                "fats": "7g",
                "ingredients": ["flattened rice", "peas", "peanuts"],
            }
        ],
    }
]


class FakeGenerator(PlanGenerator):
    """Records calls and returns canned plans, or fails when told to."""

    def __init__(self):
        super().__init__(api_key="", client=None)
        self.fail = False
        self.calls = []

    @property
    def configured(self) -> bool:
        return True

    def _maybe_fail(self):
        if self.fail:
            raise GenerationError("AI service error: provider unavailable")

    async def generate_workout_plan(self, profile):
        self.calls.append(("workout", profile))
        self._maybe_fail()
        return SAMPLE_WORKOUT

    async def generate_nutrition_plan(self, profile, cuisine="Global"):
        self.calls.append(("nutrition", profile, cuisine))
        self._maybe_fail()
        return SAMPLE_MEALS

    async def chat(self, message, profile, history=None):
        self.calls.append(("chat", message, list(history or [])))
        self._maybe_fail()
        return f"Coach says: {message}"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "arogyamitra_test.db"


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def client(db_path, generator):
    app = create_app(database_url=f"sqlite:///{db_path}", plan_generator=generator)
    with TestClient(app) as test_client:
        yield test_client


def signup(client, email="a@x.com", password="pw", name="A"):
    return client.post("/api/auth/signup", json={"email": email, "password": password, "name": name})


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token(client):
    resp = signup(client)
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def headers(token):
    return auth_headers(token)
