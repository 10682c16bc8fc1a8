# utils/openai_client.py

import json
import logging
import re
from typing import Any, Dict, List

from openai import AsyncOpenAI, OpenAIError
from pydantic import TypeAdapter

from ..core.config import OPENAI_API_KEY, OPENAI_MODEL, OPENAI_TIMEOUT
from ..core.exceptions import GenerationError
from ..schemas.plan import MealDay, WorkoutDay

logger = logging.getLogger(__name__)

WORKOUT_SCHEMA = TypeAdapter(List[WorkoutDay]).json_schema()
MEAL_SCHEMA = TypeAdapter(List[MealDay]).json_schema()

_FENCE_RE = re.compile(r"```json\n?|```")


def clean_json(text: str) -> str:
    """Strip markdown code fences the model sometimes wraps around JSON."""
    return _FENCE_RE.sub("", text).strip()


def _medical_context(profile: Dict, placeholder: str = "None") -> str:
    return (
        f"- Allergies: {profile.get('allergies') or placeholder}\n"
        f"- Health Conditions: {profile.get('health_conditions') or placeholder}\n"
        f"- Medications: {profile.get('medications') or placeholder}"
    )


def build_workout_prompt(profile: Dict) -> str:
    return f"""Generate a 7-day structured fitness plan for a {profile.get('age')} year old {profile.get('gender')} weighing {profile.get('weight')}kg at {profile.get('height')}cm.
Goal: {profile.get('goal')}. Activity Level: {profile.get('activity_level')}.
Medical Context:
{_medical_context(profile)}

Include Warmup, Main Workout, and Cooldown for each day. Ensure exercises are safe given the medical context.
Respond with a JSON object {{"plan": [...]}} where "plan" matches this JSON schema:
{json.dumps(WORKOUT_SCHEMA)}"""


def build_nutrition_prompt(profile: Dict, cuisine: str = "Global") -> str:
    prompt = f"""Generate a 7-day personalized meal plan for a {profile.get('age')} year old {profile.get('gender')} with goal {profile.get('goal')}.
Cuisine Preference: {cuisine}.
Dietary Preferences: {profile.get('dietary_preferences')}.
Medical Context:
{_medical_context(profile)}

Include Breakfast, Lunch, Snack, Dinner for each day with calorie and macro breakdown. Ensure meals are safe given the medical context and allergies."""
    if cuisine.lower() == "indian":
        prompt += " Include popular healthy Indian dishes like Poha, Moong Dal Chilla, Paneer Tikka, etc."
    return prompt + f"""
Respond with a JSON object {{"plan": [...]}} where "plan" matches this JSON schema:
{json.dumps(MEAL_SCHEMA)}"""


def build_coach_instruction(profile: Dict) -> str:
    return f"""You are AROMI, an empathetic and intelligent AI health coach for ArogyaMitra.
User Profile: {json.dumps(profile or {})}.
Medical Info:
{_medical_context(profile or {}, placeholder='None listed')}

Be encouraging, professional, and data-driven. Help with workouts, nutrition, and motivation.
IMPORTANT: Always consider the user's medical conditions, allergies, and medications when giving advice."""


def parse_plan(text: str) -> Any:
    try:
        data = json.loads(clean_json(text or "[]"))
    except json.JSONDecodeError as e:
        raise GenerationError("AI returned a plan that could not be read. Please try again.") from e
    # json_object mode forces a top-level object, so the list arrives wrapped
    if isinstance(data, dict) and "plan" in data:
        return data["plan"]
    return data


class PlanGenerator:
    """Single-shot calls to the chat completions API; no retries."""

    def __init__(self, api_key: str = OPENAI_API_KEY, model: str = OPENAI_MODEL,
                 timeout: float = OPENAI_TIMEOUT, client: AsyncOpenAI | None = None):
        self.model = model
        self.client = client
        if self.client is None and api_key:
            self.client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def _complete(self, messages: List[Dict], json_mode: bool) -> str:
        if self.client is None:
            raise GenerationError("AI configuration missing")

        kwargs = {"response_format": {"type": "json_object"}} if json_mode else {}
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=0.4,
                **kwargs,
            )
        except OpenAIError as e:
            logger.error("Generation request failed: %s", e)
            raise GenerationError(f"AI service error: {e}") from e
        return response.choices[0].message.content or ""

    async def generate_workout_plan(self, profile: Dict) -> Any:
        messages = [
            {"role": "system", "content": "You are a professional fitness coach. Always return valid JSON matching the provided schema. Do not include any markdown formatting or extra text."},
            {"role": "user", "content": build_workout_prompt(profile)},
        ]
        return parse_plan(await self._complete(messages, json_mode=True))

    async def generate_nutrition_plan(self, profile: Dict, cuisine: str = "Global") -> Any:
        messages = [
            {"role": "system", "content": "You are a professional nutritionist. Always return valid JSON matching the provided schema. Do not include any markdown formatting or extra text."},
            {"role": "user", "content": build_nutrition_prompt(profile, cuisine)},
        ]
        return parse_plan(await self._complete(messages, json_mode=True))

    async def chat(self, message: str, profile: Dict, history: List[Dict] | None = None) -> str:
        messages = [{"role": "system", "content": build_coach_instruction(profile)}, *(history or []),
                    {"role": "user", "content": message}]
        reply = await self._complete(messages, json_mode=False)
        if not reply:
            raise GenerationError("AI returned an empty reply")
        return reply
