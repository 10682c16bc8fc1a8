# schemas/plan.py
from pydantic import BaseModel
from typing import Any, List


class SavePlanRequest(BaseModel):
    # stored opaque; the structure below is only the generation contract
    plan: Any


class NutritionRequest(BaseModel):
    cuisine: str = "Global"


# --- Generation output contract ---

class Exercise(BaseModel):
    name: str
    sets: str
    reps: str
    rest: str
    intensity: str
    youtube_search_query: str


class WorkoutDay(BaseModel):
    day: str
    title: str
    exercises: List[Exercise]


class Meal(BaseModel):
    type: str
    name: str
    calories: float
    protein: str
    carbs: str
    fats: str
    ingredients: List[str]


class MealDay(BaseModel):
    day: str
    meals: List[Meal]
