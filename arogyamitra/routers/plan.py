# routers/plan.py
import logging

from databases import Database
from fastapi import APIRouter, Depends

from ..core.exceptions import GenerationError, UpstreamGenerationFailure
from ..crud import plan as plan_crud
from ..crud.profile import DEFAULT_PROFILE, get_profile
from ..database import get_database
from ..dependencies import CurrentUser, get_current_user, get_plan_generator
from ..schemas.plan import NutritionRequest, SavePlanRequest
from ..utils.openai_client import PlanGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["plans"])


async def _profile_for_generation(database: Database, user_id: int) -> dict:
    return await get_profile(database, user_id) or dict(DEFAULT_PROFILE)


@router.get("/workout")
async def read_workout(
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Latest saved workout plan, [] if none."""
    return await plan_crud.latest_plan(database, "workout", current_user.id)


@router.post("/save-workout")
async def save_workout(
    body: SavePlanRequest,
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    await plan_crud.append_plan(database, "workout", current_user.id, body.plan)
    return {"success": True}


@router.get("/nutrition")
async def read_nutrition(
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Latest saved meal plan, [] if none."""
    return await plan_crud.latest_plan(database, "nutrition", current_user.id)


@router.post("/save-nutrition")
async def save_nutrition(
    body: SavePlanRequest,
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    await plan_crud.append_plan(database, "nutrition", current_user.id, body.plan)
    return {"success": True}


@router.post("/generate-workout")
async def generate_workout(
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
    generator: PlanGenerator = Depends(get_plan_generator),
):
    """Generate a workout plan from the stored profile and keep it as the latest."""
    profile = await _profile_for_generation(database, current_user.id)
    try:
        plan = await generator.generate_workout_plan(profile)
    except GenerationError as e:
        logger.warning("Workout generation failed for user %s: %s", current_user.id, e)
        raise UpstreamGenerationFailure(str(e))

    await plan_crud.append_plan(database, "workout", current_user.id, plan)
    return plan


@router.post("/generate-nutrition")
async def generate_nutrition(
    body: NutritionRequest | None = None,
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
    generator: PlanGenerator = Depends(get_plan_generator),
):
    cuisine = body.cuisine if body else "Global"
    profile = await _profile_for_generation(database, current_user.id)
    try:
        plan = await generator.generate_nutrition_plan(profile, cuisine)
    except GenerationError as e:
        logger.warning("Nutrition generation failed for user %s: %s", current_user.id, e)
        raise UpstreamGenerationFailure(str(e))

    await plan_crud.append_plan(database, "nutrition", current_user.id, plan)
    return plan
