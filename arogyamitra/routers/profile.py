# routers/profile.py

from databases import Database
from fastapi import APIRouter, Depends

from ..crud.profile import get_profile, put_profile
from ..database import get_database
from ..dependencies import CurrentUser, get_current_user
from ..schemas.profile import ProfileUpdate

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def read_profile(
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Stored profile, or {} when the user has none yet."""
    return await get_profile(database, current_user.id)


@router.post("")
async def update_profile(
    profile: ProfileUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    await put_profile(database, current_user.id, profile.model_dump())
    return {"success": True}
