# routers/chat.py
import logging

from databases import Database
from fastapi import APIRouter, Depends

from ..core.exceptions import GenerationError, PersistenceFailure, UpstreamGenerationFailure
from ..crud.chat import clear_chat_history, get_recent_chat_history, save_chat_message
from ..crud.profile import get_profile
from ..database import get_database
from ..dependencies import CurrentUser, get_current_user, get_plan_generator
from ..schemas.chat import ChatMessageCreate, ChatReply, ChatRequest
from ..utils.openai_client import PlanGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["chat"])


@router.post("/chat-history")
async def add_chat_message(
    message: ChatMessageCreate,
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    try:
        await save_chat_message(database, current_user.id, message.role, message.content)
    except Exception as e:
        logger.exception("Error saving chat history")
        raise PersistenceFailure(str(e) or "Failed to save chat history")
    return {"success": True}


@router.get("/chat-history")
async def read_chat_history(
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    """Last 20 messages, oldest first."""
    try:
        return await get_recent_chat_history(database, current_user.id)
    except Exception:
        logger.exception("Error fetching chat history")
        raise PersistenceFailure("Failed to fetch chat history")


@router.delete("/chat-history")
async def delete_chat_history(
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
):
    try:
        await clear_chat_history(database, current_user.id)
    except Exception:
        logger.exception("Error clearing chat history")
        raise PersistenceFailure("Failed to clear chat history")
    return {"success": True}


@router.post("/chat", response_model=ChatReply)
async def chat_with_coach(
    request: ChatRequest,
    current_user: CurrentUser = Depends(get_current_user),
    database: Database = Depends(get_database),
    generator: PlanGenerator = Depends(get_plan_generator),
):
    """Send a message to the coach; both sides of the exchange are kept in the transcript."""
    history = await get_recent_chat_history(database, current_user.id)
    profile = await get_profile(database, current_user.id)

    # the user turn stays saved even if the provider call fails
    await save_chat_message(database, current_user.id, "user", request.message)
    try:
        reply = await generator.chat(request.message, profile, history)
    except GenerationError as e:
        logger.warning("Coach chat failed for user %s: %s", current_user.id, e)
        raise UpstreamGenerationFailure(str(e))

    await save_chat_message(database, current_user.id, "assistant", reply)
    return ChatReply(reply=reply)
