# schemas/chat.py
from pydantic import BaseModel
from typing import Literal


class ChatMessageCreate(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str


class ChatReply(BaseModel):
    reply: str
