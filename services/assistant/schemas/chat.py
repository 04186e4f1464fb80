from pydantic import BaseModel
from typing import List, Literal, Optional


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: Optional[str] = None
    conversationHistory: Optional[List[ChatMessage]] = None


class ChatResponse(BaseModel):
    success: bool = True
    message: str
