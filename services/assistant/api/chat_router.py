# services/assistant/api/chat_router.py
from fastapi import APIRouter, Depends

from services.assistant.chat_client import get_chat_provider
from services.assistant.controllers.chat_service import chat
from services.assistant.schemas.chat import ChatRequest, ChatResponse

router = APIRouter(tags=["Assistant"])


@router.post("/chat", response_model=ChatResponse)
async def chat_with_assistant(req: ChatRequest, provider=Depends(get_chat_provider)):
    reply = await chat(req.message, req.conversationHistory, provider)
    return ChatResponse(message=reply)
