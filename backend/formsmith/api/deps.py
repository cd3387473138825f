from fastapi import HTTPException, Request

from formsmith.core.security import is_authenticated
from formsmith.services.chatgpt_service import ChatGPTService


def require_admin(request: Request) -> None:
    if not is_authenticated(request):
        raise HTTPException(status_code=401, detail="Not authenticated")


def get_chatgpt_service() -> ChatGPTService:
    return ChatGPTService()
