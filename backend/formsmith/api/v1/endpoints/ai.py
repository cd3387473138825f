from fastapi import APIRouter, Depends, HTTPException
import logging

from formsmith.api.deps import get_chatgpt_service, require_admin
from formsmith.core.exceptions import FormGenerationError
from formsmith.schemas.generate import GeneratedForm, PromptRequest
from formsmith.services.chatgpt_service import ChatGPTService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/ai", response_model=GeneratedForm, dependencies=[Depends(require_admin)])
@router.post("/generate", response_model=GeneratedForm, dependencies=[Depends(require_admin)])
def generate_form(request: PromptRequest, chatgpt: ChatGPTService = Depends(get_chatgpt_service)):
    """Draft a form from a free-text prompt.

    Gated behind the admin session even though the builder only calls it from
    admin pages: every request is a paid OpenAI completion.
    """
    if not request.prompt.strip():
        raise HTTPException(status_code=400, detail="Prompt is required")

    try:
        return chatgpt.generate_form(request.prompt.strip())
    except FormGenerationError as e:
        logger.error(f"Error generating form: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to generate form. Please try again.")
