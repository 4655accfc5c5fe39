"""
Cooking assistant chat route.
"""
import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from recipebox.api.dependencies import get_chat_service
from recipebox.api.errors import internal_error, to_http_exception
from recipebox.errors import ErrorCode, RecipeBoxError
from recipebox.services.chat_service import ChatService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


class ChatRequest(BaseModel):
    """A message for the cooking assistant."""
    message: str = Field(..., min_length=1, max_length=4000)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "I want something sweet for breakfast"}
            ]
        }
    }


class ChatResponse(BaseModel):
    """The cooking assistant's reply."""
    reply: str


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
):
    """
    Ask the cooking assistant for recipe suggestions.

    Every stored recipe and ingredient is sent along as context.
    """
    try:
        reply = service.suggest(request.message)
    except RecipeBoxError as e:
        logger.error(f"Chat error: {e.message}")
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error(logger, e, ErrorCode.INTERNAL_ERROR, f"Chat error: {e}")

    return ChatResponse(reply=reply)
