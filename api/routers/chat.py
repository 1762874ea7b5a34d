# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: chat.py
# -----------------------------------------------------------------------------
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.dependencies import get_chat_service
from api.schemas.chat import ChatRequest, ChatResponse
from api.schemas.error import ErrorResponse
from services.GixChatService import GixChatService
from utility.errors import GixError, UpstreamError, ValidationError
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def post_chat(
        req: ChatRequest,
        svc: GixChatService = Depends(get_chat_service),
) -> ChatResponse:
    if not req.query:
        raise ValidationError("Invalid query input")

    logger.info("POST /chat (start) query_len=%d", len(req.query))

    try:
        out: Dict[str, Any] = svc.ask(req.query)
    except GixError:
        raise
    except Exception as e:
        logger.exception("post_chat failed: %s", e)
        raise UpstreamError(str(e) or "An error occurred while processing your request")

    logger.info(
        "POST /chat (done) answer_len=%d sources=%s model=%s",
        len(out.get("response", "") or ""),
        out.get("sources"),
        out.get("model"),
    )

    return ChatResponse(response=out["response"])
