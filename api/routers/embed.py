# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: embed.py
# -----------------------------------------------------------------------------
from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_ingest_service
from api.schemas.embed import EmbedResponse, EmbeddedText, TextItem
from api.schemas.error import ErrorResponse
from services.GixIngestService import GixIngestService
from utility.errors import GixError, UpstreamError, ValidationError
from utility.logging_utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/embed", tags=["embed"])

INVALID_INPUT = "Invalid input format, expected an array of objects with a 'text' field."


@router.post(
    "",
    response_model=EmbedResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def post_embed(
        items: List[TextItem],
        svc: GixIngestService = Depends(get_ingest_service),
) -> EmbedResponse:
    # Reject the whole batch before any OpenAI/Chroma call
    if not items or any(not item.text for item in items):
        raise ValidationError(INVALID_INPUT)

    logger.info("POST /embed (start) items=%d", len(items))

    try:
        embedded = svc.ingest([item.text for item in items])
    except GixError:
        raise
    except Exception as e:
        logger.exception("post_embed failed: %s", e)
        raise UpstreamError(str(e) or "An error occurred while processing your request")

    logger.info("POST /embed (done) embedded=%d", len(embedded))

    return EmbedResponse(embeddings=[EmbeddedText(**e) for e in embedded])
