import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from deltadoc.api.deps import decode_or_422, get_delta_body
from deltadoc.schemas.delta import PlainTextOut
from deltadoc.utils.codec import encode
from deltadoc.utils.text import plain_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/deltas", tags=["deltas"])


@router.post("/plain-text", response_model=PlainTextOut)
def get_plain_text(body: bytes = Depends(get_delta_body)):
    try:
        doc = decode_or_422(body)
    except HTTPException as e:
        logger.info(f"plain-text: rejected delta: {e.detail}")
        raise
    logger.debug(f"plain-text: {len(doc)} ops")
    return PlainTextOut(text=plain_text(doc), ops=len(doc))


@router.post("/normalize")
def normalize(body: bytes = Depends(get_delta_body)):
    """Return the delta re-encoded in canonical form."""
    try:
        doc = decode_or_422(body)
    except HTTPException as e:
        logger.info(f"normalize: rejected delta: {e.detail}")
        raise
    logger.debug(f"normalize: {len(doc)} ops")
    return Response(content=encode(doc), media_type="application/json")
