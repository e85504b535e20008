from functools import lru_cache

from fastapi import Depends, HTTPException, Request

from deltadoc.core.config import Settings
from deltadoc.core.errors import DecodeError
from deltadoc.models.document import Document
from deltadoc.schemas.delta import DecodeErrorOut
from deltadoc.utils.codec import decode


@lru_cache
def get_settings() -> Settings:
    return Settings()


async def get_delta_body(
    request: Request, settings: Settings = Depends(get_settings)
) -> bytes:
    """Read the raw request body, refusing anything over the configured size."""
    body = await request.body()
    if len(body) > settings.max_body_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Delta body exceeds {settings.max_body_bytes} bytes",
        )
    return body


def decode_or_422(body: bytes) -> Document:
    try:
        return decode(body)
    except DecodeError as e:
        raise HTTPException(
            status_code=422,
            detail=DecodeErrorOut.from_error(e).model_dump(),
        ) from e
