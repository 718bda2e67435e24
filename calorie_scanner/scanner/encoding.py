"""
Purpose:
- Turn an uploaded file into a SelectedImage.
- Convert a SelectedImage into the base64 payload the AI endpoint expects.

Notes:
- encode_image is a coroutine: nothing happens until it is awaited, and it runs once.
- The base64 work runs in the threadpool so large photos do not stall the event loop.
"""

from __future__ import annotations
import base64
import binascii
import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool

from .errors import EncodingError
from .schema import EncodedPayload, SelectedImage

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"

async def read_upload(upload: Any) -> SelectedImage:
    """
    Read an UploadFile-like object (async .read(), .content_type, .filename).
    The picker only offers images, so the declared type is taken as-is.
    """
    try:
        raw = await upload.read()
    except (OSError, RuntimeError) as e:
        raise EncodingError(f"upload read failed: {e!r}") from e
    if not raw:
        raise EncodingError("upload is empty")
    return SelectedImage(
        data=bytes(raw),
        mime_type=getattr(upload, "content_type", None) or DEFAULT_MIME_TYPE,
        filename=getattr(upload, "filename", None),
    )

def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")

async def encode_image(image: SelectedImage) -> EncodedPayload:
    try:
        encoded = await run_in_threadpool(_b64, image.data)
    except (TypeError, ValueError, binascii.Error) as e:
        raise EncodingError(f"base64 conversion failed: {e!r}") from e
    logger.debug("encoded %s (%d bytes -> %d chars)", image.mime_type, len(image.data), len(encoded))
    return EncodedPayload(data=encoded, mime_type=image.mime_type)
