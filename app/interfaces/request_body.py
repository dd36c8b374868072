"""
Raw request body helpers.

Endpoints that accept an unstructured body (trade documents, echo text)
read it through here so the size limit is enforced in one place.
"""

from starlette.requests import Request

from app.core.config import settings
from app.shared.errors.handlers import MalformedBodyError, PayloadTooLargeError


async def read_text_body(request: Request) -> str:
    """Return the request body as UTF-8 text.

    Raises:
        PayloadTooLargeError: If the body exceeds max_request_size_bytes.
        MalformedBodyError: If the body is not valid UTF-8.
    """
    body = await request.body()
    if len(body) > settings.max_request_size_bytes:
        raise PayloadTooLargeError(len(body), settings.max_request_size_bytes)
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedBodyError("request body is not valid UTF-8") from exc
