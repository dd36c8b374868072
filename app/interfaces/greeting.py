"""
Greeting router.

Smoke-test endpoints used to check that the service is reachable
and that request bodies make it through the middleware stack.
"""

from fastapi import APIRouter, Request

from app.core.config import settings
from app.interfaces.request_body import read_text_body
from app.interfaces.trade.schemas import MessageResponse

router = APIRouter(tags=["greeting"])


@router.get("/hello", response_model=MessageResponse, summary="Say hello")
def hello() -> MessageResponse:
    return MessageResponse(message=f"Hello from {settings.project_name}!")


@router.post("/echo", response_model=MessageResponse, summary="Echo the request body")
async def echo(request: Request) -> MessageResponse:
    """Return the plain-text request body prefixed with "Echo: "."""
    message = await read_text_body(request)
    return MessageResponse(message=f"Echo: {message}")
