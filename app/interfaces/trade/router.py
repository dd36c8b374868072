"""
FastAPI router for the trade bounded context.

All routes delegate to use cases. No business logic here.
Responses are CDM-shaped quantity-change instructions.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Query, Request
from starlette.concurrency import run_in_threadpool

from app.application.trade.dtos import UnwindTradeCommand, UnwindTradeFromUrlCommand
from app.application.trade.unwind_trade import UnwindTradeUseCase
from app.application.trade.unwind_trade_from_url import UnwindTradeFromUrlUseCase
from app.core.config import settings
from app.infrastructure.trade.instruction_codec import InstructionCodec
from app.interfaces.request_body import read_text_body
from app.interfaces.trade.dependencies import (
    get_instruction_codec,
    get_unwind_trade_from_url_use_case,
    get_unwind_trade_use_case,
)
from app.interfaces.trade.schemas import (
    URL_MAX_LEN,
    URL_PATTERN,
    ErrorResponse,
    QuantityChangeInstructionModel,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/trade", tags=["trade"])

UNWIND_ERRORS = {
    422: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
FETCH_ERRORS = {**UNWIND_ERRORS, 502: {"model": ErrorResponse}}


@router.get(
    "/sample",
    response_model=QuantityChangeInstructionModel,
    responses=FETCH_ERRORS,
    summary="Unwind the sample trade",
    description="Fetch the configured sample equity swap and return its unwind instruction.",
)
@limiter.limit(settings.rate_limit_heavy)
def unwind_sample_trade(
    request: Request,
    use_case: UnwindTradeFromUrlUseCase = Depends(get_unwind_trade_from_url_use_case),
    codec: InstructionCodec = Depends(get_instruction_codec),
) -> QuantityChangeInstructionModel:
    """Unwind the sample trade document."""
    result = use_case.execute(UnwindTradeFromUrlCommand(url=settings.sample_trade_url))
    return codec.to_model(result.instruction)


@router.get(
    "",
    response_model=QuantityChangeInstructionModel,
    responses=FETCH_ERRORS,
    summary="Unwind a published trade",
    description="Fetch the trade-state document at `url` and return its unwind instruction.",
)
@limiter.limit(settings.rate_limit_heavy)
def unwind_trade_from_url(
    request: Request,
    url: str = Query(
        ...,
        max_length=URL_MAX_LEN,
        pattern=URL_PATTERN,
        description="HTTP(S) location of a CDM trade-state JSON document",
    ),
    use_case: UnwindTradeFromUrlUseCase = Depends(get_unwind_trade_from_url_use_case),
    codec: InstructionCodec = Depends(get_instruction_codec),
) -> QuantityChangeInstructionModel:
    """Unwind the trade document published at `url`."""
    result = use_case.execute(UnwindTradeFromUrlCommand(url=url))
    return codec.to_model(result.instruction)


@router.post(
    "/unwind",
    response_model=QuantityChangeInstructionModel,
    responses={**UNWIND_ERRORS, 413: {"model": ErrorResponse}},
    summary="Unwind a posted trade",
    description="Return the unwind instruction for a CDM trade-state JSON document sent as the body.",
)
@limiter.limit(settings.rate_limit_default)
async def unwind_posted_trade(
    request: Request,
    use_case: UnwindTradeUseCase = Depends(get_unwind_trade_use_case),
    codec: InstructionCodec = Depends(get_instruction_codec),
) -> QuantityChangeInstructionModel:
    """Unwind the trade document sent in the request body."""
    raw = await read_text_body(request)
    result = await run_in_threadpool(
        use_case.execute, UnwindTradeCommand(raw_document=raw)
    )
    return codec.to_model(result.instruction)
