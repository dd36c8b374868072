"""
Dependency injection for the trade bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the trade context.
"""

from app.application.trade.unwind_trade import UnwindTradeUseCase
from app.application.trade.unwind_trade_from_url import UnwindTradeFromUrlUseCase
from app.core.config import settings
from app.domain.trade.instruction_builder import InstructionBuilder
from app.infrastructure.trade.cdm_json_parser import CdmJsonTradeParser
from app.infrastructure.trade.equity_swap_qualifier import (
    EquitySwapSingleNameQualifier,
)
from app.infrastructure.trade.http_document_source import HttpTradeDocumentSource
from app.infrastructure.trade.instruction_codec import InstructionCodec


def get_instruction_codec() -> InstructionCodec:
    """Build the codec used to render instructions."""
    return InstructionCodec()


def get_unwind_trade_use_case() -> UnwindTradeUseCase:
    """Build UnwindTradeUseCase with its infrastructure dependencies."""
    return UnwindTradeUseCase(
        parser=CdmJsonTradeParser(),
        qualifier=EquitySwapSingleNameQualifier(),
        builder=InstructionBuilder(settings.get_reduction_terms()),
    )


def get_unwind_trade_from_url_use_case() -> UnwindTradeFromUrlUseCase:
    """Build UnwindTradeFromUrlUseCase with its infrastructure dependencies."""
    return UnwindTradeFromUrlUseCase(
        document_source=HttpTradeDocumentSource(timeout=settings.fetch_timeout_seconds),
        unwind_use_case=get_unwind_trade_use_case(),
    )
