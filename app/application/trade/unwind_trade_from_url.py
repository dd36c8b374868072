"""
Use case: Unwind part of a trade whose document is published at a URL.

Input: UnwindTradeFromUrlCommand (url)
Output: UnwindTradeResult
Side effects: One read from the trade document source.
Failure cases: TransportError, plus every failure of UnwindTradeUseCase.
"""

import logging

from app.application.trade.dtos import (
    UnwindTradeCommand,
    UnwindTradeFromUrlCommand,
    UnwindTradeResult,
)
from app.application.trade.unwind_trade import UnwindTradeUseCase
from app.domain.trade.ports import TradeDocumentSource

logger = logging.getLogger(__name__)


class UnwindTradeFromUrlUseCase:
    """Fetches a trade document and delegates to UnwindTradeUseCase."""

    def __init__(
        self,
        document_source: TradeDocumentSource,
        unwind_use_case: UnwindTradeUseCase,
    ) -> None:
        self._document_source = document_source
        self._unwind_use_case = unwind_use_case

    def execute(self, command: UnwindTradeFromUrlCommand) -> UnwindTradeResult:
        """Fetch the document and run the unwind pipeline on it.

        Raises:
            TransportError: If the document could not be retrieved.
        """
        logger.info("Fetching trade document from url=%s", command.url)
        raw = self._document_source.fetch(command.url)

        result = self._unwind_use_case.execute(UnwindTradeCommand(raw_document=raw))
        return UnwindTradeResult(
            instruction=result.instruction,
            qualifier=result.qualifier,
            source_url=command.url,
        )
