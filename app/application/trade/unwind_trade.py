"""
Use case: Unwind part of a trade's position.

Input: UnwindTradeCommand (raw_document)
Output: UnwindTradeResult
Side effects: None.
Failure cases: ParseError, NavigationError, TypeMismatchError,
QualificationError.

Stages: RECEIVED → PARSED → NAVIGATED → QUALIFIED → BUILT.
Any failure is terminal for the request (FAILED) and is re-raised as-is.
"""

import logging
from enum import Enum

from app.application.trade.dtos import UnwindTradeCommand, UnwindTradeResult
from app.domain.trade.errors import TradeDomainError
from app.domain.trade.instruction_builder import InstructionBuilder
from app.domain.trade.ports import EconomicTermsQualifier, TradeDocumentParser
from app.domain.trade.term_navigator import TermNavigator

logger = logging.getLogger(__name__)


class UnwindStage(Enum):
    """Pipeline stage reached by a request."""

    RECEIVED = "received"
    PARSED = "parsed"
    NAVIGATED = "navigated"
    QUALIFIED = "qualified"
    BUILT = "built"
    FAILED = "failed"


class UnwindTradeUseCase:
    """Orchestrates the unwind pipeline for a single trade document.

    Parses the document, navigates to its economic terms, asks the
    qualifier for a verdict and builds the quantity-change instruction.
    """

    def __init__(
        self,
        parser: TradeDocumentParser,
        qualifier: EconomicTermsQualifier,
        builder: InstructionBuilder,
        navigator: TermNavigator | None = None,
    ) -> None:
        self._parser = parser
        self._qualifier = qualifier
        self._builder = builder
        self._navigator = navigator or TermNavigator()

    def execute(self, command: UnwindTradeCommand) -> UnwindTradeResult:
        """Run the unwind pipeline on raw document text.

        Args:
            command: The raw trade-state document.

        Returns:
            The unwind instruction and the taxonomy the trade qualified for.

        Raises:
            ParseError: If the text is not a trade-state document.
            NavigationError: If a node on the economic-terms path is absent.
            TypeMismatchError: If the product is not a contractual product.
            QualificationError: If the qualifier rejects the economic terms.
        """
        stage = UnwindStage.RECEIVED
        try:
            document = self._parser.parse(command.raw_document)
            stage = UnwindStage.PARSED

            terms = self._navigator.economic_terms(document)
            stage = UnwindStage.NAVIGATED

            qualified = self._qualifier.qualify(terms)
            stage = UnwindStage.QUALIFIED
            logger.debug("Qualifier %s returned %s", self._qualifier.name, qualified)

            instruction = self._builder.build(
                terms, qualified, qualifier_name=self._qualifier.name
            )
        except TradeDomainError as exc:
            logger.warning(
                "Stage=%s after %s, kind=%s: %s",
                UnwindStage.FAILED.value,
                stage.value,
                exc.kind,
                exc.message,
            )
            raise

        logger.info(
            "Stage=%s: %s instruction with %d change(s)",
            UnwindStage.BUILT.value,
            instruction.direction.value,
            len(instruction.change),
        )
        return UnwindTradeResult(instruction=instruction, qualifier=self._qualifier.name)
