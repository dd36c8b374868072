"""
Tests for the trade application layer (use cases).

Tests use cases with in-memory fake ports. No real infrastructure needed.
Each test verifies orchestration: which stage runs, which error surfaces.
"""

import json
from decimal import Decimal

import pytest

from app.application.trade.dtos import UnwindTradeCommand, UnwindTradeFromUrlCommand
from app.application.trade.unwind_trade import UnwindTradeUseCase
from app.application.trade.unwind_trade_from_url import UnwindTradeFromUrlUseCase
from app.domain.trade.entities import QuantityChangeDirection
from app.domain.trade.errors import (
    NavigationError,
    ParseError,
    QualificationError,
    TransportError,
    TypeMismatchError,
)
from app.domain.trade.instruction_builder import InstructionBuilder, ReductionTerms
from app.domain.trade.term_navigator import TermNavigator
from app.infrastructure.trade.cdm_json_parser import CdmJsonTradeParser
from tests.trade_fixtures import (
    SAMPLE_URL,
    InMemoryDocumentSource,
    StaticQualifier,
    economic_terms_of,
)


class CountingNavigator(TermNavigator):
    """TermNavigator that records how often it was asked to navigate."""

    def __init__(self) -> None:
        self.calls = 0

    def economic_terms(self, document):
        self.calls += 1
        return super().economic_terms(document)


def _use_case(
    verdict: bool = True,
    terms: ReductionTerms | None = None,
) -> tuple[UnwindTradeUseCase, StaticQualifier, CountingNavigator]:
    qualifier = StaticQualifier(verdict)
    navigator = CountingNavigator()
    use_case = UnwindTradeUseCase(
        parser=CdmJsonTradeParser(),
        qualifier=qualifier,
        builder=InstructionBuilder(terms),
        navigator=navigator,
    )
    return use_case, qualifier, navigator


class TestUnwindTradeUseCase:
    """Tests for the UnwindTradeUseCase."""

    def test_qualified_trade_is_unwound(self, document: dict, raw_document: str) -> None:
        use_case, qualifier, _ = _use_case()

        result = use_case.execute(UnwindTradeCommand(raw_document=raw_document))

        assert result.qualifier == "a static test product"
        assert result.source_url is None
        assert result.instruction.direction is QuantityChangeDirection.DECREASE
        assert result.instruction.change[0].quantity[0].value == Decimal("70000")
        assert len(qualifier.calls) == 1
        assert qualifier.calls[0].payload == economic_terms_of(document)

    def test_configured_reduction(self, raw_document: str) -> None:
        terms = ReductionTerms(
            reduction_amount=Decimal("500"), currency_code="GBP", currency_scheme="urn:ccy"
        )
        use_case, _, _ = _use_case(terms=terms)

        schedule = use_case.execute(UnwindTradeCommand(raw_document)).instruction.change[0].quantity[0]

        assert schedule.value == Decimal("500")
        assert schedule.unit.currency.value == "GBP"
        assert schedule.unit.currency.meta.scheme == "urn:ccy"

    def test_parse_error_skips_navigation(self) -> None:
        use_case, qualifier, navigator = _use_case()

        with pytest.raises(ParseError):
            use_case.execute(UnwindTradeCommand(raw_document="not json"))

        assert navigator.calls == 0
        assert qualifier.calls == []

    def test_navigation_error_skips_qualification(self, document: dict) -> None:
        del document["trade"]["tradableProduct"]
        use_case, qualifier, _ = _use_case()

        with pytest.raises(NavigationError) as exc_info:
            use_case.execute(UnwindTradeCommand(json.dumps(document)))

        assert exc_info.value.step == "tradableProduct"
        assert qualifier.calls == []

    def test_non_contractual_product(self, document: dict) -> None:
        document["trade"]["tradableProduct"]["product"] = {"index": {"name": "S&P 500"}}
        use_case, qualifier, _ = _use_case()

        with pytest.raises(TypeMismatchError) as exc_info:
            use_case.execute(UnwindTradeCommand(json.dumps(document)))

        assert exc_info.value.field == "product"
        assert exc_info.value.variant == "index"
        assert qualifier.calls == []

    def test_unqualified_trade_is_rejected_every_time(self, raw_document: str) -> None:
        use_case, qualifier, _ = _use_case(verdict=False)

        errors = []
        for _ in range(2):
            with pytest.raises(QualificationError) as exc_info:
                use_case.execute(UnwindTradeCommand(raw_document))
            errors.append(exc_info.value.message)

        assert errors[0] == errors[1]
        assert len(qualifier.calls) == 2


class TestUnwindTradeFromUrlUseCase:
    """Tests for the UnwindTradeFromUrlUseCase."""

    def test_fetched_document_is_unwound(self, raw_document: str) -> None:
        source = InMemoryDocumentSource({SAMPLE_URL: raw_document})
        unwind, _, _ = _use_case()
        use_case = UnwindTradeFromUrlUseCase(document_source=source, unwind_use_case=unwind)

        result = use_case.execute(UnwindTradeFromUrlCommand(url=SAMPLE_URL))

        assert result.source_url == SAMPLE_URL
        assert result.instruction.direction is QuantityChangeDirection.DECREASE
        assert source.requested == [SAMPLE_URL]

    def test_transport_error_propagates(self) -> None:
        unwind, qualifier, navigator = _use_case()
        use_case = UnwindTradeFromUrlUseCase(
            document_source=InMemoryDocumentSource(), unwind_use_case=unwind
        )

        with pytest.raises(TransportError) as exc_info:
            use_case.execute(UnwindTradeFromUrlCommand(url=SAMPLE_URL))

        assert exc_info.value.url == SAMPLE_URL
        assert navigator.calls == 0
        assert qualifier.calls == []
