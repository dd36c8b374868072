"""
Adapter: CDM JSON trade-state parser.

Implements TradeDocumentParser.
Validates raw JSON text against the CDM wire models and maps the
result onto domain entities.
"""

import logging

from pydantic import ValidationError

from app.domain.trade.entities import TradeDocument
from app.domain.trade.errors import ParseError
from app.domain.trade.ports import TradeDocumentParser
from app.infrastructure.trade.cdm_schemas import TradeStateModel

logger = logging.getLogger(__name__)


def describe_validation_error(exc: ValidationError) -> tuple[str, str | None]:
    """Return (reason, dotted location) of the first validation error."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or None
    return first.get("msg", "invalid document"), location


class CdmJsonTradeParser(TradeDocumentParser):
    """Parses CDM trade-state JSON into a TradeDocument."""

    def parse(self, raw: str) -> TradeDocument:
        """Parse raw JSON text.

        Args:
            raw: Serialized CDM trade-state document.

        Returns:
            The parsed TradeDocument.

        Raises:
            ParseError: If the text is not JSON or does not match the schema.
        """
        try:
            model = TradeStateModel.model_validate_json(raw)
        except ValidationError as exc:
            reason, location = describe_validation_error(exc)
            logger.debug("Trade document rejected at %s: %s", location, reason)
            raise ParseError(reason, location=location) from exc

        return model.to_domain()
