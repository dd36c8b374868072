"""
Port interfaces (ABCs) for the trade bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.trade.entities import EconomicTerms, TradeDocument


class TradeDocumentSource(ABC):
    """Port for retrieving raw trade-state documents."""

    @abstractmethod
    def fetch(self, url: str) -> str:
        """Return the raw document text stored at `url`.

        Raises:
            TransportError: If the document could not be retrieved.
        """
        raise NotImplementedError


class TradeDocumentParser(ABC):
    """Port for deserializing raw text into a typed trade-state document."""

    @abstractmethod
    def parse(self, raw: str) -> TradeDocument:
        """Parse raw text into a TradeDocument.

        Raises:
            ParseError: If the text is malformed or does not match the schema.
        """
        raise NotImplementedError


class EconomicTermsQualifier(ABC):
    """Port for classifying economic terms against a product taxonomy.

    Implementations must be pure: same terms, same verdict, no side effects.
    """

    #: Taxonomy name reported when qualification fails.
    name: str = "qualified product"

    @abstractmethod
    def qualify(self, terms: EconomicTerms) -> bool:
        """Return True if the economic terms qualify for the taxonomy."""
        raise NotImplementedError
