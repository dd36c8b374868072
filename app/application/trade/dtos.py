"""
Data Transfer Objects for the trade application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from app.domain.trade.entities import QuantityChangeInstruction


@dataclass(frozen=True)
class UnwindTradeCommand:
    """Input DTO for unwinding a trade from raw document text.

    Attributes:
        raw_document: Serialized trade-state document.
    """

    raw_document: str


@dataclass(frozen=True)
class UnwindTradeFromUrlCommand:
    """Input DTO for unwinding a trade whose document lives at a URL.

    Attributes:
        url: Location of the serialized trade-state document.
    """

    url: str


@dataclass(frozen=True)
class UnwindTradeResult:
    """Output DTO for a successful unwind.

    Attributes:
        instruction: The quantity-change instruction for the trade.
        qualifier: Name of the taxonomy the trade qualified for.
        source_url: URL the document was fetched from, if any.
    """

    instruction: QuantityChangeInstruction
    qualifier: str
    source_url: str | None = None
