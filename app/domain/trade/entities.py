"""
Domain entities for the trade bounded context.

Models the subset of the trade-state document that the unwind pipeline
reads (trade → tradable product → product → contractual product →
economic terms) and the quantity-change instruction it produces.

Entities are immutable value objects. They contain no framework imports
and no IO operations.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Generic, Mapping, Optional, TypeVar, Union

from app.domain.trade.errors import NegativeQuantityError

T = TypeVar("T")


# ------------------------------------------------------------------
# Meta-fields
# ------------------------------------------------------------------


@dataclass(frozen=True)
class MetaFields:
    """Reference-data metadata attached to a scalar.

    Attributes:
        scheme: Identifier of the controlled vocabulary the value is drawn from.
    """

    scheme: str


@dataclass(frozen=True)
class FieldWithMeta(Generic[T]):
    """A scalar value paired with its metadata record."""

    value: T
    meta: MetaFields


# ------------------------------------------------------------------
# Trade-state document
# ------------------------------------------------------------------


class ProductVariant(Enum):
    """Known variants of the polymorphic product container."""

    CONTRACTUAL_PRODUCT = "contractualProduct"
    INDEX = "index"
    LOAN = "loan"
    FOREIGN_EXCHANGE = "foreignExchange"
    COMMODITY = "commodity"
    SECURITY = "security"
    BASKET = "basket"
    ASSET_POOL = "assetPool"


@dataclass(frozen=True)
class EconomicTerms:
    """Payoff-relevant contractual terms of a product.

    Opaque to the pipeline: the raw payload is handed as-is to the
    qualification predicate.
    """

    payload: Mapping[str, Any]

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)


@dataclass(frozen=True)
class ContractualProduct:
    """Product variant described by its economic terms."""

    economic_terms: Optional[EconomicTerms]

    @property
    def variant(self) -> ProductVariant:
        return ProductVariant.CONTRACTUAL_PRODUCT


@dataclass(frozen=True)
class NonContractualProduct:
    """Any product variant other than a contractual product.

    Carried only so that it can be reported; the unwind pipeline rejects it.
    """

    variant: ProductVariant
    payload: Mapping[str, Any]


ProductChoice = Union[ContractualProduct, NonContractualProduct]


@dataclass(frozen=True)
class Product:
    """Tagged union over product variants. `choice` is None when no variant is set."""

    choice: Optional[ProductChoice]


@dataclass(frozen=True)
class TradableProduct:
    product: Optional[Product]


@dataclass(frozen=True)
class Trade:
    tradable_product: Optional[TradableProduct]


@dataclass(frozen=True)
class TradeDocument:
    """Root of a parsed trade-state document."""

    trade: Trade


# ------------------------------------------------------------------
# Quantity-change instruction
# ------------------------------------------------------------------


class QuantityChangeDirection(Enum):
    """Direction of a position quantity change."""

    INCREASE = "INCREASE"
    DECREASE = "DECREASE"


@dataclass(frozen=True)
class UnitType:
    """Unit of a quantity, expressed as a meta-wrapped currency code."""

    currency: FieldWithMeta[str]


@dataclass(frozen=True)
class NonNegativeQuantitySchedule:
    """A quantity magnitude that can never be negative."""

    value: Decimal
    unit: UnitType

    def __post_init__(self) -> None:
        value = self.value if isinstance(self.value, Decimal) else Decimal(str(self.value))
        if value < 0:
            raise NegativeQuantityError(str(value))
        object.__setattr__(self, "value", value)


@dataclass(frozen=True)
class PriceQuantity:
    """A group of quantities changed together. Holds at least one quantity."""

    quantity: tuple[NonNegativeQuantitySchedule, ...]

    def __post_init__(self) -> None:
        if not self.quantity:
            raise ValueError("PriceQuantity requires at least one quantity")
        object.__setattr__(self, "quantity", tuple(self.quantity))


@dataclass(frozen=True)
class QuantityChangeInstruction:
    """Instruction to increase or decrease a trade's position quantity."""

    direction: QuantityChangeDirection
    change: tuple[PriceQuantity, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "change", tuple(self.change))
