"""
Domain service: Quantity-change instruction construction.

Builds the partial-unwind instruction for a qualified trade.
Pure construction. No framework imports. No IO. No side effects.
"""

from dataclasses import dataclass
from decimal import Decimal

from app.domain.trade.entities import (
    EconomicTerms,
    FieldWithMeta,
    MetaFields,
    NonNegativeQuantitySchedule,
    PriceQuantity,
    QuantityChangeDirection,
    QuantityChangeInstruction,
    UnitType,
)
from app.domain.trade.errors import NegativeQuantityError, QualificationError

DEFAULT_REDUCTION_AMOUNT = Decimal("70000")
DEFAULT_CURRENCY_CODE = "USD"
ISO4217_CURRENCY_SCHEME = "http://www.fpml.org/coding-scheme/external/iso4217"

# Significant digits a binary double carries exactly through a decimal round trip.
FLOAT_SAFE_DIGITS = 15


def check_reduction_amount(amount: Decimal) -> Decimal:
    """Validate an unwind magnitude.

    Integral amounts of any size are accepted. Fractional amounts are limited
    to FLOAT_SAFE_DIGITS significant digits so that the serialized instruction
    reads back to the same value.

    Raises:
        NegativeQuantityError: If the amount is below zero.
        ValueError: If a fractional amount carries too many significant digits.
    """
    if amount < 0:
        raise NegativeQuantityError(str(amount))
    if amount != amount.to_integral_value():
        digits = len(amount.normalize().as_tuple().digits)
        if digits > FLOAT_SAFE_DIGITS:
            raise ValueError(
                f"Reduction amount {amount} has {digits} significant digits; "
                f"fractional amounts allow at most {FLOAT_SAFE_DIGITS}"
            )
    return amount


@dataclass(frozen=True)
class ReductionTerms:
    """Configuration of the unwind produced for a qualified trade.

    Attributes:
        reduction_amount: Magnitude of the decrease. Must not be negative and,
            when fractional, must fit FLOAT_SAFE_DIGITS significant digits.
        currency_code: ISO-style currency code of the quantity unit.
        currency_scheme: Vocabulary identifier attached to the currency code.
    """

    reduction_amount: Decimal = DEFAULT_REDUCTION_AMOUNT
    currency_code: str = DEFAULT_CURRENCY_CODE
    currency_scheme: str = ISO4217_CURRENCY_SCHEME

    def __post_init__(self) -> None:
        check_reduction_amount(self.reduction_amount)


class InstructionBuilder:
    """Builds a DECREASE quantity-change instruction for qualified trades."""

    def __init__(self, terms: ReductionTerms | None = None) -> None:
        self._terms = terms or ReductionTerms()

    def build(
        self,
        economic_terms: EconomicTerms,
        qualified: bool,
        qualifier_name: str = "qualified product",
    ) -> QuantityChangeInstruction:
        """Build the unwind instruction for the given economic terms.

        Args:
            economic_terms: Validated economic terms of the trade.
            qualified: Verdict returned by the qualification predicate.
            qualifier_name: Taxonomy name used when reporting a failed verdict.

        Returns:
            A DECREASE instruction with a single priced quantity.

        Raises:
            QualificationError: If the verdict is False.
        """
        if not qualified:
            raise QualificationError(qualifier_name)

        currency = FieldWithMeta(
            value=self._terms.currency_code,
            meta=MetaFields(scheme=self._terms.currency_scheme),
        )
        schedule = NonNegativeQuantitySchedule(
            value=self._terms.reduction_amount,
            unit=UnitType(currency=currency),
        )
        return QuantityChangeInstruction(
            direction=QuantityChangeDirection.DECREASE,
            change=(PriceQuantity(quantity=(schedule,)),),
        )
