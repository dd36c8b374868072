"""
Pydantic wire models for the CDM trade-state JSON format.

Only the nodes the unwind pipeline reads are modelled; every other field of
the document is accepted and ignored. Field names follow the CDM JSON
serialization (camelCase). Each model maps to and from the frozen domain
entities so that nothing outside the infrastructure layer sees pydantic.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, model_validator
from pydantic.alias_generators import to_camel

from app.domain.trade.entities import (
    ContractualProduct,
    EconomicTerms,
    FieldWithMeta,
    MetaFields,
    NonContractualProduct,
    NonNegativeQuantitySchedule,
    PriceQuantity,
    Product,
    ProductVariant,
    QuantityChangeDirection,
    QuantityChangeInstruction,
    TradableProduct,
    Trade,
    TradeDocument,
    UnitType,
)


def _decimal_to_json_number(value: Decimal) -> int | float:
    """Emit decimals as JSON numbers, the way CDM documents carry them.

    Fractional values go through float. Amounts accepted by
    check_reduction_amount read back unchanged.
    """
    if value == value.to_integral_value():
        return int(value)
    return float(value)


JsonDecimal = Annotated[Decimal, PlainSerializer(_decimal_to_json_number, when_used="json")]


class CdmModel(BaseModel):
    """Base for all CDM wire models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# ------------------------------------------------------------------
# Trade-state document
# ------------------------------------------------------------------


class ContractualProductModel(CdmModel):
    economic_terms: Optional[dict[str, Any]] = None

    def to_domain(self) -> ContractualProduct:
        terms = None
        if self.economic_terms is not None:
            terms = EconomicTerms(payload=MappingProxyType(self.economic_terms))
        return ContractualProduct(economic_terms=terms)


class ProductModel(CdmModel):
    """CDM `Product`: a one-of choice between product variants."""

    contractual_product: Optional[ContractualProductModel] = None
    index: Optional[dict[str, Any]] = None
    loan: Optional[dict[str, Any]] = None
    foreign_exchange: Optional[dict[str, Any]] = None
    commodity: Optional[dict[str, Any]] = None
    security: Optional[dict[str, Any]] = None
    basket: Optional[dict[str, Any]] = None
    asset_pool: Optional[dict[str, Any]] = None

    @model_validator(mode="after")
    def _one_variant_at_most(self) -> "ProductModel":
        present = self.present_variants()
        if len(present) > 1:
            names = ", ".join(v.value for v in present)
            raise ValueError(f"product must specify exactly one variant, got: {names}")
        return self

    def present_variants(self) -> list[ProductVariant]:
        return [
            variant
            for variant in ProductVariant
            if getattr(self, _VARIANT_ATTRIBUTES[variant]) is not None
        ]

    def to_domain(self) -> Product:
        present = self.present_variants()
        if not present:
            return Product(choice=None)

        variant = present[0]
        if variant is ProductVariant.CONTRACTUAL_PRODUCT:
            return Product(choice=self.contractual_product.to_domain())

        payload = getattr(self, _VARIANT_ATTRIBUTES[variant])
        return Product(
            choice=NonContractualProduct(variant=variant, payload=MappingProxyType(payload))
        )


_VARIANT_ATTRIBUTES = {
    ProductVariant.CONTRACTUAL_PRODUCT: "contractual_product",
    ProductVariant.INDEX: "index",
    ProductVariant.LOAN: "loan",
    ProductVariant.FOREIGN_EXCHANGE: "foreign_exchange",
    ProductVariant.COMMODITY: "commodity",
    ProductVariant.SECURITY: "security",
    ProductVariant.BASKET: "basket",
    ProductVariant.ASSET_POOL: "asset_pool",
}


class TradableProductModel(CdmModel):
    product: Optional[ProductModel] = None

    def to_domain(self) -> TradableProduct:
        product = self.product.to_domain() if self.product is not None else None
        return TradableProduct(product=product)


class TradeModel(CdmModel):
    tradable_product: Optional[TradableProductModel] = None

    def to_domain(self) -> Trade:
        tradable_product = None
        if self.tradable_product is not None:
            tradable_product = self.tradable_product.to_domain()
        return Trade(tradable_product=tradable_product)


class TradeStateModel(CdmModel):
    """CDM `TradeState`, the root of a trade document. `trade` is required."""

    trade: TradeModel

    def to_domain(self) -> TradeDocument:
        return TradeDocument(trade=self.trade.to_domain())


# ------------------------------------------------------------------
# Quantity-change instruction
# ------------------------------------------------------------------


class MetaFieldsModel(CdmModel):
    scheme: str


class FieldWithMetaStringModel(CdmModel):
    value: str
    meta: MetaFieldsModel


class UnitTypeModel(CdmModel):
    currency: FieldWithMetaStringModel


class NonNegativeQuantityScheduleModel(CdmModel):
    value: JsonDecimal = Field(..., ge=0)
    unit: UnitTypeModel


class PriceQuantityModel(CdmModel):
    quantity: list[NonNegativeQuantityScheduleModel] = Field(..., min_length=1)


class QuantityChangeInstructionModel(CdmModel):
    """CDM `QuantityChangeInstruction` as emitted by the unwind endpoints."""

    direction: Literal["INCREASE", "DECREASE"]
    change: list[PriceQuantityModel] = Field(..., min_length=1)

    @classmethod
    def from_domain(
        cls, instruction: QuantityChangeInstruction
    ) -> "QuantityChangeInstructionModel":
        return cls(
            direction=instruction.direction.value,
            change=[
                PriceQuantityModel(
                    quantity=[
                        NonNegativeQuantityScheduleModel(
                            value=schedule.value,
                            unit=UnitTypeModel(
                                currency=FieldWithMetaStringModel(
                                    value=schedule.unit.currency.value,
                                    meta=MetaFieldsModel(
                                        scheme=schedule.unit.currency.meta.scheme
                                    ),
                                )
                            ),
                        )
                        for schedule in price_quantity.quantity
                    ]
                )
                for price_quantity in instruction.change
            ],
        )

    def to_domain(self) -> QuantityChangeInstruction:
        return QuantityChangeInstruction(
            direction=QuantityChangeDirection(self.direction),
            change=tuple(
                PriceQuantity(
                    quantity=tuple(
                        NonNegativeQuantitySchedule(
                            value=schedule.value,
                            unit=UnitType(
                                currency=FieldWithMeta(
                                    value=schedule.unit.currency.value,
                                    meta=MetaFields(scheme=schedule.unit.currency.meta.scheme),
                                )
                            ),
                        )
                        for schedule in price_quantity.quantity
                    )
                )
                for price_quantity in self.change
            ),
        )
