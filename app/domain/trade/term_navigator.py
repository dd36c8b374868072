"""
Domain service: Economic-terms navigation.

Walks a parsed trade-state document along
trade → tradableProduct → product → contractualProduct → economicTerms
and reports precisely which node is missing when the walk cannot complete.
No framework imports. No IO. No side effects.
"""

from app.domain.trade.entities import (
    ContractualProduct,
    EconomicTerms,
    NonContractualProduct,
    TradeDocument,
)
from app.domain.trade.errors import NavigationError, TypeMismatchError


class TermNavigator:
    """Extracts the economic terms of a trade-state document."""

    def economic_terms(self, document: TradeDocument) -> EconomicTerms:
        """Return the economic terms of the document's contractual product.

        Args:
            document: A parsed trade-state document.

        Returns:
            The EconomicTerms of the traded contractual product.

        Raises:
            NavigationError: If a node on the path is absent.
            TypeMismatchError: If the product is not a contractual product.
        """
        trade = document.trade
        if trade is None:
            raise NavigationError("trade", "trade")

        tradable_product = trade.tradable_product
        if tradable_product is None:
            raise NavigationError("tradableProduct", "trade.tradableProduct")

        product = tradable_product.product
        if product is None:
            raise NavigationError("product", "trade.tradableProduct.product")

        choice = product.choice
        path = "trade.tradableProduct.product.contractualProduct"
        if choice is None:
            raise NavigationError(
                "contractualProduct",
                path,
                message="product has no contractual-product variant",
            )
        if isinstance(choice, NonContractualProduct):
            raise TypeMismatchError(
                "product",
                choice.variant.value,
                path=f"trade.tradableProduct.product.{choice.variant.value}",
            )
        if not isinstance(choice, ContractualProduct):
            raise TypeMismatchError(
                "product", type(choice).__name__, path="trade.tradableProduct.product"
            )

        economic_terms = choice.economic_terms
        if economic_terms is None:
            raise NavigationError("economicTerms", f"{path}.economicTerms")

        return economic_terms
