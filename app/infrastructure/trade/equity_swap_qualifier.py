"""
Adapter: Single-name total-return equity swap qualifier.

Implements EconomicTermsQualifier.
Approximates the "EquitySwap_TotalReturnBasicPerformance_SingleName"
product taxonomy over the raw economic-terms payload. Accepts both the
grouped payout layout (`payout.performancePayout[...]`) and the list-of-choices
layout (`payout[{"PerformancePayout": ...}]`).
"""

from typing import Any, Iterable

from app.domain.trade.entities import EconomicTerms
from app.domain.trade.ports import EconomicTermsQualifier

SINGLE_NAME_KEYS = {"security", "equity"}
MULTI_NAME_KEYS = {"basket", "index"}
NON_BASIC_RETURN_TERMS = {
    "varianceReturnTerms",
    "volatilityReturnTerms",
    "correlationReturnTerms",
}


def _as_list(node: Any) -> list[Any]:
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


def _payouts(terms: EconomicTerms, name: str) -> list[Any]:
    """Collect payouts of one type from either payout layout."""
    payout = terms.get("payout")
    if isinstance(payout, dict):
        return _as_list(payout.get(name))

    capitalized = name[0].upper() + name[1:]
    found = []
    for choice in _as_list(payout):
        if isinstance(choice, dict):
            found.extend(_as_list(choice.get(capitalized) or choice.get(name)))
    return found


def _keys_below(node: Any) -> Iterable[str]:
    """Yield every mapping key in a nested JSON structure, lower-cased."""
    if isinstance(node, dict):
        for key, value in node.items():
            yield key.lower()
            yield from _keys_below(value)
    elif isinstance(node, list):
        for item in node:
            yield from _keys_below(item)


class EquitySwapSingleNameQualifier(EconomicTermsQualifier):
    """Qualifies single-name equity swaps paying total return."""

    name = "a single name equity swap"

    def qualify(self, terms: EconomicTerms) -> bool:
        performance = _payouts(terms, "performancePayout")
        if len(performance) != 1 or not isinstance(performance[0], dict):
            return False
        if len(_payouts(terms, "interestRatePayout")) > 1:
            return False

        payout = performance[0]
        return self._is_basic_total_return(payout.get("returnTerms")) and self._is_single_name(
            payout.get("underlier")
        )

    @staticmethod
    def _is_basic_total_return(return_terms: Any) -> bool:
        if not isinstance(return_terms, dict):
            return False
        if return_terms.get("priceReturnTerms") is None:
            return False
        return not any(return_terms.get(key) is not None for key in NON_BASIC_RETURN_TERMS)

    @staticmethod
    def _is_single_name(underlier: Any) -> bool:
        keys = set(_keys_below(underlier))
        return bool(keys & SINGLE_NAME_KEYS) and not keys & MULTI_NAME_KEYS
