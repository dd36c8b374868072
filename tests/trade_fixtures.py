"""
Builders and fakes shared by the trade tests.

Provides a trimmed CDM trade-state document for a single-name
total-return equity swap, plus in-memory fakes for the domain ports.
"""

from typing import Any

from app.domain.trade.entities import EconomicTerms
from app.domain.trade.errors import TransportError
from app.domain.trade.ports import EconomicTermsQualifier, TradeDocumentSource

SAMPLE_URL = "https://example.test/trades/eqs-ex01.json"


def equity_swap_document() -> dict[str, Any]:
    """Return a fresh trade-state document shaped like CDM example eqs-ex01."""
    return {
        "trade": {
            "tradeIdentifier": [
                {
                    "issuerReference": {"externalReference": "party1"},
                    "assignedIdentifier": [{"identifier": {"value": "1234"}}],
                }
            ],
            "tradeDate": {"value": "2001-09-24"},
            "tradableProduct": {
                "product": {
                    "contractualProduct": {
                        "productTaxonomy": [
                            {
                                "source": "ISDA",
                                "productQualifier": "EquitySwap_TotalReturnBasicPerformance_SingleName",
                            }
                        ],
                        "economicTerms": {
                            "effectiveDate": {"adjustableDate": {"unadjustedDate": "2001-09-26"}},
                            "payout": {
                                "interestRatePayout": [
                                    {
                                        "rateSpecification": {
                                            "floatingRate": {
                                                "rateOption": {"value": {"floatingRateIndex": "USD-LIBOR-BBA"}}
                                            }
                                        }
                                    }
                                ],
                                "performancePayout": [
                                    {
                                        "returnTerms": {
                                            "priceReturnTerms": {"returnType": "Total"},
                                            "dividendReturnTerms": {
                                                "dividendPayoutRatio": [{"totalRatio": 1}]
                                            },
                                        },
                                        "underlier": {
                                            "security": {
                                                "productIdentifier": [
                                                    {"value": {"identifier": {"value": "STM.N"}}}
                                                ],
                                                "securityType": "Equity",
                                            }
                                        },
                                    }
                                ],
                            },
                        },
                    }
                },
                "tradeLot": [
                    {
                        "priceQuantity": [
                            {
                                "quantity": [
                                    {"value": {"value": 760400, "unit": {"financialUnit": "Share"}}}
                                ]
                            }
                        ]
                    }
                ],
                "counterparty": [
                    {"role": "Party1", "partyReference": {"externalReference": "party1"}},
                    {"role": "Party2", "partyReference": {"externalReference": "party2"}},
                ],
            },
            "party": [{"name": {"value": "Party A"}}, {"name": {"value": "Party B"}}],
        },
        "state": {"positionState": "Executed"},
    }


def economic_terms_of(document: dict[str, Any]) -> dict[str, Any]:
    return document["trade"]["tradableProduct"]["product"]["contractualProduct"]["economicTerms"]


class StaticQualifier(EconomicTermsQualifier):
    """Qualifier returning a fixed verdict and recording its calls."""

    name = "a static test product"

    def __init__(self, verdict: bool) -> None:
        self.verdict = verdict
        self.calls: list[EconomicTerms] = []

    def qualify(self, terms: EconomicTerms) -> bool:
        self.calls.append(terms)
        return self.verdict


class InMemoryDocumentSource(TradeDocumentSource):
    """Document source serving fixed documents by URL."""

    def __init__(self, documents: dict[str, str] | None = None) -> None:
        self.documents = documents or {}
        self.requested: list[str] = []

    def fetch(self, url: str) -> str:
        self.requested.append(url)
        if url not in self.documents:
            raise TransportError(url, "HTTP 404")
        return self.documents[url]
