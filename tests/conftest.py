"""
Shared fixtures for the trade tests.
"""

import json
from typing import Any

import pytest

from tests.trade_fixtures import equity_swap_document


@pytest.fixture
def document() -> dict[str, Any]:
    return equity_swap_document()


@pytest.fixture
def raw_document(document: dict[str, Any]) -> str:
    return json.dumps(document)
