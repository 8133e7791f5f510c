"""Shared fixtures for contract-drafter tests."""

from collections.abc import Callable
from typing import Any

import pytest

from contract_drafter import ContractComposer, ContractFormPayload


def build_payload(**overrides: Any) -> ContractFormPayload:
    """Create a payload that passes the form rules, with overrides."""
    data: dict[str, Any] = {
        "contract_type": "residential-lease",
        "party_one_name": "Oakview Homes LLC",
        "party_one_address": "900 Market St, Austin, TX",
        "party_two_name": "Jordan Ellis",
        "party_two_address": "12 Elm Ct, Austin, TX",
        "effective_date": "2025-03-01",
        "governing_law": "TX",
        "relationship_summary": "Twelve-month lease of a single-family home.",
    }
    data.update(overrides)
    return ContractFormPayload(**data)


@pytest.fixture
def make_payload() -> Callable[..., ContractFormPayload]:
    """Factory fixture for payloads."""
    return build_payload


@pytest.fixture
def composer() -> ContractComposer:
    """Composer backed by the built-in catalog."""
    return ContractComposer()


@pytest.fixture
def lease_form() -> dict[str, Any]:
    """Raw camelCase form submission for a residential lease."""
    return {
        "contractType": "residential-lease",
        "partyOneName": "Oakview Homes LLC",
        "partyOneAddress": "900 Market St, Austin, TX",
        "partyTwoName": "Jordan Ellis",
        "partyTwoAddress": "12 Elm Ct, Austin, TX",
        "effectiveDate": "2025-03-01",
        "governingLaw": "TX",
        "relationshipSummary": "Twelve-month lease of a single-family home.",
        "propertyAddress": "214 Oakview Dr",
        "purchasePrice": "$2150/mo",
    }
