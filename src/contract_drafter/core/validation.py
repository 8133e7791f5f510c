"""Request-boundary validation for form payloads.

The composer trusts its input. Callers run submitted data through
``validate_payload`` first, which applies the same rules as the guided
form: both parties named and addressed, an effective date, a valid
governing-law state, and a short relationship summary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError, field_validator

from contract_drafter.core.exceptions import PayloadValidationError
from contract_drafter.schemas.payload import ContractFormPayload
from contract_drafter.schemas.types import US_STATES, ContractType

logger = logging.getLogger(__name__)


class ContractFormSchema(ContractFormPayload):
    """Strict form schema.

    Tightens ``ContractFormPayload``: the contract type must be a known
    ``ContractType`` and the party, date, jurisdiction, and summary fields
    are required with minimum lengths.
    """

    contract_type: ContractType = Field(description="Template identifier")
    party_one_address: str = Field(description="Party A mailing address")
    party_two_address: str = Field(description="Party B mailing address")
    relationship_summary: str = Field(description="Short description of the relationship")

    @field_validator("party_one_name", "party_two_name")
    @classmethod
    def validate_legal_name(cls, v: str) -> str:
        if len(v) < 2:
            raise ValueError("Enter a valid legal name.")
        return v

    @field_validator("party_one_address", "party_two_address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        if len(v) < 5:
            raise ValueError("Provide a mailing address.")
        return v

    @field_validator("effective_date")
    @classmethod
    def validate_effective_date(cls, v: str) -> str:
        if len(v) < 4:
            raise ValueError("Effective date is required.")
        return v

    @field_validator("governing_law")
    @classmethod
    def validate_governing_law(cls, v: str) -> str:
        if v not in US_STATES:
            raise ValueError(f"'{v}' is not a U.S. state code.")
        return v

    @field_validator("relationship_summary")
    @classmethod
    def validate_relationship_summary(cls, v: str) -> str:
        if len(v) < 10:
            raise ValueError("Briefly describe the relationship.")
        return v


def validate_payload(data: Mapping[str, Any] | ContractFormPayload) -> ContractFormPayload:
    """Validate submitted form data against the strict schema.

    Args:
        data: Mapping with camelCase or snake_case keys, or a payload model.

    Returns:
        The validated payload.

    Raises:
        PayloadValidationError: If any rule fails. ``validation_errors``
            holds the pydantic error list.
    """
    if isinstance(data, ContractFormPayload):
        data = data.model_dump()
    try:
        return ContractFormSchema.model_validate(data)
    except ValidationError as e:
        logger.debug("Payload rejected with %d error(s)", e.error_count())
        raise PayloadValidationError(
            f"Invalid payload: {e.error_count()} validation error(s)",
            validation_errors=e.errors(),
        ) from e
