"""Data model for templates and form payloads.

This module provides the closed vocabularies (categories, contract types,
state codes) and the Pydantic models exchanged with the composer.
"""

from contract_drafter.schemas.payload import ContractFormPayload
from contract_drafter.schemas.template import ContractTemplate
from contract_drafter.schemas.types import US_STATES, ContractType, TemplateCategory

__all__ = [
    "ContractFormPayload",
    "ContractTemplate",
    "ContractType",
    "TemplateCategory",
    "US_STATES",
]
