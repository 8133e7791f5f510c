"""Core composition functionality."""

from contract_drafter.core.composer import (
    PIPELINE,
    ClauseStep,
    ContractComposer,
    generate_contract,
)
from contract_drafter.core.config import DraftingConfig
from contract_drafter.core.exceptions import (
    ConfigurationError,
    ContractDrafterError,
    PayloadValidationError,
    TemplateNotFoundError,
)
from contract_drafter.core.registry import TemplateRegistry
from contract_drafter.core.validation import ContractFormSchema, validate_payload

__all__ = [
    "ClauseStep",
    "ContractComposer",
    "ContractFormSchema",
    "DraftingConfig",
    "PIPELINE",
    "TemplateRegistry",
    "generate_contract",
    "validate_payload",
    "ContractDrafterError",
    "TemplateNotFoundError",
    "PayloadValidationError",
    "ConfigurationError",
]
