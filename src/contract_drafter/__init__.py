"""
contract-drafter: Template-driven contract assembly for guided drafting forms.
"""

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

# Results
from contract_drafter.results import DocumentParagraph, GeneratedContract, paragraphize

# Data model
from contract_drafter.schemas import (
    US_STATES,
    ContractFormPayload,
    ContractTemplate,
    ContractType,
    TemplateCategory,
)

# Built-in templates
from contract_drafter.templates import (
    CATEGORY_CHECKLISTS,
    CATEGORY_LABELS,
    BuiltinTemplates,
    default_registry,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ContractComposer",
    "ClauseStep",
    "PIPELINE",
    "generate_contract",
    "TemplateRegistry",
    "ContractDrafterError",
    "TemplateNotFoundError",
    "PayloadValidationError",
    "ConfigurationError",
    # Validation
    "ContractFormSchema",
    "validate_payload",
    # Config
    "DraftingConfig",
    # Built-in Templates
    "BuiltinTemplates",
    "CATEGORY_CHECKLISTS",
    "CATEGORY_LABELS",
    "default_registry",
    # Data model
    "ContractFormPayload",
    "ContractTemplate",
    "ContractType",
    "TemplateCategory",
    "US_STATES",
    # Results
    "GeneratedContract",
    "DocumentParagraph",
    "paragraphize",
]
