"""Custom exceptions for contract-drafter."""

from typing import Any


class ContractDrafterError(Exception):
    """Base exception for all contract-drafter errors."""

    pass


class TemplateNotFoundError(ContractDrafterError, KeyError):
    """Raised when a contract type has no registered template."""

    def __init__(self, contract_type: str) -> None:
        super().__init__(f"Template not found for contract type: {contract_type}")
        self.contract_type = contract_type

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class PayloadValidationError(ContractDrafterError):
    """Raised when a form payload fails schema validation."""

    def __init__(self, message: str, validation_errors: Any = None) -> None:
        super().__init__(message)
        self.validation_errors = validation_errors


class ConfigurationError(ContractDrafterError):
    """Raised when the registry or composer is misconfigured."""

    pass
