"""Contract composer.

Resolves a template and runs the clause pipeline: an ordered tuple of
steps, each a predicate and a renderer. A step contributes blocks only
when its predicate holds, so enabled clauses always keep their relative
order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from contract_drafter.clauses import library
from contract_drafter.core.config import DraftingConfig
from contract_drafter.core.exceptions import ConfigurationError, PayloadValidationError
from contract_drafter.core.registry import TemplateRegistry
from contract_drafter.core.validation import validate_payload
from contract_drafter.results.types import GeneratedContract
from contract_drafter.schemas.payload import ContractFormPayload
from contract_drafter.schemas.template import ContractTemplate
from contract_drafter.schemas.types import TemplateCategory

logger = logging.getLogger(__name__)

Predicate = Callable[[ContractTemplate, ContractFormPayload], bool]
Renderer = Callable[[ContractTemplate, ContractFormPayload], list[str]]


@dataclass(frozen=True)
class ClauseStep:
    """One stage of the clause pipeline."""

    name: str
    predicate: Predicate
    render: Renderer


def _always(template: ContractTemplate, payload: ContractFormPayload) -> bool:
    return True


def _toggle(attribute: str) -> Predicate:
    def predicate(template: ContractTemplate, payload: ContractFormPayload) -> bool:
        return bool(getattr(payload, attribute))

    return predicate


def _service(template: ContractTemplate, payload: ContractFormPayload) -> list[str]:
    return library.service_clauses(payload)


def _finance(template: ContractTemplate, payload: ContractFormPayload) -> list[str]:
    return library.finance_clauses(payload)


def _property(template: ContractTemplate, payload: ContractFormPayload) -> list[str]:
    return library.property_clauses(payload)


def _policy(template: ContractTemplate, payload: ContractFormPayload) -> list[str]:
    return [library.policy_clause(template, payload)]


CATEGORY_CLAUSES: dict[TemplateCategory, Renderer] = {
    TemplateCategory.SERVICE: _service,
    TemplateCategory.EMPLOYMENT: _service,
    TemplateCategory.FINANCE: _finance,
    TemplateCategory.REAL_ESTATE: _property,
    TemplateCategory.TRANSACTION: _property,
    TemplateCategory.POLICY: _policy,
    TemplateCategory.INTELLECTUAL: _policy,
}

_unmapped = set(TemplateCategory) - set(CATEGORY_CLAUSES)
if _unmapped:
    raise ConfigurationError(
        "No category clauses registered for: "
        + ", ".join(sorted(c.value for c in _unmapped))
    )


def _category(template: ContractTemplate, payload: ContractFormPayload) -> list[str]:
    return CATEGORY_CLAUSES[template.category](template, payload)


PIPELINE: tuple[ClauseStep, ...] = (
    ClauseStep("overview", _always, lambda t, p: [library.overview_clause(t, p)]),
    ClauseStep("business_terms", _always, lambda t, p: [library.business_terms_clause(p)]),
    ClauseStep("category", _always, _category),
    ClauseStep(
        "confidentiality",
        _toggle("include_confidentiality"),
        lambda t, p: [library.confidentiality_clause()],
    ),
    ClauseStep(
        "ip_ownership",
        _toggle("include_ip_ownership"),
        lambda t, p: [library.ip_ownership_clause(p)],
    ),
    ClauseStep(
        "non_solicitation",
        _toggle("include_non_solicitation"),
        lambda t, p: [library.non_solicitation_clause()],
    ),
    ClauseStep(
        "arbitration",
        _toggle("include_arbitration"),
        lambda t, p: [library.arbitration_clause(p.governing_law)],
    ),
    ClauseStep(
        "indemnification",
        _toggle("include_indemnification"),
        lambda t, p: [library.indemnification_clause()],
    ),
    ClauseStep(
        "liability_cap",
        _toggle("include_liability_cap"),
        lambda t, p: [library.liability_cap_clause()],
    ),
    ClauseStep("standard", _always, lambda t, p: library.standard_clauses(p)),
    ClauseStep(
        "governing_law", _always, lambda t, p: [library.governing_law_clause(p.governing_law)]
    ),
    ClauseStep(
        "additional_notes",
        lambda t, p: library.has_text(p.custom_notes),
        lambda t, p: [library.additional_notes_clause(p.custom_notes or "")],
    ),
    ClauseStep("custom_clauses", _always, lambda t, p: library.custom_clauses(p.optional_clauses)),
    ClauseStep("signatures", _always, lambda t, p: [library.signature_block()]),
)


class ContractComposer:
    """Deterministic template-driven contract generator.

    Holds no mutable state, so a single instance can serve concurrent
    callers.

    Example:
        ```python
        from contract_drafter import ContractComposer

        composer = ContractComposer()
        contract = composer.generate("residential-lease", payload)
        print(contract.title)
        print(contract.content)
        ```
    """

    def __init__(
        self,
        registry: TemplateRegistry | None = None,
        config: DraftingConfig | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            registry: Template registry. Defaults to the built-in catalog.
            config: Composition configuration.
        """
        if registry is None:
            from contract_drafter.templates.builtins import default_registry

            registry = default_registry()
        self.registry = registry
        self.config = config or DraftingConfig()
        self.pipeline = PIPELINE

    def generate(
        self,
        contract_type: str,
        payload: ContractFormPayload | Mapping[str, Any],
    ) -> GeneratedContract:
        """Compose a contract.

        Args:
            contract_type: Template identifier.
            payload: Validated payload, or a mapping of form fields.

        Returns:
            GeneratedContract with title, content, and template.

        Raises:
            TemplateNotFoundError: If the contract type is not registered.
            PayloadValidationError: If a mapping payload cannot be read, or
                strict validation is enabled and it fails the form rules.
        """
        template = self.registry.lookup(contract_type)
        form = self._coerce_payload(payload)

        sections: list[str] = []
        for step in self.pipeline:
            if step.predicate(template, form):
                sections.extend(step.render(template, form))
        sections = [s for s in sections if s]

        logger.debug(
            "Composed %s (%s) with %d clause blocks",
            template.identifier,
            template.category.value,
            len(sections),
        )

        return GeneratedContract(
            title=template.label,
            content=self.config.section_separator.join(sections),
            template=template,
            sections=tuple(sections),
        )

    def _coerce_payload(
        self, payload: ContractFormPayload | Mapping[str, Any]
    ) -> ContractFormPayload:
        if isinstance(payload, ContractFormPayload):
            return payload
        if self.config.strict_validation:
            return validate_payload(payload)
        try:
            return ContractFormPayload.model_validate(payload)
        except ValidationError as e:
            raise PayloadValidationError(
                f"Malformed payload: {e.error_count()} validation error(s)",
                validation_errors=e.errors(),
            ) from e


def generate_contract(
    contract_type: str,
    payload: ContractFormPayload | Mapping[str, Any],
) -> GeneratedContract:
    """Compose a contract from the built-in catalog.

    Args:
        contract_type: Template identifier.
        payload: Validated payload, or a mapping of form fields.

    Returns:
        GeneratedContract.

    Raises:
        TemplateNotFoundError: If the contract type is not registered.
    """
    return ContractComposer().generate(contract_type, payload)
