"""Template registry for contract types.

This module provides:
- TemplateRegistry: lookup, discovery, and catalog export of templates

For the built-in catalog, see ``contract_drafter.templates``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from contract_drafter.core.exceptions import ConfigurationError, TemplateNotFoundError
from contract_drafter.schemas.template import ContractTemplate
from contract_drafter.schemas.types import TemplateCategory

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Registry mapping contract-type identifiers to templates.

    Templates are registered while the catalog is built. Once ``freeze()``
    is called the registry rejects further registration.

    Example:
        ```python
        registry = TemplateRegistry()
        registry.register(lease_template)
        registry.freeze()

        template = registry.lookup("residential-lease")

        for identifier in registry.list_templates():
            print(identifier)

        finance_templates = registry.search_by_category("finance")
        ```
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._templates: dict[str, ContractTemplate] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        """Whether the registry still accepts registrations."""
        return self._frozen

    def freeze(self) -> None:
        """Stop accepting registrations."""
        self._frozen = True

    def register(
        self,
        template: ContractTemplate,
        overwrite: bool = False,
    ) -> None:
        """Register a template.

        Args:
            template: Template to register.
            overwrite: Whether to overwrite an existing template.

        Raises:
            ConfigurationError: If the registry is frozen, or a template with
                the same identifier exists and overwrite=False.
        """
        if self._frozen:
            raise ConfigurationError("Registry is frozen; templates cannot be added")
        if template.identifier in self._templates and not overwrite:
            raise ConfigurationError(
                f"Template '{template.identifier}' already registered. "
                "Use overwrite=True to replace."
            )
        self._templates[template.identifier] = template

    def get(self, contract_type: str) -> ContractTemplate | None:
        """Get template by contract type.

        Args:
            contract_type: Contract type identifier.

        Returns:
            Template or None if not found.
        """
        return self._templates.get(_key(contract_type))

    def get_or_raise(self, contract_type: str) -> ContractTemplate:
        """Get template by contract type or raise.

        Args:
            contract_type: Contract type identifier.

        Returns:
            Template.

        Raises:
            TemplateNotFoundError: If the contract type is not registered.
        """
        template = self.get(contract_type)
        if template is None:
            logger.warning("Template not found for contract type: %s", contract_type)
            raise TemplateNotFoundError(_key(contract_type))
        return template

    lookup = get_or_raise

    def list_templates(self) -> list[str]:
        """List all registered contract-type identifiers, in catalog order."""
        return list(self._templates.keys())

    def search_by_category(
        self, category: TemplateCategory | str
    ) -> list[ContractTemplate]:
        """Find templates belonging to a category.

        Args:
            category: Category enum member or its string value.

        Returns:
            List of matching templates in catalog order.
        """
        wanted = TemplateCategory(category)
        return [t for t in self._templates.values() if t.category is wanted]

    def search_by_description(self, query: str) -> list[ContractTemplate]:
        """Find templates whose label or description contains the query.

        Args:
            query: Search string (case-insensitive).

        Returns:
            List of matching templates.
        """
        query_lower = query.lower()
        return [
            t
            for t in self._templates.values()
            if query_lower in t.description.lower() or query_lower in t.label.lower()
        ]

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """Export all templates as dictionary.

        Returns:
            Dict mapping identifiers to their metadata.
        """
        return {
            identifier: template.to_dict()
            for identifier, template in self._templates.items()
        }

    def to_json(self, path: str | Path | None = None, indent: int = 2) -> str:
        """Serialize the catalog to JSON.

        Args:
            path: Optional file path to write to.
            indent: JSON indentation level.

        Returns:
            JSON string representation.
        """
        json_str = json.dumps(self.to_dict(), indent=indent)

        if path:
            Path(path).write_text(json_str)

        return json_str

    def to_yaml(self, path: str | Path | None = None) -> str:
        """Serialize the catalog to YAML.

        Args:
            path: Optional file path to write to.

        Returns:
            YAML string representation.
        """
        yaml_str: str = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

        if path:
            Path(path).write_text(yaml_str)

        return yaml_str

    def __len__(self) -> int:
        """Return number of registered templates."""
        return len(self._templates)

    def __contains__(self, contract_type: object) -> bool:
        """Check if a contract type is registered."""
        if not isinstance(contract_type, str):
            return False
        return _key(contract_type) in self._templates

    def __iter__(self) -> Iterator[str]:
        """Iterate over contract-type identifiers."""
        return iter(self._templates)


def _key(contract_type: str) -> str:
    # ContractType members are str subclasses; normalise to the plain value
    return contract_type.value if isinstance(contract_type, Enum) else contract_type
