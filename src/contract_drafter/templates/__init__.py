"""Built-in contract templates.

This module provides the template catalog with category-level checklist
and label defaults.
"""

from contract_drafter.templates.builtins import (
    CATEGORY_CHECKLISTS,
    CATEGORY_LABELS,
    BuiltinTemplates,
    default_registry,
)

__all__ = [
    "BuiltinTemplates",
    "CATEGORY_CHECKLISTS",
    "CATEGORY_LABELS",
    "default_registry",
]
