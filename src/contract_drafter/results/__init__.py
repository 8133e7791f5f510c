"""Result types for generated contracts."""

from contract_drafter.results.outline import DocumentParagraph, paragraphize
from contract_drafter.results.types import GeneratedContract

__all__ = [
    "DocumentParagraph",
    "GeneratedContract",
    "paragraphize",
]
