"""Result types for composition outputs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from contract_drafter.results.outline import DocumentParagraph, paragraphize
from contract_drafter.schemas.template import ContractTemplate


class GeneratedContract(BaseModel):
    """A fully composed contract.

    Not persisted here; callers attach an identifier and timestamp when
    they store it.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(description="Document title (the template label)")
    content: str = Field(description="Joined clause text")
    template: ContractTemplate = Field(description="Template the document was built from")
    sections: tuple[str, ...] = Field(
        default=(),
        description="Rendered clause blocks in document order",
    )

    @model_validator(mode="after")
    def _validate_content(self) -> GeneratedContract:
        """Ensure a composed document is never empty."""
        if not self.content.strip():
            raise ValueError("content must not be empty")
        return self

    @property
    def contract_type(self) -> str:
        """Identifier of the template used."""
        return self.template.identifier

    def headings(self) -> list[str]:
        """Return the heading of each clause block, in order."""
        return [section.strip().split("\n", 1)[0] for section in self.sections]

    def outline(self) -> list[DocumentParagraph]:
        """Return the paragraph layout of the content."""
        return paragraphize(self.content)

    def to_dict(self) -> dict[str, Any]:
        """Return the caller-facing ``{title, content}`` shape."""
        return {"title": self.title, "content": self.content}
