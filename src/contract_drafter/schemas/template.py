"""Contract template model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contract_drafter.schemas.types import TemplateCategory


class ContractTemplate(BaseModel):
    """Read-only metadata describing one contract type.

    Templates are built once when the catalog is created and never
    mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(description="Contract type identifier")
    label: str = Field(description="Display label, used as the document title")
    seo_title: str = Field(description="Title used on catalog pages")
    description: str = Field(description="One-sentence description of the agreement")
    checklist: tuple[str, ...] = Field(
        description="Short list of facts the user should have ready"
    )
    category: TemplateCategory = Field(description="Category driving clause selection")
    category_label: str = Field(description="Human label for the category")

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Validate identifier is non-empty."""
        if not v or not v.strip():
            raise ValueError("Template identifier cannot be empty")
        return v.strip()

    def to_dict(self) -> dict[str, Any]:
        """Convert template to a plain dictionary for catalog export.

        Returns:
            Dictionary representation of the template.
        """
        return {
            "identifier": self.identifier,
            "label": self.label,
            "seo_title": self.seo_title,
            "description": self.description,
            "checklist": list(self.checklist),
            "category": self.category.value,
            "category_label": self.category_label,
        }
