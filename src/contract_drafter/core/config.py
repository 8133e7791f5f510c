"""Configuration classes for contract composition."""

from pydantic import BaseModel, ConfigDict, Field


class DraftingConfig(BaseModel):
    """Configuration for the composition process."""

    model_config = ConfigDict(frozen=True)

    strict_validation: bool = Field(
        default=False,
        description=(
            "Run mapping payloads through the strict form schema before composing. "
            "Model instances are trusted as already validated."
        ),
    )
    section_separator: str = Field(
        default="\n",
        description="Text placed between rendered clause blocks",
    )
