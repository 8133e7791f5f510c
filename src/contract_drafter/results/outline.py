"""Layout outline of generated content.

The PDF renderer lays the document out paragraph by paragraph; short
all-capital lines are treated as section titles.
"""

from typing import Literal

from pydantic import BaseModel, Field

SECTION_TITLE_MAX_LENGTH = 60

ParagraphStyle = Literal["section_title", "paragraph"]


class DocumentParagraph(BaseModel):
    """One non-blank line of generated content with its layout style."""

    text: str = Field(description="Trimmed line text")
    style: ParagraphStyle = Field(description="Layout style for the line")


def paragraphize(content: str) -> list[DocumentParagraph]:
    """Split content into styled paragraphs.

    Lines are trimmed and blank lines dropped. A line that is entirely
    upper case and shorter than 60 characters becomes a section title.

    Args:
        content: Generated contract text.

    Returns:
        Paragraphs in document order.
    """
    paragraphs: list[DocumentParagraph] = []
    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        is_title = line == line.upper() and len(line) < SECTION_TITLE_MAX_LENGTH
        paragraphs.append(
            DocumentParagraph(text=line, style="section_title" if is_title else "paragraph")
        )
    return paragraphs
