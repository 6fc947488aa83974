"""
Output records and text helpers shared by the file generators.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OutputFile(BaseModel):
    """A generated text file, relative to the export root."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(description="Directory relative to the output root")
    file_name: str = Field(description="File name including extension")
    content: str = Field(description="File content, written verbatim")


def indent(width: int) -> str:
    """Indentation string for a configured width."""
    return " " * width


def add_disclaimer(disclaimer: str, content: str) -> str:
    """Prepend a generated-file comment to CSS content."""
    return f"/* {disclaimer} */\n\n{content}"
