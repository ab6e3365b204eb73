"""
Conversion result model.

Bundles the rendered text with the information needed to trace it back to
its source and to the renderer version that produced it.
"""

from typing import Literal

from pydantic import BaseModel, Field

from ..version import RENDERER_VERSION

SourceType = Literal["html", "eml", "stdin"]


class ConversionResult(BaseModel):
    """
    Immutable outcome of converting one source document.

    Same renderer version + same input = same text.
    """

    source: str = Field(description="File path of the source, or '-' for stdin")
    source_type: SourceType = Field(description="Kind of source document")
    encoding: str = Field(description="Encoding used to decode the input")
    text: str = Field(description="Plain-text rendering")
    char_count: int = Field(ge=0, description="Number of characters in text")
    line_count: int = Field(ge=0, description="Number of lines in text")
    renderer_version: str = Field(
        default=RENDERER_VERSION, description="Rendering rules version"
    )

    model_config = {
        "frozen": True,  # Immutable
    }

    @classmethod
    def from_text(
        cls, source: str, source_type: SourceType, encoding: str, text: str
    ) -> "ConversionResult":
        return cls(
            source=source,
            source_type=source_type,
            encoding=encoding,
            text=text,
            char_count=len(text),
            line_count=text.count("\n") + 1 if text else 0,
        )
