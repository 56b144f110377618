"""Content span schema."""

from pydantic import BaseModel, ConfigDict


class ContentSpan(BaseModel):
    """A slice of post content.

    Protected spans (code, blockquotes) are opaque to mention matching.
    Concatenating the text of every span of a split reproduces the input.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    protected: bool = False
