"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation of what the remote API and the local store hand us.
- The same model decodes API responses and store lines, and serializes back.

Note:
- These models describe *what* a comic is, not *how* it is obtained.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from xkcd_search.core.domain.options import MatchScope

PERMALINK_BASE_URL = "https://xkcd.com"


class ComicRecord(BaseModel):
    """Metadata of a single comic strip.

    Read-only once decoded; `num` is the only ordering key.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    num: int = Field(
        ...,
        ge=1,
        description="Comic identifier assigned by the remote source.",
    )
    day: str = Field(default="", description="Publication day.")
    month: str = Field(default="", description="Publication month.")
    year: str = Field(default="", description="Publication year.")
    news: str = Field(default="")
    link: str = Field(default="")
    safe_title: str = Field(
        default="",
        description="Sanitized title, used for output lines.",
    )
    img: str = Field(default="", description="Image URL.")
    alt: str = Field(default="", description="Mouseover (alt) text.")
    title: str = Field(default="")
    transcript: str = Field(default="")

    @property
    def url(self) -> str:
        """Permanent link to the comic."""

        return f"{PERMALINK_BASE_URL}/{self.num}"

    def text_fields(self, scope: MatchScope = MatchScope.ALL) -> list[str]:
        if scope is MatchScope.TITLE:
            return [self.title]
        if scope is MatchScope.ALT_TEXT:
            return [self.alt]
        return [self.title, self.alt, self.transcript]
