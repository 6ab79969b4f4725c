from __future__ import annotations

import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .eras import Era, Jidai

LARGE_TEXT_MAX_LENGTH = 200_000


class EraResponse(BaseModel):
    """Serialised view of a single era record."""

    kanji: Optional[str] = Field(default=None, description="Era name in kanji")
    romaji: Optional[str] = Field(default=None, description="Transliterated era name")
    jidai: Jidai = Field(..., description="Historical period the era belongs to")
    started_at: int = Field(..., description="First Unix second of the era (inclusive)")
    ended_at: Optional[int] = Field(
        default=None,
        description="First Unix second after the era (exclusive). null for the current era.",
    )
    is_current: bool = Field(default=False, description="True for the open-ended current era")

    @classmethod
    def from_era(cls, era: Era) -> "EraResponse":
        return cls(
            kanji=era.kanji,
            romaji=era.romaji,
            jidai=era.jidai,
            started_at=era.started_at,
            ended_at=era.ended_at,
            is_current=era.is_current,
        )


class EraListResponse(BaseModel):
    eras: List[EraResponse] = Field(default_factory=list)
    total: int = Field(..., ge=0)


class NenkouResponse(BaseModel):
    date: datetime.date = Field(..., description="Gregorian date that was converted")
    era: EraResponse
    nenkou: str = Field(..., description="Date rendered with the era name, e.g. 令和３年１１月１２日")


class NenkouParseResponse(BaseModel):
    text: str
    date_iso: str = Field(..., description="ISO-8601 date recovered from the era notation")


class DetectRequest(BaseModel):
    text: str = Field(
        ...,
        max_length=LARGE_TEXT_MAX_LENGTH,
        description="Text to inspect for Japanese kana",
    )

    @field_validator("text")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class DetectResponse(BaseModel):
    text: str
    is_japanese: bool
