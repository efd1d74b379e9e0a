"""Pydantic models for generated ideas and the generation outcome."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["practical", "creative", "absurd"]
CATEGORIES: tuple[str, ...] = ("practical", "creative", "absurd")


class Idea(BaseModel):
    model_config = ConfigDict(extra="forbid")

    category: Category
    title: str
    why: str
    plan: str  # 4-8 short steps separated by \n
    opener: str  # one-sentence outreach opener
    suggested_timeframe: str = ""


class GenerationResult(BaseModel):
    """Three validated ideas plus the knobs used to produce them."""

    ideas: list[Idea] = Field(min_length=3, max_length=3)
    mood: int
    temperature: float
    category_mode: str = "diverse"
    target_category: Category | None = None
    usage: dict = Field(default_factory=dict)

    def to_payload(self) -> dict:
        return {
            "status": "ok",
            "ideas": [idea.model_dump() for idea in self.ideas],
            "mood": self.mood,
            "temperature": self.temperature,
        }


class NoUsableIdeas(BaseModel):
    """Soft failure: the provider answered but the content was unusable."""

    message: str
    raw: str = ""
    mood: int
    temperature: float

    def to_payload(self) -> dict:
        return {
            "status": "no_usable_ideas",
            "error": self.message,
            "raw": self.raw,
            "mood": self.mood,
            "temperature": self.temperature,
        }
