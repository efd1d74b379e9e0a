"""Pydantic models for the mood profile."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

MoodTier = Literal["conservative", "balanced", "maximal"]


class MoodWeights(BaseModel):
    model_config = {"frozen": True}

    practical: float
    creative: float
    absurd: float


class MoodProfile(BaseModel):
    """Generation knobs derived from a 0-10 mood value."""

    model_config = {"frozen": True}

    mood: int
    weights: MoodWeights
    temperature: float  # 0.2 -> 0.8
    tier: MoodTier
    label: str  # "Realistic", "Optimistic", "Delusional"
    scope: str
    budget: str
    risk: str
