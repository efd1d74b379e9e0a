"""Data models for the idea generation pipeline."""

from resumancer.models.idea import (
    CATEGORIES,
    Category,
    GenerationResult,
    Idea,
    NoUsableIdeas,
)
from resumancer.models.mood import MoodProfile, MoodWeights
from resumancer.models.request import Constraints, GenerationRequest

__all__ = [
    "CATEGORIES",
    "Category",
    "Constraints",
    "GenerationRequest",
    "GenerationResult",
    "Idea",
    "MoodProfile",
    "MoodWeights",
    "NoUsableIdeas",
]
