"""Mood Profile Calculator - maps a 0-10 mood to generation knobs."""

from __future__ import annotations

import math

from resumancer.models.idea import Category
from resumancer.models.mood import MoodProfile, MoodTier, MoodWeights

MIN_MOOD = 0
MAX_MOOD = 10

# Tier boundaries, shared by the profile and the locked category:
# m < 3 conservative, 3 <= m <= 7 balanced, m > 7 maximal.
LOW_MOOD_CEILING = 3
HIGH_MOOD_FLOOR = 7

TIER_KNOBS: dict[str, dict[str, str]] = {
    "conservative": {
        "label": "Realistic",
        "scope": "tight, incremental",
        "budget": "under $500 and within 1 week",
        "risk": "minimize risk; high feasibility",
    },
    "balanced": {
        "label": "Optimistic",
        "scope": "balanced, ambitious but feasible",
        "budget": "reasonable budget within 1-4 weeks",
        "risk": "moderate risk; good upside",
    },
    "maximal": {
        "label": "Delusional",
        "scope": "wild, moonshot, rule-bending",
        "budget": "ignore budget; optimize for spectacle",
        "risk": "accept high risk and unknowns",
    },
}

LOCKED_CATEGORY: dict[str, Category] = {
    "conservative": "creative",
    "balanced": "practical",
    "maximal": "absurd",
}


def resolve_mood(value: float) -> int:
    """Clamp to [0, 10], then round half up to an integer."""
    if isinstance(value, float) and math.isnan(value):
        raise ValueError("mood must be a number, got NaN")
    clamped = min(MAX_MOOD, max(MIN_MOOD, value))
    return int(math.floor(clamped + 0.5))


def mood_tier(mood: int) -> MoodTier:
    if mood < LOW_MOOD_CEILING:
        return "conservative"
    if mood <= HIGH_MOOD_FLOOR:
        return "balanced"
    return "maximal"


def locked_category(mood: int) -> Category:
    """Category used for all three ideas when running in locked mode."""
    return LOCKED_CATEGORY[mood_tier(resolve_mood(mood))]


def compute_mood_profile(mood: float) -> MoodProfile:
    """Derive the category mixture, temperature and tier strings for a mood.

    Pure: the same mood always yields an identical profile.
    """
    m = resolve_mood(mood)

    practical = max(0.0, 1 - m / 6)  # high at low mood
    absurd = max(0.0, (m - 4) / 6)  # grows after ~4
    creative = 1 - abs(m - 5) / 5  # peaks mid

    total = practical + creative + absurd
    if total <= 0:
        total = 1.0
    weights = MoodWeights(
        practical=practical / total,
        creative=creative / total,
        absurd=absurd / total,
    )

    tier = mood_tier(m)
    knobs = TIER_KNOBS[tier]
    return MoodProfile(
        mood=m,
        weights=weights,
        temperature=0.2 + (m / 10) * 0.6,
        tier=tier,
        label=knobs["label"],
        scope=knobs["scope"],
        budget=knobs["budget"],
        risk=knobs["risk"],
    )
