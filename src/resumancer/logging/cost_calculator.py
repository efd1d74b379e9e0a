"""Token cost estimate for the usage log line."""

from __future__ import annotations

# USD per million tokens: (input, output)
MODEL_PRICING: dict[str, tuple[float, float]] = {
    "claude-haiku-4-5-20251001": (1.00, 5.00),
    "claude-sonnet-4-5-20250929": (3.00, 15.00),
}


def call_cost(model_id: str, input_tokens: int, output_tokens: int) -> float:
    """Cost of one provider call; 0.0 for models without a price entry."""
    input_rate, output_rate = MODEL_PRICING.get(model_id, (0.0, 0.0))
    return (input_tokens * input_rate + output_tokens * output_rate) / 1_000_000


def calculate_cost(calls: list[tuple[str, int, int]]) -> float:
    """Sum ``call_cost`` over (model_id, input_tokens, output_tokens) tuples."""
    return sum(call_cost(*call) for call in calls)
