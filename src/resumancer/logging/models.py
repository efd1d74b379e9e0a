"""Usage logging data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class UsageLog(BaseModel):
    """Single usage log entry for a generation run. Logged, never stored."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = Field(default_factory=datetime.now)
    mood: int | None = None
    category_mode: str = "diverse"
    model: str | None = None
    attempts: int = 0
    elapsed_seconds: float = 0.0
    total_input_tokens: int = 0
    total_output_tokens: int = 0
    estimated_cost_usd: float = 0.0
    outcome: str = "ok"  # "ok" | "no_usable_ideas" | "error"
    success: bool = True
    error_message: str | None = None
