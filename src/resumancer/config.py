"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

CATEGORY_MODES = ("diverse", "locked")


@dataclass(frozen=True)
class LLMConfig:
    model: str = "claude-haiku-4-5-20251001"
    timeout: int = 60
    max_tokens: int = 4096

    def __post_init__(self):
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")
        if self.max_tokens < 256:
            raise ValueError(f"llm.max_tokens must be at least 256, got {self.max_tokens}")


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 3
    base_delay: float = 1.0

    def __post_init__(self):
        if not 1 <= self.max_attempts <= 10:
            raise ValueError(
                f"retry.max_attempts must be between 1 and 10, got {self.max_attempts}"
            )
        if self.base_delay < 0:
            raise ValueError(f"retry.base_delay must be non-negative, got {self.base_delay}")


@dataclass(frozen=True)
class PipelineConfig:
    category_mode: str = "diverse"  # "diverse" | "locked"
    require_mood: bool = True
    default_mood: int = 5

    def __post_init__(self):
        if self.category_mode not in CATEGORY_MODES:
            raise ValueError(
                f"pipeline.category_mode must be one of {CATEGORY_MODES}, got {self.category_mode!r}"
            )
        if not 0 <= self.default_mood <= 10:
            raise ValueError(
                f"pipeline.default_mood must be between 0 and 10, got {self.default_mood}"
            )


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        retry=RetryConfig(**raw.get("retry", {})),
        pipeline=PipelineConfig(**raw.get("pipeline", {})),
    )
