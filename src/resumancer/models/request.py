"""Pydantic models for the inbound generation request."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Constraints(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    remote_only: bool = Field(False, alias="remoteOnly")
    no_coding: bool = Field(False, alias="noCoding")
    part_time_ok: bool = Field(False, alias="partTimeOk")
    max_budget: str = Field("", alias="maxBudget")  # e.g. "$200"
    notes: str = ""

    @field_validator("max_budget", "notes", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v


class GenerationRequest(BaseModel):
    """Caller input for one generation. Only ``mood`` is required.

    Field names follow the JSON wire format (camelCase) through aliases;
    snake_case names work too when building a request from Python.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mood: float | None = None
    target_role: str = Field("", alias="targetRole")
    industry: str = ""
    skills: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    background: str = ""
    additional_context: str = Field("", alias="additionalContext")
    constraints: Constraints | str | None = None
    time_horizon: str = Field("30 days", alias="timeHorizon")
    previous_titles: list[str] = Field(default_factory=list, alias="previousTitles")
    novelty_seed: str | int | float | None = Field(None, alias="noveltySeed")

    @field_validator("mood", mode="before")
    @classmethod
    def _mood_must_be_number(cls, v):
        if v is None:
            return v
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("mood must be a number between 0 and 10")
        if isinstance(v, float):
            if math.isnan(v):
                raise ValueError("mood must be a number between 0 and 10")
            return v
        try:
            return float(v)
        except OverflowError:
            # too large for a float; clamped to the range later
            return math.copysign(math.inf, v)

    @field_validator("target_role", "industry", "background", "additional_context", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("time_horizon", mode="before")
    @classmethod
    def _default_horizon(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return "30 days"
        return v

    @field_validator("skills", "interests", mode="before")
    @classmethod
    def _split_free_text(cls, v):
        # The web form sends interests as "climate tech, fintech, edtech"
        if v is None:
            return []
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("previous_titles", mode="before")
    @classmethod
    def _none_to_list(cls, v):
        return [] if v is None else v

    @field_validator("skills", "interests", "previous_titles")
    @classmethod
    def _drop_blank(cls, v: list[str]) -> list[str]:
        return [item.strip() for item in v if item.strip()]
