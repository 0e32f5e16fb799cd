"""Team model for fixture-planner."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fixture_planner.normalization.pipeline import generate_team_code, normalize_title

CODE_MAX_LENGTH = 5


class Team(BaseModel):
    """A club entered into the league. Immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    id: int | str | None = Field(default=None, description="Source identifier, if any")
    title: str = Field(min_length=1, description="Display title, e.g. 'Liverpool'")
    code: str = Field(default="", description="Short code, at most 5 chars, e.g. 'LIV'")

    @model_validator(mode="before")
    @classmethod
    def derive_code(cls, data: Any) -> Any:
        if isinstance(data, dict) and not str(data.get("code") or "").strip() and data.get("title"):
            data = {**data, "code": generate_team_code(str(data["title"]))}
        return data

    @field_validator("title")
    @classmethod
    def title_must_be_clean(cls, v: str) -> str:
        return normalize_title(v)

    @field_validator("code")
    @classmethod
    def code_must_be_short_upper(cls, v: str) -> str:
        # Over-long source codes are cut, not rejected
        return v.strip().upper()[:CODE_MAX_LENGTH]

    def __str__(self) -> str:
        return self.title
