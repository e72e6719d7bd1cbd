"""Captured output of one runner invocation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, computed_field

from .pattern import PatternCategory


class RunRecord(BaseModel):
    """Presented text of a single demonstration run."""

    model_config = ConfigDict(strict=True, extra="ignore")

    pattern: str
    category: PatternCategory
    text: str = ""

    @computed_field(return_type=list[str])
    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()
