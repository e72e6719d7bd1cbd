"""Catalogue metadata for a registered pattern demonstration."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class PatternCategory(StrEnum):
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class PatternInfo(BaseModel):
    """Describes one demonstration in the catalogue."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    key: str
    title: str
    category: PatternCategory
    summary: str = ""
    module: str = ""
