"""Data models for the pattern catalogue."""

from .pattern import PatternCategory, PatternInfo
from .run_record import RunRecord

__all__ = [
    "PatternCategory",
    "PatternInfo",
    "RunRecord",
]
