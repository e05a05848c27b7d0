from __future__ import annotations

from enum import Enum
from typing import Optional


class Severity(Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @classmethod
    def from_str(cls, value: str) -> Optional["Severity"]:
        """Parse a severity label (case-insensitive). Unknown labels map to None."""
        s = value.strip().lower()
        if not s:
            return None
        if s == "moderate":
            return cls.MEDIUM
        for member in cls:
            if member.value == s:
                return member
        return None

    @property
    def rank(self) -> int:
        # critical first
        return list(Severity).index(self)


class InventoryType(Enum):
    AWS = "AWS"
    AZURE = "Azure"
    GCP = "GCP"

    @classmethod
    def from_str(cls, value: str) -> "InventoryType":
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"unsupported inventory type: {value!r} (expected one of AWS, Azure, GCP)")
