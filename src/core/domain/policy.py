"""Truncation policies for the password generator."""

from __future__ import annotations

from enum import Enum


class TruncationPolicy(str, Enum):
    """How the generator keeps the result within the maximum length."""

    # Truncate the shuffled base before inserting, so the inserted
    # uppercase and special characters always survive.
    RESERVE = "reserve"
    # Truncate after inserting; may drop the inserted characters.
    LEGACY = "legacy"

    @classmethod
    def default(cls) -> "TruncationPolicy":
        return cls.RESERVE

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "reserve (guaranteed classes)" if self is TruncationPolicy.RESERVE else "legacy (blind truncation)"
