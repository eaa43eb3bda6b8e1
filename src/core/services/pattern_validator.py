"""Fixed-pattern password validation.

One regular expression decides validity. `explain` re-evaluates each of its
lookahead rules on its own so callers can show why a candidate failed; the
overall verdict always comes from the full pattern.
"""

from __future__ import annotations

import logging
import re

from core.domain.charsets import VALIDATOR_LETTERS, VALIDATOR_SPECIALS
from core.domain.models import ValidationReport

logger = logging.getLogger(__name__)

PATTERN = r"^(?=.*SP)(?=.*[A-Z])(?=.*[!@#$%^&*()_+]{2})(?=.*[khuzafi]{4}).{1,12}$"

_REGEX = re.compile(PATTERN)

# (name, description, pattern) for each clause of PATTERN.
RULES: list[tuple[str, str, re.Pattern[str]]] = [
    ("contains_SP", "the substring 'SP'", re.compile(r"^(?=.*SP)")),
    ("uppercase", "at least 1 uppercase letter", re.compile(r"^(?=.*[A-Z])")),
    ("two_specials", f"2 consecutive characters from {VALIDATOR_SPECIALS}", re.compile(r"^(?=.*[!@#$%^&*()_+]{2})")),
    ("four_letters", f"4 consecutive characters from {','.join(VALIDATOR_LETTERS)}", re.compile(r"^(?=.*[khuzafi]{4})")),
    ("length", "between 1 and 12 characters", re.compile(r"^.{1,12}$")),
]

RULE_DESCRIPTIONS = {name: description for name, description, _ in RULES}

DEMO_CASES: tuple[str, ...] = (
    "SP!@khu",
    "SP@#Khuz",
    "SP#khuza",
    "sp!@khu",
    "SP!khu",
    "SP!@xyz",
)


def is_valid(candidate: str) -> bool:
    """Return True when `candidate` matches the full pattern."""

    return _REGEX.match(candidate) is not None


def explain(candidate: str) -> ValidationReport:
    """Validate `candidate` and list the rules it breaks."""

    failed = [name for name, _, rule in RULES if rule.match(candidate) is None]
    valid = is_valid(candidate)
    logger.debug("validated candidate of length %d: valid=%s failed=%s", len(candidate), valid, failed)
    return ValidationReport(candidate=candidate, is_valid=valid, failed_rules=failed)


def format_verdict(candidate: str, valid: bool) -> str:
    """Render the one-line verdict printed by the CLI."""

    return f"\"{candidate}\" is {'valid' if valid else 'invalid'}"
