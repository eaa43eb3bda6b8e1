"""Seed-based password generation.

The generator turns five personal seed strings into a short password:
two-character lowercase prefixes plus the registration number are
concatenated, shuffled, and then one uppercase letter and one special
character are inserted at random positions. The result never exceeds
`max_length` characters.

Randomness is always taken from an injected `RandomSource`, which keeps the
pipeline reproducible in tests (`random.Random(seed)`) while defaulting to
`secrets.SystemRandom()` for real use.
"""

from __future__ import annotations

import logging
import secrets
from typing import MutableSequence

from core.config import DEFAULT_MAX_LENGTH
from core.domain.charsets import GENERATOR_SPECIALS, UPPERCASE
from core.domain.models import GeneratedPassword, SeedInputs
from core.domain.policy import TruncationPolicy
from core.errors import SeedTooShortError
from core.interfaces.random_source import RandomSource

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 2

# Reserved slots for the inserted uppercase letter and special character.
_INSERTED_CHARS = 2


def extract_prefix(value: str, *, field: str) -> str:
    """Return the first two characters of `value`, lowercased."""

    if len(value) < PREFIX_LENGTH:
        raise SeedTooShortError(field, value, PREFIX_LENGTH)
    return value[:PREFIX_LENGTH].lower()


def build_base(seeds: SeedInputs) -> str:
    """Concatenate prefixes and the registration number in fixed order."""

    return (
        extract_prefix(seeds.first_name, field="first_name")
        + extract_prefix(seeds.last_name, field="last_name")
        + seeds.reg_number
        + extract_prefix(seeds.movie, field="movie")
        + extract_prefix(seeds.food, field="food")
    )


def fisher_yates_shuffle(items: MutableSequence[str], rng: RandomSource) -> None:
    """Shuffle `items` in place (Durstenfeld variant of Fisher-Yates)."""

    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(0, i + 1)
        items[i], items[j] = items[j], items[i]


def _insert_at_random(chars: list[str], char: str, rng: RandomSource) -> None:
    # Both ends are valid positions.
    chars.insert(rng.randrange(0, len(chars) + 1), char)


def generate_password(
    seeds: SeedInputs,
    *,
    rng: RandomSource | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
    policy: TruncationPolicy = TruncationPolicy.RESERVE,
) -> GeneratedPassword:
    """Generate a password from `seeds`.

    Args:
        seeds: the five seed strings.
        rng: random source; defaults to `secrets.SystemRandom()`.
        max_length: maximum length of the result.
        policy: `RESERVE` truncates the shuffled base to `max_length - 2`
            before inserting, so the uppercase letter and the special
            character always survive. `LEGACY` truncates after inserting and
            may drop them; what was cut is reported in `dropped`.

    Raises:
        SeedTooShortError: a prefix source has fewer than 2 characters.
        ValueError: `max_length` is too small for the chosen policy.
    """

    policy = TruncationPolicy(policy)
    minimum = _INSERTED_CHARS if policy is TruncationPolicy.RESERVE else 1
    if max_length < minimum:
        raise ValueError(f"max_length must be at least {minimum} for policy '{policy.value}'")

    rng = rng or secrets.SystemRandom()
    base = build_base(seeds)

    chars = list(base)
    fisher_yates_shuffle(chars, rng)

    dropped: list[str] = []
    if policy is TruncationPolicy.RESERVE:
        keep = max_length - _INSERTED_CHARS
        dropped.extend(chars[keep:])
        del chars[keep:]

    upper = rng.choice(UPPERCASE)
    special = rng.choice(GENERATOR_SPECIALS)
    _insert_at_random(chars, upper, rng)
    _insert_at_random(chars, special, rng)

    if len(chars) > max_length:
        dropped.extend(chars[max_length:])
        del chars[max_length:]

    result = GeneratedPassword(
        password="".join(chars),
        base=base,
        policy=policy,
        truncated=bool(dropped),
        dropped="".join(dropped),
    )

    logger.debug(
        "generated password: base_length=%d length=%d policy=%s truncated=%d",
        len(base),
        len(result.password),
        policy.value,
        len(dropped),
    )
    if not (result.has_uppercase and result.has_special):
        logger.warning("truncation dropped an inserted character class (policy=%s)", policy.value)

    return result


def generate(
    first_name: str,
    last_name: str,
    reg_number: str,
    movie: str,
    food: str,
    *,
    rng: RandomSource | None = None,
    max_length: int = DEFAULT_MAX_LENGTH,
    policy: TruncationPolicy = TruncationPolicy.RESERVE,
) -> str:
    """Convenience wrapper returning only the password string."""

    seeds = SeedInputs(
        first_name=first_name,
        last_name=last_name,
        reg_number=reg_number,
        movie=movie,
        food=food,
    )
    return generate_password(seeds, rng=rng, max_length=max_length, policy=policy).password
