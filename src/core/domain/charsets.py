"""Character classes shared by the generator and the validator.

The two tools use different special-character sets; keep them separate.
"""

from __future__ import annotations

import string

UPPERCASE = string.ascii_uppercase

GENERATOR_SPECIALS = "!@#$%^&*()_+-=[]{};':\",.<>/?"

VALIDATOR_SPECIALS = "!@#$%^&*()_+"
VALIDATOR_LETTERS = "khuzafi"
