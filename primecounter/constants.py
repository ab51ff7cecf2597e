"""Named constants — eliminates magic numbers and strings across the codebase."""

from __future__ import annotations

DEFAULT_TARGET_COUNT = 1000

RESULT_TEMPLATE = "The latest prime number: {value}"

FIRST_CANDIDATE = 0
PRIME_DIVISOR_COUNT = 2

SUPPORTED_WORD_BITS: tuple[int, ...] = (8, 16, 32, 64)

EXIT_OK = 0
EXIT_OVERFLOW = 1
