"""Prime Counter package — the N-th prime by unoptimized trial division."""

from .counter import (  # noqa: F401
    CandidateOverflowError,
    find_nth_prime,
    scan_primes,
)
from .primality import count_divisors, is_prime  # noqa: F401
from .api import compute, format_result, latest_prime_line  # noqa: F401
