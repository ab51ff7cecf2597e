"""Prime counter — scans natural numbers upward and stops at the N-th prime."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterator

from .counter_types import CounterConfig, ScanStats
from .primality import is_prime
from . import constants

logger = logging.getLogger(__name__)


class CandidateOverflowError(OverflowError):
    """Raised when the scan would step past the largest candidate of a fixed word width."""

    def __init__(self, word_bits: int, last_candidate: int):
        self.word_bits = word_bits
        self.last_candidate = last_candidate
        super().__init__(
            f"Candidate overflow: {word_bits}-bit counter exhausted "
            f"after {last_candidate}"
        )


def _candidate_limit(word_bits: int | None) -> int | None:
    if word_bits is None:
        return None
    return (1 << word_bits) - 1


def scan_primes(
    word_bits: int | None = None,
    predicate: Callable[[int], bool] = is_prime,
) -> Iterator[int]:
    """Yield primes in increasing order, testing every candidate from 1 upward.

    Args:
        word_bits: If set, candidates are confined to an unsigned integer of
            this width and stepping past its maximum raises
            CandidateOverflowError. None means unbounded.
        predicate: Primality test applied to each candidate.

    Yields:
        Each candidate for which *predicate* holds.
    """
    limit = _candidate_limit(word_bits)
    candidate = constants.FIRST_CANDIDATE
    while True:
        if limit is not None and candidate >= limit:
            raise CandidateOverflowError(word_bits, candidate)
        candidate += 1
        if predicate(candidate):
            yield candidate


def find_nth_prime(
    n: int,
    *,
    word_bits: int | None = None,
    predicate: Callable[[int], bool] = is_prime,
) -> int:
    """Return the *n*-th prime (1-indexed, the 1st prime is 2).

    Args:
        n: Position of the wanted prime; must be at least 1.
        word_bits: Optional fixed candidate width, see scan_primes.
        predicate: Primality test; defaults to full trial division.

    Returns:
        The n-th prime.

    Raises:
        ValueError: If n is less than 1.
        CandidateOverflowError: If the n-th prime does not fit in word_bits.
    """
    if n < 1:
        raise ValueError(f"Target count must be a positive integer, got {n}")

    logger.info("Scanning for prime #%d (word_bits=%s)", n, word_bits)
    remaining = n
    for prime in scan_primes(word_bits=word_bits, predicate=predicate):
        remaining -= 1
        logger.debug("Prime #%d = %d", n - remaining, prime)
        if remaining == 0:
            return prime


def run_scan(config: CounterConfig) -> tuple[int, ScanStats]:
    """Find the configured N-th prime and collect scan statistics."""
    start = time.perf_counter()
    prime = find_nth_prime(config.target_count, word_bits=config.word_bits)
    stats = ScanStats(
        target_count=config.target_count,
        # the scan stops on the prime itself, so every value up to it was tested
        candidates_scanned=prime,
        primes_found=config.target_count,
        last_prime=prime,
        elapsed_time=time.perf_counter() - start,
    )
    logger.info("Found prime #%d = %d", config.target_count, prime)
    return prime, stats
