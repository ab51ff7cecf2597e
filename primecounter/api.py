"""Composable API functions for the prime counter.

Each function corresponds to a CLI workflow but is callable programmatically
without argparse.
"""

from __future__ import annotations

import logging

from .counter import run_scan
from .counter_types import CounterConfig, ScanStats
from . import constants

logger = logging.getLogger(__name__)


def compute(
    target_count: int = constants.DEFAULT_TARGET_COUNT,
    word_bits: int | None = None,
) -> tuple[int, ScanStats]:
    """Validate the configuration and find the target_count-th prime.

    Args:
        target_count: Position of the wanted prime (1-indexed).
        word_bits: Optional fixed candidate width (8, 16, 32 or 64).

    Returns:
        A (prime, stats) tuple.

    Raises:
        pydantic.ValidationError: If the configuration is invalid.
        CandidateOverflowError: If the prime does not fit in word_bits.
    """
    config = CounterConfig(target_count=target_count, word_bits=word_bits)
    return run_scan(config)


def format_result(prime: int) -> str:
    """Render the single human-readable result line (without newline)."""
    return constants.RESULT_TEMPLATE.format(value=prime)


def latest_prime_line(target_count: int = constants.DEFAULT_TARGET_COUNT) -> str:
    """Find the target_count-th prime and return its formatted result line."""
    prime, _ = compute(target_count)
    return format_result(prime)
