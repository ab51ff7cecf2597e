"""Prime counter data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator

from . import constants


class CounterConfig(BaseModel):
    """Groups prime counter configuration."""

    model_config = ConfigDict(frozen=True)

    target_count: PositiveInt = constants.DEFAULT_TARGET_COUNT
    word_bits: int | None = None

    @field_validator("word_bits")
    @classmethod
    def _check_word_bits(cls, value: int | None) -> int | None:
        if value is not None and value not in constants.SUPPORTED_WORD_BITS:
            raise ValueError(
                f"Unsupported word width: {value} "
                f"(expected one of {constants.SUPPORTED_WORD_BITS})"
            )
        return value


@dataclass
class ScanStats:
    """Counters describing one scan for the N-th prime."""

    target_count: int = 0
    candidates_scanned: int = 0
    primes_found: int = 0
    last_prime: int = 0
    elapsed_time: float = 0.0

    def report(self) -> str:
        lines = [
            "═══ Scan Statistics ═══",
            f"  {'Target count':<20} {self.target_count:>12}",
            f"  {'Candidates scanned':<20} {self.candidates_scanned:>12}",
            f"  {'Primes found':<20} {self.primes_found:>12}",
            f"  {'Last prime':<20} {self.last_prime:>12}",
            f"  {'─' * 20} {'─' * 12}",
            f"  {'Total':<20} {self.elapsed_time * 1000:>10.1f}ms",
        ]
        return "\n".join(lines)
