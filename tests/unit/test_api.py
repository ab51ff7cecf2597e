"""Tests for the composable API functions in primecounter.api."""

import pytest
from pydantic import ValidationError

import primecounter
from primecounter.api import compute, format_result, latest_prime_line
from primecounter.counter import CandidateOverflowError
from primecounter.counter_types import ScanStats


class TestCompute:
    def test_returns_prime_and_stats(self):
        prime, stats = compute(10)
        assert prime == 29
        assert isinstance(stats, ScanStats)

    def test_invalid_count_raises_validation_error(self):
        with pytest.raises(ValidationError):
            compute(0)

    def test_invalid_word_bits_raises_validation_error(self):
        with pytest.raises(ValidationError):
            compute(5, word_bits=7)

    def test_overflow_propagates(self):
        with pytest.raises(CandidateOverflowError):
            compute(55, word_bits=8)


class TestFormatResult:
    def test_exact_line(self):
        assert format_result(7919) == "The latest prime number: 7919"

    def test_no_trailing_newline(self):
        assert not format_result(2).endswith("\n")


class TestLatestPrimeLine:
    def test_small_count(self):
        assert latest_prime_line(3) == "The latest prime number: 5"

    def test_default_count_is_thousandth_prime(self):
        assert latest_prime_line() == "The latest prime number: 7919"


class TestPackageExports:
    def test_top_level_names(self):
        assert primecounter.find_nth_prime(2) == 3
        assert primecounter.is_prime(13)
        assert primecounter.count_divisors(6) == 4
        assert primecounter.format_result(3) == "The latest prime number: 3"
