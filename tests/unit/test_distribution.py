"""Unit tests for sentence length distribution statistics."""

import math

import pytest

from stylometry.errors import DegenerateInputError, UNDEFINED
from stylometry.features.distribution import (
    describe_lengths,
    length_entropy,
    median_of_sorted,
    sentence_lengths,
    sentence_variability,
    truncated_iqr,
)


class TestDescribeLengths:
    """Test describe_lengths statistics."""

    def test_constant_sample(self):
        """Test zero variance: moments undefined, entropy zero."""
        result = describe_lengths([4, 4, 4, 4]).to_dict()

        assert result["mean"] == "4"
        assert result["standardDeviation"] == "0.00"
        assert result["range"] == "0"
        assert result["median"] == "4"
        assert result["IQR"] == "0"
        assert result["skewness"] == UNDEFINED
        assert result["kurtosis"] == UNDEFINED
        assert result["entropy"] == "0.00"

    def test_one_to_five(self):
        """Test a symmetric sample."""
        result = describe_lengths([1, 2, 3, 4, 5]).to_dict()

        assert result["mean"] == "3"
        assert result["standardDeviation"] == "1.41"
        assert result["range"] == "4"
        assert result["median"] == "3"
        assert result["IQR"] == "2"
        # summation residue may leave the sign of a zero skew
        assert float(result["skewness"]) == 0
        assert result["kurtosis"] == "-1.30"
        assert result["entropy"] == "2.32"

    def test_population_standard_deviation(self):
        """Test that the divisor is n, not n - 1."""
        stats = describe_lengths([2, 4, 4, 4, 5, 5, 7, 9])
        assert stats.standard_deviation == pytest.approx(2.0)

    def test_order_does_not_matter(self):
        """Test that unsorted input gives the same statistics."""
        assert describe_lengths([5, 1, 4, 2, 3]).to_dict() == describe_lengths([1, 2, 3, 4, 5]).to_dict()

    def test_single_sentence(self):
        """Test a sample of one."""
        result = describe_lengths([7]).to_dict()

        assert result["mean"] == "7"
        assert result["median"] == "7"
        assert result["skewness"] == UNDEFINED

    def test_zero_length_sentences_kept(self):
        """Test that degenerate sentences with no words are counted."""
        stats = describe_lengths([0, 3])
        assert stats.mean == 1.5
        assert stats.range == 3

    def test_right_skew_is_positive(self):
        """Test skewness sign for a long right tail."""
        stats = describe_lengths([3, 3, 4, 4, 5, 30])
        assert stats.skewness > 0

    def test_empty_raises(self):
        """Test that an empty sample is rejected."""
        with pytest.raises(DegenerateInputError):
            describe_lengths([])


class TestOrderStatistics:
    """Test median and IQR helpers."""

    def test_median_odd(self):
        assert median_of_sorted([1, 3, 9]) == 3

    def test_median_even(self):
        assert median_of_sorted([1, 2, 3, 10]) == 2.5

    def test_even_median_rounds_half_up(self):
        """Test 0-decimal formatting of a .5 median."""
        assert describe_lengths([1, 2, 3, 10]).to_dict()["median"] == "3"

    def test_iqr_uses_index_truncation(self):
        """Test Q1 = sorted[n // 4], Q3 = sorted[3n // 4] without interpolation."""
        # n = 4: Q1 = values[1] = 2, Q3 = values[3] = 10
        assert truncated_iqr([1, 2, 3, 10]) == 8
        # n = 7: Q1 = values[1] = 2, Q3 = values[5] = 6
        assert truncated_iqr([1, 2, 3, 4, 5, 6, 7]) == 4


class TestEntropy:
    """Test sentence length entropy."""

    def test_uniform_distinct(self):
        assert length_entropy([1, 2, 3, 4]) == pytest.approx(2.0)

    def test_two_values(self):
        assert length_entropy([5, 5, 8, 8]) == pytest.approx(1.0)

    def test_skewed_counts(self):
        expected = -(0.75 * math.log2(0.75) + 0.25 * math.log2(0.25))
        assert length_entropy([2, 2, 2, 9]) == pytest.approx(expected)


class TestSentenceLengths:
    """Test the text-level entry points."""

    def test_lengths_from_text(self):
        assert sentence_lengths("one two. three four five! six?") == [2, 3, 1]

    def test_mark_inside_token_is_not_boundary(self):
        """Test that '3.5' does not split; the text before it is dropped."""
        assert sentence_lengths("version 3.5 is out. yes.") == [3, 1]

    def test_variability_wire_form(self):
        result = sentence_variability("a b c. a b c d e. a.")

        assert set(result) == {
            "mean", "standardDeviation", "range", "median",
            "IQR", "skewness", "kurtosis", "entropy",
        }
        assert result["mean"] == "3"
        assert result["range"] == "4"

    def test_no_sentences_raises(self):
        """Test that text without terminal punctuation has no sample."""
        with pytest.raises(DegenerateInputError):
            sentence_variability("no terminal punctuation here")
