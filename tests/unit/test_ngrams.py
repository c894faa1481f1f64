"""Unit tests for n-gram mining."""

import pytest

from stylometry.features.ngrams import count_ngrams, mine_ngrams, ngram_label, top_ngrams


class TestCountNgrams:
    """Test per-size n-gram counting."""

    def test_bigram_counts(self):
        counts = count_ngrams(["a", "b", "a", "b"], 2)
        assert counts == {"a b": 2, "b a": 1}

    def test_discovery_order(self):
        counts = count_ngrams(["x", "y", "z", "x", "y"], 2)
        assert list(counts) == ["x y", "y z", "z x"]

    def test_size_larger_than_sequence(self):
        assert count_ngrams(["a", "b"], 3) == {}

    def test_unigrams(self):
        assert count_ngrams(["a", "a", "b"], 1) == {"a": 2, "b": 1}


class TestTopNgrams:
    """Test qualification, ranking and capping."""

    def test_strictly_greater_than_qualifier(self):
        counts = {"kept": 4, "dropped": 3}
        assert top_ngrams(counts, qualifier=3, cap=10) == ["kept"]

    def test_descending_by_count(self):
        counts = {"b": 1, "a": 2, "c": 3}
        assert top_ngrams(counts, qualifier=0, cap=10) == ["c", "a", "b"]

    def test_ties_keep_discovery_order(self):
        counts = {"first": 2, "second": 2, "third": 5}
        assert top_ngrams(counts, qualifier=0, cap=10) == ["third", "first", "second"]

    def test_cap(self):
        counts = {f"gram{i}": 10 - i for i in range(8)}
        assert top_ngrams(counts, qualifier=0, cap=3) == ["gram0", "gram1", "gram2"]


class TestMineNgrams:
    """Test the size-bucketed miner."""

    def test_single_size_example(self):
        """Test "a a" x3 survives a qualifier of 2 while "a b" x1 does not."""
        assert mine_ngrams(["a", "a", "a", "a", "b"], 2, 2, qualifier=2, cap=10) == {"2gram": ["a a"]}

    def test_sizes_without_survivors_are_omitted(self):
        tokens = ["a", "a", "a", "a", "b"]
        result = mine_ngrams(tokens, min_size=2, max_size=4, qualifier=2, cap=10)

        assert list(result) == ["2gram"]

    def test_no_survivors(self):
        """Test that n-grams seen once fail a qualifier of 1."""
        assert mine_ngrams(["one", "two", "three"], 2, 3, qualifier=1, cap=10) == {}

    def test_zero_qualifier_keeps_singletons(self):
        assert mine_ngrams(["one", "two", "three"], 2, 3, qualifier=0, cap=10) == {
            "2gram": ["one two", "two three"],
            "3gram": ["one two three"],
        }

    def test_multiple_sizes(self):
        tokens = "the cat sat on the mat".split() * 5
        result = mine_ngrams(tokens, min_size=2, max_size=3, qualifier=3, cap=10)

        assert list(result) == ["2gram", "3gram"]
        assert result["2gram"][0] == "the cat"
        # "mat the" only spans 4 repetition boundaries
        assert result["2gram"][-1] == "mat the"
        assert len(result["2gram"]) == 6

    def test_cap_per_size(self):
        tokens = "a b c d e f".split() * 5
        result = mine_ngrams(tokens, min_size=1, max_size=2, qualifier=3, cap=2)

        assert result == {"1gram": ["a", "b"], "2gram": ["a b", "b c"]}

    def test_empty_tokens(self):
        assert mine_ngrams([], 2, 5) == {}

    @pytest.mark.parametrize("kwargs", [
        {"min_size": 0, "max_size": 2},
        {"min_size": 3, "max_size": 2},
        {"min_size": 2, "max_size": 3, "cap": 0},
        {"min_size": 2, "max_size": 3, "qualifier": -1},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            mine_ngrams(["a", "b"], **kwargs)

    def test_label(self):
        assert ngram_label(3) == "3gram"
