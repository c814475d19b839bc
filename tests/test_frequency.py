"""Tests for tagcloud.frequency module."""

import pytest

from tagcloud.frequency import FrequencyTable
from tagcloud.tokenizer import is_word, tokenize

SCENARIO = ["The cat sat.", "The dog barked. The cat ran."]


class TestFrequencyTable:
    """Tests for building the word count table."""

    def test_scenario_counts(self) -> None:
        """Test counts for a small two-line document."""
        table = FrequencyTable.from_lines(SCENARIO)

        assert table.as_dict() == {
            "the": 3,
            "cat": 2,
            "sat": 1,
            "dog": 1,
            "barked": 1,
            "ran": 1,
        }

    def test_case_insensitive_aggregation(self) -> None:
        """Test that different cases of a word share one entry."""
        table = FrequencyTable.from_lines(["Word word WORD", "wOrD"])

        assert len(table) == 1
        assert table.count("word") == 4
        assert table.count("WORD") == 4

    def test_separator_tokens_never_counted(self) -> None:
        """Test that punctuation and whitespace runs are not entries."""
        table = FrequencyTable.from_lines(["--- !!! ...", "\t\r", "(a) [b]"])

        assert sorted(table) == ["a", "b"]
        for word in table:
            assert is_word(word)

    def test_empty_document(self) -> None:
        """Test that no lines produce an empty table."""
        table = FrequencyTable.from_lines([])

        assert len(table) == 0
        assert table.total == 0

    def test_words_keep_non_separator_symbols(self) -> None:
        """Test that characters outside the separator set stay in words."""
        table = FrequencyTable.from_lines(["c++ & c#", "C#"])

        assert table.count("c++") == 1
        assert table.count("c#") == 2
        assert table.count("&") == 1

    def test_apostrophe_splits_words(self) -> None:
        """Test that an apostrophe is a boundary."""
        table = FrequencyTable.from_lines(["don't"])

        assert table.as_dict() == {"don": 1, "t": 1}

    def test_total_matches_word_tokens(self) -> None:
        """Test that the sum of counts equals the number of word tokens."""
        lines = SCENARIO + ["Hello, hello; HELLO!", "", "  (x)  "]
        table = FrequencyTable.from_lines(lines)

        word_tokens = [t for line in lines for t in tokenize(line) if is_word(t)]
        assert table.total == len(word_tokens)
        assert all(table.count(word) >= 1 for word in table)

    def test_contains_is_case_insensitive(self) -> None:
        table = FrequencyTable.from_lines(SCENARIO)

        assert "CAT" in table
        assert "cow" not in table
        assert 3 not in table

    def test_count_of_unknown_word(self) -> None:
        table = FrequencyTable.from_lines(SCENARIO)
        assert table.count("zebra") == 0

    def test_items_in_first_seen_order(self) -> None:
        """Test that items are reported in the order words first appear."""
        table = FrequencyTable.from_lines(SCENARIO)

        assert [word for word, _ in table.items()] == ["the", "cat", "sat", "dog", "barked", "ran"]


class TestFreezing:
    """Tests for the read-only state of a built table."""

    def test_from_lines_returns_frozen_table(self) -> None:
        table = FrequencyTable.from_lines(SCENARIO)
        assert table.frozen

    def test_add_line_after_freeze_raises(self) -> None:
        """Test that a frozen table cannot be updated."""
        table = FrequencyTable.from_lines(SCENARIO)

        with pytest.raises(RuntimeError, match="frozen"):
            table.add_line("more words")

    def test_incremental_build(self) -> None:
        """Test adding lines one at a time before freezing."""
        table = FrequencyTable()
        table.add_line("one two")
        table.add_line("two")

        assert not table.frozen
        assert table.as_dict() == {"one": 1, "two": 2}

    def test_custom_separators(self) -> None:
        """Test counting with a different separator set."""
        table = FrequencyTable.from_lines(["a+b+a", "a b"], separators=frozenset("+"))

        assert table.as_dict() == {"a": 2, "b": 1, "a b": 1}
