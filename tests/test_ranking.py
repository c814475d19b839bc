"""Tests for tagcloud.ranking module."""

import pytest

from tagcloud.frequency import FrequencyTable
from tagcloud.ranking import (
    FrequencyEntry,
    alphabetical,
    by_count_descending,
    order_alphabetically,
    select_top,
)


@pytest.fixture
def scenario_table() -> FrequencyTable:
    """Table for the two-line cat and dog document."""
    return FrequencyTable.from_lines(["The cat sat.", "The dog barked. The cat ran."])


@pytest.fixture
def larger_table() -> FrequencyTable:
    """Table with several ties at different counts."""
    lines = [
        "alpha beta gamma delta epsilon",
        "alpha beta gamma delta",
        "alpha beta gamma",
        "alpha beta zeta eta theta",
        "alpha",
    ]
    return FrequencyTable.from_lines(lines)


class TestSelectTop:
    """Tests for select_top."""

    def test_scenario_top_three(self, scenario_table: FrequencyTable) -> None:
        """Test that ties at the cut-off are broken alphabetically."""
        top = select_top(scenario_table, 3)

        assert top == [
            FrequencyEntry("the", 3),
            FrequencyEntry("cat", 2),
            FrequencyEntry("barked", 1),
        ]

    def test_zero_selects_nothing(self, scenario_table: FrequencyTable) -> None:
        assert select_top(scenario_table, 0) == []

    def test_select_everything(self, scenario_table: FrequencyTable) -> None:
        """Test selecting the whole vocabulary."""
        top = select_top(scenario_table, len(scenario_table))

        assert len(top) == 6
        assert {entry.word for entry in top} == set(scenario_table)

    @pytest.mark.parametrize("n", [-1, 7, 100])
    def test_out_of_range_raises(self, scenario_table: FrequencyTable, n: int) -> None:
        with pytest.raises(ValueError, match="Cannot select"):
            select_top(scenario_table, n)

    def test_exact_length_and_no_higher_unselected(self, larger_table: FrequencyTable) -> None:
        """Test that no unselected word outranks a selected one, for every N."""
        for n in range(len(larger_table) + 1):
            top = select_top(larger_table, n)
            assert len(top) == n

            selected = {entry.word for entry in top}
            lowest = min((entry.count for entry in top), default=None)
            for word, count in larger_table.items():
                if word not in selected and lowest is not None:
                    assert count <= lowest

    def test_sorted_by_count_descending(self, larger_table: FrequencyTable) -> None:
        top = select_top(larger_table, len(larger_table))
        counts = [entry.count for entry in top]
        assert counts == sorted(counts, reverse=True)

    def test_matches_full_sort(self, larger_table: FrequencyTable) -> None:
        """Test that the bounded selection equals a truncated full sort."""
        entries = [FrequencyEntry(w, c) for w, c in larger_table.items()]
        full = sorted(entries, key=by_count_descending)

        for n in range(len(larger_table) + 1):
            assert select_top(larger_table, n) == full[:n]

    def test_deterministic(self, larger_table: FrequencyTable) -> None:
        """Test that repeated selections agree."""
        assert select_top(larger_table, 5) == select_top(larger_table, 5)


class TestOrderAlphabetically:
    """Tests for order_alphabetically."""

    def test_orders_by_word(self) -> None:
        entries = [FrequencyEntry("the", 3), FrequencyEntry("cat", 2), FrequencyEntry("barked", 1)]

        assert [e.word for e in order_alphabetically(entries)] == ["barked", "cat", "the"]

    def test_count_does_not_affect_order(self) -> None:
        """Test that counts are carried along but not sorted on."""
        entries = [FrequencyEntry("b", 1), FrequencyEntry("a", 1), FrequencyEntry("c", 9)]

        assert order_alphabetically(entries) == [
            FrequencyEntry("a", 1),
            FrequencyEntry("b", 1),
            FrequencyEntry("c", 9),
        ]

    def test_case_insensitive(self) -> None:
        entries = [FrequencyEntry("Banana", 1), FrequencyEntry("apple", 1)]
        assert [e.word for e in order_alphabetically(entries)] == ["apple", "Banana"]

    def test_result_is_non_decreasing(self, larger_table: FrequencyTable) -> None:
        ordered = order_alphabetically(select_top(larger_table, 6))
        keys = [alphabetical(entry) for entry in ordered]
        assert keys == sorted(keys)

    def test_does_not_modify_input(self) -> None:
        entries = [FrequencyEntry("b", 1), FrequencyEntry("a", 2)]
        order_alphabetically(entries)
        assert entries[0].word == "b"

    def test_empty(self) -> None:
        assert order_alphabetically([]) == []


class TestSortKeys:
    """Tests for the two sort keys."""

    def test_by_count_descending(self) -> None:
        assert by_count_descending(FrequencyEntry("x", 4)) == (-4, "x")

    def test_alphabetical(self) -> None:
        assert alphabetical(FrequencyEntry("Xy", 4)) == "xy"
