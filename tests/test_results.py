"""Tests for ResultSequence and sorting."""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.char_classes import CharClass
from core.frequency_table import FrequencyTable, build
from core.results import (
    ResultSequence, SortMethod, UnsupportedSortMethodError,
    get_sort_method, require_sort_method, sort, to_sequence,
)


def make_sequence():
    return ResultSequence([("C", 2), ("A", 1), ("B", 2), ("D", 5)])


class TestSortMethod:
    """Test sort method lookup and attributes."""

    def test_key_and_direction(self):
        assert SortMethod.NONE.key is None
        assert SortMethod.CHAR_ASCENDING.key == "char"
        assert not SortMethod.CHAR_ASCENDING.descending
        assert SortMethod.VALUE_DESCENDING.key == "value"
        assert SortMethod.VALUE_DESCENDING.descending

    def test_lookup(self):
        assert get_sort_method("char-asc") is SortMethod.CHAR_ASCENDING
        assert get_sort_method("VALUE_DESC") is SortMethod.VALUE_DESCENDING
        assert get_sort_method("count-asc") is SortMethod.VALUE_ASCENDING
        assert get_sort_method(SortMethod.NONE) is SortMethod.NONE
        assert get_sort_method("random") is None

    def test_require_raises(self):
        with pytest.raises(UnsupportedSortMethodError) as exc:
            require_sort_method("random")
        assert "random" in str(exc.value)


class TestSort:
    """Test in-place sorting."""

    def test_char_ascending_and_descending(self):
        sequence = to_sequence(build("cba", CharClass.ALPHA))
        sort(sequence, SortMethod.CHAR_ASCENDING)
        assert sequence == [("A", 1), ("B", 1), ("C", 1)]
        sort(sequence, SortMethod.CHAR_DESCENDING)
        assert sequence == [("C", 1), ("B", 1), ("A", 1)]

    def test_descending_is_reverse_of_ascending(self):
        sequence = to_sequence(build("zebra crossing 42", CharClass.ALNUM))
        sequence.sort(SortMethod.CHAR_ASCENDING)
        ascending = sequence.as_list()
        sequence.sort(SortMethod.CHAR_DESCENDING)
        assert sequence.as_list() == list(reversed(ascending))

    def test_char_order_is_byte_order(self):
        sequence = ResultSequence([("a", 1), ("Z", 1), ("0", 1), ("~", 1)])
        sequence.sort("char-asc")
        assert sequence.chars() == ["0", "Z", "a", "~"]

    def test_value_sort_is_stable(self):
        """Equal values keep their relative order in both directions."""
        sequence = make_sequence()
        sequence.sort(SortMethod.VALUE_ASCENDING)
        assert sequence == [("A", 1), ("C", 2), ("B", 2), ("D", 5)]

        sequence = make_sequence()
        sequence.sort(SortMethod.VALUE_DESCENDING)
        assert sequence == [("D", 5), ("C", 2), ("B", 2), ("A", 1)]

    def test_none_keeps_order(self):
        sequence = make_sequence()
        sequence.sort(SortMethod.NONE)
        assert sequence == make_sequence()

    @pytest.mark.parametrize("method", list(SortMethod))
    def test_idempotent(self, method):
        sequence = make_sequence()
        sequence.sort(method)
        once = sequence.as_list()
        sequence.sort(method)
        assert sequence.as_list() == once

    @pytest.mark.parametrize("method", list(SortMethod))
    def test_content_unchanged(self, method):
        sequence = make_sequence()
        sequence.sort(method)
        assert sorted(sequence.as_list()) == sorted(make_sequence().as_list())

    def test_rank_values(self):
        sequence = ResultSequence([("A", 0.25), ("B", 0.5), ("C", 0.25)])
        sequence.sort(SortMethod.VALUE_DESCENDING)
        assert sequence.chars() == ["B", "A", "C"]

    def test_unknown_method(self):
        with pytest.raises(UnsupportedSortMethodError):
            make_sequence().sort("sideways")


class TestResultSequence:
    """Test the sequence container."""

    def test_to_sequence(self):
        sequence = to_sequence(FrequencyTable({"A": 3, "B": 1}))
        assert len(sequence) == 2
        assert sequence.total() == 4
        assert sorted(sequence.values()) == [1, 3]

    def test_indexing_and_iteration(self):
        sequence = make_sequence()
        assert sequence[0] == ("C", 2)
        assert [char for char, _ in sequence] == ["C", "A", "B", "D"]

    def test_as_list_is_a_copy(self):
        sequence = make_sequence()
        pairs = sequence.as_list()
        pairs.clear()
        assert len(sequence) == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
