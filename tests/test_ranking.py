"""Tests for count-to-rank normalization."""

import math
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.char_classes import CharClass
from core.frequency_table import FrequencyTable, build
from core.ranking import normalize


class TestNormalize:
    """Test rank fractions."""

    def test_even_split(self):
        assert normalize(build("aabb", CharClass.ALPHA)) == {"A": 0.5, "B": 0.5}

    def test_fractions(self):
        ranks = normalize(FrequencyTable({"A": 1, "B": 3}))
        assert ranks["A"] == pytest.approx(0.25)
        assert ranks["B"] == pytest.approx(0.75)

    def test_sums_to_one(self):
        counts = build("the quick brown fox jumps over the lazy dog", CharClass.ALPHA)
        ranks = normalize(counts)
        assert math.isclose(ranks.total(), 1.0, rel_tol=1e-9)
        assert set(ranks) == set(counts)
        assert all(0.0 <= value <= 1.0 for value in ranks.values())

    def test_empty_table(self):
        """Empty counts give empty ranks, not NaN."""
        ranks = normalize(FrequencyTable())
        assert len(ranks) == 0

    def test_empty_source(self):
        ranks = normalize(build("", CharClass.ASCII))
        assert len(ranks) == 0
        assert not any(math.isnan(v) or math.isinf(v) for v in ranks.values())

    def test_input_unchanged(self):
        counts = FrequencyTable({"A": 2, "B": 2})
        normalize(counts)
        assert counts == {"A": 2, "B": 2}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
