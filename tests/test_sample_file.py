"""Tests for sample file generation."""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.sample_file import generate_sample_bytes, generate_sample_file


class TestSampleFile:
    """Test random printable ASCII output."""

    def test_printable_range(self):
        data = generate_sample_bytes(5000, seed=3)
        assert len(data) == 5000
        assert min(data) >= 32
        assert max(data) <= 126

    def test_seed_is_reproducible(self):
        assert generate_sample_bytes(100, seed=7) == generate_sample_bytes(100, seed=7)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            generate_sample_bytes(-1)

    def test_write_file(self, tmp_path):
        path = generate_sample_file(tmp_path / "test.cfa", size=256, seed=1)
        assert path.read_bytes() == generate_sample_bytes(256, seed=1)

    def test_empty_file(self, tmp_path):
        path = generate_sample_file(tmp_path / "empty.cfa", size=0)
        assert path.stat().st_size == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
