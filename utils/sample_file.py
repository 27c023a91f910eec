"""Sample file generation for trying out the analyzer."""

import random
from pathlib import Path
from typing import Optional, Union

DEFAULT_SAMPLE_FILE = "test.cfa"
DEFAULT_SAMPLE_SIZE = 1000 * 1000

# Printable ASCII: ' ' (32) .. '~' (126)
PRINTABLE_LOW = 32
PRINTABLE_HIGH = 126


def generate_sample_bytes(size: int, seed: Optional[int] = None) -> bytes:
    """Random printable ASCII bytes, uniformly distributed."""
    if size < 0:
        raise ValueError(f"Sample size must be >= 0, got {size}")

    rng = random.Random(seed)
    return bytes(rng.randint(PRINTABLE_LOW, PRINTABLE_HIGH) for _ in range(size))


def generate_sample_file(
    path: Union[str, Path] = DEFAULT_SAMPLE_FILE,
    size: int = DEFAULT_SAMPLE_SIZE,
    seed: Optional[int] = None,
) -> Path:
    """
    Write a file of random printable ASCII bytes.

    Args:
        path: Output file path (overwritten)
        size: Number of bytes to write
        seed: Random seed for reproducible output

    Returns:
        Path to the written file
    """
    data = generate_sample_bytes(size, seed)
    path = Path(path)
    with open(path, "wb") as f:
        f.write(data)
    return path
