"""Count-to-rank normalization."""

from core.frequency_table import FrequencyTable


def normalize(count_table: FrequencyTable[int]) -> FrequencyTable[float]:
    """
    Convert counts to rank fractions (count / total).

    An empty table (total of 0) normalizes to an empty table; no division
    is attempted, so NaN/Infinity never appear.

    Args:
        count_table: Table of counts (left unchanged)

    Returns:
        New table with the same keys, values summing to 1.0
    """
    total = count_table.total()
    if total == 0:
        return FrequencyTable()

    return FrequencyTable({char: count / total for char, count in count_table.items()})

