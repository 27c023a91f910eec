"""Character frequency analysis: counts and ranks per character."""

from pathlib import Path
from typing import Union

from core.char_classes import (
    ByteRange, CharClass,
    require_byte_range, require_char_class,
)
from core.frequency_table import FrequencyTable, Source, build, build_from_path
from core.ranking import normalize
from core.results import ResultSequence, SortMethod, require_sort_method, to_sequence


class CharFrequencyAnalyzer:
    """Counts and ranks characters of a source for one character class."""

    def __init__(
        self,
        char_class: Union[str, CharClass] = CharClass.ALPHA,
        byte_range: Union[str, ByteRange] = ByteRange.LEGACY,
        encoding: str = "utf-8",
    ):
        """
        Initialize analyzer.

        Args:
            char_class: Character class name or CharClass (alpha, digit, symbol, alnum, ascii, none)
            byte_range: Byte eligibility rule (legacy, ascii)
            encoding: Encoding used for text sources

        Raises:
            UnsupportedCharClassError: If char_class is not known
            UnsupportedByteRangeError: If byte_range is not known
        """
        self.char_class = require_char_class(char_class, "CharFrequencyAnalyzer")
        self.byte_range = require_byte_range(byte_range, "CharFrequencyAnalyzer")
        self.encoding = encoding

    def count_table(self, source: Source, close: bool = False) -> FrequencyTable[int]:
        """Build the count table for a source."""
        return build(
            source,
            self.char_class,
            byte_range=self.byte_range,
            encoding=self.encoding,
            close=close,
        )

    def rank_table(self, source: Source, close: bool = False) -> FrequencyTable[float]:
        """Build the rank table (count / total) for a source."""
        return normalize(self.count_table(source, close=close))

    def analyze_counts(
        self,
        source: Source,
        sort_method: Union[str, SortMethod] = SortMethod.NONE,
        close: bool = False,
    ) -> ResultSequence[int]:
        """
        Get character counts as a sorted sequence.

        Args:
            source: Text, bytes or an open stream
            sort_method: Ordering to apply (default: none, order unspecified)
            close: Close a stream source when done

        Returns:
            ResultSequence of (char, count) pairs
        """
        sequence = to_sequence(self.count_table(source, close=close))
        sequence.sort(require_sort_method(sort_method, "analyze_counts"))
        return sequence

    def analyze_ranks(
        self,
        source: Source,
        sort_method: Union[str, SortMethod] = SortMethod.NONE,
        close: bool = False,
    ) -> ResultSequence[float]:
        """
        Get character ranks as a sorted sequence.

        Returns:
            ResultSequence of (char, rank) pairs; empty for an empty source
        """
        sequence = to_sequence(self.rank_table(source, close=close))
        sequence.sort(require_sort_method(sort_method, "analyze_ranks"))
        return sequence

    def analyze_counts_path(
        self,
        path: Union[str, Path],
        sort_method: Union[str, SortMethod] = SortMethod.NONE,
    ) -> ResultSequence[int]:
        """Count characters of a file (opened and closed here)."""
        table = build_from_path(path, self.char_class, byte_range=self.byte_range)
        sequence = to_sequence(table)
        sequence.sort(sort_method)
        return sequence

    def analyze_ranks_path(
        self,
        path: Union[str, Path],
        sort_method: Union[str, SortMethod] = SortMethod.NONE,
    ) -> ResultSequence[float]:
        """Rank characters of a file (opened and closed here)."""
        table = build_from_path(path, self.char_class, byte_range=self.byte_range)
        sequence = to_sequence(normalize(table))
        sequence.sort(sort_method)
        return sequence


def analyze_counts(
    source: Source,
    char_class: Union[str, CharClass],
    byte_range: Union[str, ByteRange] = ByteRange.LEGACY,
) -> ResultSequence[int]:
    """
    Convenience function to count characters of a source.

    Args:
        source: Text, bytes or an open stream
        char_class: Character class to count
        byte_range: Byte eligibility rule

    Returns:
        ResultSequence of (char, count) pairs, order unspecified
    """
    analyzer = CharFrequencyAnalyzer(char_class=char_class, byte_range=byte_range)
    return analyzer.analyze_counts(source)


def analyze_ranks(
    source: Source,
    char_class: Union[str, CharClass],
    byte_range: Union[str, ByteRange] = ByteRange.LEGACY,
) -> ResultSequence[float]:
    """Convenience function to rank characters of a source."""
    analyzer = CharFrequencyAnalyzer(char_class=char_class, byte_range=byte_range)
    return analyzer.analyze_ranks(source)


def sort(sequence: ResultSequence, method: Union[str, SortMethod]) -> None:
    """Sort a ResultSequence in place."""
    sequence.sort(method)
