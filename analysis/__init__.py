"""Analysis entry points for character frequency statistics."""

from .char_frequency import CharFrequencyAnalyzer, analyze_counts, analyze_ranks, sort

__all__ = ["CharFrequencyAnalyzer", "analyze_counts", "analyze_ranks", "sort"]
