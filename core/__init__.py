"""Core counting, ranking and sorting engine for charfreq."""

from .char_classes import ByteRange, CharClass, ClassificationPolicy, classify
from .frequency_table import FrequencyTable, SourceNotReadableError, build, build_from_path
from .ranking import normalize
from .results import ResultSequence, SortMethod, sort, to_sequence

__all__ = [
    "ByteRange",
    "CharClass",
    "ClassificationPolicy",
    "classify",
    "FrequencyTable",
    "SourceNotReadableError",
    "build",
    "build_from_path",
    "normalize",
    "ResultSequence",
    "SortMethod",
    "sort",
    "to_sequence",
]
