"""Frequency tables: character -> count (or rank) mappings built from a source."""

import io
from collections.abc import Mapping
from pathlib import Path
from typing import Generic, Iterator, TypeVar, Union

from core.char_classes import ByteRange, CharClass, ClassificationPolicy

N = TypeVar("N", int, float)

# Read size for stream sources
CHUNK_SIZE = 64 * 1024

Source = Union[str, bytes, bytearray, memoryview, io.IOBase]


class SourceNotReadableError(ValueError):
    """Raised when a stream source is closed or not open for reading."""

    def __init__(self, source, reason: str = "not readable"):
        self.source = source
        self.reason = reason
        name = getattr(source, "name", None) or type(source).__name__
        super().__init__(f"Source is {reason}: {name}")


class FrequencyTable(Mapping, Generic[N]):
    """Unique-keyed mapping from a single character to a count or rank.

    Keys carry no order. The table is read-only once built; normalization
    produces a new table instead of changing this one.
    """

    def __init__(self, data: dict = None):
        self._data: dict[str, N] = dict(data) if data else {}

    def __getitem__(self, char: str) -> N:
        return self._data[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if isinstance(other, FrequencyTable):
            return self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"FrequencyTable({self._data!r})"

    def total(self) -> N:
        """Sum of all values (0 for an empty table)."""
        return sum(self._data.values())

    def as_dict(self) -> dict[str, N]:
        """Return a plain dict copy."""
        return dict(self._data)


class _Counter:
    """Accumulates counts while a table is being built."""

    def __init__(self, policy: ClassificationPolicy):
        self.policy = policy
        self.counts: dict[str, int] = {}

    def feed(self, data: bytes) -> None:
        counts = self.counts
        canonical = self.policy.canonical
        for byte in data:
            char = canonical(byte)
            if char is None:
                continue
            # lookup-or-insert, then increment
            counts.setdefault(char, 0)
            counts[char] += 1

    def table(self) -> FrequencyTable[int]:
        return FrequencyTable(self.counts)


def _check_readable(stream) -> None:
    if getattr(stream, "closed", False):
        raise SourceNotReadableError(stream, "closed")
    readable = getattr(stream, "readable", None)
    if readable is None or not readable():
        raise SourceNotReadableError(stream, "not open for reading")


def _drain(stream, counter: _Counter, encoding: str) -> None:
    _check_readable(stream)

    # Text files: count the underlying bytes, before newline translation
    raw = getattr(stream, "buffer", None)
    if raw is not None:
        stream = raw

    # Always count from the start of the content
    seekable = getattr(stream, "seekable", None)
    if seekable is not None and seekable():
        stream.seek(0)

    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        if isinstance(chunk, str):
            chunk = chunk.encode(encoding)
        counter.feed(chunk)


def build(
    source: Source,
    char_class: CharClass,
    *,
    byte_range: ByteRange = ByteRange.LEGACY,
    encoding: str = "utf-8",
    close: bool = False,
) -> FrequencyTable[int]:
    """
    Count characters of a source.

    Args:
        source: str (encoded with `encoding`), bytes-like object, or an
                open stream (binary or text; a text file is read through
                its byte buffer, so "\r\n" counts as two bytes)
        char_class: Character class to count
        byte_range: Byte eligibility pre-filter
        encoding: Encoding used to turn text into bytes
        close: Close a stream source when done (also on failure)

    Returns:
        FrequencyTable of counts

    Raises:
        SourceNotReadableError: If a stream source is closed or write-only
        TypeError: If the source type is not supported
    """
    counter = _Counter(ClassificationPolicy(char_class, byte_range))

    if isinstance(source, str):
        counter.feed(source.encode(encoding))
    elif isinstance(source, (bytes, bytearray, memoryview)):
        counter.feed(bytes(source))
    elif hasattr(source, "read"):
        try:
            _drain(source, counter, encoding)
        finally:
            if close:
                source.close()
    else:
        raise TypeError(f"Unsupported source type: {type(source).__name__}")

    return counter.table()


def build_from_path(
    path: Union[str, Path],
    char_class: CharClass,
    *,
    byte_range: ByteRange = ByteRange.LEGACY,
) -> FrequencyTable[int]:
    """Count characters of a file. The file is opened and closed here."""
    with open(path, "rb") as f:
        return build(f, char_class, byte_range=byte_range)
