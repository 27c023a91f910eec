"""Result sequences and sort methods."""

from enum import Enum
from typing import Generic, Iterable, Iterator, Optional, TypeVar, Union

N = TypeVar("N", int, float)


class SortMethod(str, Enum):
    """Sort key and direction for a ResultSequence."""

    NONE = "none"
    CHAR_ASCENDING = "char-asc"
    CHAR_DESCENDING = "char-desc"
    VALUE_ASCENDING = "value-asc"
    VALUE_DESCENDING = "value-desc"

    @property
    def key(self) -> Optional[str]:
        """'char', 'value' or None."""
        if self is SortMethod.NONE:
            return None
        return self.value.split("-")[0]

    @property
    def descending(self) -> bool:
        return self.value.endswith("-desc")

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SortMethod.CHAR_ASCENDING: "Char Ascending",
    SortMethod.CHAR_DESCENDING: "Char Descending",
    SortMethod.VALUE_ASCENDING: "Value Ascending",
    SortMethod.VALUE_DESCENDING: "Value Descending",
    SortMethod.NONE: "None",
}

# Interactive menu order (1-based selection)
MENU_SORT_METHODS = [
    SortMethod.CHAR_ASCENDING,
    SortMethod.CHAR_DESCENDING,
    SortMethod.VALUE_ASCENDING,
    SortMethod.VALUE_DESCENDING,
    SortMethod.NONE,
]

_ALIASES = {
    "char-ascending": SortMethod.CHAR_ASCENDING,
    "char-descending": SortMethod.CHAR_DESCENDING,
    "value-ascending": SortMethod.VALUE_ASCENDING,
    "value-descending": SortMethod.VALUE_DESCENDING,
    "count-asc": SortMethod.VALUE_ASCENDING,
    "count-desc": SortMethod.VALUE_DESCENDING,
    "rank-asc": SortMethod.VALUE_ASCENDING,
    "rank-desc": SortMethod.VALUE_DESCENDING,
    "asc": SortMethod.CHAR_ASCENDING,
    "desc": SortMethod.CHAR_DESCENDING,
}


class UnsupportedSortMethodError(ValueError):
    """Raised when an unknown sort method name is used."""

    def __init__(self, name: str, context: str = ""):
        self.name = name
        self.context = context
        supported = ", ".join(m.value for m in SortMethod)
        message = f"Unsupported sort method: '{name}'"
        if context:
            message += f" in {context}"
        message += f". Supported: {supported}"
        super().__init__(message)


def get_sort_method(name: Union[str, SortMethod]) -> Optional[SortMethod]:
    """Get SortMethod by name or alias.

    Examples:
        get_sort_method("char-asc") -> SortMethod.CHAR_ASCENDING
        get_sort_method("count_desc") -> SortMethod.VALUE_DESCENDING
    """
    if isinstance(name, SortMethod):
        return name

    key = name.strip().lower().replace("_", "-")
    try:
        return SortMethod(key)
    except ValueError:
        return _ALIASES.get(key)


def require_sort_method(name: Union[str, SortMethod], context: str = "") -> SortMethod:
    """Get SortMethod by name, raising UnsupportedSortMethodError if not found."""
    method = get_sort_method(name)
    if method is None:
        raise UnsupportedSortMethodError(name, context)
    return method


class ResultSequence(Generic[N]):
    """Ordered snapshot of (char, value) pairs.

    Order is only meaningful after sort(). Sorting replaces the order,
    never the content.
    """

    def __init__(self, pairs: Iterable[tuple[str, N]] = ()):
        self._pairs: list[tuple[str, N]] = [(char, value) for char, value in pairs]

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, N]]:
        return iter(self._pairs)

    def __getitem__(self, index):
        return self._pairs[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, ResultSequence):
            return self._pairs == other._pairs
        if isinstance(other, list):
            return self._pairs == [tuple(p) for p in other]
        return NotImplemented

    def __repr__(self) -> str:
        return f"ResultSequence({self._pairs!r})"

    def chars(self) -> list[str]:
        return [char for char, _ in self._pairs]

    def values(self) -> list[N]:
        return [value for _, value in self._pairs]

    def total(self) -> N:
        return sum(self.values())

    def as_list(self) -> list[tuple[str, N]]:
        return list(self._pairs)

    def sort(self, method: Union[str, SortMethod] = SortMethod.NONE) -> None:
        """Sort in place. Value ties keep their current relative order."""
        method = require_sort_method(method, "ResultSequence.sort")
        if method.key is None:
            return

        if method.key == "char":
            key = lambda pair: ord(pair[0])
        else:
            key = lambda pair: pair[1]

        # list.sort is stable, including with reverse=True
        self._pairs.sort(key=key, reverse=method.descending)


def to_sequence(table) -> ResultSequence:
    """Materialize a FrequencyTable (order unspecified until sorted)."""
    return ResultSequence(table.items())


def sort(sequence: ResultSequence, method: Union[str, SortMethod]) -> None:
    """Sort a ResultSequence in place."""
    sequence.sort(method)
