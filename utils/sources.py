"""Source provider: resolve filenames and open files for analysis."""

from pathlib import Path
from typing import Union


class SourceUnavailableError(FileNotFoundError):
    """Raised when a filename cannot be resolved to an existing file."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"File does not exist: {filename}")


def resolve_path(filename: Union[str, Path], search_parent: bool = True) -> Path:
    """
    Resolve a filename to an existing file.

    Tries the name as given, then the same name one directory up (for runs
    started from a build sub-directory).

    Args:
        filename: File name or path
        search_parent: Also try "../<filename>"

    Returns:
        Path to an existing file

    Raises:
        SourceUnavailableError: If no candidate exists
    """
    path = Path(filename)
    if path.is_file():
        return path

    if search_parent:
        parent = Path("..") / path
        if parent.is_file():
            return parent

    raise SourceUnavailableError(str(filename))


def display_name(filename: Union[str, Path]) -> str:
    """Trim everything up to and including the first path separator.

    Examples:
        display_name("../notes.txt") -> "notes.txt"
        display_name("data/a/b.txt") -> "a/b.txt"
    """
    name = str(filename)
    for i, ch in enumerate(name):
        if ch in "/\\":
            return name[i + 1:]
    return name


def is_quit(text: str) -> bool:
    """A single 'q' or 'Q' means quit."""
    return text.strip().upper() == "Q"
