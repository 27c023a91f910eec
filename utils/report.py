"""Text rendering of count and rank results."""

from core.results import ResultSequence

HEADER = (
    "\n"
    "Character Frequency Analyzer\n"
    "----------------------------\n"
)

COUNT_RULE = "-" * 18
RANK_RULE = "-" * 21


def display_char(char: str) -> str:
    """Printable characters as-is, space quoted, other bytes as \\xNN."""
    if char == " ":
        return "' '"
    if char.isprintable() and ord(char) < 128:
        return char
    return f"\\x{ord(char):02x}"


def format_counts(sequence: ResultSequence[int]) -> str:
    """Render (char, count) pairs as a table."""
    lines = ["", COUNT_RULE, "   Char   Count", COUNT_RULE]
    for char, count in sequence:
        lines.append(f"    {display_char(char)}     {count}")
    lines.append("")
    return "\n".join(lines)


def format_ranks(sequence: ResultSequence[float], precision: int = 4) -> str:
    """Render (char, rank) pairs as a table with fixed decimals."""
    lines = ["", RANK_RULE, "   Char    Rank", RANK_RULE]
    for char, rank in sequence:
        lines.append(f"    {display_char(char)}     {rank:.{precision}f}")
    lines.append("")
    return "\n".join(lines)
