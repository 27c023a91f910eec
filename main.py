#!/usr/bin/env python3
"""Character Frequency Analyzer CLI.

Usage:
    python main.py                                  # prompt for files, count letters
    python main.py count notes.txt -c alnum -s value-desc
    python main.py rank --text "aabb"
    python main.py rank                             # prompt for files, rank letters
    python main.py generate -o test.cfa --size 1000 --seed 7
    python main.py interactive
"""

import sys
from pathlib import Path
from typing import Optional, Union

import click

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import BYTE_RANGES, CHAR_CLASSES, SORT_METHODS, Config, load_config
from analysis.char_frequency import CharFrequencyAnalyzer
from core.char_classes import MENU_CHAR_CLASSES, CharClass
from core.results import MENU_SORT_METHODS, ResultSequence, SortMethod
from utils.report import HEADER, format_counts, format_ranks
from utils.sample_file import generate_sample_file
from utils.sources import SourceUnavailableError, display_name, is_quit, resolve_path


# === Helpers ===

def analyze(
    source: Union[str, Path],
    display: str,
    char_class: Union[str, CharClass],
    sort_method: Union[str, SortMethod],
    config: Config,
) -> ResultSequence:
    """Run a count or rank analysis on text or a resolved file path."""
    analyzer = CharFrequencyAnalyzer(
        char_class=char_class,
        byte_range=config.byte_range,
        encoding=config.encoding,
    )

    if isinstance(source, Path):
        if display == "rank":
            return analyzer.analyze_ranks_path(source, sort_method)
        return analyzer.analyze_counts_path(source, sort_method)

    if display == "rank":
        return analyzer.analyze_ranks(source, sort_method)
    return analyzer.analyze_counts(source, sort_method)


def render(sequence: ResultSequence, display: str, config: Config) -> None:
    if display == "rank":
        click.echo(format_ranks(sequence, config.rank_precision))
    else:
        click.echo(format_counts(sequence))


def prompt_menu(title: str, options: list[str]) -> int:
    """Show a numbered menu and return the 1-based selection."""
    click.echo(f"\n{title}")
    for i, label in enumerate(options, start=1):
        click.echo(f"\t{i}. {label}")
    return click.prompt("Enter Selection", type=click.IntRange(1, len(options)))


def prompt_char_class() -> CharClass:
    selection = prompt_menu("Select Parse Method:", [c.label for c in MENU_CHAR_CLASSES])
    return MENU_CHAR_CLASSES[selection - 1]


def prompt_sort_method() -> SortMethod:
    selection = prompt_menu("Sort Results:", [m.label for m in MENU_SORT_METHODS])
    return MENU_SORT_METHODS[selection - 1]


def prompt_display_value() -> str:
    selection = prompt_menu("Display values as:", ["Count", "Rank"])
    return "count" if selection == 1 else "rank"


def prompt_filename() -> str:
    return click.prompt('Enter filename ("Q" to quit)')


def run_file_loop(config: Config, display: str, char_class: str, sort_method: str) -> None:
    """Prompt for filenames until 'Q', printing results for each file."""
    click.echo(HEADER)
    while True:
        filename = prompt_filename().strip()
        if len(filename) == 1:
            if is_quit(filename):
                return
            click.echo("Invalid choice")
            continue

        try:
            path = resolve_path(filename, config.search_parent_dir)
        except SourceUnavailableError:
            click.echo("File does not exist!")
            continue

        sequence = analyze(path, display, char_class, sort_method, config)
        render(sequence, display, config)


def run_one_shot(
    config: Config,
    display: str,
    file: Optional[str],
    text: Optional[str],
    char_class: str,
    sort_method: str,
) -> None:
    if file is not None and text is not None:
        click.echo("Error: Use either FILE or --text, not both", err=True)
        sys.exit(1)

    if text is not None:
        source = text
    else:
        try:
            source = resolve_path(file, config.search_parent_dir)
        except SourceUnavailableError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    sequence = analyze(source, display, char_class, sort_method, config)
    render(sequence, display, config)


# === Commands ===

def _analysis_options(func):
    func = click.option("--byte-range", type=click.Choice(BYTE_RANGES), default=None,
                        help="Byte eligibility rule (default from config)")(func)
    func = click.option("-s", "--sort", "sort_method", type=click.Choice(SORT_METHODS), default=None,
                        help="Result ordering (default from config)")(func)
    func = click.option("-c", "--char-class", type=click.Choice(CHAR_CLASSES), default=None,
                        help="Character class to count (default from config)")(func)
    func = click.option("--text", default=None, help="Analyze this text instead of a file")(func)
    func = click.argument("file", required=False)(func)
    return func


def _apply_overrides(config: Config, byte_range: Optional[str]) -> Config:
    if byte_range:
        config.byte_range = byte_range
    return config


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context):
    """Character Frequency Analyzer."""
    try:
        ctx.obj = load_config()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if ctx.invoked_subcommand is None:
        config = ctx.obj
        run_file_loop(config, "count", config.char_class, config.sort_method)


@cli.command()
@_analysis_options
@click.pass_obj
def count(config: Config, file, text, char_class, sort_method, byte_range):
    """Count characters of FILE or --text (prompts for files if neither is given)."""
    config = _apply_overrides(config, byte_range)
    char_class = char_class or config.char_class
    sort_method = sort_method or config.sort_method

    if file is None and text is None:
        run_file_loop(config, "count", char_class, sort_method)
    else:
        run_one_shot(config, "count", file, text, char_class, sort_method)


@cli.command()
@_analysis_options
@click.option("--precision", type=click.IntRange(min=0), default=None, help="Decimal places for ranks")
@click.pass_obj
def rank(config: Config, file, text, char_class, sort_method, byte_range, precision):
    """Rank characters (count / total) of FILE or --text."""
    config = _apply_overrides(config, byte_range)
    if precision is not None:
        config.rank_precision = precision
    char_class = char_class or config.char_class
    sort_method = sort_method or config.sort_method

    if file is None and text is None:
        run_file_loop(config, "rank", char_class, sort_method)
    else:
        run_one_shot(config, "rank", file, text, char_class, sort_method)


@cli.command()
@click.option("-o", "--output", default=None, help="Output file (default from config)")
@click.option("--size", type=click.IntRange(min=0), default=None, help="Number of bytes")
@click.option("--seed", type=int, default=None, help="Random seed")
@click.pass_obj
def generate(config: Config, output, size, seed):
    """Write a file of random printable ASCII characters."""
    path = generate_sample_file(
        output or config.sample_file,
        config.sample_size if size is None else size,
        seed,
    )
    click.echo(f"Created '{path}'")


@cli.command()
@click.pass_obj
def interactive(config: Config):
    """Menu-driven mode: analyze a file or typed text."""
    click.echo(HEADER)
    while True:
        selection = prompt_menu("Select test:", ["Read from file", "Input text", "Quit"])
        if selection == 1:
            interactive_file(config)
        elif selection == 2:
            interactive_text(config)
        else:
            return
        click.prompt("Press Enter to continue...", default="", show_default=False, prompt_suffix="")


def interactive_file(config: Config) -> None:
    filename = ""
    if click.confirm("\nCreate a test file?", default=False):
        path = generate_sample_file(config.sample_file, config.sample_size)
        click.echo(f"Created '{path}'")
        filename = str(path)

    while True:
        if not filename:
            filename = prompt_filename().strip()
        if is_quit(filename):
            return

        try:
            path = resolve_path(filename, config.search_parent_dir)
        except SourceUnavailableError:
            click.echo("File does not exist!")
            filename = ""
            continue

        click.echo(f"Opened '{display_name(path)}'")
        display = prompt_display_value()
        char_class = prompt_char_class()
        sort_method = prompt_sort_method()
        sequence = analyze(path, display, char_class, sort_method, config)
        render(sequence, display, config)
        return


def interactive_text(config: Config) -> None:
    text = click.prompt("\nEnter text to analyze", default="", show_default=False, prompt_suffix=":\n")
    text = text[:config.max_input_length]

    display = prompt_display_value()
    char_class = prompt_char_class()
    sort_method = prompt_sort_method()
    sequence = analyze(text, display, char_class, sort_method, config)
    render(sequence, display, config)


if __name__ == "__main__":
    cli()
