"""Default configuration for charfreq."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.char_classes import ByteRange, CharClass, require_byte_range, require_char_class
from core.results import SortMethod, require_sort_method
from utils.sample_file import DEFAULT_SAMPLE_FILE, DEFAULT_SAMPLE_SIZE

ENV_PREFIX = "CHARFREQ_"


@dataclass
class Config:
    """Application configuration."""

    # Analysis
    char_class: str = CharClass.ALPHA.value
    sort_method: str = SortMethod.CHAR_ASCENDING.value
    byte_range: str = ByteRange.LEGACY.value  # legacy (48..174) or ascii (0..127)
    encoding: str = "utf-8"

    # Display
    rank_precision: int = 4

    # Interactive input
    max_input_length: int = 1024 * 4
    search_parent_dir: bool = True

    # Sample file
    sample_file: str = DEFAULT_SAMPLE_FILE
    sample_size: int = DEFAULT_SAMPLE_SIZE

    def validate(self) -> "Config":
        """Normalize names, raising on unknown or out-of-range values."""
        self.char_class = require_char_class(self.char_class, "config").value
        self.sort_method = require_sort_method(self.sort_method, "config").value
        self.byte_range = require_byte_range(self.byte_range, "config").value
        if self.rank_precision < 0:
            raise ValueError(f"rank_precision must be >= 0, got {self.rank_precision}")
        if self.sample_size < 0:
            raise ValueError(f"sample_size must be >= 0, got {self.sample_size}")
        return self


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got '{raw}'")


def load_config() -> Config:
    """Build Config from defaults, .env and CHARFREQ_* environment variables."""
    load_dotenv()

    defaults = Config()
    config = Config(
        char_class=os.environ.get(ENV_PREFIX + "CHAR_CLASS", defaults.char_class),
        sort_method=os.environ.get(ENV_PREFIX + "SORT_METHOD", defaults.sort_method),
        byte_range=os.environ.get(ENV_PREFIX + "BYTE_RANGE", defaults.byte_range),
        encoding=os.environ.get(ENV_PREFIX + "ENCODING", defaults.encoding),
        rank_precision=_env_int("RANK_PRECISION", defaults.rank_precision),
        sample_file=os.environ.get(ENV_PREFIX + "SAMPLE_FILE", defaults.sample_file),
        sample_size=_env_int("SAMPLE_SIZE", defaults.sample_size),
    )
    return config.validate()


# Choices for CLI options
CHAR_CLASSES = [c.value for c in CharClass]
SORT_METHODS = [m.value for m in SortMethod]
BYTE_RANGES = [r.value for r in ByteRange]
DISPLAY_VALUES = ["count", "rank"]
