"""Defaults and environment overrides for model building and generation."""

import os
from dataclasses import dataclass, field
from typing import Final

# prime so that probe starts spread evenly; never resized
DEFAULT_HASH_SIZE: Final[int] = 524287
DEFAULT_MAX_LENGTH: Final[int] = 4096
DEFAULT_START_ATTEMPTS: Final[int] = 10_000
DEFAULT_MAX_ATTEMPTS: Final[int] = 1000
DEFAULT_CORPUS: Final[str] = "pg84.txt"

DELIMITERS: Final[bytes] = b" \r\n"
SENTENCE_ENDS: Final[bytes] = b".?!"

ENV_PREFIX: Final[str] = "WORDWALK_"


def _env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable, falling back to ``default`` when unset."""
    raw = os.environ.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer (got {raw!r})") from e


@dataclass
class Settings:
    """Runtime settings shared by the CLI and library entry points."""

    corpus: str = DEFAULT_CORPUS
    hash_size: int = DEFAULT_HASH_SIZE
    max_length: int = DEFAULT_MAX_LENGTH
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: int | None = field(default=None)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from ``WORDWALK_*`` environment variables.

        Unset or blank variables keep their defaults.

        :raises ValueError: If a numeric variable does not parse as an integer.
        """
        return cls(
            corpus=os.environ.get(ENV_PREFIX + "CORPUS", "").strip() or DEFAULT_CORPUS,
            hash_size=_env_int("HASH_SIZE", DEFAULT_HASH_SIZE),
            max_length=_env_int("MAX_LENGTH", DEFAULT_MAX_LENGTH),
            max_attempts=_env_int("MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
            seed=_env_int("SEED", None),
        )
