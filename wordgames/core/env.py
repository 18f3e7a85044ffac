# wordgames/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from ..exceptions import ContractViolation
from ..generators.base import DEFAULT_MAX_ATTEMPTS
from ..utils import RARE_LETTERS

KNOWN_KEYS = [
    "WORDGAMES_DICTIONARY",
    "WORDGAMES_HASHTAG_DICTIONARY",
    "WORDGAMES_MAX_ATTEMPTS",
    "WORDGAMES_RARE_LETTERS",
    "WORDGAMES_SEED",
    "WORDGAMES_LOG_LEVEL",
]


@dataclass(frozen=True)
class Settings:
    dictionary_path: Optional[str] = None          # None -> bundled list
    hashtag_dictionary_path: Optional[str] = None  # None -> dictionary_path
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    rare_letters: frozenset = RARE_LETTERS
    seed: Optional[int] = None
    log_level: str = "WARNING"


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which keys are present.
    Values already set in the process environment win over the file.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            found[k] = v
    return found


def _int_setting(name: str, raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ContractViolation(f"{name} must be an integer, got {raw!r}") from None


def _rare_letters_setting(raw: str | None) -> frozenset:
    # "P, G" and "PG" mean the same set
    letters = frozenset(c for c in (raw or "").upper() if c.isalpha())
    return letters or RARE_LETTERS


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Build Settings from the environment (after loading .env)."""
    env = load_env(dotenv_path)

    max_attempts = _int_setting("WORDGAMES_MAX_ATTEMPTS", env.get("WORDGAMES_MAX_ATTEMPTS"))
    if max_attempts is not None and max_attempts < 1:
        raise ContractViolation("WORDGAMES_MAX_ATTEMPTS must be at least 1")

    rare = env.get("WORDGAMES_RARE_LETTERS")
    dictionary_path = env.get("WORDGAMES_DICTIONARY")

    return Settings(
        dictionary_path=dictionary_path,
        hashtag_dictionary_path=env.get("WORDGAMES_HASHTAG_DICTIONARY") or dictionary_path,
        max_attempts=max_attempts or DEFAULT_MAX_ATTEMPTS,
        rare_letters=_rare_letters_setting(rare),
        seed=_int_setting("WORDGAMES_SEED", env.get("WORDGAMES_SEED")),
        log_level=env.get("WORDGAMES_LOG_LEVEL", "WARNING").upper(),
    )
