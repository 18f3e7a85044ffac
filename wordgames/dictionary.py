"""
Immutable word lists with letter-position indexes.

A Dictionary is built once per word list and handed to the generators.
Partitions by letter position are computed lazily and cached, so the
Hashtag finder can jump straight to the words that fit an intersection.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple, Union

import orjson

from .exceptions import ContractViolation, DictionaryLoadError
from .utils import WORD_LENGTH, is_valid_word, normalize_word

logger = logging.getLogger(__name__)

BUNDLED_WORDS_PATH = Path(__file__).parent / "data" / "words5.txt"

Partition = Dict[str, Tuple[str, ...]]


class Dictionary:
    """Ordered, duplicate-free collection of fixed-length words."""

    def __init__(self, words: Iterable[str], word_length: int = WORD_LENGTH):
        if word_length < 1:
            raise ContractViolation(f"word_length must be positive, got {word_length}")
        normalized = []
        for word in words:
            w = normalize_word(word)
            if not is_valid_word(w, word_length):
                raise ContractViolation(
                    f"Word {word!r} is not a {word_length}-letter A-Z word"
                )
            normalized.append(w)

        # dict.fromkeys keeps first-seen order
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(normalized))
        self._lookup = frozenset(self._words)
        self._partitions: Dict[int, Partition] = {}
        self.word_length = word_length

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, index: int) -> str:
        return self._words[index]

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word in self._lookup

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words, word_length={self.word_length})"

    def partition(self, index: int) -> Partition:
        """
        Group words by their letter at `index`.

        Returns a mapping letter -> words (dictionary order). Computed once per
        index and reused for every later call.
        """
        if index < 0 or index >= self.word_length:
            raise ContractViolation(
                f"Index {index} out of bounds for {self.word_length}-letter words"
            )
        cached = self._partitions.get(index)
        if cached is not None:
            return cached

        groups: Dict[str, List[str]] = {}
        for word in self._words:
            groups.setdefault(word[index], []).append(word)
        partition = {letter: tuple(members) for letter, members in groups.items()}
        self._partitions[index] = partition
        logger.debug("Indexed %d words by position %d into %d buckets",
                     len(self._words), index, len(partition))
        return partition

    def bucket(self, index: int, letter: str) -> Tuple[str, ...]:
        """Words whose letter at `index` is `letter` (empty tuple if none)."""
        return self.partition(index).get(letter, ())

    def letters_at(self, index: int) -> frozenset:
        """Distinct letters found at `index` across the dictionary."""
        return frozenset(self.partition(index))


def _read_lines(path: Path) -> Iterator[str]:
    if path.suffix == ".jsonl":
        with path.open("rb") as f:
            for line in f:
                if not line.strip():
                    continue
                record = orjson.loads(line)
                yield record["word"] if isinstance(record, dict) else record
    else:
        with path.open("r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#"):
                    yield line


def load_dictionary(
    path: Union[str, Path, None] = None,
    word_length: int = WORD_LENGTH,
    strict: bool = False,
) -> Dictionary:
    """
    Load a word list from disk.

    Args:
        path: Text file (one word per line, '#' comments) or JSONL file (each
            line a JSON string or an object with a "word" key). Defaults to
            the bundled French list.
        word_length: Length every kept word must have.
        strict: Raise on the first unusable entry instead of skipping it.

    Raises:
        DictionaryLoadError: If the file cannot be read or yields no word.
    """
    source = Path(path) if path is not None else BUNDLED_WORDS_PATH
    try:
        raw = list(_read_lines(source))
    except (OSError, orjson.JSONDecodeError, KeyError, TypeError) as e:
        raise DictionaryLoadError(f"Cannot read word list {source}: {e}") from e

    kept = []
    skipped = 0
    for entry in raw:
        word = normalize_word(str(entry))
        if is_valid_word(word, word_length):
            kept.append(word)
        elif strict:
            raise DictionaryLoadError(f"Unusable entry {entry!r} in {source}")
        else:
            skipped += 1

    if not kept:
        raise DictionaryLoadError(f"No {word_length}-letter words found in {source}")
    if skipped:
        logger.info("Skipped %d unusable entries in %s", skipped, source)

    dictionary = Dictionary(kept, word_length=word_length)
    logger.info("Loaded %d words from %s", len(dictionary), source)
    return dictionary
