"""Sorted word/frequency dictionaries and the loaders that build them."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from wordfreq import top_n_list, word_frequency

log = logging.getLogger(__name__)

# Frequencies saturate at the largest signed 32-bit value.
MAX_FREQUENCY = 2**31 - 1

EXPECTED_FORMAT = "one line per entry: word [frequency]"

# leading ASCII integer of a frequency token; "12abc" reads as 12
_LEADING_INT = re.compile(r"[+-]?[0-9]+", re.ASCII)


class LoadError(Exception):
    """Raised when a dictionary source cannot be read."""


class Entry(NamedTuple):
    word: str
    frequency: int = 0


def saturate(frequency: int) -> int:
    """Clamp ``frequency`` into ``[0, MAX_FREQUENCY]``."""
    if frequency < 0:
        return 0
    if frequency > MAX_FREQUENCY:
        return MAX_FREQUENCY
    return frequency


class Dictionary(Sequence[Entry]):
    """Immutable sequence of entries sorted ascending by word.

    Duplicate words are allowed and kept in the order they were given.
    Use :func:`build` to create one from unsorted input.
    """

    __slots__ = ("_entries", "_words")

    def __init__(self, entries: Iterable[Entry] = ()):
        checked: list[Entry] = []
        previous: str | None = None
        for item in entries:
            try:
                entry = Entry(*item)
            except TypeError as exc:
                raise ValueError(f"entry must be a (word, frequency) pair (got {item!r})") from exc
            if not isinstance(entry.word, str):
                raise ValueError(f"word must be a str (got {entry.word!r})")
            if (
                not isinstance(entry.frequency, int)
                or isinstance(entry.frequency, bool)
                or not 0 <= entry.frequency <= MAX_FREQUENCY
            ):
                raise ValueError(
                    f"frequency for {entry.word!r} must be an int in "
                    f"[0, {MAX_FREQUENCY}] (got {entry.frequency!r})"
                )
            if previous is not None and entry.word < previous:
                raise ValueError(
                    f"entries must be sorted by word ({entry.word!r} follows {previous!r})"
                )
            previous = entry.word
            checked.append(entry)
        self._entries: tuple[Entry, ...] = tuple(checked)
        # parallel key list for bisect
        self._words: tuple[str, ...] = tuple(e.word for e in checked)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index):
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dictionary):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} entries)"


def build(entries: Iterable[Entry | tuple[str, int]]) -> Dictionary:
    """Sort ``entries`` by word and return them as a :class:`Dictionary`."""
    items = [Entry(word, saturate(int(freq))) for word, freq in entries]
    items.sort(key=lambda e: e.word)
    return Dictionary(items)


def parse_line(line: str) -> Entry | None:
    """Parse ``word [frequency]``; return ``None`` when there is no word."""
    tokens = line.split()
    if not tokens:
        return None
    frequency = 0
    if len(tokens) > 1:
        match = _LEADING_INT.match(tokens[1])
        if match:
            frequency = int(match.group())
    return Entry(tokens[0], saturate(frequency))


def parse_lines(lines: Iterable[str]) -> list[Entry]:
    """Return the entries found in ``lines``, in input order."""
    entries = []
    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            entries.append(entry)
    return entries


def load_dictionary(path: str, encoding: str = "utf-8") -> Dictionary:
    """Load a :class:`Dictionary` from a word list file at ``path``."""
    try:
        with open(path, "r", encoding=encoding) as file:
            entries = parse_lines(file)
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(
            f"Failed to load words from '{path}'.\nExpected file format: {EXPECTED_FORMAT}"
        ) from exc

    dictionary = build(entries)
    log.info("Loaded %d entries from %s", len(dictionary), path)
    return dictionary


def from_wordfreq(lang: str = "en", n: int = 80_000) -> Dictionary:
    """Build a dictionary from the ``n`` most common ``lang`` words in wordfreq.

    Frequencies are wordfreq's relative frequencies scaled to occurrences
    per billion words.
    """
    try:
        words = top_n_list(lang, n)
        entries = [(w, round(word_frequency(w, lang) * 1e9)) for w in words]
    except LookupError as exc:
        raise LoadError(f"wordfreq has no word list for language '{lang}'") from exc

    dictionary = build(entries)
    log.info("Loaded %d entries from wordfreq (%s)", len(dictionary), lang)
    return dictionary
