"""Result deduplication: Step 3 of the resolution pipeline."""

from dataclasses import dataclass, field
from typing import Iterable

from domain.model.dictionary import NormalizedEntry, TermResults


@dataclass(frozen=True)
class Deduplication:
    """Deduplicated entries plus per-term tracking for the state."""
    entries: tuple[NormalizedEntry, ...] = ()
    active_words: frozenset[str] = frozenset()
    word_to_results: dict[str, tuple[NormalizedEntry, ...]] = field(default_factory=dict)


def dedupe_by_headword(entries: Iterable[NormalizedEntry]) -> list[NormalizedEntry]:
    """Keep the first entry for each headword, preserving order."""
    seen: set[str] = set()
    unique: list[NormalizedEntry] = []
    for entry in entries:
        if not entry.headword or entry.headword in seen:
            continue
        seen.add(entry.headword)
        unique.append(entry)
    return unique


def deduplicate(term_results: Iterable[TermResults]) -> Deduplication:
    """Flatten term-major results and drop repeated headwords.

    Every term that produced at least one entry is recorded as active,
    together with the entries it produced.
    """
    word_to_results: dict[str, tuple[NormalizedEntry, ...]] = {}
    flattened: list[NormalizedEntry] = []
    for result in term_results:
        if not result.entries:
            continue
        word_to_results[result.term] = result.entries
        flattened.extend(result.entries)

    return Deduplication(
        entries=tuple(dedupe_by_headword(flattened)),
        active_words=frozenset(word_to_results),
        word_to_results=word_to_results,
    )
