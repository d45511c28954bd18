"""Resolution state snapshot.

One ResolutionState describes everything the presentation layer can read.
Snapshots are immutable; the resolution service publishes a new one for
every transition via dataclasses.replace().
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from domain.model.dictionary import GroupedEntry, NormalizedEntry
from domain.model.token import Token

NO_RESULTS_MESSAGE = "No results for selected tokens."


@dataclass(frozen=True)
class ResolutionState:
    """Immutable snapshot of the current resolution."""

    text: str = ""
    loading: bool = False
    analyzing: bool = False
    error_msg: str = ""
    original_selection: str = ""
    primary_results: tuple[GroupedEntry, ...] = ()
    secondary_results: tuple[GroupedEntry, ...] = ()
    tokens: tuple[Token, ...] = ()
    active_words: frozenset[str] = frozenset()
    word_to_results: Mapping[str, tuple[NormalizedEntry, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    generation: int = 0

    def __post_init__(self) -> None:
        # Freeze mutable dict passed at construction time
        if isinstance(self.word_to_results, dict):
            object.__setattr__(self, "word_to_results", MappingProxyType(self.word_to_results))

    @property
    def results(self) -> tuple[GroupedEntry, ...]:
        """Primary results followed by secondary results."""
        return self.primary_results + self.secondary_results

    @property
    def busy(self) -> bool:
        return self.loading or self.analyzing

    def cleared(self) -> "ResolutionState":
        """Snapshot for an empty selection: results and tracking reset."""
        return replace(
            self,
            text="",
            loading=False,
            analyzing=False,
            error_msg="",
            original_selection="",
            primary_results=(),
            secondary_results=(),
            tokens=(),
            active_words=frozenset(),
            word_to_results={},
        )

    def without_result(self, entry: GroupedEntry) -> "ResolutionState":
        """Drop the result with the entry's headword.

        The entry's word stays tracked in active_words / word_to_results
        while any other remaining result still shares it.
        """
        headword = entry.headword
        primary = tuple(r for r in self.primary_results if r.headword != headword)
        secondary = tuple(r for r in self.secondary_results if r.headword != headword)

        active_words = self.active_words
        word_to_results = self.word_to_results
        word = entry.word
        if word and not any(r.word == word for r in primary + secondary):
            active_words = self.active_words - {word}
            word_to_results = {k: v for k, v in self.word_to_results.items() if k != word}

        return replace(
            self,
            primary_results=primary,
            secondary_results=secondary,
            active_words=active_words,
            word_to_results=word_to_results,
        )
