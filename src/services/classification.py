"""Primary/secondary classification: Step 5 of the resolution pipeline."""

from dataclasses import dataclass
from typing import Iterable

from domain.model.dictionary import GroupedEntry


@dataclass(frozen=True)
class Classification:
    primary: tuple[GroupedEntry, ...] = ()
    secondary: tuple[GroupedEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.primary and not self.secondary


def is_primary(entry: GroupedEntry, original_selection: str) -> bool:
    """An entry is primary when its written form appears literally in the selection."""
    return bool(entry.word) and entry.word in original_selection


def classify(entries: Iterable[GroupedEntry], original_selection: str) -> Classification:
    """Partition entries into primary and secondary, keeping input order."""
    primary: list[GroupedEntry] = []
    secondary: list[GroupedEntry] = []
    for entry in entries:
        (primary if is_primary(entry, original_selection) else secondary).append(entry)
    return Classification(primary=tuple(primary), secondary=tuple(secondary))
