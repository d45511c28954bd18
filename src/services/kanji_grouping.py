"""Kanji grouping: Step 4 of the resolution pipeline.

Merges deduplicated entries that share a written form but differ in
reading, e.g. 生【せい】 and 生【なま】 become 生【せい、なま】 with the
senses of both.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from domain.model.dictionary import (
    GroupedEntry,
    NormalizedEntry,
    RawDictRecord,
    SenseWithReading,
    format_headword,
)

logger = logging.getLogger(__name__)


@dataclass
class _KanjiGroup:
    """Accumulator for one written form.

    ``readings`` is a dict used as an insertion-ordered set.
    """
    word: str
    gloss: str
    raw: RawDictRecord
    readings: dict[str, None] = field(default_factory=dict)
    senses: list[str] = field(default_factory=list)
    senses_with_readings: list[SenseWithReading] = field(default_factory=list)

    @classmethod
    def seed(cls, entry: NormalizedEntry) -> "_KanjiGroup":
        return cls(
            word=entry.word,
            gloss=entry.gloss,
            raw=entry.raw,
            readings={entry.reading: None},
            senses=list(entry.senses),
            senses_with_readings=[SenseWithReading(text=s, reading=entry.reading) for s in entry.senses],
        )

    def merge(self, entry: NormalizedEntry) -> None:
        if entry.reading:
            self.readings.setdefault(entry.reading, None)

        known = {s.text for s in self.senses_with_readings}
        for sense in entry.senses:
            if sense in known:
                continue
            known.add(sense)
            self.senses_with_readings.append(SenseWithReading(text=sense, reading=entry.reading))
            self.senses.append(sense)

    def finalize(self) -> GroupedEntry:
        readings = tuple(self.readings)
        return GroupedEntry(
            word=self.word,
            reading=readings[0],
            readings=readings,
            headword=format_headword(self.word, readings),
            senses=tuple(self.senses),
            senses_with_readings=tuple(self.senses_with_readings),
            gloss=self.gloss,
            raw=self.raw,
        )


def group_by_kanji(entries: Iterable[NormalizedEntry]) -> list[GroupedEntry]:
    """Group entries by written form, in first-seen order.

    Entries without a written form (kana-only records) cannot join a
    group and are left out of the result.
    """
    groups: dict[str, _KanjiGroup] = {}
    skipped = 0
    for entry in entries:
        if not entry.word:
            skipped += 1
            continue
        group = groups.get(entry.word)
        if group is None:
            groups[entry.word] = _KanjiGroup.seed(entry)
        else:
            group.merge(entry)

    if skipped:
        logger.debug("Skipped entries without written form", extra={"count": skipped})
    return [group.finalize() for group in groups.values()]
