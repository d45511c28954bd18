"""Entry normalization: converts one raw dictionary record into a NormalizedEntry."""

from typing import Any, Mapping

from domain.model.dictionary import (
    NO_GLOSS,
    NO_WORD,
    NormalizedEntry,
    RawDictRecord,
    format_headword,
)


def normalize_record(raw: RawDictRecord | Mapping[str, Any] | Any) -> NormalizedEntry:
    """Normalize a record. Never raises; missing fields become placeholders."""
    record = raw if isinstance(raw, RawDictRecord) else RawDictRecord.from_dict(raw)
    form = record.primary_form
    word = form.word or ""
    reading = form.reading or ""

    if word and reading:
        headword = format_headword(word, [reading])
    else:
        headword = word or reading or NO_WORD

    senses = tuple(s.text for s in record.senses if s.text)

    return NormalizedEntry(
        headword=headword,
        word=word,
        reading=reading,
        gloss=senses[0] if senses else NO_GLOSS,
        senses=senses,
        raw=record,
    )
