"""Dictionary domain models.

RawDictRecord validates the loosely-typed wire payload returned by the
dictionary port. Everything past the Entry Normalizer works on
NormalizedEntry / GroupedEntry only.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

NO_WORD = "(no word)"
NO_GLOSS = "(no gloss)"
SENSE_SEPARATOR = ", "
READING_SEPARATOR = "、"


def format_headword(word: str, readings: list[str] | tuple[str, ...]) -> str:
    """Build the display key ``word【r1、r2】`` from a written form and readings."""
    return f"{word}【{READING_SEPARATOR.join(readings)}】"


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class JapaneseForm:
    """One written/reading pair of a record. Either side may be missing."""
    word: str | None = None
    reading: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "JapaneseForm":
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            word=_optional_str(data.get("word")),
            reading=_optional_str(data.get("reading")),
        )


@dataclass(frozen=True)
class Sense:
    """English definitions of one sense."""
    english_definitions: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Sense":
        if not isinstance(data, Mapping):
            return cls()
        definitions = tuple(
            d for d in _as_list(data.get("english_definitions"))
            if isinstance(d, str)
        )
        return cls(english_definitions=definitions)

    @property
    def text(self) -> str:
        return SENSE_SEPARATOR.join(self.english_definitions)


@dataclass(frozen=True)
class RawDictRecord:
    """Validated dictionary record.

    ``payload`` keeps the original wire dict so the presentation layer can
    still show fields the pipeline does not interpret.
    """
    japanese: tuple[JapaneseForm, ...] = ()
    senses: tuple[Sense, ...] = ()
    payload: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Any) -> "RawDictRecord":
        """Parse a wire record. Malformed parts degrade to empty values."""
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            japanese=tuple(JapaneseForm.from_dict(j) for j in _as_list(data.get("japanese"))),
            senses=tuple(Sense.from_dict(s) for s in _as_list(data.get("senses"))),
            payload=data,
        )

    @property
    def primary_form(self) -> JapaneseForm:
        return self.japanese[0] if self.japanese else JapaneseForm()


@dataclass(frozen=True)
class NormalizedEntry:
    """Canonical shape of one dictionary record."""
    headword: str
    word: str
    reading: str
    gloss: str
    senses: tuple[str, ...]
    raw: RawDictRecord = field(default_factory=RawDictRecord, compare=False, repr=False)


@dataclass(frozen=True)
class SenseWithReading:
    """A sense text tagged with the reading it was first seen under."""
    text: str
    reading: str


@dataclass(frozen=True)
class GroupedEntry:
    """User-visible entry: all readings of one written form merged together."""
    word: str
    reading: str
    readings: tuple[str, ...]
    headword: str
    senses: tuple[str, ...]
    senses_with_readings: tuple[SenseWithReading, ...]
    gloss: str
    raw: RawDictRecord = field(default_factory=RawDictRecord, compare=False, repr=False)


@dataclass(frozen=True)
class TermResults:
    """Normalized entries returned for one candidate term."""
    term: str
    entries: tuple[NormalizedEntry, ...] = ()
