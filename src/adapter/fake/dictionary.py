"""In-memory implementation of DictionaryPort for testing."""

import asyncio
from typing import Any


def record(word: str | None = None, reading: str | None = None, *senses: list[str]) -> dict[str, Any]:
    """Build a raw dictionary record in the backend's wire shape."""
    japanese: dict[str, str] = {}
    if word is not None:
        japanese["word"] = word
    if reading is not None:
        japanese["reading"] = reading
    return {
        "japanese": [japanese],
        "senses": [{"english_definitions": list(s)} for s in senses],
    }


class FakeDictionaryAdapter:
    """Fake dictionary adapter that returns preconfigured records per term.

    Terms without configured records get ``{"ok": True}`` with an empty
    data list. ``errors`` maps a term to an exception raised on lookup,
    ``failures`` lists terms answered with ``ok: False`` and ``delays``
    maps a term to seconds to sleep before answering.
    """

    def __init__(
        self,
        records: dict[str, list[dict[str, Any]]] | None = None,
        errors: dict[str, Exception] | None = None,
        failures: set[str] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.records = records or {}
        self.errors = errors or {}
        self.failures = failures or set()
        self.delays = delays or {}
        self.calls: list[str] = []

    async def lookup(self, term: str) -> dict[str, Any] | None:
        self.calls.append(term)
        delay = self.delays.get(term)
        if delay:
            await asyncio.sleep(delay)
        if term in self.errors:
            raise self.errors[term]
        if term in self.failures:
            return {"ok": False, "error": f"lookup failed for {term}"}
        return {"ok": True, "data": {"data": list(self.records.get(term, []))}}
