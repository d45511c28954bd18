"""Dictionary port: outbound interface for dictionary data sources."""

from typing import Any, Protocol


class DictionaryPort(Protocol):
    """Port for looking up one term in a dictionary backend.

    lookup() returns the backend's envelope as a primitive dict:

        {"ok": True, "data": {"data": [<raw record>, ...]}}
        {"ok": False, "error": "<message>"}

    A missing ``ok`` or ``ok: False`` means zero results for the term.
    Raw records are validated by the service layer (RawDictRecord), so
    adapters only move bytes; no entry-structure knowledge lives here.
    """

    async def lookup(self, term: str) -> dict[str, Any] | None: ...
