"""Lookup dispatch: Step 2 of the resolution pipeline.

Fans out one dictionary lookup per candidate term and joins all of them
before returning. A failing term contributes zero entries; it never
aborts the batch.
"""

import asyncio
import logging
from typing import Any, Mapping

from domain.model.dictionary import NormalizedEntry, TermResults
from domain.model.errors import BatchLookupError
from port.dictionary import DictionaryPort
from services.normalization import normalize_record

logger = logging.getLogger(__name__)


async def dispatch_lookups(
    terms: list[str] | tuple[str, ...],
    dictionary: DictionaryPort,
) -> list[TermResults]:
    """Look up every term concurrently.

    Returns:
        One TermResults per term, in input order (not completion order).

    Raises:
        BatchLookupError: The batch itself failed.
    """
    if not terms:
        return []

    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_lookup_term(term, dictionary)) for term in terms]
    except Exception as e:
        cause = _root_cause(e)
        logger.error("Lookup batch failed", extra={"terms": list(terms), "error": str(cause)}, exc_info=True)
        raise BatchLookupError(cause) from e

    results = [task.result() for task in tasks]
    logger.info("Lookup batch completed", extra={
        "terms": list(terms),
        "hits": {r.term: len(r.entries) for r in results},
    })
    return results


def _root_cause(error: Exception) -> Exception:
    """Unwrap TaskGroup's ExceptionGroup down to the first real error."""
    while isinstance(error, ExceptionGroup) and error.exceptions:
        error = error.exceptions[0]
    return error


async def _lookup_term(term: str, dictionary: DictionaryPort) -> TermResults:
    """Look up one term; any failure yields an empty result for it."""
    try:
        response = await dictionary.lookup(term)
    except Exception as e:
        logger.warning("Dictionary lookup raised", extra={"term": term, "error": str(e)})
        return TermResults(term=term)

    if not isinstance(response, Mapping) or not response.get("ok"):
        logger.debug("Dictionary lookup not ok", extra={
            "term": term,
            "error": response.get("error") if isinstance(response, Mapping) else None,
        })
        return TermResults(term=term)

    return TermResults(term=term, entries=_normalize_records(response.get("data")))


def _normalize_records(data: Any) -> tuple[NormalizedEntry, ...]:
    """Read ``data["data"]`` from a lookup envelope and normalize each record."""
    records = data.get("data") if isinstance(data, Mapping) else None
    if not isinstance(records, list):
        return ()
    return tuple(normalize_record(r) for r in records)
