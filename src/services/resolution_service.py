"""Resolution service: orchestrates the selection resolution pipeline.

Pipeline: candidate extraction → lookup dispatch (normalizes each record)
→ deduplication → kanji grouping → primary/secondary classification.

The service owns the current ResolutionState snapshot. Every transition
builds a new snapshot and publishes it to subscribers; nothing outside
this class mutates state.
"""

import logging
from dataclasses import replace
from typing import Callable

from domain.model.dictionary import GroupedEntry
from domain.model.errors import BatchLookupError, DomainError, NotFoundError, TokenizationError
from domain.model.resolution import NO_RESULTS_MESSAGE, ResolutionState
from port.dictionary import DictionaryPort
from port.tokenizer import TokenizerPort
from services.candidate_extraction import extract_candidates
from services.classification import classify
from services.deduplication import deduplicate
from services.kanji_grouping import group_by_kanji
from services.lookup_dispatch import dispatch_lookups

logger = logging.getLogger(__name__)

Subscriber = Callable[[ResolutionState], None]


class ResolutionService:
    """Holds the resolution state and exposes its two transitions.

    handle_selection() runs the full pipeline for a new selection;
    remove_result() drops one displayed entry without re-running it.

    Each handle_selection() call starts a new generation. A pass that
    finishes after a newer one started discards its output, so the most
    recent selection always wins regardless of lookup latency.
    """

    def __init__(self, tokenizer: TokenizerPort, dictionary: DictionaryPort):
        self.tokenizer = tokenizer
        self.dictionary = dictionary
        self._state = ResolutionState()
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> ResolutionState:
        return self._state

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for every published snapshot.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, state: ResolutionState) -> ResolutionState:
        self._state = state
        for callback in list(self._subscribers):
            try:
                callback(state)
            except Exception as e:
                logger.error("Resolution subscriber failed", extra={"error": str(e)}, exc_info=True)
        return state

    def _is_current(self, generation: int) -> bool:
        return self._state.generation == generation

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    async def handle_selection(self, selected_text: str | None) -> ResolutionState:
        """Resolve a selection into primary and secondary results.

        A blank selection clears results, tracking and error message.
        """
        text = selected_text or ""
        generation = self._state.generation + 1

        if not text.strip():
            logger.debug("Blank selection, clearing results")
            return self._publish(replace(self._state.cleared(), generation=generation))

        self._publish(replace(
            self._state,
            text=text,
            original_selection=text,
            loading=False,
            analyzing=True,
            generation=generation,
        ))

        try:
            extraction = await extract_candidates(text, self.tokenizer)
        except TokenizationError as e:
            if not self._is_current(generation):
                return self._state
            # Previous results stay on screen; only the message changes
            return self._publish(replace(self._state, analyzing=False, tokens=(), error_msg=str(e)))

        if not self._is_current(generation):
            logger.info("Discarding stale resolution", extra={"text": text, "generation": generation})
            return self._state

        self._publish(replace(self._state, analyzing=False, tokens=extraction.tokens))
        if not extraction.candidates:
            return self._state

        return await self._lookup(text, extraction.candidates, generation)

    async def _lookup(self, text: str, candidates: tuple[str, ...], generation: int) -> ResolutionState:
        """Run lookup → dedupe → group → classify and publish the outcome."""
        self._publish(replace(
            self._state,
            loading=True,
            error_msg="",
            primary_results=(),
            secondary_results=(),
            active_words=frozenset(),
            word_to_results={},
        ))

        try:
            term_results = await dispatch_lookups(candidates, self.dictionary)
            deduplicated = deduplicate(term_results)
            classification = classify(group_by_kanji(deduplicated.entries), text)
        except DomainError as e:
            return self._fail(generation, str(e))
        except Exception as e:
            logger.error("Unexpected resolution failure", extra={"text": text, "error": str(e)}, exc_info=True)
            return self._fail(generation, str(BatchLookupError(e)))

        if not self._is_current(generation):
            logger.info("Discarding stale resolution", extra={"text": text, "generation": generation})
            return self._state

        logger.info("Selection resolved", extra={
            "text": text,
            "candidates": list(candidates),
            "primary": [e.headword for e in classification.primary],
            "secondary": [e.headword for e in classification.secondary],
        })
        return self._publish(replace(
            self._state,
            loading=False,
            error_msg=NO_RESULTS_MESSAGE if classification.is_empty else "",
            primary_results=classification.primary,
            secondary_results=classification.secondary,
            active_words=deduplicated.active_words,
            word_to_results=deduplicated.word_to_results,
        ))

    def _fail(self, generation: int, message: str) -> ResolutionState:
        if not self._is_current(generation):
            return self._state
        return self._publish(replace(self._state, loading=False, error_msg=message))

    def remove_result(self, entry: GroupedEntry) -> ResolutionState:
        """Remove one displayed result by headword."""
        if not entry.headword:
            return self._state
        logger.info("Result removed", extra={"headword": entry.headword, "word": entry.word})
        return self._publish(self._state.without_result(entry))

    def find_result(self, headword: str) -> GroupedEntry | None:
        """Return the displayed result with this headword, if any."""
        for entry in self._state.results:
            if entry.headword == headword:
                return entry
        return None

    def require_result(self, headword: str) -> GroupedEntry:
        """Like find_result(), but raises NotFoundError when absent."""
        entry = self.find_result(headword)
        if entry is None:
            raise NotFoundError(f"No result with headword {headword}")
        return entry
