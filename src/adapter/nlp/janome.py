"""Janome NLP adapter: tokenizes Japanese text.

Implements TokenizerPort by wrapping the Janome morphological analyzer.
Janome Token objects are confined within this adapter; only domain
Tokens cross the boundary.
"""

import asyncio
import logging
import os
import threading

from domain.model.token import Token

logger = logging.getLogger(__name__)

# Optional MeCab-IPADIC format CSV with extra entries
JANOME_USER_DICT = os.getenv("JANOME_USER_DICT", "")


class JanomeAdapter:
    """Adapter that tokenizes text with a Janome Tokenizer.

    Thread-safe singleton tokenizer: built once (loading the system
    dictionary takes a moment), reused across requests. Tokenization
    runs synchronously, so tokenize() offloads it to a thread to avoid
    blocking the event loop.
    """

    def __init__(self, user_dict: str = JANOME_USER_DICT):
        self._user_dict = user_dict
        self._tokenizer = None
        self._lock = threading.Lock()

    def preload(self) -> None:
        """Eagerly build the tokenizer (call at service startup)."""
        self._ensure_tokenizer()

    @property
    def loaded(self) -> bool:
        return self._tokenizer is not None

    # ------------------------------------------------------------------
    # Public interface (implements TokenizerPort)
    # ------------------------------------------------------------------

    async def tokenize(self, text: str) -> list[Token]:
        """Tokenize text into domain Tokens.

        Raises whatever Janome raises; the caller decides how to surface it.
        """
        tokenizer = self._ensure_tokenizer()
        raw_tokens = await asyncio.to_thread(lambda: list(tokenizer.tokenize(text or "")))
        tokens = [self._to_token(t) for t in raw_tokens]
        logger.debug("Janome tokenized text", extra={"length": len(text or ""), "token_count": len(tokens)})
        return tokens

    # ------------------------------------------------------------------
    # Tokenizer management
    # ------------------------------------------------------------------

    def _ensure_tokenizer(self):
        """Lazy-load the Janome tokenizer (singleton, thread-safe)."""
        if self._tokenizer is None:
            with self._lock:
                if self._tokenizer is None:
                    from janome.tokenizer import Tokenizer

                    if self._user_dict:
                        self._tokenizer = Tokenizer(self._user_dict, udic_enc="utf8")
                    else:
                        self._tokenizer = Tokenizer()
                    logger.info("Janome tokenizer loaded", extra={"user_dict": self._user_dict or None})
        return self._tokenizer

    # ------------------------------------------------------------------
    # Conversion (Janome Token → domain Token)
    # ------------------------------------------------------------------

    @staticmethod
    def _to_token(raw) -> Token:
        """Read surface, base form and top-level POS from a Janome token.

        part_of_speech looks like '動詞,自立,*,*'; only the first field
        is kept.
        """
        part_of_speech = getattr(raw, "part_of_speech", "") or ""
        return Token(
            surface_form=raw.surface,
            basic_form=getattr(raw, "base_form", "") or "",
            pos=part_of_speech.split(",", 1)[0],
        )
