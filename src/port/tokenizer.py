"""Tokenizer port: outbound interface for morphological analysis."""

from typing import Protocol

from domain.model.token import Token


class TokenizerPort(Protocol):
    """Port for splitting Japanese text into tokens.

    Implementations wrap a morphological analyzer (e.g. Janome) and
    return domain Tokens; no library-specific types leak through this
    boundary.
    """

    async def tokenize(self, text: str) -> list[Token]:
        """Tokenize text.

        Raises:
            Exception: Any analyzer failure; callers wrap it into
                TokenizationError.
        """
        ...
