"""In-memory implementation of TokenizerPort for testing."""

from domain.model.token import Token


class FakeTokenizerAdapter:
    """Fake tokenizer that returns preconfigured tokens or raises."""

    def __init__(
        self,
        tokens: list[Token] | None = None,
        error: Exception | None = None,
    ):
        self.tokens = tokens or []
        self.error = error
        self.calls: list[str] = []

    async def tokenize(self, text: str) -> list[Token]:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return list(self.tokens)
