"""Domain-level exceptions.

The pipeline raises these errors to express failures that must reach the
user. The resolution service catches them and turns them into ``error_msg``;
route handlers map NotFoundError to HTTP 404.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class TokenizationError(DomainError):
    """The tokenizer failed on the selected text."""

    def __init__(self, cause: object):
        self.cause = cause
        super().__init__(f"Tokenization failed: {cause}")


class BatchLookupError(DomainError):
    """The lookup batch as a whole failed (not a single term)."""

    def __init__(self, cause: object):
        self.cause = cause
        super().__init__(f"Lookup failed: {cause}")
