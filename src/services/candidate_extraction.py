"""Candidate extraction: Step 1 of the resolution pipeline.

Turns the selected text plus its tokens into an ordered, deduplicated
list of terms worth looking up. The full selection always comes first.
"""

import logging
from dataclasses import dataclass

from domain.model.errors import TokenizationError
from domain.model.token import Token
from port.tokenizer import TokenizerPort

logger = logging.getLogger(__name__)

# IPADIC top-level tags for noun, verb, adjective
LOOKUP_POS = frozenset({"名詞", "動詞", "形容詞"})


@dataclass(frozen=True)
class CandidateExtraction:
    """Tokens produced for the selection and the terms derived from them."""
    tokens: tuple[Token, ...] = ()
    candidates: tuple[str, ...] = ()


def build_candidates(text: str, tokens: list[Token] | tuple[Token, ...]) -> list[str]:
    """Derive lookup terms from tokens.

    Keeps nouns, verbs and adjectives, maps each to its lemma, puts the
    full text first and drops duplicates and empty strings while keeping
    first-occurrence order.
    """
    if not text.strip():
        return []
    terms = [text] + [t.lemma for t in tokens if t.pos in LOOKUP_POS]
    return [term for term in dict.fromkeys(terms) if term]


async def extract_candidates(text: str, tokenizer: TokenizerPort) -> CandidateExtraction:
    """Tokenize the selection and build its candidate terms.

    Raises:
        TokenizationError: The tokenizer failed.
    """
    if not text.strip():
        return CandidateExtraction()

    try:
        tokens = await tokenizer.tokenize(text)
    except Exception as e:
        logger.warning("Tokenization failed", extra={"text": text, "error": str(e)})
        raise TokenizationError(e) from e

    candidates = build_candidates(text, tokens)
    logger.info("Candidates extracted", extra={
        "text": text, "token_count": len(tokens), "candidates": candidates,
    })
    return CandidateExtraction(tokens=tuple(tokens), candidates=tuple(candidates))
