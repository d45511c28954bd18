from functools import lru_cache

from adapter.external.jisho import JishoAdapter
from adapter.nlp.janome import JanomeAdapter
from port.dictionary import DictionaryPort
from port.tokenizer import TokenizerPort
from services.resolution_service import ResolutionService


@lru_cache(maxsize=1)
def get_tokenizer_port() -> TokenizerPort:
    return JanomeAdapter()


@lru_cache(maxsize=1)
def get_dictionary_port() -> DictionaryPort:
    return JishoAdapter()


@lru_cache(maxsize=1)
def get_resolution_service() -> ResolutionService:
    """Process-wide resolution service (one state per session)."""
    return ResolutionService(
        tokenizer=get_tokenizer_port(),
        dictionary=get_dictionary_port(),
    )
