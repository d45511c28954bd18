"""Pydantic models for API request/response."""

from typing import Any, Optional
from pydantic import BaseModel, Field

from domain.model.dictionary import GroupedEntry
from domain.model.resolution import ResolutionState


class SelectionRequest(BaseModel):
    """Request model for resolving a selection."""
    text: str = Field("", max_length=2000, description="Selected text; blank clears results")


class SenseWithReadingResponse(BaseModel):
    text: str
    reading: str


class TokenResponse(BaseModel):
    surface_form: str
    basic_form: str
    pos: str


class EntryResponse(BaseModel):
    """Response model for one grouped dictionary entry."""
    headword: str = Field(..., description="Display key, e.g. 食べる【たべる】")
    word: str
    reading: str = Field(..., description="First-seen reading")
    readings: list[str]
    gloss: str
    senses: list[str]
    senses_with_readings: list[SenseWithReadingResponse]
    raw: Optional[dict[str, Any]] = Field(None, description="Original dictionary record")

    @classmethod
    def from_entry(cls, entry: GroupedEntry) -> "EntryResponse":
        return cls(
            headword=entry.headword,
            word=entry.word,
            reading=entry.reading,
            readings=list(entry.readings),
            gloss=entry.gloss,
            senses=list(entry.senses),
            senses_with_readings=[
                SenseWithReadingResponse(text=s.text, reading=s.reading)
                for s in entry.senses_with_readings
            ],
            raw=dict(entry.raw.payload) or None,
        )


class ResolutionResponse(BaseModel):
    """Response model for the resolution state snapshot."""
    text: str
    loading: bool
    analyzing: bool
    error_msg: str = Field("", description="User-visible error or informational message")
    original_selection: str
    primary_results: list[EntryResponse]
    secondary_results: list[EntryResponse]
    tokens: list[TokenResponse]
    active_words: list[str]

    @classmethod
    def from_state(cls, state: ResolutionState) -> "ResolutionResponse":
        return cls(
            text=state.text,
            loading=state.loading,
            analyzing=state.analyzing,
            error_msg=state.error_msg,
            original_selection=state.original_selection,
            primary_results=[EntryResponse.from_entry(e) for e in state.primary_results],
            secondary_results=[EntryResponse.from_entry(e) for e in state.secondary_results],
            tokens=[
                TokenResponse(surface_form=t.surface_form, basic_form=t.basic_form, pos=t.pos)
                for t in state.tokens
            ],
            active_words=sorted(state.active_words),
        )
