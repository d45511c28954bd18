"""Resolution API routes.

Endpoints:
- GET /resolution: Current resolution state snapshot
- POST /resolution/selection: Resolve a new selection (blank text clears)
- DELETE /resolution/results/{headword}: Remove one displayed result
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_resolution_service
from api.models import ResolutionResponse, SelectionRequest
from domain.model.errors import NotFoundError
from services.resolution_service import ResolutionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resolution", tags=["resolution"])


@router.get("", response_model=ResolutionResponse)
async def get_resolution(
    service: ResolutionService = Depends(get_resolution_service),
):
    """Return the current resolution state."""
    return ResolutionResponse.from_state(service.state)


@router.post("/selection", response_model=ResolutionResponse)
async def handle_selection(
    request: SelectionRequest,
    service: ResolutionService = Depends(get_resolution_service),
):
    """Resolve selected text into primary and secondary dictionary entries."""
    state = await service.handle_selection(request.text)
    return ResolutionResponse.from_state(state)


@router.delete("/results/{headword:path}", response_model=ResolutionResponse)
async def remove_result(
    headword: str,
    service: ResolutionService = Depends(get_resolution_service),
):
    """Remove the displayed result with this headword."""
    try:
        entry = service.require_result(headword)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    state = service.remove_result(entry)
    return ResolutionResponse.from_state(state)

