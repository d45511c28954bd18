"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_dictionary_port, get_tokenizer_port
from port.dictionary import DictionaryPort
from port.tokenizer import TokenizerPort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    tokenizer: TokenizerPort = Depends(get_tokenizer_port),
    dictionary: DictionaryPort = Depends(get_dictionary_port),
):
    """Health check endpoint with dependency status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    overall_healthy = True

    # Tokenizer: a one-character sentence must tokenize
    try:
        await tokenizer.tokenize("日")
        health_status["services"]["tokenizer"] = {
            "status": "healthy",
            "message": "Tokenizer ready"
        }
    except Exception as e:
        health_status["services"]["tokenizer"] = {
            "status": "unhealthy",
            "message": f"Tokenizer error: {str(e)[:200]}"
        }
        overall_healthy = False

    # Dictionary: a trivial lookup must come back ok
    try:
        response = await dictionary.lookup("日")
        if response and response.get("ok"):
            health_status["services"]["dictionary"] = {
                "status": "healthy",
                "message": "Lookup successful"
            }
        else:
            health_status["services"]["dictionary"] = {
                "status": "unhealthy",
                "message": f"Lookup failed: {(response or {}).get('error', 'no response')}"
            }
            overall_healthy = False
    except Exception as e:
        health_status["services"]["dictionary"] = {
            "status": "unhealthy",
            "message": f"Lookup error: {str(e)[:200]}"
        }
        overall_healthy = False

    if not overall_healthy:
        health_status["status"] = "degraded"
        logger.warning("Health check degraded", extra={"services": health_status["services"]})

    status_code = status.HTTP_200_OK if overall_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )
