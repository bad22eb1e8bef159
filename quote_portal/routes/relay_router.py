import json
from typing import Optional, Union

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from quote_portal.core.config import settings
from quote_portal.core.logger import get_logger
from quote_portal.models.response import RelayErrorResponse, RelayResponse
from quote_portal.services.webhook_service import forward_to_webhook

relay_router = APIRouter(prefix="/api", tags=["Relay"])
logger = get_logger(__name__)


def get_webhook_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for outbound webhook calls; ``None`` uses the httpx default."""
    return None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=RelayErrorResponse(message=message).model_dump(),
    )


@relay_router.post(
    "/quote",
    response_model=RelayResponse,
    responses={
        400: {"model": RelayErrorResponse},
        500: {"model": RelayErrorResponse},
        502: {"model": Union[RelayResponse, RelayErrorResponse]},
    },
)
async def relay_quote(
    request: Request,
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_webhook_transport),
):
    """
    Forward the JSON body, as received, to the n8n webhook and report the
    upstream status and body back. 200 when upstream answers 2xx, 502 otherwise.
    """
    webhook_url = (settings.N8N_WEBHOOK_URL or "").strip()
    if not webhook_url:
        logger.error("N8N_WEBHOOK_URL is not set, quote request not forwarded")
        return _error(500, "Missing N8N_WEBHOOK_URL env var.")

    # Parsed only to reject non-JSON; the raw bytes are what gets forwarded
    body = await request.body()
    try:
        json.loads(body)
    except ValueError:
        logger.warning("Rejected quote relay request with a non-JSON body")
        return _error(400, "Request body must be valid JSON.")

    try:
        result = await forward_to_webhook(
            webhook_url,
            body,
            timeout=settings.WEBHOOK_TIMEOUT_SECONDS,
            transport=transport,
        )
    except httpx.InvalidURL as e:
        logger.error(f"N8N_WEBHOOK_URL is malformed: {e}")
        return _error(500, "Invalid N8N_WEBHOOK_URL env var.")
    except httpx.RequestError as e:
        logger.error(f"Webhook request failed: {e!r}")
        return _error(502, f"Webhook request failed: {str(e) or e.__class__.__name__}")

    if not result.ok:
        logger.warning(f"Webhook returned status={result.status}: {result.upstream[:500]}")

    return JSONResponse(
        status_code=200 if result.ok else 502,
        content=result.model_dump(),
    )
