from typing import Optional

import httpx
from quote_portal.core.logger import get_logger
from quote_portal.models.response import RelayResponse

logger = get_logger(__name__)


async def forward_to_webhook(
    webhook_url: str,
    content: bytes,
    timeout: float,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> RelayResponse:
    """
    POST the JSON body, byte for byte as received, to the automation webhook
    and wrap its reply.

    Any upstream status is returned as-is; only transport failures
    (connection errors, timeouts) raise, as ``httpx.RequestError``, and a
    malformed webhook URL raises ``httpx.InvalidURL``.
    """
    host = httpx.URL(webhook_url).host
    logger.info(f"Forwarding quote request to webhook host {host}")

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.post(
            webhook_url,
            content=content,
            headers={"content-type": "application/json"},
        )

    logger.info(f"Webhook {host} responded with status={response.status_code}")
    return RelayResponse(
        ok=response.is_success,
        status=response.status_code,
        upstream=response.text,
    )
