import time
from fastapi import Request
from quote_portal.core.logger import get_logger

logger = get_logger("quote_portal.requests")

async def log_requests(request: Request, call_next):
    start_time = time.perf_counter()
    client_host = request.client.host if request.client else "-"
    logger.info(f"{request.method} {request.url.path} from {client_host}")
    response = await call_next(request)
    duration = time.perf_counter() - start_time
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({duration * 1000:.1f}ms)"
    )
    return response
