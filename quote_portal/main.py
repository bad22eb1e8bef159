from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from quote_portal.core.config import settings
from quote_portal.core.logger import get_logger
from quote_portal.core.middleware import log_requests
from quote_portal.routes.form_router import form_router
from quote_portal.routes.relay_router import relay_router

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.N8N_WEBHOOK_URL:
        logger.warning("N8N_WEBHOOK_URL is not set; /api/quote will answer 500")
    logger.info(f"{settings.app_name} started")

    yield

    logger.info(f"{settings.app_name} shutting down")

app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)
app.include_router(form_router)
app.include_router(relay_router)
