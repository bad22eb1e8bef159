from datetime import date
from pathlib import Path

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from quote_portal.core.config import settings
from quote_portal.core.logger import get_logger
from quote_portal.models.quote_request import DAYS, FREQUENCY_OPTIONS, SITE_TYPES
from quote_portal.services.quote_form import FormStatus, QuoteForm

form_router = APIRouter(tags=["Quote Form"])
logger = get_logger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


async def get_relay_client(request: Request):
    """
    HTTP client pointed at the relay endpoint. Without RELAY_BASE_URL the
    relay is called in-process through the ASGI transport.
    """
    if settings.RELAY_BASE_URL:
        client = httpx.AsyncClient(
            base_url=settings.RELAY_BASE_URL,
            timeout=settings.WEBHOOK_TIMEOUT_SECONDS,
        )
    else:
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=request.app),
            base_url="http://quote-portal",
            timeout=settings.WEBHOOK_TIMEOUT_SECONDS,
        )
    async with client:
        yield client


def _render(request: Request, template: str, form: QuoteForm) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        template,
        {
            "form": form,
            "days": DAYS,
            "site_types": SITE_TYPES,
            "frequency_options": FREQUENCY_OPTIONS,
            "brand": settings,
            "year": date.today().year,
        },
    )


@form_router.get("/", response_class=HTMLResponse)
async def quote_form_page(request: Request):
    return _render(request, "quote_form.html", QuoteForm())


@form_router.post("/", response_class=HTMLResponse)
async def submit_quote_form(
    request: Request,
    relay_client: httpx.AsyncClient = Depends(get_relay_client),
):
    form_data = await request.form()
    form = QuoteForm.from_form_data(form_data)

    # Day buttons post the whole form back with the day that was clicked
    day = form_data.get("toggle_day")
    if day:
        try:
            form.toggle_day(day)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        form.validate_field("days_selected")
        return _render(request, "quote_form.html", form)

    status = await form.submit(relay_client)
    if status is FormStatus.SUCCESS:
        return _render(request, "quote_success.html", form)
    return _render(request, "quote_form.html", form)
