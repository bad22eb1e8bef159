import copy
from enum import Enum
from typing import Dict, Optional

import httpx
from pydantic import ValidationError

from quote_portal.core.logger import get_logger
from quote_portal.models.quote_request import DAYS, QuoteRequest

logger = get_logger(__name__)

RELAY_PATH = "/api/quote"
GENERIC_ERROR = "Something went wrong sending your request."

DEFAULT_VALUES = {
    "company_name": "",
    "address": "",
    "contact_name": "",
    "contact_email": "",
    "contact_phone": "",
    "hours_per_day": "",
    "frequency_per_week": "5",
    "days_selected": [],
    "site_type": "Office/Commercial",
    "margin_percent": 45,
    "product_cost_weekly": 0,
    "overhead_cost_weekly": 0,
    "apply_pilot_pricing": False,
}

# Inline messages per field; "" is the fallback for any other error type
FIELD_MESSAGES = {
    "company_name": {"": "Company name is required."},
    "address": {"": "Address is required."},
    "contact_name": {"": "Contact name is required."},
    "contact_email": {"": "Enter a valid email."},
    "hours_per_day": {
        "less_than_equal": "Hours per day looks too high.",
        "finite_number": "Hours per day looks too high.",
        "": "Hours per day is required.",
    },
    "frequency_per_week": {"": "Choose a frequency from 1 to 7."},
    "days_selected": {"": "Select at least one day."},
    "site_type": {"": "Choose a site type."},
    "margin_percent": {
        "less_than_equal": "Margin % must be under 90.",
        "finite_number": "Margin % must be under 90.",
        "": "Margin % is required.",
    },
    "product_cost_weekly": {"": "Must be 0 or more."},
    "overhead_cost_weekly": {"": "Must be 0 or more."},
}


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


def field_errors(exc: ValidationError) -> Dict[str, str]:
    """Collapse a validation error into one message per top-level field."""
    errors: Dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        if field in errors:
            continue
        messages = FIELD_MESSAGES.get(field, {})
        errors[field] = messages.get(error["type"]) or messages.get("") or error["msg"]
    return errors


def relay_error_message(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        message = data.get("message") or data.get("upstream")
        if message:
            return str(message)
    return f"Request failed ({response.status_code})"


class QuoteForm:
    """
    State of one quote request form: current values, inline errors and the
    submission status shown to the visitor.
    """

    def __init__(self, values: Optional[dict] = None):
        self.values = copy.deepcopy(DEFAULT_VALUES)
        if values:
            self.values.update(values)
        self.errors: Dict[str, str] = {}
        self.status = FormStatus.IDLE
        self.error_message = ""

    @classmethod
    def from_form_data(cls, form) -> "QuoteForm":
        """Build the form from a url-encoded/multipart POST (Starlette ``FormData``)."""
        values = {
            name: form.get(name, "")
            for name in DEFAULT_VALUES
            if name not in ("days_selected", "apply_pilot_pricing")
        }
        # keep the order the days were picked in, dropping repeats
        values["days_selected"] = list(dict.fromkeys(form.getlist("days_selected")))
        values["apply_pilot_pricing"] = "apply_pilot_pricing" in form
        return cls(values)

    @property
    def days_selected(self) -> list:
        return self.values["days_selected"]

    def toggle_day(self, day: str) -> None:
        if day not in DAYS:
            raise ValueError(f"Unknown day: {day!r}")
        selected = self.values["days_selected"]
        if day in selected:
            self.values["days_selected"] = [d for d in selected if d != day]
        else:
            self.values["days_selected"] = [*selected, day]

    @property
    def weekly_hours(self) -> float:
        try:
            hours = float(self.values.get("hours_per_day") or 0)
            frequency = float(self.values.get("frequency_per_week") or 0)
        except (TypeError, ValueError):
            return 0.0
        if not hours or not frequency:
            return 0.0
        return hours * frequency

    def validate(self) -> Optional[QuoteRequest]:
        try:
            quote = QuoteRequest(**self.values)
        except ValidationError as e:
            self.errors = field_errors(e)
            return None
        self.errors = {}
        return quote

    def validate_field(self, name: str) -> bool:
        """Validate the form but only surface the error for ``name``."""
        self.validate()
        self.errors = {k: v for k, v in self.errors.items() if k == name}
        return name not in self.errors

    def reset(self) -> None:
        self.values = copy.deepcopy(DEFAULT_VALUES)
        self.errors = {}

    async def submit(self, client: httpx.AsyncClient) -> FormStatus:
        """
        Validate and send the relabelled payload to the relay endpoint.

        Invalid forms never reach the network; the status is left untouched
        and ``errors`` holds the inline messages. No retries: a failure puts
        the form in the error state and the visitor resubmits by hand.
        """
        quote = self.validate()
        if quote is None:
            logger.info(f"Quote form blocked, invalid fields: {sorted(self.errors)}")
            return self.status

        self.status = FormStatus.SUBMITTING
        self.error_message = ""

        try:
            response = await client.post(RELAY_PATH, json=quote.to_webhook_payload())
        except httpx.HTTPError as e:
            logger.error(f"Relay call failed for {quote.company_name}: {e!r}")
            self.status = FormStatus.ERROR
            self.error_message = str(e) or GENERIC_ERROR
            return self.status

        if not response.is_success:
            self.status = FormStatus.ERROR
            self.error_message = relay_error_message(response)
            logger.warning(
                f"Relay rejected quote for {quote.company_name} "
                f"with status={response.status_code}"
            )
            return self.status

        logger.info(f"Quote request for {quote.company_name} accepted by relay")
        self.status = FormStatus.SUCCESS
        self.reset()
        return self.status
