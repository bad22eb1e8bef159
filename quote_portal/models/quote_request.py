from typing import List, Literal, Optional, get_args
from pydantic import BaseModel, EmailStr, Field, field_validator

Day = Literal[
    "Mondays",
    "Tuesdays",
    "Wednesdays",
    "Thursdays",
    "Fridays",
    "Saturdays",
    "Sundays",
]

SiteType = Literal[
    "Office/Commercial",
    "Welfare/Construction",
    "Hospitality/Venue",
    "Education/Institutional",
    "Specialist/Industrial",
    "Dental/Medical",
]

Frequency = Literal["1", "2", "3", "4", "5", "6", "7"]

DAYS = get_args(Day)
SITE_TYPES = get_args(SiteType)
FREQUENCY_OPTIONS = get_args(Frequency)

# Field labels expected by the n8n Form Trigger, in the order it lists them
WEBHOOK_FIELD_LABELS = {
    "company_name": "Company Name",
    "address": "Address",
    "contact_name": "Contact Name",
    "contact_email": "Contact Email",
    "contact_phone": "Contact Phone",
    "hours_per_day": "Hours Per Day",
    "frequency_per_week": "Frequency Per Week",
    "days_selected": "On Which Days?",
    "site_type": "Site Type",
    "margin_percent": "Margin %",
    "product_cost_weekly": "Product Cost (Weekly)",
    "overhead_cost_weekly": "Overhead Cost (Weekly)",
    "apply_pilot_pricing": "Apply Pilot Pricing (25% off for 30 days)",
}


class QuoteRequest(BaseModel):
    company_name: str = Field(..., min_length=2)
    address: str = Field(..., min_length=5)
    contact_name: str = Field(..., min_length=2)
    contact_email: EmailStr
    contact_phone: Optional[str] = None
    hours_per_day: float = Field(..., ge=0.25, le=24, allow_inf_nan=False)
    frequency_per_week: Frequency
    days_selected: List[Day] = Field(..., min_length=1)
    site_type: SiteType
    margin_percent: float = Field(..., ge=1, le=90, allow_inf_nan=False)
    product_cost_weekly: float = Field(..., ge=0, allow_inf_nan=False)
    overhead_cost_weekly: float = Field(..., ge=0, allow_inf_nan=False)
    apply_pilot_pricing: bool = False

    @field_validator(
        "hours_per_day",
        "margin_percent",
        "product_cost_weekly",
        "overhead_cost_weekly",
        mode="before",
    )
    @classmethod
    def blank_number_is_zero(cls, value):
        # Empty number inputs arrive as "" and count as 0
        if isinstance(value, str) and not value.strip():
            return 0
        return value

    def to_webhook_payload(self) -> dict:
        """
        Relabel the fields for the automation webhook.

        The phone number is always present (empty when not given) and the pilot
        flag uses the n8n checkbox shape: ``["yes"]`` when ticked, ``[]`` otherwise.
        """
        values = self.model_dump()
        values["contact_phone"] = self.contact_phone or ""
        values["apply_pilot_pricing"] = ["yes"] if self.apply_pilot_pricing else []
        return {label: values[field] for field, label in WEBHOOK_FIELD_LABELS.items()}
