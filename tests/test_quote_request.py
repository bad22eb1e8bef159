import pytest
from pydantic import ValidationError

from quote_portal.models.quote_request import (
    DAYS,
    SITE_TYPES,
    WEBHOOK_FIELD_LABELS,
    QuoteRequest,
)


def test_valid_values_parse(valid_values):
    quote = QuoteRequest(**valid_values)
    assert quote.hours_per_day == 2.5
    assert quote.margin_percent == 45
    assert quote.days_selected == ["Mondays", "Wednesdays", "Fridays"]


@pytest.mark.parametrize("margin", ["0", "91", 0, 91, "-5"])
def test_margin_outside_bounds_rejected(valid_values, margin):
    valid_values["margin_percent"] = margin
    with pytest.raises(ValidationError) as exc:
        QuoteRequest(**valid_values)
    assert exc.value.errors()[0]["loc"] == ("margin_percent",)


@pytest.mark.parametrize("margin", ["1", "90", 1, 90])
def test_margin_bounds_accepted(valid_values, margin):
    valid_values["margin_percent"] = margin
    assert QuoteRequest(**valid_values).margin_percent == float(margin)


def test_blank_costs_count_as_zero(valid_values):
    valid_values["product_cost_weekly"] = ""
    valid_values["overhead_cost_weekly"] = "  "
    quote = QuoteRequest(**valid_values)
    assert quote.product_cost_weekly == 0
    assert quote.overhead_cost_weekly == 0


def test_blank_hours_rejected(valid_values):
    valid_values["hours_per_day"] = ""
    with pytest.raises(ValidationError):
        QuoteRequest(**valid_values)


def test_hours_upper_bound(valid_values):
    valid_values["hours_per_day"] = "24"
    assert QuoteRequest(**valid_values).hours_per_day == 24
    valid_values["hours_per_day"] = "24.25"
    with pytest.raises(ValidationError):
        QuoteRequest(**valid_values)


def test_negative_cost_rejected(valid_values):
    valid_values["overhead_cost_weekly"] = "-0.01"
    with pytest.raises(ValidationError):
        QuoteRequest(**valid_values)


def test_empty_day_selection_rejected(valid_values):
    valid_values["days_selected"] = []
    with pytest.raises(ValidationError) as exc:
        QuoteRequest(**valid_values)
    assert exc.value.errors()[0]["loc"] == ("days_selected",)


def test_unknown_day_and_site_type_rejected(valid_values):
    valid_values["days_selected"] = ["Mondays", "Funday"]
    valid_values["site_type"] = "Spaceport"
    with pytest.raises(ValidationError) as exc:
        QuoteRequest(**valid_values)
    fields = {err["loc"][0] for err in exc.value.errors()}
    assert fields == {"days_selected", "site_type"}


@pytest.mark.parametrize("frequency", ["0", "8", "five"])
def test_frequency_must_be_one_to_seven(valid_values, frequency):
    valid_values["frequency_per_week"] = frequency
    with pytest.raises(ValidationError):
        QuoteRequest(**valid_values)


def test_bad_email_rejected(valid_values):
    valid_values["contact_email"] = "sam-at-acme"
    with pytest.raises(ValidationError):
        QuoteRequest(**valid_values)


def test_short_strings_rejected(valid_values):
    valid_values["company_name"] = "A"
    valid_values["address"] = "Here"
    valid_values["contact_name"] = ""
    with pytest.raises(ValidationError) as exc:
        QuoteRequest(**valid_values)
    fields = {err["loc"][0] for err in exc.value.errors()}
    assert fields == {"company_name", "address", "contact_name"}


def test_webhook_payload_uses_external_labels(valid_values):
    payload = QuoteRequest(**valid_values).to_webhook_payload()

    assert list(payload) == list(WEBHOOK_FIELD_LABELS.values())
    assert payload["Company Name"] == "Acme Ltd"
    assert payload["Contact Email"] == "sam@acme.co.uk"
    assert payload["Frequency Per Week"] == "5"
    assert payload["On Which Days?"] == ["Mondays", "Wednesdays", "Fridays"]
    assert payload["Margin %"] == 45
    assert payload["Product Cost (Weekly)"] == 12.5


def test_webhook_payload_phone_and_pilot_shapes(valid_values):
    valid_values.pop("contact_phone")
    payload = QuoteRequest(**valid_values).to_webhook_payload()
    assert payload["Contact Phone"] == ""
    assert payload["Apply Pilot Pricing (25% off for 30 days)"] == []

    valid_values["apply_pilot_pricing"] = True
    valid_values["contact_phone"] = "01392 000000"
    payload = QuoteRequest(**valid_values).to_webhook_payload()
    assert payload["Contact Phone"] == "01392 000000"
    assert payload["Apply Pilot Pricing (25% off for 30 days)"] == ["yes"]


def test_option_lists():
    assert len(DAYS) == 7
    assert DAYS[0] == "Mondays" and DAYS[-1] == "Sundays"
    assert len(SITE_TYPES) == 6


@pytest.mark.parametrize(
    "field", ["hours_per_day", "margin_percent", "product_cost_weekly", "overhead_cost_weekly"]
)
@pytest.mark.parametrize("value", ["inf", "Infinity", float("inf"), "nan"])
def test_non_finite_numbers_rejected(valid_values, field, value):
    valid_values[field] = value
    with pytest.raises(ValidationError) as exc:
        QuoteRequest(**valid_values)
    assert exc.value.errors()[0]["loc"] == (field,)
