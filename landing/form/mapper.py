"""Mapping utilities for the lead form."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .dto import LeadInput
from .form_schema import FormVariant
from .formatting import format_phone, phone_digits


def map_phone_input(value: Any) -> str:
    """Mask a phone widget value; an empty widget stays empty."""

    text = _to_str(value)
    return format_phone(text) if text else ""


def map_ui_to_lead(data: Mapping[str, Any], variant: FormVariant) -> LeadInput:
    """Create a LeadInput from the widget values of ``variant``."""

    selections = {key: _to_str(data.get(key)) for key in variant.select_keys}
    return LeadInput(
        name=_to_str(data.get("name")),
        phone=map_phone_input(data.get("phone")),
        email=_to_str(data.get("email")),
        company=_to_str(data.get("company")),
        location=_to_str(data.get("location")),
        consent_given=bool(data.get("consentGiven", False)),
        selections=selections,
    )


def lead_to_webhook_payload(lead: LeadInput, variant: FormVariant) -> Dict[str, Any]:
    """Prepare the JSON body expected by the CRM webhook."""

    payload = lead.to_dict()
    payload["phoneDigits"] = phone_digits(lead.phone)
    payload["variant"] = variant.key
    return payload


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
