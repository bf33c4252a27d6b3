"""Lead form module for the ODuo landing pages."""

from .controller import FormController, SubmissionState
from .dto import LeadInput
from .form_schema import CONSULTORIA_VARIANT, LOCADORA_VARIANT, FormVariant, get_variant
from .formatting import format_phone, phone_digits
from .validators import validate_lead

__all__ = [
    "CONSULTORIA_VARIANT",
    "FormController",
    "FormVariant",
    "LOCADORA_VARIANT",
    "LeadInput",
    "SubmissionState",
    "format_phone",
    "get_variant",
    "phone_digits",
    "validate_lead",
]
