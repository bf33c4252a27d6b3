"""Data Transfer Objects used by the lead form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .form_schema import FormVariant


@dataclass
class LeadInput:
    """Mutable record holding what the user typed in one form."""

    name: str = ""
    phone: str = ""
    email: str = ""
    company: str = ""
    location: str = ""
    consent_given: bool = False
    selections: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def empty(cls, variant: FormVariant) -> "LeadInput":
        """Return the empty defaults for ``variant``."""

        return cls(selections={key: "" for key in variant.select_keys})

    def to_dict(self) -> Dict[str, Any]:
        """Return the record shape sent to the CRM (camelCase keys)."""

        base: Dict[str, Any] = {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "company": self.company,
            "location": self.location,
        }
        base.update(self.selections)
        base["consentGiven"] = self.consent_given
        return base
