"""Validation rules for the lead form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Union

from .dto import LeadInput
from .form_schema import FormVariant

PHONE_RE = re.compile(r"^\(\d{2}\)\s\d{4,5}-\d{4}$", re.ASCII)
EMAIL_RE = re.compile(
    r"^(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+\-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)

CONSENT_FIELD = "consentGiven"


@dataclass(frozen=True)
class Rule:
    predicate: Callable[[Any], bool]
    message: str


def _min_length(size: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return len(str(value or "").strip()) >= size

    return check


def _matches(pattern: re.Pattern[str]) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return pattern.fullmatch(str(value or "")) is not None

    return check


def _one_of(options) -> Callable[[Any], bool]:
    allowed = frozenset(options)

    def check(value: Any) -> bool:
        return value in allowed

    return check


def _is_true(value: Any) -> bool:
    return value is True


BASE_RULES: Dict[str, Rule] = {
    "name": Rule(_min_length(2), "Nome deve ter pelo menos 2 caracteres"),
    "phone": Rule(_matches(PHONE_RE), "Telefone deve estar no formato (99) 99999-9999"),
    "email": Rule(_matches(EMAIL_RE), "E-mail inválido"),
    "company": Rule(_min_length(2), "Nome da empresa é obrigatório"),
    "location": Rule(_min_length(2), "Cidade/Estado é obrigatório"),
}

CONSENT_RULE = Rule(_is_true, "É necessário aceitar os termos LGPD")


def build_rules(variant: FormVariant) -> Dict[str, Rule]:
    """Return the field → rule mapping for ``variant`` in display order."""

    rules = dict(BASE_RULES)
    for field in variant.select_fields:
        rules[field.key] = Rule(_one_of(field.options), field.message)
    rules[CONSENT_FIELD] = CONSENT_RULE
    return rules


def validate_lead(
    lead: LeadInput, rules: Union[FormVariant, Mapping[str, Rule]]
) -> Dict[str, str]:
    """Return the error message of every field whose value fails its rule.

    Each rule is evaluated on its own, so one failing field never hides the
    error of another. An empty mapping means the lead can be submitted.
    """

    if isinstance(rules, FormVariant):
        rules = build_rules(rules)
    values = lead.to_dict()
    errors: Dict[str, str] = {}
    for field, rule in rules.items():
        if not rule.predicate(values.get(field)):
            errors[field] = rule.message
    return errors


def is_valid(errors: Mapping[str, str]) -> bool:
    return not errors
