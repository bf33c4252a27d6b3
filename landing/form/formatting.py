"""Phone mask applied while the user types."""

from __future__ import annotations

import re
from typing import Any

_NON_DIGIT_RE = re.compile(r"\D+", re.ASCII)

PHONE_MAX_DIGITS = 11
# len("(11) 98765-4321")
PHONE_MAX_LENGTH = 15


def phone_digits(value: Any) -> str:
    """Return the significant digits of a phone number (at most 11)."""

    text = "" if value is None else str(value)
    return re.sub(_NON_DIGIT_RE, "", text)[:PHONE_MAX_DIGITS]


def format_phone(value: Any) -> str:
    """Aplica a máscara brasileira progressiva ``(DD) DDDDD-DDDD``.

    Qualquer entrada é aceita: caracteres que não são dígitos são descartados
    e dígitos além do 11º são ignorados. Reaplicar a função ao próprio
    resultado devolve o mesmo texto.
    """

    digits = phone_digits(value)
    if len(digits) <= 2:
        return f"({digits}"
    if len(digits) <= 7:
        return f"({digits[:2]}) {digits[2:]}"
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
