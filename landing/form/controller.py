"""Form state and submission lifecycle of a lead form."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .dto import LeadInput
from .form_schema import FormVariant
from .mapper import map_phone_input, map_ui_to_lead
from .notifications import ERROR_NOTIFICATION, SUCCESS_NOTIFICATION, Notifier
from .submission import LeadSubmitter
from .validators import CONSENT_FIELD, Rule, build_rules, validate_lead

log = logging.getLogger(__name__)

_TEXT_FIELDS = ("name", "phone", "email", "company", "location")


class SubmissionState(enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


StateListener = Callable[[SubmissionState], None]


class FormController:
    """Owns the field values of one form and drives its submission.

    Only one submission may be in flight per instance: ``submit`` returns
    immediately while the state is ``SUBMITTING``. The collaborator call is
    the only suspension point and always runs to completion.
    """

    def __init__(
        self,
        variant: FormVariant,
        submitter: LeadSubmitter,
        notify: Notifier,
    ) -> None:
        self.variant = variant
        self._submitter = submitter
        self._notify = notify
        self._rules: Dict[str, Rule] = build_rules(variant)
        self._listeners: List[StateListener] = []
        self.lead = LeadInput.empty(variant)
        self.errors: Dict[str, str] = {}
        self.state = SubmissionState.IDLE
        self.last_outcome: Optional[SubmissionState] = None

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    def on_state_change(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def _transition(self, state: SubmissionState) -> None:
        self.state = state
        for listener in self._listeners:
            listener(state)

    # ------------------------------------------------------------------
    # Field wiring
    # ------------------------------------------------------------------
    def set_phone(self, raw: Any) -> str:
        """Format raw keyboard input and store it; returns the masked value."""

        self.lead.phone = map_phone_input(raw)
        return self.lead.phone

    def load_values(self, data: Mapping[str, Any]) -> LeadInput:
        """Replace the lead with the current widget values."""

        self.lead = map_ui_to_lead(data, self.variant)
        return self.lead

    def update(self, **fields: Any) -> None:
        for name, value in fields.items():
            if name == "phone":
                self.set_phone(value)
            elif name in _TEXT_FIELDS:
                setattr(self.lead, name, "" if value is None else str(value).strip())
            elif name in (CONSENT_FIELD, "consent_given"):
                self.set_consent(value)
            elif name in self.variant.select_keys:
                self.select(name, value)
            else:
                raise KeyError(f"campo desconhecido: {name}")

    def select(self, key: str, value: Any) -> None:
        if key not in self.variant.select_keys:
            raise KeyError(f"campo de seleção desconhecido: {key}")
        self.lead.selections[key] = "" if value is None else str(value)

    def set_consent(self, value: Any) -> None:
        self.lead.consent_given = bool(value)

    def validate(self) -> Dict[str, str]:
        self.errors = validate_lead(self.lead, self._rules)
        return self.errors

    def reset(self) -> None:
        self.lead = LeadInput.empty(self.variant)
        self.errors = {}

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------
    async def submit(self) -> Optional[SubmissionState]:
        """Validate and deliver the lead.

        Returns ``None`` when ignored because another submission is in
        flight, ``IDLE`` when validation failed, or the settled outcome
        (``SUCCEEDED``/``FAILED``). The form is back to ``IDLE`` on return.
        """

        if self.is_submitting:
            log.info("lead.submit.skip variant=%s state=submitting", self.variant.key)
            return None

        errors = self.validate()
        if errors:
            log.info(
                "lead.validate.fail variant=%s count=%s fields=%s",
                self.variant.key,
                len(errors),
                ",".join(errors),
            )
            return SubmissionState.IDLE
        log.info("lead.validate.ok variant=%s", self.variant.key)

        self._transition(SubmissionState.SUBMITTING)
        log.info("lead.submit.start variant=%s", self.variant.key)
        outcome = SubmissionState.FAILED
        try:
            await self._submitter.submit(self.lead, self.variant)
        except Exception:
            log.exception("lead.submit.fail variant=%s", self.variant.key)
            self._transition(SubmissionState.FAILED)
            self._notify(ERROR_NOTIFICATION)
        else:
            outcome = SubmissionState.SUCCEEDED
            log.info("lead.submit.ok variant=%s", self.variant.key)
            self._transition(SubmissionState.SUCCEEDED)
            self._notify(SUCCESS_NOTIFICATION)
            self.reset()
        finally:
            self.last_outcome = outcome
            self._transition(SubmissionState.IDLE)
        return outcome
