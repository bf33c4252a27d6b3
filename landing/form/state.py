"""Session helpers for the landing page forms."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional

import streamlit as st

from landing.config import AppConfig, load_config

from .controller import FormController, SubmissionState
from .form_schema import FormVariant
from .notifications import streamlit_notifier
from .submission import build_submitter

log = logging.getLogger(__name__)

_CONTROLLERS_KEY = "lead_form_controllers"
_PENDING_KEY = "lead_form_pending"
_RESET_KEY = "lead_form_reset"


def get_app_config() -> AppConfig:
    config: Optional[AppConfig] = st.session_state.get("app_config")
    if config is None:
        config = load_config()
        st.session_state.app_config = config
    return config


def initialize_session(session: Optional[MutableMapping[str, Any]] = None) -> None:
    session = st.session_state if session is None else session
    session.setdefault(_CONTROLLERS_KEY, {})
    session.setdefault(_PENDING_KEY, set())
    session.setdefault(_RESET_KEY, set())


def get_controller(variant: FormVariant) -> FormController:
    """Return the controller owning ``variant``'s form in this session."""

    initialize_session()
    controllers: Dict[str, FormController] = st.session_state[_CONTROLLERS_KEY]
    controller = controllers.get(variant.key)
    if controller is None:
        config = get_app_config()
        controller = FormController(
            variant,
            submitter=build_submitter(config.submission),
            notify=streamlit_notifier,
        )
        controllers[variant.key] = controller
    return controller


# ----------------------------------------------------------------------
# Two-phase submission: the button callback only marks the form pending,
# the page body runs the submission after rendering a disabled button.
# ----------------------------------------------------------------------
def request_submission(
    session: MutableMapping[str, Any],
    controller: FormController,
    values: Mapping[str, Any],
) -> bool:
    """Load widget values and mark the form pending; False if already pending."""

    initialize_session(session)
    key = controller.variant.key
    if key in session[_PENDING_KEY] or controller.is_submitting:
        log.info("lead.submit.skip variant=%s state=pending", key)
        return False
    controller.load_values(values)
    session[_PENDING_KEY].add(key)
    return True


def is_submission_pending(session: MutableMapping[str, Any], variant: FormVariant) -> bool:
    return variant.key in session.get(_PENDING_KEY, ())


def run_pending_submission(
    session: MutableMapping[str, Any], controller: FormController
) -> Optional[SubmissionState]:
    """Run the pending submission to completion, if any."""

    key = controller.variant.key
    if not is_submission_pending(session, controller.variant):
        return None
    try:
        outcome = asyncio.run(controller.submit())
    finally:
        session[_PENDING_KEY].discard(key)
    if outcome is SubmissionState.SUCCEEDED:
        session[_RESET_KEY].add(key)
    return outcome


def consume_widget_reset(session: MutableMapping[str, Any], variant: FormVariant) -> bool:
    """True once after a successful submission of ``variant``."""

    pending_resets = session.get(_RESET_KEY)
    if not pending_resets or variant.key not in pending_resets:
        return False
    pending_resets.discard(variant.key)
    return True
