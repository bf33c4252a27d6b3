"""Streamlit rendering of the generic lead form."""

from __future__ import annotations

import logging
from typing import Any, Dict

import streamlit as st

from .controller import FormController
from .form_schema import FormVariant
from .formatting import PHONE_MAX_LENGTH
from .mapper import map_phone_input
from .notifications import flush_notifications
from .state import (
    consume_widget_reset,
    is_submission_pending,
    request_submission,
    run_pending_submission,
)
from .validators import CONSENT_FIELD

log = logging.getLogger(__name__)

_TEXT_INPUTS = (
    ("name", "Nome Completo *", "Seu nome completo"),
    ("phone", "WhatsApp *", "(99) 99999-9999"),
    ("email", "E-mail *", "seu@email.com"),
    ("company", "Empresa *", "Nome da sua empresa"),
    ("location", "Cidade/Estado *", "Cidade, Estado"),
)


def apply_form_styles() -> None:
    st.markdown(
        """
        <style>
        .error-text {
            color: #b91c1c;
            font-size: 0.9rem;
            margin-top: -4px;
            margin-bottom: 8px;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def _widget_key(variant: FormVariant, field: str) -> str:
    return f"{variant.key}_{field}"


def _format_phone_state(key: str) -> None:
    raw = st.session_state.get(key, "")
    st.session_state[key] = map_phone_input(raw)


def _collect_values(variant: FormVariant) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for field, _label, _placeholder in _TEXT_INPUTS:
        values[field] = st.session_state.get(_widget_key(variant, field), "")
    for select in variant.select_fields:
        values[select.key] = st.session_state.get(_widget_key(variant, select.key))
    values[CONSENT_FIELD] = bool(st.session_state.get(_widget_key(variant, CONSENT_FIELD)))
    return values


def _clear_widgets(variant: FormVariant) -> None:
    for field, _label, _placeholder in _TEXT_INPUTS:
        st.session_state[_widget_key(variant, field)] = ""
    for select in variant.select_fields:
        st.session_state[_widget_key(variant, select.key)] = None
    st.session_state[_widget_key(variant, CONSENT_FIELD)] = False


def _handle_submit(controller: FormController) -> None:
    values = _collect_values(controller.variant)
    request_submission(st.session_state, controller, values)


def _field_error(controller: FormController, field: str) -> None:
    message = controller.errors.get(field)
    if message:
        st.markdown(f"<div class='error-text'>{message}</div>", unsafe_allow_html=True)


def render_lead_form(controller: FormController) -> None:
    """Render the form of ``controller.variant`` with inline errors."""

    variant = controller.variant
    # widget values can only be reset before the widgets are instantiated
    if consume_widget_reset(st.session_state, variant):
        _clear_widgets(variant)
    flush_notifications()

    st.subheader(variant.title)
    st.caption(variant.subtitle)

    rows = [_TEXT_INPUTS[i : i + 2] for i in range(0, len(_TEXT_INPUTS), 2)]
    for row in rows:
        columns = st.columns(2)
        for column, (field, label, placeholder) in zip(columns, row):
            with column:
                key = _widget_key(variant, field)
                if field == "phone":
                    st.text_input(
                        label,
                        key=key,
                        placeholder=placeholder,
                        max_chars=PHONE_MAX_LENGTH,
                        on_change=_format_phone_state,
                        args=(key,),
                    )
                else:
                    st.text_input(label, key=key, placeholder=placeholder)
                _field_error(controller, field)

    for select in variant.select_fields:
        st.selectbox(
            select.label,
            select.options,
            index=None,
            placeholder=select.placeholder,
            key=_widget_key(variant, select.key),
        )
        _field_error(controller, select.key)

    st.checkbox(
        "Autorizo o uso dos meus dados para contato comercial. *",
        key=_widget_key(variant, CONSENT_FIELD),
    )
    _field_error(controller, CONSENT_FIELD)

    pending = is_submission_pending(st.session_state, variant) or controller.is_submitting
    st.button(
        "Enviando..." if pending else variant.submit_label,
        key=_widget_key(variant, "submit"),
        type="primary",
        use_container_width=True,
        disabled=pending,
        on_click=_handle_submit,
        args=(controller,),
    )

    if run_pending_submission(st.session_state, controller) is not None:
        st.rerun()
