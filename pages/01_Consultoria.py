"""Página de diagnóstico comercial para locadoras."""

from __future__ import annotations

import logging

import streamlit as st

from landing.config import ConfigError
from landing.form.form_schema import CONSULTORIA_VARIANT
from landing.form.state import get_controller
from landing.form.ui_sections import apply_form_styles, render_lead_form

log = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title="ODuo | Diagnóstico gratuito", page_icon="📊", layout="centered")

    apply_form_styles()
    st.title("Diagnóstico gratuito para sua locadora")
    st.caption("Google Ads, Meta Ads, SEO e automações integradas")

    try:
        controller = get_controller(CONSULTORIA_VARIANT)
    except ConfigError as exc:
        log.exception("Falha ao carregar a configuração da página de consultoria")
        st.error(f"Erro de configuração: {exc}")
        return

    render_lead_form(controller)


if __name__ == "__main__":
    main()
