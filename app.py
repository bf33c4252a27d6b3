"""Landing page principal da ODuo (locadoras de equipamentos)."""

from __future__ import annotations

import logging

import streamlit as st

from landing.config import ConfigError
from landing.form.form_schema import LOCADORA_VARIANT
from landing.form.state import get_app_config, get_controller
from landing.form.ui_sections import apply_form_styles, render_lead_form

log = logging.getLogger(__name__)


def _run_bootstrap() -> tuple[bool, str]:
    """Carrega configuração e logging e cacheia o resultado na sessão."""
    try:
        config = get_app_config()
        ok, msg = True, f"Envio de leads em modo '{config.submission.mode}'."
    except ConfigError as exc:
        log.exception("Falha ao carregar a configuração da landing page.")
        ok, msg = False, f"Erro de configuração: {exc}"

    st.session_state["_bootstrap_ok"] = ok
    st.session_state["_bootstrap_msg"] = msg
    return ok, msg


def _hero_section() -> None:
    st.markdown("🔥 **ÚLTIMA CHANCE DO MÊS**")
    st.markdown("# Acelere sua locadora com o método ODuo")
    st.markdown(
        "Aumente em até **3x a quantidade de clientes** da sua locadora com estratégias de "
        "marketing que já colocaram mais de 150 empresas no topo das buscas."
    )


def main() -> None:
    st.set_page_config(page_title="ODuo | Acelere sua locadora", page_icon="🏗️", layout="centered")

    ok = st.session_state.get("_bootstrap_ok")
    msg = st.session_state.get("_bootstrap_msg")
    if ok is None:
        ok, msg = _run_bootstrap()

    apply_form_styles()
    _hero_section()
    st.divider()

    if not ok:
        st.error(msg)
        return

    render_lead_form(get_controller(LOCADORA_VARIANT))


if __name__ == "__main__":
    main()
