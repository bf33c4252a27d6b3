"""Transient notifications shown after a submission settles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Literal, MutableMapping, Optional

import streamlit as st

log = logging.getLogger(__name__)

NotificationVariant = Literal["default", "destructive"]


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    duration_ms: int = 5000
    variant: NotificationVariant = "default"


Notifier = Callable[[Notification], None]

SUCCESS_NOTIFICATION = Notification(
    title="Obrigado!",
    description="Em breve nossa equipe entrará em contato pelo WhatsApp.",
    duration_ms=5000,
)

ERROR_NOTIFICATION = Notification(
    title="Erro",
    description="Ocorreu um erro ao enviar o formulário. Tente novamente.",
    duration_ms=5000,
    variant="destructive",
)

_ICONS = {"default": "✅", "destructive": "⚠️"}
_QUEUE_KEY = "lead_form_notifications"


def streamlit_notifier(notification: Notification) -> None:
    """Enfileira a notificação para o próximo render da página."""

    log.info("notify variant=%s title=%s", notification.variant, notification.title)
    st.session_state.setdefault(_QUEUE_KEY, []).append(notification)


def flush_notifications(session: Optional[MutableMapping[str, Any]] = None) -> List[Notification]:
    """Show queued notifications as toasts and empty the queue."""

    session = st.session_state if session is None else session
    queued: List[Notification] = session.pop(_QUEUE_KEY, None) or []
    for notification in queued:
        st.toast(
            f"**{notification.title}**\n\n{notification.description}",
            icon=_ICONS.get(notification.variant, _ICONS["default"]),
        )
    return queued
