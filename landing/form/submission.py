"""Collaborators that deliver a validated lead to the CRM."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Optional

import requests

from landing.config import SubmissionConfig

from .dto import LeadInput
from .form_schema import FormVariant
from .mapper import lead_to_webhook_payload

log = logging.getLogger(__name__)


class SubmissionError(RuntimeError):
    """Falha ao entregar o lead ao CRM."""

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response


class LeadSubmitter(ABC):
    """Receives one validated lead; raises when delivery fails."""

    @abstractmethod
    async def submit(self, lead: LeadInput, variant: FormVariant) -> None:
        raise NotImplementedError


class SimulatedSubmitter(LeadSubmitter):
    """Simula o webhook do CRM com latência fixa; nunca falha."""

    def __init__(self, delay_ms: int = 1500) -> None:
        self.delay_ms = delay_ms
        self.calls = 0

    async def submit(self, lead: LeadInput, variant: FormVariant) -> None:
        self.calls += 1
        await asyncio.sleep(self.delay_ms / 1000)
        log.info("Dados enviados para CRM: %s", lead_to_webhook_payload(lead, variant))


class WebhookSubmitter(LeadSubmitter):
    """POSTs the lead as JSON to a CRM webhook."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def _post(self, payload: dict) -> None:
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SubmissionError(f"Falha de rede ao chamar o webhook: {exc}") from exc

        if not response.ok:
            raise SubmissionError(
                f"Webhook respondeu {response.status_code}: {response.text[:200]}", response
            )

    async def submit(self, lead: LeadInput, variant: FormVariant) -> None:
        payload = lead_to_webhook_payload(lead, variant)
        log.info("webhook.post variant=%s url=%s", variant.key, self.url)
        await asyncio.to_thread(self._post, payload)


def build_submitter(config: SubmissionConfig) -> LeadSubmitter:
    """Escolhe o colaborador de envio conforme a configuração."""

    if config.mode == "webhook":
        if not config.webhook_url:
            raise ValueError("webhook_url é obrigatório no modo webhook")
        return WebhookSubmitter(config.webhook_url, timeout=config.webhook_timeout)
    return SimulatedSubmitter(delay_ms=config.simulated_delay_ms)
