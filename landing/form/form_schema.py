"""Field-set configuration shared by the landing page forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


EQUIPMENT_OPTIONS = [
    "Andaime",
    "Escora Metálica",
    "Betoneira",
    "Compactador",
    "Outros",
]

REVENUE_OPTIONS = [
    "Até R$ 50 mil",
    "De R$ 50 mil a R$ 100 mil",
    "De R$ 100 mil a R$ 300 mil",
    "De R$ 300 mil a R$ 1 milhão",
    "Acima de R$ 1 milhão",
]

CHALLENGE_OPTIONS = [
    "Gerar mais leads",
    "Converter orçamentos em contratos",
    "Aparecer no Google",
    "Presença nas redes sociais",
    "Organizar o processo comercial",
    "Outros",
]


@dataclass(frozen=True)
class SelectField:
    """Campo de seleção com um conjunto fixo de opções."""

    key: str
    label: str
    options: Tuple[str, ...]
    message: str
    placeholder: str = "Selecione"


@dataclass(frozen=True)
class FormVariant:
    """Configuration of one landing page form.

    Both pages render the same generic form; they only differ in copy and in
    the select fields listed here.
    """

    key: str
    title: str
    subtitle: str
    select_fields: Tuple[SelectField, ...]
    submit_label: str = "Quero receber uma proposta agora"

    @property
    def select_keys(self) -> Tuple[str, ...]:
        return tuple(field.key for field in self.select_fields)


LOCADORA_VARIANT = FormVariant(
    key="locadora",
    title="Solicite sua Proposta",
    subtitle="Preencha os dados e receba uma cotação personalizada",
    select_fields=(
        SelectField(
            key="equipment",
            label="Equipamento de Interesse *",
            options=tuple(EQUIPMENT_OPTIONS),
            message="Selecione um equipamento",
            placeholder="Selecione o equipamento",
        ),
    ),
)

CONSULTORIA_VARIANT = FormVariant(
    key="consultoria",
    title="Agende seu Diagnóstico",
    subtitle="Conte um pouco sobre sua locadora e receba um plano de aceleração",
    select_fields=(
        SelectField(
            key="monthlyRevenue",
            label="Faturamento Mensal *",
            options=tuple(REVENUE_OPTIONS),
            message="Selecione a faixa de faturamento",
            placeholder="Selecione a faixa",
        ),
        SelectField(
            key="mainChallenge",
            label="Principal Desafio *",
            options=tuple(CHALLENGE_OPTIONS),
            message="Selecione o principal desafio",
            placeholder="Selecione o desafio",
        ),
    ),
    submit_label="Quero meu diagnóstico gratuito",
)

VARIANTS: Dict[str, FormVariant] = {
    LOCADORA_VARIANT.key: LOCADORA_VARIANT,
    CONSULTORIA_VARIANT.key: CONSULTORIA_VARIANT,
}


def get_variant(key: str) -> FormVariant:
    """Return the registered variant or raise ``KeyError``."""

    try:
        return VARIANTS[key]
    except KeyError:
        raise KeyError(f"variante de formulário desconhecida: {key}") from None
