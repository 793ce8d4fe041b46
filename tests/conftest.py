"""Shared fixtures for liturgia tests."""

import pytest

from liturgia.models import LiturgyDocument


@pytest.fixture
def sample_payload():
    """Liturgy service response for a day with a second reading."""
    return {
        "data": "25/12/2024",
        "liturgia": "Natal do Senhor, Missa do Dia",
        "cor": "Branco",
        "primeiraLeitura": {
            "referencia": "Is 52,7-10",
            "titulo": "Leitura do Livro do Profeta Isaías",
            "texto": "7Como são belos, andando sobre os montes,\n8 Eis a voz das tuas sentinelas",
        },
        "segundaLeitura": {
            "referencia": "Hb 1,1-6",
            "titulo": "Leitura da Carta aos Hebreus",
            "texto": "1Muitas vezes e de muitos modos falou Deus outrora aos nossos pais",
        },
        "salmo": {
            "referencia": "Sl 97(98),1.2-3ab.3cd-4.5-6 (R. 3cd)",
            "titulo": "Responsório",
            "refrao": "Os confins do universo contemplaram a salvação do nosso Deus.",
            "texto": "— 1Cantai ao Senhor Deus um canto novo,\n— 2 O Senhor fez conhecer a salvação",
        },
        "evangelho": {
            "referencia": "Jo 1,1-18",
            "titulo": "Proclamação do Evangelho de Jesus Cristo segundo João",
            "texto": "1 No princípio era a Palavra,\n2Ela existia, no princípio, junto de Deus.",
        },
    }


@pytest.fixture
def weekday_payload(sample_payload):
    """Liturgy service response for a day without a second reading."""
    payload = dict(sample_payload)
    payload["liturgia"] = "Terça-feira da 1ª Semana do Advento"
    payload["cor"] = "Roxo"
    payload["segundaLeitura"] = {"referencia": "", "titulo": "", "texto": ""}
    return payload


@pytest.fixture
def sample_document(sample_payload):
    """Parsed liturgy with a second reading."""
    return LiturgyDocument.from_api(sample_payload)


@pytest.fixture
def weekday_document(weekday_payload):
    """Parsed liturgy without a second reading."""
    return LiturgyDocument.from_api(weekday_payload)
