"""
Shared fixtures for the Glossário tests.

Puts the repository root on sys.path so `glossario` imports work without an
editable install, and provides in-memory stand-ins for the two external
services (term store and generation backend).
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from glossario.errors import GenerationFailed  # noqa: E402
from glossario.llm_backends import TermGenerator  # noqa: E402
from glossario.schemas import GeneratedTerm  # noqa: E402
from glossario.store import TermStoreClient  # noqa: E402


def generated_payload(term: str = "Kafka", **overrides: Any) -> Dict[str, Any]:
    """A complete camelCase payload as the model would return it"""
    payload = {
        "id": "whatever-the-model-said",
        "term": term,
        "fullTerm": f"Apache {term}",
        "category": "Dados & IA",
        "definition": f"{term} é uma plataforma de streaming de eventos.",
        "phonetic": "Ká-fka",
        "slang": None,
        "translation": "PLATAFORMA DE EVENTOS",
        "examples": [{"title": "PEDIDOS EM TEMPO REAL", "description": "Propaga pedidos entre sistemas."}],
        "analogies": [{"title": "CORREIO CENTRAL", "description": "Recebe e distribui cartas."}],
        "practicalUsage": {"title": "Na daily", "content": "O consumer do Kafka travou de novo."},
        "relatedTerms": ["Streaming", "Broker"],
    }
    payload.update(overrides)
    return payload


def make_generated(term: str = "Kafka", **overrides: Any) -> GeneratedTerm:
    return GeneratedTerm.model_validate(generated_payload(term, **overrides))


class FakeGenerator(TermGenerator):
    """Generation backend that answers from a dict and records every call"""

    def __init__(self, answers: Optional[Dict[str, GeneratedTerm]] = None, fail_on: Optional[List[str]] = None):
        self.answers = answers or {}
        self.fail_on = set(fail_on or [])
        self.calls: List[str] = []
        self.closed = False

    async def generate(self, term: str) -> GeneratedTerm:
        self.calls.append(term)
        if term in self.fail_on:
            raise GenerationFailed(term, "model refused")
        if term in self.answers:
            return self.answers[term]
        return make_generated(term)

    async def close(self):
        self.closed = True


def make_store_mock(rows: Optional[Dict[str, Dict[str, Any]]] = None) -> MagicMock:
    """Term store stand-in whose get_term answers from `rows` keyed by id"""
    rows = rows or {}
    store = MagicMock(spec=TermStoreClient)
    store.get_term = AsyncMock(side_effect=lambda term_id: rows.get(term_id))
    store.insert_term = AsyncMock(return_value=None)
    store.list_terms = AsyncMock(return_value=[])
    store.close = AsyncMock()
    return store


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def store_mock() -> MagicMock:
    return make_store_mock()
