import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from factchecker.config import Settings


@pytest.fixture
def settings():
    """Configured settings that never touch a .env file."""
    return Settings(API_KEY="test-key", MODEL_NAME="gemini-test", _env_file=None)


def make_response(text=None, citations=()):
    """Shape-alike of a generate_content response with grounding chunks."""
    chunks = [SimpleNamespace(web=SimpleNamespace(uri=uri, title=title)) for uri, title in citations]
    candidate = SimpleNamespace(grounding_metadata=SimpleNamespace(grounding_chunks=chunks))
    return SimpleNamespace(text=text, candidates=[candidate])


def verdict_json(status="REAL", explanation="Confirmed by several outlets.", sources=()):
    return json.dumps({
        "status": status,
        "explanation": explanation,
        "sources": [{"title": t, "url": u} for t, u in sources],
    })


def make_client(response=None, error=None):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=error)
    return client
