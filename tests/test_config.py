import pytest
from pydantic import ValidationError

from factchecker.config import Settings
from factchecker.models import FactCheckResult, FactCheckStatus, ModelVerdict


def test_defaults(monkeypatch):
    for name in ("API_KEY", "MODEL_NAME", "ALLOWED_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.API_KEY is None
    assert s.has_api_key is False
    assert s.MODEL_NAME == "gemini-3-flash-preview"
    assert s.origins == ["http://localhost:3000"]


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("API_KEY", "from-env")
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.example, ,http://b.example")

    s = Settings(_env_file=None)

    assert s.has_api_key
    assert s.origins == ["http://a.example", "http://b.example"]


def test_result_is_frozen():
    result = FactCheckResult.failure("boom")

    assert result.status == FactCheckStatus.ERROR
    assert result.sources == []
    with pytest.raises(ValidationError):
        result.explanation = "changed"


def test_model_cannot_answer_error():
    with pytest.raises(ValidationError):
        ModelVerdict(status=FactCheckStatus.ERROR, explanation="x")
