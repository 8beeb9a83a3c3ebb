from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from d7_engine.config import Settings
from d7_engine.logic import insights
from d7_engine.logic.stats import SummaryStats

STATS = SummaryStats(
    total_records=3,
    total_base_value=21000.5,
    total_vat=1470.04,
    total_product_value=22970.54,
    average_aging=40.33,
    overdue_count=1,
)
SETTINGS = Settings(csv_url="https://example.test", openai_api_key="sk-test", openai_model="test-model")


class ResponsesStub:
    def __init__(self, output_text: str | None = None, exc: Exception | None = None):
        self._output_text = output_text
        self._exc = exc
        self.calls: list[dict[str, Any]] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self._exc is not None:
            raise self._exc
        return SimpleNamespace(output_text=self._output_text)


def _client(**kwargs):
    return SimpleNamespace(responses=ResponsesStub(**kwargs))


def test_summary_text_contents():
    text = insights.build_summary_text(STATS)
    assert "รายการทั้งหมด 3 รายการ" in text
    assert "21,000.50 บาท" in text
    assert "วันคงค้างเฉลี่ย 40 วัน" in text
    assert "รายการเกินกำหนด 1 รายการ" in text


def test_generate_insights_sends_one_request():
    client = _client(output_text="  1. เร่งโอน\n2. ...\n3. ...  ")
    result = insights.generate_insights(STATS, client=client, settings=SETTINGS)

    assert result == "1. เร่งโอน\n2. ...\n3. ..."
    (call,) = client.responses.calls
    assert call["model"] == "test-model"
    assert call["instructions"] == insights.SYSTEM_INSTRUCTION
    assert call["input"].startswith(insights.PROMPT_PREFIX)
    assert insights.build_summary_text(STATS) in call["input"]


def test_empty_response_text_uses_fallback():
    client = _client(output_text="")
    assert insights.generate_insights(STATS, client=client, settings=SETTINGS) == insights.EMPTY_RESPONSE_TEXT


def test_client_error_returns_failure_text():
    client = _client(exc=RuntimeError("quota"))
    assert insights.generate_insights(STATS, client=client, settings=SETTINGS) == insights.FAILURE_TEXT
    assert len(client.responses.calls) == 1


def test_missing_api_key_returns_failure_text():
    settings = Settings(csv_url="https://example.test", openai_api_key="")
    assert insights.generate_insights(STATS, settings=settings) == insights.FAILURE_TEXT


def test_openai_client_is_built_from_settings(monkeypatch):
    created = {}

    def fake_openai(api_key):
        created["api_key"] = api_key
        return _client(output_text="ok")

    monkeypatch.setattr(insights, "OpenAI", fake_openai)
    assert insights.generate_insights(STATS, settings=SETTINGS) == "ok"
    assert created == {"api_key": "sk-test"}


def test_no_records_means_no_request():
    client = _client(output_text="should not be used")
    assert insights.generate_insights(SummaryStats(), client=client, settings=SETTINGS) is None
    assert client.responses.calls == []


@pytest.mark.parametrize("text", [insights.FAILURE_TEXT, insights.EMPTY_RESPONSE_TEXT])
def test_fallbacks_are_not_empty(text):
    assert text.strip()
