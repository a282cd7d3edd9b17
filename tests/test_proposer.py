"""Tests for the HTTP shift proposer (network calls are stubbed)."""

import pytest
import requests

from shiftplanner.ai import proposer as proposer_module
from shiftplanner.ai.proposer import AnthropicShiftProposer, build_prompt
from shiftplanner.config import ProposerSettings
from shiftplanner.engine import ScheduleGenerator, build_planning_context
from shiftplanner.engine.base import ProposerError


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


@pytest.fixture
def context(request_factory):
    return build_planning_context(request_factory())


@pytest.fixture
def calls(monkeypatch):
    """Record requests.post calls and answer with whatever the test queues."""
    recorded = {"responses": []}

    def fake_post(url, json=None, headers=None, timeout=None):
        recorded["url"] = url
        recorded["json"] = json
        recorded["headers"] = headers
        recorded["timeout"] = timeout
        response = recorded["responses"].pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(proposer_module.requests, "post", fake_post)
    return recorded


def test_prompt_mentions_week_and_rules(context):
    prompt = build_prompt(context)
    assert "2025-03-03" in prompt
    assert "For major events (multiplier > 2.0), schedule ALL available staff" in prompt
    assert '"shifts"' in prompt


def test_propose_returns_joined_text(calls, context):
    calls["responses"].append(
        FakeResponse({"content": [{"type": "text", "text": '{"shifts": '}, {"type": "text", "text": "[]}"}]})
    )
    settings = ProposerSettings(timeout_seconds=5)
    text = AnthropicShiftProposer(settings, api_key="k").propose(context)

    assert text == '{"shifts": []}'
    assert calls["url"] == settings.api_url
    assert calls["timeout"] == 5
    assert calls["headers"]["x-api-key"] == "k"
    assert calls["headers"]["anthropic-version"] == settings.api_version
    assert calls["json"]["model"] == settings.model
    assert calls["json"]["max_tokens"] == 4000


def test_missing_api_key(context, monkeypatch):
    monkeypatch.delenv("SHIFT_TEST_MISSING_KEY", raising=False)
    settings = ProposerSettings(api_key_env="SHIFT_TEST_MISSING_KEY")
    with pytest.raises(ProposerError):
        AnthropicShiftProposer(settings, api_key="").propose(context)


@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("unreachable"),
        FakeResponse({}, status=529),
        FakeResponse(ValueError("not json")),
        FakeResponse({"content": []}),
        FakeResponse({"error": "overloaded"}),
    ],
    ids=["connection", "http-error", "bad-body", "empty-content", "no-content"],
)
def test_request_failures_raise_proposer_error(calls, context, response):
    calls["responses"].append(response)
    with pytest.raises(ProposerError):
        AnthropicShiftProposer(api_key="k").propose(context)


def test_end_to_end_with_stubbed_api(calls, request_factory, week_start):
    body = (
        "```json\n"
        '{"shifts": [{"employee_id": "e1", "date": "' + week_start.isoformat() + '", '
        '"start_time": "16:00", "end_time": "22:00", "role": "cook", "shift_type": "dinner"}], '
        '"recommendations": ["Add a driver on Friday"]}\n'
        "```"
    )
    calls["responses"].append(FakeResponse({"content": [{"type": "text", "text": body}]}))
    result = ScheduleGenerator(proposer=AnthropicShiftProposer(api_key="k")).generate(request_factory())

    assert result.source == "proposer"
    assert result.recommendations == ["Add a driver on Friday"]
    assert result.schedule.total_labor_cost == 90.0


def test_api_outage_falls_back(calls, request_factory):
    calls["responses"].append(requests.Timeout("timed out"))
    result = ScheduleGenerator(proposer=AnthropicShiftProposer(api_key="k")).generate(request_factory())
    assert result.source == "fallback"
    assert result.schedule.shifts
