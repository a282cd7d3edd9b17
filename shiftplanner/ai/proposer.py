"""Shift proposer backed by a hosted language model (messages API over HTTP)."""

from __future__ import annotations

import json
from typing import Any, Dict, List

import requests
from dotenv import load_dotenv

from shiftplanner.config import ProposerSettings
from shiftplanner.engine.base import ProposerError, ShiftProposer

RESPONSE_FORMAT = """{
  "shifts": [
    {
      "employee_id": "string",
      "date": "YYYY-MM-DD",
      "start_time": "HH:MM",
      "end_time": "HH:MM",
      "role": "cook|server|delivery|prep|manager",
      "shift_type": "morning_prep|lunch|dinner|late_night|full_day",
      "notes": "optional string"
    }
  ],
  "recommendations": ["string"],
  "warnings": ["string"]
}"""


def build_prompt(context: Dict[str, Any]) -> str:
    """Render the planning context as the instruction text sent to the model."""
    rules = "\n".join(f"{i}. {rule}" for i, rule in enumerate(context.get("planning_rules", []), start=1))
    sections = [
        "You are an expert restaurant staff scheduler. "
        f"Create an optimal weekly schedule for the week starting {context['week_start']}.",
        "DAILY FORECASTS (with special event adjustments):\n"
        + json.dumps(context["daily_forecasts"], indent=2),
        "AVAILABLE EMPLOYEES:\n" + json.dumps(context["available_employees"], indent=2),
        "CONSTRAINTS:\n" + json.dumps(context["constraints"], indent=2),
        "SHIFT TEMPLATES:\n" + json.dumps(context["shift_templates"], indent=2),
        "ROLE REQUIREMENTS BY SHIFT:\n" + json.dumps(context["role_requirements"], indent=2),
        "SCHEDULING RULES:\n" + rules,
        "Respond ONLY with a JSON object in this exact format:\n" + RESPONSE_FORMAT,
    ]
    return "\n\n".join(sections)


class AnthropicShiftProposer(ShiftProposer):
    """
    Ask a hosted model to plan the week.

    The API key is read from the environment (a local .env file is honoured)
    unless one is passed in explicitly.
    """

    def __init__(self, settings: ProposerSettings | None = None, api_key: str | None = None):
        self.settings = settings or ProposerSettings()
        if api_key is None:
            load_dotenv()
            api_key = self.settings.api_key()
        self.api_key = api_key

    def _payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.settings.model,
            "max_tokens": self.settings.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self.api_key or "",
            "anthropic-version": self.settings.api_version,
        }

    def propose(self, context: Dict[str, Any]) -> str:
        """
        Send the planning prompt and return the model's text answer.

        Raises:
            ProposerError: If no API key is configured, the request fails,
                or the response carries no text
        """
        if not self.api_key:
            raise ProposerError(f"{self.settings.api_key_env} is not set")

        print(f"[INFO] Requesting shift proposal from {self.settings.model}")
        try:
            resp = requests.post(
                self.settings.api_url,
                json=self._payload(build_prompt(context)),
                headers=self._headers(),
                timeout=self.settings.timeout_seconds,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise ProposerError(f"Shift proposer request failed: {e}") from e
        except ValueError as e:
            raise ProposerError(f"Shift proposer returned a non-JSON body: {e}") from e

        blocks = data.get("content") if isinstance(data, dict) else None
        if not isinstance(blocks, list):
            raise ProposerError("Shift proposer response has no content")

        texts: List[str] = [
            block.get("text", "")
            for block in blocks
            if isinstance(block, dict) and block.get("type") == "text"
        ]
        text = "".join(texts).strip()
        if not text:
            raise ProposerError("Shift proposer response contains no text")
        return text
