"""Turn a shift proposer's answer into Shift records."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Union

from shiftplanner.domain.clock import ClockTime
from shiftplanner.domain.models import ROLES, SHIFT_TYPES, Shift, generate_id

from .base import ProposalError

REQUIRED_FIELDS = ("employee_id", "date", "start_time", "end_time", "role", "shift_type")

_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


@dataclass
class Proposal:
    shifts: List[Shift] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _load(raw: Union[Dict[str, Any], str]) -> Dict[str, Any]:
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, str):
        raise ProposalError(f"Unsupported proposal type: {type(raw).__name__}")
    text = _FENCE.sub("", raw).strip()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProposalError(f"Proposal is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ProposalError("Proposal JSON must be an object")
    return data


def _string_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ProposalError(f"Proposal field {key!r} must be a list")
    return [str(item) for item in value]


def parse_shift(entry: Any, index: int) -> Shift:
    """
    Build one Shift from a proposal entry. The id is always generated here.

    Raises:
        ProposalError: If a field is missing or has an invalid value
    """
    if not isinstance(entry, dict):
        raise ProposalError(f"Shift #{index} is not an object")

    missing = [name for name in REQUIRED_FIELDS if entry.get(name) in (None, "")]
    if missing:
        raise ProposalError(f"Shift #{index} is missing fields: {', '.join(missing)}")

    role = str(entry["role"]).lower()
    if role not in ROLES:
        raise ProposalError(f"Shift #{index} has unknown role: {entry['role']!r}")
    shift_type = str(entry["shift_type"]).lower()
    if shift_type not in SHIFT_TYPES:
        raise ProposalError(f"Shift #{index} has unknown shift type: {entry['shift_type']!r}")

    try:
        shift_date = date.fromisoformat(str(entry["date"]))
        start = ClockTime.parse(entry["start_time"])
        end = ClockTime.parse(entry["end_time"])
    except ValueError as e:
        raise ProposalError(f"Shift #{index} has an invalid date or time: {e}") from e

    notes = entry.get("notes")
    return Shift(
        id=generate_id("shift"),
        employee_id=str(entry["employee_id"]),
        date=shift_date,
        start_time=start,
        end_time=end,
        role=role,
        shift_type=shift_type,
        notes=str(notes) if notes else None,
    )


def parse_proposal(raw: Union[Dict[str, Any], str]) -> Proposal:
    """
    Parse a proposer response (dict, or JSON text optionally wrapped in ``` fences).

    Raises:
        ProposalError: If the response is not usable as a whole
    """
    data = _load(raw)
    if "shifts" not in data:
        raise ProposalError("Proposal has no 'shifts' field")
    entries = data["shifts"]
    if not isinstance(entries, list):
        raise ProposalError("Proposal field 'shifts' must be a list")

    return Proposal(
        shifts=[parse_shift(entry, i) for i, entry in enumerate(entries)],
        recommendations=_string_list(data, "recommendations"),
        warnings=_string_list(data, "warnings"),
    )
