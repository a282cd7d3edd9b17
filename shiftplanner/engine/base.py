"""Interfaces shared by the schedule generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Union

from shiftplanner.domain.models import ScheduleRequest, ScheduleResult


class ProposerError(RuntimeError):
    """The shift proposer could not be reached or answered with an error."""


class ProposalError(ValueError):
    """The shift proposer answered, but the plan cannot be used."""


class ShiftProposer(ABC):
    """
    External collaborator that decides who works when.

    Implementations receive the planning context built by
    `shiftplanner.engine.context.build_planning_context` and return either the
    parsed proposal dict or the raw response text. Any failure should be
    raised; the caller falls back to the rule-based generator.
    """

    @abstractmethod
    def propose(self, context: Dict[str, Any]) -> Union[Dict[str, Any], str]:
        """
        Propose shifts for the week described by context.

        Returns:
            {"shifts": [...], "recommendations": [...], "warnings": [...]}
            as a dict or as JSON text

        Raises:
            ProposerError: If the proposal could not be obtained
        """
        pass


class BaseGenerator(ABC):
    """A strategy that turns a ScheduleRequest into a ScheduleResult."""

    name: str | None = None  # Override in subclasses

    @abstractmethod
    def make_schedule(self, request: ScheduleRequest) -> ScheduleResult:
        """
        Generate a schedule for the requested week.

        Raises:
            ProposerError, ProposalError: Only generators that depend on a
                proposer raise these
        """
        pass

    def get_name(self) -> str:
        return self.name or "UNKNOWN"
