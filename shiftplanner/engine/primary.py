"""Generator that delegates the plan to a ShiftProposer."""

from __future__ import annotations

from typing import Dict

from shiftplanner.ai.validator import validate_proposal
from shiftplanner.domain.calendar import EventCalendar
from shiftplanner.domain.models import Schedule, ScheduleRequest, ScheduleResult
from shiftplanner.services.labor import LaborAnalyzer
from shiftplanner.services.timeplan import ShiftTemplate

from .base import BaseGenerator, ShiftProposer
from .context import build_planning_context
from .proposal import parse_proposal


class ProposerScheduleGenerator(BaseGenerator):
    """
    Build the planning context, ask the proposer, and cost what comes back.

    Proposer and parse failures propagate as ProposerError/ProposalError (or
    whatever the proposer raised); the orchestrator decides what to do.
    """

    name = "PROPOSER"

    def __init__(
        self,
        proposer: ShiftProposer,
        analyzer: LaborAnalyzer | None = None,
        calendar: EventCalendar | None = None,
        templates: Dict[str, ShiftTemplate] | None = None,
    ):
        self.proposer = proposer
        self.analyzer = analyzer or LaborAnalyzer()
        self.calendar = calendar
        self.templates = templates

    def make_schedule(self, request: ScheduleRequest) -> ScheduleResult:
        context = build_planning_context(request, self.calendar, self.templates)
        proposal = parse_proposal(self.proposer.propose(context))

        analysis = self.analyzer.analyze(proposal.shifts, request.employees, request.forecasts)
        schedule = Schedule.from_analysis(request.week_start_date, proposal.shifts, analysis)

        checks = validate_proposal(
            proposal.shifts,
            request.employees,
            request.constraints,
            [forecast.date for forecast in request.forecasts],
            labor_percentage=analysis.labor_percentage,
            week_start=request.week_start_date,
        )
        return ScheduleResult(
            schedule=schedule,
            recommendations=proposal.recommendations,
            warnings=proposal.warnings + checks["warnings"],
            labor_analysis=analysis,
            source="proposer",
        )
