"""ScheduleGenerator - tries the shift proposer first, then the rule-based fallback."""

from __future__ import annotations

from shiftplanner.config import SchedulerConfig
from shiftplanner.domain.calendar import EventCalendar
from shiftplanner.domain.models import ScheduleRequest, ScheduleResult
from shiftplanner.services.labor import LaborAnalyzer

from .base import ShiftProposer
from .fallback import FallbackScheduleGenerator
from .primary import ProposerScheduleGenerator


class ScheduleGenerator:
    """
    Entry point for weekly schedule generation.

    The primary path asks the proposer for a plan. If there is no proposer,
    or anything on that path fails, the fallback generator produces the
    schedule instead. generate() never raises because of the proposer.
    """

    def __init__(
        self,
        proposer: ShiftProposer | None = None,
        analyzer: LaborAnalyzer | None = None,
        calendar: EventCalendar | None = None,
        cfg: SchedulerConfig | None = None,
    ):
        """
        Args:
            proposer: Shift proposer, or None to always use the fallback
            analyzer: Labor analyzer shared by both paths
            calendar: Extra event source for the planning context
            cfg: SchedulerConfig (defaults when None)
        """
        self.cfg = cfg or SchedulerConfig()
        self.analyzer = analyzer or LaborAnalyzer()
        self.primary = (
            ProposerScheduleGenerator(proposer, self.analyzer, calendar, self.cfg.templates)
            if proposer is not None
            else None
        )
        self.fallback = FallbackScheduleGenerator.from_config(self.cfg, self.analyzer)

    def generate(self, request: ScheduleRequest) -> ScheduleResult:
        """
        Generate a schedule for request.week_start_date.

        Returns:
            ScheduleResult; result.source tells which path produced it
        """
        print(f"[INFO] ScheduleGenerator: Building schedule for week of {request.week_start_date}")

        if self.primary is None:
            print("[INFO] No shift proposer configured, using rule-based schedule")
            return self._run_fallback(request)

        try:
            result = self.primary.make_schedule(request)
        except Exception as e:
            # Any failure on the primary path, including unexpected proposer errors
            print(f"[WARN] {self.primary.get_name()} path failed ({type(e).__name__}: {e}), falling back")
            return self._run_fallback(request)

        print(f"[OK] {self.primary.get_name()}: Generated {len(result.schedule.shifts)} shifts")
        return result

    def _run_fallback(self, request: ScheduleRequest) -> ScheduleResult:
        result = self.fallback.make_schedule(request)
        print(f"[OK] {self.fallback.get_name()}: Generated {len(result.schedule.shifts)} shifts")
        return result


def generate_ai_schedule(
    request: ScheduleRequest,
    proposer: ShiftProposer | None = None,
    calendar: EventCalendar | None = None,
    cfg: SchedulerConfig | None = None,
) -> ScheduleResult:
    """
    Convenience function to generate a week schedule.

    Args:
        request: Week, roster, forecasts, events and constraints
        proposer: Optional shift proposer
        calendar: Optional extra event source
        cfg: Optional SchedulerConfig

    Returns:
        ScheduleResult
    """
    return ScheduleGenerator(proposer=proposer, calendar=calendar, cfg=cfg).generate(request)
