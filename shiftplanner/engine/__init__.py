"""Schedule generation: proposer-backed primary path and rule-based fallback."""

from .base import BaseGenerator, ProposalError, ProposerError, ShiftProposer
from .context import PLANNING_RULES, build_planning_context
from .fallback import FALLBACK_RECOMMENDATION, FALLBACK_WARNING, FallbackScheduleGenerator
from .orchestrator import ScheduleGenerator, generate_ai_schedule
from .primary import ProposerScheduleGenerator
from .proposal import Proposal, parse_proposal

__all__ = [
    "BaseGenerator",
    "ShiftProposer",
    "ProposerError",
    "ProposalError",
    "PLANNING_RULES",
    "build_planning_context",
    "FALLBACK_RECOMMENDATION",
    "FALLBACK_WARNING",
    "FallbackScheduleGenerator",
    "ProposerScheduleGenerator",
    "Proposal",
    "parse_proposal",
    "ScheduleGenerator",
    "generate_ai_schedule",
]
