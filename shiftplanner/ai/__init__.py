"""Model-backed shift proposals and the checks run on them."""

from .proposer import AnthropicShiftProposer, build_prompt
from .validator import peak_headcount, validate_proposal

__all__ = [
    "AnthropicShiftProposer",
    "build_prompt",
    "peak_headcount",
    "validate_proposal",
]
