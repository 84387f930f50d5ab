"""Aggregator generation and lint-fix pass."""

from .contracts import GenerationResult, LintOutcome, LintStatus
from .lint import LINT_HINT, LintRunner
from .orchestrator import GenerationOrchestrator

__all__ = [
    "GenerationOrchestrator",
    "GenerationResult",
    "LINT_HINT",
    "LintOutcome",
    "LintRunner",
    "LintStatus",
]
