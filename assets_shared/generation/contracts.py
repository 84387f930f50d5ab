from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class LintStatus(Enum):
    """Outcome of the lint-fix pass over generated files."""
    SUCCESS = "success"
    DEGRADED = "degraded"
    SKIPPED = "skipped"


@dataclass
class LintOutcome:
    status: LintStatus
    files: list[Path] = field(default_factory=list)
    hint: str | None = None
    error: str | None = None

    @property
    def degraded(self) -> bool:
        return self.status == LintStatus.DEGRADED


@dataclass
class GenerationResult:
    files: list[Path]
    lint: LintOutcome

    @property
    def count(self) -> int:
        return len(self.files)
