"""ESLint fix pass over generated aggregator files."""
import logging
import subprocess
from pathlib import Path

from .contracts import LintOutcome, LintStatus

logger = logging.getLogger(__name__)

LINT_HINT = (
    "ESLint fix failed. On Windows run the dev server from a bash terminal, "
    "otherwise fix the generated files manually."
)


class LintRunner:
    """Runs ``eslint <files> --fix``. Blocks until the linter exits."""

    COMMAND = "eslint"

    def __init__(self, project_path: Path | str | None = None) -> None:
        self.project_path = Path(project_path) if project_path is not None else None

    def _run(self, args: list[str]) -> subprocess.CompletedProcess:
        return subprocess.run(
            args,
            cwd=self.project_path,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
        )

    def fix(self, files: list[Path]) -> LintOutcome:
        """Fix files in place. Any failure degrades to a hint, never raises."""
        if not files:
            return LintOutcome(LintStatus.SKIPPED)

        args = [self.COMMAND, *(str(f) for f in files), "--fix"]
        try:
            result = self._run(args)
        except OSError as e:
            logger.warning(f"Could not run {self.COMMAND}: {e}")
            return LintOutcome(LintStatus.DEGRADED, list(files), LINT_HINT, str(e))

        if result.returncode != 0:
            error = (result.stderr or result.stdout).strip()
            logger.warning(f"{self.COMMAND} exited with {result.returncode}")
            return LintOutcome(LintStatus.DEGRADED, list(files), LINT_HINT, error or None)

        return LintOutcome(LintStatus.SUCCESS, list(files))
