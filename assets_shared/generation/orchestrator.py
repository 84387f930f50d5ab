"""Writes aggregator files for a batch of assets roots."""
import logging
from pathlib import Path

from ..exports import AGGREGATOR_NAME, ASSETS_DIR_NAME, AssetsLocator, TreeWalker, synthesize_content
from .contracts import GenerationResult
from .lint import LintRunner

logger = logging.getLogger(__name__)


class GenerationOrchestrator:
    """Regenerates shared.ts for each root, then lint-fixes what it wrote.

    ``last_generated`` only ever holds the outputs of the most recent call.
    """

    def __init__(
        self,
        project_path: Path | str,
        locator: AssetsLocator | None = None,
        walker: TreeWalker | None = None,
        lint_runner: LintRunner | None = None,
    ) -> None:
        self.project_path = Path(project_path).resolve()
        self.locator = locator or AssetsLocator(self.project_path)
        self.walker = walker or TreeWalker()
        self.lint_runner = lint_runner or LintRunner(self.project_path)
        self.last_generated: list[Path] = []

    def run(self, roots: list[Path] | None = None) -> GenerationResult:
        """Generate every root (all located roots when None).

        Relative roots resolve against the project. Roots that are not an
        ``assets`` folder inside the project are skipped.
        """
        self.last_generated = []
        roots = self.locator.locate() if roots is None else self._accepted_roots(roots)

        for root in roots:
            self.last_generated.append(self.write_aggregator(Path(root)))

        files = list(self.last_generated)
        lint = self.lint_runner.fix(files)
        logger.info(f"Generated {len(files)} aggregator file(s), lint {lint.status.value}")
        return GenerationResult(files=files, lint=lint)

    def _accepted_roots(self, roots: list[Path]) -> list[Path]:
        accepted: list[Path] = []
        for root in roots:
            resolved = (self.project_path / root).resolve()
            if resolved.name != ASSETS_DIR_NAME:
                logger.warning(f"Skipping {resolved}: not an {ASSETS_DIR_NAME} folder")
            elif not resolved.is_relative_to(self.project_path):
                logger.warning(f"Skipping {resolved}: outside {self.project_path}")
            else:
                accepted.append(resolved)
        return accepted

    def write_aggregator(self, root: Path) -> Path:
        """Overwrite root/shared.ts from a fresh walk."""
        units = self.walker.walk(root)
        target = root / AGGREGATOR_NAME
        target.write_text(synthesize_content(root, units), encoding="utf-8")
        logger.debug(f"Wrote {target} ({len(units)} exports)")
        return target
