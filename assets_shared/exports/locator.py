"""Discovery of assets directories under a project's views tree."""
import logging
from pathlib import Path

from .contracts import ASSETS_DIR_NAME, VIEWS_DIR

logger = logging.getLogger(__name__)


class AssetsLocator:
    """Finds every directory named exactly ``assets`` below the views root."""

    def __init__(self, project_path: Path | str) -> None:
        self.project_path = Path(project_path).resolve()

    @property
    def views_path(self) -> Path:
        return self.project_path / VIEWS_DIR

    def locate(self, start: Path | str | None = None) -> list[Path]:
        """Return assets roots in traversal order. A missing start raises FileNotFoundError."""
        roots: list[Path] = []
        self._scan(Path(start) if start is not None else self.views_path, roots)
        logger.debug(f"Located {len(roots)} assets roots")
        return roots

    def _scan(self, directory: Path, roots: list[Path]) -> None:
        for item in sorted(directory.iterdir()):
            if not item.is_dir() or item.is_symlink():
                continue
            if item.name == ASSETS_DIR_NAME:
                roots.append(item.resolve())
            else:
                self._scan(item, roots)
