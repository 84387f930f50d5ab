"""Shared fixtures: temporary front-end trees and recording collaborators."""

from __future__ import annotations

from pathlib import Path

import pytest

from assets_shared.generation import GenerationResult, LintOutcome, LintStatus


class StubLintRunner:
    """Records lint calls instead of spawning eslint."""

    def __init__(self, status: LintStatus = LintStatus.SUCCESS) -> None:
        self.status = status
        self.calls: list[list[Path]] = []

    def fix(self, files: list[Path]) -> LintOutcome:
        self.calls.append(list(files))
        if not files:
            return LintOutcome(LintStatus.SKIPPED)
        hint = "fix manually" if self.status == LintStatus.DEGRADED else None
        return LintOutcome(self.status, list(files), hint)


class RecordingReporter:
    def __init__(self) -> None:
        self.results: list[GenerationResult] = []
        self.errors: list[object] = []
        self.started = 0

    def generation(self, result: GenerationResult) -> None:
        self.results.append(result)

    def lint_hint(self, hint: str) -> None:
        pass

    def watch_started(self) -> None:
        self.started += 1

    def watch_error(self, error: object) -> None:
        self.errors.append(error)


class StubObserver:
    """Stands in for a watchdog observer without touching inotify."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.fail_on = fail_on or set()
        self.scheduled: list[str] = []
        self.started = False
        self.stopped = False

    def start(self) -> None:
        self.started = True

    def schedule(self, handler, path: str, recursive: bool = False) -> None:
        if path in self.fail_on:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.scheduled.append(path)

    def stop(self) -> None:
        self.stopped = True

    def is_alive(self) -> bool:
        return False

    def join(self) -> None:
        pass


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Empty project root with a src/views directory."""
    root = tmp_path.resolve() / "app"
    (root / "src" / "views").mkdir(parents=True)
    return root


@pytest.fixture
def make_files():
    """Create files (with parents) below a base directory."""
    def _make(base: Path, *relative: str) -> list[Path]:
        created = []
        for rel in relative:
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("export default {};\n", encoding="utf-8")
            created.append(path)
        return created
    return _make


@pytest.fixture
def lint_runner() -> StubLintRunner:
    return StubLintRunner()


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def stub_observer() -> StubObserver:
    return StubObserver()


@pytest.fixture
def degraded_lint_runner() -> StubLintRunner:
    return StubLintRunner(LintStatus.DEGRADED)


@pytest.fixture
def observer_factory():
    return StubObserver
