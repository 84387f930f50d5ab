"""Command line entry point: assets-shared generate | roots | watch."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from .config import SharedConfig
from .exports import AssetsLocator
from .generation import GenerationOrchestrator
from .output import ConsoleReporter
from .plugin import SharedPlugin
from .watch import WatchCoordinator, WatchSubscription

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assets-shared",
        description="Generate shared.ts aggregators for every assets folder under src/views.",
    )
    parser.add_argument("--project", default=".", help="Project root (default: current directory)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Regenerate aggregator files once")
    generate.add_argument("roots", nargs="*", help="Assets folders to regenerate (default: all)")

    commands.add_parser("roots", help="List discovered assets folders")

    watch = commands.add_parser("watch", help="Regenerate on file changes until interrupted")
    watch.add_argument("--show-deleted", action="store_true", help="Report files importing deleted units")
    watch.add_argument("--polling", action="store_true", help="Use the polling observer")
    return parser


def _generate(project_path: Path, roots: list[str]) -> int:
    orchestrator = GenerationOrchestrator(project_path)
    result = orchestrator.run([Path(r).resolve() for r in roots] if roots else None)
    ConsoleReporter(console).generation(result)
    return 0


def _roots(project_path: Path) -> int:
    for root in AssetsLocator(project_path).locate():
        console.print(str(root), markup=False, highlight=False, soft_wrap=True)
    return 0


def _watch(project_path: Path, show_deleted: bool, polling: bool) -> int:
    config = SharedConfig.load(project_path)
    if show_deleted:
        config.show_deleted = True

    coordinator = WatchCoordinator(
        project_path,
        config=config,
        reporter=ConsoleReporter(console),
        subscription_factory=lambda roots: WatchSubscription(roots, use_polling=polling),
    )
    SharedPlugin(coordinator).build_start()
    coordinator.serve_forever()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    project_path = Path(args.project).resolve()

    try:
        if args.command == "generate":
            return _generate(project_path, args.roots)
        if args.command == "roots":
            return _roots(project_path)
        return _watch(project_path, args.show_deleted, args.polling)
    except FileNotFoundError as e:
        console.print(f"[red]No such directory: {e.filename}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
