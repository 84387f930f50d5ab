"""Operator-facing console lines for generation and watch events."""

from rich.console import Console
from rich.text import Text

from ..generation import GenerationResult, LintStatus


class ConsoleReporter:
    """Prints badges to the terminal. Swap for another object with the same methods."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _badge(self, label: str, style: str, message: str, message_style: str) -> Text:
        text = Text()
        text.append(f" {label} ", style=style)
        text.append(" ")
        text.append(message, style=message_style)
        return text

    def generation(self, result: GenerationResult) -> None:
        if result.lint.degraded:
            self.lint_hint(result.lint.hint or "")
            return
        message = f"Generated {result.count} file(s)"
        if result.lint.status == LintStatus.SUCCESS:
            message += ", ESLint fixed"
        self.console.print(self._badge("SUCCESS", "black on green", message, "cyan"))

    def lint_hint(self, hint: str) -> None:
        """Important enough to say three times."""
        self.console.print()
        self.console.print(Text("Said three times", style="black on blue"))
        for _ in range(3):
            self.console.print(self._badge("ERROR", "white on red", hint, "red"))

    def watch_started(self) -> None:
        self.console.print()
        self.console.print(self._badge("shared", "black on green", "Scanning assets folders", "cyan"))

    def watch_error(self, error: BaseException | str) -> None:
        self.console.print()
        self.console.print(self._badge("ERROR", "white on red", f"Error happened {error}", "red"))
