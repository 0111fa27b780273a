"""
Diagnostics for the backport helper.

Warnings and info messages go to stderr through rich. Inside GitHub Actions
warnings are emitted as workflow commands so the runner annotates the job.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from backport.github.actions import format_command, in_github_actions


class Diagnostics:
    """
    Warning/info sink.

    Args:
        console: Console to write to (default: a stderr console)
        actions: Emit workflow commands; defaults to detecting the runner
        quiet: Suppress info messages (warnings are always shown)
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        actions: Optional[bool] = None,
        quiet: bool = False,
    ):
        self.console = console or Console(stderr=True)
        self.actions = in_github_actions() if actions is None else actions
        self.quiet = quiet

    def warning(self, message: str) -> None:
        if self.actions:
            self._plain(format_command("warning", message))
        else:
            self.console.print(f"[yellow]⚠ {escape(message)}[/yellow]", emoji=False, highlight=False)

    def info(self, message: str) -> None:
        if self.quiet:
            return
        self._plain(message)

    def _plain(self, line: str) -> None:
        # Workflow commands and branch names must reach the log unstyled
        self.console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)
