"""
GitHub Actions runner integration.

Workflow commands (``::warning::...``) annotate the job log, and step
outputs are appended to the file named by GITHUB_OUTPUT.
"""

import os
import uuid
from typing import Optional


def in_github_actions() -> bool:
    """Whether we are running inside a GitHub Actions job."""
    return os.getenv("GITHUB_ACTIONS") == "true"


def escape_data(message: str) -> str:
    """Escape a workflow command message so it stays on one line."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: str) -> str:
    """
    Format a workflow command.

    Args:
        command: Command name (e.g. "warning", "notice")
        message: Message text

    Returns:
        The command line, e.g. "::warning::message"
    """
    return f"::{command}::{escape_data(message)}"


def write_output(name: str, value: str, path: Optional[str] = None) -> bool:
    """
    Set a step output.

    Args:
        name: Output name
        value: Output value; multi-line values use a heredoc delimiter
        path: Output file, defaults to $GITHUB_OUTPUT

    Returns:
        True if the output was written, False if no output file is configured
    """
    path = path or os.getenv("GITHUB_OUTPUT")
    if not path:
        return False

    with open(path, "a", encoding="utf-8") as f:
        if "\n" in value:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            f.write(f"{name}={value}\n")

    return True
