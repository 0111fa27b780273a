"""
Directive Rules for backport requests.

A directive is a line that starts (after optional indentation) with the
command token, followed by whitespace and a free-form remainder. Release
branch names are then picked out of that remainder.
"""

import re
from dataclasses import dataclass


# Literal command that introduces a directive line, without the slash
DEFAULT_COMMAND = "cherry-pick"

# Prefix every release branch name carries
DEFAULT_BRANCH_PREFIX = "release-"

# major.minor with an optional .patch, ASCII digits only
VERSION_PATTERN = r"[0-9]+\.[0-9]+(?:\.[0-9]+)?"

# Line terminators: CRLF, LF, CR, U+2028, U+2029
LINE_BREAK = re.compile("\r\n|[\r\n\u2028\u2029]")

# Horizontal whitespace: a directive never continues onto the next line
_INLINE_SPACE = r"[^\S\r\n\u2028\u2029]"


@dataclass
class DirectiveConfig:
    """
    Configurable directive vocabulary.

    The defaults recognise `/cherry-pick release-X.Y[.Z]`.
    """

    command: str = DEFAULT_COMMAND
    branch_prefix: str = DEFAULT_BRANCH_PREFIX

    def directive_pattern(self) -> re.Pattern:
        """
        Pattern matching a single directive line.

        Group 1 captures the remainder of the line after the command.
        The command itself is matched case-insensitively.
        """
        return re.compile(
            rf"^{_INLINE_SPACE}*/{re.escape(self.command)}{_INLINE_SPACE}+(.+)$",
            flags=re.IGNORECASE,
        )

    def branch_pattern(self) -> re.Pattern:
        """Pattern matching a single release branch token, case-sensitively."""
        return re.compile(re.escape(self.branch_prefix) + VERSION_PATTERN)


# Default configuration instance
DEFAULT_CONFIG = DirectiveConfig()
