"""
Directive Parser for backport requests.

Scans free text (a PR description or a comment) for directive lines and
extracts the release branch tokens they name.
"""

from typing import Iterable, Optional

from backport.directives.rules import DEFAULT_CONFIG, LINE_BREAK, DirectiveConfig


def find_directive_lines(
    text: Optional[str],
    config: DirectiveConfig = DEFAULT_CONFIG,
) -> list[str]:
    """
    Find every directive line in a block of text.

    Lines end at CRLF, LF, CR, U+2028 or U+2029.

    Args:
        text: Multi-line text to scan; None is treated as empty
        config: Directive vocabulary to match

    Returns:
        The remainder of each directive line, in the order they appear
    """
    if not text:
        return []

    pattern = config.directive_pattern()

    remainders = []
    for line in LINE_BREAK.split(text):
        match = pattern.match(line)
        if match:
            remainders.append(match.group(1))

    return remainders


def find_branches(
    text: Optional[str],
    config: DirectiveConfig = DEFAULT_CONFIG,
) -> list[str]:
    """
    Extract release branch tokens from all directive lines in text.

    Several tokens may share one line. Duplicates are kept; use
    `dedupe` once every source has been scanned.

    Args:
        text: Multi-line text to scan
        config: Directive vocabulary to match

    Returns:
        Branch names in first-to-last, left-to-right order
    """
    branch_pattern = config.branch_pattern()

    branches = []
    for remainder in find_directive_lines(text, config):
        branches.extend(branch_pattern.findall(remainder))

    return branches


def dedupe(items: Iterable[str]) -> list[str]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))
