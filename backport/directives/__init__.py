"""
Directive parsing for backport requests.

Recognises lines such as:

    /cherry-pick release-1.2 release-1.3.4

and pulls the release branch names out of them. Parsing is pure text
matching; nothing here talks to GitHub.
"""

from backport.directives.parser import dedupe, find_branches, find_directive_lines
from backport.directives.rules import DEFAULT_CONFIG, DirectiveConfig

__all__ = [
    "dedupe",
    "find_branches",
    "find_directive_lines",
    "DEFAULT_CONFIG",
    "DirectiveConfig",
]
