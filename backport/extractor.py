"""
Branch Extractor for the backport helper.

Collects /cherry-pick directives from a PR description and its comments
and returns the release branches to backport to.
"""

from typing import Callable, Iterable, Optional

from backport.directives import DEFAULT_CONFIG, DirectiveConfig, dedupe, find_branches
from backport.event import EventContext


def extract_branches(
    pr_number: Optional[int],
    pr_body: Optional[str],
    fetch_comments: Callable[[int], Iterable[Optional[str]]],
    diagnostics,
    config: DirectiveConfig = DEFAULT_CONFIG,
) -> list[str]:
    """
    Find the release branches requested on a PR.

    Sources are scanned in order: the PR description, then each comment
    as returned by fetch_comments. The result keeps first-seen order
    with duplicates removed.

    An unknown PR number or a PR without directives is a normal outcome
    and yields an empty list. Errors from fetch_comments propagate.

    Args:
        pr_number: PR (or issue) number; None skips everything
        pr_body: PR description, may be None or empty
        fetch_comments: Returns the comment bodies for a PR number
        diagnostics: Receives warning/info messages
        config: Directive vocabulary

    Returns:
        Unique branch names, possibly empty
    """
    if not pr_number:
        diagnostics.warning("Could not determine PR number from event - skipping backport")
        return []

    branches = find_branches(pr_body, config)

    for body in fetch_comments(pr_number):
        branches.extend(find_branches(body, config))

    branches = dedupe(branches)

    if not branches:
        diagnostics.info("No cherry-pick requests found - skipping backport")
        return []

    diagnostics.info(f"Target branches: {', '.join(branches)}")
    return branches


def extract_from_event(
    event: EventContext,
    store,
    diagnostics,
    config: DirectiveConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Run extract_branches for a loaded event, reading comments from store."""

    def fetch_comments(number: int) -> list[str]:
        return store.list_comments(event.owner, event.repo, number)

    return extract_branches(event.pr_number, event.pr_body, fetch_comments, diagnostics, config)
