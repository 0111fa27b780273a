"""
Backport Branch Extractor CLI Entry Point.

Usage:
    backport-branches
    backport-branches --event $GITHUB_EVENT_PATH --output-name branches
    backport-branches --repo owner/repo --pr 1234
  backport-branches --command backport --branch-prefix stable-
    backport-branches --help
"""

import argparse
import json
import os
import sys

from dotenv import load_dotenv
from github import GithubException
from requests.exceptions import RequestException
from rich.console import Console
from rich.markup import escape

from backport import __version__
from backport.diagnostics import Diagnostics
from backport.directives import DEFAULT_CONFIG, DirectiveConfig
from backport.event import load_event
from backport.extractor import extract_from_event
from backport.github.actions import write_output
from backport.github.comments import GitHubCommentStore

# Load environment
load_dotenv()

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="backport-branches",
        description="Find /cherry-pick release branches requested on a pull request",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  backport-branches
  backport-branches --event event.json --repo owner/repo
  backport-branches --repo owner/repo --pr 1234

Inside GitHub Actions the event, repository and token are read from
GITHUB_EVENT_PATH, GITHUB_REPOSITORY and GITHUB_TOKEN, and the result is
written to the step output named by --output-name. BACKPORT_COMMAND and
BACKPORT_BRANCH_PREFIX set the directive vocabulary for a repository.
        """,
    )

    parser.add_argument(
        "--event",
        help="Path to the webhook event payload (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--repo",
        help="Repository as owner/repo (default: $GITHUB_REPOSITORY or git remote)",
    )
    parser.add_argument(
        "--pr",
        type=int,
        help="PR number, overrides the event",
    )
    parser.add_argument(
        "--body",
        help="PR description text, overrides the event",
    )
    parser.add_argument(
        "--command",
        default=os.getenv("BACKPORT_COMMAND") or DEFAULT_CONFIG.command,
        help="Directive command without the slash (default: $BACKPORT_COMMAND or cherry-pick)",
    )
    parser.add_argument(
        "--branch-prefix",
        default=os.getenv("BACKPORT_BRANCH_PREFIX") or DEFAULT_CONFIG.branch_prefix,
        help="Prefix of release branch names (default: $BACKPORT_BRANCH_PREFIX or release-)",
    )
    parser.add_argument(
        "--output-name",
        default="branches",
        help="Step output to write the JSON branch list to (default: branches)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print warnings and the result",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"backport-branches {__version__}",
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    diagnostics = Diagnostics(console=console, quiet=args.quiet)
    config = DirectiveConfig(command=args.command, branch_prefix=args.branch_prefix)

    try:
        event = load_event(args.event, args.repo)

        if args.pr is not None:
            event.pr_number = args.pr
        if args.body is not None:
            event.pr_body = args.body

        branches = extract_from_event(event, GitHubCommentStore(), diagnostics, config)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)

    except RuntimeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    except (GithubException, RequestException) as e:
        console.print(f"[red]GitHub API error: {escape(str(e))}[/red]")
        sys.exit(1)

    result = json.dumps(branches)
    write_output(args.output_name, result)
    print(result)


if __name__ == "__main__":
    main()
