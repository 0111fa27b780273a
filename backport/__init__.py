"""
Backport Branch Extractor

Finds /cherry-pick directives on a pull request and reports the release
branches a backport job should target.
"""

__version__ = "0.1.0"

from backport.event import EventContext, load_event
from backport.extractor import extract_branches, extract_from_event

__all__ = ["EventContext", "load_event", "extract_branches", "extract_from_event", "__version__"]
