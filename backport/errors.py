"""Errors raised by the backport helper."""


class EventError(RuntimeError):
    """The triggering event or repository could not be resolved."""
