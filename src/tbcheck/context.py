"""The host test context the checks report to."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TestContext(Protocol):
    """Per-test handle owned by the test framework.

    ``mark_failed`` records a failure and returns. ``mark_failed_and_abort``
    records a failure and stops the current test, typically by raising the
    framework's own outcome exception.
    """

    def mark_failed(self) -> None: ...

    def mark_failed_and_abort(self) -> None: ...


class RecordingContext:
    """Context that only remembers how it was signalled.

    Useful for testing code built on the checks: an abort request is
    recorded but does not unwind, so the caller keeps running.
    """

    def __init__(self) -> None:
        self.failed = False
        self.fatal = False

    def mark_failed(self) -> None:
        self.failed = True

    def mark_failed_and_abort(self) -> None:
        self.failed = True
        self.fatal = True
