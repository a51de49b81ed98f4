"""Fatal and non-fatal checks that report to a host test context.

Every check is a no-op when its condition holds. On failure it prints one
decorated line attributed to the caller's file and line, then signals the
context: ``assert_*`` variants call ``mark_failed_and_abort``, ``check*``
variants call ``mark_failed`` and let the test continue.

Each method calls the decorator directly, and the module-level functions
are bound methods of a default checker, so the failing call site is always
exactly two frames above the decorator.
"""

from __future__ import annotations

from typing import Any

from tbcheck.context import TestContext
from tbcheck.decorator import Decorator
from tbcheck.equality import deep_equal

_UNEXPECTED_ERROR = "unexpected error: {}"
_NOT_EQUAL = "\n\texp: {!r}\n\tgot: {!r}"


class Checker:
    """The six checks, writing failures through one decorator."""

    def __init__(self, decorator: Decorator | None = None) -> None:
        self.decorator = decorator or Decorator()

    def assert_(self, tb: TestContext, condition: Any, message: str, *args: Any) -> None:
        """Fail the test if the condition is false. Fatal."""
        if not condition:
            self.decorator.decorate_and_log(message, *args)
            tb.mark_failed_and_abort()

    def check(self, tb: TestContext, condition: Any, message: str, *args: Any) -> None:
        """Fail the test if the condition is false. Not fatal."""
        if not condition:
            self.decorator.decorate_and_log(message, *args)
            tb.mark_failed()

    def assert_ok(self, tb: TestContext, err: BaseException | None) -> None:
        """Fail the test if err is not None. Fatal."""
        if err is not None:
            self.decorator.decorate_and_log(_UNEXPECTED_ERROR, str(err))
            tb.mark_failed_and_abort()

    def check_ok(self, tb: TestContext, err: BaseException | None) -> None:
        """Fail the test if err is not None. Not fatal."""
        if err is not None:
            self.decorator.decorate_and_log(_UNEXPECTED_ERROR, str(err))
            tb.mark_failed()

    def assert_equals(self, tb: TestContext, exp: Any, act: Any) -> None:
        """Fail the test if exp and act are not deeply equal. Fatal."""
        if not deep_equal(exp, act):
            self.decorator.decorate_and_log(_NOT_EQUAL, exp, act)
            tb.mark_failed_and_abort()

    def check_equals(self, tb: TestContext, exp: Any, act: Any) -> None:
        """Fail the test if exp and act are not deeply equal. Not fatal."""
        if not deep_equal(exp, act):
            self.decorator.decorate_and_log(_NOT_EQUAL, exp, act)
            tb.mark_failed()


_default = Checker()

assert_ = _default.assert_
check = _default.check
assert_ok = _default.assert_ok
check_ok = _default.check_ok
assert_equals = _default.assert_equals
check_equals = _default.check_equals
