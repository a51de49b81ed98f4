"""Source-located assertion helpers for tests."""

from tbcheck.checks import (
    Checker,
    assert_,
    assert_equals,
    assert_ok,
    check,
    check_equals,
    check_ok,
)
from tbcheck.config import DecoratorConfig, load_config
from tbcheck.context import RecordingContext, TestContext
from tbcheck.decorator import CallSite, Decorator, find_call_site
from tbcheck.equality import deep_equal
from tbcheck.verbose import setup_logger

__all__ = [
    "CallSite",
    "Checker",
    "Decorator",
    "DecoratorConfig",
    "RecordingContext",
    "TestContext",
    "assert_",
    "assert_equals",
    "assert_ok",
    "check",
    "check_equals",
    "check_ok",
    "deep_equal",
    "find_call_site",
    "load_config",
    "setup_logger",
]
