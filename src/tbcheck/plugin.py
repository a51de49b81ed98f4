"""pytest plugin: run the checks against a pytest-backed test context.

Enable it with ``pytest_plugins = ["tbcheck.plugin"]`` in a conftest or with
``-p tbcheck.plugin``, then request the ``tb`` fixture::

    def test_totals(tb):
        check_equals(tb, 3, total([1, 2]))
        assert_ok(tb, err)
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tbcheck.checks import Checker
from tbcheck.config import load_config
from tbcheck.decorator import Decorator
from tbcheck.verbose import setup_logger

_context_key = pytest.StashKey["PytestContext"]()
_logger_key = pytest.StashKey[logging.Logger]()


class PytestContext:
    """Test context for one pytest test.

    Non-fatal failures are counted and turned into a failed report once the
    test body returns. A fatal failure stops the test through ``pytest.fail``.
    """

    def __init__(self) -> None:
        self.failures = 0

    @property
    def failed(self) -> bool:
        return self.failures > 0

    def mark_failed(self) -> None:
        self.failures += 1

    def mark_failed_and_abort(self) -> None:
        self.failures += 1
        pytest.fail("fatal check failed, see captured stdout", pytrace=False)


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        "tbcheck_config",
        "YAML file with decorator settings for the checker fixture",
        default="",
    )
    parser.addini(
        "tbcheck_debug_log",
        "File that receives a debug record for every failed check",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    log_path = config.getini("tbcheck_debug_log")
    if log_path:
        config.stash[_logger_key] = setup_logger(config.rootpath / log_path)


def pytest_unconfigure(config: pytest.Config) -> None:
    logger = config.stash.get(_logger_key, None)
    if logger is None:
        return
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    del config.stash[_logger_key]


@pytest.fixture
def tb(request: pytest.FixtureRequest) -> PytestContext:
    """A fresh test context for the requesting test."""
    ctx = PytestContext()
    request.node.stash[_context_key] = ctx
    return ctx


@pytest.fixture
def checker(pytestconfig: pytest.Config) -> Checker:
    """A checker using the decorator settings named by the tbcheck_config ini option."""
    config_path = pytestconfig.getini("tbcheck_config")
    config = load_config(Path(pytestconfig.rootpath) / config_path) if config_path else None
    return Checker(Decorator(config=config))


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    outcome = yield
    report = outcome.get_result()
    if report.when != "call" or not report.passed:
        return

    ctx = item.stash.get(_context_key, None)
    if ctx is not None and ctx.failed:
        report.outcome = "failed"
        report.longrepr = (
            f"{ctx.failures} non-fatal check(s) failed, see captured stdout"
        )
