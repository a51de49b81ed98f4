"""Attribute a failure message to the line the test author wrote and print it."""

from __future__ import annotations

import inspect
import logging
import os
import sys
from dataclasses import dataclass
from typing import Any, TextIO

from tbcheck.config import DecoratorConfig


@dataclass(frozen=True)
class CallSite:
    """File base name and line number of a frame."""

    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


def find_call_site(depth: int) -> CallSite | None:
    """Return the location `depth` frames above the function calling this one.

    Returns None when the interpreter offers no frame introspection or the
    stack is not that deep.
    """
    frame = inspect.currentframe()
    if frame is None:
        return None
    try:
        # one extra hop for this function's own frame
        for _ in range(depth + 1):
            frame = frame.f_back
            if frame is None:
                return None
        return CallSite(os.path.basename(frame.f_code.co_filename), frame.f_lineno)
    finally:
        del frame


class Decorator:
    """Formats failure messages and writes them to a sink.

    The sink defaults to whatever ``sys.stdout`` is when the message is
    written. Pass an explicit sink (e.g. ``io.StringIO``) to capture output
    without replacing the process-wide stream.
    """

    def __init__(
        self,
        sink: TextIO | None = None,
        config: DecoratorConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.sink = sink
        self.config = config or DecoratorConfig()
        self.logger = logger or logging.getLogger("tbcheck")

    def format(self, message: str, *args: Any, site: CallSite | None) -> str:
        """Build the full decorated text for `message` at `site`."""
        if args:
            message = message.format(*args)
        location = str(site) if site is not None else self.config.unknown_site
        return (
            f"{self.config.prefix}{location}: {message}"
            f"{self.config.suffix}{self.config.terminator}"
        )

    def decorate_and_log(self, message: str, *args: Any) -> None:
        """Write `message` prefixed with the file and line of the original failing call.

        Must be called directly from the assertion function so that
        ``config.stack_depth`` frames up lands on the test author's line.
        """
        site = find_call_site(self.config.stack_depth)
        text = self.format(message, *args, site=site)

        if site is None:
            self.logger.debug("Check failed at unknown call site")
        else:
            self.logger.debug(f"Check failed at {site}")

        sink = self.sink if self.sink is not None else sys.stdout
        sink.write(text)
        flush = getattr(sink, "flush", None)
        if flush is not None:
            flush()
