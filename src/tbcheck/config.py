"""Output settings for the failure decorator."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

HIGHLIGHT = "\x1b[7;1;31m"
RESET = "\x1b[0;39m"


class DecoratorConfig(BaseModel):
    """How a failure line is wrapped and which frame it is attributed to.

    Attributes:
        prefix: Escape sequence written before the message (reverse-video bold red).
        suffix: Escape sequence written after the message (reset).
        terminator: Written after the suffix; the default leaves one blank line.
        unknown_site: Location text used when the call site cannot be found.
        stack_depth: Frames above the decorator to attribute the failure to.
            2 is the caller of the assertion function.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    prefix: str = HIGHLIGHT
    suffix: str = RESET
    terminator: str = "\n\n"
    unknown_site: str = " ???:1"
    stack_depth: int = 2

    @field_validator("stack_depth")
    @classmethod
    def stack_depth_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("stack_depth must be at least 1")
        return v


def load_config(path: Path | str) -> DecoratorConfig:
    """Load and validate decorator settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return DecoratorConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")

    return DecoratorConfig(**raw)
