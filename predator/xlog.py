"""Structured key=value logging."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Value:
    """A key=value pair added to a log line."""

    key: str
    value: Any


def _render(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialise(values: Iterable[Value]) -> str:
    """Render values as 'key=value ,key=value'."""
    return " ,".join(f"{_render(v.key)}={_render(v.value)}" for v in values)


def format_message(message: str, *args: Value) -> str:
    """Prefix a message with its serialised values."""
    return " ,".join([serialise(args), message])


def info(message: str, *args: Value) -> None:
    """Print an informational log line to standard output."""
    stamp = time.strftime("%Y/%m/%d %H:%M:%S")
    print(f"INFO: {stamp} {serialise(args)} {message}")