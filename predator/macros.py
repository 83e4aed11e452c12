"""Macros that can be placed in filter text and rendered later."""

from __future__ import annotations

from enum import Enum


class MacroType(str, Enum):
    """Supported macros."""

    PARTITION = "__PARTITION__"

    def __str__(self) -> str:
        return self.value


def is_using_macros(text: str, macros: MacroType | str) -> bool:
    """Whether text contains the given macro; unknown macros are never used."""
    if macros != MacroType.PARTITION:
        return False
    return MacroType.PARTITION.value in text


def replace_macros(text: str, rendered_value: str, macros: MacroType | str) -> str:
    """Replace every occurrence of the macro in text with rendered_value."""
    if macros != MacroType.PARTITION:
        raise ValueError("unsupported macros")
    return text.replace(MacroType.PARTITION.value, rendered_value)