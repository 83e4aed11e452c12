"""Files of tolerance specs and bigquery resource labels."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

EXT = ".yaml"


@dataclass
class File:
    """A file and its content."""

    path: str
    content: bytes = b""


class FileNotFoundInStoreError(LookupError):
    """A file is missing from a file store."""

    def __init__(self, message: str = "file not found") -> None:
        super().__init__(message)


class PathType(str, Enum):
    """Directory layout of a file store."""

    GIT = "git"
    MULTI_TENANCY = "multi_tenancy"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value


_LABEL_PATTERN = re.compile(
    r"(?P<project>[\w\-]+)\.(?P<dataset>\w+)\.(?P<table>\w+)"
)


@dataclass(frozen=True)
class Label:
    """Structured bigquery resource identifier."""

    project: str
    dataset: str
    table: str

    def __str__(self) -> str:
        return f"{self.project}.{self.dataset}.{self.table}"


def parse_label(urn: str) -> Label:
    """Parse a project.dataset.table identifier."""
    match = _LABEL_PATTERN.search(urn)
    if match is None:
        raise ValueError("wrong URN format")
    return Label(match["project"], match["dataset"], match["table"])