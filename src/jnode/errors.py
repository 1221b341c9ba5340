"""Errors and result types for node edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class JnodeError(Exception):
    """Base class for recoverable node edit failures."""


class ParseError(JnodeError, ValueError):
    """Edited text (or the stored document) is not valid JSON."""

    def __init__(self, message: str = "Invalid JSON format") -> None:
        super().__init__(message)
        self.message = message


class PathResolutionError(JnodeError, LookupError):
    """A path segment does not resolve inside the document."""

    def __init__(
        self, path: tuple[str | int, ...], segment: str | int, reason: str
    ) -> None:
        from ._path import format_path

        self.path = tuple(path)
        self.segment = segment
        self.reason = reason
        self.message = f"cannot resolve {format_path(self.path)}: {reason}"
        super().__init__(self.message)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: JnodeError

    @property
    def message(self) -> str:
        return str(self.error)


Result = Union[Ok[T], Err]
