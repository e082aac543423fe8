"""Reporters that collect rendered diagnostics."""

from __future__ import annotations

import abc
import io
import json
from dataclasses import dataclass
from typing import Any, Generic, TextIO, TypeVar

from .snippet import AnnotationType, Snippet


class ReportError(Exception):
    """Raised when a reporter fails to record a snippet."""

    def __init__(self, source: BaseException) -> None:
        super().__init__(f"report failed: {source}")
        self.source = source


class Reporter(abc.ABC):
    """Receives diagnostic snippets."""

    @abc.abstractmethod
    def report(self, snippet: Snippet) -> None:
        """Record one snippet."""


class Null(Reporter):
    """Discards every snippet."""

    def report(self, snippet: Snippet) -> None:
        return None


class Text(Reporter):
    """Writes each rendered snippet, followed by a newline, to a text stream."""

    def __init__(self, inner: TextIO | None = None) -> None:
        self.inner: TextIO = inner if inner is not None else io.StringIO()

    def report(self, snippet: Snippet) -> None:
        try:
            self.inner.write(f"{snippet.render()}\n")
        except (OSError, ValueError) as exc:
            raise ReportError(exc) from exc

    def getvalue(self) -> str:
        """Return everything written so far, when the stream is in memory."""
        return self.inner.getvalue()  # type: ignore[attr-defined]


class Json(Reporter):
    """Collects snippets as JSON-ready dictionaries with a rendered form."""

    def __init__(self) -> None:
        self.reports: list[dict[str, Any]] = []

    def report(self, snippet: Snippet) -> None:
        value = snippet.to_dict()
        try:
            json.dumps(value)
        except (TypeError, ValueError) as exc:
            raise ReportError(exc) from exc
        value["formatted"] = Snippet.from_dict(value).render()
        self.reports.append(value)

    def to_json(self) -> str:
        """Serialise all collected reports as pretty-printed JSON."""
        return json.dumps(self.reports, indent=2)


@dataclass
class Counts:
    """Number of snippets seen per title severity."""

    error: int = 0
    warning: int = 0
    info: int = 0
    note: int = 0
    help: int = 0
    other: int = 0


R = TypeVar("R", bound=Reporter)


class Count(Reporter, Generic[R]):
    """Counts snippets by severity before passing them on."""

    _FIELDS = {
        AnnotationType.ERROR: "error",
        AnnotationType.WARNING: "warning",
        AnnotationType.INFO: "info",
        AnnotationType.NOTE: "note",
        AnnotationType.HELP: "help",
    }

    def __init__(self, inner: R) -> None:
        self.inner = inner
        self.counts = Counts()

    def report(self, snippet: Snippet) -> None:
        name = (
            self._FIELDS[snippet.title.annotation_type]
            if snippet.title is not None
            else "other"
        )
        setattr(self.counts, name, getattr(self.counts, name) + 1)
        self.inner.report(snippet)