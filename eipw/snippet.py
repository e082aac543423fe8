"""Diagnostic snippets: annotated source excerpts and their plain-text rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class AnnotationType(enum.Enum):
    """Severity of an annotation."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    NOTE = "Note"
    HELP = "Help"

    @property
    def label(self) -> str:
        return self.value.lower()

    @property
    def mark(self) -> str:
        return "^" if self is AnnotationType.ERROR else "-"


def _parse_type(value: Any) -> AnnotationType:
    try:
        return AnnotationType(value)
    except ValueError:
        raise ValueError(f"unknown annotation type: {value!r}") from None


@dataclass
class Annotation:
    """A titled message, used for snippet titles and footers."""

    annotation_type: AnnotationType
    label: str | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "annotation_type": self.annotation_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Annotation:
        return cls(
            annotation_type=_parse_type(data["annotation_type"]),
            label=data.get("label"),
            id=data.get("id"),
        )


@dataclass
class SourceAnnotation:
    """A labelled character range within a slice's source."""

    range: tuple[int, int]
    label: str
    annotation_type: AnnotationType

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": list(self.range),
            "label": self.label,
            "annotation_type": self.annotation_type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SourceAnnotation:
        start, end = data["range"]
        return cls(
            range=(int(start), int(end)),
            label=data["label"],
            annotation_type=_parse_type(data["annotation_type"]),
        )


@dataclass
class Slice:
    """An excerpt of source text starting at a given line."""

    source: str
    line_start: int
    origin: str | None = None
    annotations: list[SourceAnnotation] = field(default_factory=list)
    fold: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "line_start": self.line_start,
            "origin": self.origin,
            "annotations": [a.to_dict() for a in self.annotations],
            "fold": self.fold,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Slice:
        return cls(
            source=data["source"],
            line_start=int(data["line_start"]),
            origin=data.get("origin"),
            annotations=[SourceAnnotation.from_dict(a) for a in data["annotations"]],
            fold=bool(data.get("fold", False)),
        )

    def lines(self) -> list[tuple[int, str]]:
        """Return (offset, text) pairs for each source line."""
        parts = self.source.split("\n")
        if parts and parts[-1] == "":
            parts.pop()
        result = []
        offset = 0
        for text in parts:
            result.append((offset, text))
            offset += len(text) + 1
        return result

    def locate(self, pos: int) -> tuple[int, int]:
        """Return (line index, column) of a character offset."""
        lines = self.lines()
        for index, (offset, text) in enumerate(lines):
            if pos <= offset + len(text):
                return index, max(pos - offset, 0)
        if lines:
            offset, text = lines[-1]
            return len(lines) - 1, pos - offset
        return 0, pos


@dataclass
class FormatOptions:
    """Rendering options."""

    color: bool = False
    anonymized_line_numbers: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": self.color,
            "anonymized_line_numbers": self.anonymized_line_numbers,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FormatOptions:
        return cls(
            color=bool(data.get("color", False)),
            anonymized_line_numbers=bool(data.get("anonymized_line_numbers", False)),
        )


@dataclass
class Snippet:
    """A complete diagnostic: title, source slices and footer notes."""

    title: Annotation | None = None
    slices: list[Slice] = field(default_factory=list)
    footer: list[Annotation] = field(default_factory=list)
    opt: FormatOptions = field(default_factory=FormatOptions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title.to_dict() if self.title is not None else None,
            "footer": [a.to_dict() for a in self.footer],
            "opt": self.opt.to_dict(),
            "slices": [s.to_dict() for s in self.slices],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Snippet:
        title = data.get("title")
        return cls(
            title=Annotation.from_dict(title) if title is not None else None,
            footer=[Annotation.from_dict(a) for a in data.get("footer") or []],
            opt=FormatOptions.from_dict(data.get("opt") or {}),
            slices=[Slice.from_dict(s) for s in data["slices"]],
        )

    def _width(self) -> int:
        if self.opt.anonymized_line_numbers:
            return 2
        width = 0
        for piece in self.slices:
            count = len(piece.lines())
            if count:
                width = max(width, len(str(piece.line_start + count - 1)))
        return width

    def _title_line(self) -> str:
        assert self.title is not None
        head = self.title.annotation_type.label
        if self.title.id:
            head += f"[{self.title.id}]"
        if self.title.label:
            head += f": {self.title.label}"
        return head

    def render(self) -> str:
        """Render the snippet as plain text, without a trailing newline."""
        width = self._width()
        pad = " " * width
        blank = f"{pad} |"
        out: list[str] = []
        if self.title is not None:
            out.append(self._title_line())

        for index, piece in enumerate(self.slices):
            if piece.origin is not None:
                location = piece.origin
                if piece.annotations:
                    line, col = piece.locate(piece.annotations[0].range[0])
                    location += f":{piece.line_start + line}:{col + 1}"
                arrow = "-->" if index == 0 else ":::"
                out.append(f"{pad}{arrow} {location}")
            if index == 0 or piece.origin is not None:
                out.append(blank)
            out.extend(self._render_slice(piece, width))
            out.append(blank)

        for note in self.footer:
            text = f"{pad} = {note.annotation_type.label}"
            if note.label:
                text += f": {note.label}"
            out.append(text)
        return "\n".join(out)

    def _render_slice(self, piece: Slice, width: int) -> list[str]:
        pad = " " * width
        lines = piece.lines()
        by_line: dict[int, list[tuple[int, SourceAnnotation]]] = {}
        for ann in piece.annotations:
            line, col = piece.locate(ann.range[0])
            by_line.setdefault(line, []).append((col, ann))

        shown = sorted(by_line) if piece.fold else range(len(lines))
        out: list[str] = []
        previous = None
        for line in shown:
            if line >= len(lines):
                continue
            if previous is not None and line != previous + 1:
                out.append("...")
            previous = line
            offset, text = lines[line]
            if self.opt.anonymized_line_numbers:
                number = "LL"
            else:
                number = str(piece.line_start + line).rjust(width)
            out.append(f"{number} | {text}" if text else f"{number} |")
            for col, ann in by_line.get(line, []):
                end = min(ann.range[1], offset + len(text))
                length = max(end - ann.range[0], 1)
                marks = ann.annotation_type.mark * length
                label = ann.label
                if label and ann.annotation_type not in (
                    AnnotationType.ERROR,
                    AnnotationType.WARNING,
                ):
                    label = f"{ann.annotation_type.label}: {label}"
                row = f"{pad} | {' ' * col}{marks}"
                if label:
                    row += f" {label}"
                out.append(row)
        return out