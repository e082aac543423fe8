"""A minimal document tree with a depth-first visitor."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class NodeKind(enum.Enum):
    """The kinds of node a markdown document tree can hold."""

    DOCUMENT = "document"
    FRONT_MATTER = "front_matter"
    BLOCK_QUOTE = "block_quote"
    LIST = "list"
    ITEM = "item"
    DESCRIPTION_LIST = "description_list"
    DESCRIPTION_ITEM = "description_item"
    DESCRIPTION_TERM = "description_term"
    DESCRIPTION_DETAILS = "description_details"
    CODE_BLOCK = "code_block"
    HTML_BLOCK = "html_block"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    THEMATIC_BREAK = "thematic_break"
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    TEXT = "text"
    TASK_ITEM = "task_item"
    SOFT_BREAK = "soft_break"
    LINE_BREAK = "line_break"
    CODE = "code"
    HTML_INLINE = "html_inline"
    EMPH = "emph"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    SUPERSCRIPT = "superscript"
    LINK = "link"
    IMAGE = "image"
    FOOTNOTE_REFERENCE = "footnote_reference"


@dataclass(eq=False)
class Node:
    """A tree node: its kind, an optional payload, and its children."""

    kind: NodeKind
    value: Any = None
    children: list[Node] = field(default_factory=list)

    def traverse(self) -> Iterator[tuple[str, Node]]:
        """Yield ("start", node) and ("end", node) edges in depth-first order."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, leaving = stack.pop()
            if leaving:
                yield "end", node
                continue
            yield "start", node
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(node.children))


class Next(enum.Enum):
    """What the traversal should do after entering a node."""

    TRAVERSE_CHILDREN = "traverse_children"
    SKIP_CHILDREN = "skip_children"


class Visitor:
    """Base visitor; override ``enter_<kind>`` and ``depart_<kind>`` methods.

    Each handler receives the node. Enter handlers return a ``Next``
    (``None`` counts as ``Next.TRAVERSE_CHILDREN``). Errors are raised.
    """

    def enter(self, node: Node) -> Next:
        handler = getattr(self, f"enter_{node.kind.value}", None)
        if handler is None:
            return Next.TRAVERSE_CHILDREN
        result = handler(node)
        return Next.TRAVERSE_CHILDREN if result is None else result

    def depart(self, node: Node) -> None:
        handler = getattr(self, f"depart_{node.kind.value}", None)
        if handler is not None:
            handler(node)


def visit(root: Node, visitor: Visitor) -> None:
    """Walk ``root`` depth first, calling the visitor on entry and exit.

    When entering a node returns ``Next.SKIP_CHILDREN``, its descendants
    are neither entered nor departed, but the node itself is departed.
    """
    skip_until: Node | None = None
    for edge, node in root.traverse():
        if skip_until is not None and edge == "end" and node is skip_until:
            skip_until = None
        if skip_until is not None:
            continue
        if edge == "end":
            visitor.depart(node)
        elif visitor.enter(node) is Next.SKIP_CHILDREN:
            skip_until = node