# eipw

Building blocks for a linter of improvement-proposal documents: structured
diagnostic snippets with a plain-text renderer, reporters that collect them,
and a visitor for walking a Markdown document tree. It has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Snippets

A diagnostic is a `Snippet` from `eipw.snippet`. It holds:

- `title`: an optional `Annotation` (an `annotation_type`, an optional
  `label` and an optional `id`);
- `slices`: a list of `Slice`s, each a piece of `source` text starting at
  `line_start`, with an optional `origin` (such as a file name), a list of
  `SourceAnnotation`s marking character `range`s inside the source, and a
  `fold` flag;
- `footer`: a list of `Annotation`s shown after the slices;
- `opt`: `FormatOptions` (`color`, `anonymized_line_numbers`).

Each annotation carries an `AnnotationType`: `ERROR`, `WARNING`, `INFO`,
`NOTE` or `HELP`.

`Snippet.render()` returns the snippet as plain text, without a trailing
newline:

```
error[preamble-trim]: preamble header values must begin with a space
  |
2 | header:value0
  |        ^ space required here
  |
```

Error ranges are underlined with `^`, every other type with `-`; labels of
info, note and help annotations are prefixed with their type
(`info: first defined here`). A slice with an `origin` gets a
`--> origin:line:column` line pointing at its first annotation. With
`fold=True` only the annotated lines are shown, with `...` between gaps.
With `anonymized_line_numbers=True` line numbers are shown as `LL`.

Every snippet type converts to and from plain dictionaries with `to_dict()`
and `from_dict()`, so diagnostics can be stored as JSON and read back. An
unknown annotation type in `from_dict()` raises `ValueError`.

## Reporters

`eipw.reporters` offers implementations of the abstract `Reporter`
interface, each with a `report(snippet)` method:

- `Text(inner=None)` writes each rendered snippet followed by a newline to
  a text stream; by default an in-memory one, whose contents `getvalue()`
  returns.
- `Json()` keeps each snippet in `reports` as a dictionary (the output of
  `Snippet.to_dict()`) with the rendered text added under `"formatted"`;
  `to_json()` returns all of them as pretty-printed JSON.
- `Null()` discards everything.
- `Count(inner)` passes every snippet on to `inner` and keeps a `Counts`
  record in `counts` of how many snippets it has seen per title type
  (`error`, `warning`, `info`, `note`, `help`, and `other` for snippets
  without a title).

```python
from eipw.reporters import Count, Text
from eipw.snippet import Annotation, AnnotationType, Slice, Snippet

reporter = Count(Text())
reporter.report(
    Snippet(
        title=Annotation(AnnotationType.ERROR, "body is missing a section", "example"),
        slices=[Slice(source="", line_start=1)],
    )
)
print(reporter.counts.error)        # 1
print(reporter.inner.getvalue())
```

A reporter that cannot record a snippet (a failing stream, a snippet that
cannot be serialised) raises `ReportError`, whose `source` is the
underlying exception.

## Walking a document

`eipw.tree` describes a Markdown document as `Node`s, each with a `kind`
(a `NodeKind` such as `DOCUMENT`, `HEADING`, `PARAGRAPH`, `LINK` or `TEXT`),
an optional `value` payload and a list of `children`.

`Node.traverse()` yields `("start", node)` and `("end", node)` pairs in
depth-first document order.

Subclass `Visitor` and define `enter_<kind>` and `depart_<kind>` methods,
where `<kind>` is the `NodeKind` value (`enter_heading`, `depart_link`, ...);
each receives the node. An enter handler may return `Next.SKIP_CHILDREN`
to skip that node's descendants (the node itself is still departed);
returning nothing means `Next.TRAVERSE_CHILDREN`. Run a visitor with
`visit(root, visitor)`. Exceptions raised by handlers stop the walk.

```python
from eipw.tree import Node, NodeKind, Visitor, visit

class Headings(Visitor):
    def __init__(self):
        self.seen = []

    def enter_heading(self, node):
        self.seen.append(node.value)

doc = Node(NodeKind.DOCUMENT, children=[Node(NodeKind.HEADING, "Abstract")])
v = Headings()
visit(doc, v)
print(v.seen)  # ['Abstract']
```

## What this package does not do

It contains no lints and no linter: it does not parse Markdown or preamble
headers, does not check documents, and has no command-line tool. Document
trees have to be built as `Node`s by the caller, and diagnostics built as
`Snippet`s by the caller; the package renders, collects and counts them.