import pytest

from eipw.snippet import (
    Annotation,
    AnnotationType,
    FormatOptions,
    Slice,
    Snippet,
    SourceAnnotation,
)


def test_render_missing_headers_empty_slice():
    snippet = Snippet(
        title=Annotation(
            AnnotationType.ERROR,
            "preamble is missing header(s): `b2`",
            "preamble-required",
        ),
        slices=[Slice(source="", line_start=1)],
    )
    assert snippet.render() + "\n" == (
        "error[preamble-required]: preamble is missing header(s): `b2`\n |\n |\n"
    )


def test_render_footer():
    snippet = Snippet(
        title=Annotation(
            AnnotationType.ERROR,
            "body is missing section(s): `Orange`",
            "markdown-section-req",
        ),
        slices=[Slice(source="", line_start=1)],
        footer=[
            Annotation(
                AnnotationType.HELP, "must be at the second level (`## Heading`)"
            )
        ],
    )
    assert snippet.render() + "\n" == (
        "error[markdown-section-req]: body is missing section(s): `Orange`\n"
        " |\n"
        " |\n"
        " = help: must be at the second level (`## Heading`)\n"
    )


def test_render_two_slices_with_info():
    snippet = Snippet(
        title=Annotation(
            AnnotationType.ERROR,
            "preamble header `header` defined multiple times",
            "preamble-no-dup",
        ),
        slices=[
            Slice(
                "header: value0",
                2,
                annotations=[
                    SourceAnnotation((0, 14), "first defined here", AnnotationType.INFO)
                ],
            ),
            Slice(
                "header: value1",
                4,
                annotations=[
                    SourceAnnotation((0, 14), "redefined here", AnnotationType.ERROR)
                ],
            ),
        ],
    )
    assert snippet.render() + "\n" == (
        "error[preamble-no-dup]: preamble header `header` defined multiple times\n"
        "  |\n"
        "2 | header: value0\n"
        "  | -------------- info: first defined here\n"
        "  |\n"
        "4 | header: value1\n"
        "  | ^^^^^^^^^^^^^^ redefined here\n"
        "  |\n"
    )


def test_render_origin_location():
    snippet = Snippet(
        title=Annotation(
            AnnotationType.ERROR,
            "file name must reflect the preamble header `a1`",
            "preamble-file-name",
        ),
        slices=[
            Slice(
                "a1: value",
                2,
                origin="foo.txt",
                annotations=[
                    SourceAnnotation((3, 9), "this value", AnnotationType.ERROR)
                ],
            )
        ],
        footer=[
            Annotation(AnnotationType.HELP, "this file's name should be `hi-value.txt`")
        ],
    )
    assert snippet.render() + "\n" == (
        "error[preamble-file-name]: file name must reflect the preamble header `a1`\n"
        " --> foo.txt:2:4\n"
        "  |\n"
        "2 | a1: value\n"
        "  |    ^^^^^^ this value\n"
        "  |\n"
        "  = help: this file's name should be `hi-value.txt`\n"
    )


def test_render_warning_marks():
    snippet = Snippet(
        title=Annotation(
            AnnotationType.WARNING,
            "preamble header values must begin with a space",
            "preamble-trim",
        ),
        slices=[
            Slice(
                "header:value0",
                2,
                annotations=[
                    SourceAnnotation((7, 8), "space required here", AnnotationType.WARNING)
                ],
            )
        ],
    )
    lines = snippet.render().split("\n")
    assert lines[0] == "warning[preamble-trim]: preamble header values must begin with a space"
    assert lines[3] == "  |        - space required here"


def test_multiple_annotations_same_line():
    source = "header: foo,bar,example.com/foo?bar"
    snippet = Snippet(
        title=Annotation(AnnotationType.ERROR, "x", "preamble-list"),
        slices=[
            Slice(
                source,
                2,
                annotations=[
                    SourceAnnotation((11, 12), "missing space", AnnotationType.ERROR),
                    SourceAnnotation((15, 16), "missing space", AnnotationType.ERROR),
                ],
            )
        ],
    )
    lines = snippet.render().split("\n")
    assert lines[3] == "  |            ^ missing space"
    assert lines[4] == "  |                ^ missing space"


def test_round_trip_dict():
    snippet = Snippet(
        title=Annotation(AnnotationType.NOTE, "lbl", "some-id"),
        slices=[
            Slice(
                "abc\ndef\n",
                7,
                origin="file.md",
                annotations=[SourceAnnotation((4, 6), "here", AnnotationType.HELP)],
                fold=True,
            )
        ],
        footer=[Annotation(AnnotationType.INFO, "more")],
        opt=FormatOptions(color=True, anonymized_line_numbers=True),
    )
    assert Snippet.from_dict(snippet.to_dict()) == snippet


def test_dict_shape():
    data = Annotation(AnnotationType.ERROR, "msg", "id1").to_dict()
    assert data == {"id": "id1", "label": "msg", "annotation_type": "Error"}


def test_from_dict_defaults():
    snippet = Snippet.from_dict({"slices": []})
    assert snippet.title is None
    assert snippet.footer == []
    assert snippet.opt == FormatOptions()


def test_unknown_annotation_type():
    with pytest.raises(ValueError):
        Annotation.from_dict({"annotation_type": "Fatal"})