"""
Integration tests for properties that hold across the whole pipeline.

Formatting must be idempotent, must not change the syntax tree, and must keep
member order; trailing commas must change nothing but commas.
"""

import pytest

import jsonpress
from jsonpress import ErrorKind, FormatOptions, ParseError

DOCUMENTS = [
    "{}",
    "[]",
    '{"hello": "world"}',
    "[1, 2, 3]",
    '{"a": {"b": 1}}',
    '{"z": 1, "a": 2, "m": [3, 2, 1], "e": {}}',
    '[[], [[]], {"x": [{"y": null}]}, true, false, 0.25]',
    '{"path": "C:\\\\temp", "quote": "say \\"hi\\"", "unicode": "héllo"}',
    '{"a": 1, "a": 2}',
    '[1 2,,3,]',
    '\n\t{ "spread"\n:\n[ 1\n,\t2 ] }\n',
]

OPTION_SETS = [
    FormatOptions(),
    FormatOptions(spaces=2),
    FormatOptions(spaces=1, trailing_commas=True),
    FormatOptions(use_tabs=True),
    FormatOptions(use_tabs=True, trailing_commas=True),
]


@pytest.mark.parametrize("options", OPTION_SETS)
@pytest.mark.parametrize("document", DOCUMENTS)
def test_formatting_is_idempotent(document, options):
    once = jsonpress.format_json(document, options)
    assert jsonpress.format_json(once, options) == once


@pytest.mark.parametrize("options", OPTION_SETS)
@pytest.mark.parametrize("document", DOCUMENTS)
def test_formatting_preserves_tree(document, options):
    formatted = jsonpress.format_json(document, options)
    assert jsonpress.parse(formatted) == jsonpress.parse(document)


def test_member_order_preserved():
    formatted = jsonpress.format_json('{"c": 1, "a": 2, "b": [9, 7, 8]}')
    assert formatted.index('"c"') < formatted.index('"a"') < formatted.index('"b"')
    assert formatted.index("9") < formatted.index("7") < formatted.index("8")


def _count_nonempty_closers(tree):
    if isinstance(tree, jsonpress.ObjectLiteralExpression):
        own = 1 if tree.members else 0
        return own + sum(_count_nonempty_closers(m.value) for m in tree.members)
    if isinstance(tree, jsonpress.ArrayLiteralExpression):
        own = 1 if tree.elements else 0
        return own + sum(_count_nonempty_closers(e) for e in tree.elements)
    return 0


@pytest.mark.parametrize("document", DOCUMENTS)
def test_trailing_commas_only_add_commas(document):
    plain = jsonpress.format_json(document)
    trailing = jsonpress.format_json(document, trailing_commas=True)

    expected_extra = _count_nonempty_closers(jsonpress.parse(document))
    assert trailing.count(",") - plain.count(",") == expected_extra
    assert trailing.replace(",\n", "\n") == plain.replace(",\n", "\n")


@pytest.mark.parametrize(
    "document, options, expected",
    [
        ('{"hello": "world"}', FormatOptions(), '{\n    "hello": "world"\n}'),
        ("[1, 2, 3]", FormatOptions(), "[\n    1,\n    2,\n    3\n]"),
        ("[1, 2]", FormatOptions(trailing_commas=True), "[\n    1,\n    2,\n]"),
        ('{"a": {"b": 1}}', FormatOptions(spaces=2), '{\n  "a": {\n    "b": 1\n  }\n}'),
        ("{}", FormatOptions(), "{\n}"),
        ("[]", FormatOptions(), "[\n]"),
    ],
)
def test_canonical_examples(document, options, expected):
    assert jsonpress.format_json(document, options) == expected


@pytest.mark.parametrize(
    "document, kind",
    [
        ("123", ErrorKind.UNEXPECTED_TOKEN),
        ('{"a": 1', ErrorKind.UNTERMINATED_INPUT),
        ('{"a" 1}', ErrorKind.UNEXPECTED_TOKEN),
        ("[1, $]", ErrorKind.UNEXPECTED_CHARACTER),
        ("[maybe]", ErrorKind.UNRECOGNIZED_KEYWORD),
        ("[3.]", ErrorKind.MALFORMED_NUMBER),
        ('["open', ErrorKind.UNTERMINATED_INPUT),
    ],
)
def test_invalid_documents_fail(document, kind):
    with pytest.raises(ParseError) as exc_info:
        jsonpress.format_json(document)
    assert exc_info.value.kind == kind
