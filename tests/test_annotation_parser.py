"""Tests for parsing a single comment buffer into an item."""

import pytest

from scssdoc.annotation_parser import parse_buffer
from scssdoc.models import ItemKind, Link, Param, Requirement, Return
from scssdoc.parse_error import ParseError, ParseErrorKind


def test_function_with_param_and_return() -> None:
    """Verify a documented function with a parameter and a return value."""
    item = parse_buffer(
        "Returns a doubled number.\n"
        "@param {number} $n - value\n"
        "@return {number} - doubled value\n"
        "@function double($n) { @return $n * 2; }\n"
    )
    assert item.name == "double"
    assert item.kind is ItemKind.FUNCTION
    assert item.description == "Returns a doubled number."
    assert item.parameters == [
        Param(type=["number"], name="n", default_value="", description="value")
    ]
    assert item.returns == Return(type=["number"], description="doubled value")


def test_variable_with_global_flag() -> None:
    """Verify a documented global variable declaration."""
    item = parse_buffer("@var {color}\n$primary: #333 !global;\n")
    assert item.kind is ItemKind.VARIABLE
    assert item.datatype == ["color"]
    assert item.name == "primary"
    assert item.value == "#333"
    assert item.access == "global"
    assert item.description is None


def test_variable_value_spans_lines() -> None:
    """Verify that a value runs up to its semicolon across line breaks."""
    item = parse_buffer("@var {map}\n$breakpoints: (\n  small: 480px,\n) !global;\n")
    assert item.value == "( small: 480px, )"
    assert item.access == "global"


def test_variable_value_requires_semicolon() -> None:
    """Verify that a value without a semicolon is unterminated."""
    with pytest.raises(ParseError) as exc:
        parse_buffer("$size: 4px\n")
    assert exc.value.kind is ParseErrorKind.UNTERMINATED_TOKEN


def test_scoped_variable_without_var_annotation() -> None:
    """Verify that a bare declaration is a scoped variable."""
    item = parse_buffer("Base spacing unit.\n$spacing : 4px;\n")
    assert item.kind is ItemKind.VARIABLE
    assert item.name == "spacing"
    assert item.value == "4px"
    assert item.access == "scoped"
    assert item.description == "Base spacing unit."


def test_var_description_after_hyphen() -> None:
    """Verify that @var keeps a trailing description."""
    item = parse_buffer("@var {number | string} - Base size\n$size: 1rem;\n")
    assert item.datatype == ["number", "string"]
    assert item.description == "Base size"


def test_param_default_value_and_type_union() -> None:
    """Verify union types and default values on parameters."""
    item = parse_buffer(
        "@param {number | null} $width (100%) - Target width\n"
        "@param {string} $mode\n"
        "@mixin box($width, $mode) {\n"
    )
    assert item.kind is ItemKind.MIXIN
    assert item.name == "box"
    assert item.parameters[0] == Param(
        type=["number", "null"],
        name="width",
        default_value="100%",
        description="Target width",
    )
    assert item.parameters[1] == Param(type=["string"], name="mode")


def test_type_group_is_normalized() -> None:
    """Verify that type groups fold whitespace and keep order and duplicates."""
    item = parse_buffer(
        "@return {  map |\n  list | map }\n@function f() {\n"
    )
    assert item.returns is not None
    assert item.returns.type == ["map", "list", "map"]


def test_simple_annotations() -> None:
    """Verify access, since, alias and author capture."""
    item = parse_buffer(
        "@access  private \n"
        "@since 1.2.0\n"
        "@alias   other-name\n"
        "@author Jane   Doe\n"
        "@mixin helper() {\n"
    )
    assert item.access == "private"
    assert item.since == "1.2.0"
    assert item.alias == "other-name"
    assert item.author == "Jane Doe"


def test_list_annotations() -> None:
    """Verify that throws, exception and todo accumulate."""
    item = parse_buffer(
        "@throws Invalid input\n"
        "@exception Out of range\n"
        "@todo Support maps\n"
        "@todo Support lists\n"
        "@function g() {\n"
    )
    assert item.throws == ["Invalid input", "Out of range"]
    assert item.todo == ["Support maps", "Support lists"]


def test_deprecated_forms() -> None:
    """Verify @deprecated with a message, bare, and followed by an annotation."""
    assert parse_buffer("@deprecated Use new()\n@function a() {\n").deprecated == (
        "Use new()"
    )
    assert parse_buffer("@deprecated\n@function a() {\n").deprecated == ""

    item = parse_buffer("@deprecated @since 2.0\n@function a() {\n")
    assert item.deprecated == ""
    assert item.since == "2.0"


def test_requires_with_and_without_kind() -> None:
    """Verify explicit and implicit requirement kinds."""
    item = parse_buffer(
        "@requires {mixin} clearfix\n"
        "@require {var} base-color\n"
        "@requires helper\n"
        "@function h() {\n"
    )
    assert item.requires == [
        Requirement(target="clearfix", kind=ItemKind.MIXIN),
        Requirement(target="base-color", kind=ItemKind.VARIABLE),
        Requirement(target="helper"),
    ]


def test_invalid_requires_kind() -> None:
    """Verify that an unknown explicit requirement kind is fatal."""
    with pytest.raises(ParseError) as exc:
        parse_buffer("@requires {foo} bar\n@function h() {\n")
    assert exc.value.kind is ParseErrorKind.INVALID_REQUIRES_KIND


def test_links_default_label() -> None:
    """Verify that link labels default to the URL."""
    item = parse_buffer(
        "@link http://sass-lang.com Sass docs\n"
        "@link https://example.com\n"
        "@function l() {\n"
    )
    assert item.links == [
        Link(url="http://sass-lang.com", label="Sass docs"),
        Link(url="https://example.com", label="https://example.com"),
    ]


def test_ignore_keeps_item() -> None:
    """Verify that @ignore only drops its own line."""
    item = parse_buffer("@ignore not documented\nKept text\n@function i() {\n")
    assert item.name == "i"
    assert item.description == "Kept text"


def test_unknown_annotation() -> None:
    """Verify that an unknown annotation keyword is fatal."""
    with pytest.raises(ParseError) as exc:
        parse_buffer("Text\n@frobnicate now\n@function x() {\n")
    assert exc.value.kind is ParseErrorKind.UNKNOWN_ANNOTATION
    assert exc.value.line == 2


def test_param_without_name_is_unexpected() -> None:
    """Verify that a parameter must name a variable."""
    with pytest.raises(ParseError) as exc:
        parse_buffer("@param {number} n\n@function x() {\n")
    assert exc.value.kind is ParseErrorKind.UNEXPECTED_TOKEN


def test_signature_stops_parsing() -> None:
    """Verify that nothing after the signature is read."""
    item = parse_buffer("@mixin clearfix {\n@unknown\n")
    assert item.name == "clearfix"
    assert item.kind is ItemKind.MIXIN


def test_multiline_description_from_block_comment() -> None:
    """Verify that comment markers are skipped and lines are joined."""
    item = parse_buffer("\n * First line\n * Second line\n \n@function m() {\n")
    assert item.description == "First line\nSecond line"
