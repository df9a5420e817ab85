import pytest

from xmlop import NameString, NameView, NcnameString, NcnameView, Qname
from xmlop.exceptions import NameParsingError
from xmlop.parser import (
    Recognition,
    parse_name,
    parse_name_string,
    parse_ncname,
    parse_ncname_string,
    parse_qname,
)


@pytest.mark.parametrize(
    ("text", "name", "remainder"),
    (
        ("foo-bar  ", "foo-bar", "  "),
        ("foo:bar  ", "foo:bar", "  "),
        ("foo", "foo", ""),
        ("a/>", "a", "/>"),
        ("été=", "été", "="),
    ),
)
def test_parse_name(text, name, remainder):
    value, rest, end = parse_name(text)
    assert type(value) is NameView
    assert value == name
    assert value.source is text
    assert rest == remainder
    assert text[end:] == remainder


def test_parse_name_at_position():
    text = "<foo:bar/>"
    result = parse_name(text, 1)
    assert result == Recognition(NameView("foo:bar"), "/>", 8)
    assert result.value.span == (1, 8)


@pytest.mark.parametrize("text", (" foo", "", "1abc", "-"))
def test_parse_name_failure(text):
    with pytest.raises(NameParsingError) as exception_info:
        parse_name(text)
    assert exception_info.value.position == 0


def test_parse_beyond_text():
    with pytest.raises(NameParsingError) as exception_info:
        parse_name("foo", 3)
    assert exception_info.value.position == 3

    with pytest.raises(ValueError):  # noqa: PT011
        parse_name("foo", -1)


@pytest.mark.parametrize(
    ("text", "name", "remainder"),
    (
        ("foo-bar  ", "foo-bar", "  "),
        ("foo:bar", "foo", ":bar"),
        ("foo", "foo", ""),
    ),
)
def test_parse_ncname(text, name, remainder):
    value, rest, _ = parse_ncname(text)
    assert type(value) is NcnameView
    assert value == name
    assert rest == remainder


def test_parse_ncname_failure():
    with pytest.raises(NameParsingError) as exception_info:
        parse_ncname(":foo")
    assert exception_info.value.position == 0


def test_parse_strings():
    value, remainder, end = parse_name_string("foo:bar baz")
    assert type(value) is NameString
    assert value == "foo:bar"
    assert remainder == " baz"
    assert end == 7

    value, remainder, end = parse_ncname_string("foo:bar baz")
    assert type(value) is NcnameString
    assert value == "foo"
    assert remainder == ":bar baz"
    assert end == 3


@pytest.mark.parametrize(
    ("text", "position", "prefix", "local", "remainder"),
    (
        ("foo:bar  ", 0, "foo", "bar", "  "),
        ("foo  ", 0, None, "foo", "  "),
        ("foo bar", 0, None, "foo", " bar"),
        ("a:b:c", 0, "a", "b", ":c"),
        ("<xsl:template match='/'>", 1, "xsl", "template", " match='/'>"),
        ("</p>", 2, None, "p", ">"),
    ),
)
def test_parse_qname(text, position, prefix, local, remainder):
    qname, rest, end = parse_qname(text, position)
    assert type(qname) is Qname
    assert qname.prefix == prefix
    assert qname.local == local
    assert rest == remainder
    assert text[end:] == remainder


@pytest.mark.parametrize(
    ("text", "position"),
    (
        ("foo:", 4),
        ("foo:1bar", 4),
        ("foo: bar", 4),
        ("foo::bar", 4),
        (":foo", 0),
        ("", 0),
    ),
)
def test_parse_qname_failure(text, position):
    # a colon after an NCName is never left unconsumed
    with pytest.raises(NameParsingError) as exception_info:
        parse_qname(text)
    assert exception_info.value.position == position


@pytest.mark.parametrize(
    ("text", "message"),
    (
        (
            " foo",
            "Name parsing error at character 0 (` foo`): Expected an NCName. "
            "Found ' '.",
        ),
        (
            "foo:",
            "Name parsing error at character 4: "
            "Expected a local name after the colon. Found the end of the text.",
        ),
        (
            "foo:-abcdefghijklmnopqrstuvwxyz",
            "Name parsing error at character 4 (`-abcdefghijklmno…`): "
            "Expected a local name after the colon. Found '-'.",
        ),
    ),
)
def test_parsing_error_message(text, message):
    with pytest.raises(NameParsingError) as exception_info:
        parse_qname(text)
    assert str(exception_info.value) == message


@pytest.mark.parametrize(
    ("text", "position", "character"),
    (("foo: bar", 4, " "), ("foo:", 4, None), ("", 0, None), ("-a", 0, "-")),
)
def test_parsing_error_character(text, position, character):
    with pytest.raises(NameParsingError) as exception_info:
        parse_qname(text)
    assert exception_info.value.position == position
    assert exception_info.value.character == character
