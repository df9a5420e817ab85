import pytest
from lxml import etree

from xmlop import is_ncname


@pytest.mark.parametrize(
    "name",
    (
        "foo",
        "foo-bar",
        "_x",
        "a.b",
        "a1",
        "Z_9.-",
        "foo:bar",
        "1abc",
        "-a",
        ".a",
        "a b",
        'a"b',
        "a/b",
        "a=b",
    ),
)
def test_ascii_tag_names_agree_with_libxml2(name):
    try:
        etree.Element(name)
    except ValueError:
        accepted = False
    else:
        accepted = True

    assert is_ncname(name) is accepted
