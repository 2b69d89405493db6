import pytest

from xml_encryption.envelope.etree_backend import EtreeBackend
from xml_encryption.envelope.lookup import (
    find_all_by_local_name,
    find_by_local_name,
    iter_descendants,
)

_DOCUMENT = """\
<root xmlns:a="urn:a" xmlns:b="urn:b">
  <a:Item id="1"><b:Value>one</b:Value></a:Item>
  <b:Item id="2"><a:Value>two</a:Value></b:Item>
  <Wrapper><Item id="3"><Nested><Value>three</Value></Nested></Item></Wrapper>
</root>
"""


@pytest.fixture
def root():
    return EtreeBackend.parse(_DOCUMENT)


def test_iter_descendants_includes_scope_in_document_order(root) -> None:
    names = [node.local_name for node in iter_descendants(root)]

    assert names[0] == "root"
    assert names.count("Item") == 3
    assert names.count("Value") == 3


def test_find_all_by_local_name_ignores_prefixes(root) -> None:
    items = find_all_by_local_name(root, "Item")

    assert [item.get("id") for item in items] == ["1", "2", "3"]


def test_find_all_by_local_name_child_steps_are_direct(root) -> None:
    values = find_all_by_local_name(root, "Item/Value")

    assert [value.text for value in values] == ["one", "two"]


def test_find_all_by_local_name_double_slash_descends(root) -> None:
    values = find_all_by_local_name(root, "Item//Value")

    assert [value.text for value in values] == ["one", "two", "three"]


def test_find_all_by_local_name_filters_last_step_by_namespace(root) -> None:
    items = find_all_by_local_name(root, "Item", namespace="urn:b")

    assert [item.get("id") for item in items] == ["2"]


def test_find_all_by_local_name_does_not_duplicate_matches(root) -> None:
    values = find_all_by_local_name(root, "root//Item//Value")

    assert len(values) == 3


def test_find_by_local_name_returns_first_match(root) -> None:
    value = find_by_local_name(root, "Wrapper/Item/Nested/Value")

    assert value is not None
    assert value.text == "three"


def test_find_by_local_name_returns_none_when_absent(root) -> None:
    assert find_by_local_name(root, "Item/Missing") is None


def test_find_by_local_name_raises_on_empty_path(root) -> None:
    with pytest.raises(ValueError, match="Empty lookup path"):
        find_by_local_name(root, "//")


def test_iter_descendants_yields_exact_document_order(root) -> None:
    names = [node.local_name for node in iter_descendants(root)]

    assert names == [
        "root", "Item", "Value", "Item", "Value", "Wrapper", "Item", "Nested", "Value",
    ]


def test_find_by_local_name_handles_deeply_nested_documents() -> None:
    depth = 3000
    document = EtreeBackend.parse("<a>" * depth + '<Target id="deep"/>' + "</a>" * depth)

    target = find_by_local_name(document, "Target")

    assert target is not None
    assert target.get("id") == "deep"
    assert sum(1 for _ in iter_descendants(document)) == depth + 1
