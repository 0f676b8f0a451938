from __future__ import annotations

import pytest
from pydantic import ValidationError

from markdown_marker.models.nodes import (
    NODE_CLASS_MAP,
    DocumentNode,
    FencedCodeBlockNode,
    HeadingNode,
    ListNode,
    NodeKind,
    ParagraphNode,
    TextNode,
    node_class_for,
)


def test_every_kind_has_a_model() -> None:
    assert set(NODE_CLASS_MAP) == set(NodeKind)
    for kind, model in NODE_CLASS_MAP.items():
        assert model().kind is kind


def test_node_class_for_accepts_string_values() -> None:
    assert node_class_for("heading") is HeadingNode
    assert node_class_for(NodeKind.TEXT) is TextNode


def test_children_receive_parent_reference() -> None:
    first = ParagraphNode(lines=("one\n",))
    second = ParagraphNode(lines=("two\n",))
    document = DocumentNode(children=(first, second))

    assert first.parent is document
    assert first.next_sibling is second
    assert second.next_sibling is None
    assert first.is_top_level()
    assert document.parent is None
    assert not document.is_top_level()


def test_content_joins_source_lines() -> None:
    node = ParagraphNode(lines=("one\n", "two\n"))

    assert node.content == "one\ntwo\n"


def test_nodes_are_immutable() -> None:
    node = TextNode(value="x")

    with pytest.raises(ValidationError):
        node.value = "y"


def test_kind_cannot_be_overridden() -> None:
    heading = HeadingNode(level=2)

    with pytest.raises(ValidationError):
        heading.kind = NodeKind.PARAGRAPH


@pytest.mark.parametrize("level", [0, 7])
def test_heading_level_is_validated(level: int) -> None:
    with pytest.raises(ValidationError):
        HeadingNode(level=level)


def test_list_marker_is_a_single_character() -> None:
    with pytest.raises(ValidationError):
        ListNode(marker="--")


@pytest.mark.parametrize(
    ("info", "language"),
    [(None, None), ("", None), ("go", "go"), ("json title=example", "json")],
)
def test_fenced_code_language_is_first_info_word(info: str | None, language: str | None) -> None:
    assert FencedCodeBlockNode(info=info).language == language
