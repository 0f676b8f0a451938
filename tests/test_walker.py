from __future__ import annotations

import pytest

from markdown_marker.models.nodes import DocumentNode, EmphasisNode, HeadingNode, Node, ParagraphNode, TextNode
from markdown_marker.walker import WalkStatus, walk


def _tree() -> DocumentNode:
    return DocumentNode(
        children=(
            HeadingNode(level=1, children=(TextNode(value="Title"),)),
            ParagraphNode(
                lines=("body",),
                children=(TextNode(value="a"), EmphasisNode(children=(TextNode(value="b"),))),
            ),
        )
    )


def _label(node: Node) -> str:
    value = getattr(node, "value", None)
    return f"{node.kind.value}:{value}" if value else node.kind.value


def test_walk_visits_enter_and_exit_in_document_order() -> None:
    events: list[tuple[str, bool]] = []

    def visitor(node: Node, entering: bool) -> WalkStatus:
        events.append((_label(node), entering))
        return WalkStatus.CONTINUE

    assert walk(_tree(), visitor) is WalkStatus.CONTINUE
    assert events == [
        ("document", True),
        ("heading", True),
        ("text:Title", True),
        ("text:Title", False),
        ("heading", False),
        ("paragraph", True),
        ("text:a", True),
        ("text:a", False),
        ("emphasis", True),
        ("text:b", True),
        ("text:b", False),
        ("emphasis", False),
        ("paragraph", False),
        ("document", False),
    ]


def test_skip_children_still_calls_exit() -> None:
    events: list[tuple[str, bool]] = []

    def visitor(node: Node, entering: bool) -> WalkStatus:
        events.append((_label(node), entering))
        if node.kind.value == "paragraph":
            return WalkStatus.SKIP_CHILDREN
        return WalkStatus.CONTINUE

    walk(_tree(), visitor)

    assert ("paragraph", False) in events
    assert ("text:a", True) not in events


def test_stop_ends_the_walk() -> None:
    seen: list[str] = []

    def visitor(node: Node, entering: bool) -> WalkStatus:
        seen.append(_label(node))
        return WalkStatus.STOP if node.kind.value == "heading" else WalkStatus.CONTINUE

    assert walk(_tree(), visitor) is WalkStatus.STOP
    assert seen == ["document", "heading"]


def test_visitor_errors_propagate() -> None:
    def visitor(node: Node, entering: bool) -> WalkStatus:
        if isinstance(node, TextNode):
            raise RuntimeError(node.value)
        return WalkStatus.CONTINUE

    with pytest.raises(RuntimeError, match="Title"):
        walk(_tree(), visitor)
