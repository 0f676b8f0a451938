"""Typed node exports and helpers."""

from __future__ import annotations

from .base import Node, NodeKind
from .code import CodeBlockNode, FencedCodeBlockNode
from .document import DocumentNode
from .heading import HeadingNode
from .html import HTMLBlockNode, RawHTMLNode
from .inline import (
    AutoLinkNode,
    CodeSpanNode,
    EmphasisNode,
    ImageNode,
    LinkNode,
    StringNode,
    TextNode,
)
from .link_definition import LinkDefinitionNode
from .list_item import ListItemNode, ListNode
from .paragraph import ParagraphNode, TextBlockNode
from .quote import BlockquoteNode
from .table import TableCellNode, TableHeaderNode, TableNode, TableRowNode
from .thematic_break import ThematicBreakNode

NODE_CLASS_MAP: dict[NodeKind, type[Node]] = {
    NodeKind.DOCUMENT: DocumentNode,
    NodeKind.PARAGRAPH: ParagraphNode,
    NodeKind.TEXT_BLOCK: TextBlockNode,
    NodeKind.HEADING: HeadingNode,
    NodeKind.BLOCKQUOTE: BlockquoteNode,
    NodeKind.CODE_BLOCK: CodeBlockNode,
    NodeKind.FENCED_CODE_BLOCK: FencedCodeBlockNode,
    NodeKind.HTML_BLOCK: HTMLBlockNode,
    NodeKind.LIST: ListNode,
    NodeKind.LIST_ITEM: ListItemNode,
    NodeKind.THEMATIC_BREAK: ThematicBreakNode,
    NodeKind.LINK_DEFINITION: LinkDefinitionNode,
    NodeKind.TABLE: TableNode,
    NodeKind.TABLE_HEADER: TableHeaderNode,
    NodeKind.TABLE_ROW: TableRowNode,
    NodeKind.TABLE_CELL: TableCellNode,
    NodeKind.AUTO_LINK: AutoLinkNode,
    NodeKind.CODE_SPAN: CodeSpanNode,
    NodeKind.EMPHASIS: EmphasisNode,
    NodeKind.IMAGE: ImageNode,
    NodeKind.LINK: LinkNode,
    NodeKind.RAW_HTML: RawHTMLNode,
    NodeKind.TEXT: TextNode,
    NodeKind.STRING: StringNode,
}


def node_class_for(kind: NodeKind | str) -> type[Node]:
    normalized = NodeKind(kind) if not isinstance(kind, NodeKind) else kind
    return NODE_CLASS_MAP[normalized]


__all__ = [
    "NODE_CLASS_MAP",
    "Node",
    "NodeKind",
    "AutoLinkNode",
    "BlockquoteNode",
    "CodeBlockNode",
    "CodeSpanNode",
    "DocumentNode",
    "EmphasisNode",
    "FencedCodeBlockNode",
    "HTMLBlockNode",
    "HeadingNode",
    "ImageNode",
    "LinkDefinitionNode",
    "LinkNode",
    "ListItemNode",
    "ListNode",
    "ParagraphNode",
    "RawHTMLNode",
    "StringNode",
    "TableCellNode",
    "TableHeaderNode",
    "TableNode",
    "TableRowNode",
    "TextBlockNode",
    "TextNode",
    "ThematicBreakNode",
    "node_class_for",
]
