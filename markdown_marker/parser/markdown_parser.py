"""Markdown → node tree conversion built on Mistune's AST."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import mistune
from mistune.plugins.table import table, table_in_list, table_in_quote

from markdown_marker.models.nodes import (
    AutoLinkNode,
    BlockquoteNode,
    CodeBlockNode,
    CodeSpanNode,
    DocumentNode,
    EmphasisNode,
    FencedCodeBlockNode,
    HeadingNode,
    HTMLBlockNode,
    ImageNode,
    LinkDefinitionNode,
    LinkNode,
    ListItemNode,
    ListNode,
    Node,
    ParagraphNode,
    RawHTMLNode,
    StringNode,
    TableCellNode,
    TableHeaderNode,
    TableNode,
    TableRowNode,
    TextBlockNode,
    TextNode,
    ThematicBreakNode,
)

logger = logging.getLogger(__name__)

MarkdownAst = list[dict[str, Any]]

_DEFAULT_PLUGINS = (table, table_in_quote, table_in_list)
_SOURCE_KEY = "source"
_LINK_DEFINITION = "link_definition"


def _keep_inline_source(md: mistune.Markdown, state: Any) -> None:
    """Copy each token's raw inline text before Mistune replaces it with children."""

    def visit(tokens: MarkdownAst) -> None:
        for token in tokens:
            if "text" in token:
                token[_SOURCE_KEY] = token["text"]
            visit(token.get("children", []))

    visit(state.tokens)


def _keep_link_definitions(md: mistune.Markdown, state: Any) -> None:
    """Append the document's link reference definitions as trailing tokens.

    Mistune resolves reference links through ``state.env`` and leaves no token
    behind for the definitions themselves.
    """
    for definition in state.env.get("ref_links", {}).values():
        attrs = {"label": definition["label"], "url": definition["url"]}
        if definition.get("title"):
            attrs["title"] = definition["title"]
        state.tokens.append({"type": _LINK_DEFINITION, "attrs": attrs})


def parse_markdown(source: str) -> MarkdownAst:
    """Return Mistune's AST for the provided Markdown source."""
    markdown = mistune.create_markdown(renderer="ast", plugins=_DEFAULT_PLUGINS)
    markdown.before_render_hooks.append(_keep_inline_source)
    markdown.before_render_hooks.append(_keep_link_definitions)
    return markdown(source)


def markdown_to_nodes(source: str) -> DocumentNode:
    """Convert Markdown source into a typed node tree."""
    ast = parse_markdown(source)
    document = ast_to_nodes(ast)
    logger.debug("Parsed %d top-level blocks", len(document.children))
    return document


def load_markdown_path(path: str | Path) -> DocumentNode:
    """Read Markdown from disk and convert to a node tree."""
    content = Path(path).read_text(encoding="utf-8")
    return markdown_to_nodes(content)


def ast_to_nodes(tokens: MarkdownAst) -> DocumentNode:
    """Convert a pre-computed Markdown AST into a document node."""
    return DocumentNode(children=tuple(_block_nodes(tokens)))


# Blocks -----------------------------------------------------------------
def _block_nodes(tokens: MarkdownAst) -> list[Node]:
    nodes: list[Node] = []
    for token in tokens:
        node = _block_node(token)
        if node is not None:
            nodes.append(node)
    return nodes


def _block_node(token: dict[str, Any]) -> Node | None:
    token_type = token.get("type")
    attrs = token.get("attrs", {})

    if token_type == "blank_line":
        return None

    if token_type == "paragraph":
        return ParagraphNode(lines=_source_lines(token), children=_inline_nodes(token))

    if token_type == "block_text":
        return TextBlockNode(lines=_source_lines(token), children=_inline_nodes(token))

    if token_type == "heading":
        return HeadingNode(
            level=int(attrs.get("level", 1)),
            lines=_source_lines(token),
            children=_inline_nodes(token, breaks_as_spaces=True),
        )

    if token_type == "block_quote":
        return BlockquoteNode(children=tuple(_block_nodes(token.get("children", []))))

    if token_type == "block_code":
        return _code_node(token)

    if token_type == "block_html":
        return HTMLBlockNode(lines=_split_keep_ends(token.get("raw") or ""))

    if token_type == "thematic_break":
        return ThematicBreakNode()

    if token_type == "list":
        return _list_node(token)

    if token_type == "table":
        return _table_node(token)

    if token_type == _LINK_DEFINITION:
        return LinkDefinitionNode(
            label=" ".join(str(attrs.get("label", "")).split()),
            destination=attrs.get("url") or "",
            title=attrs.get("title"),
        )

    fallback = _extract_text(token).strip()
    if not fallback:
        return None
    logger.debug("Unsupported block token %r converted to a paragraph", token_type)
    return ParagraphNode(lines=(fallback,), children=(TextNode(value=fallback),))


def _code_node(token: dict[str, Any]) -> Node:
    lines = _split_keep_ends(token.get("raw") or "")
    if token.get("style") == "indent":
        return CodeBlockNode(lines=lines)
    info = (token.get("attrs", {}).get("info") or "").strip()
    return FencedCodeBlockNode(info=info or None, lines=lines)


def _list_node(token: dict[str, Any]) -> ListNode:
    attrs = token.get("attrs", {})
    items = [
        ListItemNode(children=tuple(_block_nodes(child.get("children", []))))
        for child in token.get("children", [])
        if child.get("type") == "list_item"
    ]
    return ListNode(
        ordered=bool(attrs.get("ordered", False)),
        start=int(attrs.get("start", 1)),
        marker=token.get("bullet") or "-",
        tight=bool(token.get("tight", True)),
        children=tuple(items),
    )


def _table_node(token: dict[str, Any]) -> TableNode:
    sections: list[Node] = []
    for section in token.get("children", []):
        section_type = section.get("type")
        if section_type == "table_head":
            sections.append(TableHeaderNode(children=_table_cells(section)))
        elif section_type == "table_body":
            for row in section.get("children", []):
                if row.get("type") == "table_row":
                    sections.append(TableRowNode(children=_table_cells(row)))
    return TableNode(children=tuple(sections))


def _table_cells(row: dict[str, Any]) -> tuple[Node, ...]:
    cells: list[Node] = []
    for cell in row.get("children", []):
        if cell.get("type") != "table_cell":
            continue
        cells.append(
            TableCellNode(
                align=_normalise_alignment(cell.get("attrs", {}).get("align")),
                lines=_source_lines(cell),
                children=_inline_nodes(cell),
            )
        )
    return tuple(cells)


def _normalise_alignment(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).lower()
    if text in {"left", "center", "right"}:
        return text
    return None


# Inlines ----------------------------------------------------------------
def _inline_nodes(token: dict[str, Any], *, breaks_as_spaces: bool = False) -> tuple[Node, ...]:
    nodes: list[Node] = []
    for child in token.get("children", []):
        child_type = child.get("type")
        if child_type in {"softbreak", "linebreak"}:
            _mark_break(nodes, hard=child_type == "linebreak", as_space=breaks_as_spaces)
            continue
        node = _inline_node(child, breaks_as_spaces=breaks_as_spaces)
        if node is not None:
            nodes.append(node)
    return tuple(nodes)


def _mark_break(nodes: list[Node], *, hard: bool, as_space: bool) -> None:
    """Fold a line break into the preceding text node, adding one if needed."""
    previous = nodes[-1] if nodes else None
    if as_space:
        if isinstance(previous, TextNode):
            nodes[-1] = previous.model_copy(update={"value": previous.value + " "})
        else:
            nodes.append(TextNode(value=" "))
        return

    flag = "hard_line_break" if hard else "soft_line_break"
    if isinstance(previous, TextNode) and not (previous.hard_line_break or previous.soft_line_break):
        nodes[-1] = previous.model_copy(update={flag: True})
    else:
        nodes.append(TextNode(**{flag: True}))


def _inline_node(token: dict[str, Any], *, breaks_as_spaces: bool) -> Node | None:
    token_type = token.get("type")
    attrs = token.get("attrs", {})

    if token_type == "text":
        raw = token.get("raw") or ""
        return TextNode(value=raw) if raw else None

    if token_type in {"emphasis", "strong"}:
        return EmphasisNode(
            level=2 if token_type == "strong" else 1,
            children=_inline_nodes(token, breaks_as_spaces=breaks_as_spaces),
        )

    if token_type == "codespan":
        raw = token.get("raw") or ""
        return CodeSpanNode(children=(TextNode(value=raw),) if raw else ())

    if token_type == "link":
        url = attrs.get("url") or ""
        label = _extract_text(token)
        if not attrs.get("title") and url in {label, f"mailto:{label}"}:
            return AutoLinkNode(url=label, children=(TextNode(value=label),))
        return LinkNode(
            destination=url,
            title=attrs.get("title"),
            children=_inline_nodes(token, breaks_as_spaces=breaks_as_spaces),
        )

    if token_type == "image":
        return ImageNode(
            destination=attrs.get("url") or "",
            title=attrs.get("title"),
            children=_inline_nodes(token, breaks_as_spaces=breaks_as_spaces),
        )

    if token_type == "inline_html":
        return RawHTMLNode(value=token.get("raw") or "")

    text = _extract_text(token)
    return StringNode(value=text) if text else None


# Helpers ----------------------------------------------------------------
def _source_lines(token: dict[str, Any]) -> tuple[str, ...]:
    source = token.get(_SOURCE_KEY)
    if not isinstance(source, str):
        source = _extract_text(token)
    return _split_keep_ends(source)


def _split_keep_ends(text: str) -> tuple[str, ...]:
    return tuple(text.splitlines(keepends=True))


def _extract_text(token: dict[str, Any]) -> str:
    token_type = token.get("type")
    if token_type in {"softbreak", "linebreak"}:
        return "\n"
    raw = token.get("raw")
    if isinstance(raw, str):
        return raw
    parts: list[str] = []
    for child in token.get("children", []):
        parts.append(_extract_text(child))
    return "".join(parts)


__all__ = [
    "MarkdownAst",
    "ast_to_nodes",
    "load_markdown_path",
    "markdown_to_nodes",
    "parse_markdown",
]
