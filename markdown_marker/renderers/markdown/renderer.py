"""Markdown pretty-printer driven by tree-walk events."""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, TextIO, TypeVar

from markdown_marker.config import HardBreakPolicy, ListNumbering, RendererConfig
from markdown_marker.errors import InvariantViolation
from markdown_marker.formatters.base import CodeFormatterRegistry
from markdown_marker.models.nodes import (
    AutoLinkNode,
    EmphasisNode,
    FencedCodeBlockNode,
    HeadingNode,
    ImageNode,
    LinkDefinitionNode,
    LinkNode,
    ListItemNode,
    ListNode,
    Node,
    NodeKind,
    RawHTMLNode,
    StringNode,
    TableCellNode,
    TextNode,
)
from markdown_marker.renderers.base import Renderer
from markdown_marker.walker import WalkStatus, walk

from .context import RenderContext
from .reflow import reflow, split_hard_breaks
from .table import compute_table_layout

logger = logging.getLogger(__name__)

NodeHandler = Callable[[Node, bool, RenderContext], WalkStatus]
N = TypeVar("N", bound=Node)

_FENCE_RUN_RE = re.compile(r"^[ \t]*(`{3,})", re.M)
_BACKTICK_RUN_RE = re.compile(r"`+")
_BLOCK_START_RE = re.compile(
    r"^(?:(?P<digits>\d{1,9})(?=[.)](?:\s|$))"
    r"|[-+*](?=\s|$)|>|#{1,6}(?=\s|$)|[=-]+\s*$|(?:\*\s*){3,}$|(?:_\s*){3,}$|`{3,}|~{3,})"
)


@dataclass(slots=True)
class MarkdownRenderer(Renderer):
    """Re-emit a parse tree as canonical Markdown.

    Each node kind has exactly one handler; ``__post_init__`` refuses to build
    a renderer whose dispatch table misses a kind. Handlers receive the node,
    the walk direction and the per-render context, and answer with a
    ``WalkStatus``.
    """

    config: RendererConfig = field(default_factory=RendererConfig)
    _formatters: CodeFormatterRegistry = field(init=False, repr=False)
    _handlers: dict[NodeKind, NodeHandler] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._formatters = CodeFormatterRegistry.from_registrations(self.config.formatters)
        self._handlers = self._default_handlers()
        missing = [kind.value for kind in NodeKind if kind not in self._handlers]
        if missing:
            raise InvariantViolation(f"no render handler for node kinds: {', '.join(missing)}")

    @property
    def formatters(self) -> CodeFormatterRegistry:
        return self._formatters

    def render(self, document: Node, sink: TextIO) -> None:
        """Write the formatted rendering of ``document`` to ``sink``.

        ``FormatError`` from a code formatter aborts the render; whatever was
        written before the failure stays in ``sink``.
        """
        ctx = RenderContext(sink=sink, config=self.config)
        logger.debug("Rendering %s tree at width %d", document.kind.value, self.config.max_width)
        walk(document, lambda node, entering: self._dispatch(node, entering, ctx))
        logger.debug("Finished rendering %s tree", document.kind.value)

    def render_to_string(self, document: Node) -> str:
        buffer = io.StringIO()
        self.render(document, buffer)
        return buffer.getvalue()

    # Internal helpers -------------------------------------------------
    def _dispatch(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        handler = self._handlers.get(node.kind)
        if handler is None:
            raise InvariantViolation(f"no render handler for node kind {node.kind.value}")
        return handler(node, entering, ctx)

    def _default_handlers(self) -> dict[NodeKind, NodeHandler]:
        return {
            NodeKind.DOCUMENT: self._render_document,
            NodeKind.PARAGRAPH: self._render_prose,
            NodeKind.TEXT_BLOCK: self._render_prose,
            NodeKind.HEADING: self._render_heading,
            NodeKind.BLOCKQUOTE: self._render_blockquote,
            NodeKind.CODE_BLOCK: self._render_code_block,
            NodeKind.FENCED_CODE_BLOCK: self._render_fenced_code_block,
            NodeKind.HTML_BLOCK: self._render_html_block,
            NodeKind.LIST: self._render_list,
            NodeKind.LIST_ITEM: self._render_list_item,
            NodeKind.THEMATIC_BREAK: self._render_thematic_break,
            NodeKind.LINK_DEFINITION: self._render_link_definition,
            # inlines
            NodeKind.AUTO_LINK: self._render_auto_link,
            NodeKind.CODE_SPAN: self._render_span,
            NodeKind.EMPHASIS: self._render_span,
            NodeKind.IMAGE: self._render_link,
            NodeKind.LINK: self._render_link,
            NodeKind.RAW_HTML: self._render_literal,
            NodeKind.TEXT: self._render_text,
            NodeKind.STRING: self._render_literal,
            # tables
            NodeKind.TABLE: self._render_table,
            NodeKind.TABLE_HEADER: self._render_table_row,
            NodeKind.TABLE_ROW: self._render_table_row,
            NodeKind.TABLE_CELL: self._render_table_cell,
        }

    def _separate(self, node: Node, ctx: RenderContext) -> None:
        if node.is_top_level() and node.next_sibling is not None:
            ctx.blank_line()

    # Blocks -----------------------------------------------------------
    def _render_document(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        return WalkStatus.CONTINUE

    def _render_prose(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            # The raw lines already hold every child's text.
            for line in self._prose_lines(node, ctx.reflow_width()):
                ctx.write_line(line)
            return WalkStatus.SKIP_CHILDREN

        if node.is_top_level():
            ctx.blank_line()
        elif node.kind is NodeKind.PARAGRAPH and node.next_sibling is not None:
            ctx.blank_line()
        return WalkStatus.SKIP_CHILDREN

    def _prose_lines(self, node: Node, width: int) -> list[str]:
        runs = split_hard_breaks(node.lines)
        if self.config.hard_breaks is HardBreakPolicy.COLLAPSE:
            lines = reflow(" ".join(runs), width)
        else:
            lines = []
            for index, run in enumerate(runs):
                wrapped = reflow(run, width)
                if wrapped and index < len(runs) - 1:
                    wrapped[-1] += "\\"
                lines.extend(wrapped)
        # A wrapped line must not re-parse as the start of a new block.
        return lines[:1] + [_escape_block_start(line) for line in lines[1:]]

    def _render_heading(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        heading = _expect(node, HeadingNode)
        if entering:
            ctx.open_line()
            ctx.write("#" * heading.level + " ")
            if heading.lines:
                # Parsed headings keep their source text, escapes included.
                ctx.write(" ".join(heading.content.split()))
                return WalkStatus.SKIP_CHILDREN
            return WalkStatus.CONTINUE

        if node.is_top_level() or node.next_sibling is not None:
            ctx.blank_line()
        elif not ctx.at_line_start:
            ctx.write("\n")
        return WalkStatus.CONTINUE

    def _render_blockquote(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        decoration = self.config.decoration_for(NodeKind.BLOCKQUOTE)
        if entering:
            ctx.open_line()
            ctx.write(decoration.prefix)
            ctx.prefixes.append(decoration.prefix)
            return WalkStatus.CONTINUE

        ctx.prefixes.pop()
        if decoration.suffix:
            ctx.write(decoration.suffix + "\n")
        else:
            ctx.blank_line()
        return WalkStatus.CONTINUE

    def _render_code_block(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            for line in _split_lines(node.content):
                ctx.write_line("    " + line if line else "")
        else:
            self._separate(node, ctx)
        return WalkStatus.SKIP_CHILDREN

    def _render_fenced_code_block(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        block = _expect(node, FencedCodeBlockNode)
        code = block.content
        fence = _fence_for(code)
        if not entering:
            ctx.write_line(fence)
            self._separate(node, ctx)
            return WalkStatus.SKIP_CHILDREN

        language = block.language
        ctx.write_line(fence + (language or ""))
        formatter = self._formatters.lookup(language)
        if formatter is not None:
            logger.debug("Formatting %s code block with %r", language, formatter)
            code = formatter.format(code)
        for line in _split_lines(code):
            ctx.write_line(line)
        return WalkStatus.SKIP_CHILDREN

    def _render_html_block(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            for line in _split_lines(node.content):
                ctx.write_line(line)
        else:
            self._separate(node, ctx)
        return WalkStatus.SKIP_CHILDREN

    def _render_list(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            return WalkStatus.CONTINUE

        # Nested lists are separate List nodes; keep adjacent lists together.
        sibling = node.next_sibling
        if sibling is not None and sibling.kind is not NodeKind.LIST:
            ctx.blank_line()
        return WalkStatus.CONTINUE

    def _render_list_item(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        item = _expect(node, ListItemNode)
        parent = node.parent
        if not isinstance(parent, ListNode):
            raise InvariantViolation("list item rendered outside of a list")

        if entering:
            marker = self._list_marker(parent, item)
            ctx.open_line()
            ctx.write(marker)
            ctx.prefixes.append(" " * len(marker))
            return WalkStatus.CONTINUE

        # The item's text block normally ends the line already.
        ctx.prefixes.pop()
        if not ctx.at_line_start:
            ctx.write("\n")
        if not parent.tight and node.next_sibling is not None:
            ctx.blank_line()
        return WalkStatus.CONTINUE

    def _list_marker(self, parent: ListNode, item: ListItemNode) -> str:
        if not parent.ordered:
            return f"{parent.marker} "
        number = parent.start
        if self.config.list_numbering is ListNumbering.INCREMENT:
            number += _position(item)
        return f"{number}{parent.marker} "

    def _render_thematic_break(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            ctx.open_line()
            ctx.write("---")
        else:
            ctx.write("\n")
            self._separate(node, ctx)
        return WalkStatus.CONTINUE

    def _render_link_definition(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if not entering:
            sibling = node.next_sibling
            if sibling is not None and sibling.kind is not NodeKind.LINK_DEFINITION:
                ctx.blank_line()
            return WalkStatus.SKIP_CHILDREN

        definition = _expect(node, LinkDefinitionNode)
        if not definition.label:
            raise InvariantViolation("link definition without a label")
        ctx.write_line(f"[{definition.label}]: {_link_target(definition.destination, definition.title)}")
        return WalkStatus.SKIP_CHILDREN

    # Inlines ----------------------------------------------------------
    def _render_span(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            ctx.write(self._inline_source(node))
        return WalkStatus.SKIP_CHILDREN

    def _render_text(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if not entering:
            return WalkStatus.CONTINUE
        text = _expect(node, TextNode)
        ctx.open_line()
        ctx.write(text.value)
        if text.hard_line_break or text.soft_line_break:
            ctx.write("\n")
        return WalkStatus.CONTINUE

    def _render_literal(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            literal = _expect(node, (RawHTMLNode, StringNode))
            ctx.write(literal.value)
        return WalkStatus.CONTINUE

    def _render_link(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        link = _expect(node, (LinkNode, ImageNode))
        if entering:
            ctx.write("![" if isinstance(link, ImageNode) else "[")
        else:
            ctx.write(f"]({_link_target(link.destination, link.title)})")
        return WalkStatus.CONTINUE

    def _render_auto_link(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            ctx.write(f"<{_expect(node, AutoLinkNode).url}>")
        return WalkStatus.SKIP_CHILDREN

    def _inline_source(self, node: Node) -> str:
        """Markdown source for an inline node, kept on a single line."""
        if isinstance(node, TextNode):
            value = node.value
            if value.endswith("\n"):
                value = value[:-1] + " "
            if node.hard_line_break or node.soft_line_break:
                value += " "
            return value
        if isinstance(node, (RawHTMLNode, StringNode)):
            return node.value
        if isinstance(node, AutoLinkNode):
            return f"<{node.url}>"

        inner = "".join(self._inline_source(child) for child in node.children)
        if isinstance(node, (LinkNode, ImageNode)):
            opener = "![" if isinstance(node, ImageNode) else "["
            return f"{opener}{inner}]({_link_target(node.destination, node.title)})"
        if node.kind in (NodeKind.CODE_SPAN, NodeKind.EMPHASIS):
            decoration = self.config.decoration_for(node.kind)
            if node.kind is NodeKind.CODE_SPAN and decoration.prefix == decoration.suffix == "`":
                return _code_span(inner)
            repeat = node.level if isinstance(node, EmphasisNode) else 1
            return f"{decoration.prefix * repeat}{inner}{decoration.suffix * repeat}"
        return inner

    # Tables -----------------------------------------------------------
    def _render_table(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            ctx.tables.append(compute_table_layout(node))
            return WalkStatus.CONTINUE
        ctx.tables.pop()
        if node.is_top_level() or node.next_sibling is not None:
            ctx.blank_line()
        return WalkStatus.CONTINUE

    def _render_table_row(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            ctx.start_row()
            ctx.open_line()
            return WalkStatus.CONTINUE

        layout = ctx.current_table()
        ctx.write("|\n")
        if node.kind is NodeKind.TABLE_HEADER:
            ctx.write_line(layout.separator())
        ctx.end_row()
        return WalkStatus.CONTINUE

    def _render_table_cell(self, node: Node, entering: bool, ctx: RenderContext) -> WalkStatus:
        if entering:
            cell = _expect(node, TableCellNode)
            width = ctx.next_column_width()
            ctx.write("| " + cell.content + " " * (width - cell.width) + " ")
        return WalkStatus.SKIP_CHILDREN


def _expect(node: Node, model: type[N] | tuple[type[N], ...]) -> N:
    if not isinstance(node, model):
        raise InvariantViolation(
            f"{node.kind.value} node has unexpected type {type(node).__name__}"
        )
    return node


def _position(node: Node) -> int:
    parent = node.parent
    if parent is None:
        return 0
    for index, sibling in enumerate(parent.children):
        if sibling is node:
            return index
    raise InvariantViolation(f"{node.kind.value} node is not among its parent's children")


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _fence_for(code: str) -> str:
    longest = max((len(run) for run in _FENCE_RUN_RE.findall(code)), default=0)
    return "`" * max(3, longest + 1) if longest >= 3 else "```"


def _code_span(code: str) -> str:
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(code)), default=0)
    fence = "`" * (longest + 1)
    if code.startswith("`") or code.endswith("`") or (code.startswith(" ") and code.endswith(" ") and code.strip()):
        code = f" {code} "
    return f"{fence}{code}{fence}"


def _escape_block_start(line: str) -> str:
    match = _BLOCK_START_RE.match(line)
    if match is None:
        return line
    digits = match.group("digits")
    if digits:
        return digits + "\\" + line[len(digits):]
    return "\\" + line


def _link_target(destination: str, title: str | None) -> str:
    if not destination or " " in destination:
        destination = f"<{destination}>"
    if title:
        escaped = title.replace('"', '\\"')
        return f'{destination} "{escaped}"'
    return destination


__all__ = ["MarkdownRenderer", "NodeHandler"]
