"""
Indented outline text <-> Node tree.

Two spaces of leading whitespace are one level. A line becomes a child of the
nearest open ancestor whose level is strictly smaller; equal or shallower
levels close ancestors first. The first non-blank line is always the root.
"""
from __future__ import annotations

import logging

from .schema import IdFactory, Node, ParsedLine, generate_id

logger = logging.getLogger(__name__)

EMPTY_MINDMAP_TEXT = "Empty Mindmap"
INDENT_WIDTH = 2


def _parse_lines(text: str) -> list[ParsedLine]:
    """Non-blank lines with their level; every leading whitespace char counts as one space."""
    parsed: list[ParsedLine] = []
    for index, line in enumerate(text.split("\n")):
        content = line.strip()
        if not content:
            continue
        indent = len(line) - len(line.lstrip())
        parsed.append(ParsedLine(text=content, level=indent // INDENT_WIDTH, line_number=index + 1))
    return parsed


def parse_text_to_tree(text: str, *, id_factory: IdFactory | None = None) -> Node:
    """
    Parse an indented outline into a Node tree. Never raises: blank input gives
    a single "Empty Mindmap" node, inconsistent indentation still yields a tree.
    """
    make_id = id_factory or generate_id
    lines = _parse_lines(text)
    if not lines:
        return Node(id=make_id(), text=EMPTY_MINDMAP_TEXT)

    first = lines[0]
    root = Node(id=make_id(), text=first.text)
    # (node, level); index 0 is the root and is never popped
    stack: list[tuple[Node, int]] = [(root, first.level)]

    for line in lines[1:]:
        node = Node(id=make_id(), text=line.text)
        while len(stack) > 1 and stack[-1][1] >= line.level:
            stack.pop()
        stack[-1][0].children.append(node)
        stack.append((node, line.level))

    logger.debug("Parsed %d line(s) into tree rooted at %r", len(lines), root.text)
    return root


def tree_to_text(node: Node, level: int = 0) -> str:
    """Serialize a Node tree back to outline text (2 spaces per level, no trailing newline)."""
    out: list[str] = []
    stack: list[tuple[Node, int]] = [(node, level)]
    while stack:
        current, depth = stack.pop()
        out.append(" " * (INDENT_WIDTH * depth) + current.text)
        for child in reversed(current.children):
            stack.append((child, depth + 1))
    return "\n".join(out)
