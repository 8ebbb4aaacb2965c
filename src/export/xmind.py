"""
Export a mind map Node tree to XMind; parent-child relationships become topic/subtopic.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from ..mindmap import Node


def build_xmind(
    root: Node,
    out_path: Path | str,
    *,
    sheet_title: str = "Mind Map",
) -> Path:
    """
    Build an XMind workbook with one sheet whose root topic is `root`.
    Subtopics follow node.children order. Saves to out_path (e.g. outline_name.xmind).
    """
    try:
        from py_xmind16 import Workbook
    except ImportError as e:
        raise ImportError("py-xmind16 is required for --xmind. Install with: pip install py-xmind16") from e

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    sheet = workbook.create_sheet(sheet_title)
    root_topic = sheet.get_root_topic()
    root_topic.title = root.text

    # explicit stack: outlines can nest deeper than the recursion limit
    stack: list[tuple[Any, Node]] = [(root_topic, root)]
    while stack:
        topic, node = stack.pop()
        subtopics = [(topic.add_subtopic(child.text), child) for child in node.children]
        stack.extend(reversed(subtopics))

    workbook.save(str(out_path))
    return out_path


def _walk_topics(xmind_path: Path | str) -> list[tuple[str | None, str]]:
    """(parent_title, title) for every titled topic, pre-order across all sheets."""
    from py_xmind16 import Workbook

    w = Workbook.load(str(xmind_path))
    visited: list[tuple[str | None, str]] = []
    for sheet in (w.get_sheet(i) for i in range(w.sheet_count)):
        root = sheet.root_topic
        if not root:
            continue
        stack: list[tuple[str | None, Any]] = [(None, root)]
        while stack:
            parent_title, topic = stack.pop()
            t = getattr(topic, "title", None)
            if not t:
                continue
            current = str(t).strip()
            visited.append((parent_title, current))
            subtopics = list(getattr(topic, "subtopics", []) or [])
            stack.extend((current, st) for st in reversed(subtopics))
    return visited


def load_xmind_topic_titles(xmind_path: Path | str) -> list[str]:
    """Load an .xmind file and return all topic titles in traversal order (for tests)."""
    return [title for _, title in _walk_topics(xmind_path)]


def load_xmind_parent_child_pairs(xmind_path: Path | str) -> list[tuple[str, str]]:
    """Load an .xmind file and return (parent_title, child_title) for each link (for validation)."""
    return [(parent, title) for parent, title in _walk_topics(xmind_path) if parent is not None]
