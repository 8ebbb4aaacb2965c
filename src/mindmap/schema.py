"""
Mind map data model: Node tree (from the parser) and Position tree (from the layout engine).
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Callable

IdFactory = Callable[[], str]


def generate_id() -> str:
    """Opaque node id; callers must not parse or order by it."""
    return f"node_{uuid.uuid4().hex}"


@dataclass
class Node:
    """One outline entry. Children are owned by the parent, in document order."""
    id: str
    text: str
    children: list[Node] = field(default_factory=list)
    collapsed: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Nested plain dict (JSON-ready); `collapsed` only when set."""
        root_out = self._shallow_dict()
        stack = [(self, root_out)]
        while stack:
            node, out = stack.pop()
            for child in node.children:
                child_out = child._shallow_dict()
                out["children"].append(child_out)
                stack.append((child, child_out))
        return root_out

    def _shallow_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "text": self.text, "children": []}
        if self.collapsed is not None:
            out["collapsed"] = self.collapsed
        return out


@dataclass
class ParsedLine:
    """Single non-blank source line (parser-internal)."""
    text: str
    level: int
    line_number: int  # 1-based, blank lines counted


@dataclass
class Position:
    """Layout box for one node; children mirror node.children one-to-one."""
    node: Node
    x: float
    y: float
    width: float
    height: float
    children: list[Position] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        root_out = self._shallow_dict()
        stack = [(self, root_out)]
        while stack:
            pos, out = stack.pop()
            for child in pos.children:
                child_out = child._shallow_dict()
                out["children"].append(child_out)
                stack.append((child, child_out))
        return root_out

    def _shallow_dict(self) -> dict[str, Any]:
        return {
            "id": self.node.id,
            "text": self.node.text,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "children": [],
        }


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float

    def to_dict(self) -> dict[str, float]:
        return {
            "minX": self.min_x,
            "minY": self.min_y,
            "maxX": self.max_x,
            "maxY": self.max_y,
            "width": self.width,
            "height": self.height,
        }


def _node_from_mapping(data: Any, id_factory: IdFactory) -> Node:
    if not isinstance(data, dict):
        raise ValueError(f"Node must be a mapping, got {type(data).__name__}")
    text = data.get("text")
    if not isinstance(text, str) or not text:
        raise ValueError("Node 'text' must be a non-empty string")
    children = data.get("children", [])
    if not isinstance(children, list):
        raise ValueError(f"Node {text!r}: 'children' must be a list")
    collapsed = data.get("collapsed")
    if collapsed is not None and not isinstance(collapsed, bool):
        raise ValueError(f"Node {text!r}: 'collapsed' must be a boolean")
    node_id = data.get("id")
    if not isinstance(node_id, str) or not node_id:
        node_id = id_factory()
    return Node(id=node_id, text=text, collapsed=collapsed)


def node_from_dict(data: dict[str, Any], *, id_factory: IdFactory | None = None) -> Node:
    """
    Build a Node tree from nested plain data (the shape Node.to_dict produces).
    Missing ids are generated. Raises ValueError on malformed input.
    """
    make_id = id_factory or generate_id
    root = _node_from_mapping(data, make_id)
    stack = [(root, data)]
    while stack:
        node, raw = stack.pop()
        for raw_child in raw.get("children", []):
            child = _node_from_mapping(raw_child, make_id)
            node.children.append(child)
            stack.append((child, raw_child))
    return root
