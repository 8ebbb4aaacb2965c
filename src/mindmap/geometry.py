"""Pure helpers over Node / Position trees (no recursion, safe for deep outlines)."""
from __future__ import annotations

from .schema import BoundingBox, Node, Position


def flatten_positions(root: Position) -> list[Position]:
    """All positions in pre-order (root first, depth-first, children in order)."""
    result: list[Position] = []
    stack = [root]
    while stack:
        pos = stack.pop()
        result.append(pos)
        stack.extend(reversed(pos.children))
    return result


def get_bounding_box(root: Position) -> BoundingBox:
    positions = flatten_positions(root)
    min_x = min(p.x for p in positions)
    min_y = min(p.y for p in positions)
    max_x = max(p.x + p.width for p in positions)
    max_y = max(p.y + p.height for p in positions)
    return BoundingBox(
        min_x=min_x,
        min_y=min_y,
        max_x=max_x,
        max_y=max_y,
        width=max_x - min_x,
        height=max_y - min_y,
    )


def subtree_height(pos: Position) -> float:
    """
    Vertical extent from pos's top edge to the bottom of its last child's subtree.
    A leaf's subtree height is its own height.
    """
    last = pos
    while last.children:
        last = last.children[-1]
    return last.y + last.height - pos.y


def count_nodes(node: Node) -> int:
    """Total node count, root included."""
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children)
    return count


def get_max_depth(node: Node, current_depth: int = 0) -> int:
    """Deepest edge distance from node (offset by current_depth); a lone node is 0."""
    max_depth = current_depth
    stack = [(node, current_depth)]
    while stack:
        current, depth = stack.pop()
        if depth > max_depth:
            max_depth = depth
        for child in current.children:
            stack.append((child, depth + 1))
    return max_depth
