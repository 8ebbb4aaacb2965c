"""
Left-to-right tree layout: Node tree -> Position tree.

Children are stacked top to bottom one level to the right of their parent;
each parent is centered vertically on the span of its children. Runs as an
explicit post-order walk so very deep outlines do not exhaust the call stack.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from ..config import get_layout_settings
from .schema import Node, Position

logger = logging.getLogger(__name__)

NODE_HEIGHT = 40
NODE_PADDING = 20
LEVEL_GAP = 150  # horizontal: parent x -> child x
SIBLING_GAP = 20  # vertical: bottom of one sibling subtree -> top of the next
MIN_NODE_WIDTH = 100
CHAR_WIDTH = 8


@dataclass(frozen=True)
class LayoutConfig:
    node_height: int = NODE_HEIGHT
    node_padding: int = NODE_PADDING
    level_gap: int = LEVEL_GAP
    sibling_gap: int = SIBLING_GAP
    min_node_width: int = MIN_NODE_WIDTH
    char_width: int = CHAR_WIDTH

    @classmethod
    def from_env(cls) -> LayoutConfig:
        """Defaults with MINDMAP_* environment overrides applied."""
        return replace(cls(), **get_layout_settings())

    def node_width(self, text: str) -> int:
        return max(self.min_node_width, len(text) * self.char_width + 2 * self.node_padding)


DEFAULT_LAYOUT = LayoutConfig()


@dataclass
class _Frame:
    """In-progress node during the post-order walk."""
    node: Node
    x: float
    start_y: float
    cursor: float
    children: list[Position] = field(default_factory=list)
    # bottom edge of the last placed child's subtree
    last_bottom: float = 0.0


def calculate_layout(root: Node, config: LayoutConfig | None = None) -> Position:
    """Lay out the whole tree with the root's top-left corner at (0, 0)."""
    cfg = config or DEFAULT_LAYOUT
    frames = [_Frame(node=root, x=0, start_y=0, cursor=0)]
    while True:
        frame = frames[-1]
        placed = len(frame.children)
        if placed < len(frame.node.children):
            child = frame.node.children[placed]
            frames.append(_Frame(node=child, x=frame.x + cfg.level_gap, start_y=frame.cursor, cursor=frame.cursor))
            continue

        frames.pop()
        height = cfg.node_height
        if frame.children:
            first_y = frame.children[0].y
            y = (first_y + frame.last_bottom) / 2 - height / 2
            bottom = frame.last_bottom
        else:
            y = frame.start_y
            bottom = y + height
        pos = Position(
            node=frame.node,
            x=frame.x,
            y=y,
            width=cfg.node_width(frame.node.text),
            height=height,
            children=frame.children,
        )

        if not frames:
            logger.debug("Layout done for %r", root.text)
            return pos
        parent = frames[-1]
        parent.children.append(pos)
        parent.last_bottom = bottom
        # pos.y + subtree_height(pos) is exactly `bottom`
        parent.cursor = bottom + cfg.sibling_gap

