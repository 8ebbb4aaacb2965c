"""Mind map core: outline text -> Node tree -> Position tree (layout) and back to text."""
from .schema import BoundingBox, Node, ParsedLine, Position, generate_id, node_from_dict
from .parse import EMPTY_MINDMAP_TEXT, parse_text_to_tree, tree_to_text
from .layout import (
    CHAR_WIDTH,
    DEFAULT_LAYOUT,
    LEVEL_GAP,
    MIN_NODE_WIDTH,
    NODE_HEIGHT,
    NODE_PADDING,
    SIBLING_GAP,
    LayoutConfig,
    calculate_layout,
)
from .geometry import count_nodes, flatten_positions, get_bounding_box, get_max_depth, subtree_height

__all__ = [
    "BoundingBox",
    "Node",
    "ParsedLine",
    "Position",
    "generate_id",
    "node_from_dict",
    "EMPTY_MINDMAP_TEXT",
    "parse_text_to_tree",
    "tree_to_text",
    "CHAR_WIDTH",
    "DEFAULT_LAYOUT",
    "LEVEL_GAP",
    "MIN_NODE_WIDTH",
    "NODE_HEIGHT",
    "NODE_PADDING",
    "SIBLING_GAP",
    "LayoutConfig",
    "calculate_layout",
    "count_nodes",
    "flatten_positions",
    "get_bounding_box",
    "get_max_depth",
    "subtree_height",
]
