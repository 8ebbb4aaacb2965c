"""Export: Node tree -> XMind workbook."""
from .xmind import build_xmind, load_xmind_topic_titles, load_xmind_parent_child_pairs

__all__ = [
    "build_xmind",
    "load_xmind_topic_titles",
    "load_xmind_parent_child_pairs",
]
