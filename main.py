#!/usr/bin/env python3
"""
Root entry: outline text file(s) -> Node tree -> layout -> tree.json / layout.json.
Supports --xmind (mind map export), --print-text (normalized outline) and --stats.
"""
from __future__ import annotations

import argparse
import json
import logging
import re
import sys
import time
from pathlib import Path

_ROOT = Path(__file__).resolve().parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from src.config import load_env, get_input_dir, get_output_dir
from src.mindmap import (
    LayoutConfig,
    calculate_layout,
    count_nodes,
    get_bounding_box,
    get_max_depth,
    parse_text_to_tree,
    tree_to_text,
)
from src.export import build_xmind

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

OUTLINE_EXTENSIONS = {".txt", ".md"}


def _safe_outline_name(name: str) -> str:
    """Turn an outline file stem into a filesystem-safe directory name."""
    s = re.sub(r'[/\\:*?"<>|]', "", name)
    s = s.strip() or "unnamed"
    s = re.sub(r"\s+", "_", s)
    return s[:200]


def _collect_outlines(input_path: Path) -> list[Path]:
    """A single file, or every outline file directly inside a directory (sorted)."""
    if input_path.is_file():
        return [input_path]
    if input_path.is_dir():
        return sorted(
            p for p in input_path.iterdir()
            if p.is_file() and p.suffix.lower() in OUTLINE_EXTENSIONS
        )
    return []


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Indented outline text -> mind map tree + left-to-right layout (JSON). Supports --xmind."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Outline file, or directory of .txt/.md outlines (default: INPUT_DIR or data/outlines)",
    )
    parser.add_argument(
        "--output-dir",
        metavar="DIR",
        default=None,
        help="Write output/<name>/tree.json and layout.json here (default: OUTPUT_DIR or output/)",
    )
    parser.add_argument(
        "--xmind",
        action="store_true",
        help="Also export each outline to <name>.xmind (mind map)",
    )
    parser.add_argument(
        "--print-text",
        action="store_true",
        help="Print the normalized outline (2 spaces per level) to stdout",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Log node count, max depth and layout bounding box for each outline",
    )
    args = parser.parse_args()

    load_env()
    input_path = Path(args.input) if args.input else get_input_dir()
    output_root = Path(args.output_dir) if args.output_dir else get_output_dir()

    outlines = _collect_outlines(input_path)
    if not outlines:
        logger.error(
            "No outline found at %s (supported: %s). Pass a file or a directory of outlines.",
            input_path, ", ".join(sorted(OUTLINE_EXTENSIONS)),
        )
        return 1

    output_root.mkdir(parents=True, exist_ok=True)
    logger.info("Input: %s, output root: %s", input_path, output_root)

    config = LayoutConfig.from_env()
    processed = 0
    for idx, path in enumerate(outlines):
        if _process_outline(path, output_root, config, args.xmind, args.print_text, args.stats, idx, len(outlines)):
            processed += 1

    if not processed:
        logger.error("No outline could be read")
        return 1
    logger.info("Done. %d/%d outline(s). Output: %s", processed, len(outlines), output_root)
    return 0


def _process_outline(
    path: Path,
    output_root: Path,
    config: LayoutConfig,
    use_xmind: bool = False,
    print_text: bool = False,
    show_stats: bool = False,
    idx: int = 0,
    total: int = 1,
) -> bool:
    """Parse, lay out and write one outline. Returns False if the file could not be read or written."""
    t0 = time.perf_counter()
    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Outline %d/%d: cannot read %s: %s", idx + 1, total, path, e)
        return False

    safe_name = _safe_outline_name(path.stem)
    out_dir = output_root / safe_name
    out_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Outline %d/%d: %s -> %s", idx + 1, total, path.name, out_dir)

    root = parse_text_to_tree(text)
    layout = calculate_layout(root, config)
    bbox = get_bounding_box(layout)

    try:
        tree_json = json.dumps(root.to_dict(), ensure_ascii=False, indent=2)
        layout_json = json.dumps(
            {"boundingBox": bbox.to_dict(), "root": layout.to_dict()},
            ensure_ascii=False,
            indent=2,
        )
    except RecursionError as e:
        # json encodes nested dicts recursively
        logger.warning("  cannot write JSON for %s: %s", path.name, e)
        return False
    (out_dir / "tree.json").write_text(tree_json, encoding="utf-8")
    (out_dir / "layout.json").write_text(layout_json, encoding="utf-8")
    logger.info("  tree.json, layout.json")

    if show_stats:
        logger.info(
            "  Nodes: %d, max depth: %d, bounding box: %.0fx%.0f",
            count_nodes(root), get_max_depth(root), bbox.width, bbox.height,
        )
    if print_text:
        print(tree_to_text(root))
    if use_xmind:
        try:
            xmind_path = build_xmind(root, out_dir / f"{safe_name}.xmind", sheet_title=safe_name)
            logger.info("  XMind: %s", xmind_path.name)
        except Exception as e:
            logger.warning("  XMind export failed: %s", e)

    logger.info("  Outline completed in %.2fs", time.perf_counter() - t0)
    return True


if __name__ == "__main__":
    sys.exit(main())
