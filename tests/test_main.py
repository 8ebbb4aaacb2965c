"""Tests for main entry and helpers."""
from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parent.parent


def _run_main(args: list[str], output_dir: Path | None = None) -> subprocess.CompletedProcess:
    """Run main.py with optional OUTPUT_DIR; return CompletedProcess."""
    env = {**os.environ}
    if output_dir is not None:
        env["OUTPUT_DIR"] = str(output_dir)
    return subprocess.run(
        [sys.executable, "main.py"] + args,
        cwd=_ROOT,
        capture_output=True,
        text=True,
        env=env,
    )


def test_safe_outline_name() -> None:
    """_safe_outline_name sanitizes for filesystem."""
    from main import _safe_outline_name

    assert _safe_outline_name("My Outline") == "My_Outline"
    assert _safe_outline_name("a/b*c") == "abc"
    assert _safe_outline_name("  x  ") == "x"
    assert _safe_outline_name("") == "unnamed"
    assert len(_safe_outline_name("a" * 300)) == 200


def test_collect_outlines(tmp_path: Path) -> None:
    from main import _collect_outlines

    (tmp_path / "b.txt").write_text("B", encoding="utf-8")
    (tmp_path / "a.md").write_text("A", encoding="utf-8")
    (tmp_path / "skip.json").write_text("{}", encoding="utf-8")
    (tmp_path / "sub").mkdir()

    assert [p.name for p in _collect_outlines(tmp_path)] == ["a.md", "b.txt"]
    assert _collect_outlines(tmp_path / "b.txt") == [tmp_path / "b.txt"]
    assert _collect_outlines(tmp_path / "missing") == []


def test_main_help_exits_zero() -> None:
    """python main.py --help exits with 0."""
    result = _run_main(["--help"])
    assert result.returncode == 0
    assert "--output-dir" in result.stdout
    assert "--print-text" in result.stdout
    assert "--stats" in result.stdout


def test_main_missing_input_friendly_message(tmp_path: Path) -> None:
    """A non-existent input exits 1 and names the path."""
    missing = tmp_path / "NoSuchOutline.txt"
    result = _run_main([str(missing)], output_dir=tmp_path / "out")
    assert result.returncode == 1
    combined = result.stdout + "\n" + result.stderr
    assert "NoSuchOutline" in combined or "no outline" in combined.lower()


def test_main_writes_tree_and_layout(sample_outline: str, tmp_path: Path) -> None:
    src = tmp_path / "My Plan.txt"
    src.write_text(sample_outline, encoding="utf-8")
    out_root = tmp_path / "out"

    result = _run_main([str(src), "--output-dir", str(out_root), "--stats"])
    assert result.returncode == 0, result.stderr

    out_dir = out_root / "My_Plan"
    tree = json.loads((out_dir / "tree.json").read_text(encoding="utf-8"))
    assert tree["text"] == "Root Node"
    assert [c["text"] for c in tree["children"]] == ["Child 1", "Child 2", "Child 3"]

    layout = json.loads((out_dir / "layout.json").read_text(encoding="utf-8"))
    assert layout["boundingBox"]["width"] == 436
    assert layout["boundingBox"]["height"] == 220
    assert layout["root"]["y"] == 105
    assert "Nodes: 6" in result.stderr


def test_main_print_text_normalizes(tmp_path: Path) -> None:
    src = tmp_path / "messy.txt"
    src.write_text("Top\n   odd\n\n       deeper\n", encoding="utf-8")
    result = _run_main([str(src), "--print-text"], output_dir=tmp_path / "out")
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip("\n") == "Top\n  odd\n    deeper"


def test_main_directory_input(tmp_path: Path) -> None:
    in_dir = tmp_path / "outlines"
    in_dir.mkdir()
    (in_dir / "one.txt").write_text("One\n  a", encoding="utf-8")
    (in_dir / "two.md").write_text("", encoding="utf-8")
    out_root = tmp_path / "out"

    result = _run_main([str(in_dir)], output_dir=out_root)
    assert result.returncode == 0, result.stderr
    assert (out_root / "one" / "layout.json").is_file()
    empty_tree = json.loads((out_root / "two" / "tree.json").read_text(encoding="utf-8"))
    assert empty_tree["text"] == "Empty Mindmap"


def test_main_strips_utf8_bom(sample_outline: str, tmp_path: Path) -> None:
    """Outlines saved with a byte order mark parse like plain UTF-8."""
    src = tmp_path / "bom.txt"
    src.write_bytes(b"\xef\xbb\xbf" + sample_outline.encode("utf-8"))
    out_root = tmp_path / "out"

    result = _run_main([str(src), "--print-text"], output_dir=out_root)
    assert result.returncode == 0, result.stderr

    tree = json.loads((out_root / "bom" / "tree.json").read_text(encoding="utf-8"))
    assert tree["text"] == "Root Node"
    assert result.stdout.strip("\n") == sample_outline
