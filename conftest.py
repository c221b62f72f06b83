"""Pytest configuration for the Simcoe tracking facade."""

import sys
from pathlib import Path


# Ensure 'src' is on sys.path so tests run without an editable install.
def _add_src_to_syspath() -> None:
    src_dir = Path(__file__).resolve().parent / "src"
    if src_dir.exists():
        src_str = str(src_dir)
        sys.path[:] = [src_str] + [p for p in sys.path if p and p != src_str]


_add_src_to_syspath()
