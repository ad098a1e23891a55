from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Factories for token files and token archives shared across tests.
"""

import json
import os
import sys
import zipfile
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Sample Documents
# -----------------------------------------------------------------------------
PRIMITIVE_TOKENS: Dict[str, Any] = {
    "color": {
        "primary": {"$value": "#60a882", "$type": "color"}
    }
}

CORE_TOKENS: Dict[str, Any] = {
    "mantine": {
        "primary": {
            "color": {
                "0": {"$value": "{color.primary}", "$type": "color"}
            }
        }
    }
}


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_tokens(tmp_path: Path) -> Callable[[str, Any], Path]:
    """
    Return a factory writing a JSON token document below tmp_path.

    Dicts are serialized as JSON, strings are written verbatim.
    """
    def _write(rel_path: str, content: Any) -> Path:
        target = tmp_path / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content)
        target.write_text(text, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory building a zip archive from ``{arcname: content}``."""
    def _make(files: Dict[str, Any], name: str = "tokens.zip") -> Path:
        zip_path = tmp_path / name
        with zipfile.ZipFile(zip_path, "w") as zf:
            for arcname, content in files.items():
                data = content if isinstance(content, str) else json.dumps(content)
                zf.writestr(arcname, data)
        return zip_path

    return _make


@pytest.fixture
def sample_archive(make_zip: Callable[..., Path]) -> Path:
    """Archive with one reference file and one output file aliasing it."""
    return make_zip({
        "tokens/primitive.ref.inp.json": PRIMITIVE_TOKENS,
        "tokens/core.inp.json": CORE_TOKENS,
    })
