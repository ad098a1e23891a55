from __future__ import annotations

"""
Integration tests for the Conversion Run Driver.

Runs complete archive-to-CSS conversions and verifies generated files,
reported statistics, fatal error handling and scratch directory cleanup.
"""

import glob
import os
import tempfile
import zipfile
from pathlib import Path

from design_tokens.core.pipeline.runner import run_conversion

PRIMITIVES = {
    "color": {
        "primary": {"$value": "#60a882", "$type": "color"},
        "white": {"$value": "#ffffff", "$type": "color"},
        "shade": {"$value": "#00000080", "$type": "color"},
    },
    "size": {"$type": "dimension", "md": {"$value": 16}},
}


def _scratch_dirs():
    return set(glob.glob(os.path.join(tempfile.gettempdir(), "design-tokens-*")))


def test_reference_alias_scenario(sample_archive: Path, tmp_path: Path):
    """TC-01: One output file aliasing one reference file."""
    out_dir = tmp_path / "css"

    result = run_conversion(str(sample_archive), str(out_dir))

    assert result.ok is True
    assert result.reference_files == [os.path.join("tokens", "primitive.ref.inp.json")]
    assert result.input_files == [os.path.join("tokens", "core.inp.json")]
    assert result.stats.tokens_processed == 1
    assert sorted(p.name for p in out_dir.iterdir()) == ["core.vars.gen.css"]

    css = (out_dir / "core.vars.gen.css").read_text(encoding="utf-8")
    assert ":root {" in css
    assert "  --mantine-primary-color-0: var(--color-primary);" in css
    assert "--color-primary:" not in css


def test_themes_and_outputs(make_zip, tmp_path: Path):
    """TC-02: Theme files get attribute selectors and keep their own values."""
    archive = make_zip({
        "primitive.ref.inp.json": PRIMITIVES,
        "components/button.inp.json": {
            "button": {
                "height": {"$value": "{size.md}", "$type": "dimension"},
                "Label Size": {"$value": 14, "$type": "fontSize"},
            }
        },
        "themes/light.theme.inp.json": {"surface": {"$value": "{color.white}", "$type": "color"}},
        "themes/dark.theme.inp.json": {"surface": {"$value": "#1a1b1e", "$type": "color"}},
        "README.md": "not a token file",
    })
    out_dir = tmp_path / "css"

    result = run_conversion(str(archive), str(out_dir), output_references=False)

    assert result.ok is True
    assert [Path(r.output_path).name for r in result.results] == [
        "button.vars.gen.css",
        "dark.vars.gen.css",
        "light.vars.gen.css",
    ]
    assert result.stats.tokens_processed == 4

    button = (out_dir / "button.vars.gen.css").read_text(encoding="utf-8")
    assert "  --button-height: 16px;" in button
    assert "  --button-label-size: 14px;" in button

    dark = (out_dir / "dark.vars.gen.css").read_text(encoding="utf-8")
    light = (out_dir / "light.vars.gen.css").read_text(encoding="utf-8")
    assert "[data-mantine-color-scheme='dark'] {" in dark
    assert "  --surface: #1a1b1e;" in dark
    assert "[data-mantine-color-scheme='light'] {" in light
    assert "  --surface: #ffffff;" in light


def test_only_reference_files_is_a_successful_noop(make_zip, tmp_path: Path):
    """TC-03: Reference-only archives succeed without writing anything."""
    archive = make_zip({"primitive.ref.inp.json": PRIMITIVES})
    out_dir = tmp_path / "css"

    result = run_conversion(str(archive), str(out_dir))

    assert result.ok is True
    assert result.results == []
    assert result.reference_files == ["primitive.ref.inp.json"]
    assert not out_dir.exists()


def test_broken_file_is_skipped(make_zip, tmp_path: Path):
    """TC-04: A per-file failure is reported without failing the run."""
    archive = make_zip({
        "primitive.ref.inp.json": PRIMITIVES,
        "core.inp.json": {"ok": {"$value": "{color.primary}"}},
        "broken.inp.json": {"bad": {"$value": "{color.missing}"}},
    })

    result = run_conversion(str(archive), str(tmp_path / "css"))

    assert result.ok is True
    assert [Path(r.output_path).name for r in result.results] == ["core.vars.gen.css"]
    assert result.stats.tokens_skipped == 1
    assert result.stats.errors[0].rel_path == "broken.inp.json"


def test_missing_archive_is_fatal(tmp_path: Path):
    result = run_conversion(str(tmp_path / "absent.zip"), str(tmp_path / "css"))

    assert result.ok is False
    assert result.error.startswith("Zip file not found")


def test_archive_without_token_files_is_fatal(make_zip, tmp_path: Path):
    archive = make_zip({"docs/readme.txt": "hello", "tokens.json": {}})

    result = run_conversion(str(archive), str(tmp_path / "css"))

    assert result.ok is False
    assert "No token files found" in result.error


def test_scratch_directory_is_removed(sample_archive: Path, make_zip, tmp_path: Path):
    """TC-05: Successful and failed runs both clean up after extraction."""
    before = _scratch_dirs()

    run_conversion(str(sample_archive), str(tmp_path / "css"))
    run_conversion(str(make_zip({"x.txt": "x"}, name="bad.zip")), str(tmp_path / "css"))

    assert _scratch_dirs() == before


def test_corrupt_archive_member_fails_cleanly(tmp_path: Path):
    """TC-06: Damaged compressed data is a fatal extraction error, not a crash."""
    tokens = {f"t{i}": {"$value": f"#{i:06x}", "$type": "color"} for i in range(200)}
    damaged = tmp_path / "damaged.zip"
    with zipfile.ZipFile(damaged, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("core.inp.json", str(tokens))
    data = bytearray(damaged.read_bytes())
    for i in range(50, 70):
        data[i] ^= 0xFF
    damaged.write_bytes(bytes(data))
    before = _scratch_dirs()

    result = run_conversion(str(damaged), str(tmp_path / "css"))

    assert result.ok is False
    assert result.error.startswith("Failed to extract zip file")
    assert _scratch_dirs() == before
