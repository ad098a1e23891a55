from __future__ import annotations

"""
Unit tests for Build Domain Models.

Verifies:
1. Source ordering of the classified file set.
2. Statistics bookkeeping for successes and failures.
3. Immutability of frozen dataclasses.
"""

import dataclasses

import pytest

from design_tokens.domain.build_models import (
    BuildResult,
    ClassifiedFileSet,
    ProcessingStats,
    create_error_result,
)


def test_all_files_order_is_reference_theme_output():
    """The source set lists reference, then theme, then output files."""
    files = ClassifiedFileSet(
        reference_files=("p.ref.inp.json",),
        theme_files=("dark.theme.inp.json", "light.theme.inp.json"),
        output_files=("core.inp.json",),
    )

    assert files.all_files == (
        "p.ref.inp.json",
        "dark.theme.inp.json",
        "light.theme.inp.json",
        "core.inp.json",
    )
    assert files.total == 4
    assert files.buildable_count == 3


def test_classified_file_set_is_frozen():
    files = ClassifiedFileSet()
    with pytest.raises(dataclasses.FrozenInstanceError):
        files.theme_files = ("x",)  # type: ignore[misc]


def test_processing_stats_records_success_and_failure():
    """Successes add token counts, failures bump the skip counter."""
    stats = ProcessingStats()

    stats.record_success(BuildResult(output_path="/out/core.vars.gen.css", token_count=3, input_path="core"))
    stats.record_success(BuildResult(output_path="/out/dark.vars.gen.css", token_count=2, input_path="dark"))
    stats.record_failure("bad.inp.json", "boom")

    assert stats.tokens_processed == 5
    assert stats.tokens_skipped == 1
    assert stats.output_token_counts == {
        "/out/core.vars.gen.css": 3,
        "/out/dark.vars.gen.css": 2,
    }
    assert stats.errors[0].rel_path == "bad.inp.json"
    assert stats.errors[0].error == "boom"


def test_create_error_result_defaults():
    result = create_error_result("Zip file not found: x.zip", "x.zip")

    assert result.ok is False
    assert result.error == "Zip file not found: x.zip"
    assert result.results == []
    assert result.stats.tokens_processed == 0
