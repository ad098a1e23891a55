from __future__ import annotations

"""
Run Summary Rendering.

Turns a RunResult into the human-readable summary or its JSON form. Pure
presentation: no decisions are taken here.
"""

import json
import sys
from dataclasses import asdict
from typing import List, Optional, TextIO

from design_tokens.domain.build_models import RunResult
from design_tokens.utils.i18n import i18n


def render_summary(result: RunResult) -> List[str]:
    """
    Build the summary lines for a completed run.

    Args:
        result: The run to describe.

    Returns:
        List[str]: Lines without trailing newlines.
    """
    lines = ["", i18n.t("cli.summary.title")]

    if result.reference_files:
        lines.append(i18n.t("cli.summary.reference_files"))
        lines.extend(f"    - {f}" for f in result.reference_files)

    lines.append(i18n.t("cli.summary.input_files"))
    lines.extend(f"    - {f}" for f in result.input_files)

    lines.append(i18n.t("cli.summary.output_files"))
    lines.extend(
        i18n.t("cli.summary.output_entry", path=r.output_path, count=r.token_count)
        for r in result.results
    )

    lines.append(i18n.t("cli.summary.tokens_processed", count=result.stats.tokens_processed))
    lines.append(i18n.t("cli.summary.tokens_skipped", count=result.stats.tokens_skipped))
    lines.append("")
    lines.append(
        i18n.t("cli.summary.success", count=len(result.results), path=result.output_dir)
    )
    return lines


def print_summary(result: RunResult, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    for line in render_summary(result):
        print(line, file=out)


def print_json(result: RunResult, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    print(json.dumps(asdict(result), ensure_ascii=False, indent=2), file=out)
