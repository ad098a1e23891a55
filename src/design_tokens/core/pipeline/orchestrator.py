from __future__ import annotations

"""
Per-File Build Orchestrator.

Turns every output and theme file into its own CSS file. Each build sees
the whole corpus for reference resolution but emits only the tokens the
current file defines, filtered by token path. A failing file is logged,
counted and skipped; it never aborts the run.
"""

import logging
import os
from typing import List, Optional, Tuple

from design_tokens.core.engine.builder import build
from design_tokens.core.engine.transforms import NameTransform, kebab_with_spaces
from design_tokens.core.services.discovery import get_output_file_name, get_theme_name
from design_tokens.core.services.inspector import (
    count_tokens,
    extract_token_paths,
    load_token_document,
)
from design_tokens.domain.build_models import BuildResult, ClassifiedFileSet, ProcessingStats
from design_tokens.domain.constants import ROOT_SELECTOR, THEME_SELECTOR_TEMPLATE
from design_tokens.infra.fs import resolve_user_path, safe_mkdir

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def transform_tokens(
        discovered: ClassifiedFileSet,
        output_dir: str,
        *,
        name_transform: NameTransform = kebab_with_spaces,
        output_references: bool = True,
) -> Tuple[List[BuildResult], ProcessingStats]:
    """
    Build one CSS file per output and theme file.

    Output files are processed first with the ``:root`` selector, then theme
    files with the color-scheme attribute selector.

    Args:
        discovered: Classified token files of the run.
        output_dir: Destination directory (``~`` is expanded).
        name_transform: Maps token paths to property names.
        output_references: Emit ``var()`` references for aliasing tokens.

    Returns:
        Tuple[List[BuildResult], ProcessingStats]: Generated files and counters.

    Raises:
        OSError: If the output directory cannot be created.
    """
    resolved_output_dir = resolve_output_dir(output_dir)

    ok, err = safe_mkdir(resolved_output_dir)
    if not ok:
        raise OSError(f"Cannot create output directory '{resolved_output_dir}': {err}")
    logger.debug(f"Output directory ready: {resolved_output_dir}")

    results: List[BuildResult] = []
    stats = ProcessingStats()

    jobs = [(f, ROOT_SELECTOR) for f in discovered.output_files]
    jobs += [(f, theme_selector(get_theme_name(f))) for f in discovered.theme_files]

    for input_file, selector in jobs:
        try:
            result = process_token_file(
                input_file,
                discovered.all_files,
                resolved_output_dir,
                selector,
                name_transform=name_transform,
                output_references=output_references,
            )
        except Exception as e:
            file_name = os.path.basename(input_file)
            logger.error(f"Failed to process {file_name}: {e}")
            stats.record_failure(file_name, str(e))
            continue

        results.append(result)
        stats.record_success(result)

    return results, stats


def process_token_file(
        input_file: str,
        all_source_files: Tuple[str, ...],
        output_dir: str,
        selector: str,
        *,
        name_transform: NameTransform = kebab_with_spaces,
        output_references: bool = True,
) -> BuildResult:
    """
    Build and write the CSS file for a single token file.

    Args:
        input_file: Token file whose tokens are emitted.
        all_source_files: Every discovered token file, used for resolution.
        output_dir: Absolute destination directory.
        selector: CSS selector for the rule block.
        name_transform: Maps token paths to property names.
        output_references: Emit ``var()`` references for aliasing tokens.

    Returns:
        BuildResult: Written path and token count.
    """
    output_file_name = get_output_file_name(input_file)
    output_path = os.path.join(output_dir, output_file_name)
    input_file_name = os.path.basename(input_file)

    logger.info(f"Processing: {input_file_name} -> {output_file_name}")

    document = load_token_document(input_file)
    token_count = count_tokens(document)
    token_paths = extract_token_paths(document)

    css = build(
        all_source_files,
        selector,
        lambda entry: entry.key in token_paths,
        name_transform,
        primary_source=input_file,
        output_references=output_references,
    )

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(css)

    logger.debug(f"Generated: {output_path} with {token_count} tokens")

    return BuildResult(output_path=output_path, token_count=token_count, input_path=input_file)


# ==============================================================================
# HELPERS
# ==============================================================================

def theme_selector(theme_name: str) -> str:
    """``dark`` gives ``[data-mantine-color-scheme='dark']``."""
    return THEME_SELECTOR_TEMPLATE.format(theme=theme_name)


def resolve_output_dir(output_dir: Optional[str]) -> str:
    return resolve_user_path(output_dir or ".")
