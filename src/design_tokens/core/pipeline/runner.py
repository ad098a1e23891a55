from __future__ import annotations

"""
Conversion Run Driver.

Coordinates one complete run:
1. Extracts the archive into a scratch directory.
2. Classifies the extracted token files.
3. Builds one CSS file per output and theme file.
4. Packages the outcome into a RunResult for the interface layer.
5. Removes the scratch directory on every exit path.
"""

import logging

from design_tokens.core.engine.transforms import NameTransform, kebab_with_spaces
from design_tokens.core.pipeline.orchestrator import resolve_output_dir, transform_tokens
from design_tokens.core.services.discovery import discover_token_files, get_relative_path
from design_tokens.domain.build_models import RunResult, create_error_result
from design_tokens.domain.errors import DesignTokensError
from design_tokens.infra.archive import cleanup_temp_dir, extract_zip

logger = logging.getLogger(__name__)


def run_conversion(
        zip_path: str,
        output_dir: str,
        *,
        output_references: bool = True,
        name_transform: NameTransform = kebab_with_spaces,
) -> RunResult:
    """
    Execute the full archive-to-CSS conversion.

    Fatal failures (invalid archive, no token files, unwritable output
    directory) are returned as a failed RunResult. Per-file failures are
    reported in the result statistics and do not fail the run.

    Args:
        zip_path: Archive containing the token files.
        output_dir: Destination directory for generated CSS.
        output_references: Emit ``var()`` references for aliasing tokens.
        name_transform: Maps token paths to property names.

    Returns:
        RunResult: Status, discovered files, generated files and counters.
    """
    resolved_output_dir = resolve_output_dir(output_dir)
    temp_dir = ""

    try:
        temp_dir = extract_zip(zip_path)
        discovered = discover_token_files(temp_dir)

        reference_files = [get_relative_path(f, temp_dir) for f in discovered.reference_files]
        input_files = [
            get_relative_path(f, temp_dir)
            for f in discovered.output_files + discovered.theme_files
        ]

        if discovered.buildable_count == 0:
            logger.warning("No files to transform. Exiting.")
            return RunResult(
                ok=True,
                error="",
                archive_path=zip_path,
                output_dir=resolved_output_dir,
                reference_files=reference_files,
            )

        results, stats = transform_tokens(
            discovered,
            resolved_output_dir,
            name_transform=name_transform,
            output_references=output_references,
        )

        return RunResult(
            ok=True,
            error="",
            archive_path=zip_path,
            output_dir=resolved_output_dir,
            reference_files=reference_files,
            input_files=input_files,
            results=results,
            stats=stats,
        )

    except (DesignTokensError, OSError) as e:
        logger.debug(f"Run aborted: {e}")
        return create_error_result(str(e), zip_path, resolved_output_dir)

    finally:
        if temp_dir:
            cleanup_temp_dir(temp_dir)
