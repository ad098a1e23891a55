from __future__ import annotations

"""
Token File Discovery and Classification Service.

Walks the extracted archive and buckets token files by filename suffix.
Also hosts the pure naming helpers that derive output filenames and theme
identifiers from input basenames.
"""

import logging
import os
from typing import List

from design_tokens.domain.build_models import ClassifiedFileSet
from design_tokens.domain.constants import (
    GENERATED_SUFFIX,
    INPUT_SUFFIX_PATTERN,
    OUTPUT_PATTERN,
    REFERENCE_PATTERN,
    THEME_PATTERN,
)
from design_tokens.domain.errors import DiscoveryError

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def find_files_recursive(root_dir: str) -> List[str]:
    """
    Enumerate every regular file below a directory.

    Directories are descended into but not recorded. Entries are visited in
    sorted order so that runs over the same archive are reproducible.

    Args:
        root_dir: Directory to walk.

    Returns:
        List[str]: Absolute file paths.
    """
    files: List[str] = []
    for root, dirs, names in os.walk(os.path.abspath(root_dir)):
        dirs.sort()
        for name in sorted(names):
            full_path = os.path.join(root, name)
            if os.path.isfile(full_path):
                files.append(full_path)
    return files


def discover_token_files(extracted_dir: str) -> ClassifiedFileSet:
    """
    Discover and categorize token files in the extracted directory.

    Files are categorized by naming convention, most specific pattern first:
    - ``*.ref.inp.json``: reference files (loaded, no output)
    - ``*.theme.inp.json``: theme files (color-scheme selector)
    - ``*.inp.json``: standard output files (``:root`` selector)

    Args:
        extracted_dir: Path to the extracted archive.

    Returns:
        ClassifiedFileSet: The bucketed token files.

    Raises:
        DiscoveryError: If the directory is missing or holds no token files.
    """
    logger.debug(f"Discovering token files in: {extracted_dir}")

    if not os.path.isdir(extracted_dir):
        raise DiscoveryError(f"Directory does not exist: {extracted_dir}")

    all_found = find_files_recursive(extracted_dir)
    logger.debug(f"Found {len(all_found)} total files")

    reference_files: List[str] = []
    theme_files: List[str] = []
    output_files: List[str] = []

    for file_path in all_found:
        file_name = os.path.basename(file_path)

        if REFERENCE_PATTERN.search(file_name):
            reference_files.append(file_path)
            logger.debug(f"Reference file: {file_path}")
        elif THEME_PATTERN.search(file_name):
            theme_files.append(file_path)
            logger.debug(f"Theme file: {file_path}")
        elif OUTPUT_PATTERN.search(file_name):
            output_files.append(file_path)
            logger.debug(f"Output file: {file_path}")

    classified = ClassifiedFileSet(
        reference_files=tuple(reference_files),
        theme_files=tuple(theme_files),
        output_files=tuple(output_files),
    )

    if classified.total == 0:
        raise DiscoveryError(
            "No token files found. Token files must have .inp.json, "
            ".theme.inp.json, or .ref.inp.json extension."
        )

    if classified.buildable_count == 0:
        logger.warning(
            "No output files found. Only reference files (*.ref.inp.json) were discovered."
        )

    logger.info(
        f"Found {classified.total} token files ({len(reference_files)} reference-only, "
        f"{len(theme_files)} themes, {len(output_files)} standard)"
    )
    for file_path in reference_files:
        logger.info(f"Loading reference: {get_relative_path(file_path, extracted_dir)}")

    return classified


# ==============================================================================
# NAMING HELPERS
# ==============================================================================

def get_output_file_name(input_path: str) -> str:
    """
    Derive the CSS filename for an input token file.

    ``name.inp.json`` and ``name.theme.inp.json`` both become
    ``name.vars.gen.css``.
    """
    base_name = os.path.basename(input_path)
    return INPUT_SUFFIX_PATTERN.sub("", base_name) + GENERATED_SUFFIX


def get_theme_name(input_path: str) -> str:
    """Extract the theme identifier: ``dark.theme.inp.json`` gives ``dark``."""
    return THEME_PATTERN.sub("", os.path.basename(input_path))


def is_theme_file(input_path: str) -> bool:
    return THEME_PATTERN.search(os.path.basename(input_path)) is not None


def is_reference_file(input_path: str) -> bool:
    return REFERENCE_PATTERN.search(os.path.basename(input_path)) is not None


def get_relative_path(file_path: str, extracted_dir: str) -> str:
    """Path of a discovered file relative to the archive root, for display."""
    return os.path.relpath(file_path, extracted_dir)
