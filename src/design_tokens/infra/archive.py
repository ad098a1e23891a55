from __future__ import annotations

"""
Archive Extraction Infrastructure.

Unpacks the token archive into a private scratch directory and removes it
again once the run is over. Input validation happens before anything is
written to disk; a failed extraction never leaves a scratch directory
behind.
"""

import logging
import os
import shutil
import tempfile
import zipfile

from design_tokens.domain.constants import TEMP_DIR_PREFIX
from design_tokens.domain.errors import ArchiveError
from design_tokens.infra.fs import resolve_user_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_zip(zip_path: str) -> str:
    """
    Extract a zip archive into a freshly created temporary directory.

    Args:
        zip_path: Path to the archive. A leading ``~`` is expanded.

    Returns:
        str: Absolute path of the scratch directory holding the extracted files.

    Raises:
        ArchiveError: If the path is missing, not a file, not a ``.zip`` file,
            the archive is empty or extraction fails.
    """
    resolved_path = resolve_user_path(zip_path)
    logger.debug(f"Resolved zip path: {resolved_path}")

    _validate_archive_path(resolved_path)

    temp_dir = tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX)
    logger.debug(f"Created temp directory: {temp_dir}")

    try:
        logger.info(f"Extracting: {resolved_path}")

        with zipfile.ZipFile(resolved_path, "r") as zf:
            entries = zf.infolist()
            if not entries:
                raise ArchiveError("Zip file is empty")

            logger.debug(f"Found {len(entries)} entries in zip")
            zf.extractall(temp_dir)

        logger.debug(f"Extraction complete to: {temp_dir}")
        return temp_dir

    except Exception as e:
        # Corrupt members surface as zlib.error or EOFError, not BadZipFile
        _discard_temp_dir(temp_dir)
        raise ArchiveError(f"Failed to extract zip file: {e}") from e


def cleanup_temp_dir(temp_dir: str) -> None:
    """
    Remove the scratch directory recursively.

    A directory that is already gone counts as success. Removal failures
    are logged as warnings and never raised, so this is safe to call from
    a ``finally`` block.

    Args:
        temp_dir: Path returned by ``extract_zip``.
    """
    if not temp_dir or not os.path.exists(temp_dir):
        return

    try:
        shutil.rmtree(temp_dir)
        logger.debug(f"Cleaned up temp directory: {temp_dir}")
    except OSError as e:
        logger.warning(f"Failed to cleanup temp directory: {temp_dir} ({e})")


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _validate_archive_path(resolved_path: str) -> None:
    if not os.path.exists(resolved_path):
        raise ArchiveError(f"Zip file not found: {resolved_path}")

    if not os.path.isfile(resolved_path):
        raise ArchiveError(f"Path is not a file: {resolved_path}")

    if not resolved_path.lower().endswith(".zip"):
        raise ArchiveError(f"File does not have .zip extension: {resolved_path}")


def _discard_temp_dir(temp_dir: str) -> None:
    # Extraction errors take precedence over cleanup errors
    shutil.rmtree(temp_dir, ignore_errors=True)
