from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path resolution for user-supplied locations, the application data
directory and directory creation helpers used by the build orchestrator.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DesignTokens"
UNIX_APP_DIR_NAME = ".design_tokens"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = True) -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/DesignTokens
    - Linux/Mac: ~/.design_tokens

    Args:
        create: Create the directory when it does not exist yet.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError:
            pass

    return os.path.abspath(path)


def resolve_user_path(path: str) -> str:
    """
    Resolve a user-supplied path to an absolute path.

    A leading ``~`` is expanded to the home directory; anything else is
    resolved against the current working directory.

    Args:
        path: Raw path string from the command line or configuration.

    Returns:
        str: Absolute filesystem path.
    """
    p = (path or "").strip()
    if p.startswith("~"):
        p = os.path.expanduser(p)
    return os.path.abspath(p)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
