from __future__ import annotations

"""
Domain Exception Hierarchy.

Every failure raised on purpose by the converter derives from
DesignTokensError, so the CLI can tell expected, user-facing failures
apart from programming errors.
"""

from typing import List


class DesignTokensError(Exception):
    """Base class for all converter failures."""


class ArchiveError(DesignTokensError):
    """The input archive is missing, invalid, empty or cannot be extracted."""


class DiscoveryError(DesignTokensError):
    """No recognizable token files were found in the extracted archive."""


class TokenFormatError(DesignTokensError):
    """A token document does not follow the $value/$type convention."""


class TokenReferenceError(DesignTokensError):
    """A token references a path that no loaded document defines."""

    def __init__(self, token_path: str, reference: str):
        super().__init__(
            f"Reference error: token '{token_path}' references '{{{reference}}}', "
            f"which is not defined in any token file."
        )
        self.token_path = token_path
        self.reference = reference


class CircularReferenceError(DesignTokensError):
    """Token references form a cycle."""

    def __init__(self, chain: List[str]):
        super().__init__(f"Circular definition cycle: {' -> '.join(chain)}")
        self.chain = list(chain)
