from __future__ import annotations

"""
Token Reference Resolution.

Merges token documents into a single path-indexed dictionary and resolves
curly-brace references (``{color.primary}``) against it. Resolution is
lazy and memoized per token; a stack of in-flight paths detects cycles.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from design_tokens.core.engine.transforms import to_css_value
from design_tokens.core.services.inspector import iter_tokens
from design_tokens.domain.errors import CircularReferenceError, TokenReferenceError
from design_tokens.domain.token_models import TokenGroup, TokenLeaf, TokenPath

logger = logging.getLogger(__name__)

REFERENCE_RX = re.compile(r"\{([^{}]+)\}")


# -----------------------------------------------------------------------------
# MERGED DICTIONARY
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TokenEntry:
    """
    A token placed in the merged dictionary.

    Attributes:
        path: Segment tuple identifying the token.
        token: The parsed token.
        source: File the winning definition came from.
    """
    path: TokenPath
    token: TokenLeaf
    source: str

    @property
    def key(self) -> str:
        return ".".join(self.path)


def merge_documents(documents: Iterable[Tuple[str, TokenGroup]]) -> Dict[str, TokenEntry]:
    """
    Flatten documents into one dictionary keyed by dot-joined token path.

    Later documents shadow earlier ones on path collision. Collisions are
    expected (light and dark themes define the same paths) and are only
    reported at DEBUG level.

    Args:
        documents: ``(source path, parsed document)`` pairs in merge order.

    Returns:
        Dict[str, TokenEntry]: Merged tokens in first-definition order.
    """
    merged: Dict[str, TokenEntry] = {}
    for source, document in documents:
        for path, token in iter_tokens(document):
            key = ".".join(path)
            previous = merged.get(key)
            if previous is not None and previous.source != source:
                logger.debug(f"Token collision on '{key}': {source} shadows {previous.source}")
            merged[key] = TokenEntry(path=path, token=token, source=source)
    return merged


# -----------------------------------------------------------------------------
# REFERENCE HELPERS
# -----------------------------------------------------------------------------

def has_reference(value: Any) -> bool:
    """Check whether a raw value contains at least one ``{path}`` reference."""
    if isinstance(value, str):
        return REFERENCE_RX.search(value) is not None
    if isinstance(value, list):
        return any(has_reference(item) for item in value)
    if isinstance(value, dict):
        return any(has_reference(item) for item in value.values())
    return False


def _whole_reference(value: str) -> Optional[str]:
    match = REFERENCE_RX.fullmatch(value.strip())
    return match.group(1).strip() if match else None


# -----------------------------------------------------------------------------
# RESOLVER
# -----------------------------------------------------------------------------

class ReferenceResolver:
    """
    Resolve token values against a merged dictionary.

    A value that is exactly one reference takes the referenced value as-is,
    so numbers stay numbers. References embedded in longer strings are
    substituted with the string form of the referenced value.
    """

    def __init__(self, tokens: Mapping[str, TokenEntry]):
        self._tokens = tokens
        self._resolved: Dict[str, Any] = {}

    def resolve(self, key: str) -> Any:
        """
        Return the fully resolved value of a token.

        Raises:
            TokenReferenceError: If a referenced path is not defined.
            CircularReferenceError: If references loop back on themselves.
        """
        return self._resolve_key(key, [])

    def _resolve_key(self, key: str, stack: List[str]) -> Any:
        if key in self._resolved:
            return self._resolved[key]

        if key in stack:
            raise CircularReferenceError(stack[stack.index(key):] + [key])

        entry = self._tokens[key]
        stack.append(key)
        try:
            value = self._resolve_value(entry.token.value, key, stack)
        finally:
            stack.pop()

        self._resolved[key] = value
        return value

    def _resolve_value(self, value: Any, owner: str, stack: List[str]) -> Any:
        if isinstance(value, list):
            return [self._resolve_value(item, owner, stack) for item in value]
        if isinstance(value, dict):
            return {k: self._resolve_value(v, owner, stack) for k, v in value.items()}
        if not isinstance(value, str):
            return value

        target = _whole_reference(value)
        if target is not None:
            return self._resolve_key(self._lookup(target, owner), stack)

        def substitute(match: re.Match) -> str:
            resolved = self._resolve_key(self._lookup(match.group(1).strip(), owner), stack)
            return to_css_value(resolved)

        return REFERENCE_RX.sub(substitute, value)

    def _lookup(self, reference: str, owner: str) -> str:
        if reference not in self._tokens:
            raise TokenReferenceError(owner, reference)
        return reference
