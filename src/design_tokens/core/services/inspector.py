from __future__ import annotations

"""
Token Document Inspection Service.

Structural walks over token documents: counting tokens, collecting the
set of token paths a document defines, and rejecting documents written
in the legacy ``value``/``type`` shape before they reach the engine.
"""

import json
import logging
import os
from typing import Any, Dict, Iterator, Set, Tuple

from design_tokens.domain.constants import DTCG_FORMAT_URL
from design_tokens.domain.errors import TokenFormatError
from design_tokens.domain.token_models import (
    VALUE_KEY,
    Node,
    TokenGroup,
    TokenLeaf,
    TokenPath,
    parse_document,
)

logger = logging.getLogger(__name__)

_LEGACY_VALUE_KEY = "value"


# -----------------------------------------------------------------------------
# TREE WALKS
# -----------------------------------------------------------------------------

def iter_tokens(node: Node, prefix: TokenPath = ()) -> Iterator[Tuple[TokenPath, TokenLeaf]]:
    """
    Yield every token of a tree with its path, in document order.

    Args:
        node: Root of the walk.
        prefix: Path segments leading to ``node``.

    Yields:
        Tuple[TokenPath, TokenLeaf]: Segment tuple and the token itself.
    """
    if isinstance(node, TokenLeaf):
        yield prefix, node
        return

    for name, child in node.children.items():
        yield from iter_tokens(child, prefix + (name,))


def count_tokens(node: Node) -> int:
    """Count the tokens of a document, whatever their nesting depth."""
    return sum(1 for _ in iter_tokens(node))


def extract_token_paths(node: Node) -> Set[str]:
    """
    Collect the dot-joined path of every token in a document.

    Example: ``{"color": {"Sage": {"0": {"$value": ...}}}}`` yields
    ``{"color.Sage.0"}``.
    """
    return {".".join(path) for path, _ in iter_tokens(node)}


# -----------------------------------------------------------------------------
# FORMAT VALIDATION
# -----------------------------------------------------------------------------

def has_legacy_token_format(raw: Any) -> bool:
    """
    Check whether any nested object uses ``value`` without ``$value``.

    Args:
        raw: Decoded JSON content of a token file.

    Returns:
        bool: True as soon as one legacy-shaped object is found.
    """
    if isinstance(raw, dict):
        members = raw.values()
    elif isinstance(raw, list):
        members = raw
    else:
        return False

    for value in members:
        if isinstance(value, dict) and _LEGACY_VALUE_KEY in value and VALUE_KEY not in value:
            return True
        if has_legacy_token_format(value):
            return True
    return False


def validate_dtcg_format(raw: Dict[str, Any], file_name: str) -> None:
    """
    Ensure a token document follows the ``$value``/``$type`` convention.

    Raises:
        TokenFormatError: If legacy ``value``/``type`` properties are found.
    """
    if has_legacy_token_format(raw):
        raise TokenFormatError(
            f'Token file "{file_name}" is not in W3C DTCG format. '
            f'Found legacy format using "value" and "type" properties. '
            f'Please use "$value" and "$type" properties instead. '
            f"See: {DTCG_FORMAT_URL}"
        )


# -----------------------------------------------------------------------------
# LOADING
# -----------------------------------------------------------------------------

def read_token_json(file_path: str) -> Dict[str, Any]:
    """
    Read and decode a token file.

    Raises:
        TokenFormatError: If the content is not valid JSON or not an object.
    """
    file_name = os.path.basename(file_path)
    with open(file_path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise TokenFormatError(f'Token file "{file_name}" is not valid JSON: {e}') from e

    if not isinstance(raw, dict):
        raise TokenFormatError(f'Token file "{file_name}" must contain a JSON object at its root.')
    return raw


def load_token_document(file_path: str) -> TokenGroup:
    """
    Read, validate and parse a token file into a TokenGroup tree.

    Args:
        file_path: Path of the ``*.inp.json`` file.

    Returns:
        TokenGroup: Parsed document.
    """
    raw = read_token_json(file_path)
    validate_dtcg_format(raw, os.path.basename(file_path))
    return parse_document(raw)
