from __future__ import annotations

"""
Token Document Data Models.

Provides the recursive sum type used to represent a parsed token document:
a TokenGroup maps segment names to child nodes, a TokenLeaf carries a
value. Raw JSON is converted into this tree once, by parse_document, so
that downstream walks never re-check the shape of untyped dictionaries.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

VALUE_KEY = "$value"
TYPE_KEY = "$type"
DESCRIPTION_KEY = "$description"

TokenPath = Tuple[str, ...]


@dataclass(frozen=True)
class TokenLeaf:
    """
    Represents a single design token.

    Attributes:
        value: Raw ``$value`` payload (string, number, list or object).
        type: Declared or inherited ``$type``, if any.
        description: Optional ``$description``.
    """
    value: Any
    type: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class TokenGroup:
    """
    Represents a named group of tokens and nested groups.

    Attributes:
        children: Child nodes keyed by segment name, in document order.
        type: Group-level ``$type`` inherited by descendant tokens.
    """
    children: Dict[str, "Node"] = field(default_factory=dict)
    type: Optional[str] = None


Node = Union[TokenGroup, TokenLeaf]


# -----------------------------------------------------------------------------
# PARSING
# -----------------------------------------------------------------------------

def parse_document(raw: Dict[str, Any]) -> TokenGroup:
    """
    Convert an untyped JSON object into a TokenGroup tree.

    An object carrying ``$value`` becomes a TokenLeaf and is not descended
    into. Any other object becomes a TokenGroup. Keys starting with ``$``
    on a group are metadata, and primitive or array members of a group are
    ignored.

    Args:
        raw: Decoded JSON object of one token file.

    Returns:
        TokenGroup: Root group of the document.
    """
    return _parse_group(raw, inherited_type=None)


def _parse_group(raw: Dict[str, Any], inherited_type: Optional[str]) -> TokenGroup:
    group_type = raw.get(TYPE_KEY, inherited_type)
    children: Dict[str, Node] = {}

    for key, value in raw.items():
        if key.startswith("$") or not isinstance(value, dict):
            continue
        if VALUE_KEY in value:
            children[key] = TokenLeaf(
                value=value[VALUE_KEY],
                type=value.get(TYPE_KEY, group_type),
                description=value.get(DESCRIPTION_KEY),
            )
        else:
            children[key] = _parse_group(value, group_type)

    return TokenGroup(children=children, type=group_type)
