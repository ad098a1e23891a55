from __future__ import annotations

"""
Unit tests for the Token Document Models.

Verifies:
1. Conversion of raw JSON objects into the TokenGroup/TokenLeaf tree.
2. Inheritance of group-level $type.
3. Handling of metadata keys, primitives and arrays inside groups.
"""

from design_tokens.domain.token_models import TokenGroup, TokenLeaf, parse_document


def test_parse_document_builds_groups_and_leaves():
    """Objects with $value become leaves, other objects become groups."""
    doc = parse_document({
        "color": {
            "primary": {"$value": "#60a882", "$type": "color", "$description": "Brand"},
        }
    })

    color = doc.children["color"]
    assert isinstance(color, TokenGroup)

    primary = color.children["primary"]
    assert isinstance(primary, TokenLeaf)
    assert primary.value == "#60a882"
    assert primary.type == "color"
    assert primary.description == "Brand"


def test_leaf_is_not_descended_into():
    """Nested objects inside a token (composite values) stay part of the value."""
    doc = parse_document({
        "border": {"$value": {"width": "1px", "style": "solid"}, "$type": "border"}
    })

    leaf = doc.children["border"]
    assert isinstance(leaf, TokenLeaf)
    assert leaf.value == {"width": "1px", "style": "solid"}


def test_group_type_is_inherited():
    """A group-level $type applies to descendants without their own $type."""
    doc = parse_document({
        "size": {
            "$type": "dimension",
            "sm": {"$value": 4},
            "nested": {"md": {"$value": 8}},
            "ratio": {"$value": 1.5, "$type": "number"},
        }
    })

    size = doc.children["size"]
    assert size.children["sm"].type == "dimension"
    assert size.children["nested"].children["md"].type == "dimension"
    assert size.children["ratio"].type == "number"


def test_metadata_and_primitives_are_not_children():
    """$-prefixed keys, primitives and arrays are not recorded as nodes."""
    doc = parse_document({
        "$description": "root",
        "group": {"$extensions": {"x": {"$value": 1}}, "label": "text", "items": [1, 2]},
    })

    assert list(doc.children) == ["group"]
    assert doc.children["group"].children == {}
