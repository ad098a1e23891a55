from __future__ import annotations

"""
Token Build Engine.

Single entry point of the token engine: load a set of source documents,
resolve references across all of them, and render the tokens accepted by
a path filter as CSS custom properties under one selector.
"""

import logging
import os
from typing import Any, Callable, List, Optional, Sequence, Tuple

from design_tokens.core.engine.css_format import Declaration, format_css_variables
from design_tokens.core.engine.resolver import (
    REFERENCE_RX,
    ReferenceResolver,
    TokenEntry,
    has_reference,
    merge_documents,
)
from design_tokens.core.engine.transforms import (
    NameTransform,
    kebab_with_spaces,
    to_css_value,
    transform_value,
)
from design_tokens.core.services.inspector import read_token_json
from design_tokens.domain.token_models import TokenGroup, parse_document

logger = logging.getLogger(__name__)

PathFilter = Callable[[TokenEntry], bool]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build(
        sources: Sequence[str],
        selector: str,
        path_filter: PathFilter,
        name_transform: NameTransform = kebab_with_spaces,
        *,
        primary_source: Optional[str] = None,
        output_references: bool = True,
) -> str:
    """
    Build the CSS text for one output target.

    Every source takes part in reference resolution; only tokens accepted
    by ``path_filter`` are emitted. When ``primary_source`` is given it is
    merged last, so its own definitions win over colliding paths from the
    rest of the corpus.

    Args:
        sources: Token files loaded for resolution, in merge order.
        selector: CSS selector wrapping the declarations.
        path_filter: Predicate choosing which merged tokens are emitted.
        name_transform: Maps a token path to its property name.
        primary_source: File the output belongs to.
        output_references: Emit ``var(--name)`` for referencing tokens
            instead of their resolved literal.

    Returns:
        str: Complete CSS file content.
    """
    documents = load_sources(sources, primary_source)
    merged = merge_documents(documents)
    resolver = ReferenceResolver(merged)

    declarations: List[Declaration] = []
    for entry in merged.values():
        if not path_filter(entry):
            continue
        declarations.append(
            _render_declaration(entry, resolver, name_transform, output_references)
        )

    logger.debug(f"Rendered {len(declarations)} of {len(merged)} merged tokens for '{selector}'")

    source_name = os.path.basename(primary_source) if primary_source else None
    return format_css_variables(declarations, selector, source_name)


def load_sources(
        sources: Sequence[str],
        primary_source: Optional[str] = None,
) -> List[Tuple[str, TokenGroup]]:
    """
    Parse source files in merge order, moving ``primary_source`` to the end.
    """
    ordered = list(sources)
    if primary_source is not None:
        ordered = [s for s in ordered if s != primary_source] + [primary_source]
    return [(source, parse_document(read_token_json(source))) for source in ordered]


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_declaration(
        entry: TokenEntry,
        resolver: ReferenceResolver,
        name_transform: NameTransform,
        output_references: bool,
) -> Declaration:
    # Resolving first surfaces broken references and cycles in both modes
    resolved = resolver.resolve(entry.key)

    if output_references and has_reference(entry.token.value):
        value = _render_references(entry.token.value, name_transform)
    else:
        value = to_css_value(transform_value(resolved, entry.token))

    return name_transform(entry.path), value, entry.token.description


def _render_references(value: Any, name_transform: NameTransform) -> str:
    """Replace each ``{a.b}`` with ``var(--a-b)``, keeping surrounding text."""
    if isinstance(value, list):
        return ", ".join(_render_references(item, name_transform) for item in value)
    if isinstance(value, dict):
        return " ".join(_render_references(item, name_transform) for item in value.values())
    if not isinstance(value, str):
        return to_css_value(value)

    def to_var(match) -> str:
        return f"var(--{name_transform(match.group(1).strip().split('.'))})"

    return REFERENCE_RX.sub(to_var, value)
