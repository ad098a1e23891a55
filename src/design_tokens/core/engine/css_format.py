from __future__ import annotations

"""
CSS Custom Property Formatter.

Renders resolved declarations as a single CSS rule block.
"""

from typing import Optional, Sequence, Tuple

from design_tokens.domain.constants import APP_NAME

# (property name, CSS value, optional description)
Declaration = Tuple[str, str, Optional[str]]


def format_css_variables(
        declarations: Sequence[Declaration],
        selector: str,
        source_name: Optional[str] = None,
) -> str:
    """
    Render declarations as custom properties under one selector.

    A token description is appended as a trailing block comment.

    Output shape::

        /**
         * Do not edit directly, this file was generated by design-tokens
         */

        :root {
          --color-primary: #60a882; /* Brand color */
        }

    Args:
        declarations: Property names (without leading dashes), CSS values and
            optional descriptions.
        selector: Rule selector, e.g. ``:root``.
        source_name: Input file named in the header comment.

    Returns:
        str: Complete CSS file content, newline terminated.
    """
    origin = f" from {source_name}" if source_name else ""
    lines = [
        "/**",
        f" * Do not edit directly, this file was generated{origin} by {APP_NAME}",
        " */",
        "",
        f"{selector} {{",
    ]
    lines.extend(_declaration_line(*declaration) for declaration in declarations)
    lines.append("}")
    return "\n".join(lines) + "\n"


def _declaration_line(name: str, value: str, description: Optional[str] = None) -> str:
    line = f"  --{name}: {value};"
    if description:
        # "*/" must not end the comment early
        line += f" /* {str(description).replace('*/', '* /')} */"
    return line
