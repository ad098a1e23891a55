from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the converter and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from design_tokens.domain.constants import APP_NAME, APP_VERSION, DEFAULT_OUTPUT_DIR
from design_tokens.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the design-tokens CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=i18n.t("app.description"),
    )

    p.add_argument(
        "zip_path",
        metavar="zipFile",
        help=i18n.t("cli.args.zip_file"),
    )
    p.add_argument(
        "-o", "--out",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.out", path=DEFAULT_OUTPUT_DIR),
    )
    p.add_argument(
        "-V", "--version",
        action="version",
        version=APP_VERSION,
    )

    # --- Output Options ---
    p.add_argument(
        "--no-references",
        action="store_true",
        help=i18n.t("cli.args.no_references"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually passed are included, so persisted
    settings survive when a flag is omitted.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.no_references:
        overrides["output_references"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
