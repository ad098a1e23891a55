from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration merging
(defaults, persisted user file, command-line overrides), logging setup,
the conversion run and result rendering.
"""

import sys
from typing import Any, Dict, List, Optional

from design_tokens.core.pipeline.runner import run_conversion
from design_tokens.core.pipeline.validator import validate_config
from design_tokens.domain.config import load_config
from design_tokens.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from design_tokens.interface.cli import args as cli_args
from design_tokens.interface.cli.report import print_json, print_summary
from design_tokens.utils.i18n import i18n

logger = get_logger(__name__)

# Substring of a fatal error message -> locale key of the hint to print
_ERROR_HINTS = (
    ("not found", "cli.hints.not_found"),
    ("No token files found", "cli.hints.no_token_files"),
    ("Failed to extract", "cli.hints.extract"),
)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for a completed run, 1 for a fatal failure,
             130 when interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    raw_conf = _merge_config(load_config(), cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    configure_logging(
        LoggingConfig(level=clean_conf["log_level"], console=True, log_file=args.log_file),
        force=True,
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    try:
        result = run_conversion(
            args.zip_path,
            clean_conf["output_dir"],
            output_references=clean_conf["output_references"],
        )
    except KeyboardInterrupt:
        logger.warning(i18n.t("cli.errors.interrupted"))
        shutdown_logging()
        return 130
    except Exception as e:
        logger.critical(i18n.t("cli.errors.failed", error=str(e)), exc_info=True)
        shutdown_logging()
        return 1

    # Drain queued log records before writing to stdout
    shutdown_logging()

    if args.json_output:
        print_json(result)
    elif result.ok:
        print_summary(result)

    if not result.ok:
        print(f"ERROR: {i18n.t('cli.errors.failed', error=result.error)}", file=sys.stderr)
        hint = hint_for_error(result.error)
        if hint:
            print(hint, file=sys.stderr)
        return 1

    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def hint_for_error(message: str) -> Optional[str]:
    """Return the actionable hint for a known fatal error category, if any."""
    for needle, key in _ERROR_HINTS:
        if needle in message:
            return i18n.t(key)
    return None


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
