from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the merged configuration (defaults, persisted file, CLI
overrides) into strictly typed values before a run starts.
"""

import logging
from typing import Any, Dict, List, Tuple

from design_tokens.domain.config import get_default_config
from design_tokens.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Unknown keys are dropped, missing keys are filled from the defaults and
    values of the wrong type are coerced when possible.

    Args:
        config: Raw configuration data.
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.

    Raises:
        TypeError: In strict mode, when a value cannot be used.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    clean: Dict[str, Any] = dict(defaults)

    # output_dir
    output_dir = config.get("output_dir", defaults["output_dir"])
    if isinstance(output_dir, str) and output_dir.strip():
        clean["output_dir"] = output_dir.strip()
    else:
        _reject("output_dir", output_dir, strict, warnings)

    # output_references
    refs = config.get("output_references", defaults["output_references"])
    coerced = _as_bool(refs)
    if coerced is None:
        _reject("output_references", refs, strict, warnings)
    else:
        clean["output_references"] = coerced

    # log_level
    level = config.get("log_level", defaults["log_level"])
    if isinstance(level, str) and level.strip().upper() in _LEVEL_MAP:
        clean["log_level"] = level.strip().upper()
    else:
        _reject("log_level", level, strict, warnings)

    for key in config:
        if key not in defaults:
            warnings.append(f"Unknown configuration key ignored: '{key}'.")

    return clean, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _as_bool(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def _reject(key: str, value: Any, strict: bool, warnings: List[str]) -> None:
    msg = f"Invalid value for '{key}': {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using default.")
    logger.debug(msg)
