from __future__ import annotations

"""
Domain Constants.

File naming contract, CSS selector templates and version metadata shared
by the discovery, build and interface layers.
"""

import os
import re

APP_NAME = "design-tokens"
APP_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# FILE NAMING CONTRACT
# -----------------------------------------------------------------------------

REFERENCE_SUFFIX = ".ref.inp.json"
THEME_SUFFIX = ".theme.inp.json"
OUTPUT_SUFFIX = ".inp.json"
GENERATED_SUFFIX = ".vars.gen.css"

REFERENCE_PATTERN = re.compile(re.escape(REFERENCE_SUFFIX) + "$")
THEME_PATTERN = re.compile(re.escape(THEME_SUFFIX) + "$")
OUTPUT_PATTERN = re.compile(re.escape(OUTPUT_SUFFIX) + "$")
INPUT_SUFFIX_PATTERN = re.compile(f"(?:{re.escape(THEME_SUFFIX)}|{re.escape(OUTPUT_SUFFIX)})$")

# -----------------------------------------------------------------------------
# CSS SELECTORS
# -----------------------------------------------------------------------------

ROOT_SELECTOR = ":root"
THEME_SELECTOR_TEMPLATE = "[data-mantine-color-scheme='{theme}']"

# -----------------------------------------------------------------------------
# DEFAULT LOCATIONS
# -----------------------------------------------------------------------------

DEFAULT_OUTPUT_DIR = os.path.join(os.path.expanduser("~"), "Downloads")
TEMP_DIR_PREFIX = "design-tokens-"
DTCG_FORMAT_URL = "https://tr.designtokens.org/format/"
