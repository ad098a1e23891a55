from __future__ import annotations

"""
Unit tests for the i18n Utility.
"""

from design_tokens.utils.i18n import I18n, i18n


def test_singleton_is_loaded():
    assert i18n.is_loaded is True
    assert i18n.t("cli.summary.title") == "Summary:"


def test_interpolation():
    assert i18n.t("cli.summary.tokens_processed", count=7) == "  Tokens Processed: 7"


def test_missing_key_falls_back():
    assert i18n.t("does.not.exist") == "does.not.exist"
    assert i18n.t("does.not.exist", default="fallback") == "fallback"


def test_non_leaf_key_falls_back_to_key():
    assert i18n.t("cli.summary") == "cli.summary"


def test_bad_placeholders_return_raw_text():
    assert i18n.t("cli.summary.output_entry", path="/x") == "    - {path} ({count} tokens)"


def test_unknown_locale_is_not_loaded():
    inst = I18n("xx")
    assert inst.is_loaded is False
    assert inst.t("cli.summary.title") == "cli.summary.title"
