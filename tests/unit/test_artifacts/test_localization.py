"""
Unit tests for the localization hooks.
"""

import pytest
from artifacts.localization import Localizer, resolve_localizer, default_localizer


class TestLocalizer:
    """Tests for Localizer."""

    def test_untranslated_passthrough(self):
        assert Localizer().localize("Harp") == "Harp"

    def test_translation(self):
        assert Localizer({"Harp": "Harfe"}).localize("Harp") == "Harfe"

    def test_context(self):
        """Context-qualified entries win, plain entries are the fallback."""
        loc = Localizer({"ctx\x04Harp": "Harfe (ctx)", "Harp": "Harfe"})
        assert loc.localize("Harp", context="ctx") == "Harfe (ctx)"
        assert loc.localize("Harp", context="other") == "Harfe"

    def test_sequential_placeholders(self):
        assert Localizer().format("%s %s", "Spiked", "Harp") == "Spiked Harp"

    def test_positional_placeholders(self):
        assert Localizer().format("%2$s, %1$s", "first", "second") == "second, first"

    def test_literal_percent(self):
        assert Localizer().format("100%% %s", "cursed") == "100% cursed"

    def test_missing_argument(self):
        with pytest.raises(IndexError):
            Localizer().format("%s and %s", "one")

    def test_resolve(self):
        loc = Localizer()
        assert resolve_localizer(loc) is loc
        assert resolve_localizer(None) is default_localizer
