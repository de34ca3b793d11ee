"""
Localization hooks used when building artifact names and descriptions.

The game hands generation a Localizer; by default strings are returned
untranslated. Templates use printf-style placeholders ("%s", "%1$s") so
translators can reorder arguments.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

_PLACEHOLDER = re.compile(r"%(?:(\d+)\$)?s|%%")

# gettext convention for context-qualified message ids
_CONTEXT_SEPARATOR = "\x04"


class Localizer:
    def __init__(self, translations: Optional[Dict[str, str]] = None):
        self.translations: Dict[str, str] = dict(translations or {})

    def localize(self, key: str, context: Optional[str] = None) -> str:
        """
        Look up a translation for ``key``.

        Args:
            key: Untranslated message
            context: Optional disambiguation context (pgettext style)

        Returns:
            Translated string, or ``key`` itself if no translation exists
        """
        if context is not None:
            qualified = f"{context}{_CONTEXT_SEPARATOR}{key}"
            if qualified in self.translations:
                return self.translations[qualified]
        return self.translations.get(key, key)

    def format(self, template: str, *args: object) -> str:
        """
        Fill ``%s`` / ``%N$s`` placeholders in ``template``.

        Sequential ``%s`` consume arguments left to right; ``%N$s`` picks the
        N-th (1-based) argument. Missing arguments raise IndexError.
        """
        position = 0

        def substitute(match: re.Match) -> str:
            nonlocal position
            if match.group(0) == "%%":
                return "%"
            if match.group(1) is not None:
                return str(args[int(match.group(1)) - 1])
            value = args[position]
            position += 1
            return str(value)

        return _PLACEHOLDER.sub(substitute, template)


default_localizer = Localizer()


def resolve_localizer(localizer: Optional[Localizer]) -> Localizer:
    return localizer if localizer is not None else default_localizer
