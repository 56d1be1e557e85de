"""
Localization lookup.

lookup(locale, key) returns the translated string, or the key itself when
the locale has no entry for it. Missing translations surface as raw keys,
never as blanks or as the other locale's text.
"""

from typing import Dict, Union

from ttscore.i18n.translations import TRANSLATIONS
from ttscore.models.enumerations import Locale

SUPPORTED_LOCALES = tuple(Locale)


def lookup(locale: Union[Locale, str], key: str) -> str:
    table = TRANSLATIONS.get(Locale(locale).value, {})
    return table.get(key) or key


def strings(locale: Union[Locale, str]) -> Dict[str, str]:
    """Full table for one locale (copy)."""
    return dict(TRANSLATIONS[Locale(locale).value])


def next_locale(locale: Locale) -> Locale:
    """The locale a toggle switches to; cycles through SUPPORTED_LOCALES."""
    index = SUPPORTED_LOCALES.index(locale)
    return SUPPORTED_LOCALES[(index + 1) % len(SUPPORTED_LOCALES)]


__all__ = ["SUPPORTED_LOCALES", "TRANSLATIONS", "lookup", "next_locale", "strings"]
