"""Language entities - locales, language pairs and support status."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional

from PySide6.QtCore import QLocale


class SupportStatus(Enum):
    """Status reported by a translation provider for a language pair."""

    INSTALLED = "installed"
    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"


class TranslationSupport(Enum):
    """Collapsed support state consumed by the UI."""

    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class LanguagePair:
    """Ordered (source, target) pair of locale codes, either side may be unset."""

    source: Optional[str] = None
    target: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.source) and bool(self.target)


@dataclass(frozen=True)
class SupportCheck:
    """Result of checking one language pair."""

    pair: LanguagePair
    support: TranslationSupport

    @property
    def is_supported(self) -> bool:
        return self.support is TranslationSupport.SUPPORTED


@total_ordering
class AvailableLanguage:
    """A language offered by the translation provider, sortable by display name."""

    def __init__(self, locale_code: str):
        self.locale_code = locale_code.replace("_", "-")
        parts = self.locale_code.split("-", 1)
        self.language_code = parts[0]
        self.region = parts[1] if len(parts) > 1 else ""

    def short_name(self) -> str:
        return f"{self.language_code}-{self.region}"

    def localized_name(self) -> str:
        """Human readable name, e.g. "German (de-DE)"."""
        locale = QLocale(self.language_code)
        if not self.language_code or locale.language() == QLocale.Language.C:
            return "Unknown language code"
        name = QLocale.languageToString(locale.language())
        return f"{name} ({self.short_name()})"

    def _sort_key(self) -> tuple[str, str]:
        return (self.localized_name(), self.locale_code)

    def __eq__(self, other):
        if not isinstance(other, AvailableLanguage):
            return NotImplemented
        return self.locale_code == other.locale_code

    def __lt__(self, other):
        if not isinstance(other, AvailableLanguage):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self):
        return hash(self.locale_code)

    def __repr__(self):
        return f"AvailableLanguage({self.locale_code!r})"
