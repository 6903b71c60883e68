# offline_translator/domain/language_catalog.py
from typing import Dict, List, Optional

from .errors import UnsupportedLanguageError
from .models import Language

# Label of the "detect the language for me" entry in the language pickers
AUTO_LABEL = "Auto"

# Values that mean "detect the source language" (compared after trim + lower)
AUTO_SELECTIONS = frozenset({"auto", "automatic", "detect", "auto-detect"})

# Canonical code -> presentable name. Order is the order shown in the pickers.
_DISPLAY_NAMES: Dict[str, str] = {
    "en": "English",
    "id": "Indonesian",
    "ar": "Arabic",
    "de": "German",
    "ja": "Japanese",
    "fr": "French",
    "es": "Spanish",
    "zh": "Chinese",
}

# Normalized alias -> canonical code. Extend together with _DISPLAY_NAMES.
_ALIASES: Dict[str, str] = {
    "english": "en", "en": "en", "en-us": "en", "en-gb": "en",
    "indonesian": "id", "bahasa indonesia": "id", "id": "id",
    "japanese": "ja", "ja": "ja",
    "german": "de", "de": "de",
    "arabic": "ar", "ar": "ar",
    "french": "fr", "fr": "fr", "fr-fr": "fr", "fr-ca": "fr",
    "spanish": "es", "es": "es", "es-es": "es", "es-mx": "es",
    "chinese": "zh", "zh": "zh", "zh-cn": "zh", "zh-tw": "zh", "zh-hk": "zh",
}


def _normalize(value: str) -> str:
    return value.strip().lower()


def is_auto_selection(value: Optional[str]) -> bool:
    """True when value asks for auto-detection. None and blank strings count as auto."""
    if value is None:
        return True
    key = _normalize(value)
    return not key or key in AUTO_SELECTIONS


class LanguageCatalog:
    """Fixed mapping of language names/aliases to canonical codes."""

    def __init__(self, aliases: Optional[Dict[str, str]] = None,
                 display_names: Optional[Dict[str, str]] = None):
        self._aliases = dict(aliases or _ALIASES)
        self._display_names = dict(display_names or _DISPLAY_NAMES)

    def resolve(self, name_or_alias: str) -> Language:
        """
        Resolves a language name or alias (case and surrounding whitespace are ignored).

        Raises:
            UnsupportedLanguageError: if the value is not a known alias.
        """
        if name_or_alias is None:
            raise UnsupportedLanguageError("")
        code = self._aliases.get(_normalize(name_or_alias))
        if code is None:
            raise UnsupportedLanguageError(name_or_alias)
        return Language(code=code, alias=name_or_alias.strip(), name=self.display_name(code))

    def is_supported(self, code: str) -> bool:
        return _normalize(code) in self._display_names

    def is_auto_selection(self, value: Optional[str]) -> bool:
        return is_auto_selection(value)

    def display_name(self, code: str) -> str:
        """
        Capitalized name for a canonical code, e.g. "en" -> "English".
        Unknown codes are returned unchanged.
        """
        name = self._display_names.get(_normalize(code))
        if name is None:
            return code
        return name[:1].upper() + name[1:]

    def languages(self) -> List[Language]:
        """All known languages, in picker order."""
        return [Language(code=code, alias=name, name=name) for code, name in self._display_names.items()]

    @property
    def codes(self) -> List[str]:
        return list(self._display_names)
