# offline_translator/domain/models.py
import enum
from datetime import datetime
from typing import Optional


class Language:
    """
    A supported language: the canonical code (e.g. "en") plus the alias the
    user picked it with (e.g. "English" or "en-US").
    Two languages are equal when their codes are equal.
    """
    __slots__ = ("_code", "_alias", "_name")

    def __init__(self, code: str, alias: str, name: Optional[str] = None):
        self._code = code
        self._alias = alias
        self._name = name or alias

    @property
    def code(self) -> str:
        return self._code

    @property
    def alias(self) -> str:
        return self._alias

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self):
        return f"Language(code='{self.code}', alias='{self.alias}')"

    def __eq__(self, other):
        if not isinstance(other, Language):
            return NotImplemented
        return self.code == other.code

    def __hash__(self):
        return hash(self.code)


class DetectedLanguage:
    """Top hypothesis returned by a language identifier."""
    __slots__ = ("code", "confidence")

    def __init__(self, code: str, confidence: float):
        self.code = code
        self.confidence = confidence

    def __repr__(self):
        return f"DetectedLanguage(code='{self.code}', confidence={self.confidence:.2f})"


class TranslationRequest:
    """
    A request to translate text.
    source_selector may be a language name/alias or an auto-detect value ("Auto", None, ...).
    """
    def __init__(self, text: str, source_selector: Optional[str], target_selector: str):
        self.text = text
        self.source_selector = source_selector
        self.target_selector = target_selector

    def __repr__(self):
        return (f"TranslationRequest(text='{self.text[:50]}...', "
                f"source='{self.source_selector}', "
                f"target='{self.target_selector}')")


class TranslationResult:
    """Outcome of a successful translation."""
    __slots__ = ("_translated_text", "_source_language", "_target_language", "_detected")

    def __init__(self, translated_text: str, source_language: Language,
                 target_language: Language, detected: bool = False):
        self._translated_text = translated_text
        self._source_language = source_language
        self._target_language = target_language
        # True when the source language came from auto-detection
        self._detected = detected

    @property
    def translated_text(self) -> str:
        return self._translated_text

    @property
    def source_language(self) -> Language:
        return self._source_language

    @property
    def target_language(self) -> Language:
        return self._target_language

    @property
    def detected(self) -> bool:
        return self._detected

    def __repr__(self):
        return (f"TranslationResult(translated_text='{self.translated_text[:50]}...', "
                f"source='{self.source_language.code}', target='{self.target_language.code}')")


class HistoryRecord:
    """A persisted translation. id is None until the store assigns one."""
    def __init__(self, source_text: str, translated_text: str,
                 source_language: str, target_language: str,
                 created_at: Optional[datetime] = None, id: Optional[int] = None):
        self.id = id
        self.source_text = source_text
        self.translated_text = translated_text
        self.source_language = source_language
        self.target_language = target_language
        self.created_at = created_at or datetime.now()

    @classmethod
    def from_result(cls, source_text: str, result: TranslationResult) -> "HistoryRecord":
        return cls(
            source_text=source_text,
            translated_text=result.translated_text,
            source_language=result.source_language.name,
            target_language=result.target_language.name,
        )

    def __repr__(self):
        return (f"HistoryRecord(id={self.id}, {self.source_language} -> {self.target_language}, "
                f"source_text='{self.source_text[:30]}...')")


class Side(enum.Enum):
    """One of the two text panes of the main window."""
    LEFT = "left"
    RIGHT = "right"

    @property
    def other(self) -> "Side":
        return Side.RIGHT if self is Side.LEFT else Side.LEFT
