# offline_translator/domain/interfaces.py
import abc
from typing import List, Optional

from .models import DetectedLanguage, HistoryRecord


class ITranslationEngine(abc.ABC):
    """Interface for the on-device translation engine."""

    @abc.abstractmethod
    async def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translates text between two canonical language codes.

        Args:
            text: Text to translate (already trimmed and validated).
            source_code: Canonical code of the source language (e.g. "en").
            target_code: Canonical code of the target language (e.g. "id").

        Returns:
            The translated text. Any failure is raised as an exception of the
            implementation's own type.
        """
        pass

    @abc.abstractmethod
    def is_available(self) -> bool:
        """
        Capability probe: whether the engine can translate at all on this machine.
        """
        pass


class ILanguageIdentifier(abc.ABC):
    """Interface for a statistical language identification routine."""

    @abc.abstractmethod
    def detect_top_language(self, text: str) -> Optional[DetectedLanguage]:
        """
        Returns the single most likely language of the text with its
        confidence (0.0 - 1.0), or None if nothing could be identified.
        """
        pass


class IHistoryStore(abc.ABC):
    """Interface for the translation history store."""

    @abc.abstractmethod
    def append(self, record: HistoryRecord) -> HistoryRecord:
        """Persists a new record and returns it with its id assigned."""
        pass

    @abc.abstractmethod
    def delete(self, record_id: int) -> bool:
        """Deletes one record. Returns False if it did not exist."""
        pass

    @abc.abstractmethod
    def delete_all(self) -> int:
        """Deletes every record and returns how many were removed."""
        pass

    @abc.abstractmethod
    def list_all(self) -> List[HistoryRecord]:
        """All records, newest first."""
        pass
