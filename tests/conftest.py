from typing import List, Optional, Tuple

import pytest

from offline_translator.application.language_detector import LanguageDetector
from offline_translator.application.translator_service import TranslationOrchestrator
from offline_translator.domain.interfaces import ILanguageIdentifier, ITranslationEngine
from offline_translator.domain.language_catalog import LanguageCatalog
from offline_translator.domain.models import DetectedLanguage
from offline_translator.infrastructure.history_store import SQLAlchemyHistoryStore


class FakeEngine(ITranslationEngine):
    """Engine that records its calls and returns a canned answer."""

    def __init__(self, result: str = "Halo", error: Optional[Exception] = None, available: bool = True):
        self.result = result
        self.error = error
        self.available = available
        self.calls: List[Tuple[str, str, str]] = []

    async def translate(self, text: str, source_code: str, target_code: str) -> str:
        self.calls.append((text, source_code, target_code))
        if self.error is not None:
            raise self.error
        return self.result

    def is_available(self) -> bool:
        return self.available


class FakeIdentifier(ILanguageIdentifier):
    def __init__(self, hypothesis: Optional[DetectedLanguage] = None, error: Optional[Exception] = None):
        self.hypothesis = hypothesis
        self.error = error
        self.calls: List[str] = []

    def detect_top_language(self, text: str) -> Optional[DetectedLanguage]:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.hypothesis


@pytest.fixture
def catalog():
    return LanguageCatalog()


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def identifier():
    return FakeIdentifier()


@pytest.fixture
def history_store():
    store = SQLAlchemyHistoryStore("sqlite://")
    yield store
    store.close()


@pytest.fixture
def orchestrator(engine, identifier, catalog, history_store):
    detector = LanguageDetector(identifier, catalog)
    return TranslationOrchestrator(engine, catalog, detector, history_store=history_store)
