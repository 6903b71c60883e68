# offline_translator/application/translator_service.py
import logging
from typing import List, Optional

from offline_translator.application.language_detector import LanguageDetector
from offline_translator.domain.errors import (
    EmptyInputError,
    EmptyResultError,
    LowConfidenceDetectionError,
    MissingLanguageModelError,
    PlatformUnavailableError,
    SameSourceAndTargetError,
)
from offline_translator.domain.interfaces import IHistoryStore, ITranslationEngine
from offline_translator.domain.language_catalog import LanguageCatalog
from offline_translator.domain.models import (
    HistoryRecord,
    Language,
    TranslationRequest,
    TranslationResult,
)

logger = logging.getLogger(__name__)


class TranslationOrchestrator:
    """
    Application service that validates a translation request, resolves its
    languages (directly or through detection), calls the translation engine and
    records successful translations in the history store.

    Every failure leaves this class as a TranslateError subclass, so callers
    never have to look at engine- or detector-specific exceptions.
    """

    def __init__(self, engine: ITranslationEngine, catalog: LanguageCatalog,
                 detector: LanguageDetector, history_store: Optional[IHistoryStore] = None,
                 history_enabled: bool = True):
        """
        Args:
            engine: Implementation of ITranslationEngine.
            catalog: Language catalog used to resolve names and aliases.
            detector: Detector used when the source selector means "auto".
            history_store: Optional store that receives one record per successful translation.
            history_enabled: Lets the user turn history recording off without removing the store.
        """
        if not isinstance(engine, ITranslationEngine):
            raise TypeError("engine must implement ITranslationEngine interface")
        if history_store is not None and not isinstance(history_store, IHistoryStore):
            raise TypeError("history_store must implement IHistoryStore interface")

        self.engine = engine
        self.catalog = catalog
        self.detector = detector
        self.history_store = history_store
        self.history_enabled = history_enabled

        self._platform_available = self._probe_platform()

    def _probe_platform(self) -> bool:
        try:
            available = bool(self.engine.is_available())
        except Exception as e:
            logger.warning("Application Layer: engine capability probe failed: %s", e)
            available = False
        logger.info("Application Layer: translation engine available: %s", available)
        return available

    @property
    def platform_available(self) -> bool:
        return self._platform_available

    def reprobe_platform(self) -> bool:
        """Runs the capability probe again, e.g. after installing language packages."""
        self._platform_available = self._probe_platform()
        return self._platform_available

    def supported_languages(self) -> List[Language]:
        return self.catalog.languages()

    async def translate_request(self, request: TranslationRequest) -> TranslationResult:
        return await self.translate(request.text, request.source_selector, request.target_selector)

    async def translate(self, text: str, source_selector: Optional[str],
                        target_selector: str) -> TranslationResult:
        """
        Translates text from source_selector to target_selector.

        Args:
            text: Raw user text. Surrounding whitespace is ignored.
            source_selector: Language name/alias, or an auto-detect value ("Auto", None, ...).
            target_selector: Language name/alias.

        Returns:
            A TranslationResult with the translated text and the resolved languages.

        Raises:
            TranslateError: one of its subclasses; no retries are attempted.
        """
        # Packages may have been installed since the last probe
        if not self._platform_available and not self.reprobe_platform():
            raise PlatformUnavailableError()

        logger.debug("Application Layer: request state=Validating")
        trimmed = (text or "").strip()
        if not trimmed:
            raise EmptyInputError()

        logger.debug("Application Layer: request state=Resolving")
        target_language = self.catalog.resolve(target_selector)

        detected = self.catalog.is_auto_selection(source_selector)
        if detected:
            logger.debug("Application Layer: request state=Detecting")
            source_language = self.detector.detect(trimmed)
            if source_language is None:
                raise LowConfidenceDetectionError()
        else:
            source_language = self.catalog.resolve(source_selector)

        if source_language == target_language:
            raise SameSourceAndTargetError()

        logger.debug("Application Layer: request state=Invoking")
        logger.info("Application Layer: translating %d chars %s -> %s",
                    len(trimmed), source_language.code, target_language.code)
        try:
            translated = await self.engine.translate(trimmed, source_language.code, target_language.code)
        except Exception as e:
            logger.warning("Application Layer: engine failed for %s -> %s: %s",
                           source_language.code, target_language.code, e)
            raise MissingLanguageModelError(
                source_language.code, target_language.code,
                source_name=self.catalog.display_name(source_language.code),
                target_name=self.catalog.display_name(target_language.code),
            ) from e

        if not translated:
            raise EmptyResultError()

        result = TranslationResult(translated, source_language, target_language, detected=detected)
        logger.debug("Application Layer: request state=Succeeded")
        self._record_history(trimmed, result)
        return result

    def _record_history(self, source_text: str, result: TranslationResult):
        if self.history_store is None or not self.history_enabled:
            return
        try:
            self.history_store.append(HistoryRecord.from_result(source_text, result))
        except Exception:
            # History is a side effect; the translation itself already succeeded.
            logger.exception("Application Layer: could not save translation to history.")
