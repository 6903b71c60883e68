# offline_translator/application/language_detector.py
import logging
from typing import Optional

from offline_translator.domain.errors import UnsupportedLanguageError
from offline_translator.domain.interfaces import ILanguageIdentifier
from offline_translator.domain.language_catalog import LanguageCatalog
from offline_translator.domain.models import Language

logger = logging.getLogger(__name__)

# Minimum confidence of the top hypothesis to accept a detected language.
# Tunable; can be overridden through Settings.detection_min_confidence.
MIN_DETECTION_CONFIDENCE = 0.4


class LanguageDetector:
    """
    Guesses the source language of a text through an ILanguageIdentifier
    and maps the guess onto the language catalog.
    """

    def __init__(self, identifier: ILanguageIdentifier, catalog: LanguageCatalog,
                 min_confidence: float = MIN_DETECTION_CONFIDENCE):
        if not isinstance(identifier, ILanguageIdentifier):
            raise TypeError("identifier must implement ILanguageIdentifier interface")

        self.identifier = identifier
        self.catalog = catalog
        self.min_confidence = min_confidence

    def detect(self, text: str) -> Optional[Language]:
        """
        Detects the language of the text.

        Returns:
            The detected Language, or None when the identifier has no answer or
            its confidence is below min_confidence.

        Raises:
            UnsupportedLanguageError: the language was detected confidently but
                is not one the catalog knows.
        """
        try:
            hypothesis = self.identifier.detect_top_language(text)
        except Exception as e:
            logger.warning("Application Layer (LanguageDetector): identifier failed: %s", e)
            return None

        if hypothesis is None:
            logger.info("Application Layer (LanguageDetector): no language hypothesis.")
            return None

        if hypothesis.confidence < self.min_confidence:
            logger.info("Application Layer (LanguageDetector): %r below threshold %.2f",
                        hypothesis, self.min_confidence)
            return None

        logger.debug("Application Layer (LanguageDetector): accepted %r", hypothesis)
        try:
            return self.catalog.resolve(hypothesis.code)
        except UnsupportedLanguageError:
            # Region-tagged codes ("pt-br", "zh-mo") fall back to their primary subtag
            primary = hypothesis.code.split("-")[0]
            if primary != hypothesis.code and self.catalog.is_supported(primary):
                return self.catalog.resolve(primary)
            logger.info("Application Layer (LanguageDetector): detected language '%s' is not supported.",
                        hypothesis.code)
            raise
