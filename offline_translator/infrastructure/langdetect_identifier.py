# offline_translator/infrastructure/langdetect_identifier.py

import logging
from typing import Optional

from langdetect import DetectorFactory, LangDetectException, detect_langs

from offline_translator.domain.interfaces import ILanguageIdentifier
from offline_translator.domain.models import DetectedLanguage

logger = logging.getLogger(__name__)

# langdetect is randomized; fix the seed so the same text always gives the same answer
DetectorFactory.seed = 0


class LangdetectIdentifier(ILanguageIdentifier):
    """ILanguageIdentifier backed by the langdetect library."""

    def detect_top_language(self, text: str) -> Optional[DetectedLanguage]:
        if not text or not text.strip():
            return None
        try:
            hypotheses = detect_langs(text)
        except LangDetectException as e:
            # Raised for text without any usable features (digits, punctuation...)
            logger.info("Infrastructure Layer (LangdetectIdentifier): no features in text: %s", e)
            return None

        if not hypotheses:
            return None
        top = hypotheses[0]
        logger.debug("Infrastructure Layer (LangdetectIdentifier): top hypothesis %s=%.3f", top.lang, top.prob)
        return DetectedLanguage(code=top.lang, confidence=top.prob)
